"""Adapter for SolidStart, whose ``app.config.ts`` nests Vite under ``vite:``."""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from pathlib import Path

from ..merger import (
    PluginImport,
    inject_nested_config_block,
    inject_nested_plugin,
    inject_server_preset,
)
from ..models import Framework
from .base import FrameworkAdapter, patch_project_file

APP_CONFIG = "app.config.ts"


async def add_solid_start_plugin(
    directory: Path, plugin: PluginImport, call: str | None = None
) -> bool:
    """Register a Vite plugin under ``vite.plugins`` in ``app.config.ts``."""
    return await patch_project_file(
        directory, APP_CONFIG, partial(inject_nested_plugin, plugin=plugin, call=call)
    )


async def add_solid_start_config(directory: Path, key: str, value: str) -> bool:
    """Add a Vite-level key under ``vite:`` in ``app.config.ts``."""
    return await patch_project_file(
        directory, APP_CONFIG, partial(inject_nested_config_block, key=key, value=value)
    )


async def add_solid_start_server_preset(
    directory: Path, preset: str, extra: str | None = None
) -> bool:
    """Add or update ``server.preset`` in ``app.config.ts``."""
    return await patch_project_file(
        directory, APP_CONFIG, partial(inject_server_preset, preset=preset, extra=extra)
    )


@dataclass(frozen=True)
class SolidStartAdapter(FrameworkAdapter):
    async def add_plugin(
        self, directory: Path, plugin: PluginImport, call: str | None = None
    ) -> None:
        await add_solid_start_plugin(directory, plugin, call)

    async def add_config(self, directory: Path, key: str, value: str) -> None:
        await add_solid_start_config(directory, key, value)

    async def set_server_preset(
        self, directory: Path, preset: str, extra: str | None = None
    ) -> None:
        await add_solid_start_server_preset(directory, preset, extra)


solid_start_adapter = SolidStartAdapter(
    name=Framework.SOLID_START,
    config_path=APP_CONFIG,
    css_entry_path="src/app.css",
    routes_dir="src/routes",
    entry_path="src/app.tsx",
    dev_port=3000,
    dev_command="npm run dev",
    env_prefix="VITE_",
    server_capable=True,
)
