"""Adapter for the client-only Vite + Solid Router template."""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from pathlib import Path

from ..merger import PluginImport, inject_config_block, inject_plugin
from ..models import Framework
from .base import FrameworkAdapter, patch_project_file

VITE_CONFIG = "vite.config.ts"


async def add_vite_plugin(
    directory: Path, plugin: PluginImport, call: str | None = None
) -> bool:
    """Register a plugin in ``vite.config.ts``."""
    return await patch_project_file(
        directory, VITE_CONFIG, partial(inject_plugin, plugin=plugin, call=call)
    )


async def add_vite_config(directory: Path, key: str, value: str) -> bool:
    """Add a root-level key to the ``defineConfig`` object in ``vite.config.ts``."""
    return await patch_project_file(
        directory, VITE_CONFIG, partial(inject_config_block, key=key, value=value)
    )


@dataclass(frozen=True)
class ViteSolidRouterAdapter(FrameworkAdapter):
    async def add_plugin(
        self, directory: Path, plugin: PluginImport, call: str | None = None
    ) -> None:
        await add_vite_plugin(directory, plugin, call)

    async def add_config(self, directory: Path, key: str, value: str) -> None:
        await add_vite_config(directory, key, value)


vite_solid_router_adapter = ViteSolidRouterAdapter(
    name=Framework.VITE_SOLID_ROUTER,
    config_path=VITE_CONFIG,
    css_entry_path="src/app.css",
    routes_dir="src/routes",
    entry_path="src/index.tsx",
    dev_port=5173,
    dev_command="npm run dev",
    env_prefix="VITE_",
    server_capable=False,
)
