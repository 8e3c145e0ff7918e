"""Framework adapter descriptor and the shared file-patch helper."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from ..merger import PluginImport
from ..models import Framework
from ..project import read_project_file, write_project_file
from ..utils import print_warning


class FrameworkNotImplementedError(NotImplementedError):
    """Raised for placeholder frameworks and unsupported adapter capabilities."""

    def __init__(self, framework: Framework | str, capability: str = "") -> None:
        self.framework = Framework(framework)
        self.capability = capability
        if capability:
            message = f'Framework "{self.framework.value}" does not support {capability} yet'
        else:
            message = f'Framework "{self.framework.value}" is not yet implemented'
        super().__init__(message)


@dataclass(frozen=True)
class FrameworkAdapter:
    """Static layout descriptor plus config-mutation capabilities.

    The base class doubles as the placeholder adapter: its ``config_path`` is
    empty and every capability raises :class:`FrameworkNotImplementedError`.
    Concrete frameworks subclass it and override the capabilities they
    support.
    """

    name: Framework
    config_path: str = ""
    css_entry_path: str = ""
    routes_dir: str = ""
    entry_path: str = ""
    dev_port: int = 3000
    dev_command: str = "npm run dev"
    env_prefix: str = "PUBLIC_"
    server_capable: bool = False

    @property
    def implemented(self) -> bool:
        return bool(self.config_path)

    @property
    def homepage_path(self) -> str:
        return f"{self.routes_dir}/index.tsx"

    async def add_plugin(
        self, directory: Path, plugin: PluginImport, call: str | None = None
    ) -> None:
        """Import *plugin* and register *call* in the framework config."""
        raise FrameworkNotImplementedError(self.name)

    async def add_config(self, directory: Path, key: str, value: str) -> None:
        """Add a bundler-level config key (``css``, ``resolve``...)."""
        raise FrameworkNotImplementedError(self.name)

    async def set_server_preset(
        self, directory: Path, preset: str, extra: str | None = None
    ) -> None:
        """Select a deployment preset for server-rendered output."""
        raise FrameworkNotImplementedError(self.name, "server presets")


async def patch_project_file(
    directory: Path, file_path: str, transform: Callable[[str], str]
) -> bool:
    """Apply a merger *transform* to a project file and write it back.

    Returns ``True`` when the content changed.  An unchanged file (anchor
    not found, or the edit was already applied) only produces a warning.
    """
    original = await read_project_file(directory, file_path)
    updated = transform(original)
    if updated == original:
        print_warning(f"  {file_path} left unchanged (anchor not found or already applied)")
        return False
    await write_project_file(directory, file_path, updated)
    return True
