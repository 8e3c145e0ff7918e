"""Framework adapters.

One adapter per :class:`~solidified.models.Framework`.  Generators look up
paths, ports and env prefixes here instead of hard-coding them, and call the
adapter's capabilities for framework-specific config edits.
"""

from __future__ import annotations

from ..models import Framework
from .base import FrameworkAdapter, FrameworkNotImplementedError, patch_project_file
from .solid_start import solid_start_adapter
from .vite_solid_router import vite_solid_router_adapter

ADAPTERS: dict[Framework, FrameworkAdapter] = {
    Framework.VITE_SOLID_ROUTER: vite_solid_router_adapter,
    Framework.SOLID_START: solid_start_adapter,
    Framework.TANSTACK_START: FrameworkAdapter(
        name=Framework.TANSTACK_START, server_capable=True
    ),
}


def get_adapter(framework: Framework | str) -> FrameworkAdapter:
    """Return the adapter for *framework*.

    Raises:
        FrameworkNotImplementedError: If the adapter is a placeholder.
    """
    adapter = ADAPTERS[Framework(framework)]
    if not adapter.implemented:
        raise FrameworkNotImplementedError(adapter.name)
    return adapter


def is_server_capable(framework: Framework | str) -> bool:
    """Whether *framework* can host server routes (placeholders included)."""
    return ADAPTERS[Framework(framework)].server_capable


__all__ = [
    "ADAPTERS",
    "FrameworkAdapter",
    "FrameworkNotImplementedError",
    "get_adapter",
    "is_server_capable",
    "patch_project_file",
]
