"""Package-manager command strings and the installed-version probe."""

from __future__ import annotations

from .models import PackageManager
from .utils import run_command

_INSTALL: dict[PackageManager, str] = {
    PackageManager.NPM: "npm install",
    PackageManager.PNPM: "pnpm install",
    PackageManager.YARN: "yarn",
    PackageManager.BUN: "bun install",
}

_RUN: dict[PackageManager, str] = {
    PackageManager.NPM: "npm run",
    PackageManager.PNPM: "pnpm",
    PackageManager.YARN: "yarn",
    PackageManager.BUN: "bun run",
}

_EXEC: dict[PackageManager, str] = {
    PackageManager.NPM: "npm exec",
    PackageManager.PNPM: "pnpm exec",
    PackageManager.YARN: "yarn",
    PackageManager.BUN: "bunx",
}


def install_command(pm: PackageManager | str) -> str:
    return _INSTALL[PackageManager(pm)]


def run_script_command(pm: PackageManager | str) -> str:
    """Prefix for running a package.json script, e.g. ``pnpm`` or ``npm run``."""
    return _RUN[PackageManager(pm)]


def exec_command(pm: PackageManager | str) -> str:
    """Prefix for executing a locally installed binary."""
    return _EXEC[PackageManager(pm)]


async def get_package_manager_version(
    pm: PackageManager | str, timeout: int = 15
) -> str | None:
    """Return the installed version of *pm*, or ``None`` if it cannot be determined.

    Any failure (binary missing, non-zero exit, timeout, empty output) is
    treated as "version unknown".
    """
    try:
        returncode, stdout, _stderr = await run_command(
            [PackageManager(pm).value, "--version"], timeout=timeout
        )
    except OSError:
        return None
    if returncode != 0 or not stdout:
        return None
    return stdout.split()[0]
