"""Scaffold orchestrator.

Turns a :class:`~solidified.models.ProjectConfig` into a project directory:
base template, manifest identity, feature generators, homepage, package
manager annotation and a fresh git repository.  Every step runs in order;
a failure part-way leaves whatever was already written on disk.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from .adapters import get_adapter
from .compatibility import assert_compatibility
from .config import Settings
from .generators import apply_all, select_generators
from .models import ProjectConfig
from .package_manager import get_package_manager_version, install_command, run_script_command
from .project import set_manifest_field
from .templates import TemplateRenderer
from .utils import (
    print_info,
    print_step,
    print_success,
    print_summary_table,
    quiet_output,
    run_command,
)


class ScaffoldError(Exception):
    """Raised when an external step of scaffolding fails."""

    def __init__(self, message: str, command: str = "", stderr: str = ""):
        self.command = command
        self.stderr = stderr
        super().__init__(message)


async def init_git_repo(directory: Path, timeout: int = 60) -> None:
    """Run ``git init`` in *directory*.

    Raises:
        ScaffoldError: If git is missing or exits non-zero.
    """
    cmd = ["git", "init"]
    try:
        returncode, _stdout, stderr = await run_command(cmd, cwd=directory, timeout=timeout)
    except OSError as exc:
        returncode, stderr = -1, str(exc)

    if returncode != 0:
        raise ScaffoldError(
            f"Failed to initialize git repository. Ensure git is installed and on PATH. {stderr}",
            command=" ".join(cmd),
            stderr=stderr,
        )


async def scaffold_project(config: ProjectConfig, settings: Settings | None = None) -> Path:
    """Create the project described by *config* and return its path.

    Validation happens before anything touches the filesystem: an
    incompatible selection raises :class:`CompatibilityError`, a
    placeholder framework raises :class:`FrameworkNotImplementedError` and
    a missing base template raises :class:`FileNotFoundError`.
    """
    settings = settings or Settings()
    with quiet_output(settings.quiet):
        return await _scaffold(config, settings)


async def _scaffold(config: ProjectConfig, settings: Settings) -> Path:
    assert_compatibility(config)
    get_adapter(config.framework)

    renderer = TemplateRenderer(settings.template_dir)
    if not renderer.has_template(config.framework.value):
        available = ", ".join(renderer.list_templates()) or "none"
        raise FileNotFoundError(
            f"No base template for {config.framework.value} in {renderer.template_dir} "
            f"(available: {available})"
        )

    target = Path(settings.output_root) / config.directory
    print_summary_table(_summary(config, target), title=f"Creating {config.name}")

    # 1. Directory and base template
    print_step(f"Copying {config.framework.value} template...")
    await asyncio.to_thread(target.mkdir, parents=True, exist_ok=True)
    await renderer.copy_tree(
        config.framework.value, target, {"project_name": config.package_name}
    )

    # 2. Manifest identity
    await set_manifest_field(target, "name", config.package_name)

    # 3. Feature generators and homepage
    await apply_all(target, config)

    # 4. Package manager annotation
    if settings.probe_package_manager:
        version = await get_package_manager_version(
            config.package_manager, timeout=settings.command_timeout
        )
        if version:
            await set_manifest_field(
                target, "packageManager", f"{config.package_manager.value}@{version}"
            )

    # 5. Git
    if settings.init_git:
        print_step("Initializing git repository...")
        await init_git_repo(target, timeout=settings.command_timeout)

    print_success(f"Project created at {target}")
    _print_next_steps(config)
    return target


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------


def _summary(config: ProjectConfig, target: Path) -> dict[str, str]:
    features = ", ".join(generator.name for generator in select_generators(config))
    return {
        "Directory": str(target),
        "Framework": config.framework.value,
        "Package manager": config.package_manager.value,
        "Features": features or "none",
    }


def _print_next_steps(config: ProjectConfig) -> None:
    print_info("\n[bold]Next steps:[/bold]")
    print_info(f"  cd {config.directory}")
    print_info(f"  {install_command(config.package_manager)}")
    print_info(f"  {run_script_command(config.package_manager)} dev")
