"""Runtime settings for create-solidified.

Everything that is not part of the user's feature selection (where projects
are written, which template tree to use, whether to touch git) lives here.
Settings are a Pydantic v2 model so they validate at construction time and
can be built from environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


class Settings(BaseModel):
    """Tuning knobs for a scaffold run.

    Instances are typically created once by the CLI entry point and passed to
    :func:`solidified.scaffold.scaffold_project`.
    """

    output_root: Path = Field(
        default_factory=Path.cwd,
        description="Directory that ProjectConfig.directory is resolved against",
    )
    template_dir: Path | None = Field(
        default=None,
        description="Override for the bundled base-template tree",
    )
    init_git: bool = Field(default=True, description="Run `git init` in the new project")
    probe_package_manager: bool = Field(
        default=True,
        description="Record `<pm>@<version>` in package.json when the version is known",
    )
    command_timeout: int = Field(
        default=60, ge=1, description="Timeout in seconds for external commands"
    )
    quiet: bool = Field(default=False, description="Suppress progress output")

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            SOLIDIFIED_OUTPUT_ROOT, SOLIDIFIED_TEMPLATE_DIR,
            SOLIDIFIED_SKIP_GIT, SOLIDIFIED_SKIP_PM_PROBE,
            SOLIDIFIED_COMMAND_TIMEOUT, SOLIDIFIED_QUIET.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("SOLIDIFIED_OUTPUT_ROOT"):
            kwargs["output_root"] = Path(os.environ["SOLIDIFIED_OUTPUT_ROOT"])
        if os.environ.get("SOLIDIFIED_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["SOLIDIFIED_TEMPLATE_DIR"])
        if os.environ.get("SOLIDIFIED_COMMAND_TIMEOUT"):
            kwargs["command_timeout"] = int(os.environ["SOLIDIFIED_COMMAND_TIMEOUT"])

        return cls(
            init_git=not _env_flag("SOLIDIFIED_SKIP_GIT"),
            probe_package_manager=not _env_flag("SOLIDIFIED_SKIP_PM_PROBE"),
            quiet=_env_flag("SOLIDIFIED_QUIET"),
            **kwargs,
        )
