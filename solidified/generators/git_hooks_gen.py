"""Git hooks generator: Husky pre-commit running lint-staged."""

from __future__ import annotations

import asyncio
import stat
from pathlib import Path

from ..models import FormattingOption, LintingOption, ProjectConfig
from ..package_manager import exec_command
from ..project import (
    add_dependencies,
    add_scripts,
    read_manifest,
    write_manifest,
    write_project_file,
)
from .base import Generator

BIOME_STAGED = "biome check --write --no-errors-on-unmatched"
PRETTIER_STAGED = "prettier --write"
SCRIPT_GLOB = "*.{js,jsx,ts,tsx}"
DATA_GLOB = "*.{json,md}"


class GitHooksGenerator(Generator):
    """Husky + lint-staged.

    Runs after the linting and formatting generators so the staged-file
    rules can be derived from what they installed.
    """

    name = "git-hooks"

    async def apply(self, directory: Path, config: ProjectConfig) -> None:
        await add_dependencies(
            directory, {"husky": "^9", "lint-staged": "^16.2.7"}, dev=True
        )
        await add_scripts(directory, {"prepare": "husky", "lint-staged": "lint-staged"})

        hook = await write_project_file(
            directory,
            ".husky/pre-commit",
            f"{exec_command(config.package_manager)} lint-staged\n",
        )
        await asyncio.to_thread(_make_executable, hook)

        rules = build_lint_staged_config(config)
        if rules:
            manifest = await read_manifest(directory)
            manifest["lint-staged"] = rules
            await write_manifest(directory, manifest)


def build_lint_staged_config(config: ProjectConfig) -> dict[str, list[str]]:
    """Map staged-file globs to the fixer commands of the selected tools."""
    has_biome = config.uses_biome
    has_prettier = config.formatting == FormattingOption.PRETTIER

    commands: list[str] = []
    if has_biome:
        commands.append(BIOME_STAGED)
    if has_prettier and not has_biome:
        commands.append(PRETTIER_STAGED)
    if config.linting == LintingOption.ESLINT:
        commands.append("eslint --fix")
    if config.linting == LintingOption.OXLINT:
        commands.append("oxlint --fix")

    if not commands:
        return {}

    rules: dict[str, list[str]] = {SCRIPT_GLOB: commands}
    if has_biome:
        rules[DATA_GLOB] = [BIOME_STAGED]
    elif has_prettier:
        rules[DATA_GLOB] = [PRETTIER_STAGED]
    return rules


def _make_executable(path: Path) -> None:
    """Set the executable bit on a file."""
    current = path.stat().st_mode
    path.chmod(current | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
