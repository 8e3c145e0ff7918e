"""Non-interactive command line front end.

Every feature axis is a flag whose choices are the axis enum values.  A JSON
file with the same keys (camelCase aliases accepted) can seed the selection;
flags given on the command line override it.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from enum import Enum
from pathlib import Path
from typing import Any

from .config import Settings
from .models import (
    ApiOption,
    AuthOption,
    DatabaseOption,
    DeploymentOption,
    FormattingOption,
    Framework,
    GitHooksOption,
    LintingOption,
    PackageManager,
    ProjectConfig,
    StyleOption,
    TestingOption,
)
from .scaffold import ScaffoldError, scaffold_project
from .utils import print_error

# (flag, config field, enum)
_AXIS_FLAGS: tuple[tuple[str, str, type[Enum]], ...] = (
    ("--package-manager", "package_manager", PackageManager),
    ("--framework", "framework", Framework),
    ("--style", "style", StyleOption),
    ("--database", "database", DatabaseOption),
    ("--auth", "auth", AuthOption),
    ("--api", "api", ApiOption),
    ("--testing", "testing", TestingOption),
    ("--linting", "linting", LintingOption),
    ("--formatting", "formatting", FormattingOption),
    ("--git-hooks", "git_hooks", GitHooksOption),
    ("--deployment", "deployment", DeploymentOption),
)

_JSON_ALIASES: dict[str, str] = {
    "package_manager": "packageManager",
    "git_hooks": "gitHooks",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-solidified",
        description="Scaffold a SolidJS project with optional features",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-solidified my-app --style tailwind --testing vitest\n"
            "  create-solidified my-app --framework solid-start --api trpc --database drizzle\n"
            "  create-solidified --json config.json -o ./projects\n"
        ),
    )

    parser.add_argument(
        "name",
        nargs="?",
        default=None,
        help="Project name (required unless given in --json)",
    )
    parser.add_argument(
        "--directory", "-d",
        default=None,
        help="Target directory relative to the output root (default: the name)",
    )
    for flag, field, enum in _AXIS_FLAGS:
        parser.add_argument(
            flag,
            dest=field,
            default=None,
            choices=[member.value for member in enum],
        )
    parser.add_argument(
        "--json",
        dest="json_config",
        default=None,
        help="Path to a JSON file with the project configuration",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Directory the project is created in (default: current directory)",
    )
    parser.add_argument("--skip-git", action="store_true", help="Do not run `git init`")
    parser.add_argument("--quiet", "-q", action="store_true", help="Suppress progress output")
    return parser


def config_from_args(args: argparse.Namespace) -> ProjectConfig:
    """Merge the optional JSON file with the explicit flags into a config.

    Raises:
        ValueError: On an unreadable JSON file or an invalid configuration
            (pydantic's ``ValidationError`` is a ``ValueError``).
    """
    data: dict[str, Any] = {}
    if args.json_config:
        data = json.loads(Path(args.json_config).read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"{args.json_config} must contain a JSON object")

    if args.name:
        data["name"] = args.name
    if args.directory:
        data["directory"] = args.directory
    for _flag, field, _enum in _AXIS_FLAGS:
        value = getattr(args, field)
        if value is not None:
            data.pop(_JSON_ALIASES.get(field, ""), None)
            data[field] = value

    return ProjectConfig.model_validate(data)


def settings_from_args(args: argparse.Namespace) -> Settings:
    settings = Settings.from_env()
    updates: dict[str, Any] = {}
    if args.output:
        updates["output_root"] = Path(args.output)
    if args.skip_git:
        updates["init_git"] = False
    if args.quiet:
        updates["quiet"] = True
    return settings.model_copy(update=updates)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``create-solidified`` and ``python -m solidified``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = config_from_args(args)
        settings = settings_from_args(args)
        asyncio.run(scaffold_project(config, settings))
    except (ValueError, NotImplementedError, ScaffoldError, OSError) as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
