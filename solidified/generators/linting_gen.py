"""Linting generators: ESLint, Oxlint and the shared Biome toolchain."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..models import FormattingOption, LintingOption, ProjectConfig
from ..project import add_dependencies, add_scripts, write_project_file
from .base import Generator

BIOME_SCHEMA = "https://biomejs.dev/schemas/1.9.4/schema.json"

ESLINT_CONFIG = """\
import js from "@eslint/js";
import solid from "eslint-plugin-solid";
import tseslint from "typescript-eslint";

export default tseslint.config(
  js.configs.recommended,
  ...tseslint.configs.recommended,
  ...solid.configs.recommended,
  ...tseslint.configs.recommended.map((config) => ({
    ...config,
    files: ["**/*.ts", "**/*.tsx"],
  })),
  {
    ignores: ["dist", "node_modules"],
  },
);
"""

OXLINT_CONFIG = """\
{
  "$schema": "./node_modules/oxlint/configuration_schema.json",
  "env": {
    "browser": true,
    "es2021": true
  },
  "plugins": ["typescript"],
  "rules": {
    "eslint/no-unused-vars": "error",
    "typescript/no-explicit-any": "warn",
    "typescript/no-unused-vars": "error"
  },
  "overrides": [
    {
      "files": ["*.test.ts", "*.test.tsx", "*.spec.ts", "*.spec.tsx"],
      "rules": {
        "typescript/no-explicit-any": "off"
      }
    }
  ]
}
"""


class ESLintGenerator(Generator):
    name = "eslint"

    async def apply(self, directory: Path, config: ProjectConfig) -> None:
        await add_dependencies(
            directory,
            {
                "eslint": "^9",
                "@eslint/js": "^9",
                "typescript-eslint": "^8",
                "eslint-plugin-solid": "^0.14",
                "globals": "^15",
            },
            dev=True,
        )
        await add_scripts(directory, {"lint": "eslint .", "lint:fix": "eslint . --fix"})
        await write_project_file(directory, "eslint.config.mjs", ESLINT_CONFIG)


class OxlintGenerator(Generator):
    name = "oxlint"

    async def apply(self, directory: Path, config: ProjectConfig) -> None:
        await add_dependencies(directory, {"oxlint": "^1"}, dev=True)
        await add_scripts(directory, {"lint": "oxlint", "lint:fix": "oxlint --fix"})
        await write_project_file(directory, ".oxlintrc.json", OXLINT_CONFIG)


class BiomeGenerator(Generator):
    """Biome as linter, formatter or both.

    The registry adds this generator once even when both axes select it, so
    which sections to emit is re-derived from the config here rather than
    from how the generator was selected.
    """

    name = "biome"

    async def apply(self, directory: Path, config: ProjectConfig) -> None:
        linter_enabled = config.linting == LintingOption.BIOME
        formatter_enabled = config.formatting == FormattingOption.BIOME

        await add_dependencies(directory, {"@biomejs/biome": "^1.9"}, dev=True)
        await add_scripts(directory, biome_scripts(linter_enabled, formatter_enabled))
        await write_project_file(
            directory, "biome.json", build_biome_config(linter_enabled, formatter_enabled)
        )


def biome_scripts(linter_enabled: bool, formatter_enabled: bool) -> dict[str, str]:
    scripts: dict[str, str] = {}
    if linter_enabled:
        scripts["lint"] = "biome lint ."
    if formatter_enabled:
        scripts["format"] = "biome format --write ."
    if linter_enabled and formatter_enabled:
        scripts["check"] = "biome check --write ."
    return scripts


def build_biome_config(linter_enabled: bool, formatter_enabled: bool) -> str:
    """Render ``biome.json`` with only the enabled tool sections."""
    config: dict[str, Any] = {
        "$schema": BIOME_SCHEMA,
        "vcs": {"enabled": True, "clientKind": "git", "useIgnoreFile": True},
        "organizeImports": {"enabled": True},
    }
    if linter_enabled:
        config["linter"] = {"enabled": True, "rules": {"recommended": True}}
    if formatter_enabled:
        config["formatter"] = {"enabled": True, "indentStyle": "space", "indentWidth": 2}
        config["javascript"] = {
            "formatter": {"quoteStyle": "double", "semicolons": "always"}
        }
    return json.dumps(config, indent=2) + "\n"
