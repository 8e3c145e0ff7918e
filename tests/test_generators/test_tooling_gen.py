"""Tests for linting, formatting and git-hook generators."""

from __future__ import annotations

import json
import os

import pytest

from solidified.generators.formatting_gen import PrettierGenerator
from solidified.generators.git_hooks_gen import (
    BIOME_STAGED,
    DATA_GLOB,
    PRETTIER_STAGED,
    SCRIPT_GLOB,
    GitHooksGenerator,
    build_lint_staged_config,
)
from solidified.generators.linting_gen import (
    BiomeGenerator,
    ESLintGenerator,
    OxlintGenerator,
    biome_scripts,
    build_biome_config,
)
from solidified.models import ProjectConfig

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Linting
# ---------------------------------------------------------------------------


class TestESLint:
    async def test_apply(self, vite_project, vite_config, manifest_of):
        await ESLintGenerator().apply(vite_project, vite_config)
        manifest = manifest_of(vite_project)
        assert manifest["scripts"]["lint"] == "eslint ."
        assert "eslint-plugin-solid" in manifest["devDependencies"]
        assert (vite_project / "eslint.config.mjs").is_file()


class TestOxlint:
    async def test_apply(self, vite_project, vite_config, manifest_of):
        await OxlintGenerator().apply(vite_project, vite_config)
        assert manifest_of(vite_project)["scripts"]["lint:fix"] == "oxlint --fix"
        json.loads((vite_project / ".oxlintrc.json").read_text(encoding="utf-8"))


class TestBiome:
    @pytest.mark.parametrize(
        "lint, fmt, expected",
        [
            (True, False, {"lint"}),
            (False, True, {"format"}),
            (True, True, {"lint", "format", "check"}),
        ],
    )
    def test_scripts(self, lint, fmt, expected):
        assert set(biome_scripts(lint, fmt)) == expected

    def test_config_sections(self):
        lint_only = json.loads(build_biome_config(True, False))
        assert lint_only["linter"]["enabled"] is True
        assert "formatter" not in lint_only

        format_only = json.loads(build_biome_config(False, True))
        assert "linter" not in format_only
        assert format_only["formatter"]["indentWidth"] == 2
        assert format_only["javascript"]["formatter"]["quoteStyle"] == "double"

    async def test_flags_rederived_from_config(self, vite_project, manifest_of):
        config = ProjectConfig(name="app", linting="eslint", formatting="biome")
        await BiomeGenerator().apply(vite_project, config)

        scripts = manifest_of(vite_project)["scripts"]
        assert scripts["format"] == "biome format --write ."
        assert "lint" not in scripts
        biome = json.loads((vite_project / "biome.json").read_text(encoding="utf-8"))
        assert "linter" not in biome


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


class TestPrettier:
    async def test_apply(self, vite_project, vite_config, manifest_of):
        await PrettierGenerator().apply(vite_project, vite_config)
        manifest = manifest_of(vite_project)
        assert manifest["scripts"]["format:check"] == "prettier --check ."
        assert json.loads((vite_project / ".prettierrc").read_text())["semi"] is True
        assert "node_modules" in (vite_project / ".prettierignore").read_text()


# ---------------------------------------------------------------------------
# Git hooks
# ---------------------------------------------------------------------------


class TestLintStagedConfig:
    def test_nothing_selected(self):
        assert build_lint_staged_config(ProjectConfig(name="app")) == {}

    def test_biome(self):
        config = ProjectConfig(name="app", linting="biome", formatting="biome")
        assert build_lint_staged_config(config) == {
            SCRIPT_GLOB: [BIOME_STAGED],
            DATA_GLOB: [BIOME_STAGED],
        }

    def test_eslint_and_prettier(self):
        config = ProjectConfig(name="app", linting="eslint", formatting="prettier")
        assert build_lint_staged_config(config) == {
            SCRIPT_GLOB: [PRETTIER_STAGED, "eslint --fix"],
            DATA_GLOB: [PRETTIER_STAGED],
        }

    def test_prettier_skipped_when_biome_lints(self):
        config = ProjectConfig(name="app", linting="biome", formatting="prettier")
        assert build_lint_staged_config(config)[SCRIPT_GLOB] == [BIOME_STAGED]

    def test_linter_only_has_no_data_glob(self):
        config = ProjectConfig(name="app", linting="oxlint")
        assert build_lint_staged_config(config) == {SCRIPT_GLOB: ["oxlint --fix"]}


class TestGitHooks:
    async def test_hook_and_manifest(self, vite_project, manifest_of):
        config = ProjectConfig(
            name="app", git_hooks="husky", linting="eslint", package_manager="bun"
        )
        await GitHooksGenerator().apply(vite_project, config)

        hook = vite_project / ".husky/pre-commit"
        assert hook.read_text(encoding="utf-8") == "bunx lint-staged\n"
        assert os.access(hook, os.X_OK)

        manifest = manifest_of(vite_project)
        assert manifest["scripts"]["prepare"] == "husky"
        assert manifest["lint-staged"] == {SCRIPT_GLOB: ["eslint --fix"]}

    async def test_empty_rules_not_written(self, vite_project, manifest_of):
        config = ProjectConfig(name="app", git_hooks="husky")
        await GitHooksGenerator().apply(vite_project, config)
        assert "lint-staged" not in manifest_of(vite_project)
