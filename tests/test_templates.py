"""Unit tests for the Jinja2 base-template renderer."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from jinja2 import UndefinedError

from solidified.templates import TemplateRenderer

pytestmark = pytest.mark.unit


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


class TestBundledTemplates:
    def test_lists_both_frameworks(self, renderer):
        assert renderer.list_templates() == ["solid-start", "vite-solid-router"]

    def test_has_template(self, renderer):
        assert renderer.has_template("solid-start")
        assert not renderer.has_template("tanstack-start")

    async def test_copy_tree_renders_manifest(self, renderer, tmp_path):
        await renderer.copy_tree("vite-solid-router", tmp_path, {"project_name": "my-app"})
        manifest = json.loads((tmp_path / "package.json").read_text(encoding="utf-8"))
        assert manifest["name"] == "my-app"
        assert not (tmp_path / "package.json.j2").exists()

    async def test_copy_tree_renames_gitignore(self, renderer, tmp_path):
        await renderer.copy_tree("solid-start", tmp_path, {"project_name": "my-app"})
        assert (tmp_path / ".gitignore").is_file()
        assert not (tmp_path / "_gitignore").exists()

    async def test_tsx_copied_verbatim(self, renderer, tmp_path):
        await renderer.copy_tree("solid-start", tmp_path, {"project_name": "my-app"})
        source = renderer.template_dir / "solid-start" / "src" / "app.tsx"
        assert (tmp_path / "src/app.tsx").read_text(encoding="utf-8") == source.read_text(
            encoding="utf-8"
        )

    async def test_returns_written_paths(self, renderer, tmp_path):
        written = await renderer.copy_tree(
            "vite-solid-router", tmp_path, {"project_name": "my-app"}
        )
        assert tmp_path / "vite.config.ts" in written
        assert tmp_path / "src/routes/index.tsx" in written

    async def test_missing_template(self, renderer, tmp_path):
        with pytest.raises(FileNotFoundError):
            await renderer.copy_tree("tanstack-start", tmp_path, {})


class TestCustomTemplateDir:
    async def test_strict_undefined(self, tmp_path):
        (tmp_path / "tpl" / "x").mkdir(parents=True)
        (tmp_path / "tpl" / "x" / "file.txt.j2").write_text("{{ missing }}", encoding="utf-8")
        renderer = TemplateRenderer(tmp_path / "tpl")
        with pytest.raises(UndefinedError):
            await renderer.copy_tree("x", tmp_path / "out", {})
