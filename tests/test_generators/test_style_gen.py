"""Tests for the Tailwind, UnoCSS and Sass generators."""

from __future__ import annotations

import pytest

from solidified.generators.style_gen import SassGenerator, TailwindGenerator, UnoCSSGenerator
from solidified.models import ProjectConfig

pytestmark = pytest.mark.unit


class TestTailwind:
    async def test_vite(self, vite_project, vite_config, manifest_of):
        await TailwindGenerator().apply(vite_project, vite_config)

        manifest = manifest_of(vite_project)
        assert manifest["devDependencies"]["tailwindcss"] == "^4"
        assert "@tailwindcss/vite" in manifest["devDependencies"]

        css = (vite_project / "src/app.css").read_text(encoding="utf-8")
        assert css.startswith('@import "tailwindcss";\n')

        vite = (vite_project / "vite.config.ts").read_text(encoding="utf-8")
        assert 'import tailwindcss from "@tailwindcss/vite";' in vite
        assert "plugins: [\n    tailwindcss(),\n    solid()," in vite

    async def test_solid_start(self, start_project, start_config):
        await TailwindGenerator().apply(start_project, start_config)
        app_config = (start_project / "app.config.ts").read_text(encoding="utf-8")
        assert "vite: {\n    plugins: [tailwindcss()],\n  }," in app_config


class TestUnoCSS:
    async def test_vite(self, vite_project, vite_config, manifest_of):
        await UnoCSSGenerator().apply(vite_project, vite_config)

        assert (vite_project / "uno.config.ts").is_file()
        assert "@unocss/vite" in manifest_of(vite_project)["devDependencies"]
        css = (vite_project / "src/app.css").read_text(encoding="utf-8")
        assert css.startswith('@import "@unocss/reset/tailwind.css";\n')
        vite = (vite_project / "vite.config.ts").read_text(encoding="utf-8")
        assert "    UnoCSS(),\n" in vite


class TestSass:
    async def test_vite_root_css_key(self, vite_project, vite_config, manifest_of):
        await SassGenerator().apply(vite_project, vite_config)

        assert manifest_of(vite_project)["devDependencies"]["sass"] == "^1"
        vite = (vite_project / "vite.config.ts").read_text(encoding="utf-8")
        assert (
            "defineConfig({\n"
            "  css: {\n"
            "    preprocessorOptions: {\n"
            "      scss: {\n"
            '        api: "modern-compiler",\n'
            "      },\n"
            "    },\n"
            "  },\n"
        ) in vite

    async def test_solid_start_nested_under_vite(self, start_project):
        config = ProjectConfig(name="app", framework="solid-start", style="sass")
        await SassGenerator().apply(start_project, config)
        app_config = (start_project / "app.config.ts").read_text(encoding="utf-8")
        assert "  vite: {\n    css: {\n      preprocessorOptions: {" in app_config
        assert 'api: "modern-compiler"' in app_config
