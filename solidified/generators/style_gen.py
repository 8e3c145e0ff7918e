"""Styling generators: Tailwind CSS, UnoCSS and Sass."""

from __future__ import annotations

from pathlib import Path

from ..adapters import get_adapter
from ..merger import PluginImport
from ..models import ProjectConfig
from ..project import add_dependencies, prepend_to_file, write_project_file
from .base import Generator

UNOCSS_CONFIG = """\
import { defineConfig, presetUno, presetAttributify, presetIcons } from "unocss";

export default defineConfig({
  presets: [
    presetUno(),
    presetAttributify(),
    presetIcons(),
  ],
});
"""

SASS_CSS_OPTIONS = """\
{
  preprocessorOptions: {
    scss: {
      api: "modern-compiler",
    },
  },
}"""


class TailwindGenerator(Generator):
    name = "tailwind"

    async def apply(self, directory: Path, config: ProjectConfig) -> None:
        adapter = get_adapter(config.framework)

        await add_dependencies(
            directory,
            {"tailwindcss": "^4", "@tailwindcss/vite": "^4"},
            dev=True,
        )
        await prepend_to_file(directory, adapter.css_entry_path, '@import "tailwindcss";')
        await adapter.add_plugin(
            directory,
            PluginImport(name="tailwindcss", source="@tailwindcss/vite", default=True),
            "tailwindcss()",
        )


class UnoCSSGenerator(Generator):
    name = "unocss"

    async def apply(self, directory: Path, config: ProjectConfig) -> None:
        adapter = get_adapter(config.framework)

        await add_dependencies(
            directory,
            {"unocss": "^66", "@unocss/vite": "^66"},
            dev=True,
        )
        await write_project_file(directory, "uno.config.ts", UNOCSS_CONFIG)
        await prepend_to_file(
            directory, adapter.css_entry_path, '@import "@unocss/reset/tailwind.css";'
        )
        await adapter.add_plugin(
            directory,
            PluginImport(name="UnoCSS", source="@unocss/vite", default=True),
            "UnoCSS()",
        )


class SassGenerator(Generator):
    """Adds the Sass compiler and opts Vite into the modern compiler API."""

    name = "sass"

    async def apply(self, directory: Path, config: ProjectConfig) -> None:
        adapter = get_adapter(config.framework)

        await add_dependencies(directory, {"sass": "^1"}, dev=True)
        await adapter.add_config(directory, "css", SASS_CSS_OPTIONS)
