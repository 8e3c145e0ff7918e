"""Jinja2 rendering and copying of the per-framework base templates.

Each framework has a directory under ``solidified/templates/``.  Files ending
in ``.j2`` are rendered with the project context and written without the
suffix; every other file is copied verbatim, so TSX sources never go through
Jinja.  A file named ``_gitignore`` is written as ``.gitignore`` because
dot-files do not survive packaging reliably.
"""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

_RENAMES: dict[str, str] = {
    "_gitignore": ".gitignore",
}


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders and copies base-template trees for scaffolding."""

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template relative to the template directory."""
        template = self.env.get_template(template_path)
        return template.render(**context)

    # -- Tree copy (async) -------------------------------------------------

    def has_template(self, name: str) -> bool:
        return (self.template_dir / name).is_dir()

    async def copy_tree(
        self,
        template_name: str,
        output_dir: str | Path,
        context: dict[str, Any],
    ) -> list[Path]:
        """Materialise the template *template_name* into *output_dir*.

        The directory structure is preserved.  Returns the written paths in
        sorted source order.

        Raises:
            FileNotFoundError: If no template directory exists for the name.
        """
        source_root = self.template_dir / template_name
        if not source_root.is_dir():
            raise FileNotFoundError(f"Base template not found: {source_root}")

        written: list[Path] = []
        out_base = Path(output_dir)

        for source in sorted(p for p in source_root.rglob("*") if p.is_file()):
            rel = source.relative_to(source_root)
            target_rel = rel.with_name(_RENAMES.get(rel.name, rel.name))

            if source.suffix == ".j2":
                target = out_base / target_rel.with_suffix("")
                content = self.render(f"{template_name}/{rel.as_posix()}", context)
                await asyncio.to_thread(_write_file, target, content)
            else:
                target = out_base / target_rel
                await asyncio.to_thread(_copy_file, source, target)
            written.append(target)

        return written

    # -- Utility -----------------------------------------------------------

    def list_templates(self) -> list[str]:
        """Return the sorted names of available base templates."""
        if not self.template_dir.is_dir():
            return []
        return sorted(p.name for p in self.template_dir.iterdir() if p.is_dir())


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def _copy_file(source: Path, target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(source, target)
