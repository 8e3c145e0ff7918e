"""File-system, manifest and env-file primitives used by generators.

All paths are relative to a project directory.  Blocking I/O is pushed to a
worker thread so generators stay awaitable; the pure helpers
(:func:`merge_dependencies`, :func:`upsert_env_line`) hold the actual merge
rules and are tested on their own.
"""

from __future__ import annotations

import asyncio
import json
import re
from pathlib import Path
from typing import Any

MANIFEST_NAME = "package.json"
ENV_FILE_NAME = ".env"


# ---------------------------------------------------------------------------
# Plain files
# ---------------------------------------------------------------------------


async def read_project_file(directory: str | Path, file_path: str) -> str:
    """Read a text file from the project."""
    target = Path(directory) / file_path
    return await asyncio.to_thread(target.read_text, encoding="utf-8")


async def write_project_file(directory: str | Path, file_path: str, content: str) -> Path:
    """Write a text file into the project, creating parent directories."""
    target = Path(directory) / file_path
    await asyncio.to_thread(_write_file, target, content)
    return target


def file_exists(directory: str | Path, file_path: str) -> bool:
    """Return ``True`` if *file_path* exists inside the project."""
    return (Path(directory) / file_path).exists()


async def prepend_to_file(directory: str | Path, file_path: str, content: str) -> None:
    """Prepend *content* and a newline to an existing file."""
    existing = await read_project_file(directory, file_path)
    await write_project_file(directory, file_path, f"{content}\n{existing}")


async def append_to_file(directory: str | Path, file_path: str, content: str) -> None:
    """Append a newline and *content* to an existing file."""
    existing = await read_project_file(directory, file_path)
    await write_project_file(directory, file_path, f"{existing}\n{content}")


# ---------------------------------------------------------------------------
# Manifest (package.json)
# ---------------------------------------------------------------------------


async def read_manifest(directory: str | Path) -> dict[str, Any]:
    """Read and parse the project's ``package.json``."""
    raw = await read_project_file(directory, MANIFEST_NAME)
    return json.loads(raw)


async def write_manifest(directory: str | Path, manifest: dict[str, Any]) -> None:
    """Serialise *manifest* as pretty-printed, newline-terminated JSON."""
    content = json.dumps(manifest, indent=2, ensure_ascii=False) + "\n"
    await write_project_file(directory, MANIFEST_NAME, content)


def merge_dependencies(
    existing: dict[str, str] | None, new: dict[str, str]
) -> dict[str, str]:
    """Merge *new* into *existing* and return the result sorted by name.

    Later values win for duplicate keys.  The sort is applied on every merge
    so the manifest stays normalised regardless of generator order.
    """
    merged = {**(existing or {}), **new}
    return dict(sorted(merged.items()))


async def add_dependencies(
    directory: str | Path, deps: dict[str, str], dev: bool = False
) -> None:
    """Add dependency ranges to ``dependencies`` or ``devDependencies``."""
    manifest = await read_manifest(directory)
    key = "devDependencies" if dev else "dependencies"
    manifest[key] = merge_dependencies(manifest.get(key), deps)
    await write_manifest(directory, manifest)


async def add_scripts(directory: str | Path, scripts: dict[str, str]) -> None:
    """Add or overwrite entries in the manifest's ``scripts`` map."""
    if not scripts:
        return
    manifest = await read_manifest(directory)
    manifest["scripts"] = {**manifest.get("scripts", {}), **scripts}
    await write_manifest(directory, manifest)


async def set_manifest_field(directory: str | Path, key: str, value: Any) -> None:
    """Set a top-level manifest key."""
    manifest = await read_manifest(directory)
    manifest[key] = value
    await write_manifest(directory, manifest)


# ---------------------------------------------------------------------------
# Env file
# ---------------------------------------------------------------------------


def upsert_env_line(content: str, key: str, value: str) -> str:
    """Replace the ``KEY=`` line in *content* or append a new one."""
    line = f"{key}={value}"
    pattern = re.compile(rf"^{re.escape(key)}=.*$", re.MULTILINE)
    if pattern.search(content):
        return pattern.sub(lambda _m: line, content, count=1)
    if content and not content.endswith("\n"):
        content += "\n"
    return f"{content}{line}\n"


async def add_env_var(directory: str | Path, key: str, value: str) -> None:
    """Upsert ``KEY=VALUE`` in the project's ``.env`` file."""
    env_path = Path(directory) / ENV_FILE_NAME
    content = ""
    if env_path.exists():
        content = await asyncio.to_thread(env_path.read_text, encoding="utf-8")
    await asyncio.to_thread(_write_file, env_path, upsert_env_line(content, key, value))


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
