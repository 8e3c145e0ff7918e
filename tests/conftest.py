"""Shared pytest fixtures for the create-solidified test suite.

Provides reusable fixtures for:
- Projects materialised from the bundled base templates
- Common ProjectConfig variants
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from solidified.models import ProjectConfig
from solidified.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Base-template projects
# ---------------------------------------------------------------------------

async def _materialise(template: str, target: Path) -> Path:
    target.mkdir(parents=True, exist_ok=True)
    await TemplateRenderer().copy_tree(template, target, {"project_name": "test-app"})
    return target


@pytest.fixture
async def vite_project(tmp_path: Path) -> Path:
    """A fresh copy of the vite-solid-router base template."""
    return await _materialise("vite-solid-router", tmp_path / "vite-app")


@pytest.fixture
async def start_project(tmp_path: Path) -> Path:
    """A fresh copy of the solid-start base template."""
    return await _materialise("solid-start", tmp_path / "start-app")


# ---------------------------------------------------------------------------
# Configs
# ---------------------------------------------------------------------------

@pytest.fixture
def vite_config() -> ProjectConfig:
    return ProjectConfig(name="test-app")


@pytest.fixture
def start_config() -> ProjectConfig:
    return ProjectConfig(name="test-app", framework="solid-start")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def read_json(path: Path) -> dict[str, Any]:
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture
def manifest_of():
    """Return a callable that loads ``package.json`` from a project dir."""
    def _load(project: Path) -> dict[str, Any]:
        return read_json(project / "package.json")
    return _load
