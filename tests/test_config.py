"""Unit tests for runtime Settings (solidified.config)."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from solidified.config import Settings

pytestmark = pytest.mark.unit

_ENV_KEYS = (
    "SOLIDIFIED_OUTPUT_ROOT",
    "SOLIDIFIED_TEMPLATE_DIR",
    "SOLIDIFIED_SKIP_GIT",
    "SOLIDIFIED_SKIP_PM_PROBE",
    "SOLIDIFIED_COMMAND_TIMEOUT",
    "SOLIDIFIED_QUIET",
)


@pytest.fixture
def clean_env():
    env = {k: v for k, v in os.environ.items() if k not in _ENV_KEYS}
    with patch.dict(os.environ, env, clear=True):
        yield


class TestSettingsDefaults:
    def test_defaults(self):
        settings = Settings()
        assert settings.output_root == Path.cwd()
        assert settings.template_dir is None
        assert settings.init_git is True
        assert settings.probe_package_manager is True
        assert settings.command_timeout == 60
        assert settings.quiet is False

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(command_timeout=0)


class TestSettingsFromEnv:
    def test_empty_env_matches_defaults(self, clean_env):
        settings = Settings.from_env()
        assert settings.init_git is True
        assert settings.probe_package_manager is True
        assert settings.quiet is False

    def test_paths(self, clean_env, tmp_path):
        with patch.dict(
            os.environ,
            {
                "SOLIDIFIED_OUTPUT_ROOT": str(tmp_path),
                "SOLIDIFIED_TEMPLATE_DIR": str(tmp_path / "tpl"),
            },
        ):
            settings = Settings.from_env()
        assert settings.output_root == tmp_path
        assert settings.template_dir == tmp_path / "tpl"

    def test_flags(self, clean_env):
        with patch.dict(
            os.environ,
            {
                "SOLIDIFIED_SKIP_GIT": "1",
                "SOLIDIFIED_SKIP_PM_PROBE": "yes",
                "SOLIDIFIED_QUIET": "TRUE",
            },
        ):
            settings = Settings.from_env()
        assert settings.init_git is False
        assert settings.probe_package_manager is False
        assert settings.quiet is True

    def test_falsy_flag_values(self, clean_env):
        with patch.dict(os.environ, {"SOLIDIFIED_SKIP_GIT": "0"}):
            assert Settings.from_env().init_git is True

    def test_command_timeout(self, clean_env):
        with patch.dict(os.environ, {"SOLIDIFIED_COMMAND_TIMEOUT": "5"}):
            assert Settings.from_env().command_timeout == 5
