"""Unit tests for the framework/option compatibility resolver."""

from __future__ import annotations

import pytest

from solidified.compatibility import (
    CLIENT_ONLY_API_REASON,
    CLIENT_ONLY_DB_REASON,
    CompatibilityError,
    assert_compatibility,
    compatibility_issues,
    disabled_options,
)
from solidified.models import ProjectConfig

pytestmark = pytest.mark.unit


class TestDisabledOptions:
    def test_client_only_api(self):
        assert disabled_options("vite-solid-router", "api") == {
            "trpc": CLIENT_ONLY_API_REASON,
            "hono": CLIENT_ONLY_API_REASON,
        }

    def test_client_only_database(self):
        assert disabled_options("vite-solid-router", "database") == {
            "drizzle": CLIENT_ONLY_DB_REASON,
            "prisma": CLIENT_ONLY_DB_REASON,
        }

    def test_client_only_auth_keeps_clerk(self):
        disabled = disabled_options("vite-solid-router", "auth")
        assert "better-auth" in disabled
        assert "clerk" not in disabled

    @pytest.mark.parametrize("framework", ["solid-start", "tanstack-start"])
    @pytest.mark.parametrize("step", ["api", "database", "auth"])
    def test_server_capable_has_nothing_disabled(self, framework, step):
        assert disabled_options(framework, step) == {}

    def test_returns_copy(self):
        disabled_options("vite-solid-router", "api").clear()
        assert disabled_options("vite-solid-router", "api")


class TestCompatibilityIssues:
    def test_none_values_are_never_issues(self):
        assert compatibility_issues(ProjectConfig(name="app")) == []

    def test_issue_order_is_api_database_auth(self):
        config = ProjectConfig(
            name="app", auth="better-auth", database="prisma", api="hono"
        )
        assert [issue.field for issue in compatibility_issues(config)] == [
            "api",
            "database",
            "auth",
        ]

    def test_clerk_on_client_only_is_fine(self):
        assert compatibility_issues(ProjectConfig(name="app", auth="clerk")) == []

    def test_server_framework_accepts_everything(self):
        config = ProjectConfig(
            name="app",
            framework="solid-start",
            api="trpc",
            database="drizzle",
            auth="better-auth",
        )
        assert compatibility_issues(config) == []


class TestAssertCompatibility:
    def test_passes_silently(self):
        assert_compatibility(ProjectConfig(name="app", style="tailwind"))

    def test_aggregated_message(self):
        config = ProjectConfig(name="app", api="trpc", database="drizzle")
        with pytest.raises(CompatibilityError) as exc_info:
            assert_compatibility(config)
        message = str(exc_info.value)
        assert message.startswith("Incompatible selections: ")
        assert f"api=trpc ({CLIENT_ONLY_API_REASON})" in message
        assert f"database=drizzle ({CLIENT_ONLY_DB_REASON})" in message
        assert message.index("api=trpc") < message.index("database=drizzle")
        assert len(exc_info.value.issues) == 2

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            assert_compatibility(ProjectConfig(name="app", api="hono"))
