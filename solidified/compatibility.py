"""Option compatibility between the base framework and feature axes.

Server-dependent options (API layers, ORMs, server-side auth) cannot run on
a client-only template.  :func:`assert_compatibility` is the single gate run
before any file is written.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .adapters import is_server_capable
from .models import ApiOption, AuthOption, DatabaseOption, Framework, ProjectConfig

CompatibilityStep = Literal["api", "database", "auth"]

CLIENT_ONLY_API_REASON = "Requires server routes; Vite template is client-only."
CLIENT_ONLY_DB_REASON = "Requires server runtime; Vite template is client-only."
CLIENT_ONLY_AUTH_REASON = "Requires server routes; Vite template is client-only."

_SERVER_ONLY: dict[str, dict[str, str]] = {
    "api": {
        ApiOption.TRPC.value: CLIENT_ONLY_API_REASON,
        ApiOption.HONO.value: CLIENT_ONLY_API_REASON,
    },
    "database": {
        DatabaseOption.DRIZZLE.value: CLIENT_ONLY_DB_REASON,
        DatabaseOption.PRISMA.value: CLIENT_ONLY_DB_REASON,
    },
    "auth": {
        AuthOption.BETTER_AUTH.value: CLIENT_ONLY_AUTH_REASON,
    },
}

# Field order of compatibility_issues() and of the aggregated error message.
CHECKED_STEPS: tuple[CompatibilityStep, ...] = ("api", "database", "auth")


@dataclass(frozen=True)
class CompatibilityIssue:
    field: CompatibilityStep
    value: str
    reason: str

    def __str__(self) -> str:
        return f"{self.field}={self.value} ({self.reason})"


class CompatibilityError(ValueError):
    """Raised when a configuration selects options its framework cannot host."""

    def __init__(self, issues: list[CompatibilityIssue]) -> None:
        self.issues = issues
        summary = ", ".join(str(issue) for issue in issues)
        super().__init__(f"Incompatible selections: {summary}")


def disabled_options(
    framework: Framework | str, step: CompatibilityStep
) -> dict[str, str]:
    """Map each unavailable option value for *step* to a human-readable reason.

    Server-capable frameworks have no disabled options.
    """
    if is_server_capable(framework):
        return {}
    return dict(_SERVER_ONLY.get(step, {}))


def compatibility_issues(config: ProjectConfig) -> list[CompatibilityIssue]:
    """Return one issue per field whose selected value is disabled."""
    issues: list[CompatibilityIssue] = []
    for step in CHECKED_STEPS:
        value = getattr(config, step).value
        if value == "none":
            continue
        reason = disabled_options(config.framework, step).get(value)
        if reason:
            issues.append(CompatibilityIssue(field=step, value=value, reason=reason))
    return issues


def assert_compatibility(config: ProjectConfig) -> None:
    """Raise :class:`CompatibilityError` if *config* has any issue."""
    issues = compatibility_issues(config)
    if issues:
        raise CompatibilityError(issues)
