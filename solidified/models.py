"""Pydantic v2 models describing a scaffold request.

Every feature axis is a closed ``str`` enumeration.  Optional axes carry a
``NONE`` sentinel meaning "feature absent".  ``ProjectConfig`` is built once
(by the CLI or any other front end) and treated as read-only afterwards.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .utils import sanitize_name


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class PackageManager(str, Enum):
    """Package manager used to install and run the generated project."""
    NPM = "npm"
    PNPM = "pnpm"
    YARN = "yarn"
    BUN = "bun"


class Framework(str, Enum):
    """Base framework whose template seeds the project."""
    VITE_SOLID_ROUTER = "vite-solid-router"
    SOLID_START = "solid-start"
    TANSTACK_START = "tanstack-start"


class StyleOption(str, Enum):
    NONE = "none"
    TAILWIND = "tailwind"
    UNOCSS = "unocss"
    SASS = "sass"


class DatabaseOption(str, Enum):
    NONE = "none"
    DRIZZLE = "drizzle"
    PRISMA = "prisma"


class AuthOption(str, Enum):
    NONE = "none"
    BETTER_AUTH = "better-auth"
    CLERK = "clerk"


class ApiOption(str, Enum):
    NONE = "none"
    TRPC = "trpc"
    HONO = "hono"


class TestingOption(str, Enum):
    NONE = "none"
    VITEST = "vitest"
    PLAYWRIGHT = "playwright"


class LintingOption(str, Enum):
    NONE = "none"
    BIOME = "biome"
    ESLINT = "eslint"
    OXLINT = "oxlint"


class FormattingOption(str, Enum):
    NONE = "none"
    BIOME = "biome"
    PRETTIER = "prettier"


class GitHooksOption(str, Enum):
    NONE = "none"
    HUSKY = "husky"


class DeploymentOption(str, Enum):
    NONE = "none"
    VERCEL = "vercel"
    NETLIFY = "netlify"
    CLOUDFLARE = "cloudflare"


# ---------------------------------------------------------------------------
# Project configuration
# ---------------------------------------------------------------------------

class ProjectConfig(BaseModel):
    """Immutable record of one value per feature axis plus project identity.

    Field aliases match the camelCase keys used by JSON front ends
    (``packageManager``, ``gitHooks``); snake_case names are accepted too.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., min_length=1, description="Display name; package.json gets package_name")
    directory: str = Field(default="", description="Target directory, relative to the output root")
    package_manager: PackageManager = Field(default=PackageManager.NPM, alias="packageManager")
    framework: Framework = Field(default=Framework.VITE_SOLID_ROUTER)
    style: StyleOption = Field(default=StyleOption.NONE)
    database: DatabaseOption = Field(default=DatabaseOption.NONE)
    auth: AuthOption = Field(default=AuthOption.NONE)
    api: ApiOption = Field(default=ApiOption.NONE)
    testing: TestingOption = Field(default=TestingOption.NONE)
    linting: LintingOption = Field(default=LintingOption.NONE)
    formatting: FormattingOption = Field(default=FormattingOption.NONE)
    git_hooks: GitHooksOption = Field(default=GitHooksOption.NONE, alias="gitHooks")
    deployment: DeploymentOption = Field(default=DeploymentOption.NONE)

    @model_validator(mode="before")
    @classmethod
    def _default_directory(cls, data):
        if isinstance(data, dict) and not data.get("directory") and data.get("name"):
            data = {**data, "directory": data["name"]}
        return data

    @property
    def package_name(self) -> str:
        """``name`` reduced to a valid npm package name (lowercase, dashes)."""
        return sanitize_name(self.name) or "app"

    @property
    def uses_biome(self) -> bool:
        """Whether either the linting or the formatting axis selected Biome."""
        return (
            self.linting == LintingOption.BIOME
            or self.formatting == FormattingOption.BIOME
        )
