"""Feature generator registry.

Quick usage::

    from solidified.generators import apply_all, select_generators

    for generator in select_generators(config):
        print(generator.name)
    await apply_all(project_dir, config)

Generators run strictly one after another in :data:`AXIS_ORDER`.  Later
generators may read files written by earlier ones (the git-hooks generator
sees the linter's scripts, the homepage sees everything), so this order is
part of the contract.
"""

from __future__ import annotations

from pathlib import Path

from ..compatibility import assert_compatibility
from ..models import (
    ApiOption,
    AuthOption,
    DatabaseOption,
    DeploymentOption,
    FormattingOption,
    GitHooksOption,
    LintingOption,
    ProjectConfig,
    StyleOption,
    TestingOption,
)
from ..utils import print_step
from .api_gen import HonoGenerator, TRPCGenerator
from .auth_gen import BetterAuthGenerator, ClerkGenerator
from .base import Generator
from .database_gen import DrizzleGenerator, PrismaGenerator
from .deployment_gen import CloudflareGenerator, NetlifyGenerator, VercelGenerator
from .formatting_gen import PrettierGenerator
from .git_hooks_gen import GitHooksGenerator
from .homepage import HomepageGenerator
from .linting_gen import BiomeGenerator, ESLintGenerator, OxlintGenerator
from .style_gen import SassGenerator, TailwindGenerator, UnoCSSGenerator
from .testing_gen import PlaywrightGenerator, VitestGenerator

AXIS_ORDER: tuple[str, ...] = (
    "style",
    "database",
    "testing",
    "linting",
    "formatting",
    "biome",
    "git_hooks",
    "auth",
    "api",
    "deployment",
)

# ---------------------------------------------------------------------------
# Per-axis registries
# ---------------------------------------------------------------------------

STYLE_GENERATORS: dict[StyleOption, Generator] = {
    StyleOption.TAILWIND: TailwindGenerator(),
    StyleOption.UNOCSS: UnoCSSGenerator(),
    StyleOption.SASS: SassGenerator(),
}

DATABASE_GENERATORS: dict[DatabaseOption, Generator] = {
    DatabaseOption.DRIZZLE: DrizzleGenerator(),
    DatabaseOption.PRISMA: PrismaGenerator(),
}

TESTING_GENERATORS: dict[TestingOption, Generator] = {
    TestingOption.VITEST: VitestGenerator(),
    TestingOption.PLAYWRIGHT: PlaywrightGenerator(),
}

# Biome is shared between linting and formatting and has its own slot.
LINTING_GENERATORS: dict[LintingOption, Generator] = {
    LintingOption.ESLINT: ESLintGenerator(),
    LintingOption.OXLINT: OxlintGenerator(),
}

FORMATTING_GENERATORS: dict[FormattingOption, Generator] = {
    FormattingOption.PRETTIER: PrettierGenerator(),
}

BIOME_GENERATOR: Generator = BiomeGenerator()

GIT_HOOKS_GENERATORS: dict[GitHooksOption, Generator] = {
    GitHooksOption.HUSKY: GitHooksGenerator(),
}

AUTH_GENERATORS: dict[AuthOption, Generator] = {
    AuthOption.BETTER_AUTH: BetterAuthGenerator(),
    AuthOption.CLERK: ClerkGenerator(),
}

API_GENERATORS: dict[ApiOption, Generator] = {
    ApiOption.TRPC: TRPCGenerator(),
    ApiOption.HONO: HonoGenerator(),
}

DEPLOYMENT_GENERATORS: dict[DeploymentOption, Generator] = {
    DeploymentOption.VERCEL: VercelGenerator(),
    DeploymentOption.NETLIFY: NetlifyGenerator(),
    DeploymentOption.CLOUDFLARE: CloudflareGenerator(),
}

HOMEPAGE_GENERATOR: Generator = HomepageGenerator()

_AXIS_REGISTRIES: dict[str, dict] = {
    "style": STYLE_GENERATORS,
    "database": DATABASE_GENERATORS,
    "testing": TESTING_GENERATORS,
    "linting": LINTING_GENERATORS,
    "formatting": FORMATTING_GENERATORS,
    "git_hooks": GIT_HOOKS_GENERATORS,
    "auth": AUTH_GENERATORS,
    "api": API_GENERATORS,
    "deployment": DEPLOYMENT_GENERATORS,
}


# ---------------------------------------------------------------------------
# Selection and execution
# ---------------------------------------------------------------------------


def select_generators(config: ProjectConfig) -> list[Generator]:
    """Return the feature generators for *config* in :data:`AXIS_ORDER`.

    The homepage generator is not included; :func:`apply_all` always runs it
    last.  Biome appears at most once even when both linting and formatting
    selected it.
    """
    selected: list[Generator] = []
    for axis in AXIS_ORDER:
        if axis == "biome":
            if config.uses_biome:
                selected.append(BIOME_GENERATOR)
            continue
        generator = _AXIS_REGISTRIES[axis].get(getattr(config, axis))
        if generator is not None:
            selected.append(generator)
    return selected


async def apply_all(directory: Path, config: ProjectConfig) -> None:
    """Validate *config* and run every selected generator, then the homepage.

    Raises:
        CompatibilityError: If *config* selects options its framework cannot
            host.  Nothing is written in that case.
    """
    assert_compatibility(config)

    for generator in select_generators(config):
        print_step(f"Applying {generator.name}...")
        await generator.apply(directory, config)

    print_step(f"Applying {HOMEPAGE_GENERATOR.name}...")
    await HOMEPAGE_GENERATOR.apply(directory, config)


__all__ = [
    "AXIS_ORDER",
    "BIOME_GENERATOR",
    "HOMEPAGE_GENERATOR",
    "Generator",
    "apply_all",
    "select_generators",
]
