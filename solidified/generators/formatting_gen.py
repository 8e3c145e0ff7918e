"""Formatting generator: Prettier.  Biome formatting lives in ``linting_gen``."""

from __future__ import annotations

from pathlib import Path

from ..models import ProjectConfig
from ..project import add_dependencies, add_scripts, write_project_file
from .base import Generator

PRETTIER_CONFIG = """\
{
  "semi": true,
  "trailingComma": "es5",
  "singleQuote": false,
  "printWidth": 80,
  "tabWidth": 2,
  "useTabs": false,
  "arrowParens": "always",
  "endOfLine": "lf"
}
"""

PRETTIER_IGNORE = """\
node_modules
dist
build
.output
.vinxi
coverage
*.lock
package-lock.json
pnpm-lock.yaml
yarn.lock
bun.lockb
"""


class PrettierGenerator(Generator):
    name = "prettier"

    async def apply(self, directory: Path, config: ProjectConfig) -> None:
        await add_dependencies(directory, {"prettier": "^3"}, dev=True)
        await add_scripts(
            directory,
            {"format": "prettier --write .", "format:check": "prettier --check ."},
        )
        await write_project_file(directory, ".prettierrc", PRETTIER_CONFIG)
        await write_project_file(directory, ".prettierignore", PRETTIER_IGNORE)
