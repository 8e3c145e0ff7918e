"""Homepage aggregation.

Runs once, after every feature generator.  Features with a visible
demonstration contribute :class:`HomepageSection` cards which are composed
into a single route file; features that need an ambient context contribute
:class:`ProviderDescriptor` wrappers around the router in the entry file.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from ...adapters import get_adapter
from ...models import ProjectConfig
from ...project import read_project_file, write_project_file
from ..base import Generator
from .providers import ProviderDescriptor, build_providers, wrap_with_providers
from .sections import SECTION_ORDER, HomepageSection, build_sections

_DEFAULT_NAMED_IMPORT = re.compile(
    r"""^import\s+([A-Za-z_$][\w$]*)\s*,\s*\{([^}]+)\}\s+from\s+["']([^"']+)["'];?$"""
)
_NAMED_IMPORT = re.compile(r"""^import\s+\{([^}]+)\}\s+from\s+["']([^"']+)["'];?$""")
_DEFAULT_IMPORT = re.compile(r"""^import\s+([A-Za-z_$][\w$]*)\s+from\s+["']([^"']+)["'];?$""")


class HomepageGenerator(Generator):
    name = "homepage"

    async def apply(self, directory: Path, config: ProjectConfig) -> None:
        adapter = get_adapter(config.framework)

        sections = build_sections(config)
        providers = build_providers(config)

        await write_project_file(
            directory,
            adapter.homepage_path,
            render_homepage(sections, adapter.homepage_path),
        )

        if providers:
            entry = await read_project_file(directory, adapter.entry_path)
            await write_project_file(
                directory, adapter.entry_path, wrap_with_providers(entry, providers)
            )


def render_homepage(
    sections: list[HomepageSection], homepage_path: str = "src/routes/index.tsx"
) -> str:
    """Compose the homepage route from *sections*.

    With no sections a static welcome page is returned.
    """
    if not sections:
        return f"""\
export default function Home() {{
  return (
    <div class="welcome">
      <h1>Ready to build</h1>
      <p class="subtitle">Scaffolded with Create Solidified</p>
      <p class="hint">
        Edit <code>{homepage_path}</code> to get started
      </p>
    </div>
  );
}}
"""

    imports = merge_imports([line for section in sections for line in section.imports])
    inline_components = [s.inline_components for s in sections if s.inline_components]
    cards = "\n\n".join(section.component for section in sections)

    output = ""
    if imports:
        output += "\n".join(imports) + "\n"
    if inline_components:
        if output:
            output += "\n"
        output += "\n\n".join(inline_components) + "\n"
    if output:
        output += "\n"

    return f"""\
{output}export default function Home() {{
  return (
    <div class="features">
{cards}
    </div>
  );
}}
"""


@dataclass
class _ImportGroup:
    default: str | None = None
    named: set[str] = field(default_factory=set)

    def add_named(self, names: str) -> None:
        self.named.update(name.strip() for name in names.split(",") if name.strip())


def merge_imports(lines: list[str]) -> list[str]:
    """Merge import lines by module specifier.

    Named bindings are unioned and sorted; the first default binding for a
    module wins.  A line whose default binding conflicts with an earlier one,
    and any line that is not a recognised import shape, is passed through
    verbatim after the merged lines, in original order.
    """
    groups: dict[str, _ImportGroup] = {}
    passthrough: list[str] = []

    for line in lines:
        trimmed = line.strip()

        match = _DEFAULT_NAMED_IMPORT.match(trimmed)
        if match:
            default, names, module = match.groups()
            group = groups.setdefault(module, _ImportGroup())
            if group.default and group.default != default:
                passthrough.append(line)
                continue
            group.default = group.default or default
            group.add_named(names)
            continue

        match = _NAMED_IMPORT.match(trimmed)
        if match:
            names, module = match.groups()
            groups.setdefault(module, _ImportGroup()).add_named(names)
            continue

        match = _DEFAULT_IMPORT.match(trimmed)
        if match:
            default, module = match.groups()
            group = groups.setdefault(module, _ImportGroup())
            if group.default and group.default != default:
                passthrough.append(line)
                continue
            group.default = group.default or default
            continue

        passthrough.append(line)

    merged: list[str] = []
    for module, group in groups.items():
        named = ", ".join(sorted(group.named))
        if group.default and named:
            merged.append(f'import {group.default}, {{ {named} }} from "{module}";')
        elif group.default:
            merged.append(f'import {group.default} from "{module}";')
        elif named:
            merged.append(f'import {{ {named} }} from "{module}";')

    return merged + passthrough


__all__ = [
    "SECTION_ORDER",
    "HomepageGenerator",
    "HomepageSection",
    "ProviderDescriptor",
    "build_providers",
    "build_sections",
    "merge_imports",
    "render_homepage",
    "wrap_with_providers",
]
