"""Anchored source-text patching for generated config and entry files.

Every operation here is a pure ``str -> str`` function that edits a file's
content at a syntactic anchor which the bundled templates are known to
contain (the import block, a ``defineConfig({`` opener, a ``plugins: [``
array, a ``vite: {`` or ``server: {`` block).  There is no parser behind
these functions; they only understand the shapes the templates produce.

Policy:

* An anchor that cannot be found leaves the content unchanged.  Nothing is
  raised; callers that care compare input and output.
* Each operation is idempotent against its own output.  An import whose
  name is already bound is not added again, and a call expression that is
  already an element of the target ``plugins`` array is not inserted twice.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Anchors
# ---------------------------------------------------------------------------

_IMPORT_LINE = re.compile(r"^import\s.+?\sfrom\s.+?;?[ \t]*$", re.MULTILINE)
_PLUGINS_ARRAY = re.compile(r"plugins:\s*\[")
_DEFINE_CONFIG = re.compile(r"defineConfig\(\{")
_VITE_BLOCK = re.compile(r"vite:\s*\{")
_SERVER_BLOCK = re.compile(r"server:\s*\{")
_PRESET_VALUE = re.compile(r"preset:\s*[\"'][^\"']*[\"']")
_IMPORT_CLAUSE = re.compile(
    r"^(?:(?P<default>[A-Za-z_$][\w$]*)(?:\s*,\s*|$))?"
    r"(?:\{(?P<named>[^}]*)\}|\*\s+as\s+(?P<namespace>[A-Za-z_$][\w$]*))?$"
)
_TOP_LEVEL_KEY = re.compile(r"(?:^|[\s{,])([A-Za-z_$][\w$]*)\s*:")

_OPENERS = {"{": "}", "[": "]", "(": ")"}
_CLOSERS = set(_OPENERS.values())
_QUOTES = {'"', "'", "`"}


@dataclass(frozen=True)
class PluginImport:
    """The import half of a plugin registration.

    ``name`` is the bound symbol, ``source`` the module specifier and
    ``default`` selects ``import X from`` over ``import { X } from``.
    """

    name: str
    source: str
    default: bool = False

    @property
    def default_call(self) -> str:
        return f"{self.name}()"


# ---------------------------------------------------------------------------
# Imports
# ---------------------------------------------------------------------------


def build_import_statement(plugin: PluginImport) -> str:
    """Synthesize the import line for *plugin*."""
    if plugin.default:
        return f'import {plugin.name} from "{plugin.source}";'
    return f'import {{ {plugin.name} }} from "{plugin.source}";'


def inject_import(content: str, statement: str) -> str:
    """Insert *statement* after the last top-level import line.

    With no import in the file the statement goes on the first line.  The
    statement is skipped when the exact line already exists.
    """
    if statement in content:
        return content

    last = None
    for last in _IMPORT_LINE.finditer(content):
        pass
    if last is None:
        return f"{statement}\n{content}"
    return f"{content[:last.end()]}\n{statement}{content[last.end():]}"


def import_plugin(content: str, plugin: PluginImport) -> str:
    """Make ``plugin.name`` available to the rest of *content*.

    Nothing changes when an import from ``plugin.source`` already binds the
    name.  Otherwise the name joins an existing import line from that
    module, so one module never ends up with two import lines.  A new line
    is added only when no existing line can take the name (a namespace
    import, a type-only import, or a different default binding).
    """
    pattern = re.compile(
        rf"^import\s+(?P<clause>[^;\n]*?)\s+from\s+(?P<quote>[\"']){re.escape(plugin.source)}(?P=quote)",
        re.MULTILINE,
    )
    matches = list(pattern.finditer(content))
    if any(plugin.name in _bound_names(m.group("clause")) for m in matches):
        return content
    for match in matches:
        clause = _extend_clause(match.group("clause"), plugin)
        if clause is not None:
            start, end = match.span("clause")
            return f"{content[:start]}{clause}{content[end:]}"
    return inject_import(content, build_import_statement(plugin))


def _bound_names(clause: str) -> set[str]:
    match = _IMPORT_CLAUSE.match(clause)
    if match is None:
        return set()
    names = {match.group("default"), match.group("namespace")}
    names.update(_named_locals(match.group("named") or ""))
    names.discard(None)
    return names


def _named_locals(named: str) -> list[str]:
    locals_ = []
    for binding in named.split(","):
        binding = binding.strip()
        if binding:
            locals_.append(binding.split(" as ")[-1].strip())
    return locals_


def _extend_clause(clause: str, plugin: PluginImport) -> str | None:
    match = _IMPORT_CLAUSE.match(clause)
    if match is None or match.group("namespace"):
        return None
    default, named = match.group("default"), match.group("named")
    if plugin.default:
        if default is not None:
            return None
        return f"{plugin.name}, {clause}"
    if named is None:
        return f"{default}, {{ {plugin.name} }}"
    bindings = [b.strip() for b in named.split(",") if b.strip()]
    braces = "{ " + ", ".join([*bindings, plugin.name]) + " }"
    return f"{default}, {braces}" if default is not None else braces


# ---------------------------------------------------------------------------
# Plugin registration
# ---------------------------------------------------------------------------


def inject_plugin(
    content: str,
    plugin: PluginImport,
    call: str | None = None,
    indent: str = "    ",
) -> str:
    """Import *plugin* and register *call* as the first ``plugins`` element.

    Used for flat configs where ``plugins: [`` is a direct key of the
    ``defineConfig`` object.  The new element is always prepended, followed
    by a comma, so existing elements and trailing commas are left alone.
    """
    call = call or plugin.default_call
    if _PLUGINS_ARRAY.search(content) is None:
        return content
    patched = import_plugin(content, plugin)
    return _prepend_element(patched, _PLUGINS_ARRAY.search(patched), call, indent)


def inject_config_block(content: str, key: str, value: str) -> str:
    """Add ``key: value,`` as the first key of the ``defineConfig({`` object."""
    match = _DEFINE_CONFIG.search(content)
    if match is None:
        return content
    if key in _top_level_keys(content, match.end() - 1):
        return content
    entry = f"\n  {key}: {_indent_continuation(value, '  ')},"
    return _insert_at(content, match.end(), entry)


# ---------------------------------------------------------------------------
# Nested ``vite: {}`` configs
# ---------------------------------------------------------------------------


def inject_nested_plugin(
    content: str, plugin: PluginImport, call: str | None = None
) -> str:
    """Register a plugin inside a config whose plugins live under ``vite:``.

    Three pre-existing shapes are handled with the smallest edit each:

    * ``vite`` block with a ``plugins`` array: prepend to the array.
    * ``vite`` block without ``plugins``: add ``plugins: [call],``.
    * no ``vite`` block: add ``vite: { plugins: [call] }`` to ``defineConfig``.
    """
    call = call or plugin.default_call
    if _VITE_BLOCK.search(content) is None and _DEFINE_CONFIG.search(content) is None:
        return content
    patched = import_plugin(content, plugin)

    vite = _VITE_BLOCK.search(patched)
    if vite is not None:
        vite_open = vite.end() - 1
        if "plugins" in _top_level_keys(patched, vite_open):
            plugins = _PLUGINS_ARRAY.search(patched, vite.end(), _find_closing(patched, vite_open))
            if plugins is None:
                return content
            return _prepend_element(patched, plugins, call, "      ")
        return _insert_at(patched, vite.end(), f"\n    plugins: [{call}],")

    define = _DEFINE_CONFIG.search(patched)
    return _insert_at(
        patched, define.end(), f"\n  vite: {{\n    plugins: [{call}],\n  }},"
    )


def inject_nested_config_block(content: str, key: str, value: str) -> str:
    """Add ``key: value,`` inside the ``vite:`` block, creating it if needed."""
    vite = _VITE_BLOCK.search(content)
    if vite is not None:
        if key in _top_level_keys(content, vite.end() - 1):
            return content
        entry = f"\n    {key}: {_indent_continuation(value, '    ')},"
        return _insert_at(content, vite.end(), entry)

    define = _DEFINE_CONFIG.search(content)
    if define is None:
        return content
    entry = (
        f"\n  vite: {{\n    {key}: {_indent_continuation(value, '    ')},\n  }},"
    )
    return _insert_at(content, define.end(), entry)


# ---------------------------------------------------------------------------
# Server presets
# ---------------------------------------------------------------------------


def inject_server_preset(content: str, preset: str, extra: str | None = None) -> str:
    """Set ``server.preset`` in a config file.

    * no ``server`` block: insert ``server: { preset: "...", <extra> },``.
    * ``server`` block without ``preset``: add the preset key (and *extra*).
    * ``server`` block with ``preset``: substitute the existing value only.

    *extra* is additional object-literal text written at column zero; it is
    re-indented to sit inside the ``server`` block.
    """
    preset_line = f'preset: "{preset}",'
    extra_block = f"\n{_indent_block(extra, '    ')}" if extra else ""

    server = _SERVER_BLOCK.search(content)
    if server is not None:
        close = _find_closing(content, server.end() - 1)
        existing = _PRESET_VALUE.search(content, server.end(), close)
        if existing is not None:
            return (
                content[: existing.start()]
                + f'preset: "{preset}"'
                + content[existing.end():]
            )
        return _insert_at(content, server.end(), f"\n    {preset_line}{extra_block}")

    define = _DEFINE_CONFIG.search(content)
    if define is None:
        return content
    return _insert_at(
        content,
        define.end(),
        f"\n  server: {{\n    {preset_line}{extra_block}\n  }},",
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _insert_at(content: str, index: int, text: str) -> str:
    return content[:index] + text + content[index:]


def _prepend_element(content: str, array_match: re.Match[str], call: str, indent: str) -> str:
    open_index = array_match.end() - 1
    close_index = _find_closing(content, open_index)
    elements = [e.strip() for e in _split_top_level(content[open_index + 1:close_index])]
    if call in elements:
        return content
    return _insert_at(content, array_match.end(), f"\n{indent}{call},")


def _find_closing(content: str, open_index: int) -> int:
    """Return the index of the bracket closing the one at *open_index*.

    Quoted strings are skipped.  An unbalanced opener yields ``len(content)``.
    """
    depth = 0
    quote: str | None = None
    index = open_index
    while index < len(content):
        char = content[index]
        if quote:
            if char == "\\":
                index += 1
            elif char == quote:
                quote = None
        elif char in _QUOTES:
            quote = char
        elif char in _OPENERS:
            depth += 1
        elif char in _CLOSERS:
            depth -= 1
            if depth == 0:
                return index
        index += 1
    return len(content)


def _top_level_text(content: str, open_index: int) -> str:
    """Body of the bracket at *open_index* with nested brackets and strings blanked."""
    close_index = _find_closing(content, open_index)
    out: list[str] = []
    depth = 0
    quote: str | None = None
    for char in content[open_index + 1:close_index]:
        if quote:
            if char == quote:
                quote = None
            continue
        if char in _QUOTES:
            quote = char
            continue
        if char in _OPENERS:
            if depth == 0:
                out.append(char)
            depth += 1
        elif char in _CLOSERS:
            depth -= 1
        elif depth == 0:
            out.append(char)
    return "".join(out)


def _top_level_keys(content: str, open_index: int) -> set[str]:
    return set(_TOP_LEVEL_KEY.findall(_top_level_text(content, open_index)))


def _split_top_level(body: str) -> list[str]:
    parts: list[str] = []
    depth = 0
    quote: str | None = None
    current: list[str] = []
    for char in body:
        if quote:
            if char == quote:
                quote = None
        elif char in _QUOTES:
            quote = char
        elif char in _OPENERS:
            depth += 1
        elif char in _CLOSERS:
            depth -= 1
        elif char == "," and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return [part for part in parts if part.strip()]


def _indent_continuation(value: str, indent: str) -> str:
    """Indent every line of *value* except the first."""
    first, *rest = value.split("\n")
    return "\n".join([first, *(f"{indent}{line}" if line else line for line in rest)])


def _indent_block(text: str, indent: str) -> str:
    return "\n".join(f"{indent}{line}" if line else line for line in text.strip("\n").split("\n"))
