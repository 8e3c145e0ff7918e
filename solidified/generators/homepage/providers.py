"""Ambient context providers wrapped around the application router."""

from __future__ import annotations

import re
from dataclasses import dataclass

from ...merger import inject_import
from ...models import ApiOption, AuthOption, ProjectConfig

_ROUTER_OPEN = re.compile(r"^([ \t]*)<Router\b", re.MULTILINE)
_ROUTER_CLOSE = "</Router>"


@dataclass(frozen=True)
class ProviderDescriptor:
    """An entry-file wrapper.  Lower ``priority`` wraps further out."""

    import_line: str
    wrapper: str
    closing: str
    priority: int


def build_providers(config: ProjectConfig) -> list[ProviderDescriptor]:
    """Collect providers for *config*, sorted outermost first."""
    providers: list[ProviderDescriptor] = []

    if config.api == ApiOption.TRPC:
        providers.append(
            ProviderDescriptor(
                import_line='import { QueryProvider } from "./lib/trpc/QueryProvider";',
                wrapper="<QueryProvider>",
                closing="</QueryProvider>",
                priority=10,
            )
        )

    if config.auth == AuthOption.CLERK:
        providers.append(
            ProviderDescriptor(
                import_line='import { ClerkWrapper } from "./lib/clerk";',
                wrapper="<ClerkWrapper>",
                closing="</ClerkWrapper>",
                priority=5,
            )
        )

    return sorted(providers, key=lambda provider: provider.priority)


def wrap_with_providers(content: str, providers: list[ProviderDescriptor]) -> str:
    """Import each provider and wrap the root ``<Router>`` element.

    An entry without a ``<Router>`` opening line and matching ``</Router>``
    is returned unchanged, imports included.  Imports whose exact line is
    already present are skipped.  Wrapping is skipped if any provider tag
    is already in the file.  Opening tags are emitted in list order at the
    router's indentation; closing tags follow ``</Router>`` in reverse order.
    """
    if not providers:
        return content

    wrapped = any(provider.wrapper in content for provider in providers)
    if not wrapped and not _has_router(content):
        return content

    for provider in providers:
        content = inject_import(content, provider.import_line)
    if wrapped:
        return content

    router = _ROUTER_OPEN.search(content)
    indent = router.group(1)
    opening = "".join(f"{indent}{provider.wrapper}\n" for provider in providers)
    closing = "".join(f"\n{indent}{provider.closing}" for provider in reversed(providers))

    content = content[: router.start()] + opening + content[router.start():]
    close_end = content.find(_ROUTER_CLOSE, router.start() + len(opening)) + len(_ROUTER_CLOSE)
    return content[:close_end] + closing + content[close_end:]


def _has_router(content: str) -> bool:
    router = _ROUTER_OPEN.search(content)
    return router is not None and content.find(_ROUTER_CLOSE, router.end()) != -1
