"""Homepage sections contributed by features with a visible demonstration."""

from __future__ import annotations

from dataclasses import dataclass, field

from ...models import ApiOption, AuthOption, DatabaseOption, ProjectConfig

# Visual stacking order of the composed homepage, independent of AXIS_ORDER.
SECTION_ORDER: tuple[str, ...] = ("api-db", "api", "auth")


@dataclass(frozen=True)
class HomepageSection:
    """A card on the homepage.

    ``component`` is the JSX fragment placed inside the features container;
    ``inline_components`` holds any helper component source it references.
    """

    id: str
    imports: list[str] = field(default_factory=list)
    component: str = ""
    inline_components: str | None = None


# ---------------------------------------------------------------------------
# Shared fragments
# ---------------------------------------------------------------------------

_DATABASE_CARD = """\
      <section class="card">
        <h2>Database</h2>
        <UsersList />
      </section>"""

_TRPC_USERS_LIST = """\
function UsersList() {
  const users = useUsers();
  return (
    <Show when={!users.isLoading} fallback={<p class="text-muted text-sm">Loading users...</p>}>
      <Show when={users.data?.length} fallback={<p class="text-muted text-sm">No users yet</p>}>
        <ul class="text-sm">
          <For each={users.data}>{(user) => <li>{user.email}</li>}</For>
        </ul>
      </Show>
    </Show>
  );
}"""

_FETCH_USERS_LIST = """\
function UsersList() {
  const [users] = createResource(async () => {
    const res = await fetch("/api/users");
    return res.json();
  });
  return (
    <Show when={!users.loading} fallback={<p class="text-muted text-sm">Loading users...</p>}>
      <Show when={users()?.length} fallback={<p class="text-muted text-sm">No users yet</p>}>
        <ul class="text-sm">
          <For each={users()}>{(user: any) => <li>{user.email}</li>}</For>
        </ul>
      </Show>
    </Show>
  );
}"""

_TRPC_DB_SECTION = HomepageSection(
    id="api-db",
    imports=[
        'import { Show, For } from "solid-js";',
        'import { useUsers } from "../lib/trpc/hooks";',
    ],
    inline_components=_TRPC_USERS_LIST,
    component=_DATABASE_CARD,
)

_HONO_DB_SECTION = HomepageSection(
    id="api-db",
    imports=['import { createResource, Show, For } from "solid-js";'],
    inline_components=_FETCH_USERS_LIST,
    component=_DATABASE_CARD,
)

# (api, database) pairings with a joint demonstration
_API_DATABASE_SECTIONS: dict[tuple[ApiOption, DatabaseOption], HomepageSection] = {
    (ApiOption.TRPC, DatabaseOption.DRIZZLE): _TRPC_DB_SECTION,
    (ApiOption.TRPC, DatabaseOption.PRISMA): _TRPC_DB_SECTION,
    (ApiOption.HONO, DatabaseOption.DRIZZLE): _HONO_DB_SECTION,
    (ApiOption.HONO, DatabaseOption.PRISMA): _HONO_DB_SECTION,
}

_AUTH_SECTIONS: dict[AuthOption, HomepageSection] = {
    AuthOption.BETTER_AUTH: HomepageSection(
        id="auth",
        imports=[
            'import { Show } from "solid-js";',
            'import { useSession, signOut } from "../lib/auth/client";',
        ],
        inline_components="""\
function AuthStatus() {
  const session = useSession();
  return (
    <Show
      when={session()?.user}
      fallback={<p class="text-muted text-sm">Not signed in</p>}
    >
      <div class="flex items-center gap-2">
        <span class="text-sm">{session()?.user?.email}</span>
        <button class="btn btn-secondary" onClick={() => signOut()}>
          Sign out
        </button>
      </div>
    </Show>
  );
}""",
        component="""\
      <section class="card">
        <h2>Auth</h2>
        <AuthStatus />
      </section>""",
    ),
    AuthOption.CLERK: HomepageSection(
        id="auth",
        imports=['import { SignedIn, SignedOut, SignInButton, UserButton } from "clerk-solidjs";'],
        component="""\
      <section class="card">
        <h2>Auth</h2>
        <SignedIn>
          <div class="flex items-center gap-2">
            <span class="text-sm">Signed in</span>
            <UserButton />
          </div>
        </SignedIn>
        <SignedOut>
          <SignInButton mode="modal">
            <button class="btn btn-primary">Sign in</button>
          </SignInButton>
        </SignedOut>
      </section>""",
    ),
}

_API_SECTIONS: dict[ApiOption, HomepageSection] = {
    ApiOption.TRPC: HomepageSection(
        id="api",
        imports=[
            'import { Show } from "solid-js";',
            'import { useHello } from "../lib/trpc/hooks";',
        ],
        inline_components="""\
function HelloMessage() {
  const hello = useHello();
  return (
    <Show when={!hello.isLoading} fallback={<p class="text-muted text-sm">Loading...</p>}>
      <p class="text-sm">{hello.data?.greeting}</p>
    </Show>
  );
}""",
        component="""\
      <section class="card">
        <h2>API</h2>
        <HelloMessage />
      </section>""",
    ),
    ApiOption.HONO: HomepageSection(
        id="api",
        imports=['import { createResource, Show } from "solid-js";'],
        inline_components="""\
function ApiMessage() {
  const [data] = createResource(async () => {
    const res = await fetch("/api/hello");
    return res.json();
  });
  return (
    <Show when={!data.loading} fallback={<p class="text-muted text-sm">Loading...</p>}>
      <p class="text-sm">{data()?.message}</p>
    </Show>
  );
}""",
        component="""\
      <section class="card">
        <h2>API</h2>
        <ApiMessage />
      </section>""",
    ),
}


# ---------------------------------------------------------------------------
# Section building
# ---------------------------------------------------------------------------

def build_sections(config: ProjectConfig) -> list[HomepageSection]:
    """Return the homepage sections for *config* in :data:`SECTION_ORDER`.

    A matching (api, database) pairing produces one combined section and
    suppresses the standalone API section.  The auth section is independent.
    """
    sections: list[HomepageSection] = []

    combined = build_api_database_section(config)
    if combined is not None:
        sections.append(combined)

    auth = build_auth_section(config)
    if auth is not None:
        sections.append(auth)

    if combined is None:
        api = build_standalone_api_section(config)
        if api is not None:
            sections.append(api)

    return sorted(sections, key=lambda section: SECTION_ORDER.index(section.id))


def build_api_database_section(config: ProjectConfig) -> HomepageSection | None:
    return _API_DATABASE_SECTIONS.get((config.api, config.database))


def build_auth_section(config: ProjectConfig) -> HomepageSection | None:
    return _AUTH_SECTIONS.get(config.auth)


def build_standalone_api_section(config: ProjectConfig) -> HomepageSection | None:
    return _API_SECTIONS.get(config.api)
