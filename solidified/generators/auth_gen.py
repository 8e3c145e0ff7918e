"""Auth generators: Better Auth (server-side) and Clerk (client-side)."""

from __future__ import annotations

from pathlib import Path

from ..adapters import FrameworkAdapter, get_adapter
from ..models import ProjectConfig
from ..project import add_dependencies, add_env_var, write_project_file
from .base import Generator

BETTER_AUTH_ROUTE = """\
import { auth } from "~/lib/auth/server";
import { toSolidStartHandler } from "better-auth/solid-start";

export const { GET, POST } = toSolidStartHandler(auth);
"""


class BetterAuthGenerator(Generator):
    name = "better-auth"

    async def apply(self, directory: Path, config: ProjectConfig) -> None:
        adapter = get_adapter(config.framework)
        base_url = f"http://localhost:{adapter.dev_port}"

        await add_dependencies(directory, {"better-auth": "^1.2"})

        await add_env_var(directory, "BETTER_AUTH_SECRET", "your-secret-key-here")
        await add_env_var(directory, "BETTER_AUTH_URL", base_url)
        await add_env_var(directory, f"{adapter.env_prefix}BETTER_AUTH_URL", base_url)

        await write_project_file(directory, "src/lib/auth/server.ts", _auth_server(base_url))
        await write_project_file(
            directory, "src/lib/auth/client.ts", _auth_client(adapter, base_url)
        )

        if adapter.server_capable:
            await write_project_file(
                directory, f"{adapter.routes_dir}/api/auth/[...auth].ts", BETTER_AUTH_ROUTE
            )


class ClerkGenerator(Generator):
    """Clerk wrapper component; the homepage aggregator wires it as a provider."""

    name = "clerk"

    async def apply(self, directory: Path, config: ProjectConfig) -> None:
        adapter = get_adapter(config.framework)

        await add_dependencies(directory, {"clerk-solidjs": "^0.5"})

        await add_env_var(
            directory, f"{adapter.env_prefix}CLERK_PUBLISHABLE_KEY", "pk_test_your-publishable-key"
        )
        await add_env_var(directory, "CLERK_SECRET_KEY", "sk_test_your-secret-key")

        await write_project_file(directory, "src/lib/clerk.tsx", _clerk_wrapper(adapter))


# ---------------------------------------------------------------------------
# Content builders
# ---------------------------------------------------------------------------

def _auth_server(base_url: str) -> str:
    return f"""\
import {{ betterAuth }} from "better-auth";

export const auth = betterAuth({{
	baseURL: process.env.BETTER_AUTH_URL || "{base_url}",
	secret: process.env.BETTER_AUTH_SECRET || "dev-secret-key",
}});
"""


def _auth_client(adapter: FrameworkAdapter, base_url: str) -> str:
    return f"""\
import {{ createAuthClient }} from "better-auth/solid";

export const authClient = createAuthClient({{
	baseURL: import.meta.env.{adapter.env_prefix}BETTER_AUTH_URL || "{base_url}",
}});

export const {{ signIn, signOut, signUp, useSession }} = authClient;
"""


def _clerk_wrapper(adapter: FrameworkAdapter) -> str:
    return f"""\
import {{ ClerkProvider }} from "clerk-solidjs";
import type {{ ParentProps }} from "solid-js";

const PUBLISHABLE_KEY = import.meta.env.{adapter.env_prefix}CLERK_PUBLISHABLE_KEY;

if (!PUBLISHABLE_KEY) {{
  throw new Error("Missing Clerk Publishable Key");
}}

export function ClerkWrapper(props: ParentProps) {{
  return (
    <ClerkProvider publishableKey={{PUBLISHABLE_KEY}}>
      {{props.children}}
    </ClerkProvider>
  );
}}
"""
