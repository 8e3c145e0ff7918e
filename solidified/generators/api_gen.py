"""API layer generators: tRPC (with TanStack Query) and Hono RPC.

Both emit different server code depending on the selected database, and a
native route handler only when the framework can host server routes.
"""

from __future__ import annotations

from pathlib import Path

from ..adapters import get_adapter
from ..models import DatabaseOption, ProjectConfig
from ..project import add_dependencies, write_project_file
from .base import Generator

# ---------------------------------------------------------------------------
# Database access snippets shared by both API layers
# ---------------------------------------------------------------------------

_DB_IMPORTS: dict[DatabaseOption, str] = {
    DatabaseOption.DRIZZLE: 'import { db } from "../../db";\nimport { users } from "../../db/schema";',
    DatabaseOption.PRISMA: 'import { prisma } from "../../db";',
}

_USERS_QUERY: dict[DatabaseOption, str] = {
    DatabaseOption.DRIZZLE: "await db.select().from(users).limit(10)",
    DatabaseOption.PRISMA: "await prisma.user.findMany({ take: 10 })",
}

# ---------------------------------------------------------------------------
# tRPC
# ---------------------------------------------------------------------------

TRPC_SERVER = """\
import { initTRPC } from "@trpc/server";

const t = initTRPC.create();

export const router = t.router;
export const publicProcedure = t.procedure;
"""

TRPC_CLIENT = """\
import { createTRPCClient, httpBatchLink } from "@trpc/client";
import type { AppRouter } from "./router";

export const trpc = createTRPCClient<AppRouter>({
	links: [
		httpBatchLink({
			url: "/api/trpc",
		}),
	],
});
"""

TRPC_QUERY_PROVIDER = """\
import { QueryClient, QueryClientProvider } from "@tanstack/solid-query";
import type { ParentProps } from "solid-js";

const queryClient = new QueryClient({
	defaultOptions: {
		queries: {
			staleTime: 5 * 60 * 1000,
			retry: 1,
		},
	},
});

export function QueryProvider(props: ParentProps) {
	return (
		<QueryClientProvider client={queryClient}>
			{props.children}
		</QueryClientProvider>
	);
}
"""

TRPC_HELLO_HOOK = """\
import { createQuery } from "@tanstack/solid-query";
import { trpc } from "./client";

export function useHello(name?: string) {
	return createQuery(() => ({
		queryKey: ["hello", name],
		queryFn: () => trpc.hello.query({ name }),
	}));
}
"""

TRPC_USERS_HOOK = """
export function useUsers() {
	return createQuery(() => ({
		queryKey: ["users"],
		queryFn: () => trpc.users.query(),
	}));
}
"""

TRPC_ROUTE = """\
import { type APIEvent } from "@solidjs/start/server";
import { fetchRequestHandler } from "@trpc/server/adapters/fetch";
import { appRouter } from "~/lib/trpc/router";

const handler = (event: APIEvent) =>
	fetchRequestHandler({
		endpoint: "/api/trpc",
		req: event.request,
		router: appRouter,
		createContext: () => ({}),
	});

export const GET = handler;
export const POST = handler;
"""


class TRPCGenerator(Generator):
    name = "trpc"

    async def apply(self, directory: Path, config: ProjectConfig) -> None:
        adapter = get_adapter(config.framework)

        await add_dependencies(
            directory,
            {
                "@trpc/server": "^11",
                "@trpc/client": "^11",
                "@tanstack/solid-query": "^5",
                "zod": "^4.3.5",
            },
        )

        await write_project_file(directory, "src/lib/trpc/server.ts", TRPC_SERVER)
        await write_project_file(
            directory, "src/lib/trpc/router.ts", build_trpc_router(config.database)
        )
        await write_project_file(directory, "src/lib/trpc/client.ts", TRPC_CLIENT)
        await write_project_file(directory, "src/lib/trpc/QueryProvider.tsx", TRPC_QUERY_PROVIDER)
        await write_project_file(
            directory, "src/lib/trpc/hooks.ts", build_trpc_hooks(config.database)
        )

        if adapter.server_capable:
            await write_project_file(
                directory, f"{adapter.routes_dir}/api/trpc/[...trpc].ts", TRPC_ROUTE
            )


def build_trpc_router(database: DatabaseOption) -> str:
    """Router with a ``hello`` query, plus ``users`` when a database is selected."""
    db_import = f"\n{_DB_IMPORTS[database]}" if database in _DB_IMPORTS else ""
    users = ""
    if database in _USERS_QUERY:
        users = f"""
	users: publicProcedure.query(async () => {{
		return {_USERS_QUERY[database]};
	}}),
"""
    return f"""\
import {{ z }} from "zod";
import {{ router, publicProcedure }} from "./server";{db_import}

export const appRouter = router({{
	hello: publicProcedure
		.input(z.object({{ name: z.string().optional() }}))
		.query(({{ input }}) => {{
			return {{ greeting: `Hello ${{input.name ?? "World"}}!` }};
		}}),
{users}}});

export type AppRouter = typeof appRouter;
"""


def build_trpc_hooks(database: DatabaseOption) -> str:
    if database in _USERS_QUERY:
        return TRPC_HELLO_HOOK + TRPC_USERS_HOOK
    return TRPC_HELLO_HOOK


# ---------------------------------------------------------------------------
# Hono
# ---------------------------------------------------------------------------

HONO_ROUTE = """\
import { type APIEvent } from "@solidjs/start/server";
import { app } from "~/lib/api/server";

const handler = (event: APIEvent) => app.fetch(event.request);

export const GET = handler;
export const POST = handler;
export const PUT = handler;
export const DELETE = handler;
export const PATCH = handler;
"""


class HonoGenerator(Generator):
    name = "hono"

    async def apply(self, directory: Path, config: ProjectConfig) -> None:
        adapter = get_adapter(config.framework)

        await add_dependencies(directory, {"hono": "^4"})

        await write_project_file(
            directory, "src/lib/api/server.ts", build_hono_server(config.database)
        )
        await write_project_file(
            directory, "src/lib/api/client.ts", build_hono_client(config.database)
        )

        if adapter.server_capable:
            await write_project_file(
                directory, f"{adapter.routes_dir}/api/[...path].ts", HONO_ROUTE
            )


def build_hono_server(database: DatabaseOption) -> str:
    """Hono app with ``/api/hello``, plus ``/api/users`` when a database is selected."""
    db_import = f"\n{_DB_IMPORTS[database]}" if database in _DB_IMPORTS else ""
    users = ""
    if database in _USERS_QUERY:
        users = f"""
	.get("/users", async (c) => {{
		const data = {_USERS_QUERY[database]};
		return c.json(data);
	}})"""
    return f"""\
import {{ Hono }} from "hono";
import {{ cors }} from "hono/cors";{db_import}

const app = new Hono()
	.use("*", cors())
	.basePath("/api");

const routes = app
	.get("/hello", (c) => {{
		const name = c.req.query("name") ?? "World";
		return c.json({{ message: `Hello ${{name}}!` }});
	}}){users};

export type AppType = typeof routes;
export {{ app }};
"""


def build_hono_client(database: DatabaseOption) -> str:
    users = ""
    if database in _USERS_QUERY:
        users = """
	users: async () => {
		const res = await client.api.users.$get();
		return res.json();
	},
"""
    return f"""\
import {{ hc }} from "hono/client";
import type {{ AppType }} from "./server";

export const client = hc<AppType>("/");

export const api = {{
	hello: async (name?: string) => {{
		const res = await client.api.hello.$get({{
			query: {{ name: name ?? "" }},
		}});
		return res.json();
	}},
{users}}};
"""
