"""Tests for the Better Auth and Clerk generators."""

from __future__ import annotations

import pytest

from solidified.generators.auth_gen import BetterAuthGenerator, ClerkGenerator
from solidified.models import ProjectConfig

pytestmark = pytest.mark.unit


class TestBetterAuth:
    async def test_solid_start(self, start_project, manifest_of):
        config = ProjectConfig(name="app", framework="solid-start", auth="better-auth")
        await BetterAuthGenerator().apply(start_project, config)

        assert "better-auth" in manifest_of(start_project)["dependencies"]

        env = (start_project / ".env").read_text(encoding="utf-8")
        assert "BETTER_AUTH_SECRET=" in env
        assert "BETTER_AUTH_URL=http://localhost:3000\n" in env
        assert "VITE_BETTER_AUTH_URL=http://localhost:3000\n" in env

        client = (start_project / "src/lib/auth/client.ts").read_text(encoding="utf-8")
        assert "import.meta.env.VITE_BETTER_AUTH_URL" in client
        assert "useSession" in client
        assert (start_project / "src/lib/auth/server.ts").is_file()
        assert (start_project / "src/routes/api/auth/[...auth].ts").is_file()

    async def test_client_only_has_no_route(self, vite_project):
        # The generator itself does not gate on compatibility.
        config = ProjectConfig(name="app")
        await BetterAuthGenerator().apply(vite_project, config)
        assert not (vite_project / "src/routes/api").exists()
        env = (vite_project / ".env").read_text(encoding="utf-8")
        assert "BETTER_AUTH_URL=http://localhost:5173" in env


class TestClerk:
    async def test_vite(self, vite_project, manifest_of):
        config = ProjectConfig(name="app", auth="clerk")
        await ClerkGenerator().apply(vite_project, config)

        assert "clerk-solidjs" in manifest_of(vite_project)["dependencies"]
        env = (vite_project / ".env").read_text(encoding="utf-8")
        assert "VITE_CLERK_PUBLISHABLE_KEY=" in env
        assert "CLERK_SECRET_KEY=" in env

        wrapper = (vite_project / "src/lib/clerk.tsx").read_text(encoding="utf-8")
        assert "export function ClerkWrapper" in wrapper
        assert "import.meta.env.VITE_CLERK_PUBLISHABLE_KEY" in wrapper
