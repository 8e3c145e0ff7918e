"""Deployment generators: Vercel, Netlify and Cloudflare Pages.

Server-capable frameworks get a server preset patched into their config;
client-only builds get static-host files for SPA routing and asset caching.
"""

from __future__ import annotations

import json
from pathlib import Path

from ..adapters import get_adapter
from ..models import ProjectConfig
from ..package_manager import run_script_command
from ..project import write_project_file
from .base import Generator

IMMUTABLE_CACHE = "public, max-age=31536000, immutable"

CLOUDFLARE_ROLLUP_CONFIG = """\
rollupConfig: {
  external: ["__STATIC_CONTENT_MANIFEST", "node:async_hooks"],
},"""


class VercelGenerator(Generator):
    name = "vercel"

    async def apply(self, directory: Path, config: ProjectConfig) -> None:
        adapter = get_adapter(config.framework)
        if adapter.server_capable:
            await adapter.set_server_preset(directory, "vercel")
            return

        vercel_config = {
            "rewrites": [{"source": "/(.*)", "destination": "/index.html"}],
            "headers": [
                {
                    "source": "/assets/(.*)",
                    "headers": [{"key": "Cache-Control", "value": IMMUTABLE_CACHE}],
                }
            ],
        }
        await write_project_file(
            directory, "vercel.json", json.dumps(vercel_config, indent=2) + "\n"
        )


class NetlifyGenerator(Generator):
    name = "netlify"

    async def apply(self, directory: Path, config: ProjectConfig) -> None:
        adapter = get_adapter(config.framework)
        if adapter.server_capable:
            await adapter.set_server_preset(directory, "netlify")
            return

        build_command = f"{run_script_command(config.package_manager)} build"
        await write_project_file(directory, "netlify.toml", _netlify_toml(build_command))


class CloudflareGenerator(Generator):
    name = "cloudflare"

    async def apply(self, directory: Path, config: ProjectConfig) -> None:
        adapter = get_adapter(config.framework)
        if adapter.server_capable:
            # async_hooks and the static manifest are provided by the Workers runtime
            await adapter.set_server_preset(
                directory, "cloudflare-pages", CLOUDFLARE_ROLLUP_CONFIG
            )
            await write_project_file(
                directory, "wrangler.toml", _wrangler_toml(config.package_name)
            )
            return

        routes = {"version": 1, "include": ["/*"], "exclude": ["/assets/*"]}
        await write_project_file(
            directory, "public/_routes.json", json.dumps(routes, indent=2) + "\n"
        )
        await write_project_file(
            directory, "public/_headers", f"/assets/*\n  Cache-Control: {IMMUTABLE_CACHE}\n"
        )
        await write_project_file(directory, "public/_redirects", "/*  /index.html  200\n")


def _netlify_toml(build_command: str) -> str:
    return f"""\
[build]
  publish = "dist"
  command = "{build_command}"

# Handle SPA client-side routing
[[redirects]]
  from = "/*"
  to = "/index.html"
  status = 200

# Cache static assets
[[headers]]
  for = "/assets/*"
  [headers.values]
    Cache-Control = "{IMMUTABLE_CACHE}"
"""


def _wrangler_toml(worker_name: str) -> str:
    return f"""\
name = "{worker_name}"
compatibility_date = "2024-01-01"
compatibility_flags = ["nodejs_compat"]

[site]
bucket = ".output/public"
"""
