"""Unit tests for framework adapters and the file-patch helper."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from solidified.adapters import (
    ADAPTERS,
    FrameworkNotImplementedError,
    get_adapter,
    is_server_capable,
    patch_project_file,
)
from solidified.merger import PluginImport
from solidified.models import Framework

pytestmark = pytest.mark.unit

TAILWIND = PluginImport(name="tailwindcss", source="@tailwindcss/vite", default=True)


class TestRegistry:
    def test_every_framework_has_an_adapter(self):
        assert set(ADAPTERS) == set(Framework)

    def test_vite_layout(self):
        adapter = get_adapter("vite-solid-router")
        assert adapter.config_path == "vite.config.ts"
        assert adapter.entry_path == "src/index.tsx"
        assert adapter.homepage_path == "src/routes/index.tsx"
        assert adapter.dev_port == 5173
        assert adapter.server_capable is False

    def test_solid_start_layout(self):
        adapter = get_adapter(Framework.SOLID_START)
        assert adapter.config_path == "app.config.ts"
        assert adapter.entry_path == "src/app.tsx"
        assert adapter.dev_port == 3000
        assert adapter.server_capable is True

    def test_placeholder_raises(self):
        with pytest.raises(FrameworkNotImplementedError) as exc_info:
            get_adapter("tanstack-start")
        assert str(exc_info.value) == 'Framework "tanstack-start" is not yet implemented'

    def test_placeholder_is_server_capable(self):
        assert is_server_capable("tanstack-start")
        assert not is_server_capable("vite-solid-router")

    def test_adapters_are_frozen(self):
        adapter = get_adapter("solid-start")
        with pytest.raises(AttributeError):
            adapter.dev_port = 1


class TestCapabilities:
    async def test_placeholder_capabilities_raise(self, tmp_path):
        placeholder = ADAPTERS[Framework.TANSTACK_START]
        with pytest.raises(FrameworkNotImplementedError):
            await placeholder.add_plugin(tmp_path, TAILWIND)
        with pytest.raises(FrameworkNotImplementedError):
            await placeholder.add_config(tmp_path, "css", "{}")

    async def test_client_only_has_no_server_presets(self, vite_project):
        with pytest.raises(FrameworkNotImplementedError, match="server presets"):
            await get_adapter("vite-solid-router").set_server_preset(vite_project, "vercel")

    async def test_vite_add_plugin(self, vite_project):
        await get_adapter("vite-solid-router").add_plugin(vite_project, TAILWIND)
        content = (vite_project / "vite.config.ts").read_text(encoding="utf-8")
        assert 'import tailwindcss from "@tailwindcss/vite";' in content
        assert "    tailwindcss(),\n    solid()," in content

    async def test_solid_start_add_plugin_nests_under_vite(self, start_project):
        await get_adapter("solid-start").add_plugin(start_project, TAILWIND)
        content = (start_project / "app.config.ts").read_text(encoding="utf-8")
        assert "vite: {\n    plugins: [tailwindcss()],\n  }," in content

    async def test_solid_start_add_config_nests_under_vite(self, start_project):
        await get_adapter("solid-start").add_config(start_project, "css", "{}")
        content = (start_project / "app.config.ts").read_text(encoding="utf-8")
        assert "vite: {\n    css: {},\n  }," in content

    async def test_solid_start_server_preset(self, start_project):
        await get_adapter("solid-start").set_server_preset(start_project, "netlify")
        content = (start_project / "app.config.ts").read_text(encoding="utf-8")
        assert 'preset: "netlify",' in content


class TestPatchProjectFile:
    async def test_changed_file_is_written(self, tmp_path):
        (tmp_path / "a.ts").write_text("a", encoding="utf-8")
        changed = await patch_project_file(tmp_path, "a.ts", lambda s: s + "b")
        assert changed is True
        assert (tmp_path / "a.ts").read_text(encoding="utf-8") == "ab"

    async def test_unchanged_file_warns(self, tmp_path):
        (tmp_path / "a.ts").write_text("a", encoding="utf-8")
        with patch("solidified.adapters.base.print_warning") as warn:
            changed = await patch_project_file(tmp_path, "a.ts", lambda s: s)
        assert changed is False
        warn.assert_called_once()
        assert "a.ts" in warn.call_args.args[0]
