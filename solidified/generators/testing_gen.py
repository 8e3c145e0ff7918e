"""Testing generators: Vitest (unit) and Playwright (end-to-end)."""

from __future__ import annotations

from pathlib import Path

from ..adapters import get_adapter
from ..models import ProjectConfig
from ..package_manager import run_script_command
from ..project import (
    add_dependencies,
    add_scripts,
    append_to_file,
    file_exists,
    write_project_file,
)
from .base import Generator

VITEST_CONFIG = """\
import { defineConfig } from "vitest/config";
import solid from "vite-plugin-solid";

export default defineConfig({
  plugins: [solid()],
  test: {
    environment: "jsdom",
    globals: true,
    setupFiles: ["./src/test/setup.ts"],
  },
  resolve: {
    conditions: ["development", "browser"],
  },
});
"""

VITEST_SETUP = """\
import "@testing-library/jest-dom/vitest";
"""

VITEST_EXAMPLE = """\
import { describe, expect, it } from "vitest";

describe("Example", () => {
  it("should work", () => {
    expect(true).toBe(true);
  });
});
"""

PLAYWRIGHT_EXAMPLE = """\
import { test, expect } from "@playwright/test";

test("homepage has title", async ({ page }) => {
  await page.goto("/");
  await expect(page.locator("h1, h2").first()).toBeVisible();
});
"""


class VitestGenerator(Generator):
    name = "vitest"

    async def apply(self, directory: Path, config: ProjectConfig) -> None:
        await add_dependencies(
            directory,
            {
                "vitest": "^3",
                "jsdom": "^26",
                "@solidjs/testing-library": "^0.8",
                "@testing-library/jest-dom": "^6",
            },
            dev=True,
        )
        await add_scripts(
            directory,
            {
                "test": "vitest",
                "test:ui": "vitest --ui",
                "test:coverage": "vitest --coverage",
            },
        )

        await write_project_file(directory, "vitest.config.ts", VITEST_CONFIG)
        await write_project_file(directory, "src/test/setup.ts", VITEST_SETUP)
        await write_project_file(directory, "src/test/example.test.ts", VITEST_EXAMPLE)


class PlaywrightGenerator(Generator):
    """Playwright config targeting the framework's dev server."""

    name = "playwright"

    async def apply(self, directory: Path, config: ProjectConfig) -> None:
        adapter = get_adapter(config.framework)
        dev_command = f"{run_script_command(config.package_manager)} dev"

        await add_dependencies(directory, {"@playwright/test": "^1"}, dev=True)
        await add_scripts(
            directory,
            {
                "test:e2e": "playwright test",
                "test:e2e:ui": "playwright test --ui",
                "test:e2e:headed": "playwright test --headed",
            },
        )

        await write_project_file(
            directory,
            "playwright.config.ts",
            _build_playwright_config(adapter.dev_port, dev_command),
        )
        await write_project_file(directory, "e2e/example.spec.ts", PLAYWRIGHT_EXAMPLE)

        if file_exists(directory, ".gitignore"):
            await append_to_file(
                directory, ".gitignore", "test-results\nplaywright-report\n"
            )


def _build_playwright_config(dev_port: int, dev_command: str) -> str:
    base_url = f"http://localhost:{dev_port}"
    return f"""\
import {{ defineConfig, devices }} from "@playwright/test";

export default defineConfig({{
  testDir: "./e2e",
  fullyParallel: true,
  forbidOnly: !!process.env.CI,
  retries: process.env.CI ? 2 : 0,
  workers: process.env.CI ? 1 : undefined,
  reporter: "html",
  use: {{
    baseURL: "{base_url}",
    trace: "on-first-retry",
    screenshot: "only-on-failure",
    video: "retain-on-failure",
  }},
  projects: [
    {{
      name: "chromium",
      use: {{ ...devices["Desktop Chrome"] }},
    }},
    {{
      name: "firefox",
      use: {{ ...devices["Desktop Firefox"] }},
    }},
    {{
      name: "webkit",
      use: {{ ...devices["Desktop Safari"] }},
    }},
  ],
  webServer: {{
    command: "{dev_command}",
    url: "{base_url}",
    reuseExistingServer: !process.env.CI,
  }},
}});
"""
