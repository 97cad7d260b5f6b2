from __future__ import annotations

import os

from playwright.async_api import (
    BrowserContext,
    Page,
    Playwright,
    async_playwright,
)

from ..config import Settings


class BrowserSession:
    """Persistent-profile Chromium context with a single working page."""

    def __init__(self, settings: Settings, create_profile: bool = False) -> None:
        self.settings = settings
        self.context: BrowserContext | None = None
        self.page: Page | None = None
        self._playwright: Playwright | None = None
        self.user_data_dir = os.path.expanduser(settings.user_data_dir)
        self.create_profile = create_profile

    async def __aenter__(self) -> "BrowserSession":
        if self.create_profile:
            os.makedirs(self.user_data_dir, exist_ok=True)
        self._playwright = await async_playwright().start()
        try:
            self.context = await self._playwright.chromium.launch_persistent_context(
                user_data_dir=self.user_data_dir,
                headless=self.settings.headless,
                channel=self.settings.browser_channel or None,
                viewport={"width": self.settings.viewport_width, "height": self.settings.viewport_height},
                args=["--disable-blink-features=AutomationControlled"],
            )
        except Exception:
            await self._playwright.stop()
            raise
        self.page = await self.context.new_page()
        self.page.set_default_timeout(self.settings.default_timeout_ms)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        if self.context:
            await self.context.close()
        if self._playwright:
            await self._playwright.stop()

    async def goto(self, url: str, wait_ms: int = 3000) -> None:
        """
        Navigate to a URL and give the sheet a moment to render its overlays.
        """
        if not self.page:
            raise RuntimeError("Browser page is not initialized. Use within an async context manager.")

        await self.page.goto(url, wait_until="domcontentloaded", timeout=self.settings.navigation_timeout_ms)
        if wait_ms > 0:
            await self.page.wait_for_timeout(wait_ms)

    async def wait_until_closed(self) -> None:
        if not self.page:
            raise RuntimeError("Browser page is not initialized. Use within an async context manager.")
        await self.page.wait_for_event("close", timeout=0)

    def __repr__(self) -> str:
        return f"BrowserSession(user_data_dir={self.user_data_dir!r}, headless={self.settings.headless})"
