from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page


class ScreenshotCapture:
    """Full-page screenshots named ``<YYYYmmdd_HHMMSS>_<tag>.png`` under one directory."""

    def __init__(self, page: Page, screenshot_dir: Path | str) -> None:
        self.page = page
        self.screenshot_dir = Path(screenshot_dir)
        self.paths: list[Path] = []

    def path_for(self, tag: str) -> Path:
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        return self.screenshot_dir / f"{stamp}_{tag}.png"

    async def capture(self, tag: str) -> Path:
        self.screenshot_dir.mkdir(parents=True, exist_ok=True)
        path = self.path_for(tag)
        try:
            await self.page.screenshot(path=str(path), full_page=True)
        except PlaywrightError as exc:
            # The audit line still names the intended path.
            logging.warning("screenshot_failed tag=%s path=%s reason=%s", tag, path, exc)
        self.paths.append(path)
        return path
