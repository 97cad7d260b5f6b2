from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from ..config import RunConfig, Settings
from ..models import DialogOutcome
from .browser import BrowserSession
from .capture import ScreenshotCapture
from .confirm_race import ConfirmRace
from .errors import ClickFailedError
from .scope import Scope, resolve_scope

CONTAINER_SELECTOR = ":scope > div.waffle-borderless-embedded-object-container"

OUTCOME_MESSAGES = {
    DialogOutcome.NATIVE_ACCEPTED: "Click and popup handling done (native dialog accepted)",
    DialogOutcome.DOM_CONFIRMED: "Click and popup handling done (confirm button clicked)",
    DialogOutcome.DOM_CANCELED: "Click and popup handling done (cancel button clicked)",
    DialogOutcome.DOM_NO_SURFACE: "Click done (no actionable popup surface)",
    DialogOutcome.DOM_ERROR: "Click done (error while handling the popup)",
    DialogOutcome.TIMED_OUT: "Click done (popup search timed out)",
}


async def click_overlay(scope: Scope, page: Page, config: RunConfig) -> None:
    """Click the overlay's embedded container (or the overlay itself).

    Falls back to a mouse click at the centre of the target when the element
    click is refused.
    """

    overlay = scope.find_by_label(config.object_alt).first
    await scope.wait_visible(overlay, config.overlay_visible_timeout_ms)

    container = overlay.locator(CONTAINER_SELECTOR).first
    target = container if await container.count() > 0 else overlay
    await target.scroll_into_view_if_needed()

    try:
        await target.click(delay=config.click_delay_ms)
    except PlaywrightError as exc:
        logging.debug("overlay_click_failed reason=%s falling_back=mouse", exc)
        box = await target.bounding_box()
        if not box:
            raise ClickFailedError("Could not read a bounding box for the overlay target") from exc
        await page.mouse.click(
            box["x"] + box["width"] / 2,
            box["y"] + box["height"] / 2,
            delay=config.click_delay_ms,
        )


async def run_click_and_confirm(
    settings: Settings,
    config: Optional[RunConfig] = None,
    browser_factory: Callable[[Settings], BrowserSession] = BrowserSession,
) -> DialogOutcome:
    """Open the sheet, click the labelled object and resolve whatever popup follows."""

    config = config or RunConfig.from_settings(settings)
    print(f"[run] target object '{config.object_alt}' confirm_timeout_ms={config.confirm_timeout_ms}")

    async with browser_factory(settings) as browser:
        await browser.goto(settings.sheet_url, wait_ms=settings.post_load_wait_ms)
        page = browser.page
        if page is None:
            raise RuntimeError("Browser page is not initialized")

        scope = await resolve_scope(
            Scope.document(page),
            config.object_alt,
            max_wait_ms=config.scope_max_wait_ms,
            poll_interval_ms=config.scope_poll_interval_ms,
        )

        capture = ScreenshotCapture(page, config.screenshot_dir)
        race = ConfirmRace(scope, page, capture, config)
        race.arm()

        await click_overlay(scope, page, config)
        shot = await capture.capture("before_any")
        print(f"[screenshot] saved right after the click: {shot}")

        outcome = await race.resolve()

        await page.wait_for_timeout(config.post_outcome_wait_ms)
        print(f"[run] {OUTCOME_MESSAGES[outcome]}")
        return outcome


def run_click_and_confirm_blocking(settings: Settings, config: Optional[RunConfig] = None) -> DialogOutcome:
    """Synchronous wrapper for CLI usage."""

    return asyncio.run(run_click_and_confirm(settings, config))
