from __future__ import annotations

import logging

from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from .buttons import click_control, find_button, scroll_into_view
from .capture import ScreenshotCapture
from .errors import SurfaceTimeoutError
from .scope import Scope
from .surface import wait_for_surface


async def try_cancel(
    scope: Scope,
    page: Page,
    capture: ScreenshotCapture,
    timeout_ms: int = 10000,
    click_timeout_ms: int = 2000,
    detach_timeout_ms: int = 3000,
    settle_ms: int = 300,
) -> bool:
    """Click the ripple "cancel" control of the visible dialog surface.

    Returns False when no surface shows up or it has no cancel control. A
    control that is found but cannot be clicked raises ClickFailedError.
    """

    try:
        surface = await wait_for_surface(scope, timeout_ms)
    except SurfaceTimeoutError:
        print("[cancel] no dialog surface appeared, skipping")
        return False

    button = await find_button(surface, "cancel")
    if button is None:
        print("[cancel] no cancel button inside the dialog, skipping")
        return False

    shot = await capture.capture("before_cancel")
    print(f"[screenshot] saved before cancel (full page): {shot}")

    await scroll_into_view(button)
    await click_control(button, click_timeout_ms)
    try:
        await surface.wait_for(state="detached", timeout=detach_timeout_ms)
    except PlaywrightTimeoutError:
        logging.debug("surface_detach_timeout timeout_ms=%s", detach_timeout_ms)
    await page.wait_for_timeout(settle_ms)

    print("[cancel] cancel button clicked")
    return True
