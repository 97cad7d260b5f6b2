from __future__ import annotations

from playwright.async_api import Locator
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from .errors import SurfaceTimeoutError
from .scope import Scope

SURFACE_SELECTOR = ".javascriptMaterialdesignGm3WizDialog-dialog__surface"


async def wait_for_surface(scope: Scope, timeout_ms: int) -> Locator:
    """Wait until the most recently attached dialog surface in ``scope`` is visible."""

    # Playwright reads a zero timeout as "wait forever".
    if timeout_ms <= 0:
        raise SurfaceTimeoutError("No time left to wait for a dialog surface")

    surface = scope.locator(SURFACE_SELECTOR).last
    try:
        await scope.wait_visible(surface, timeout_ms)
    except PlaywrightTimeoutError as exc:
        raise SurfaceTimeoutError(f"No dialog surface became visible within {timeout_ms} ms") from exc
    return surface
