from __future__ import annotations

import logging
import re
from typing import Callable, Dict, List, Optional, Tuple

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator

from ..models import ButtonIntent
from .errors import ClickFailedError

RIPPLE_SELECTOR = "span.javascriptMaterialdesignGm3WizRipple-ripple"

CANCEL_TEXT = re.compile(r"(^|\s)(취소|Cancel)(\s|$)", re.IGNORECASE)
CONFIRM_TEXT = re.compile(r"(^|\s)(확인|OK)(\s|$)", re.IGNORECASE)

CANCEL_ROLE_SELECTOR = f'[role="button"]:has({RIPPLE_SELECTOR})'
CANCEL_BUTTON_SELECTOR = f"button:has({RIPPLE_SELECTOR})"
CANCEL_ARIA_SELECTOR = ", ".join(
    f'{base}[aria-label*="{word}" i]:has({RIPPLE_SELECTOR})'
    for base in ('[role="button"]', "button")
    for word in ("취소", "cancel")
)
CONFIRM_ANY_SELECTOR = 'button, [role="button"]'

ButtonStrategy = Tuple[str, Callable[[Locator], Locator]]

STRATEGIES: Dict[ButtonIntent, List[ButtonStrategy]] = {
    "cancel": [
        ("role_button_ripple_text", lambda s: s.locator(CANCEL_ROLE_SELECTOR).filter(has_text=CANCEL_TEXT)),
        ("button_ripple_text", lambda s: s.locator(CANCEL_BUTTON_SELECTOR).filter(has_text=CANCEL_TEXT)),
        ("aria_label_ripple", lambda s: s.locator(CANCEL_ARIA_SELECTOR)),
    ],
    "confirm": [
        ("role_button_name", lambda s: s.get_by_role("button", name=CONFIRM_TEXT)),
        ("button_like_text", lambda s: s.locator(CONFIRM_ANY_SELECTOR).filter(has_text=CONFIRM_TEXT)),
    ],
}


async def _safe_count(candidates: Locator) -> int:
    try:
        return await candidates.count()
    except PlaywrightError as exc:
        logging.debug("button_count_failed reason=%s", exc)
        return 0


async def find_button(surface: Locator, intent: ButtonIntent) -> Optional[Locator]:
    """First element of the first strategy that matches anything, or None."""

    for name, build in STRATEGIES[intent]:
        candidates = build(surface)
        count = await _safe_count(candidates)
        if count:
            logging.debug("button_match intent=%s strategy=%s count=%s", intent, name, count)
            return candidates.first
    logging.debug("button_missing intent=%s", intent)
    return None


async def scroll_into_view(control: Locator) -> None:
    try:
        await control.scroll_into_view_if_needed()
    except PlaywrightError as exc:
        logging.debug("scroll_into_view_failed reason=%s", exc)


async def click_control(control: Locator, timeout_ms: int) -> None:
    try:
        await control.click(timeout=timeout_ms)
    except PlaywrightError as exc:
        raise ClickFailedError(f"Dialog control could not be clicked: {exc}") from exc
