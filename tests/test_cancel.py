import asyncio

import pytest
from playwright.async_api import Error as PlaywrightError

from fake_playwright import FakePage, cancel_button, confirm_button, later, surface
from sheet_clicker.agent.cancel import try_cancel
from sheet_clicker.agent.capture import ScreenshotCapture
from sheet_clicker.agent.errors import ClickFailedError
from sheet_clicker.agent.scope import Scope


def run_cancel(page: FakePage, tmp_path, timeout_ms: int = 300) -> bool:
    capture = ScreenshotCapture(page, tmp_path)
    return asyncio.run(
        try_cancel(Scope.document(page), page, capture, timeout_ms=timeout_ms, detach_timeout_ms=200, settle_ms=10)
    )


def test_no_surface_is_not_an_error(tmp_path):
    page = FakePage()

    assert run_cancel(page, tmp_path, timeout_ms=100) is False
    assert page.screenshots == []


def test_surface_without_cancel_button_is_skipped(tmp_path):
    page = FakePage()
    page.body.append(surface(confirm_button("OK")))

    assert run_cancel(page, tmp_path) is False
    assert page.screenshots == []


def test_clicks_cancel_after_screenshot_and_waits_for_detach(tmp_path):
    page = FakePage()
    button = cancel_button("취소")
    dialog = page.body.append(surface(button))
    button.on_click = dialog.remove

    assert run_cancel(page, tmp_path) is True
    assert len(button.clicks) == 1
    assert button.clicks[0]["timeout"] == 2000
    assert len(page.shots_tagged("before_cancel")) == 1
    assert not dialog.attached


def test_waits_for_surface_that_appears_late(tmp_path):
    page = FakePage()
    button = cancel_button("Cancel")

    async def run():
        later(50, lambda: page.body.append(surface(button)))
        return await try_cancel(
            Scope.document(page), page, ScreenshotCapture(page, tmp_path), timeout_ms=500, detach_timeout_ms=50, settle_ms=0
        )

    assert asyncio.run(run()) is True
    assert len(button.clicks) == 1


def test_click_failure_propagates(tmp_path):
    page = FakePage()
    page.body.append(surface(cancel_button("취소", click_error=PlaywrightError("element is obscured"))))

    with pytest.raises(ClickFailedError):
        run_cancel(page, tmp_path)
    assert len(page.shots_tagged("before_cancel")) == 1
