from __future__ import annotations

import asyncio
import dataclasses
import logging
from typing import Optional

from playwright.async_api import Dialog, Page
from playwright.async_api import Error as PlaywrightError

from ..config import RunConfig
from ..models import DialogOutcome, DomPathResult, NativePathResult
from .buttons import click_control, find_button, scroll_into_view
from .cancel import try_cancel
from .capture import ScreenshotCapture
from .errors import SurfaceTimeoutError
from .outcome import classify_outcome
from .scope import Scope
from .surface import wait_for_surface


class ConfirmRace:
    """Race a native browser dialog against the in-page dialog after a click.

    Call ``arm()`` before the click that may open a dialog so the native
    ``dialog`` event cannot be missed, then ``resolve()`` afterwards. Both paths
    share one deadline; once it passes the race stops waiting but still lets
    in-flight clicks and screenshots finish before classifying.
    """

    def __init__(
        self,
        scope: Scope,
        page: Page,
        capture: ScreenshotCapture,
        config: RunConfig,
    ) -> None:
        self.scope = scope
        self.page = page
        self.capture = capture
        self.config = config
        self._dialog_future: Optional[asyncio.Future] = None
        self._accept_task: Optional[asyncio.Task] = None

    def arm(self) -> None:
        if self._dialog_future is not None:
            return
        self._dialog_future = asyncio.get_running_loop().create_future()
        self.page.once("dialog", self._on_dialog)

    def _disarm(self) -> None:
        self.page.remove_listener("dialog", self._on_dialog)

    def _on_dialog(self, dialog: Dialog) -> None:
        # The page stays blocked until the dialog is handled, so accept right away.
        if self._accept_task is None:
            self._accept_task = asyncio.ensure_future(self._accept(dialog))

    async def _accept(self, dialog: Dialog) -> NativePathResult:
        try:
            await dialog.accept()
        except PlaywrightError as exc:
            logging.warning("native_dialog_accept_failed type=%s reason=%s", dialog.type, exc)
            print(f"[native] error while accepting the {dialog.type} dialog: {exc}")
            result = NativePathResult(status="failed", dialog_type=dialog.type, message=dialog.message)
        else:
            print(f"[native] {dialog.type} dialog accepted")
            result = NativePathResult(status="accepted", dialog_type=dialog.type, message=dialog.message)
        if self._dialog_future is not None and not self._dialog_future.done():
            self._dialog_future.set_result(result)
        return result

    @staticmethod
    def _remaining_ms(deadline: float) -> int:
        return max(0, int((deadline - asyncio.get_running_loop().time()) * 1000))

    async def _native_path(self, deadline: float) -> NativePathResult:
        if self._dialog_future is None:
            raise RuntimeError("ConfirmRace not armed. Call arm() before resolving.")
        timeout = max(0.0, deadline - asyncio.get_running_loop().time())
        await asyncio.wait({self._dialog_future}, timeout=timeout)
        if self._accept_task is None:
            self._disarm()
            return NativePathResult(status="silent")
        # An accept already in flight is allowed to finish past the deadline.
        return await self._accept_task

    async def _dom_path(self, deadline: float) -> DomPathResult:
        try:
            return await self._drive_dom(deadline)
        except Exception as exc:  # noqa: BLE001
            logging.warning("dom_dialog_failed reason=%r", exc)
            print(f"[confirm] error while handling the dialog: {exc}")
            return DomPathResult(status="errored", error=str(exc))

    async def _drive_dom(self, deadline: float) -> DomPathResult:
        try:
            surface = await wait_for_surface(self.scope, self._remaining_ms(deadline))
        except SurfaceTimeoutError:
            print("[confirm] no dialog surface before the deadline")
            return DomPathResult(status="lapsed")

        canceled = await try_cancel(
            self.scope,
            self.page,
            self.capture,
            timeout_ms=self.config.cancel_wait_ms,
            click_timeout_ms=self.config.click_timeout_ms,
            detach_timeout_ms=self.config.detach_timeout_ms,
            settle_ms=self.config.settle_ms,
        )
        if canceled:
            print("[confirm] cancel clicked, skipping the confirm step")
            return DomPathResult(status="canceled", screenshot_path=self.capture.paths[-1])

        button = await find_button(surface, "confirm")
        if button is None:
            print("[confirm] no confirm button inside the dialog, skipping")
            return DomPathResult(status="no-surface")

        shot = await self.capture.capture("before_confirm")
        print(f"[screenshot] saved before confirm (full page): {shot}")

        await scroll_into_view(button)
        await click_control(button, self.config.click_timeout_ms)
        print("[confirm] confirm button clicked")
        return DomPathResult(status="confirmed", screenshot_path=shot)

    async def resolve(self) -> DialogOutcome:
        self.arm()
        loop = asyncio.get_running_loop()
        timeout = self.config.confirm_timeout_ms / 1000
        deadline = loop.time() + timeout

        native_task = asyncio.create_task(self._native_path(deadline))
        dom_task = asyncio.create_task(self._dom_path(deadline))

        _, pending = await asyncio.wait({native_task, dom_task}, timeout=timeout)
        if pending:
            logging.info("confirm_deadline_reached pending=%s", len(pending))
        native, dom = await asyncio.gather(native_task, dom_task)

        outcome = classify_outcome(native, dom)
        logging.debug(
            "confirm_race native=%s dialog_type=%s dialog_message=%r dom=%s screenshot=%s error=%s outcome=%s",
            native.status,
            native.dialog_type,
            native.message,
            dom.status,
            dom.screenshot_path,
            dom.error,
            outcome.value,
        )
        return outcome


async def run_popup_resolution(
    scope: Scope,
    page: Page,
    timeout_ms: int,
    capture: ScreenshotCapture,
    config: Optional[RunConfig] = None,
) -> DialogOutcome:
    """One-shot race for callers that did not arm a listener before clicking."""

    base = config or RunConfig(object_alt="")
    race = ConfirmRace(scope, page, capture, dataclasses.replace(base, confirm_timeout_ms=timeout_ms))
    return await race.resolve()
