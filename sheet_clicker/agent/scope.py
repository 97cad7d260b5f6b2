"""Rendering contexts (the page document or one of its frames) and the overlay search across them."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import List, Literal, Optional, Union

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Frame, Locator, Page

from .errors import NotFoundError

ScopeKind = Literal["document", "frame"]

DomContext = Union[Page, Frame]

OVERLAY_SELECTOR = "div.waffle-borderless-embedded-object-overlay"


def _css_string(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def overlay_selector(label: str) -> str:
    """Exact and substring aria-label matches, joined so either one counts."""

    quoted = _css_string(label)
    return f'{OVERLAY_SELECTOR}[aria-label="{quoted}"], {OVERLAY_SELECTOR}[aria-label*="{quoted}"]'


def _descendant_frames(frame: Frame) -> List[Frame]:
    frames: List[Frame] = []
    for child in frame.child_frames:
        frames.append(child)
        frames.extend(_descendant_frames(child))
    return frames


@dataclass(frozen=True)
class Scope:
    kind: ScopeKind
    context: DomContext

    @classmethod
    def document(cls, page: Page) -> "Scope":
        return cls(kind="document", context=page)

    @classmethod
    def frame(cls, frame: Frame) -> "Scope":
        return cls(kind="frame", context=frame)

    @property
    def name(self) -> str:
        if self.kind == "document":
            return "document"
        return f"frame[{self.context.name or self.context.url}]"

    def locator(self, selector: str) -> Locator:
        return self.context.locator(selector)

    def find_by_label(self, label: str) -> Locator:
        return self.context.locator(overlay_selector(label))

    async def count_by_label(self, label: str) -> int:
        try:
            return await self.find_by_label(label).count()
        except PlaywrightError as exc:
            # Frames can detach between enumeration and the query.
            logging.debug("overlay_count_failed scope=%s reason=%s", self.name, exc)
            return 0

    def list_sub_scopes(self) -> List["Scope"]:
        """Frames below this scope in discovery order, re-read on every call."""

        if self.kind == "document":
            page = self.context
            return [Scope.frame(frame) for frame in page.frames if frame != page.main_frame]
        return [Scope.frame(frame) for frame in _descendant_frames(self.context)]

    async def wait_visible(self, locator: Locator, timeout_ms: int) -> None:
        await locator.wait_for(state="visible", timeout=timeout_ms)

    async def wait_for_timeout(self, ms: int) -> None:
        await self.context.wait_for_timeout(ms)


async def _find_in_pass(root: Scope, label: str) -> Optional[Scope]:
    if await root.count_by_label(label) > 0:
        return root
    for sub in root.list_sub_scopes():
        if await sub.count_by_label(label) > 0:
            return sub
    return None


async def resolve_scope(
    root: Scope,
    label: str,
    max_wait_ms: int = 20000,
    poll_interval_ms: int = 500,
) -> Scope:
    """Return the first scope (root, then frames) holding an overlay labelled ``label``.

    Exact and substring matches rank the same; the scope order decides.
    Raises NotFoundError once ``max_wait_ms`` has passed without a match.
    """

    loop = asyncio.get_running_loop()
    deadline = loop.time() + max_wait_ms / 1000

    found = await _find_in_pass(root, label)
    passes = 1
    while found is None and loop.time() < deadline:
        await root.wait_for_timeout(poll_interval_ms)
        found = await _find_in_pass(root, label)
        passes += 1

    if found is None:
        raise NotFoundError(f'No overlay with aria-label "{label}" appeared within {max_wait_ms} ms')

    logging.debug("scope_resolved scope=%s passes=%s", found.name, passes)
    print(f"[scope] overlay '{label}' found in {found.name}")
    return found
