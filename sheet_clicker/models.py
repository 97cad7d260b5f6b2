from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Literal, Optional

ButtonIntent = Literal["cancel", "confirm"]

# "silent": no native dialog fired before the deadline.
NativeStatus = Literal["accepted", "failed", "silent"]

# "lapsed": the surface wait used up the whole shared deadline without a signal.
DomStatus = Literal["confirmed", "canceled", "no-surface", "errored", "lapsed"]


class DialogOutcome(str, Enum):
    NATIVE_ACCEPTED = "native-accepted"
    DOM_CONFIRMED = "dom-confirmed"
    DOM_CANCELED = "dom-canceled"
    DOM_NO_SURFACE = "dom-no-surface"
    DOM_ERROR = "dom-error"
    TIMED_OUT = "timed-out"


# Highest precedence first.
OUTCOME_PRECEDENCE: tuple[DialogOutcome, ...] = (
    DialogOutcome.NATIVE_ACCEPTED,
    DialogOutcome.DOM_CONFIRMED,
    DialogOutcome.DOM_CANCELED,
    DialogOutcome.DOM_NO_SURFACE,
    DialogOutcome.DOM_ERROR,
    DialogOutcome.TIMED_OUT,
)


@dataclass(frozen=True)
class NativePathResult:
    status: NativeStatus
    dialog_type: Optional[str] = None
    message: Optional[str] = None


@dataclass(frozen=True)
class DomPathResult:
    status: DomStatus
    screenshot_path: Optional[Path] = None
    error: Optional[str] = None
