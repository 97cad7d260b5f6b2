from __future__ import annotations

from typing import Dict, Optional

from ..models import DialogOutcome, DomPathResult, DomStatus, NativePathResult

_DOM_OUTCOMES: Dict[DomStatus, DialogOutcome] = {
    "confirmed": DialogOutcome.DOM_CONFIRMED,
    "canceled": DialogOutcome.DOM_CANCELED,
    "no-surface": DialogOutcome.DOM_NO_SURFACE,
    "errored": DialogOutcome.DOM_ERROR,
}


def classify_outcome(
    native: Optional[NativePathResult],
    dom: Optional[DomPathResult],
) -> DialogOutcome:
    """Merge the two path results into one outcome.

    An accepted native dialog wins over anything the DOM path saw. A path that
    produced nothing, or a DOM path that only ran out its wait, counts as no
    signal; with no signal at all the result is TIMED_OUT.
    """

    if native is not None and native.status == "accepted":
        return DialogOutcome.NATIVE_ACCEPTED
    if dom is None:
        return DialogOutcome.TIMED_OUT
    return _DOM_OUTCOMES.get(dom.status, DialogOutcome.TIMED_OUT)
