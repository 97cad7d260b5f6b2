import pytest

from sheet_clicker.agent.outcome import classify_outcome
from sheet_clicker.models import OUTCOME_PRECEDENCE, DialogOutcome, DomPathResult, NativePathResult

ACCEPTED = NativePathResult(status="accepted", dialog_type="confirm")
SILENT = NativePathResult(status="silent")
FAILED = NativePathResult(status="failed", dialog_type="alert")


@pytest.mark.parametrize(
    "native, dom, expected",
    [
        (ACCEPTED, DomPathResult(status="confirmed"), DialogOutcome.NATIVE_ACCEPTED),
        (ACCEPTED, DomPathResult(status="canceled"), DialogOutcome.NATIVE_ACCEPTED),
        (ACCEPTED, DomPathResult(status="lapsed"), DialogOutcome.NATIVE_ACCEPTED),
        (SILENT, DomPathResult(status="confirmed"), DialogOutcome.DOM_CONFIRMED),
        (SILENT, DomPathResult(status="canceled"), DialogOutcome.DOM_CANCELED),
        (SILENT, DomPathResult(status="no-surface"), DialogOutcome.DOM_NO_SURFACE),
        (SILENT, DomPathResult(status="errored"), DialogOutcome.DOM_ERROR),
        (SILENT, DomPathResult(status="lapsed"), DialogOutcome.TIMED_OUT),
        (FAILED, DomPathResult(status="lapsed"), DialogOutcome.TIMED_OUT),
        (FAILED, DomPathResult(status="errored"), DialogOutcome.DOM_ERROR),
        (None, None, DialogOutcome.TIMED_OUT),
        (SILENT, None, DialogOutcome.TIMED_OUT),
    ],
)
def test_classification_table(native, dom, expected):
    assert classify_outcome(native, dom) is expected


def test_classification_is_pure():
    dom = DomPathResult(status="canceled")
    results = {classify_outcome(SILENT, dom) for _ in range(5)}
    assert results == {DialogOutcome.DOM_CANCELED}


def test_precedence_covers_every_outcome_once():
    assert list(OUTCOME_PRECEDENCE) == list(DialogOutcome)
    assert DialogOutcome("dom-no-surface") is DialogOutcome.DOM_NO_SURFACE
