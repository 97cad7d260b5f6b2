import io

from sheet_clicker.agent.prompt import ask, decide


def test_decide_keys():
    assert decide("y") is False
    assert decide("Y") is False
    assert decide("n") is True
    assert decide("\n") is True
    assert decide("\r") is True
    assert decide("x") is None


def test_ask_without_terminal_continues():
    out = io.StringIO()

    assert ask("Stop? (Y/N)", seconds=5, stream=io.StringIO("y\n"), out=out) is True
    assert "continuing" in out.getvalue()
