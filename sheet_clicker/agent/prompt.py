from __future__ import annotations

import math
import select
import sys
import termios
import time
import tty
from typing import Optional, TextIO

DEFAULT_QUESTION = "Stop the run? (Y/N)"


def decide(key: str) -> Optional[bool]:
    """Map one keypress to a decision: y stops, n or Enter continues, anything else is ignored."""

    ch = key.lower()
    if ch == "y":
        return False
    if ch in {"n", "\r", "\n"}:
        return True
    return None


def _render(out: TextIO, question: str, remaining: int) -> None:
    out.write(f"\r{question}  |  continuing automatically in {remaining:2d}s   ")
    out.flush()


def ask(
    question: str = DEFAULT_QUESTION,
    seconds: int = 10,
    stream: Optional[TextIO] = None,
    out: Optional[TextIO] = None,
) -> bool:
    """Countdown prompt. Returns False to stop the run, True to continue.

    Running out the countdown counts as "continue". Without a terminal on
    ``stream`` there is nobody to answer, so the run continues right away.
    Ctrl+C surfaces as KeyboardInterrupt.
    """

    stream = stream or sys.stdin
    out = out or sys.stdout

    if not stream.isatty():
        out.write(f"{question}  |  no terminal attached, continuing\n")
        out.flush()
        return True

    fd = stream.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        deadline = time.monotonic() + seconds
        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return True
            _render(out, question, math.ceil(remaining))
            ready, _, _ = select.select([stream], [], [], min(1.0, remaining))
            if not ready:
                continue
            decision = decide(stream.read(1))
            if decision is not None:
                return decision
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        out.write("\n")
        out.flush()
