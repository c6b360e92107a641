from __future__ import annotations
import itertools
import sys
import time
from typing import TextIO

from dropfour.config import AI_THINKING_SPINNER, AI_THINK_DELAY_SEC


def ai_thinking(label: str = "AI is thinking", delay: float = AI_THINK_DELAY_SEC, out: TextIO | None = None) -> None:
    """
    Cosmetic pause before an AI move is shown. The search itself has
    already finished by the time this runs.
    """
    if delay <= 0:
        return
    if not AI_THINKING_SPINNER:
        time.sleep(delay)
        return

    stream = out or sys.stdout
    deadline = time.monotonic() + delay
    for frame in itertools.cycle("|/-\\"):
        if time.monotonic() >= deadline:
            break
        stream.write(f"\r{label}... {frame}")
        stream.flush()
        time.sleep(0.08)
    stream.write("\r" + " " * (len(label) + 10) + "\r")
    stream.flush()
