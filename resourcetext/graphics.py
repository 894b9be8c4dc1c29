"""A text loading screen driven by progress messages."""

from __future__ import annotations

import random
import time
from typing import Iterable, Optional

_CLEAR = "\n" * 56


def loading_screen(
    recv: Iterable[Optional[str]], amt: int, min_millis: int, bar_size: int
) -> None:
    """Draw a progress bar for each message received, until ``amt`` have arrived.

    A ``None`` message advances the bar but keeps the previous text. Each frame
    stays up for a random 0.5 to 1.5 times ``min_millis`` milliseconds.
    """
    started = time.monotonic()
    message = ""
    counter = 0
    for value in recv:
        if value is not None:
            message = value
        filled = counter * bar_size // amt
        empty = max(bar_size - 1 - filled, 0)
        print(f"{_CLEAR}Loading...\n{message}\n{'=' * filled}{'_' * empty}\n", end="")
        delay = min_millis * (random.random() + 0.5) / 1000.0
        remaining = started + delay - time.monotonic()
        if remaining > 0:
            time.sleep(remaining)
        started = time.monotonic()
        counter += 1
        if counter >= amt:
            break