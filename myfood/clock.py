from __future__ import annotations

import time
from typing import Callable

# Returns the current wall-clock time in epoch milliseconds.
Clock = Callable[[], int]


def system_clock() -> int:
    return int(time.time() * 1000)
