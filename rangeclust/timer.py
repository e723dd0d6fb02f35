"""A small stopwatch for timing stages of processing."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable


class Units(Enum):
    """Units a :class:`Timer` can report in."""

    MICRO = 1_000
    MILLI = 1_000_000


@dataclass
class Timer:
    """Stopwatch that restarts each time it is read.

    ``clock`` returns the current time in nanoseconds.
    """

    clock: Callable[[], int] = time.perf_counter_ns
    _start: int = field(init=False, default=0, repr=False)

    def __post_init__(self) -> None:
        self._start = self.clock()

    def start(self) -> None:
        """Restart the stopwatch."""
        self._start = self.clock()

    def measure(self, units: Units = Units.MICRO) -> int:
        """Return whole units elapsed since the last start, then restart."""
        end = self.clock()
        elapsed = (end - self._start) // units.value
        self._start = end
        return elapsed