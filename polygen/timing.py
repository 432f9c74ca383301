"""Measuring elapsed time for benchmark runs."""

from __future__ import annotations

import time
from typing import Callable, Optional

_MICROS = 1_000_000


def time_difference(later: tuple[int, int], earlier: tuple[int, int]) -> tuple[int, int]:
    """Subtract two (seconds, microseconds) stamps, borrowing a second if needed."""
    seconds = later[0] - earlier[0]
    micros = later[1] - earlier[1]
    if micros < 0:
        seconds -= 1
        micros += _MICROS
    return seconds, micros


class Stopwatch:
    """Context manager that records how long its block took, in seconds."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._start: Optional[float] = None
        self.elapsed: Optional[float] = None

    def __enter__(self) -> "Stopwatch":
        self.elapsed = None
        self._start = self._clock()
        return self

    def __exit__(self, *args: object) -> None:
        assert self._start is not None
        self.elapsed = self._clock() - self._start

    def per_iteration(self, iterations: int) -> float:
        """Return the elapsed time divided by ``iterations``."""
        if iterations <= 0:
            raise ValueError("the number of iterations must be positive")
        if self.elapsed is None:
            raise RuntimeError("the stopwatch has not finished a measurement")
        return self.elapsed / iterations