"""Clock and random-source capabilities injected into the search loop."""

from __future__ import annotations

import time
from typing import Optional, Protocol

import numpy as np


class Clock(Protocol):
    def elapsed(self) -> int:
        """Milliseconds since the search started."""

    def time_limit(self) -> int:
        """Total budget in milliseconds."""

    def expired(self) -> bool:
        ...


class RandomSource(Protocol):
    def uniform01(self) -> float:
        """Uniform draw in ``[0, 1)``."""

    def uniform_int(self, lo: int, hi: int) -> int:
        """Uniform integer in ``[lo, hi)``."""


class WallClock:
    """Monotonic wall-clock budget measured in whole milliseconds."""

    def __init__(self, time_limit_ms: int):
        if time_limit_ms <= 0:
            raise ValueError("time_limit_ms must be positive")
        self._limit = int(time_limit_ms)
        self._start = time.perf_counter()

    def elapsed(self) -> int:
        return int((time.perf_counter() - self._start) * 1000.0)

    def time_limit(self) -> int:
        return self._limit

    def expired(self) -> bool:
        return self.elapsed() >= self._limit


class NumpyRandomSource:
    """``RandomSource`` backed by ``numpy.random.default_rng``."""

    def __init__(self, seed: Optional[int] = None):
        self.rng = np.random.default_rng(seed)

    def uniform01(self) -> float:
        return float(self.rng.random())

    def uniform_int(self, lo: int, hi: int) -> int:
        return int(self.rng.integers(lo, hi))
