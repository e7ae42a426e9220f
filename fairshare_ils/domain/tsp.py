"""Reference problem domain: symmetric TSP over a dense distance matrix."""

from __future__ import annotations

from typing import Callable, List, Optional

import numpy as np

from ..config.enums import LOCAL_SEARCH, MUTATION, N_SLOTS, RUIN_RECREATE
from ._numba_tsp import cheapest_insertion, or_opt_first, tour_length, two_opt_first


class TSPDomain:
    """Slot-addressed tour storage plus perturbation and local-search operators.

    Operator ids, in order: swap (mutation), double bridge (mutation),
    random removal + cheapest insertion (ruin-recreate), 2-opt and or-opt
    (local search). Every objective value computed is checked against the
    best seen so far, so callers can read ``best_value`` / ``best_tour``
    after a search.
    """

    def __init__(self, dist, seed=0, ruin_fraction=0.2, n_slots=N_SLOTS):
        dist = np.ascontiguousarray(dist, dtype=np.float64)
        if dist.ndim != 2 or dist.shape[0] != dist.shape[1]:
            raise ValueError("dist must have shape (n, n)")
        if dist.shape[0] == 0:
            raise ValueError("instance must contain at least one city")
        if not 0.0 < ruin_fraction <= 1.0:
            raise ValueError("ruin_fraction must lie in (0, 1]")

        self.dist = dist
        self.n = dist.shape[0]
        self.ruin_fraction = float(ruin_fraction)
        self.rng = np.random.default_rng(seed)

        self._tours: List[Optional[np.ndarray]] = [None] * n_slots
        self._values = np.full(n_slots, np.inf, dtype=np.float64)
        self.best_value = np.inf
        self.best_tour: Optional[np.ndarray] = None

        self._operators: List[tuple[int, Callable[[np.ndarray], np.ndarray]]] = [
            (MUTATION, self._swap),
            (MUTATION, self._double_bridge),
            (RUIN_RECREATE, self._ruin_recreate),
            (LOCAL_SEARCH, self._two_opt),
            (LOCAL_SEARCH, self._or_opt),
        ]

    @property
    def n_operators(self) -> int:
        return len(self._operators)

    # ------------------------------------------------------------------
    # ProblemDomain interface
    # ------------------------------------------------------------------
    def initialise(self, slot: int) -> None:
        self._store(slot, self.rng.permutation(self.n).astype(np.int64))

    def evaluate(self, slot: int) -> float:
        self._tour(slot)
        return float(self._values[slot])

    def apply(self, op: int, src: int, dst: int) -> float:
        if not 0 <= op < len(self._operators):
            raise IndexError(f"unknown operator id {op}")
        _, fn = self._operators[op]
        tour = fn(self._tour(src).copy())
        return self._store(dst, tour)

    def copy(self, src: int, dst: int) -> None:
        self._tours[dst] = self._tour(src).copy()
        self._values[dst] = self._values[src]

    def equal_value(self, a: int, b: int) -> bool:
        return bool(np.isclose(self.evaluate(a), self.evaluate(b)))

    def operators_of_type(self, kind: int) -> List[int]:
        return [i for i, (k, _) in enumerate(self._operators) if k == kind]

    def solution(self, slot: int) -> np.ndarray:
        return self._tour(slot).copy()

    # ------------------------------------------------------------------
    def _tour(self, slot: int) -> np.ndarray:
        tour = self._tours[slot]
        if tour is None:
            raise ValueError(f"slot {slot} holds no solution")
        return tour

    def _store(self, slot: int, tour: np.ndarray) -> float:
        value = float(tour_length(self.dist, tour))
        self._tours[slot] = tour
        self._values[slot] = value
        if value < self.best_value:
            self.best_value = value
            self.best_tour = tour.copy()
        return value

    # operators --------------------------------------------------------
    def _swap(self, tour):
        if self.n < 2:
            return tour
        a, b = self.rng.choice(self.n, size=2, replace=False)
        tour[a], tour[b] = tour[b], tour[a]
        return tour

    def _double_bridge(self, tour):
        if self.n < 4:
            return self._swap(tour)
        p1, p2, p3 = np.sort(self.rng.choice(np.arange(1, self.n), size=3, replace=False))
        return np.concatenate((tour[:p1], tour[p2:p3], tour[p1:p2], tour[p3:]))

    def _ruin_recreate(self, tour):
        if self.n < 3:
            return tour
        k = min(self.n - 1, max(1, int(round(self.ruin_fraction * self.n))))
        mask = np.zeros(self.n, dtype=bool)
        mask[self.rng.choice(self.n, size=k, replace=False)] = True
        removed = tour[mask]
        self.rng.shuffle(removed)
        return cheapest_insertion(self.dist, tour[~mask], removed)

    def _two_opt(self, tour):
        two_opt_first(self.dist, tour)
        return tour

    def _or_opt(self, tour):
        or_opt_first(self.dist, tour)
        return tour
