"""Search state split by lifetime: per-run (discarded on restart) and persistent."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field

import numpy as np


@dataclass
class OptionStats:
    """Fair-share credit for every option of one run.

    ``time_spent`` starts at 1 so scores are always defined; ``score`` starts
    at an equal, very large constant so early selection is uniform.
    """

    successes: np.ndarray
    time_spent: np.ndarray
    applications: np.ndarray
    score: np.ndarray

    @classmethod
    def fresh(cls, n_options: int) -> "OptionStats":
        if n_options < 1:
            raise ValueError("at least one option is required")
        return cls(
            successes=np.zeros(n_options, dtype=np.int64),
            time_spent=np.ones(n_options, dtype=np.int64),
            applications=np.zeros(n_options, dtype=np.int64),
            score=np.full(n_options, sys.float_info.max / n_options, dtype=np.float64),
        )

    @property
    def n_options(self) -> int:
        return int(self.score.shape[0])

    def record(self, option: int, cost: int, improved: bool) -> None:
        self.applications[option] += 1
        self.time_spent[option] += max(int(cost), 1)
        if improved:
            self.successes[option] += 1
        self.score[option] = (1.0 + self.successes[option]) / self.time_spent[option]


@dataclass
class AcceptanceStats:
    mean_improvement: float = 0.0
    improvement_count: int = 0

    def observe(self, e_current: float, e_proposed: float) -> None:
        if e_proposed < e_current:
            self.improvement_count += 1
            self.mean_improvement += (
                e_current - e_proposed - self.mean_improvement
            ) / self.improvement_count


@dataclass
class RunState:
    """Everything (re-)initialised at the start of a run."""

    options: OptionStats
    acceptance: AcceptanceStats = field(default_factory=AcceptanceStats)
    e_current: float = np.inf
    e_proposed: float = np.inf
    e_run_best: float = np.inf
    wait: int = 0
    run_start: int = 0


@dataclass
class SearchState:
    """Everything that survives restarts for the whole search."""

    n_options: int
    max_wait: int = 1
    e_best: float = np.inf
    t_best: int = 0
    restarts: int = 0
    iterations: int = 0
    total_successes: np.ndarray = field(init=False)
    total_applications: np.ndarray = field(init=False)

    def __post_init__(self) -> None:
        self.total_successes = np.zeros(self.n_options, dtype=np.int64)
        self.total_applications = np.zeros(self.n_options, dtype=np.int64)
