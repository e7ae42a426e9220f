"""Fair-share iterated local search: the search loop and its state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..config.config import DEFAULTS
from ..config.enums import (
    LOCAL_SEARCH,
    MUTATION,
    RUIN_RECREATE,
    SLOT_CURRENT,
    SLOT_PROPOSED,
    STATUS_ACCEPT,
    STATUS_BEST,
    STATUS_IMPROVE,
    STATUS_REJECT,
    STATUS_SAME,
)
from ..domain.protocol import ProblemDomain
from .acceptance import accept_solution
from .driver import apply_option
from .environment import NumpyRandomSource, WallClock
from .restart import check_restart
from .selection import select_option
from .state import OptionStats, RunState, SearchState


@dataclass
class SearchResult:
    best_value: float
    time_to_best: int
    iterations: int
    restarts: int
    search: SearchState
    run: RunState


class FairShareILS:
    """Iterated local search with fair-share option selection.

    Every iteration picks an option (a perturbation operator, or re-starting
    the candidate from scratch) by roulette wheel over its improvement rate per
    millisecond, refines the candidate with local search, accepts it with a
    probability calibrated on the mean improvement seen so far, and restarts
    the whole run once stagnation exceeds a patience learned from earlier runs.

    ``temperature`` defaults to ``params["temperature"]``. ``clock`` and ``rng``
    are the injected environment; both default to the wall clock
    (``params["time_limit_ms"]``) and a NumPy generator seeded with ``seed``.
    """

    def __init__(
        self,
        seed: int,
        temperature: Optional[float] = None,
        *,
        clock=None,
        rng=None,
        params: Optional[Dict[str, Any]] = None,
    ):
        if seed is None:
            raise ValueError("a random seed is required")
        self.params = DEFAULTS.copy()
        self.params.update(params or {})
        if temperature is None:
            temperature = self.params["temperature"]
        temperature = float(temperature)
        if not temperature > 0.0:
            raise ValueError("temperature must be positive")
        self.params["temperature"] = temperature

        self.seed = int(seed)
        self.temperature = temperature
        self.clock = clock
        self.rng = rng if rng is not None else NumpyRandomSource(self.seed)

        self.domain = None
        self.perturbation_ops: List[int] = []
        self.ls_buffer: List[int] = []
        self.run: Optional[RunState] = None
        self.search: Optional[SearchState] = None

    def __str__(self) -> str:
        return f"FairShareILS(T:{self.temperature})"

    @property
    def n_options(self) -> int:
        return len(self.perturbation_ops) + 1

    def solve(self, domain: ProblemDomain, metrics=None) -> SearchResult:
        if self.clock is None:
            self.clock = WallClock(int(self.params["time_limit_ms"]))
        self._setup(domain)
        self._init_run()

        iters = self.params.get("iters")
        log_period = max(1, int(self.params.get("log_period", 100)))
        while not self.clock.expired():
            if iters is not None and self.search.iterations >= int(iters):
                break
            option, status, restarted = self.step()
            it = self.search.iterations
            if metrics is not None and (it % log_period == 0 or it == 1 or restarted):
                self._log(metrics, it, option, status, restarted)

        return SearchResult(
            best_value=min(self.search.e_best, self.run.e_run_best),
            time_to_best=self.search.t_best,
            iterations=self.search.iterations,
            restarts=self.search.restarts,
            search=self.search,
            run=self.run,
        )

    def step(self):
        """One iteration: select, apply, accept, credit, maybe restart."""

        run, search, clock = self.run, self.search, self.clock
        before = clock.elapsed()
        option = select_option(run.options.score, self.rng)
        run.e_proposed = apply_option(
            self.domain, option, self.perturbation_ops, self.ls_buffer, self.rng, clock
        )
        cost = clock.elapsed() - before + 1

        status = STATUS_SAME
        improved = False
        if not self.domain.equal_value(SLOT_PROPOSED, SLOT_CURRENT):
            status = STATUS_REJECT
            if accept_solution(
                run.e_current, run.e_proposed, self.temperature, run.acceptance, self.rng
            ):
                improved = run.e_proposed < run.e_current
                if run.e_proposed < search.e_best:
                    status = STATUS_BEST
                elif improved:
                    status = STATUS_IMPROVE
                else:
                    status = STATUS_ACCEPT
                run.e_current = run.e_proposed
                self.domain.copy(SLOT_PROPOSED, SLOT_CURRENT)

        run.options.record(option, cost, improved)
        search.total_applications[option] += 1
        if improved:
            search.total_successes[option] += 1
        search.iterations += 1

        restarted = check_restart(run, search, clock.elapsed(), clock.time_limit())
        if restarted:
            search.restarts += 1
            self._init_run()
        return option, status, restarted

    def _setup(self, domain: ProblemDomain) -> None:
        # initialised once per search
        self.domain = domain
        self.perturbation_ops = list(domain.operators_of_type(MUTATION)) + list(
            domain.operators_of_type(RUIN_RECREATE)
        )
        self.ls_buffer = list(domain.operators_of_type(LOCAL_SEARCH))
        self.search = SearchState(
            n_options=self.n_options,
            max_wait=int(self.params.get("max_wait_init", 1)),
        )

    def _init_run(self) -> None:
        # (re-)initialised every restart
        self.domain.initialise(SLOT_CURRENT)
        e_current = self.domain.evaluate(SLOT_CURRENT)
        self.run = RunState(
            options=OptionStats.fresh(self.n_options),
            e_current=e_current,
            e_proposed=e_current,
            e_run_best=e_current,
            wait=0,
            run_start=self.clock.elapsed(),
        )

    def _log(self, metrics, it, option, status, restarted) -> None:
        run, search = self.run, self.search
        metrics.append(
            it,
            self.clock.elapsed(),
            option,
            status,
            run.e_current,
            run.e_proposed,
            run.e_run_best,
            search.e_best,
            wait=run.wait,
            max_wait=search.max_wait,
            mean_improvement=run.acceptance.mean_improvement,
            restart=restarted,
        )
