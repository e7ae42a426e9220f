"""Adaptive restart controller ("restart when stuck")."""

from __future__ import annotations

from .state import RunState, SearchState


def patience(max_wait: int, elapsed: int, time_limit: int) -> float:
    """Stagnation threshold: ``max_wait`` scaled by budget / elapsed.

    Elapsed time is clamped to one unit so the very first iterations of a
    search get a large but finite patience.
    """

    return max_wait * (float(time_limit) / max(elapsed, 1))


def check_restart(run: RunState, search: SearchState, elapsed: int, time_limit: int) -> bool:
    """Update stagnation bookkeeping and return True if the run should restart."""

    if run.e_current < run.e_run_best:
        run.e_run_best = run.e_current
        search.max_wait = max(run.wait, search.max_wait)
        run.wait = 0
        since_start = elapsed - run.run_start
        if run.e_run_best < search.e_best:
            search.e_best = run.e_run_best
            search.t_best = since_start
        elif run.e_run_best == search.e_best:
            search.t_best = min(since_start, search.t_best)
        return False

    run.wait += 1
    return (
        search.max_wait > 0
        and run.wait > patience(search.max_wait, elapsed, time_limit)
        and (time_limit - elapsed) >= search.t_best
    )
