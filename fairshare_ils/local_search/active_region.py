"""Randomised first-improvement sweep over a pool of local-search operators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import MutableSequence, Optional


@dataclass
class LocalSearchResult:
    value: float
    applications: int
    improvements: int


def local_search_pass(domain, buffer: MutableSequence[int], slot, value, rng, clock=None):
    """Refine ``slot`` in place until no operator improves it.

    ``buffer[i:]`` is the active region: operators not yet tried without
    success since the last improvement. A failing operator is swapped to
    position ``i`` and the region shrinks; any improvement re-activates the
    whole buffer. The buffer is reordered in place and keeps that order for
    the next pass. When ``clock`` reports expiry the pass stops after the
    operator application in flight.
    """

    k = len(buffer)
    i = 0
    applications = 0
    improvements = 0
    while i < k:
        j = rng.uniform_int(i, k)
        trial = domain.apply(buffer[j], slot, slot)
        applications += 1
        if trial < value:
            value = trial
            improvements += 1
            i = 0
        else:
            buffer[i], buffer[j] = buffer[j], buffer[i]
            i += 1
        if clock is not None and clock.expired():
            break
    return LocalSearchResult(value=value, applications=applications, improvements=improvements)
