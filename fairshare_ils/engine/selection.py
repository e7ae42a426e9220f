"""Fitness-proportionate (roulette wheel) option selection."""

from __future__ import annotations

import numpy as np
from numba import njit


@njit(cache=True)
def roulette_index(scores, p):
    """Walk the cumulative score sum until it reaches ``p``.

    The walk never advances past the last index, so rounding that leaves
    ``p`` at (or just above) the total still selects the final option.
    """

    last = scores.shape[0] - 1
    selected = 0
    ac = scores[0]
    while ac < p and selected < last:
        selected += 1
        ac += scores[selected]
    return selected


def select_option(scores, rng):
    """Draw an option index with probability proportional to its score."""
    scores = np.asarray(scores, dtype=np.float64)
    top = float(scores.max())
    if not np.isfinite(top) or top <= 0.0:
        return scores.shape[0] - 1
    # rescale so the seeded near-float-max scores cannot overflow the sum
    weights = scores / top
    norm = float(weights.sum())
    p = rng.uniform01() * norm
    return int(roulette_index(weights, p))
