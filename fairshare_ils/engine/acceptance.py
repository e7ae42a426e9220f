import numpy as np


def acceptance_probability(e_current, e_proposed, temperature, mean_improvement):
    """exp((e_current - e_proposed) / (T * mean_improvement)), possibly > 1.

    Before any improvement has been observed the denominator is zero; the
    limit is taken instead: +inf for a non-negative numerator, 0 otherwise.
    """
    delta = e_current - e_proposed
    denom = temperature * mean_improvement
    if denom <= 0.0:
        return np.inf if delta >= 0.0 else 0.0
    with np.errstate(over="ignore"):
        return float(np.exp(delta / denom))


def accept_solution(e_current, e_proposed, temperature, stats, rng):
    stats.observe(e_current, e_proposed)
    p = acceptance_probability(e_current, e_proposed, temperature, stats.mean_improvement)
    return rng.uniform01() < p
