import numpy as np
import pytest

from fairshare_ils.config.enums import LOCAL_SEARCH, MUTATION


class StepClock:
    """Virtual clock advancing ``step`` ms every time elapsed time is read."""

    def __init__(self, time_limit=10**9, step=1, start=0):
        self.limit = time_limit
        self.step = step
        self.now = start

    def elapsed(self):
        t = self.now
        self.now += self.step
        return t

    def time_limit(self):
        return self.limit

    def expired(self):
        return self.now >= self.limit


class ScriptedRandom:
    """Replays scripted uniform draws, then falls back to a seeded generator."""

    def __init__(self, floats=(), seed=0):
        self.floats = list(floats)
        self.rng = np.random.default_rng(seed)

    def uniform01(self):
        if self.floats:
            return self.floats.pop(0)
        return float(self.rng.random())

    def uniform_int(self, lo, hi):
        return int(self.rng.integers(lo, hi))


class CounterDomain:
    """Objective is one integer per slot.

    Perturbations add ``perturb_step``; local-search operators subtract
    ``ls_step`` down to ``floor``.
    """

    def __init__(self, start=10, n_perturb=1, n_ls=2, ls_step=1, perturb_step=1, floor=0):
        self.start = start
        self.ls_step = ls_step
        self.perturb_step = perturb_step
        self.floor = floor
        self.perturb_ops = list(range(n_perturb))
        self.ls_ops = list(range(n_perturb, n_perturb + n_ls))
        self.values = [None, None]
        self.calls = []

    def initialise(self, slot):
        self.values[slot] = self.start

    def evaluate(self, slot):
        return float(self.values[slot])

    def apply(self, op, src, dst):
        self.calls.append(op)
        v = self.values[src]
        if op in self.perturb_ops:
            v = v + self.perturb_step
        else:
            v = max(self.floor, v - self.ls_step)
        self.values[dst] = v
        return float(v)

    def copy(self, src, dst):
        self.values[dst] = self.values[src]

    def equal_value(self, a, b):
        return self.values[a] == self.values[b]

    def operators_of_type(self, kind):
        if kind == MUTATION:
            return list(self.perturb_ops)
        if kind == LOCAL_SEARCH:
            return list(self.ls_ops)
        return []


@pytest.fixture
def step_clock():
    return StepClock()


@pytest.fixture
def counter_domain():
    return CounterDomain()
