import numpy as np
import pytest

from conftest import ScriptedRandom
from fairshare_ils.engine.acceptance import accept_solution, acceptance_probability
from fairshare_ils.engine.state import AcceptanceStats


@pytest.mark.parametrize("mean", [0.0, 0.5, 3.0, 100.0])
@pytest.mark.parametrize("delta", [1e-9, 1.0, 42.0])
def test_improvement_probability_at_least_one(mean, delta):
    assert acceptance_probability(10.0, 10.0 - delta, 0.5, mean) >= 1.0


def test_improvement_always_accepted():
    stats = AcceptanceStats()
    assert accept_solution(10.0, 9.0, 0.5, stats, ScriptedRandom([0.999999]))


def test_worse_rejected_before_first_improvement():
    stats = AcceptanceStats()
    assert stats.mean_improvement == 0.0
    assert acceptance_probability(10.0, 11.0, 0.5, stats.mean_improvement) == 0.0
    assert not accept_solution(10.0, 11.0, 0.5, stats, ScriptedRandom([0.0]))
    assert stats.improvement_count == 0


def test_equal_value_accepted_before_first_improvement():
    assert acceptance_probability(10.0, 10.0, 0.5, 0.0) == np.inf


def test_mean_improvement_incremental_update():
    stats = AcceptanceStats()
    stats.observe(10.0, 7.0)
    assert stats.improvement_count == 1
    assert stats.mean_improvement == pytest.approx(3.0)
    stats.observe(7.0, 6.0)
    assert stats.improvement_count == 2
    assert stats.mean_improvement == pytest.approx(2.0)
    stats.observe(6.0, 9.0)  # worsening: no change
    assert stats.improvement_count == 2
    assert stats.mean_improvement == pytest.approx(2.0)


def test_worse_probability_scales_with_mean_improvement():
    # exp(-1 / (0.5 * 2)) = exp(-1)
    assert acceptance_probability(5.0, 6.0, 0.5, 2.0) == pytest.approx(np.exp(-1.0))
    small = acceptance_probability(5.0, 6.0, 0.5, 0.5)
    large = acceptance_probability(5.0, 6.0, 0.5, 10.0)
    assert small < large < 1.0


def test_worse_acceptance_follows_uniform_draw():
    p = np.exp(-1.0)
    stats = AcceptanceStats(mean_improvement=2.0, improvement_count=1)
    assert accept_solution(5.0, 6.0, 0.5, stats, ScriptedRandom([p - 1e-6]))
    assert not accept_solution(5.0, 6.0, 0.5, stats, ScriptedRandom([p + 1e-6]))


def test_huge_exponent_does_not_raise():
    assert acceptance_probability(1e6, 0.0, 0.5, 1e-6) == np.inf
