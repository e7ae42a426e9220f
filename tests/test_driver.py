from conftest import CounterDomain, StepClock
from fairshare_ils.config.enums import SLOT_CURRENT, SLOT_PROPOSED
from fairshare_ils.engine.driver import apply_option
from fairshare_ils.engine.environment import NumpyRandomSource


def test_restart_option_rebuilds_proposed_and_keeps_current():
    domain = CounterDomain(start=10, n_perturb=1, n_ls=2)
    domain.values[SLOT_CURRENT] = 3
    restart = len(domain.perturb_ops)

    value = apply_option(
        domain, restart, domain.perturb_ops, list(domain.ls_ops), NumpyRandomSource(0)
    )

    assert domain.values[SLOT_CURRENT] == 3
    # fresh solution at 10, refined down to the floor
    assert value == 0.0
    assert domain.evaluate(SLOT_PROPOSED) == 0.0
    assert 0 not in domain.calls
    assert len(domain.calls) == 10 + 2


def test_perturbation_reads_current_and_refines_proposed():
    domain = CounterDomain(start=10, n_perturb=1, n_ls=2, floor=2)
    domain.values[SLOT_CURRENT] = 3

    value = apply_option(domain, 0, domain.perturb_ops, list(domain.ls_ops), NumpyRandomSource(1))

    assert domain.values[SLOT_CURRENT] == 3
    assert domain.calls[0] == 0
    assert value == 2.0


def test_expired_budget_skips_local_search():
    domain = CounterDomain(start=10, n_perturb=1, n_ls=2)
    domain.values[SLOT_CURRENT] = 3

    value = apply_option(
        domain,
        0,
        domain.perturb_ops,
        list(domain.ls_ops),
        NumpyRandomSource(2),
        StepClock(time_limit=0),
    )

    assert domain.calls == [0]
    assert value == 4.0
    assert domain.evaluate(SLOT_PROPOSED) == 4.0
