from ..config.enums import SLOT_CURRENT, SLOT_PROPOSED
from ..local_search.active_region import local_search_pass


def apply_option(domain, option, perturbation_ops, ls_buffer, rng, clock=None):
    """Perturb (or re-initialise) into the proposed slot, then refine it.

    Options ``0..K-1`` index ``perturbation_ops``; option ``K`` restarts the
    proposed slot from a fresh random solution. Returns the refined value.
    """
    if option < len(perturbation_ops):
        e_proposed = domain.apply(perturbation_ops[option], SLOT_CURRENT, SLOT_PROPOSED)
    else:
        domain.initialise(SLOT_PROPOSED)
        e_proposed = domain.evaluate(SLOT_PROPOSED)

    if clock is not None and clock.expired():
        return e_proposed
    result = local_search_pass(domain, ls_buffer, SLOT_PROPOSED, e_proposed, rng, clock)
    return result.value
