"""Capability interface the search engine consumes from a problem domain."""

from __future__ import annotations

from typing import List, Protocol


class ProblemDomain(Protocol):
    """Problem representation with slot-addressed solution storage.

    Objective values are minimised. Slots are plain integers; the engine only
    ever uses ``SLOT_CURRENT`` and ``SLOT_PROPOSED``.
    """

    def initialise(self, slot: int) -> None:
        """Fill ``slot`` with a fresh random valid solution."""

    def evaluate(self, slot: int) -> float:
        """Return the objective value of the solution held in ``slot``."""

    def apply(self, op: int, src: int, dst: int) -> float:
        """Apply operator ``op`` to ``src``, store the result in ``dst`` and
        return its objective value. ``src`` and ``dst`` may be the same slot."""

    def copy(self, src: int, dst: int) -> None:
        ...

    def equal_value(self, a: int, b: int) -> bool:
        ...

    def operators_of_type(self, kind: int) -> List[int]:
        ...
