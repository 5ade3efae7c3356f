# MIT License (see LICENSE)
"""
Gravitational force pass.

Accelerations are accumulated per body from every other live body:
    a_i = Σ_j G m_j r̂_ij / |r_ij|²    (j ≠ i, pair not overlapping)

Complexity: O(N²). The simulation targets small N, so every pair is
evaluated exactly; there is no tree or multipole approximation.
"""
from __future__ import annotations

from ..types import Body


def apply_pairwise_gravity(bodies: list[Body], G: float) -> None:
    """
    Recompute the acceleration of every live body.

    Each body first moves its acceleration into previous_acceleration
    (begin_step), then sums the contributions from all other live bodies.
    All accelerations are complete when this returns, so the velocity kick
    that follows sees a consistent state across bodies.

    Args:
        bodies: Bodies of the world, in insertion order.
        G: Gravitational constant.

    Note:
        Modifies acceleration and previous_acceleration in-place.
        Contributions are not shared via Newton's third law: each body
        accumulates its own sum, matching a = G m_other / r² directly.
    """
    live = [b for b in bodies if b.alive]
    for body in live:
        body.begin_step()
        for other in live:
            if other is body:
                continue
            body.apply_gravity_from(other, G)
