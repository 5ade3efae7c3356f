# MIT License (see LICENSE)
"""
Utilities for calculating physical invariants and conserved quantities.

Used for verifying simulation correctness. Between collisions, total energy
and momentum of the bodies should stay constant within integration error.
Merges conserve mass and momentum exactly but dissipate kinetic energy.
"""
from __future__ import annotations
import itertools

import numpy as np

from ..types import Body


def total_mass(bodies: list[Body]) -> float:
    return float(sum(b.mass for b in bodies if b.alive))


def linear_momentum(bodies: list[Body]) -> np.ndarray:
    """
    Calculate the total linear momentum of a system.

    P = Σ (m * v)

    Returns:
        Total momentum vector [Px, Py].
    """
    p = np.zeros(2, dtype=np.float64)
    for b in bodies:
        if b.alive:
            p += b.mass * b.velocity.as_array()
    return p


def center_of_mass(bodies: list[Body]) -> np.ndarray:
    """
    Mass-weighted mean position Σ(m p) / Σm.

    Raises:
        ValueError: if there are no live bodies.
    """
    m = total_mass(bodies)
    if m == 0.0:
        raise ValueError("center of mass of an empty system is undefined")
    c = np.zeros(2, dtype=np.float64)
    for b in bodies:
        if b.alive:
            c += b.mass * b.position.as_array()
    return c / m


def kinetic_energy(bodies: list[Body]) -> float:
    """T = Σ 0.5 * m * v²"""
    ke = 0.0
    for b in bodies:
        if not b.alive:
            continue
        v = b.velocity.as_array()
        ke += 0.5 * b.mass * float(np.dot(v, v))
    return ke


def potential_energy(bodies: list[Body], G: float) -> float:
    """
    Pairwise gravitational potential energy.

    U = -Σ_{i<j} G m_i m_j / |r_ij|

    Overlapping pairs feel no force in the simulation, so they are skipped
    here as well.
    """
    live = [b for b in bodies if b.alive]
    u = 0.0
    for a, b in itertools.combinations(live, 2):
        if a.is_colliding_with(b):
            continue
        d = (b.position - a.position).magnitude()
        u -= G * a.mass * b.mass / d
    return u


def total_energy(bodies: list[Body], G: float) -> float:
    return kinetic_energy(bodies) + potential_energy(bodies, G)
