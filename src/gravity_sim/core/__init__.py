# MIT License (see LICENSE)
"""
Core physics components.

This subpackage provides:
    - Force pass: exact pairwise gravitational accelerations.
    - Integrators: the drift and kick halves of velocity Verlet.
    - Invariants: conserved quantities for diagnostics.

Typical usage:
    from gravity_sim.core import verlet_drift, apply_pairwise_gravity, verlet_kick

    verlet_drift(bodies, dt)
    apply_pairwise_gravity(bodies, G=1.0)
    verlet_kick(bodies, dt)
"""
from .forces import apply_pairwise_gravity
from .integrators import verlet_drift, verlet_kick
from .invariants import (
    total_mass,
    linear_momentum,
    center_of_mass,
    kinetic_energy,
    potential_energy,
    total_energy,
)

__all__ = [
    # Forces
    "apply_pairwise_gravity",
    # Integrators
    "verlet_drift",
    "verlet_kick",
    # Invariants
    "total_mass",
    "linear_momentum",
    "center_of_mass",
    "kinetic_energy",
    "potential_energy",
    "total_energy",
]
