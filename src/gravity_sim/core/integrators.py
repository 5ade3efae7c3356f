# MIT License (see LICENSE)
"""
Velocity Verlet integration, split around the force pass.

The standard velocity Verlet update is:
    x(t+dt) = x(t) + v(t)*dt + 0.5*a(t)*dt²
    (recompute forces to obtain a(t+dt))
    v(t+dt) = v(t) + 0.5*(a(t) + a(t+dt))*dt

verlet_drift performs the first line and verlet_kick the last; the World
runs the force pass in between. The scheme is symplectic and second order,
which keeps bound orbits from spiralling in or out over long runs.

Reference:
    https://en.wikipedia.org/wiki/Verlet_integration#Velocity_Verlet
"""
from __future__ import annotations

from ..types import Body


def verlet_drift(bodies: list[Body], dt: float) -> None:
    """
    Advance positions using the acceleration stored from the previous step.

    Args:
        bodies: Bodies to advance (modified in-place). Dead bodies are skipped.
        dt: Timestep.
    """
    half_dt2 = 0.5 * dt * dt
    for b in bodies:
        if not b.alive:
            continue
        b.position = b.position + b.velocity * dt + b.acceleration * half_dt2


def verlet_kick(bodies: list[Body], dt: float) -> None:
    """
    Advance velocities using the average of the old and new acceleration.

    Must run after the force pass has refreshed every body's acceleration.
    """
    for b in bodies:
        if not b.alive:
            continue
        b.velocity = b.velocity + (b.previous_acceleration + b.acceleration) * (0.5 * dt)
