# MIT License (see LICENSE)
"""
Ready-made initial conditions.

seed_demo is the default demo layout: a close binary plus a column of
bodies thrown sideways at increasing speed, meant to be stepped at
dt = 0.01.
"""
from __future__ import annotations
import math

from .types import Body, Vector2D
from .world import World

SEED_MASS = 100.0


def seed_demo(world: World) -> list[Body]:
    """
    Add the demo bodies to world and return them in insertion order.

    Layout:
        (100, 100) v=(0, -15) and (150, 100) v=(0, +15)
        (100, 100 + 20 i) v=(20 i, 0) for i = 1..5
    """
    bodies = [
        world.add_body(SEED_MASS, Vector2D(100.0, 100.0), Vector2D(0.0, -15.0)),
        world.add_body(SEED_MASS, Vector2D(150.0, 100.0), Vector2D(0.0, 15.0)),
    ]
    for i in range(1, 6):
        bodies.append(
            world.add_body(SEED_MASS, Vector2D(100.0, 100.0 + 20.0 * i), Vector2D(20.0 * i, 0.0))
        )
    return bodies


def circular_orbit_speed(mass: float, separation: float, G: float) -> float:
    """
    Speed of each member of an equal-mass binary on a circular orbit.

    Each body circles the midpoint at radius s/2 under acceleration
    G m / s², so v² = G m / (2 s).
    """
    return math.sqrt(G * mass / (2.0 * separation))


def circular_binary(
    world: World,
    mass: float,
    separation: float,
    center: Vector2D | tuple[float, float] | None = None,
) -> tuple[Body, Body]:
    """
    Add two equal masses on a circular orbit around center.

    Args:
        world: World to populate; its G sets the orbital speed.
        mass: Mass of each body.
        separation: Distance between the two centers.
        center: Orbit center (default: middle of the world's bounds).

    Returns:
        The two bodies, left one first.
    """
    if center is None:
        center = Vector2D(world.bounds.width / 2.0, world.bounds.height / 2.0)
    center = Vector2D.of(center)
    offset = Vector2D(separation / 2.0, 0.0)
    v = Vector2D(0.0, circular_orbit_speed(mass, separation, world.G))
    left = world.add_body(mass, center - offset, -v)
    right = world.add_body(mass, center + offset, v)
    return left, right
