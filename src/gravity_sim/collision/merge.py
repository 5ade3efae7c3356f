# MIT License (see LICENSE)
"""
Perfectly inelastic merge of two bodies.

The merged body takes:
    m   = m1 + m2
    ρ   = (m1 ρ1 + m2 ρ2) / m          mass-weighted density
    p   = (m1 p1 + m2 p2) / m          center of mass
    v   = (m1 v1 + m2 v2) / m          total momentum / total mass

Mass and momentum are conserved exactly. Kinetic energy is not.
"""
from __future__ import annotations
from typing import NamedTuple, TypeVar

from ..types import Body, Vector2D

T = TypeVar("T", float, Vector2D)


class MergeResult(NamedTuple):
    """Properties of the body that replaces a merged pair."""
    mass: float
    density: float
    position: Vector2D
    velocity: Vector2D


def weighted_average(w1: float, v1: T, w2: float, v2: T) -> T:
    """(w1 v1 + w2 v2) / (w1 + w2) for scalars or vectors."""
    return (v1 * w1 + v2 * w2) / (w1 + w2)


def merge_bodies(a: Body, b: Body) -> MergeResult:
    """
    Combine two bodies into the properties of one.

    Raises:
        ValueError: if a and b are the same body.
    """
    if a is b:
        raise ValueError(f"cannot merge body {a.id} with itself")
    m1, m2 = a.mass, b.mass
    return MergeResult(
        mass=m1 + m2,
        density=weighted_average(m1, a.density, m2, b.density),
        position=weighted_average(m1, a.position, m2, b.position),
        velocity=weighted_average(m1, a.velocity, m2, b.velocity),
    )
