# MIT License (see LICENSE)
import dataclasses
import itertools
import math

import pytest

from gravity_sim.types import Body, Vector2D, radius_for
from gravity_sim.errors import InvalidBodyError


def test_radius_follows_mass_and_density():
    """
    Uniform sphere: r = (m / ρ)^(1/3).
    m = 100, ρ = 25 gives r = 4^(1/3) ≈ 1.587.
    """
    b = Body(mass=100.0, density=25.0)
    assert b.radius == pytest.approx(4.0 ** (1.0 / 3.0))
    assert b.radius == pytest.approx(radius_for(100.0, 25.0))

    # radius can never go stale
    b.mass = 200.0
    assert b.radius == pytest.approx(2.0)
    b.density = 200.0
    assert b.radius == pytest.approx(1.0)


def test_default_density_and_zero_vectors():
    b = Body(mass=1.0)
    assert b.density == 25.0
    assert b.position == Vector2D(0.0, 0.0)
    assert b.velocity == Vector2D(0.0, 0.0)
    assert b.acceleration == Vector2D(0.0, 0.0)
    assert b.alive


@pytest.mark.parametrize("mass, density", [
    (0.0, 25.0),
    (-1.0, 25.0),
    (math.nan, 25.0),
    (math.inf, 25.0),
    (10.0, 0.0),
    (10.0, -5.0),
])
def test_invalid_mass_or_density_rejected(mass, density):
    with pytest.raises(InvalidBodyError):
        Body(mass=mass, density=density)
    # also catchable as a plain ValueError
    with pytest.raises(ValueError):
        Body(mass=mass, density=density)


def test_collision_is_symmetric():
    """is_colliding_with(a, b) == is_colliding_with(b, a) for all pairs."""
    bodies = [
        Body(mass=100.0, position=(100.0, 100.0)),
        Body(mass=100.0, position=(102.0, 100.0)),
        Body(mass=400.0, position=(104.5, 101.0)),
        Body(mass=10.0, position=(150.0, 150.0)),
        Body(mass=1000.0, density=1.0, position=(140.0, 145.0)),
    ]
    for a, b in itertools.permutations(bodies, 2):
        assert a.is_colliding_with(b) == b.is_colliding_with(a)


def test_collision_threshold_is_strict():
    a = Body(mass=100.0, position=(0.0, 0.0))
    touching = a.radius * 2
    assert not a.is_colliding_with(Body(mass=100.0, position=(touching, 0.0)))
    assert a.is_colliding_with(Body(mass=100.0, position=(touching * 0.999, 0.0)))


def test_acceleration_contribution_inverse_square():
    """
    a = G m_other / d² toward the other body.
    m_other = 100, d = 50, G = 1 gives |a| = 0.04.
    """
    a = Body(mass=1.0, position=(0.0, 0.0))
    b = Body(mass=100.0, position=(50.0, 0.0))

    acc = a.acceleration_contribution_from(b, G=1.0)
    assert acc.x == pytest.approx(0.04)
    assert acc.y == pytest.approx(0.0)

    # own mass does not matter, G scales linearly
    heavy = Body(mass=1e6, position=(0.0, 0.0))
    assert heavy.acceleration_contribution_from(b, G=1.0).x == pytest.approx(0.04)
    assert a.acceleration_contribution_from(b, G=2.5).x == pytest.approx(0.1)

    # pull on b points back toward a
    back = b.acceleration_contribution_from(a, G=1.0)
    assert back.x == pytest.approx(-1.0 / 2500.0)


def test_overlapping_bodies_contribute_nothing():
    a = Body(mass=100.0, position=(0.0, 0.0))
    b = Body(mass=100.0, position=(1.0, 0.0))
    assert a.is_colliding_with(b)
    assert a.acceleration_contribution_from(b, G=1.0) == Vector2D(0.0, 0.0)
    # identical position is absorbed by the collision check
    c = Body(mass=100.0, position=(0.0, 0.0))
    assert a.acceleration_contribution_from(c, G=1.0) == Vector2D(0.0, 0.0)


def test_begin_step_saves_and_resets_acceleration():
    b = Body(mass=1.0)
    b.acceleration = Vector2D(1.0, -2.0)
    b.begin_step()
    assert b.previous_acceleration == Vector2D(1.0, -2.0)
    assert b.acceleration == Vector2D(0.0, 0.0)


def test_apply_gravity_accumulates():
    a = Body(mass=1.0, position=(0.0, 0.0))
    right = Body(mass=100.0, position=(50.0, 0.0))
    below = Body(mass=100.0, position=(0.0, 50.0))
    a.apply_gravity_from(right, G=1.0)
    a.apply_gravity_from(below, G=1.0)
    assert a.acceleration.x == pytest.approx(0.04)
    assert a.acceleration.y == pytest.approx(0.04)


def test_snapshot_is_read_only_copy():
    b = Body(mass=100.0, position=(1.0, 2.0), velocity=(3.0, 4.0))
    b.id = 7
    snap = b.snapshot()
    assert snap.id == 7
    assert snap.mass == 100.0
    assert snap.radius == pytest.approx(b.radius)
    assert snap.position == Vector2D(1.0, 2.0)
    assert snap.velocity == Vector2D(3.0, 4.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.mass = 1.0

    b.position = Vector2D(9.0, 9.0)
    assert snap.position == Vector2D(1.0, 2.0)
