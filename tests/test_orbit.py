import numpy as np
import pytest

from gravity_sim import World
from gravity_sim.core.invariants import center_of_mass, total_energy
from gravity_sim.scenarios import circular_binary, circular_orbit_speed


def _separation(a, b) -> float:
    return (b.position - a.position).magnitude()


def test_circular_orbit_speed():
    """m = 100, s = 50, G = 1: v² = G m / (2 s) = 1."""
    assert circular_orbit_speed(100.0, 50.0, 1.0) == pytest.approx(1.0)


def test_two_body_circular_orbit_is_stable():
    """
    Equal masses m = 100 (r ≈ 1.59) at separation 50 with v = 1 each.

    Period T = 2π (s/2) / v ≈ 157. Over a full orbit velocity Verlet should
    keep the separation within 1% and show no secular energy drift.
    """
    world = World(bounds=(500, 500), G=1.0)
    a, b = circular_binary(world, mass=100.0, separation=50.0)
    e0 = total_energy(world.bodies, world.G)

    dt = 0.05
    seps = []
    for _ in range(3200):
        world.step(dt)
        seps.append(_separation(a, b))

    assert len(world.bodies) == 2
    seps = np.array(seps)
    print("separation min", seps.min(), "max", seps.max())
    assert np.all(np.abs(seps - 50.0) / 50.0 < 0.01)

    e1 = total_energy(world.bodies, world.G)
    assert abs(e1 - e0) / abs(e0) < 0.01

    np.testing.assert_allclose(center_of_mass(world.bodies), [250.0, 250.0], atol=1e-6)


def test_orbit_direction():
    """The left body starts moving up (-y) and the right one down (+y)."""
    world = World()
    a, b = circular_binary(world, mass=100.0, separation=50.0, center=(100.0, 100.0))
    assert a.position.x == pytest.approx(75.0)
    assert b.position.x == pytest.approx(125.0)
    assert a.velocity.y == pytest.approx(-1.0)
    assert b.velocity.y == pytest.approx(1.0)
