# MIT License (see LICENSE)
"""
gravity_sim - A small 2D N-body gravity simulation with merging collisions.

Bodies attract each other with exact pairwise gravity, are advanced with
velocity Verlet, merge when their spheres overlap, and are dropped when they
leave the rectangular bounds.

Main entry points:
    - World: The simulation container; add_body(), step(dt), live_bodies().
    - Body: A gravitating sphere with density-derived radius.
    - Vector2D: Immutable 2D vector.
    - Bounds: The simulation region.

Submodules:
    - core: Force pass, Verlet integrators, conserved quantities.
    - collision: Overlap detection and merge arithmetic.
    - io: JSON serialization/deserialization.
    - renderer: Optional snapshot-based visualization adapters.
    - scenarios: Ready-made initial conditions.

Example:
    from gravity_sim import World, Vector2D

    world = World(bounds=(500, 500))
    world.add_body(100, Vector2D(100, 100), Vector2D(0, -15))
    world.add_body(100, Vector2D(150, 100), Vector2D(0, 15))
    world.step(0.01)
"""
from .world import World, StepPhase
from .types import Body, BodySnapshot, Bounds, Vector2D, radius_for
from .errors import GravitySimError, InvalidBodyError, DegenerateVectorError
from .profiler import Profiler

__all__ = [
    # Core simulation
    "World",
    "StepPhase",
    "Body",
    "BodySnapshot",
    # Geometry
    "Vector2D",
    "Bounds",
    "radius_for",
    # Errors
    "GravitySimError",
    "InvalidBodyError",
    "DegenerateVectorError",
    # Diagnostics
    "Profiler",
]
