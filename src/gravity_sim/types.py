# MIT License (see LICENSE)
"""
Core type definitions for the 2D gravity simulation.

Defines the fundamental data structures:
- Vector2D: immutable 2D vector value type
- Bounds: the rectangular simulation region
- Body: the mutable simulated entity (mass, density, kinematic state)
- BodySnapshot: read-only projection of a Body handed to drivers

Bodies are treated as spheres of uniform density, so the radius is fixed by
mass and density alone:
  r = (m / ρ)^(1/3)
"""
from __future__ import annotations
from dataclasses import dataclass, field
import math
import numbers

import numpy as np

from .constants import DEFAULT_DENSITY
from .errors import DegenerateVectorError, InvalidBodyError


# =============================================================================
# Vector
# =============================================================================

@dataclass(frozen=True)
class Vector2D:
    """
    Immutable 2D vector. Every operation returns a new instance.

    Attributes:
        x: Horizontal component.
        y: Vertical component (screen coordinates, +y points down).
    """
    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        """Store components as plain floats (numpy scalars included)."""
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def zero(cls) -> Vector2D:
        return cls(0.0, 0.0)

    @classmethod
    def of(cls, value) -> Vector2D:
        """
        Coerce a Vector2D, an (x, y) sequence or a numpy array to Vector2D.

        Allows tuple inputs for positions and velocities, the same way the
        body constructors accept them.
        """
        if isinstance(value, Vector2D):
            return value
        x, y = value
        return cls(x, y)

    def add(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x + other.x, self.y + other.y)

    def subtract(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x - other.x, self.y - other.y)

    def scale(self, scalar: float) -> Vector2D:
        return Vector2D(self.x * scalar, self.y * scalar)

    def divide(self, scalar: float) -> Vector2D:
        """Divide both components by scalar. Raises ZeroDivisionError on 0."""
        if scalar == 0:
            raise ZeroDivisionError("Vector2D division by zero")
        return Vector2D(self.x / scalar, self.y / scalar)

    def magnitude(self) -> float:
        """Euclidean length |v|."""
        return float(np.hypot(self.x, self.y))

    def normalized(self) -> Vector2D:
        """
        Unit vector in the same direction.

        Raises:
            DegenerateVectorError: if the vector has zero length. There is
                no meaningful direction to return, and a silent zero or NaN
                result would poison the rest of the step.
        """
        length = self.magnitude()
        if length == 0.0:
            raise DegenerateVectorError(f"cannot normalize zero vector {self}")
        return Vector2D(self.x / length, self.y / length)

    def as_array(self) -> np.ndarray:
        """Return the vector as a float64 numpy array of shape (2,)."""
        return np.array([self.x, self.y], dtype=np.float64)

    def __add__(self, other: Vector2D) -> Vector2D:
        return self.add(other)

    def __sub__(self, other: Vector2D) -> Vector2D:
        return self.subtract(other)

    def __mul__(self, scalar: float) -> Vector2D:
        return self.scale(scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2D:
        return self.divide(scalar)

    def __neg__(self) -> Vector2D:
        return Vector2D(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


# =============================================================================
# Bounds
# =============================================================================

@dataclass(frozen=True)
class Bounds:
    """
    Axis-aligned simulation region [0, width] x [0, height].

    Bodies whose position falls outside it are removed at the end of a step.
    """
    width: float
    height: float

    def __post_init__(self) -> None:
        if not (self.width > 0 and self.height > 0):
            raise ValueError(f"Bounds must be positive, got ({self.width}, {self.height})")
        object.__setattr__(self, "width", float(self.width))
        object.__setattr__(self, "height", float(self.height))

    def contains(self, point: Vector2D) -> bool:
        """True if point lies inside the region, edges included."""
        return 0.0 <= point.x <= self.width and 0.0 <= point.y <= self.height


# =============================================================================
# Body
# =============================================================================

def radius_for(mass: float, density: float) -> float:
    """Radius of a uniform sphere: r = (m / ρ)^(1/3)."""
    return (mass / density) ** (1.0 / 3.0)


@dataclass(frozen=True)
class BodySnapshot:
    """
    Read-only view of a body after a step.

    Drivers render from snapshots; they never hold the live Body.
    """
    id: int
    mass: float
    density: float
    radius: float
    position: Vector2D
    velocity: Vector2D


@dataclass(eq=False)
class Body:
    """
    A gravitating body with uniform density.

    Attributes:
        mass: Mass (> 0).
        density: Density (> 0). Only changes when bodies merge.
        position: Center position.
        velocity: Linear velocity.
        acceleration: Acceleration from the latest force pass.
        previous_acceleration: Acceleration held before the latest force pass.
            Velocity Verlet averages the two for the velocity update.
        alive: False once the body is consumed by a merge. Dead bodies are
            skipped by every remaining phase of the step.
        id: Identifier assigned by World.add_body(), in insertion order.

    Note:
        Bodies compare by identity. Two bodies with identical state are still
        distinct participants in the simulation.
    """
    mass: float
    density: float = DEFAULT_DENSITY
    position: Vector2D | tuple[float, float] = field(default_factory=Vector2D.zero)
    velocity: Vector2D | tuple[float, float] = field(default_factory=Vector2D.zero)
    acceleration: Vector2D = field(default_factory=Vector2D.zero)
    previous_acceleration: Vector2D = field(default_factory=Vector2D.zero)
    alive: bool = True
    id: int = -1

    def __post_init__(self) -> None:
        """Validate mass/density and coerce vector inputs."""
        _check_positive("mass", self.mass)
        _check_positive("density", self.density)
        self.mass = float(self.mass)
        self.density = float(self.density)
        self.position = Vector2D.of(self.position)
        self.velocity = Vector2D.of(self.velocity)
        self.acceleration = Vector2D.of(self.acceleration)
        self.previous_acceleration = Vector2D.of(self.previous_acceleration)

    @property
    def radius(self) -> float:
        """Derived from mass and density, never stored separately."""
        return radius_for(self.mass, self.density)

    def begin_step(self) -> None:
        """Save the current acceleration as previous and reset it to zero."""
        self.previous_acceleration = self.acceleration
        self.acceleration = Vector2D.zero()

    def is_colliding_with(self, other: Body) -> bool:
        """True if the spheres overlap: |r| < r1 + r2. Symmetric."""
        r = other.position - self.position
        return r.magnitude() < (self.radius + other.radius)

    def acceleration_contribution_from(self, other: Body, G: float) -> Vector2D:
        """
        Acceleration this body receives from other.

        Implements a = G * m_other * r̂ / |r|². This body's own mass cancels
        out of F = m a, so it does not appear.

        Overlapping pairs contribute nothing: they are about to be merged,
        and skipping them keeps |r| away from zero.
        """
        if self.is_colliding_with(other):
            return Vector2D.zero()
        r = other.position - self.position
        d = r.magnitude()
        return r.normalized() * (G * other.mass / (d * d))

    def apply_gravity_from(self, other: Body, G: float) -> None:
        """Accumulate the contribution of other into acceleration."""
        self.acceleration = self.acceleration + self.acceleration_contribution_from(other, G)

    def snapshot(self) -> BodySnapshot:
        return BodySnapshot(
            id=self.id,
            mass=self.mass,
            density=self.density,
            radius=self.radius,
            position=self.position,
            velocity=self.velocity,
        )

    def __str__(self) -> str:
        return f"Body#{self.id}({self.position}, {self.velocity}, {self.acceleration})"


def _check_positive(name: str, value: float) -> None:
    # `not value > 0` also rejects NaN
    if not (isinstance(value, numbers.Real) and value > 0 and math.isfinite(value)):
        raise InvalidBodyError(f"Body {name} must be a positive finite number, got {value!r}")
