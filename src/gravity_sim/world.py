# MIT License (see LICENSE)
"""
The simulation world and its step loop.

The World class acts as the body container and simulation controller.
It manages:
- The list of bodies, in insertion order.
- Configuration (gravitational constant, bounds, default density).
- The step, run as a fixed sequence of phases:
    1. Drift: x += v dt + a dt²/2 using last step's acceleration.
    2. Force pass: recompute every body's acceleration (O(N²)).
    3. Kick: v += (a_prev + a) dt/2.
    4. Collision detection: claim overlapping pairs.
    5. Removal: drop claimed bodies and bodies outside the bounds.
    6. Merge: replace each claimed pair with one combined body.

Structure:
    - User creates a World.
    - User adds bodies via add_body().
    - User calls world.step(dt) in a loop and renders world.live_bodies().
"""
from __future__ import annotations
from contextlib import contextmanager, nullcontext
from dataclasses import dataclass, field
from enum import Enum
import logging
import math
from typing import TYPE_CHECKING, Iterator

from .constants import G_DEFAULT, DEFAULT_BOUNDS, DEFAULT_DENSITY
from .errors import InvalidBodyError
from .types import Body, BodySnapshot, Bounds, Vector2D
from .profiler import Profiler
from .core.forces import apply_pairwise_gravity
from .core.integrators import verlet_drift, verlet_kick
from .collision.detect import find_colliding_pairs
from .collision.merge import merge_bodies

if TYPE_CHECKING:
    from .renderer.adapter import RendererAdapter

logger = logging.getLogger(__name__)


class StepPhase(str, Enum):
    """Phase the world is in. Each phase completes before the next starts."""
    IDLE = "idle"
    INTEGRATING = "integrating"
    FORCE_EVALUATING = "force_evaluating"
    VELOCITY_INTEGRATING = "velocity_integrating"
    COLLISION_DETECTING = "collision_detecting"
    REMOVING = "removing"
    MERGING = "merging"
    DONE = "done"


@dataclass
class World:
    """
    Gravity simulation world.

    Attributes:
        bounds: Simulation region; a Bounds or a (width, height) pair.
            Bodies leaving it are removed (default: 500 x 500).
        G: Gravitational constant (default: 1.0, not physically calibrated).
        initial_density: Density given to bodies created without an explicit
            one (default: 25.0).
        profiler: Optional Profiler; each phase is timed under its
            StepPhase value.
        bodies: Bodies currently in the simulation, in insertion order.
        iteration: Number of completed steps.
        time: Sum of the dt of all completed steps.
        phase: Current StepPhase. IDLE before the first step and after a
            failed step, DONE after a completed one.
        next_id: Id the next created body receives. Never reused, so ids
            stay unique across merges and save/load.

    Note:
        A step is all-or-nothing from the caller's point of view. If any
        phase raises, KeyboardInterrupt included, body state and the body
        list are restored to what they were before the step and the
        exception propagates.
    """
    bounds: Bounds | tuple[float, float] = DEFAULT_BOUNDS
    G: float = G_DEFAULT
    initial_density: float = DEFAULT_DENSITY
    profiler: Profiler | None = None

    # Internal state
    bodies: list[Body] = field(default_factory=list)
    iteration: int = 0
    time: float = 0.0
    phase: StepPhase = StepPhase.IDLE
    next_id: int = 1

    def __post_init__(self) -> None:
        """Normalize configuration and number any pre-supplied bodies."""
        if not isinstance(self.bounds, Bounds):
            self.bounds = Bounds(*self.bounds)
        if not math.isfinite(self.G):
            raise ValueError(f"G must be finite, got {self.G}")
        if not (self.initial_density > 0 and math.isfinite(self.initial_density)):
            raise InvalidBodyError(f"initial_density must be positive, got {self.initial_density}")
        self.G = float(self.G)
        self.initial_density = float(self.initial_density)

        self.next_id = max([self.next_id] + [b.id + 1 for b in self.bodies])
        for b in self.bodies:
            if b.id < 0:
                b.id = self.next_id
                self.next_id += 1

        logger.info(
            "World created: bounds=%sx%s G=%s density=%s bodies=%d",
            self.bounds.width, self.bounds.height, self.G, self.initial_density, len(self.bodies),
        )

    def add_body(
        self,
        mass: float,
        position: Vector2D | tuple[float, float] | None = None,
        velocity: Vector2D | tuple[float, float] | None = None,
        density: float | None = None,
    ) -> Body:
        """
        Create a body and add it to the simulation.

        This is the only creation path; merges use it too.

        Args:
            mass: Body mass (> 0).
            position: Initial position (default: origin).
            velocity: Initial velocity (default: zero).
            density: Density (default: the world's initial_density).

        Returns:
            The new live body, with its id assigned.

        Raises:
            InvalidBodyError: if mass or density is not positive and finite.
        """
        body = Body(
            mass=mass,
            density=self.initial_density if density is None else density,
            position=Vector2D.zero() if position is None else position,
            velocity=Vector2D.zero() if velocity is None else velocity,
        )
        body.id = self.next_id
        self.next_id += 1
        self.bodies.append(body)
        return body

    def live_bodies(self) -> tuple[BodySnapshot, ...]:
        """Immutable snapshots of all live bodies, in insertion order."""
        return tuple(b.snapshot() for b in self.bodies if b.alive)

    @contextmanager
    def _phase(self, phase: StepPhase) -> Iterator[None]:
        """Enter phase, timing it when a profiler is attached."""
        self.phase = phase
        section = self.profiler.section(phase.value) if self.profiler else nullcontext()
        with section:
            yield

    def _save_state(self) -> tuple:
        """Capture everything a step mutates. Vectors are immutable."""
        kinematics = [
            (b, b.position, b.velocity, b.acceleration, b.previous_acceleration, b.alive)
            for b in self.bodies
        ]
        return list(self.bodies), kinematics, self.next_id

    def _restore_state(self, saved: tuple) -> None:
        bodies, kinematics, next_id = saved
        for b, pos, vel, acc, prev_acc, alive in kinematics:
            b.position = pos
            b.velocity = vel
            b.acceleration = acc
            b.previous_acceleration = prev_acc
            b.alive = alive
        self.bodies[:] = bodies
        self.next_id = next_id
        self.phase = StepPhase.IDLE

    def _remove_dead_and_escaped(self) -> None:
        """Drop bodies claimed by a merge or outside the bounds."""
        kept = []
        escaped = 0
        for b in self.bodies:
            if not b.alive:
                continue
            if not self.bounds.contains(b.position):
                b.alive = False
                escaped += 1
                continue
            kept.append(b)
        if escaped:
            logger.debug("Step %d: %d bodies left the bounds", self.iteration, escaped)
        self.bodies[:] = kept

    def _merge(self, a: Body, b: Body) -> Body:
        merged = merge_bodies(a, b)
        body = self.add_body(merged.mass, merged.position, merged.velocity, density=merged.density)
        logger.debug(
            "Step %d: merged bodies %d and %d into %d (mass=%.3f)",
            self.iteration, a.id, b.id, body.id, body.mass,
        )
        return body

    def step(self, dt: float) -> None:
        """
        Advance the simulation by one step of dt.

        Args:
            dt: Timestep (> 0).

        Raises:
            ValueError: if dt is not a positive finite number.
            DegenerateVectorError: if the force pass had to normalize a zero
                separation. The step is rolled back before it propagates.
        """
        dt = float(dt)
        if not (dt > 0 and math.isfinite(dt)):
            raise ValueError(f"dt must be a positive finite number, got {dt}")

        saved = self._save_state()
        try:
            with self._phase(StepPhase.INTEGRATING):
                verlet_drift(self.bodies, dt)

            with self._phase(StepPhase.FORCE_EVALUATING):
                apply_pairwise_gravity(self.bodies, self.G)

            with self._phase(StepPhase.VELOCITY_INTEGRATING):
                verlet_kick(self.bodies, dt)

            with self._phase(StepPhase.COLLISION_DETECTING):
                pairs = find_colliding_pairs(self.bodies)

            with self._phase(StepPhase.REMOVING):
                self._remove_dead_and_escaped()

            with self._phase(StepPhase.MERGING):
                for a, b in pairs:
                    self._merge(a, b)
        except BaseException:
            logger.error(
                "Step %d failed during %s; state rolled back",
                self.iteration, self.phase.value, exc_info=True,
            )
            self._restore_state(saved)
            raise

        self.iteration += 1
        self.time += dt
        self.phase = StepPhase.DONE

    def run(
        self,
        dt: float,
        steps: int,
        renderer: RendererAdapter | None = None,
    ) -> tuple[BodySnapshot, ...]:
        """
        Take a fixed number of steps.

        Args:
            dt: Timestep for every step.
            steps: Number of steps to take.
            renderer: Optional renderer, handed the world after each step.

        Returns:
            Snapshots of the live bodies after the last step.
        """
        for _ in range(steps):
            self.step(dt)
            if renderer is not None:
                renderer.render(self)
        return self.live_bodies()
