# MIT License (see LICENSE)
"""
Renderer adapters for simulation visualization.

This module provides an abstract base class for rendering and concrete
debug implementations. The physics core has no rendering dependency;
these adapters consume the snapshots a World produces after each step.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import sys

from ..types import BodySnapshot

if TYPE_CHECKING:
    from ..world import World


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Subclasses implement the drawing methods to integrate with a graphics
    backend (matplotlib, pygame, a web frontend, ...).

    Usage:
        renderer = MyRenderer()
        renderer.begin_frame(world.iteration, world.time)
        for snapshot in world.live_bodies():
            renderer.draw_body(snapshot)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render(world)
    """

    @abstractmethod
    def begin_frame(self, iteration: int, time: float) -> None:
        """
        Begin a new frame for rendering.

        Args:
            iteration: Number of completed steps.
            time: Current simulation time.
        """
        ...

    @abstractmethod
    def draw_body(self, body: BodySnapshot) -> None:
        """
        Draw a single body.

        Args:
            body: Snapshot of the body to draw.
        """
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """
        Finalize the current frame.

        Called after all bodies have been drawn for this frame.
        """
        ...

    def render(self, world: "World") -> None:
        """
        Convenience method to render all live bodies of a world.

        Args:
            world: The world to render.
        """
        self.begin_frame(world.iteration, world.time)
        for snapshot in world.live_bodies():
            self.draw_body(snapshot)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Console/text debug renderer for development and testing.

    Example:
        renderer = DebugRenderer()
        renderer.render(world)

    Output:
        === Frame 12 t=0.1200 n=2 ===
        [1] r=1.59 m=100.00 @ (100.00, 98.20) v=(0.00, -15.00)
        [2] r=1.59 m=100.00 @ (150.00, 101.80) v=(-0.00, 15.00)
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        """
        Initialize the debug renderer.

        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, include velocity info.
        """
        self.output = output or sys.stdout
        self.verbose = verbose
        self._lines: list[str] = []
        self._header = ""

    def begin_frame(self, iteration: int, time: float) -> None:
        """Begin a new debug frame."""
        self._header = f"=== Frame {iteration} t={time:.4f}"
        self._lines = []

    def draw_body(self, body: BodySnapshot) -> None:
        """Draw a body as text output."""
        pos = body.position
        line = f"[{body.id}] r={body.radius:.2f} m={body.mass:.2f} @ ({pos.x:.2f}, {pos.y:.2f})"
        if self.verbose:
            vel = body.velocity
            line += f" v=({vel.x:.2f}, {vel.y:.2f})"
        self._lines.append(line)

    def end_frame(self) -> None:
        """Write the frame; the header carries the live body count."""
        self.output.write(f"{self._header} n={len(self._lines)} ===\n")
        for line in self._lines:
            self.output.write(line + "\n")
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """
    No-op renderer that only counts frames.

    Useful as a placeholder or for performance testing without rendering overhead.
    """

    def __init__(self):
        self.frame_count = 0

    def begin_frame(self, iteration: int, time: float) -> None:
        pass

    def draw_body(self, body: BodySnapshot) -> None:
        pass

    def end_frame(self) -> None:
        self.frame_count += 1


class BufferedRenderer(RendererAdapter):
    """
    Renderer that buffers frame data for later retrieval.

    Stores body states for each frame, useful for recording simulations
    or batch processing.

    Example:
        renderer = BufferedRenderer()
        world.run(0.01, 100, renderer=renderer)

        for frame in renderer.frames:
            print(f"t={frame['time']}, bodies={len(frame['bodies'])}")
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, iteration: int, time: float) -> None:
        """Begin buffering a new frame."""
        self._current_frame = {
            "iteration": iteration,
            "time": time,
            "bodies": [],
        }

    def draw_body(self, body: BodySnapshot) -> None:
        """Buffer body state."""
        if self._current_frame is None:
            return

        self._current_frame["bodies"].append({
            "id": body.id,
            "mass": body.mass,
            "radius": body.radius,
            "position": [body.position.x, body.position.y],
            "velocity": [body.velocity.x, body.velocity.y],
        })

    def end_frame(self) -> None:
        """Finalize and store the buffered frame."""
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        """Clear all buffered frames."""
        self.frames.clear()
