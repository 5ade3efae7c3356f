# MIT License (see LICENSE)
"""
Simple profiling utilities for performance measurement.

Measures the wall time of each step phase (drift, force pass, kick,
collision detection, removal, merge) without external dependencies.

Example:
    profiler = Profiler()
    world = World(profiler=profiler)
    world.run(0.01, 1000)
    print(profiler.stats.summary()["force_evaluating"])
"""
from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass, field
import time
from typing import Iterator


@dataclass
class SectionTiming:
    """Running count, total and max for one section, in seconds."""
    n: int = 0
    total: float = 0.0
    longest: float = 0.0

    def add(self, dt: float) -> None:
        self.n += 1
        self.total += dt
        self.longest = max(self.longest, dt)


@dataclass
class ProfileStats:
    """
    Accumulates timing samples for named sections.

    Keeps running aggregates rather than raw samples, so memory stays
    constant over arbitrarily long runs.
    """
    sections: dict[str, SectionTiming] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        """Record a timing sample (in seconds) for a named section."""
        self.sections.setdefault(name, SectionTiming()).add(dt)

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Compute summary statistics for all recorded sections.

        Returns:
            Dict mapping section name to stats dict with keys:
            - 'n': sample count
            - 'mean_ms': average time in milliseconds
            - 'max_ms': maximum time in milliseconds
            - 'total_ms': summed time in milliseconds
        """
        out = {}
        for name, s in self.sections.items():
            out[name] = {
                "n": s.n,
                "mean_ms": 1e3 * (s.total / s.n),
                "max_ms": 1e3 * s.longest,
                "total_ms": 1e3 * s.total,
            }
        return out

    def clear(self) -> None:
        self.sections.clear()


class Profiler:
    """
    Context-manager based profiler for timing code sections.

    Usage:
        profiler = Profiler()
        with profiler.section("my_operation"):
            do_expensive_work()

        stats = profiler.stats.summary()
        print(f"my_operation avg: {stats['my_operation']['mean_ms']:.2f}ms")

    A section that raises is still recorded.
    """

    def __init__(self) -> None:
        self.stats = ProfileStats()

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """
        Time the enclosed code under name.

        Args:
            name: Identifier for this timed section.
        """
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.stats.add(name, time.perf_counter() - t0)
