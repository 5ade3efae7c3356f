# MIT License (see LICENSE)
import logging

import pytest

from gravity_sim import World, StepPhase, Vector2D, Profiler
from gravity_sim.logging_config import setup_logging
from gravity_sim.profiler import ProfileStats, SectionTiming


def test_world_times_every_phase():
    profiler = Profiler()
    world = World(profiler=profiler)
    world.add_body(100.0, Vector2D(100.0, 100.0))
    world.add_body(100.0, Vector2D(150.0, 100.0))

    world.run(0.01, 3)

    summary = profiler.stats.summary()
    phases = [p.value for p in StepPhase if p not in (StepPhase.IDLE, StepPhase.DONE)]
    assert sorted(summary) == sorted(phases)
    for name in phases:
        assert summary[name]["n"] == 3
        assert summary[name]["max_ms"] >= summary[name]["mean_ms"] >= 0.0


def test_section_records_on_error():
    profiler = Profiler()
    with pytest.raises(RuntimeError):
        with profiler.section("boom"):
            raise RuntimeError("x")
    assert profiler.stats.summary()["boom"]["n"] == 1
    profiler.stats.clear()
    assert profiler.stats.summary() == {}


def test_stats_keep_aggregates_not_samples():
    stats = ProfileStats()
    for i in range(1, 1001):
        stats.add("force_evaluating", i * 1e-6)

    s = stats.summary()["force_evaluating"]
    assert s["n"] == 1000
    assert s["max_ms"] == pytest.approx(1.0)
    assert s["mean_ms"] == pytest.approx(0.5005)
    assert s["total_ms"] == pytest.approx(500.5)
    # one fixed-size record per section, however many samples
    assert list(stats.sections) == ["force_evaluating"]
    assert isinstance(stats.sections["force_evaluating"], SectionTiming)


def test_setup_logging_levels(monkeypatch):
    name = "gravity_sim.test_logger"
    logger = setup_logging("DEBUG", name=name)
    assert logger.level == logging.DEBUG
    handlers = len(logger.handlers)

    monkeypatch.setenv("GRAVITY_SIM_LOG_LEVEL", "WARNING")
    setup_logging(name=name)
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == handlers


def test_step_logs_merges(caplog):
    world = World()
    world.add_body(100.0, Vector2D(100.0, 100.0))
    world.add_body(100.0, Vector2D(101.0, 100.0))
    with caplog.at_level(logging.DEBUG, logger="gravity_sim.world"):
        world.step(0.01)
    assert "merged bodies 1 and 2 into 3" in caplog.text
