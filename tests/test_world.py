import logging
import math

import pytest

from ropesim.Vec2 import Vec2
from ropesim.logging_config import setup_logging


def test_tick_does_nothing_while_paused(world, clock):
    h = world.points.add((0, 0))
    clock.advance(16)
    assert world.tick() == 16
    assert world.points.get(h).pos == Vec2(0, 0)


def test_tick_steps_when_running(world, clock):
    h = world.points.add((0, 0))
    world.resume()
    clock.advance(10)
    world.tick()
    assert world.points.get(h).pos.y == pytest.approx(0.0008 * 100)


def test_tick_clamps_large_gaps(world, clock):
    world.resume()
    clock.advance(5000)
    assert world.tick() == world.config.max_dt == 50.0


def test_tick_never_negative(world):
    world.resume()
    assert world.tick(now=-100) == 0.0


def test_resume_discards_paused_interval(world, clock):
    clock.advance(30)
    world.resume()
    clock.advance(8)
    assert world.tick() == 8


def test_toggle_pause(world):
    assert world.toggle_pause() is True
    assert world.running
    assert world.toggle_pause() is False
    world.pause()
    assert not world.running


def test_runtime_tunables(world):
    world.set_gravity(0.002)
    world.set_relaxation_passes(-3)
    assert world.integrator.gravity == 0.002
    assert world.relaxation.passes == 0
    assert world.config.relaxation_passes == 0


def test_segments_yield_endpoint_positions(world):
    a = world.points.add((0, 0))
    b = world.points.add((3, 4))
    world.constraints.add(a, b)
    (pa, pb), = list(world.segments())
    assert pa == Vec2(0, 0)
    assert pb == Vec2(3, 4)


def test_move_to_does_not_inject_velocity(world):
    h = world.points.add((0, 0))
    p = world.points.get(h)
    p.move_to((40, 40))
    world.set_gravity(0.0)
    world.step(16)
    assert p.pos == Vec2(40, 40)


def test_setup_logging_is_idempotent():
    setup_logging(logging.DEBUG)
    setup_logging(logging.INFO)
    logger = logging.getLogger("ropesim")
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO


def test_setup_logging_file_handler(tmp_path):
    log_file = tmp_path / "rope.log"
    setup_logging(logging.INFO, log_file=str(log_file))
    logger = logging.getLogger("ropesim")
    assert len(logger.handlers) == 2
    for handler in logger.handlers:
        handler.flush()
    assert "Logging initialized." in log_file.read_text(encoding="utf-8")
    # release the file before tmp_path cleanup
    setup_logging(logging.INFO)


@pytest.mark.parametrize("reading", [math.nan, math.inf, -math.inf])
def test_tick_ignores_non_finite_clock_readings(world, clock, reading):
    h = world.points.add((0, 0))
    world.resume()
    assert world.tick(now=reading) == 0.0
    assert world.points.get(h).pos == Vec2(0, 0)
    assert world.is_finite()
    assert world.previous_timestamp == 0.0

    clock.advance(16)
    assert world.tick() == 16
    assert world.is_finite()
