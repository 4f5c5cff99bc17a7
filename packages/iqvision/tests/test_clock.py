"""Tests for clock advancement, cadence conversion and TickContext."""

import random

import pytest
from iqvision.clock import Clock
from iqvision.types import TickContext

_test_rng = random.Random(0)


def test_clock_initialization():
    """Clock starts at tick 0 with dt = 1/tps."""
    clock = Clock(tps=20)
    assert clock.tps == 20
    assert clock.tick_number == 0
    assert abs(clock.dt - 0.05) < 1e-9


@pytest.mark.parametrize("tps", [0, -5])
def test_non_positive_tps_rejected(tps):
    with pytest.raises(ValueError):
        Clock(tps=tps)


def test_advance_returns_new_tick_number():
    clock = Clock(tps=20)
    assert clock.advance() == 1
    assert clock.advance() == 2
    assert clock.tick_number == 2


def test_elapsed_tracks_ticks():
    clock = Clock(tps=10)
    for _ in range(15):
        clock.advance()
    assert abs(clock.elapsed - 1.5) < 1e-9


def test_ticks_for_allowed_cadences():
    """Each drill cadence maps to a whole number of ticks at 20 tps."""
    clock = Clock(tps=20)
    assert clock.ticks_for(1.0) == 20
    assert clock.ticks_for(1.5) == 30
    assert clock.ticks_for(2.0) == 40


def test_ticks_for_never_below_one():
    clock = Clock(tps=20)
    assert clock.ticks_for(0.0) == 1
    assert clock.ticks_for(0.001) == 1


def test_ticks_for_negative_rejected():
    with pytest.raises(ValueError):
        Clock(tps=20).ticks_for(-1.0)


def test_context_snapshot():
    """context() captures the current tick, dt, elapsed and rng."""
    clock = Clock(tps=20)
    clock.advance()
    clock.advance()
    ctx = clock.context(_test_rng)
    assert isinstance(ctx, TickContext)
    assert ctx.tick_number == 2
    assert abs(ctx.dt - 0.05) < 1e-9
    assert abs(ctx.elapsed - 0.1) < 1e-9
    assert ctx.random is _test_rng


def test_context_is_frozen():
    ctx = Clock(tps=20).context(_test_rng)
    with pytest.raises(AttributeError):
        ctx.tick_number = 5  # type: ignore[misc]

