"""Drill constants and the validated session configuration."""
from __future__ import annotations

import math
from dataclasses import dataclass

from iqvision.types import IntervalError

# Cadence choices (the slider runs 1.0..2.0 in 0.5 steps)
ALLOWED_INTERVALS: tuple[float, ...] = (1.0, 1.5, 2.0)
DEFAULT_INTERVAL = 1.0

# Number drill range, inclusive; SENTINEL means "nothing shown"
NUMBER_MIN = 1
NUMBER_MAX = 99
NUMBER_SENTINEL = 0

# Timing
SPLASH_SECONDS = 3.0
DEFAULT_TPS = 20

_TOLERANCE = 1e-9


def validate_interval(value: object) -> float:
    """Return the canonical cadence for ``value`` or raise IntervalError."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise IntervalError(value, f"Interval must be a number, got {value!r}")
    if math.isnan(value):
        raise IntervalError(value, "Interval must not be NaN")
    for allowed in ALLOWED_INTERVALS:
        if abs(value - allowed) <= _TOLERANCE:
            return allowed
    choices = ", ".join(f"{v:g}" for v in ALLOWED_INTERVALS)
    raise IntervalError(value, f"Interval {value!r} not in allowed set ({choices})")


def validate_tps(tps: int) -> int:
    """Return ``tps`` if every allowed cadence spans a whole number of ticks."""
    if isinstance(tps, bool) or not isinstance(tps, int) or tps <= 0:
        raise ValueError(f"tps must be a positive integer, got {tps!r}")
    for interval in ALLOWED_INTERVALS:
        ticks = interval * tps
        if abs(ticks - round(ticks)) > _TOLERANCE:
            raise ValueError(
                f"tps {tps} cannot time a {interval:g}s cadence exactly; use an even tps"
            )
    return tps


def step_interval(current: float, direction: int) -> float:
    """Move one slider notch in ``direction`` (+1/-1), saturating at the ends."""
    idx = ALLOWED_INTERVALS.index(validate_interval(current))
    if direction > 0:
        idx = min(idx + 1, len(ALLOWED_INTERVALS) - 1)
    elif direction < 0:
        idx = max(idx - 1, 0)
    return ALLOWED_INTERVALS[idx]


@dataclass
class DrillConfig:
    tps: int = DEFAULT_TPS
    seed: int | None = None
    interval: float = DEFAULT_INTERVAL
    splash_seconds: float = SPLASH_SECONDS
    fullscreen: bool = False

    def __post_init__(self) -> None:
        validate_tps(self.tps)
        if self.splash_seconds < 0:
            raise ValueError("splash_seconds must not be negative")
        self.interval = validate_interval(self.interval)
