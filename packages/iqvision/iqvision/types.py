"""Shared types for the drill controller."""

from __future__ import annotations

import enum
import random as _random
from dataclasses import dataclass

RGB = tuple[int, int, int]


class Mode(enum.Enum):
    IDLE = "idle"
    NUMBER_DRILL = "number_drill"
    COLOR_DRILL = "color_drill"


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    random: _random.Random


@dataclass(frozen=True, slots=True)
class DrillState:
    """Read-only snapshot of the session handed to observers."""

    mode: Mode
    current_number: int
    current_color: RGB | None
    current_color_name: str
    interval_seconds: float

    @property
    def number_active(self) -> bool:
        return self.mode is Mode.NUMBER_DRILL

    @property
    def color_active(self) -> bool:
        return self.mode is Mode.COLOR_DRILL


class IntervalError(ValueError):
    """Raised when a cadence is not one of the allowed intervals."""

    def __init__(self, value: object, message: str) -> None:
        self.value = value
        super().__init__(message)
