"""Presentation model: what the drill screen shows for a given state."""
from __future__ import annotations

from iqvision.config import ALLOWED_INTERVALS
from iqvision.types import RGB, DrillState

WHITE: RGB = (255, 255, 255)

INTERVAL_TITLE = "Time Interval"


def number_text(state: DrillState) -> str | None:
    """The big number, or None when the number drill is not running."""
    if not state.number_active:
        return None
    return str(state.current_number)


def color_text(state: DrillState) -> tuple[str, RGB]:
    """Color-name line and its ink; white unless the color drill is running."""
    if state.color_active and state.current_color is not None:
        return state.current_color_name, state.current_color
    return state.current_color_name, WHITE


def number_button_label(state: DrillState) -> str:
    return "Stop Number Drill" if state.number_active else "Start Number Drill"


def color_button_label(state: DrillState) -> str:
    return "Stop Color Drill" if state.color_active else "Start Color Drill"


def interval_label(seconds: float) -> str:
    return f"{seconds:g}s"


def slider_position(seconds: float) -> float:
    """Fraction along the slider track, 0.0 at the shortest cadence."""
    lo, hi = ALLOWED_INTERVALS[0], ALLOWED_INTERVALS[-1]
    return min(1.0, max(0.0, (seconds - lo) / (hi - lo)))


def interval_at(position: float) -> float:
    """Nearest allowed cadence for a slider fraction (0.0..1.0)."""
    lo, hi = ALLOWED_INTERVALS[0], ALLOWED_INTERVALS[-1]
    target = lo + min(1.0, max(0.0, position)) * (hi - lo)
    return min(ALLOWED_INTERVALS, key=lambda v: abs(v - target))
