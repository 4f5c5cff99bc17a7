"""Color palette and random draws for the drills.

Each entry pairs an ink color with a *different* color's name, so the
color drill reads as a Stroop test: the word says "Blue" while the text is
painted red.
"""
from __future__ import annotations

import random
from typing import Sequence

from iqvision.config import NUMBER_MAX, NUMBER_MIN
from iqvision.types import RGB

PaletteEntry = tuple[RGB, str]

RED = (255, 59, 48)
ORANGE = (255, 149, 0)
YELLOW = (255, 204, 0)
GREEN = (52, 199, 89)
BLUE = (0, 122, 255)
PURPLE = (175, 82, 222)
BLACK = (0, 0, 0)

PALETTE: tuple[PaletteEntry, ...] = (
    (RED, "Blue"),
    (ORANGE, "Green"),
    (YELLOW, "Red"),
    (GREEN, "Purple"),
    (BLUE, "Yellow"),
    (PURPLE, "Orange"),
)

FALLBACK: PaletteEntry = (BLACK, "Black")


def draw_color(
    rng: random.Random,
    excluding: str | None = None,
    palette: Sequence[PaletteEntry] = PALETTE,
) -> PaletteEntry:
    """Pick uniformly among entries not named ``excluding``.

    Falls back to FALLBACK when nothing is left, which needs a palette of
    fewer than two entries.
    """
    candidates = [entry for entry in palette if entry[1] != excluding]
    if not candidates:
        return FALLBACK
    return rng.choice(candidates)


def draw_number(rng: random.Random) -> int:
    return rng.randint(NUMBER_MIN, NUMBER_MAX)
