"""Fixed-timestep clock and TickContext creation."""

import random

from iqvision.types import TickContext


class Clock:
    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed(self) -> float:
        return self._tick_number * self._dt

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def ticks_for(self, seconds: float) -> int:
        """Whole ticks spanning ``seconds``; never less than one."""
        if seconds < 0:
            raise ValueError("seconds must not be negative")
        return max(1, round(seconds * self._tps))

    def context(self, rng: random.Random) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._dt,
            elapsed=self.elapsed,
            random=rng,
        )
