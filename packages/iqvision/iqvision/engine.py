"""Engine - fixed-timestep stepping of the scheduler with a seeded RNG."""

import os
import random

from iqvision.clock import Clock
from iqvision.config import DEFAULT_TPS
from iqvision.schedule import Scheduler


class Engine:
    def __init__(self, tps: int = DEFAULT_TPS, seed: int | None = None) -> None:
        self._clock = Clock(tps)
        self._scheduler = Scheduler()

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def random(self) -> random.Random:
        return self._rng

    def step(self) -> None:
        self._clock.advance()
        self._scheduler.advance(self._clock.context(self._rng))

    def run(self, n: int) -> None:
        for _ in range(n):
            self.step()
