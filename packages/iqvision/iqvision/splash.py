"""One-shot startup gate between the loading view and the drill screen."""
from __future__ import annotations

from iqvision.config import SPLASH_SECONDS
from iqvision.engine import Engine
from iqvision.signals import SPLASH_DONE, SignalBus
from iqvision.types import TickContext


class SplashGate:
    """Stays ``loading`` for ``seconds`` of engine time, then opens once."""

    def __init__(
        self,
        engine: Engine,
        bus: SignalBus | None = None,
        seconds: float = SPLASH_SECONDS,
    ) -> None:
        if seconds < 0:
            raise ValueError("seconds must not be negative")
        self._engine = engine
        self._bus = bus or SignalBus()
        self._loading = True
        # ticks_for() rounds up to one tick, so seconds=0 opens on the first step
        delay = engine.clock.ticks_for(seconds)
        self._timer: int | None = engine.scheduler.after("splash", delay, self._on_fire)

    @property
    def loading(self) -> bool:
        return self._loading

    def skip(self) -> None:
        if not self._loading:
            return
        self._engine.scheduler.cancel(self._timer)
        self._open()

    def _on_fire(self, ctx: TickContext) -> None:
        self._open()

    def _open(self) -> None:
        self._timer = None
        self._loading = False
        self._bus.emit(SPLASH_DONE)
