"""DrillController - session state, the two drill cycles and their mutual exclusion."""
from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

from iqvision.config import (
    DEFAULT_INTERVAL,
    NUMBER_SENTINEL,
    step_interval,
    validate_interval,
    validate_tps,
)
from iqvision.engine import Engine
from iqvision.palette import PALETTE, PaletteEntry, draw_color, draw_number
from iqvision.signals import MODE_CHANGED, STATE_CHANGED, SignalBus
from iqvision.types import RGB, DrillState, Mode, TickContext

StateHandler = Callable[[str, dict[str, Any]], None]


class DrillController:
    """Owns the drill session and regenerates the shown value every cadence.

    Every public operation applies all of its effects before observers are
    told, then sends one ``state_changed`` (after ``mode_changed`` when the
    mode moved). Each cycle tick sends ``state_changed`` as well. Signals
    go through the bus queue, so an intent issued from a handler is
    reported after the signals already in flight.

    Leaving the color drill clears only the color *name*; the last ink
    color stays in ``current_color``. Leaving the number drill resets the
    number to the sentinel 0.
    """

    def __init__(
        self,
        engine: Engine,
        bus: SignalBus | None = None,
        interval: float = DEFAULT_INTERVAL,
        palette: Sequence[PaletteEntry] = PALETTE,
        logger: logging.Logger | None = None,
    ) -> None:
        validate_tps(engine.clock.tps)
        self._engine = engine
        self._bus = bus or SignalBus()
        self._palette = tuple(palette)
        self._logger = logger or logging.getLogger(__name__)

        self._mode = Mode.IDLE
        self._number = NUMBER_SENTINEL
        self._color: RGB | None = None
        self._color_name = ""
        self._interval = validate_interval(interval)
        self._cycle: int | None = None
        self._delivering = False

    # -- Observable state --

    @property
    def bus(self) -> SignalBus:
        return self._bus

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def current_number(self) -> int:
        return self._number

    @property
    def current_color(self) -> RGB | None:
        return self._color

    @property
    def current_color_name(self) -> str:
        return self._color_name

    @property
    def interval_seconds(self) -> float:
        return self._interval

    @property
    def running(self) -> bool:
        return self._engine.scheduler.active(self._cycle)

    @property
    def state(self) -> DrillState:
        return DrillState(
            mode=self._mode,
            current_number=self._number,
            current_color=self._color,
            current_color_name=self._color_name,
            interval_seconds=self._interval,
        )

    @property
    def can_toggle_number(self) -> bool:
        return self._mode is not Mode.COLOR_DRILL

    @property
    def can_toggle_color(self) -> bool:
        return self._mode is not Mode.NUMBER_DRILL

    def subscribe(self, handler: StateHandler) -> None:
        self._bus.subscribe(STATE_CHANGED, handler)

    def unsubscribe(self, handler: StateHandler) -> None:
        self._bus.unsubscribe(STATE_CHANGED, handler)

    # -- Intents --

    def toggle_number_drill(self) -> None:
        old = self._mode
        if old is Mode.COLOR_DRILL:
            self._leave_color()
        if old is Mode.NUMBER_DRILL:
            self._leave_number()
        else:
            self._mode = Mode.NUMBER_DRILL
            self._start_cycle()
        self._notify(old)

    def toggle_color_drill(self) -> None:
        old = self._mode
        if old is Mode.NUMBER_DRILL:
            self._leave_number()
        if old is Mode.COLOR_DRILL:
            self._leave_color()
        else:
            self._mode = Mode.COLOR_DRILL
            self._start_cycle()
        self._notify(old)

    def set_interval(self, value: float) -> None:
        """Change the cadence; a running cycle restarts without drawing."""
        interval = validate_interval(value)
        old_interval = self._interval
        self._interval = interval
        if self._cycle is not None:
            self._stop_cycle()
            self._start_cycle()
        if interval != old_interval:
            self._logger.info("Cadence %.1fs -> %.1fs", old_interval, interval)
        self._notify(self._mode)

    def nudge_interval(self, direction: int) -> bool:
        """Step the cadence one notch; at either end nothing changes."""
        target = step_interval(self._interval, direction)
        if target == self._interval:
            return False
        self.set_interval(target)
        return True

    def stop(self) -> None:
        if self._mode is Mode.NUMBER_DRILL:
            self.toggle_number_drill()
        elif self._mode is Mode.COLOR_DRILL:
            self.toggle_color_drill()

    # -- Internals --

    def _start_cycle(self) -> None:
        if self._mode is Mode.NUMBER_DRILL:
            name, on_fire = "number_drill", self._number_tick
        else:
            name, on_fire = "color_drill", self._color_tick
        ticks = self._engine.clock.ticks_for(self._interval)
        self._cycle = self._engine.scheduler.every(name, ticks, on_fire)

    def _stop_cycle(self) -> None:
        self._engine.scheduler.cancel(self._cycle)
        self._cycle = None

    def _leave_number(self) -> None:
        self._stop_cycle()
        self._mode = Mode.IDLE
        self._number = NUMBER_SENTINEL

    def _leave_color(self) -> None:
        self._stop_cycle()
        self._mode = Mode.IDLE
        self._color_name = ""

    def _number_tick(self, ctx: TickContext) -> None:
        self._number = draw_number(ctx.random)
        self._logger.debug("tick %d: number %d", ctx.tick_number, self._number)
        self._bus.publish(STATE_CHANGED, state=self.state)
        self._deliver()

    def _color_tick(self, ctx: TickContext) -> None:
        self._color, self._color_name = draw_color(
            ctx.random, excluding=self._color_name or None, palette=self._palette
        )
        self._logger.debug("tick %d: color %s", ctx.tick_number, self._color_name)
        self._bus.publish(STATE_CHANGED, state=self.state)
        self._deliver()

    def _notify(self, old: Mode) -> None:
        if old is not self._mode:
            self._logger.info("Mode %s -> %s", old.value, self._mode.value)
            self._bus.publish(MODE_CHANGED, old=old, new=self._mode)
        self._bus.publish(STATE_CHANGED, state=self.state)
        self._deliver()

    def _deliver(self) -> None:
        # Intents issued by handlers queue behind the signals being delivered,
        # so the last state_changed always matches the controller.
        if self._delivering:
            return
        self._delivering = True
        try:
            self._bus.flush()
        finally:
            self._delivering = False
