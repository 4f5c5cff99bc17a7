"""iqvision - Timed number and color drills on a fixed-timestep clock."""

from iqvision.clock import Clock
from iqvision.config import ALLOWED_INTERVALS, DrillConfig
from iqvision.controller import DrillController
from iqvision.engine import Engine
from iqvision.schedule import Periodic, Scheduler, Timer
from iqvision.signals import SignalBus
from iqvision.splash import SplashGate
from iqvision.types import DrillState, IntervalError, Mode, TickContext

__all__ = [
    "DrillController",
    "DrillState",
    "Mode",
    "Engine",
    "Clock",
    "Scheduler",
    "Periodic",
    "Timer",
    "SignalBus",
    "SplashGate",
    "DrillConfig",
    "ALLOWED_INTERVALS",
    "IntervalError",
    "TickContext",
]
