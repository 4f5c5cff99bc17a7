"""Cancellable one-shot and recurring tasks driven by the clock."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Union

from iqvision.types import TickContext

TaskCallback = Callable[[TickContext], None]


@dataclass
class Timer:
    """One-shot countdown. Fires when remaining reaches 0, then is dropped."""

    name: str
    remaining: int
    on_fire: TaskCallback


@dataclass
class Periodic:
    """Recurring task. Fires every `interval` ticks until cancelled."""

    name: str
    interval: int
    on_fire: TaskCallback
    elapsed: int = 0


Task = Union[Timer, Periodic]


class Scheduler:
    """Owns scheduled tasks by handle.

    ``cancel`` takes effect immediately: a task cancelled from inside another
    task's callback will not fire later in the same ``advance``.
    """

    def __init__(self) -> None:
        self._tasks: dict[int, Task] = {}
        self._next_handle: int = 1

    def every(self, name: str, interval: int, on_fire: TaskCallback) -> int:
        if interval < 1:
            raise ValueError("interval must be at least 1 tick")
        return self._add(Periodic(name=name, interval=interval, on_fire=on_fire))

    def after(self, name: str, delay: int, on_fire: TaskCallback) -> int:
        if delay < 1:
            raise ValueError("delay must be at least 1 tick")
        return self._add(Timer(name=name, remaining=delay, on_fire=on_fire))

    def _add(self, task: Task) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._tasks[handle] = task
        return handle

    def cancel(self, handle: int | None) -> bool:
        if handle is None:
            return False
        return self._tasks.pop(handle, None) is not None

    def active(self, handle: int | None) -> bool:
        return handle is not None and handle in self._tasks

    def names(self) -> list[str]:
        return [task.name for task in self._tasks.values()]

    def __len__(self) -> int:
        return len(self._tasks)

    def advance(self, ctx: TickContext) -> None:
        for handle in list(self._tasks):
            task = self._tasks.get(handle)
            if task is None:
                # cancelled earlier in this advance
                continue
            if isinstance(task, Timer):
                task.remaining -= 1
                if task.remaining <= 0:
                    del self._tasks[handle]
                    task.on_fire(ctx)
            else:
                task.elapsed += 1
                if task.elapsed >= task.interval:
                    task.elapsed = 0
                    task.on_fire(ctx)
