"""Timer abstractions used by the game engine.

The engine never sleeps or polls. It asks a ``Scheduler`` for repeating and
one-shot callbacks and keeps the returned ``TaskHandle`` so it can cancel it.
``ManualScheduler`` advances a virtual clock explicitly; the Qt layer provides
a ``QTimer`` backed implementation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import itertools
from typing import Callable, Protocol

Callback = Callable[[], None]


class TaskHandle(Protocol):
    """Handle for a scheduled callback."""

    @property
    def active(self) -> bool: ...

    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Source of repeating and one-shot callbacks."""

    def call_repeating(self, interval_seconds: float, callback: Callback) -> TaskHandle: ...

    def call_later(self, delay_seconds: float, callback: Callback) -> TaskHandle: ...


_sequence = itertools.count()


@dataclass(slots=True)
class ManualTaskHandle:
    """Task registered with a ``ManualScheduler``."""

    due_at: float
    callback: Callback
    interval: float | None = None
    order: int = field(default_factory=lambda: next(_sequence))
    _active: bool = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        self._active = False


class ManualScheduler:
    """Deterministic scheduler driven by ``advance``.

    Callbacks run synchronously inside ``advance`` in due-time order; tasks
    due at the same instant run in the order they were scheduled.
    """

    def __init__(self) -> None:
        self._now: float = 0.0
        self._tasks: list[ManualTaskHandle] = []

    @property
    def now(self) -> float:
        return self._now

    def call_repeating(self, interval_seconds: float, callback: Callback) -> ManualTaskHandle:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        task = ManualTaskHandle(self._now + interval_seconds, callback, interval=interval_seconds)
        self._tasks.append(task)
        return task

    def call_later(self, delay_seconds: float, callback: Callback) -> ManualTaskHandle:
        if delay_seconds < 0:
            raise ValueError("delay_seconds cannot be negative")
        task = ManualTaskHandle(self._now + delay_seconds, callback)
        self._tasks.append(task)
        return task

    def active_tasks(self) -> list[ManualTaskHandle]:
        self._prune()
        return list(self._tasks)

    def advance(self, seconds: float) -> None:
        """Move the clock forward, firing every callback that falls due."""
        if seconds < 0:
            raise ValueError("cannot move the clock backwards")
        target = self._now + seconds
        while True:
            self._prune()
            due = [task for task in self._tasks if task.due_at <= target]
            if not due:
                break
            task = min(due, key=lambda t: (t.due_at, t.order))
            self._now = task.due_at
            if task.interval is None:
                task.cancel()
            else:
                task.due_at += task.interval
            task.callback()
        self._now = target

    def _prune(self) -> None:
        self._tasks = [task for task in self._tasks if task.active]
