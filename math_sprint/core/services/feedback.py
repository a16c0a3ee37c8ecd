"""Versioned transient feedback messages."""

from __future__ import annotations

from typing import Callable

from math_sprint.core.models import Feedback, FeedbackKind
from math_sprint.core.services.scheduler import Scheduler, TaskHandle


class FeedbackChannel:
    """Publishes feedback and schedules its expiry.

    Every published message gets a new version. The expiry callback receives
    the version it was scheduled for, so the owner can ignore expiries for
    messages that were since replaced.
    """

    def __init__(self, scheduler: Scheduler, on_expire: Callable[[int], None]) -> None:
        self._scheduler = scheduler
        self._on_expire = on_expire
        self._version: int = 0
        self._clear_handle: TaskHandle | None = None

    def publish(self, kind: FeedbackKind, text: str, duration_seconds: float) -> Feedback:
        self._cancel_pending_clear()
        self._version += 1
        version = self._version
        self._clear_handle = self._scheduler.call_later(
            duration_seconds, lambda: self._on_expire(version)
        )
        return Feedback(kind=kind, text=text, version=version)

    def is_current(self, version: int) -> bool:
        return version == self._version

    def invalidate(self) -> None:
        """Drop the current message so no pending expiry can act on it."""
        self._cancel_pending_clear()
        self._version += 1

    def get_version(self) -> int:
        return self._version

    def _cancel_pending_clear(self) -> None:
        if self._clear_handle is not None:
            self._clear_handle.cancel()
            self._clear_handle = None
