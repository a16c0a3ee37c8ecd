"""QTimer backed implementation of the engine scheduler."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QObject, QTimer


class QtTaskHandle:
    """Owns one ``QTimer``; cancelling stops and releases it."""

    def __init__(
        self,
        parent: QObject | None,
        interval_ms: int,
        callback: Callable[[], None],
        single_shot: bool,
    ) -> None:
        self._callback = callback
        self._single_shot = single_shot
        self._timer: QTimer | None = QTimer(parent)
        self._timer.setSingleShot(single_shot)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._fire)
        self._timer.start()

    @property
    def active(self) -> bool:
        return self._timer is not None and self._timer.isActive()

    def cancel(self) -> None:
        self._release()

    def _fire(self) -> None:
        if self._single_shot:
            self._release()
        self._callback()

    def _release(self) -> None:
        if self._timer is None:
            return
        self._timer.stop()
        self._timer.deleteLater()
        self._timer = None


class QtScheduler:
    """Schedules engine callbacks on the Qt event loop."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent

    def call_repeating(self, interval_seconds: float, callback: Callable[[], None]) -> QtTaskHandle:
        return QtTaskHandle(self._parent, _to_ms(interval_seconds), callback, single_shot=False)

    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> QtTaskHandle:
        return QtTaskHandle(self._parent, _to_ms(delay_seconds), callback, single_shot=True)


def _to_ms(seconds: float) -> int:
    return max(0, round(seconds * 1000))
