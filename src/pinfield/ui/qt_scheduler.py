"""
QTimer-backed scheduler for the engine's deferred focus pass.
"""
from typing import Callable, Optional

from PyQt5.QtCore import QObject, QTimer


class QtScheduledCall:
    """Single-shot QTimer wrapper exposing cancel()."""

    def __init__(self, timer: QTimer):
        self._timer = timer
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True
        self._timer.stop()
        self._timer.deleteLater()


class QtTimerScheduler:
    """
    Schedules callbacks on the Qt event loop of ``parent``'s thread.

    Usage::

        engine = PinFieldEngine(buffer, scheduler=QtTimerScheduler(widget))
    """

    def __init__(self, parent: Optional[QObject] = None):
        self._parent = parent

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> QtScheduledCall:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        call = QtScheduledCall(timer)

        def _fire():
            if not call.cancelled:
                callback()
            timer.deleteLater()

        timer.timeout.connect(_fire)
        timer.start(max(0, delay_ms))
        return call
