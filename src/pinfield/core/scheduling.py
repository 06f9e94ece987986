"""
Cancellable deferred calls.

The engine postpones focus recomputation by one short tick so the renderer
can finish laying out the new model first. Hosts plug in their own timer
(see pinfield.ui.qt_scheduler); ManualScheduler runs headless.
"""
from typing import Callable, List, Protocol


class ScheduledCall(Protocol):
    def cancel(self) -> None: ...

    @property
    def cancelled(self) -> bool: ...


class Scheduler(Protocol):
    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledCall: ...


class ManualCall:
    """Pending call owned by a ManualScheduler."""

    def __init__(self, due_ms: int, callback: Callable[[], None]):
        self.due_ms = due_ms
        self.callback = callback
        self._cancelled = False
        self.fired = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True


class ManualScheduler:
    """
    Scheduler driven by explicit clock advances.

    Usage::

        scheduler = ManualScheduler()
        engine = PinFieldEngine(buffer, scheduler=scheduler)
        engine.on_input_changed()
        scheduler.advance(10)   # fires the deferred focus pass
    """

    def __init__(self):
        self.now_ms = 0
        self._pending: List[ManualCall] = []

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> ManualCall:
        call = ManualCall(self.now_ms + max(0, delay_ms), callback)
        self._pending.append(call)
        return call

    @property
    def pending(self) -> List[ManualCall]:
        return [c for c in self._pending if not c.cancelled and not c.fired]

    def advance(self, ms: int) -> int:
        """Move the clock forward and fire due calls in order; returns how many fired."""
        self.now_ms += ms
        fired = 0
        while True:
            due = [c for c in self.pending if c.due_ms <= self.now_ms]
            if not due:
                break
            call = min(due, key=lambda c: c.due_ms)
            call.fired = True
            call.callback()
            fired += 1
        self._pending = self.pending
        return fired

    def run_pending(self) -> int:
        """Fire everything still pending regardless of delay."""
        if not self.pending:
            return 0
        latest = max(c.due_ms for c in self.pending)
        return self.advance(max(0, latest - self.now_ms))
