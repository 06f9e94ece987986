"""
Completion detection and delivery to a weakly held observer.
"""
import weakref
from typing import Callable, Optional, Union

from pinfield.core.configuration import PinConfiguration
from pinfield.core.types import Direction
from pinfield.utils.logger import logger

# An object exposing on_complete(code), or any callable taking the code
CompletionObserver = Union[object, Callable[[str], None]]


def _weak(observer: CompletionObserver):
    """Wrap an observer in a weak reference without extending its lifetime."""
    if hasattr(observer, '__self__') and hasattr(observer, '__func__'):
        return weakref.WeakMethod(observer)
    return weakref.ref(observer)


def _deliver(observer: CompletionObserver, code: str) -> None:
    handler = getattr(observer, 'on_complete', None)
    if handler is None:
        handler = observer
    handler(code)


def check_completion(
    sanitized: str,
    config: PinConfiguration,
    direction: Direction,
    observer: Optional["weakref.ReferenceType"] = None,
) -> Optional[str]:
    """
    Deliver the finished code if every slot is filled.

    Level-triggered: fires each time it is evaluated on a full code. Under
    RTL the sanitized text is stored in slot order and is reversed back to
    reading order before delivery.

    Args:
        sanitized: Sanitized code text
        config: Active configuration
        direction: Layout direction
        observer: Weak reference to the completion observer, or None

    Returns:
        The code handed to the observer, or None if nothing was delivered
    """
    if len(sanitized) != config.slot_count:
        return None

    target = observer() if observer is not None else None
    if target is None:
        logger.warning("No completion observer set for pin field, code dropped")
        return None

    code = sanitized[::-1] if direction is Direction.RTL else sanitized
    try:
        _deliver(target, code)
    except Exception:
        logger.exception("Completion observer raised")
        return None
    return code


class CompletionDetector:
    """Owns the non-owning observer handle and evaluates completion."""

    def __init__(self, observer: Optional[CompletionObserver] = None):
        self._observer_ref = None
        if observer is not None:
            self.set_observer(observer)

    @property
    def observer(self) -> Optional[CompletionObserver]:
        """The observer, or None if unset or already collected."""
        if self._observer_ref is None:
            return None
        return self._observer_ref()

    def set_observer(self, observer: Optional[CompletionObserver]) -> None:
        self._observer_ref = None if observer is None else _weak(observer)

    def check(self, sanitized: str, config: PinConfiguration, direction: Direction) -> Optional[str]:
        return check_completion(sanitized, config, direction, self._observer_ref)
