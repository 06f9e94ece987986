"""
Event bus used by the engine to republish its render contract.

Single-threaded: subscribers run synchronously inside the publishing pass.
"""
from typing import Dict, List, Callable, Any

from pinfield.utils.logger import logger


class EventBus:
    """
    Per-engine pub/sub hub.

    Subscriber exceptions are logged and never propagate back into the
    publishing engine.
    """

    def __init__(self):
        self._subscribers: Dict[str, List[Callable]] = {}

    def subscribe(self, event_type: str, callback: Callable) -> None:
        """
        Subscribe to an event type.

        Args:
            event_type: The type of event to subscribe to
            callback: Function to call when event is published
        """
        callbacks = self._subscribers.setdefault(event_type, [])
        if callback not in callbacks:
            callbacks.append(callback)
            logger.debug(f"Subscribed to event: {event_type}")

    def unsubscribe(self, event_type: str, callback: Callable) -> None:
        """
        Unsubscribe from an event type.

        Args:
            event_type: The type of event to unsubscribe from
            callback: The callback to remove
        """
        callbacks = self._subscribers.get(event_type)
        if callbacks and callback in callbacks:
            callbacks.remove(callback)
            logger.debug(f"Unsubscribed from event: {event_type}")

            # Clean up empty subscriber lists
            if not callbacks:
                del self._subscribers[event_type]

    def publish(self, event_type: str, data: Any = None) -> None:
        """
        Publish an event to all subscribers.

        Args:
            event_type: The type of event to publish
            data: Optional data to pass to subscribers
        """
        subscribers = list(self._subscribers.get(event_type, []))

        for callback in subscribers:
            try:
                callback(data)
            except Exception as e:
                logger.error(f"Error in event handler for {event_type}: {e}")


class PinEvents:
    """Event types published by PinFieldEngine."""

    RENDER_UPDATED = "pin.render.updated"     # descriptors rebuilt (RenderModel)
    FOCUS_UPDATED = "pin.focus.updated"       # deferred focus applied (RenderModel)
    # finished code (str); published only after the completion observer took it
    COMPLETED = "pin.completed"
