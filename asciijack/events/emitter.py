"""
Event system for the asciijack engine.

The engine publishes what happens during a round (cards dealt, stage changes,
the outcome) on an event bus. Front ends and tests subscribe to those events
without the engine knowing about them.
"""

from collections import defaultdict
from typing import Any, Dict, Callable, Union
import threading
import logging
from enum import Enum

# Create a logger for the event system
logger = logging.getLogger("asciijack.events")


class EventEmitter:
    """
    Event emitter. Handlers run in subscription order, and a failing handler
    is logged without stopping the others.
    """

    def __init__(self):
        """Initialize the event emitter."""
        self._listeners = defaultdict(list)
        self._listener_lock = threading.RLock()

    def on(self, event_type: Union[str, Enum], callback: Callable) -> Callable:
        """
        Subscribe to an event type.

        Args:
            event_type: The event type to subscribe to (string or enum)
            callback: Function to call when event occurs, signature: fn(event_data)

        Returns:
            Unsubscribe function that can be called to remove this subscription
        """
        if isinstance(event_type, Enum):
            event_type = event_type.name

        handler = {"callback": callback}

        with self._listener_lock:
            self._listeners[event_type].append(handler)

        def unsubscribe():
            with self._listener_lock:
                handlers = self._listeners[event_type]
                if handler in handlers:
                    handlers.remove(handler)

        return unsubscribe

    def emit(self, event_type: Union[str, Enum], data: Dict[str, Any]) -> None:
        """
        Emit an event to all registered listeners.

        Args:
            event_type: The type of event to emit
            data: The data to include with the event
        """
        if isinstance(event_type, Enum):
            event_type = event_type.name

        handlers_to_call = []

        with self._listener_lock:
            for handler in self._listeners.get(event_type, []):
                handlers_to_call.append((handler["callback"], data))

        # Call handlers outside of the lock to avoid deadlocks
        for callback, args in handlers_to_call:
            try:
                callback(args)
            except Exception as e:
                logger.error(
                    f"Error in event handler for {event_type}: {e}", exc_info=True
                )


class EventBus:
    """
    Global event bus for the application.

    This singleton class provides a centralized event bus that can be accessed
    from anywhere in the application.
    """

    _instance = None
    _lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> EventEmitter:
        """
        Get the singleton instance of the EventBus.

        Returns:
            EventEmitter instance
        """
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = EventEmitter()
        return cls._instance


class EngineEventType(Enum):
    """
    Event types published by the asciijack engine.
    """

    GAME_STARTED = "game_started"
    SHUFFLE = "shuffle"
    CARD_DEALT = "card_dealt"
    STAGE_CHANGED = "stage_changed"
    PLAYER_ACTION = "player_action"
    HAND_BUSTED = "hand_busted"
    ROUND_ENDED = "round_ended"
    ERROR = "error"
