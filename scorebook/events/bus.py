"""Event bus for session observers."""

import logging
from collections import defaultdict
from typing import Callable, TypeVar

from scorebook.events.types import GameEvent

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=GameEvent)
EventHandler = Callable[[GameEvent], None]


class EventBus:
    """
    Pub/sub bus that lets a scoring session announce changes without
    knowing who listens (API push, persistence, logging).

    Handlers registered for an event class also receive its subclasses,
    so subscribing to GameEvent observes everything.

    Example:
        bus = EventBus()
        unsubscribe = bus.subscribe(PlayRecordedEvent, lambda e: print(e.play))
        bus.emit(PlayRecordedEvent(play=play))
        unsubscribe()
    """

    def __init__(self) -> None:
        self._handlers: dict[type[GameEvent], list[EventHandler]] = defaultdict(list)

    def subscribe(self, event_type: type[T], handler: Callable[[T], None]) -> Callable[[], None]:
        """
        Register a handler for an event type.

        Returns a callable that removes the handler again.
        """
        self._handlers[event_type].append(handler)
        return lambda: self.unsubscribe(event_type, handler)

    def unsubscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        if handler in self._handlers[event_type]:
            self._handlers[event_type].remove(handler)

    def emit(self, event: GameEvent) -> None:
        """
        Deliver an event to handlers of its class and of each base class.

        Handlers run synchronously in registration order, most specific
        class first. Exceptions propagate to the emitter.
        """
        logger.debug("Emitting %s for game %s", type(event).__name__, event.game_id)
        for cls in type(event).__mro__:
            if cls in self._handlers:
                for handler in list(self._handlers[cls]):
                    handler(event)
            if cls is GameEvent:
                break

    def clear(self) -> None:
        self._handlers.clear()

    def handler_count(self, event_type: type[GameEvent] | None = None) -> int:
        """Number of handlers for one type, or across all types."""
        if event_type is None:
            return sum(len(handlers) for handlers in self._handlers.values())
        return len(self._handlers.get(event_type, []))
