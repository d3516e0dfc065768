"""
In-memory event bus for the modular monolith.

This module provides the pub/sub mechanism that lets the order and product
modules collaborate without importing each other. In a distributed system
this would be replaced by a message broker; here everything runs in-process.

Design decisions:
- Synchronous delivery: publish() returns only after every handler ran
- Type-based subscriptions keyed by the exact event class (no subclass matching)
- Events are delivered to all subscribers in registration order
- A failing handler is logged and skipped, the remaining handlers still run
- No persistence (an optional in-memory log is kept for debugging/tests)
- The bus is an explicit object handed to each component, never a global

Key insight:
- Publishers don't know who is listening
- Subscribers don't know who is publishing
- The order module never imports the product module, and vice versa
"""

import logging
import threading
from collections import defaultdict
from typing import Any, Callable, TypeVar

from shared.events import DomainEvent

logger = logging.getLogger("event_bus")

E = TypeVar("E", bound=DomainEvent)

# Type alias for event handler functions
EventHandler = Callable[[Any], None]


class EventBus:
    """
    Simple in-memory event bus implementing the pub/sub pattern.

    Example usage:
        bus = EventBus()

        def on_placed(event: OrderPlaced) -> None:
            print(f"Order placed: {event.order_id}")

        bus.subscribe(OrderPlaced, on_placed)
        bus.publish(OrderPlaced(order_id="O-1", items=()))
    """

    def __init__(self, log_events: bool = True):
        """
        Initialize the event bus with empty subscriber lists.

        Args:
            log_events: Keep every published event in an in-memory log
        """
        # Map of event class -> list of handlers
        self._subscribers: dict[type, list[EventHandler]] = defaultdict(list)
        # Handlers that receive every event
        self._wildcard: list[EventHandler] = []
        self._lock = threading.RLock()

        self._event_log: list[DomainEvent] = []
        self._log_events = log_events

    def subscribe(self, event_type: type[E], handler: Callable[[E], None]) -> None:
        """
        Subscribe to events of a specific class.

        Args:
            event_type: The event class to subscribe to (e.g. OrderPlaced)
            handler: Function to call when an event of exactly this class is published

        Note: The same handler can be subscribed multiple times (will be called multiple times).
        """
        if not (isinstance(event_type, type) and issubclass(event_type, DomainEvent)):
            raise TypeError(f"Can only subscribe to DomainEvent subclasses, got {event_type!r}")
        with self._lock:
            self._subscribers[event_type].append(handler)
        logger.debug(f"Subscribed handler to '{event_type.__name__}' events")

    def subscribe_all(self, handler: EventHandler) -> None:
        """
        Subscribe to ALL events (useful for audit logging or debugging).

        Wildcard handlers run after the typed handlers of each event.
        """
        with self._lock:
            self._wildcard.append(handler)
        logger.debug("Subscribed handler to ALL events")

    def unsubscribe(self, event_type: type, handler: EventHandler) -> bool:
        """
        Unsubscribe a handler from an event class.

        Returns:
            True if the handler was found and removed, False otherwise
        """
        with self._lock:
            handlers = self._subscribers.get(event_type)
            if not handlers or handler not in handlers:
                return False
            handlers.remove(handler)
        logger.debug(f"Unsubscribed handler from '{event_type.__name__}' events")
        return True

    def publish(self, event: DomainEvent) -> int:
        """
        Publish an event to all subscribers of its exact class.

        Args:
            event: The event to publish

        Returns:
            Number of handlers that received the event

        Handlers are called synchronously in the order they subscribed, on the
        caller's stack. If a handler raises, the exception is logged and the
        next handler still runs; publish() itself does not raise.
        """
        with self._lock:
            if self._log_events:
                self._event_log.append(event)
            # Snapshot so handlers may publish or subscribe while we iterate
            handlers = list(self._subscribers.get(type(event), ())) + list(self._wildcard)

        logger.info(f"Publishing: {event}")

        handlers_called = 0
        for handler in handlers:
            handlers_called += 1
            try:
                handler(event)
            except Exception:
                logger.exception(f"Handler {_handler_name(handler)} raised for {event}")

        if handlers_called == 0:
            logger.warning(f"No handlers for event type '{type(event).__name__}'")

        return handlers_called

    def get_subscriber_count(self, event_type: type) -> int:
        """Get the number of subscribers for an event class."""
        with self._lock:
            return len(self._subscribers.get(event_type, ()))

    def get_event_log(self) -> list[DomainEvent]:
        """Get a copy of the log of all published events."""
        with self._lock:
            return self._event_log.copy()

    def clear_event_log(self) -> None:
        """Clear the event log."""
        with self._lock:
            self._event_log.clear()

    def clear_subscribers(self) -> None:
        """Remove all subscribers (useful for testing)."""
        with self._lock:
            self._subscribers.clear()
            self._wildcard.clear()

    def set_logging(self, enabled: bool) -> None:
        """Enable or disable event logging."""
        self._log_events = enabled


def _handler_name(handler: EventHandler) -> str:
    return getattr(handler, "__qualname__", repr(handler))
