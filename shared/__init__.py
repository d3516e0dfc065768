"""
Shared base package for the modular monolith.

This package is NOT an application module. It holds what both modules may
depend on without depending on each other:
- Event DTOs exchanged between the order and product modules
- The in-memory event bus
- Application configuration
"""

from shared.config import AppConfig, ReservationPolicy
from shared.event_bus import EventBus
from shared.events import (
    DEFAULT_FAILURE_REASON,
    DomainEvent,
    InventoryEvent,
    InventoryFailed,
    InventoryReserved,
    OrderItem,
    OrderPlaced,
    total_quantity,
)

__all__ = [
    "AppConfig",
    "ReservationPolicy",
    "EventBus",
    "DEFAULT_FAILURE_REASON",
    "DomainEvent",
    "InventoryEvent",
    "InventoryFailed",
    "InventoryReserved",
    "OrderItem",
    "OrderPlaced",
    "total_quantity",
]
