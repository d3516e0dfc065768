"""
Order module.

Accepts orders, publishes OrderPlaced and tracks each order's status from
the inventory outcome events it receives. Must never import from the
`product` package; only `shared` is allowed.
"""

from order.models import (
    Cancelled,
    New,
    OrderAccepted,
    OrderId,
    OrderResult,
    OrderStatus,
    PlaceOrderCommand,
    ReadyToShip,
    as_order_id,
)
from order.process_manager import OrderProcessManager
from order.repository import OrderRepository
from order.service import OrderService

__all__ = [
    "Cancelled",
    "New",
    "OrderAccepted",
    "OrderId",
    "OrderResult",
    "OrderStatus",
    "PlaceOrderCommand",
    "ReadyToShip",
    "as_order_id",
    "OrderProcessManager",
    "OrderRepository",
    "OrderService",
]
