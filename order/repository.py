"""
In-memory order status store.

Holds the only process-lifetime state of the application: order id -> status.
Nothing is persisted; a restart loses everything.

Design decisions:
- No entry means the order is still pending (no explicit NEW record is written)
- update_status() overwrites unconditionally, so the last outcome wins
- A single lock guards the map because HTTP requests may run on several threads
"""

import logging
import threading
from typing import Optional

from order.models import OrderId, OrderStatus

logger = logging.getLogger("order_repository")


class OrderRepository:
    """Thread-safe mapping of order id to its current status."""

    def __init__(self):
        self._state: dict[OrderId, OrderStatus] = {}
        self._lock = threading.Lock()

    def update_status(self, order_id: OrderId, status: OrderStatus) -> None:
        """Set the status of an order, replacing whatever was there."""
        with self._lock:
            previous = self._state.get(order_id)
            self._state[order_id] = status

        if previous is not None and previous.is_terminal:
            logger.warning(
                f"Order {order_id} already {previous.status}, overwriting with {status.status}"
            )
        else:
            logger.info(f"Order {order_id} -> {status.status}")

    def status_of(self, order_id: str) -> Optional[OrderStatus]:
        """Current status of an order, or None if no outcome was recorded yet."""
        with self._lock:
            return self._state.get(order_id)

    def all_statuses(self) -> dict[OrderId, OrderStatus]:
        """Snapshot of every recorded status."""
        with self._lock:
            return dict(self._state)

    def clear(self) -> None:
        with self._lock:
            self._state.clear()
