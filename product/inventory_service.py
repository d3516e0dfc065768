"""
Inventory service for the product module.

Decides whether the requested line items can be reserved and publishes the
outcome. In a real system the decision would check a stock repository; here
it is a pure rule selected by configuration.
"""

import logging
from typing import Iterable, Optional

from shared.config import AppConfig, ReservationPolicy
from shared.event_bus import EventBus
from shared.events import (
    DEFAULT_FAILURE_REASON,
    InventoryFailed,
    InventoryReserved,
    OrderItem,
    total_quantity,
)

logger = logging.getLogger("inventory_service")


class InventoryService:
    """
    Reservation decisions plus publication of their outcome events.

    Example:
        service = InventoryService(event_bus=bus)
        if service.reserve(items):
            service.publish_inventory_reserved("O-1")
        else:
            service.publish_inventory_failed("O-1")
    """

    def __init__(self, event_bus: EventBus, config: Optional[AppConfig] = None):
        """
        Args:
            event_bus: Bus the outcome events are published on
            config: Selects the reservation policy and capacity cap
        """
        self.event_bus = event_bus
        self.config = config or AppConfig()

    @property
    def policy(self) -> ReservationPolicy:
        return self.config.reservation_policy

    def reserve(self, items: Iterable[OrderItem]) -> bool:
        """
        Decide whether every line item can be reserved.

        No state is changed. An empty batch is reservable: "all quantities
        positive" holds vacuously and its total (0) never exceeds the cap.
        """
        items = list(items)
        all_positive = all(item.quantity > 0 for item in items)
        if self.policy == ReservationPolicy.STRICT:
            return all_positive

        total = total_quantity(items)
        return all_positive and total <= self.config.capacity_cap

    def publish_inventory_reserved(self, order_id: str) -> None:
        logger.info(f"Inventory reserved for order {order_id}")
        self.event_bus.publish(InventoryReserved(order_id=order_id))

    def publish_inventory_failed(self, order_id: str, reason: str = DEFAULT_FAILURE_REASON) -> None:
        logger.info(f"Inventory reservation failed for order {order_id}: {reason}")
        self.event_bus.publish(InventoryFailed(order_id=order_id, reason=reason))
