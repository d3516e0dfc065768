"""
Inventory policy: the product module's reaction to placed orders.

This listener is the only entry point from the order module into the product
module, and it arrives through the event bus rather than an import. The order
module does not know this class exists.
"""

import logging

from shared.event_bus import EventBus
from shared.events import OrderPlaced
from product.inventory_service import InventoryService

logger = logging.getLogger("inventory_policy")


class InventoryPolicy:
    """Reserves inventory for every OrderPlaced event and reports the outcome."""

    def __init__(self, inventory: InventoryService, event_bus: EventBus):
        self.inventory = inventory
        self.event_bus = event_bus
        self._started = False

    def start(self) -> None:
        """Start listening for OrderPlaced events."""
        if self._started:
            logger.warning("InventoryPolicy already started")
            return
        self.event_bus.subscribe(OrderPlaced, self.on_order_placed)
        self._started = True
        logger.info("InventoryPolicy started - listening for OrderPlaced")

    def stop(self) -> None:
        """Stop listening for events."""
        if not self._started:
            return
        self.event_bus.unsubscribe(OrderPlaced, self.on_order_placed)
        self._started = False
        logger.info("InventoryPolicy stopped")

    def on_order_placed(self, event: OrderPlaced) -> None:
        # One decision per event, no retries
        logger.debug(f"Handling {event} for order {event.order_id}")
        if self.inventory.reserve(event.items):
            self.inventory.publish_inventory_reserved(order_id=event.order_id)
        else:
            self.inventory.publish_inventory_failed(order_id=event.order_id)
