"""
Order process manager: turns inventory outcomes into order status.

Listens for the product module's InventoryReserved / InventoryFailed events
and records the matching status. This is the only writer of the order
repository.

State machine:
    (no entry) --InventoryReserved--> READY_TO_SHIP
    (no entry) --InventoryFailed-->   CANCELLED(reason)
READY_TO_SHIP and CANCELLED are terminal; nothing in the order module moves
an order out of them.
"""

import logging

from shared.event_bus import EventBus
from shared.events import INVENTORY_EVENT_TYPES, InventoryEvent, InventoryFailed, InventoryReserved
from order.models import Cancelled, ReadyToShip, as_order_id
from order.repository import OrderRepository

logger = logging.getLogger("order_process_manager")


class OrderProcessManager:
    """
    Listener for inventory outcome events.

    Example:
        manager = OrderProcessManager(repository=repo, event_bus=bus)
        manager.start()

        bus.publish(InventoryReserved(order_id="O-1"))
        repo.status_of("O-1")  # ReadyToShip()
    """

    def __init__(self, repository: OrderRepository, event_bus: EventBus):
        self.repository = repository
        self.event_bus = event_bus
        self._started = False

    def start(self) -> None:
        """Subscribe `handle` to every inventory outcome."""
        if self._started:
            logger.warning("OrderProcessManager already started")
            return
        for event_type in INVENTORY_EVENT_TYPES:
            self.event_bus.subscribe(event_type, self.handle)
        self._started = True
        logger.info("OrderProcessManager started - listening for inventory outcomes")

    def stop(self) -> None:
        if not self._started:
            return
        for event_type in INVENTORY_EVENT_TYPES:
            self.event_bus.unsubscribe(event_type, self.handle)
        self._started = False
        logger.info("OrderProcessManager stopped")

    def on_reserved(self, event: InventoryReserved) -> None:
        self.repository.update_status(as_order_id(event.order_id), ReadyToShip())

    def on_failed(self, event: InventoryFailed) -> None:
        self.repository.update_status(as_order_id(event.order_id), Cancelled(reason=event.reason))

    def handle(self, event: InventoryEvent) -> None:
        """
        Dispatch any inventory outcome to its handler.

        This is the callback registered on the bus for every type in
        INVENTORY_EVENT_TYPES. Anything outside the union is a TypeError.
        """
        match event:
            case InventoryReserved():
                self.on_reserved(event)
            case InventoryFailed():
                self.on_failed(event)
            case _:
                raise TypeError(f"Not an inventory outcome: {event!r}")
