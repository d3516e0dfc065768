"""
Application wiring for the modular monolith.

This is the only place that knows about both modules. It builds one event
bus, hands it to every component and starts the listeners. The modules
themselves never see each other.

Example:
    with ModularApplication() as app:
        app.place_order("O-1", [OrderItem(sku="P-1", quantity=2)])
        app.status_of("O-1")  # ReadyToShip()
"""

import logging
from typing import Iterable, Optional, Union

from shared.config import AppConfig
from shared.event_bus import EventBus
from shared.events import OrderItem
from order import (
    OrderProcessManager,
    OrderRepository,
    OrderResult,
    OrderService,
    OrderStatus,
    PlaceOrderCommand,
)
from product import InventoryPolicy, InventoryService, ProductService

logger = logging.getLogger("application")


class ModularApplication:
    """Container for the order and product modules sharing one event bus."""

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        event_bus: Optional[EventBus] = None,
    ):
        self.config = config or AppConfig()
        self.event_bus = event_bus or EventBus()

        # Product module
        self.product_service = ProductService()
        self.inventory_service = InventoryService(event_bus=self.event_bus, config=self.config)
        self.inventory_policy = InventoryPolicy(
            inventory=self.inventory_service,
            event_bus=self.event_bus,
        )

        # Order module
        self.order_repository = OrderRepository()
        self.order_service = OrderService(event_bus=self.event_bus)
        self.order_process_manager = OrderProcessManager(
            repository=self.order_repository,
            event_bus=self.event_bus,
        )

        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> "ModularApplication":
        """Register every listener on the bus."""
        if self._running:
            return self
        self.inventory_policy.start()
        self.order_process_manager.start()
        self._running = True
        logger.info(
            f"Application started (policy={self.config.reservation_policy.value}, "
            f"capacity_cap={self.config.capacity_cap})"
        )
        return self

    def stop(self) -> None:
        if not self._running:
            return
        self.order_process_manager.stop()
        self.inventory_policy.stop()
        self._running = False
        logger.info("Application stopped")

    def __enter__(self) -> "ModularApplication":
        return self.start()

    def __exit__(self, *exc_info) -> None:
        self.stop()

    def place_order(
        self,
        cmd: Union[PlaceOrderCommand, str],
        items: Optional[Iterable[Union[OrderItem, dict]]] = None,
    ) -> OrderResult:
        return self.order_service.place_order(cmd, items)

    def status_of(self, order_id: str) -> Optional[OrderStatus]:
        return self.order_repository.status_of(order_id)
