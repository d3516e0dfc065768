"""
Order service: accepts orders and announces them.

The service publishes an OrderPlaced event instead of calling into the
product module. It returns an acknowledgment straight away; whether the
order ends up ready to ship or cancelled is decided by whoever listens,
and is recorded later by the OrderProcessManager.

Note that the bus delivers synchronously, so with the product module
running the outcome is already recorded when place_order() returns. Callers
must still treat the acknowledgment as "accepted", not "reserved".
"""

import logging
from typing import Iterable, Optional, Union

from shared.event_bus import EventBus
from shared.events import OrderItem, OrderPlaced
from order.models import OrderAccepted, OrderResult, PlaceOrderCommand

logger = logging.getLogger("order_service")


class OrderService:
    """Command side of the order module."""

    def __init__(self, event_bus: EventBus):
        """
        Args:
            event_bus: Bus the OrderPlaced events are published on
        """
        self.event_bus = event_bus

    def get_greeting(self) -> str:
        return "Hello from Order Module! 🛒"

    def place_order(
        self,
        cmd: Union[PlaceOrderCommand, str],
        items: Optional[Iterable[Union[OrderItem, dict]]] = None,
    ) -> OrderResult:
        """
        Place an order and publish exactly one OrderPlaced event.

        Accepts either a PlaceOrderCommand or an order id plus line items:

            service.place_order(PlaceOrderCommand(order_id="O-1", items=[...]))
            service.place_order("O-1", [OrderItem(sku="P-1", quantity=2)])

        Raises:
            pydantic.ValidationError: if the order id is blank
        """
        if not isinstance(cmd, PlaceOrderCommand):
            cmd = PlaceOrderCommand(order_id=cmd, items=tuple(items or ()))

        event = OrderPlaced(order_id=cmd.order_id, items=cmd.items)
        logger.info(f"Placing order {cmd.order_id} with {len(cmd.items)} line item(s)")
        handlers = self.event_bus.publish(event)
        if handlers == 0:
            logger.warning(f"Order {cmd.order_id} placed but nobody is listening")

        return OrderAccepted(order_id=cmd.order_id)
