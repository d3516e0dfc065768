"""
Demonstration scripts for the event-driven order flow.

These functions show the order and product modules collaborating through
events. Run them to see the events being published and the order status
that results.
"""

import logging
from typing import Optional

from application import ModularApplication
from shared.config import AppConfig
from shared.events import OrderItem

logger = logging.getLogger("demo")


SCENARIOS: dict[str, tuple[str, str, list[OrderItem]]] = {
    "happy": (
        "Order with positive quantities",
        "O-1",
        [OrderItem(sku="P-1", quantity=2)],
    ),
    "rejected": (
        "Order with a zero quantity",
        "O-2",
        [OrderItem(sku="P-2", quantity=0)],
    ),
    "over-capacity": (
        "Order above the capacity cap",
        "O-3",
        [OrderItem(sku="P-1", quantity=2000)],
    ),
    "empty": (
        "Order without line items",
        "O-4",
        [],
    ),
}


def run_scenario(name: str, config: Optional[AppConfig] = None) -> ModularApplication:
    """
    Run one scenario on a fresh application.

    This shows:
    1. OrderService publishes OrderPlaced and returns an acknowledgment
    2. InventoryPolicy (product module) receives it and reserves inventory
    3. InventoryService publishes InventoryReserved or InventoryFailed
    4. OrderProcessManager (order module) records the status
    """
    title, order_id, items = SCENARIOS[name]

    print("\n" + "=" * 70)
    print(f"DEMO: {title}")
    print("=" * 70 + "\n")

    application = ModularApplication(config=config)
    application.event_bus.subscribe_all(lambda event: print(f"  event: {event}"))

    with application:
        print("-" * 70)
        print(f"ACTION: place_order({order_id!r}, {[(i.sku, i.quantity) for i in items]})")
        print("-" * 70 + "\n")

        ack = application.place_order(order_id, items)
        print(f"\nAcknowledged: {ack.order_id}")

        status = application.status_of(order_id)
        print(f"Status: {status if status is not None else 'pending (no entry)'}")

    return application


def run_all(config: Optional[AppConfig] = None) -> None:
    for name in SCENARIOS:
        run_scenario(name, config=config)
