"""
Tests for the InventoryPolicy listener.

The policy is tested against the real bus (to check subscription) and
against a recording bus (to see exactly what it publishes in isolation).
"""

from shared.config import AppConfig
from shared.events import InventoryFailed, InventoryReserved, OrderItem, OrderPlaced
from product.inventory_policy import InventoryPolicy
from product.inventory_service import InventoryService


def make_policy(bus, config=None) -> InventoryPolicy:
    service = InventoryService(event_bus=bus, config=config or AppConfig())
    return InventoryPolicy(inventory=service, event_bus=bus)


class TestInventoryPolicyDecision:
    """Direct calls to on_order_placed with a recording bus."""

    def test_reservable_order_publishes_reserved(self, recording_bus):
        policy = make_policy(recording_bus)

        policy.on_order_placed(OrderPlaced(order_id="O-1", items=[OrderItem(sku="P-1", quantity=2)]))

        assert len(recording_bus.published) == 1
        event = recording_bus.published[0]
        assert isinstance(event, InventoryReserved)
        assert event.order_id == "O-1"

    def test_unreservable_order_publishes_failed(self, recording_bus):
        policy = make_policy(recording_bus)

        policy.on_order_placed(OrderPlaced(order_id="O-2", items=[OrderItem(sku="P-2", quantity=0)]))

        assert len(recording_bus.published) == 1
        event = recording_bus.published[0]
        assert isinstance(event, InventoryFailed)
        assert event.order_id == "O-2"
        assert event.reason == "Insufficient stock"

    def test_over_capacity_publishes_failed(self, recording_bus):
        policy = make_policy(recording_bus)

        policy.on_order_placed(OrderPlaced(order_id="O-3", items=[OrderItem(sku="P-1", quantity=2000)]))

        assert isinstance(recording_bus.published[0], InventoryFailed)

    def test_exactly_one_outcome_per_event(self, recording_bus):
        policy = make_policy(recording_bus)

        policy.on_order_placed(OrderPlaced(order_id="O-1"))
        policy.on_order_placed(OrderPlaced(order_id="O-2", items=[OrderItem(sku="X", quantity=-1)]))

        assert [type(e).__name__ for e in recording_bus.published] == [
            "InventoryReserved",
            "InventoryFailed",
        ]


class TestInventoryPolicySubscription:
    """The policy wired to a real bus."""

    def test_start_subscribes_to_order_placed(self, event_bus, inventory_policy):
        assert event_bus.get_subscriber_count(OrderPlaced) == 1

    def test_start_twice_subscribes_once(self, event_bus, inventory_policy):
        inventory_policy.start()
        assert event_bus.get_subscriber_count(OrderPlaced) == 1

    def test_stop_unsubscribes(self, event_bus, inventory_policy):
        inventory_policy.stop()
        assert event_bus.get_subscriber_count(OrderPlaced) == 0

    def test_published_order_produces_outcome(self, event_bus, inventory_policy):
        outcomes = []
        event_bus.subscribe(InventoryReserved, outcomes.append)
        event_bus.subscribe(InventoryFailed, outcomes.append)

        event_bus.publish(OrderPlaced(order_id="O-1", items=[OrderItem(sku="P-1", quantity=2)]))

        assert len(outcomes) == 1
        assert isinstance(outcomes[0], InventoryReserved)
