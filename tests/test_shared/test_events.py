"""
Tests for the shared event DTOs.
"""

import pytest
from pydantic import TypeAdapter, ValidationError

from shared.events import (
    DEFAULT_FAILURE_REASON,
    INVENTORY_EVENT_TYPES,
    InventoryEvent,
    InventoryFailed,
    InventoryReserved,
    OrderItem,
    OrderPlaced,
    total_quantity,
)


class TestOrderItem:
    """Tests for OrderItem."""

    def test_create_item(self):
        item = OrderItem(sku="P-1", quantity=2)

        assert item.sku == "P-1"
        assert item.quantity == 2

    def test_non_positive_quantities_are_accepted(self):
        """Zero and negative quantities are a business decision, not a validation error."""
        assert OrderItem(sku="P-2", quantity=0).quantity == 0
        assert OrderItem(sku="P-3", quantity=-5).quantity == -5

    def test_items_are_immutable(self):
        item = OrderItem(sku="P-1", quantity=2)
        with pytest.raises(ValidationError):
            item.quantity = 3

    def test_parse_from_json(self):
        item = OrderItem.model_validate_json('{"sku": "P-1", "quantity": 4}')
        assert item == OrderItem(sku="P-1", quantity=4)


class TestOrderPlaced:
    """Tests for OrderPlaced."""

    def test_items_kept_in_order(self):
        items = [OrderItem(sku="A", quantity=1), OrderItem(sku="B", quantity=2)]

        event = OrderPlaced(order_id="O-1", items=items)

        assert [i.sku for i in event.items] == ["A", "B"]
        assert event.source == "order"

    def test_items_default_to_empty(self):
        assert OrderPlaced(order_id="O-1").items == ()

    def test_event_ids_are_unique(self):
        """Test that each event gets a unique ID."""
        event1 = OrderPlaced(order_id="O-1")
        event2 = OrderPlaced(order_id="O-1")

        assert event1.event_id != event2.event_id

    def test_occurred_at_is_timezone_aware(self):
        assert OrderPlaced(order_id="O-1").occurred_at.tzinfo is not None

    def test_event_is_immutable(self):
        event = OrderPlaced(order_id="O-1")
        with pytest.raises(ValidationError):
            event.order_id = "O-2"

    def test_json_uses_camel_case(self):
        event = OrderPlaced(order_id="O-1", items=[OrderItem(sku="P-1", quantity=2)])

        data = event.model_dump(mode="json", by_alias=True)

        assert data["orderId"] == "O-1"
        assert data["items"] == [{"sku": "P-1", "quantity": 2}]


class TestInventoryEvents:
    """Tests for the inventory outcome union."""

    def test_failed_default_reason(self):
        event = InventoryFailed(order_id="O-2")

        assert event.reason == DEFAULT_FAILURE_REASON == "Insufficient stock"
        assert event.source == "product"

    def test_union_parses_reserved(self):
        adapter = TypeAdapter(InventoryEvent)

        event = adapter.validate_python({"kind": "InventoryReserved", "order_id": "O-1"})

        assert isinstance(event, InventoryReserved)

    def test_union_parses_failed(self):
        adapter = TypeAdapter(InventoryEvent)

        event = adapter.validate_python(
            {"kind": "InventoryFailed", "orderId": "O-2", "reason": "Out of stock"}
        )

        assert isinstance(event, InventoryFailed)
        assert event.reason == "Out of stock"

    def test_union_rejects_unknown_kind(self):
        adapter = TypeAdapter(InventoryEvent)

        with pytest.raises(ValidationError):
            adapter.validate_python({"kind": "InventoryLost", "order_id": "O-1"})

    def test_event_types_cover_the_union(self):
        assert INVENTORY_EVENT_TYPES == (InventoryReserved, InventoryFailed)


class TestTotalQuantity:
    def test_sums_quantities(self):
        items = [OrderItem(sku="A", quantity=3), OrderItem(sku="B", quantity=4)]
        assert total_quantity(items) == 7

    def test_empty_is_zero(self):
        assert total_quantity([]) == 0
