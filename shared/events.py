"""
Shared event DTOs for the modular monolith.

These events live in the neutral `shared` package on purpose: neither the
order module nor the product module owns them, so both can depend on this
package without depending on each other.

Design decisions:
- Events are immutable pydantic models (frozen)
- Events are named in past tense (OrderPlaced, InventoryReserved)
- Events carry everything the listener needs (no call back into the publisher)
- The inventory outcome is a closed union with exactly two cases
- JSON uses camelCase aliases to match the HTTP contract

Event flow:
    order   --OrderPlaced-->                      product
    product --InventoryReserved | InventoryFailed--> order
"""

from datetime import datetime, timezone
from typing import Annotated, Iterable, Literal, Union
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# Reason attached to InventoryFailed when the inventory service gives none
DEFAULT_FAILURE_REASON = "Insufficient stock"


class OrderItem(BaseModel):
    """
    A single line item of an order: which SKU and how many.

    Quantity is deliberately not constrained here. Zero or negative
    quantities must still reach the inventory decision, where they turn
    into a business rejection rather than a validation error.
    """
    sku: str = Field(..., description="Stock-keeping unit identifier")
    quantity: int = Field(..., description="Requested quantity")

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class DomainEvent(BaseModel):
    """
    Base class for all domain events.

    Attributes:
        event_id: Unique identifier for this event instance
        occurred_at: When the event was created (UTC)
        source: Which module published the event
    """
    event_id: str = Field(default_factory=lambda: str(uuid4()))
    occurred_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    source: str = Field(default="unknown")

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def __str__(self) -> str:
        return f"{type(self).__name__}(id={self.event_id[:8]}, source={self.source})"


# =============================================================================
# Order -> Product
# =============================================================================

class OrderPlaced(DomainEvent):
    """Published by the order module once per placed order."""
    order_id: str
    items: tuple[OrderItem, ...] = ()
    source: str = "order"


# =============================================================================
# Product -> Order
# =============================================================================

class InventoryReserved(DomainEvent):
    """Inventory could be reserved for every line item of the order."""
    kind: Literal["InventoryReserved"] = "InventoryReserved"
    order_id: str
    source: str = "product"


class InventoryFailed(DomainEvent):
    """Inventory could not be reserved; `reason` says why."""
    kind: Literal["InventoryFailed"] = "InventoryFailed"
    order_id: str
    reason: str = DEFAULT_FAILURE_REASON
    source: str = "product"


# The only two outcomes of a reservation attempt
InventoryEvent = Annotated[
    Union[InventoryReserved, InventoryFailed],
    Field(discriminator="kind"),
]

# Concrete classes of InventoryEvent, for subscribing to every outcome
INVENTORY_EVENT_TYPES: tuple[type[DomainEvent], ...] = (InventoryReserved, InventoryFailed)


def total_quantity(items: Iterable[OrderItem]) -> int:
    """Sum of quantities across a batch of line items."""
    return sum(item.quantity for item in items)
