"""
Order module types: identifiers, commands, results and the order status.

The order status is a closed set of three cases. Handlers that branch on it
should `match` every case; there is no fourth.
"""

from typing import Annotated, Literal, NewType, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from shared.events import OrderItem


OrderId = NewType("OrderId", str)


def as_order_id(value: str) -> OrderId:
    """Convert a plain id taken from a shared event into the module's id type."""
    return OrderId(value)


# =============================================================================
# Order Status
# =============================================================================

class New(BaseModel):
    """Order accepted, reservation outcome not known yet."""
    status: Literal["NEW"] = "NEW"

    model_config = ConfigDict(frozen=True)

    @property
    def is_terminal(self) -> bool:
        return False


class ReadyToShip(BaseModel):
    """Inventory was reserved; the order can ship."""
    status: Literal["READY_TO_SHIP"] = "READY_TO_SHIP"

    model_config = ConfigDict(frozen=True)

    @property
    def is_terminal(self) -> bool:
        return True


class Cancelled(BaseModel):
    """Inventory could not be reserved."""
    status: Literal["CANCELLED"] = "CANCELLED"
    reason: str

    model_config = ConfigDict(frozen=True)

    @property
    def is_terminal(self) -> bool:
        return True


OrderStatus = Annotated[
    Union[New, ReadyToShip, Cancelled],
    Field(discriminator="status"),
]


# =============================================================================
# Commands and results
# =============================================================================

class PlaceOrderCommand(BaseModel):
    """
    Command to place an order.

    The order id is supplied by the caller and must not be blank. It is kept
    exactly as given, surrounding whitespace included, so the caller can look
    the outcome up by the same id. Items are passed through untouched,
    including zero or negative quantities.
    """
    order_id: str = Field(..., min_length=1, description="Caller-supplied order identifier")
    items: tuple[OrderItem, ...] = Field(default=(), description="Requested line items")

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @field_validator("order_id")
    @classmethod
    def order_id_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("order id must not be blank")
        return value


class OrderAccepted(BaseModel):
    """Immediate acknowledgment of a placed order (not its outcome)."""
    order_id: str

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


# Only one result case exists today
OrderResult = OrderAccepted
