"""
Application configuration.

Settings are plain constructor arguments gathered in one pydantic model.
The CLI builds one from its flags; everything else uses the defaults.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ReservationPolicy(str, Enum):
    """
    How the inventory service decides whether an order can be reserved.

    STRICT:   every line item quantity must be > 0
    CAPACITY: same as STRICT, and the total quantity must not exceed a cap
    """
    STRICT = "strict"
    CAPACITY = "capacity"


DEFAULT_CAPACITY_CAP = 1000


class AppConfig(BaseModel):
    """Runtime settings for the modular monolith."""
    reservation_policy: ReservationPolicy = Field(
        default=ReservationPolicy.CAPACITY,
        description="Decision rule used by the inventory service",
    )
    capacity_cap: int = Field(
        default=DEFAULT_CAPACITY_CAP,
        ge=0,
        description="Maximum total quantity per order under the CAPACITY policy",
    )
    log_level: str = Field(default="INFO", description="Root logging level")

    model_config = ConfigDict(frozen=True)

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level
