"""
Shared pytest fixtures for the modular monolith tests.

These fixtures provide fresh buses, modules and a wired application for
every test so no state leaks between tests.
"""

import pytest

from application import ModularApplication
from order.process_manager import OrderProcessManager
from order.repository import OrderRepository
from order.service import OrderService
from product.inventory_policy import InventoryPolicy
from product.inventory_service import InventoryService
from shared.config import AppConfig, ReservationPolicy
from shared.event_bus import EventBus
from shared.events import DomainEvent


class RecordingEventBus(EventBus):
    """
    Event bus double that records published events without delivering them.

    Lets a listener be tested alone: whatever it publishes is captured in
    `published` and never reaches another module.
    """

    def __init__(self):
        super().__init__()
        self.published: list[DomainEvent] = []

    def publish(self, event: DomainEvent) -> int:
        self.published.append(event)
        return 0


@pytest.fixture
def event_bus() -> EventBus:
    """Fresh EventBus for each test."""
    return EventBus()


@pytest.fixture
def recording_bus() -> RecordingEventBus:
    """Bus that swallows and records every published event."""
    return RecordingEventBus()


@pytest.fixture
def capacity_config() -> AppConfig:
    return AppConfig(reservation_policy=ReservationPolicy.CAPACITY, capacity_cap=1000)


@pytest.fixture
def strict_config() -> AppConfig:
    return AppConfig(reservation_policy=ReservationPolicy.STRICT)


# =============================================================================
# Module Fixtures
# =============================================================================

@pytest.fixture
def order_repository() -> OrderRepository:
    return OrderRepository()


@pytest.fixture
def order_service(event_bus: EventBus) -> OrderService:
    return OrderService(event_bus=event_bus)


@pytest.fixture
def process_manager(order_repository: OrderRepository, event_bus: EventBus):
    """Started OrderProcessManager, stopped after the test."""
    manager = OrderProcessManager(repository=order_repository, event_bus=event_bus)
    manager.start()
    yield manager
    manager.stop()


@pytest.fixture
def inventory_service(event_bus: EventBus, capacity_config: AppConfig) -> InventoryService:
    return InventoryService(event_bus=event_bus, config=capacity_config)


@pytest.fixture
def inventory_policy(inventory_service: InventoryService, event_bus: EventBus):
    """Started InventoryPolicy, stopped after the test."""
    policy = InventoryPolicy(inventory=inventory_service, event_bus=event_bus)
    policy.start()
    yield policy
    policy.stop()


# =============================================================================
# Application Fixtures
# =============================================================================

@pytest.fixture
def app(capacity_config: AppConfig):
    """Fully wired application using the capacity policy (the default)."""
    with ModularApplication(config=capacity_config) as application:
        yield application


@pytest.fixture
def strict_app(strict_config: AppConfig):
    """Fully wired application using the strict policy."""
    with ModularApplication(config=strict_config) as application:
        yield application
