"""
FastAPI application for the modular monolith.

This application provides:
1. The order command endpoint (POST /api/orders)
2. The order status lookup (GET /api/orders/{order_id}/status)
3. Module greeting endpoints (/api/orders/hello, /api/products/hello)

Run with:
    uv run uvicorn api.main:app --reload

Then visit http://localhost:8000/docs for interactive API documentation.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from application import ModularApplication
from shared.config import AppConfig
from shared.event_bus import EventBus
from order import Cancelled, OrderAccepted, PlaceOrderCommand

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(name)-24s | %(levelname)-5s | %(message)s",
    datefmt="%H:%M:%S",
)

logger = logging.getLogger("api")


# Response models
class OrderStatusResponse(BaseModel):
    """Current status of an order."""
    order_id: str
    status: str
    reason: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Module-level application (would use proper DI in production)
_application: Optional[ModularApplication] = None


def build_server_application(config: Optional[AppConfig] = None) -> ModularApplication:
    """Build an application for a long-running server.

    The server never reads the bus event log, so it is switched off and
    memory stays flat however many orders are placed.
    """
    return ModularApplication(config=config, event_bus=EventBus(log_events=False))


def get_application() -> ModularApplication:
    """Get the running application, building and starting it on first use."""
    global _application
    if _application is None:
        _application = build_server_application().start()
    return _application


def reset_application(application: Optional[ModularApplication] = None) -> None:
    """Replace the running application (for testing)."""
    global _application
    if _application is not None and _application is not application:
        _application.stop()
    _application = application
    if application is not None:
        application.start()


# Application lifespan
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    logger.info("Starting modular monolith API")
    get_application()
    yield
    logger.info("Shutting down")
    if _application is not None:
        _application.stop()


# Create the FastAPI app
app = FastAPI(
    title="Modular Monolith Demo",
    description="""
    Two modules, `order` and `product`, that never call each other.

    Placing an order publishes an `OrderPlaced` event. The product module
    reserves inventory and answers with `InventoryReserved` or `InventoryFailed`,
    which the order module turns into the order's status.

    The POST only acknowledges the order; poll the status endpoint for the outcome.
    """,
    version="1.0.0",
    lifespan=lifespan,
)


# =============================================================================
# Health Check
# =============================================================================

@app.get("/health", tags=["Health"])
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "modular-monolith"}


# =============================================================================
# Order Module
# =============================================================================

@app.get("/api/orders/hello", tags=["Orders"])
def order_hello(application: ModularApplication = Depends(get_application)) -> str:
    return application.order_service.get_greeting()


@app.post("/api/orders", response_model=OrderAccepted, tags=["Orders"])
def place_order(
    request: PlaceOrderCommand,
    application: ModularApplication = Depends(get_application),
) -> OrderAccepted:
    """
    Place an order.

    Returns as soon as the order is accepted. The reservation outcome is
    available from GET /api/orders/{order_id}/status.
    """
    return application.place_order(request)


@app.get("/api/orders/{order_id}/status", response_model=OrderStatusResponse, tags=["Orders"])
def order_status(
    order_id: str,
    application: ModularApplication = Depends(get_application),
) -> OrderStatusResponse:
    """
    Look up the status of an order.

    404 means no outcome has been recorded for this id (unknown or still pending).
    """
    status = application.status_of(order_id)
    if status is None:
        raise HTTPException(status_code=404, detail=f"No status recorded for order: {order_id}")

    reason = status.reason if isinstance(status, Cancelled) else None
    return OrderStatusResponse(order_id=order_id, status=status.status, reason=reason)


# =============================================================================
# Product Module
# =============================================================================

@app.get("/api/products/hello", tags=["Products"])
def product_hello(application: ModularApplication = Depends(get_application)) -> str:
    return application.product_service.get_greeting()
