"""
HTTP API for the modular monolith.

This package provides a single FastAPI application that exposes:
- The order command and status endpoints
- Module greeting endpoints
- A health check
"""

from api.main import app

__all__ = ["app"]
