"""
FastAPI application for the flight status registry.

Provides REST endpoints for:
- Flight creation and listing
- Passenger registration and rosters
- Validated status changes with passenger notification
- Status statistics
"""

from .main import app, create_app

__all__ = ["app", "create_app"]
