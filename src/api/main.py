"""
FastAPI main application.
"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.config import get_settings

from .routers import flights


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    application = FastAPI(
        title="Flight Status Registry API",
        description="""
        Flight status tracking with passenger notifications.

        ## Features

        - **Flights**: Add flights and list them in creation order
        - **Passengers**: Register passengers on a flight and view its roster
        - **Status**: Validated status changes broadcast to every passenger
        - **Statistics**: Departed, delayed and cancelled counts
        """,
        version="1.0.0",
    )

    # CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(
        flights.router,
        prefix="/api/v1/flights",
        tags=["Flights"],
    )

    @application.get("/", tags=["Health"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": "Flight Status Registry API",
            "version": "1.0.0",
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    @application.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "locale": settings.locale,
            "services": {
                "registry": "available",
            },
        }

    return application


# Create default app instance
app = create_app()
