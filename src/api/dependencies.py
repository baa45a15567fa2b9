"""
API dependencies.

Provides dependency injection for FastAPI routes.
"""

from src.config import Settings, get_settings
from src.services import FlightRegistry


class AppState:
    """Application state container."""

    _instance: "AppState | None" = None

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.registry = FlightRegistry(locale=self.settings.locale)

    @classmethod
    def get_instance(cls) -> "AppState":
        """Get or create singleton instance."""
        if cls._instance is None:
            cls._instance = AppState()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset singleton (for testing)."""
        cls._instance = None


def get_registry() -> FlightRegistry:
    """Dependency for the flight registry."""
    return AppState.get_instance().registry


def get_app_settings() -> Settings:
    """Dependency for application settings."""
    return AppState.get_instance().settings
