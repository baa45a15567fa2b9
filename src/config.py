"""
Application settings.

Read from environment variables at call time so tests can override them
with ``monkeypatch.setenv``.
"""

import logging
import os
from dataclasses import dataclass

from src.domain import resolve_locale

LOCALE_ENV = "FLIGHT_REGISTRY_LOCALE"
LOG_LEVEL_ENV = "FLIGHT_REGISTRY_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def resolve_log_level(level: str | None) -> str:
    """Normalize a logging level name, falling back to ``INFO``."""
    if not level:
        return DEFAULT_LOG_LEVEL
    name = level.strip().upper()
    # getLevelName maps known names to their numeric level
    if isinstance(logging.getLevelName(name), int):
        return name
    return DEFAULT_LOG_LEVEL


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the registry and its API."""

    locale: str = "en"
    log_level: str = DEFAULT_LOG_LEVEL


def get_settings() -> Settings:
    """
    Build settings from the environment.

    Supports:
    - FLIGHT_REGISTRY_LOCALE: ``en`` or ``uk`` (unknown values fall back to ``en``)
    - FLIGHT_REGISTRY_LOG_LEVEL: standard logging level name (unknown values
      fall back to ``INFO``)
    """
    return Settings(
        locale=resolve_locale(os.getenv(LOCALE_ENV)),
        log_level=resolve_log_level(os.getenv(LOG_LEVEL_ENV)),
    )
