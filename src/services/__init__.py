"""
Core services for the flight status registry.

Business logic layer containing:
- Registry: flight creation, passenger registration, validated status
  changes and read views
"""

from .registry import (
    FlightRegistry,
    FlightStatistics,
    FlightSummary,
    Roster,
    StatusChange,
)

__all__ = [
    "FlightRegistry",
    "FlightStatistics",
    "FlightSummary",
    "Roster",
    "StatusChange",
]
