"""
Domain models for the flight status registry.

Core entities: the flight status state machine, flights with their
subscribers, passengers, and the errors the registry reports.
"""

from .status import (
    FlightStatus,
    ALLOWED_TRANSITIONS,
    TERMINAL_STATUSES,
    allowed_targets,
    can_transition,
)
from .errors import (
    FlightRegistryError,
    InvalidIndexError,
    InvalidTransitionError,
    RegistrationClosedError,
)
from .notifications import (
    DEFAULT_LOCALE,
    STATUS_LABELS,
    render_notification,
    resolve_locale,
    status_label,
)
from .passenger import Passenger
from .flight import Flight, StatusSubscriber, StatusTransition

__all__ = [
    # Status
    "FlightStatus",
    "ALLOWED_TRANSITIONS",
    "TERMINAL_STATUSES",
    "allowed_targets",
    "can_transition",
    # Errors
    "FlightRegistryError",
    "InvalidIndexError",
    "InvalidTransitionError",
    "RegistrationClosedError",
    # Notifications
    "DEFAULT_LOCALE",
    "STATUS_LABELS",
    "render_notification",
    "resolve_locale",
    "status_label",
    # Entities
    "Passenger",
    "Flight",
    "StatusSubscriber",
    "StatusTransition",
]
