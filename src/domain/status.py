"""
Flight status state machine.

Defines the status enumeration and the table of legal transitions.
"""

from enum import Enum


class FlightStatus(str, Enum):
    """Flight status. Member order defines the public ordinal (0-4)."""

    SCHEDULED = "scheduled"
    BOARDING = "boarding"
    DEPARTED = "departed"
    DELAYED = "delayed"
    CANCELLED = "cancelled"

    @property
    def ordinal(self) -> int:
        return list(FlightStatus).index(self)

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "FlightStatus":
        """Look up a status by its position in the enumeration."""
        members = list(cls)
        if not 0 <= ordinal < len(members):
            raise ValueError(f"No flight status with ordinal {ordinal}")
        return members[ordinal]

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATUSES


# No transition enters DELAYED.
ALLOWED_TRANSITIONS: dict[FlightStatus, frozenset[FlightStatus]] = {
    FlightStatus.SCHEDULED: frozenset({FlightStatus.BOARDING, FlightStatus.CANCELLED}),
    FlightStatus.BOARDING: frozenset({FlightStatus.DEPARTED, FlightStatus.CANCELLED}),
    FlightStatus.DELAYED: frozenset({FlightStatus.BOARDING, FlightStatus.CANCELLED}),
    FlightStatus.DEPARTED: frozenset(),
    FlightStatus.CANCELLED: frozenset(),
}

TERMINAL_STATUSES = frozenset({FlightStatus.DEPARTED, FlightStatus.CANCELLED})


def allowed_targets(current: FlightStatus) -> frozenset[FlightStatus]:
    """Statuses reachable from ``current`` in one step."""
    return ALLOWED_TRANSITIONS.get(current, frozenset())


def can_transition(current: FlightStatus, target: FlightStatus) -> bool:
    """Check whether ``current -> target`` is a legal transition."""
    return target in allowed_targets(current)
