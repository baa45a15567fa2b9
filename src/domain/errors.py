"""
Domain errors for the flight registry.

Every error leaves registry and flight state untouched. Callers distinguish
them by type or by the ``kind`` attribute.
"""

from .status import FlightStatus


class FlightRegistryError(Exception):
    """Base class for recoverable registry errors."""

    kind = "FlightRegistryError"


class InvalidIndexError(FlightRegistryError):
    """Flight index outside the current bounds."""

    kind = "InvalidIndex"

    def __init__(self, index: int, flight_count: int):
        self.index = index
        self.flight_count = flight_count
        super().__init__(
            f"Invalid flight index {index}: {flight_count} flight(s) registered"
        )


class InvalidTransitionError(FlightRegistryError):
    """Status change not permitted from the current status."""

    kind = "InvalidTransition"

    def __init__(self, current: FlightStatus, target: FlightStatus):
        self.current = current
        self.target = target
        super().__init__(
            f"Invalid transition: cannot change status from "
            f"'{current.value}' to '{target.value}'"
        )


class RegistrationClosedError(FlightRegistryError):
    """Attempt to subscribe to a flight in a terminal status."""

    kind = "RegistrationClosed"

    def __init__(self, destination: str, status: FlightStatus):
        self.destination = destination
        self.status = status
        super().__init__(
            f"Registration closed: flight to {destination} is already {status.value}"
        )
