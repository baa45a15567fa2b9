"""
Flight Registry Service.

Owns every flight and, through each flight, its passengers. All status
changes go through the transition table before a flight is touched.

Usage:
    registry = FlightRegistry()
    registry.add_flight("Kyiv")
    registry.register_passenger("Anna", 0)
    registry.change_flight_status(0, FlightStatus.BOARDING)
"""

import logging
import threading

from pydantic import BaseModel, computed_field

from src.domain import (
    DEFAULT_LOCALE,
    Flight,
    FlightStatus,
    InvalidIndexError,
    InvalidTransitionError,
    Passenger,
    RegistrationClosedError,
    can_transition,
)

logger = logging.getLogger(__name__)


class FlightSummary(BaseModel):
    """Read-only view of a flight for listings."""

    position: int  # 1-based display position
    id: str
    destination: str
    status: FlightStatus
    is_vip: bool

    model_config = {"frozen": True}


class Roster(BaseModel):
    """Ordered passenger names for one flight."""

    position: int
    destination: str
    names: list[str]

    model_config = {"frozen": True}

    @computed_field
    @property
    def is_empty(self) -> bool:
        """True when nobody is registered on the flight."""
        return not self.names


class FlightStatistics(BaseModel):
    """Aggregate status counts across all flights."""

    total: int = 0
    departed: int = 0
    delayed: int = 0
    cancelled: int = 0

    model_config = {"frozen": True}


class StatusChange(BaseModel):
    """Result of a successful status change request."""

    position: int
    destination: str
    previous: FlightStatus
    current: FlightStatus
    notified: int

    model_config = {"frozen": True}


class FlightRegistry:
    """
    In-memory registry of flights and their subscribed passengers.

    Flight indexes are 0-based; summaries carry the 1-based position shown
    to users. One re-entrant lock serializes writers and readers, so
    notification fan-out keeps subscription order under a threaded caller.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE):
        self.locale = locale
        self._flights: list[Flight] = []
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._flights)

    def _flight_at(self, flight_index: int) -> Flight:
        if not 0 <= flight_index < len(self._flights):
            logger.warning(
                "Rejected flight index %s (%d flights)", flight_index, len(self._flights)
            )
            raise InvalidIndexError(flight_index, len(self._flights))
        return self._flights[flight_index]

    @staticmethod
    def _summarize(position: int, flight: Flight) -> FlightSummary:
        return FlightSummary(
            position=position,
            id=flight.id,
            destination=flight.destination,
            status=flight.status,
            is_vip=flight.is_vip,
        )

    def get_flight(self, flight_index: int) -> Flight:
        """
        Get a flight by 0-based index.

        Raises:
            InvalidIndexError: index out of range
        """
        with self._lock:
            return self._flight_at(flight_index)

    def add_flight(self, destination: str, is_vip: bool = False) -> FlightSummary:
        """
        Create a flight in SCHEDULED status with an empty roster.

        Args:
            destination: Destination name
            is_vip: Informational VIP flag

        Returns:
            Summary of the new flight, including its 1-based position
        """
        with self._lock:
            flight = Flight(destination=destination, is_vip=is_vip)
            self._flights.append(flight)
            position = len(self._flights)
            summary = self._summarize(position, flight)

        logger.info("Flight to %s added at position %d", destination, position)
        return summary

    def register_passenger(self, name: str, flight_index: int) -> Passenger:
        """
        Register a passenger on a flight and subscribe it to status changes.

        Args:
            name: Passenger name
            flight_index: 0-based flight index

        Returns:
            The created passenger

        Raises:
            InvalidIndexError: index out of range
            RegistrationClosedError: flight already departed or cancelled
        """
        with self._lock:
            flight = self._flight_at(flight_index)
            if not flight.accepts_registrations:
                logger.warning(
                    "Registration of %s refused: flight to %s is %s",
                    name,
                    flight.destination,
                    flight.status.value,
                )
                raise RegistrationClosedError(flight.destination, flight.status)

            passenger = Passenger(name=name, locale=self.locale)
            flight.add_passenger(passenger)

        logger.info("Passenger %s registered on flight to %s", name, flight.destination)
        return passenger

    def change_flight_status(
        self,
        flight_index: int,
        new_status: FlightStatus,
    ) -> StatusChange:
        """
        Move a flight to a new status and notify its passengers.

        Self-transitions are not in the transition table and are rejected
        like any other illegal move.

        Args:
            flight_index: 0-based flight index
            new_status: Target status

        Returns:
            StatusChange with previous/current status and notification count

        Raises:
            InvalidIndexError: index out of range
            InvalidTransitionError: transition not allowed from current status
        """
        with self._lock:
            flight = self._flight_at(flight_index)
            if not can_transition(flight.status, new_status):
                logger.warning(
                    "Rejected transition %s -> %s for flight to %s",
                    flight.status.value,
                    new_status.value,
                    flight.destination,
                )
                raise InvalidTransitionError(flight.status, new_status)

            transition = flight.change_status(new_status)

        logger.info(
            "Flight to %s: %s -> %s (%d notified)",
            flight.destination,
            transition.previous.value,
            transition.current.value,
            transition.notified,
        )
        return StatusChange(
            position=flight_index + 1,
            destination=flight.destination,
            previous=transition.previous,
            current=transition.current,
            notified=transition.notified,
        )

    def list_flights(self) -> list[FlightSummary]:
        """All flights in creation order."""
        with self._lock:
            return [
                self._summarize(position, flight)
                for position, flight in enumerate(self._flights, start=1)
            ]

    def roster_for(self, flight_index: int) -> Roster:
        """
        Passenger names for a flight, in registration order.

        Raises:
            InvalidIndexError: index out of range
        """
        with self._lock:
            flight = self._flight_at(flight_index)
            return Roster(
                position=flight_index + 1,
                destination=flight.destination,
                names=[p.name for p in flight.passengers],
            )

    def statistics(self) -> FlightStatistics:
        """Count departed, delayed and cancelled flights."""
        with self._lock:
            counts = {status: 0 for status in FlightStatus}
            for flight in self._flights:
                counts[flight.status] += 1

            return FlightStatistics(
                total=len(self._flights),
                departed=counts[FlightStatus.DEPARTED],
                delayed=counts[FlightStatus.DELAYED],
                cancelled=counts[FlightStatus.CANCELLED],
            )
