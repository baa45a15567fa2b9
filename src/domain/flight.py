"""
Flight domain models.

A flight owns its status, its passenger roster and the ordered list of
status subscribers. Every applied status change is broadcast to the
subscribers in the order they subscribed.
"""

import logging
import uuid
from typing import Any, Callable

from pydantic import BaseModel, Field, PrivateAttr, computed_field

from .errors import InvalidTransitionError
from .passenger import Passenger
from .status import FlightStatus, can_transition

logger = logging.getLogger(__name__)

StatusSubscriber = Callable[["Flight", FlightStatus], Any]


class StatusTransition(BaseModel):
    """Outcome of a status change request on a single flight."""

    previous: FlightStatus
    current: FlightStatus
    changed: bool
    notified: int = 0

    model_config = {"frozen": True}


class Flight(BaseModel):
    """
    Flight entity tracked by the registry.

    Registering a passenger adds it to the roster and subscribes it in one
    step, so the roster and the subscriptions always line up.
    """

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), frozen=True)
    destination: str = Field(..., frozen=True)
    is_vip: bool = Field(default=False, frozen=True)

    _status: FlightStatus = PrivateAttr(default=FlightStatus.SCHEDULED)
    _passengers: list[Passenger] = PrivateAttr(default_factory=list)
    _subscribers: list[StatusSubscriber] = PrivateAttr(default_factory=list)

    @computed_field
    @property
    def status(self) -> FlightStatus:
        """Current status. Only ``change_status`` mutates it."""
        return self._status

    @property
    def passengers(self) -> tuple[Passenger, ...]:
        return tuple(self._passengers)

    @property
    def subscribers(self) -> tuple[StatusSubscriber, ...]:
        return tuple(self._subscribers)

    @property
    def accepts_registrations(self) -> bool:
        return not self._status.is_terminal

    def subscribe(self, callback: StatusSubscriber) -> None:
        """Append a status-change callback."""
        self._subscribers.append(callback)

    def add_passenger(self, passenger: Passenger) -> None:
        """Add a passenger to the roster and subscribe it to status changes."""
        self._passengers.append(passenger)
        self.subscribe(passenger.notify)

    def change_status(self, new_status: FlightStatus) -> StatusTransition:
        """
        Apply a status change and notify subscribers.

        A request for the current status is a no-op: nothing changes and no
        notification is sent.

        Args:
            new_status: Target status

        Returns:
            StatusTransition describing what happened

        Raises:
            InvalidTransitionError: the transition table forbids the move
        """
        previous = self._status
        if new_status == previous:
            return StatusTransition(previous=previous, current=previous, changed=False)
        if not can_transition(previous, new_status):
            raise InvalidTransitionError(previous, new_status)

        self._status = new_status
        notified = self.notify_subscribers(new_status)
        return StatusTransition(
            previous=previous,
            current=new_status,
            changed=True,
            notified=notified,
        )

    def notify_subscribers(self, status: FlightStatus) -> int:
        """
        Deliver ``(self, status)`` to every subscriber in subscription order.

        A failing subscriber is logged and skipped; later subscribers are
        still notified.

        Returns:
            Number of subscribers that completed without raising
        """
        delivered = 0
        for callback in list(self._subscribers):
            try:
                callback(self, status)
            except Exception:
                logger.exception(
                    "Subscriber %r failed for flight %s (%s)",
                    callback,
                    self.id,
                    status.value,
                )
                continue
            delivered += 1
        return delivered
