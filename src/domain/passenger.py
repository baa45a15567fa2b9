"""
Passenger domain model.

A passenger is subscribed to exactly one flight and keeps the messages it
has been sent.
"""

import logging
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, PrivateAttr

from .notifications import DEFAULT_LOCALE, render_notification
from .status import FlightStatus

if TYPE_CHECKING:
    from .flight import Flight

logger = logging.getLogger(__name__)


class Passenger(BaseModel):
    """
    Passenger subscribed to flight status changes.

    Passengers have no identity beyond their name; two passengers with the
    same name are still separate subscribers. The inbox is in-memory and
    unbounded: it keeps every message for the life of the registry.
    """

    name: str = Field(..., frozen=True)
    locale: str = Field(default=DEFAULT_LOCALE, frozen=True)

    _inbox: list[str] = PrivateAttr(default_factory=list)

    @property
    def inbox(self) -> tuple[str, ...]:
        """Messages delivered so far, oldest first."""
        return tuple(self._inbox)

    def notify(self, flight: "Flight", status: FlightStatus) -> str:
        """Render and deliver the message for ``status`` on ``flight``."""
        message = render_notification(self.name, flight.destination, status, self.locale)
        self._inbox.append(message)
        logger.info(message)
        return message
