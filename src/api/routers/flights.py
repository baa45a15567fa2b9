"""
Flights API endpoints.

Positions in paths are the 1-based positions shown in listings.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field, StrictInt, model_validator

from src.config import Settings
from src.domain import (
    FlightRegistryError,
    FlightStatus,
    InvalidIndexError,
    allowed_targets,
    status_label,
)
from src.services import FlightRegistry, FlightStatistics, Roster
from src.api.dependencies import get_app_settings, get_registry

router = APIRouter()


class FlightResponse(BaseModel):
    """Flight listing entry."""

    position: int
    id: str
    destination: str
    status: FlightStatus
    status_label: str
    is_vip: bool


class FlightList(BaseModel):
    """List of flights."""

    flights: list[FlightResponse]
    total: int


class StatusInfo(BaseModel):
    """Status enumeration entry."""

    ordinal: int
    value: str
    label: str
    allowed_targets: list[str]


class CreateFlightRequest(BaseModel):
    """Request to add a flight."""

    destination: str
    is_vip: bool = False


class RegisterPassengerRequest(BaseModel):
    """Request to register a passenger."""

    name: str = Field(..., min_length=1)


class PassengerResponse(BaseModel):
    """Registered passenger."""

    name: str
    position: int
    destination: str


class StatusChangeRequest(BaseModel):
    """Target status, given either by value or by ordinal."""

    status: FlightStatus | None = None
    ordinal: StrictInt | None = Field(default=None, ge=0, le=len(FlightStatus) - 1)

    @model_validator(mode="after")
    def exactly_one_target(self) -> "StatusChangeRequest":
        if (self.status is None) == (self.ordinal is None):
            raise ValueError("Provide exactly one of 'status' or 'ordinal'")
        return self

    def target(self) -> FlightStatus:
        if self.status is not None:
            return self.status
        return FlightStatus.from_ordinal(self.ordinal)


class StatusChangeResponse(BaseModel):
    """Applied status change."""

    position: int
    destination: str
    previous: FlightStatus
    current: FlightStatus
    current_label: str
    notified: int


def _http_error(exc: FlightRegistryError) -> HTTPException:
    status_code = 404 if isinstance(exc, InvalidIndexError) else 409
    return HTTPException(
        status_code=status_code,
        detail={"kind": exc.kind, "message": str(exc)},
    )


@router.get("/", response_model=FlightList)
async def list_flights(
    registry: Annotated[FlightRegistry, Depends(get_registry)],
    settings: Annotated[Settings, Depends(get_app_settings)],
):
    """
    List all flights in creation order.
    """
    flights = [
        FlightResponse(
            position=f.position,
            id=f.id,
            destination=f.destination,
            status=f.status,
            status_label=status_label(f.status, settings.locale),
            is_vip=f.is_vip,
        )
        for f in registry.list_flights()
    ]
    return FlightList(flights=flights, total=len(flights))


@router.post("/", response_model=FlightResponse, status_code=201)
async def add_flight(
    request: CreateFlightRequest,
    registry: Annotated[FlightRegistry, Depends(get_registry)],
    settings: Annotated[Settings, Depends(get_app_settings)],
):
    """
    Add a flight. New flights start in the scheduled status.
    """
    summary = registry.add_flight(request.destination, request.is_vip)
    return FlightResponse(
        position=summary.position,
        id=summary.id,
        destination=summary.destination,
        status=summary.status,
        status_label=status_label(summary.status, settings.locale),
        is_vip=summary.is_vip,
    )


@router.get("/statuses", response_model=list[StatusInfo])
async def list_statuses(
    settings: Annotated[Settings, Depends(get_app_settings)],
):
    """
    List selectable statuses with their ordinals and allowed next statuses.
    """
    return [
        StatusInfo(
            ordinal=status.ordinal,
            value=status.value,
            label=status_label(status, settings.locale),
            allowed_targets=[t.value for t in FlightStatus if t in allowed_targets(status)],
        )
        for status in FlightStatus
    ]


@router.get("/statistics", response_model=FlightStatistics)
async def get_statistics(
    registry: Annotated[FlightRegistry, Depends(get_registry)],
):
    """
    Count departed, delayed and cancelled flights.
    """
    return registry.statistics()


@router.get("/{position}/passengers", response_model=Roster)
async def get_roster(
    position: int,
    registry: Annotated[FlightRegistry, Depends(get_registry)],
):
    """
    Passenger names for a flight in registration order.
    """
    try:
        return registry.roster_for(position - 1)
    except FlightRegistryError as exc:
        raise _http_error(exc)


@router.post("/{position}/passengers", response_model=PassengerResponse, status_code=201)
async def register_passenger(
    position: int,
    request: RegisterPassengerRequest,
    registry: Annotated[FlightRegistry, Depends(get_registry)],
):
    """
    Register a passenger on a flight.

    Refused with 409 once the flight has departed or been cancelled.
    """
    try:
        passenger = registry.register_passenger(request.name, position - 1)
    except FlightRegistryError as exc:
        raise _http_error(exc)

    flight = registry.get_flight(position - 1)
    return PassengerResponse(
        name=passenger.name,
        position=position,
        destination=flight.destination,
    )


@router.put("/{position}/status", response_model=StatusChangeResponse)
async def change_status(
    position: int,
    request: StatusChangeRequest,
    registry: Annotated[FlightRegistry, Depends(get_registry)],
    settings: Annotated[Settings, Depends(get_app_settings)],
):
    """
    Change a flight's status and notify its passengers.

    Illegal transitions are refused with 409 and leave the flight unchanged.
    """
    try:
        change = registry.change_flight_status(position - 1, request.target())
    except FlightRegistryError as exc:
        raise _http_error(exc)

    return StatusChangeResponse(
        position=change.position,
        destination=change.destination,
        previous=change.previous,
        current=change.current,
        current_label=status_label(change.current, settings.locale),
        notified=change.notified,
    )
