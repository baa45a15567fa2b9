"""Tests for domain models."""

import logging

import pytest
from pydantic import ValidationError

from src.domain import (
    ALLOWED_TRANSITIONS,
    TERMINAL_STATUSES,
    Flight,
    FlightStatus,
    InvalidTransitionError,
    Passenger,
    allowed_targets,
    can_transition,
    render_notification,
    resolve_locale,
    status_label,
)

LEGAL = {
    (FlightStatus.SCHEDULED, FlightStatus.BOARDING),
    (FlightStatus.SCHEDULED, FlightStatus.CANCELLED),
    (FlightStatus.BOARDING, FlightStatus.DEPARTED),
    (FlightStatus.BOARDING, FlightStatus.CANCELLED),
    (FlightStatus.DELAYED, FlightStatus.BOARDING),
    (FlightStatus.DELAYED, FlightStatus.CANCELLED),
}

ALL_PAIRS = [(a, b) for a in FlightStatus for b in FlightStatus]


class Recorder:
    """Subscriber that records every call it receives."""

    def __init__(self, name: str, log: list):
        self.name = name
        self.log = log

    def __call__(self, flight, status):
        self.log.append((self.name, flight.destination, status))


class TestFlightStatus:
    """Tests for the status enumeration."""

    def test_ordinals_follow_member_order(self):
        """Test the fixed ordinal mapping."""
        assert [s.ordinal for s in FlightStatus] == [0, 1, 2, 3, 4]
        assert FlightStatus.SCHEDULED.ordinal == 0
        assert FlightStatus.CANCELLED.ordinal == 4

    def test_from_ordinal(self):
        """Test selecting a status numerically."""
        assert FlightStatus.from_ordinal(0) == FlightStatus.SCHEDULED
        assert FlightStatus.from_ordinal(1) == FlightStatus.BOARDING
        assert FlightStatus.from_ordinal(2) == FlightStatus.DEPARTED
        assert FlightStatus.from_ordinal(3) == FlightStatus.DELAYED
        assert FlightStatus.from_ordinal(4) == FlightStatus.CANCELLED

    @pytest.mark.parametrize("ordinal", [-1, 5, 42])
    def test_from_ordinal_out_of_range(self, ordinal):
        """Test unknown ordinals are rejected."""
        with pytest.raises(ValueError):
            FlightStatus.from_ordinal(ordinal)

    def test_terminal_statuses(self):
        """Test departed and cancelled are terminal."""
        assert TERMINAL_STATUSES == {FlightStatus.DEPARTED, FlightStatus.CANCELLED}
        assert FlightStatus.DEPARTED.is_terminal
        assert not FlightStatus.DELAYED.is_terminal


class TestTransitionTable:
    """Tests for the legal transition table."""

    @pytest.mark.parametrize("current,target", ALL_PAIRS)
    def test_can_transition(self, current, target):
        """Test every pair against the table."""
        assert can_transition(current, target) is ((current, target) in LEGAL)

    @pytest.mark.parametrize("status", list(FlightStatus))
    def test_self_transition_not_listed(self, status):
        """Test no status lists itself as a target."""
        assert status not in allowed_targets(status)

    def test_terminal_statuses_have_no_targets(self):
        """Test terminal statuses are dead ends."""
        for status in TERMINAL_STATUSES:
            assert allowed_targets(status) == frozenset()

    def test_delayed_has_no_incoming_edge(self):
        """Test delayed cannot be entered through the table."""
        assert all(FlightStatus.DELAYED not in targets for targets in ALLOWED_TRANSITIONS.values())


class TestFlight:
    """Tests for the Flight entity."""

    def test_new_flight_defaults(self, sample_flight):
        """Test a new flight is scheduled with nobody subscribed."""
        assert sample_flight.status == FlightStatus.SCHEDULED
        assert sample_flight.passengers == ()
        assert sample_flight.subscribers == ()
        assert sample_flight.is_vip is False
        assert sample_flight.accepts_registrations

    def test_flight_ids_are_unique(self):
        """Test each flight gets its own identifier."""
        ids = {Flight(destination="Kyiv").id for _ in range(20)}
        assert len(ids) == 20

    def test_identity_fields_are_immutable(self, sample_flight):
        """Test id, destination and VIP flag cannot be reassigned."""
        with pytest.raises(ValidationError):
            sample_flight.destination = "Lviv"
        with pytest.raises(ValidationError):
            sample_flight.id = "other"
        with pytest.raises(ValidationError):
            sample_flight.is_vip = True

    def test_status_is_serialized(self, sample_flight):
        """Test the status shows up in dumps."""
        data = sample_flight.model_dump()
        assert data["status"] == FlightStatus.SCHEDULED
        assert data["destination"] == "Kyiv"

    def test_legal_change_notifies_in_order(self, sample_flight):
        """Test fan-out follows subscription order."""
        log = []
        for name in ("first", "second", "third"):
            sample_flight.subscribe(Recorder(name, log))

        result = sample_flight.change_status(FlightStatus.BOARDING)

        assert result.changed is True
        assert result.previous == FlightStatus.SCHEDULED
        assert result.current == FlightStatus.BOARDING
        assert result.notified == 3
        assert sample_flight.status == FlightStatus.BOARDING
        assert log == [
            ("first", "Kyiv", FlightStatus.BOARDING),
            ("second", "Kyiv", FlightStatus.BOARDING),
            ("third", "Kyiv", FlightStatus.BOARDING),
        ]

    def test_same_status_is_noop(self, sample_flight):
        """Test requesting the current status changes nothing."""
        log = []
        sample_flight.subscribe(Recorder("only", log))

        result = sample_flight.change_status(FlightStatus.SCHEDULED)

        assert result.changed is False
        assert result.notified == 0
        assert sample_flight.status == FlightStatus.SCHEDULED
        assert log == []

    def test_illegal_change_raises(self, sample_flight):
        """Test an illegal move leaves the flight untouched."""
        log = []
        sample_flight.subscribe(Recorder("only", log))

        with pytest.raises(InvalidTransitionError) as exc_info:
            sample_flight.change_status(FlightStatus.DEPARTED)

        assert exc_info.value.kind == "InvalidTransition"
        assert exc_info.value.current == FlightStatus.SCHEDULED
        assert exc_info.value.target == FlightStatus.DEPARTED
        assert sample_flight.status == FlightStatus.SCHEDULED
        assert log == []

    def test_failing_subscriber_does_not_block_others(self, sample_flight, caplog):
        """Test a raising subscriber is logged and skipped."""
        log = []

        def broken(flight, status):
            raise RuntimeError("mailbox full")

        sample_flight.subscribe(Recorder("before", log))
        sample_flight.subscribe(broken)
        sample_flight.subscribe(Recorder("after", log))

        with caplog.at_level(logging.ERROR, logger="src.domain.flight"):
            result = sample_flight.change_status(FlightStatus.CANCELLED)

        assert result.notified == 2
        assert [entry[0] for entry in log] == ["before", "after"]
        assert sample_flight.status == FlightStatus.CANCELLED
        assert "failed" in caplog.text

    def test_add_passenger_subscribes(self, sample_flight):
        """Test roster and subscriptions stay one to one."""
        anna = Passenger(name="Anna")
        bohdan = Passenger(name="Bohdan")
        sample_flight.add_passenger(anna)
        sample_flight.add_passenger(bohdan)

        assert [p.name for p in sample_flight.passengers] == ["Anna", "Bohdan"]
        assert len(sample_flight.subscribers) == len(sample_flight.passengers)
        for passenger, callback in zip(sample_flight.passengers, sample_flight.subscribers):
            assert callback.__self__ is passenger

    def test_delayed_flight_can_resume(self, sample_flight):
        """Test the outgoing edges of delayed still work."""
        sample_flight._status = FlightStatus.DELAYED

        result = sample_flight.change_status(FlightStatus.BOARDING)

        assert result.changed is True
        assert sample_flight.status == FlightStatus.BOARDING


class TestPassenger:
    """Tests for the Passenger model."""

    def test_notify_renders_and_records(self, sample_flight, sample_passenger):
        """Test a notification lands in the inbox."""
        message = sample_passenger.notify(sample_flight, FlightStatus.BOARDING)

        assert message == "Passenger Anna: boarding has started for the flight to Kyiv."
        assert sample_passenger.inbox == (message,)

    def test_ukrainian_messages(self, sample_flight):
        """Test the Ukrainian locale."""
        passenger = Passenger(name="Анна", locale="uk")
        message = passenger.notify(sample_flight, FlightStatus.DEPARTED)

        assert message == "Пасажир Анна: Ваш рейс до Kyiv відправлено."

    def test_same_name_passengers_are_independent(self, sample_flight):
        """Test two passengers named alike keep separate inboxes."""
        first = Passenger(name="Anna")
        second = Passenger(name="Anna")
        sample_flight.add_passenger(first)

        sample_flight.change_status(FlightStatus.BOARDING)

        assert len(first.inbox) == 1
        assert second.inbox == ()

    def test_inbox_keeps_every_message(self, sample_flight, sample_passenger):
        """Test the inbox retains all deliveries, oldest first."""
        sample_flight.add_passenger(sample_passenger)

        sample_flight.change_status(FlightStatus.BOARDING)
        sample_flight.change_status(FlightStatus.DEPARTED)

        assert len(sample_passenger.inbox) == 2
        assert "boarding" in sample_passenger.inbox[0]
        assert "departed" in sample_passenger.inbox[1]

    def test_name_is_immutable(self, sample_passenger):
        """Test the passenger name cannot change."""
        with pytest.raises(ValidationError):
            sample_passenger.name = "Olena"


class TestNotifications:
    """Tests for labels and message rendering."""

    @pytest.mark.parametrize("status", list(FlightStatus))
    def test_every_status_has_a_message(self, status):
        """Test each status renders with the name and destination."""
        for locale in ("en", "uk"):
            message = render_notification("Anna", "Kyiv", status, locale)
            assert "Anna" in message
            assert "Kyiv" in message

    def test_render_is_pure(self):
        """Test rendering depends only on its inputs."""
        first = render_notification("Anna", "Kyiv", FlightStatus.DELAYED)
        second = render_notification("Anna", "Kyiv", FlightStatus.DELAYED)
        assert first == second == "Passenger Anna: your flight to Kyiv is delayed."

    def test_status_labels(self):
        """Test English and Ukrainian labels."""
        assert status_label(FlightStatus.BOARDING) == "Boarding"
        assert status_label(FlightStatus.DELAYED, "uk") == "Затримано"
        assert status_label(FlightStatus.SCHEDULED, "uk") == "Очікується"

    @pytest.mark.parametrize(
        "raw,expected",
        [
            (None, "en"),
            ("", "en"),
            ("en", "en"),
            ("uk", "uk"),
            ("uk-UA", "uk"),
            ("uk_UA", "uk"),
            ("UK", "uk"),
            ("fr", "en"),
        ],
    )
    def test_resolve_locale(self, raw, expected):
        """Test locale normalization and fallback."""
        assert resolve_locale(raw) == expected
