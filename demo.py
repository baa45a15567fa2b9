#!/usr/bin/env python3
"""
Flight Status Registry Demo.

Walks through the core capabilities:
1. Adding flights
2. Registering passengers
3. Validated status changes with passenger notifications
4. Rejected requests
5. Statistics
"""

import logging

from src.config import get_settings
from src.domain import FlightRegistryError, FlightStatus, status_label
from src.services import FlightRegistry


def print_section(title: str):
    """Print a section header."""
    print()
    print("=" * 60)
    print(f"  {title}")
    print("=" * 60)


def print_flights(registry: FlightRegistry, locale: str):
    for f in registry.list_flights():
        vip = " (VIP)" if f.is_vip else ""
        print(f"  {f.position}. {f.destination} - {status_label(f.status, locale)}{vip}")


def attempt(label: str, action):
    """Run a registry call and print either its result or the error kind."""
    try:
        result = action()
    except FlightRegistryError as exc:
        print(f"  {label}: refused [{exc.kind}] {exc}")
        return None
    print(f"  {label}: ok")
    return result


def main():
    settings = get_settings()
    logging.basicConfig(level=logging.WARNING)
    locale = settings.locale

    print()
    print("*" * 60)
    print("*        Flight Status Registry - Notification Demo       *")
    print("*" * 60)

    registry = FlightRegistry(locale=locale)

    # 1. Flights
    print_section("1. Adding Flights")

    registry.add_flight("Kyiv")
    registry.add_flight("Lviv")
    registry.add_flight("Odesa", is_vip=True)
    print_flights(registry, locale)

    # 2. Passengers
    print_section("2. Registering Passengers")

    anna = registry.register_passenger("Anna", 0)
    taras = registry.register_passenger("Taras", 0)
    registry.register_passenger("Olena", 1)
    for index in range(len(registry)):
        roster = registry.roster_for(index)
        names = ", ".join(roster.names) if not roster.is_empty else "no passengers registered"
        print(f"  {roster.position}. {roster.destination}: {names}")

    # 3. Status changes
    print_section("3. Status Changes")

    change = registry.change_flight_status(0, FlightStatus.BOARDING)
    print(f"  Kyiv: {change.previous.value} -> {change.current.value}, {change.notified} notified")
    change = registry.change_flight_status(0, FlightStatus.DEPARTED)
    print(f"  Kyiv: {change.previous.value} -> {change.current.value}, {change.notified} notified")
    change = registry.change_flight_status(1, FlightStatus.CANCELLED)
    print(f"  Lviv: {change.previous.value} -> {change.current.value}, {change.notified} notified")

    print()
    print("Delivered messages:")
    for passenger in (anna, taras):
        for message in passenger.inbox:
            print(f"  {message}")

    # 4. Rejections
    print_section("4. Rejected Requests")

    attempt("Kyiv departed -> departed", lambda: registry.change_flight_status(0, FlightStatus.DEPARTED))
    attempt("Lviv cancelled -> boarding", lambda: registry.change_flight_status(1, FlightStatus.BOARDING))
    attempt("Register Maria on Kyiv", lambda: registry.register_passenger("Maria", 0))
    attempt("Register Ivan on flight 9", lambda: registry.register_passenger("Ivan", 8))

    # 5. Statistics
    print_section("5. Statistics")

    stats = registry.statistics()
    print(f"  Departed flights:  {stats.departed}")
    print(f"  Delayed flights:   {stats.delayed}")
    print(f"  Cancelled flights: {stats.cancelled}")
    print()
    print_flights(registry, locale)

    print()
    print("=" * 60)
    print("  Demo Complete!")
    print("=" * 60)
    print()
    print("To run the API server:")
    print("  uvicorn src.api:app --reload")
    print()
    print("API Documentation at: http://localhost:8000/docs")
    print()


if __name__ == "__main__":
    main()
