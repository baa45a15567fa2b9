"""
Localized status labels and passenger notification messages.

Presentation only: the state machine never looks at these strings.
Supported locales are English (``en``) and Ukrainian (``uk``); anything
else falls back to English.
"""

from .status import FlightStatus

DEFAULT_LOCALE = "en"

STATUS_LABELS: dict[str, dict[FlightStatus, str]] = {
    "en": {
        FlightStatus.SCHEDULED: "Scheduled",
        FlightStatus.BOARDING: "Boarding",
        FlightStatus.DEPARTED: "Departed",
        FlightStatus.DELAYED: "Delayed",
        FlightStatus.CANCELLED: "Cancelled",
    },
    "uk": {
        FlightStatus.SCHEDULED: "Очікується",
        FlightStatus.BOARDING: "Посадка",
        FlightStatus.DEPARTED: "Відправлено",
        FlightStatus.DELAYED: "Затримано",
        FlightStatus.CANCELLED: "Скасовано",
    },
}

MESSAGE_TEMPLATES: dict[str, dict[FlightStatus, str]] = {
    "en": {
        FlightStatus.SCHEDULED: "Passenger {name}: your flight to {destination} is scheduled.",
        FlightStatus.BOARDING: "Passenger {name}: boarding has started for the flight to {destination}.",
        FlightStatus.DEPARTED: "Passenger {name}: your flight to {destination} has departed.",
        FlightStatus.DELAYED: "Passenger {name}: your flight to {destination} is delayed.",
        FlightStatus.CANCELLED: "Passenger {name}: your flight to {destination} is cancelled.",
    },
    "uk": {
        FlightStatus.SCHEDULED: "Пасажир {name}: Ваш рейс до {destination} очікується.",
        FlightStatus.BOARDING: "Пасажир {name}: Почалася посадка на рейс до {destination}.",
        FlightStatus.DEPARTED: "Пасажир {name}: Ваш рейс до {destination} відправлено.",
        FlightStatus.DELAYED: "Пасажир {name}: Ваш рейс до {destination} затримано.",
        FlightStatus.CANCELLED: "Пасажир {name}: Ваш рейс до {destination} скасовано.",
    },
}

FALLBACK_TEMPLATES = {
    "en": "Passenger {name}: the status of your flight to {destination} was updated.",
    "uk": "Пасажир {name}: Статус рейсу до {destination} оновлено.",
}


def resolve_locale(locale: str | None) -> str:
    """Normalize a locale tag (``uk-UA`` -> ``uk``) to a supported one."""
    if not locale:
        return DEFAULT_LOCALE
    code = locale.replace("_", "-").split("-")[0].lower()
    return code if code in STATUS_LABELS else DEFAULT_LOCALE


def status_label(status: FlightStatus, locale: str | None = DEFAULT_LOCALE) -> str:
    """Display label for a status."""
    return STATUS_LABELS[resolve_locale(locale)][status]


def render_notification(
    name: str,
    destination: str,
    status: FlightStatus,
    locale: str | None = DEFAULT_LOCALE,
) -> str:
    """
    Render the message a passenger receives for a status change.

    Pure function of its arguments.
    """
    code = resolve_locale(locale)
    template = MESSAGE_TEMPLATES[code].get(status, FALLBACK_TEMPLATES[code])
    return template.format(name=name, destination=destination)
