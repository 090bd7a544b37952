"""Display strings for the dashboard (en-US style, single locale)."""

from datetime import datetime

NOT_FOUND = "N/A"


def long_date(when: datetime) -> str:
    """'Monday, October 19, 2026'."""
    return f"{when:%A}, {when:%B} {when.day}, {when.year}"


def short_date(when: datetime) -> str:
    """'Oct 19'."""
    return f"{when:%b} {when.day}"


def card_date(when: datetime) -> str:
    """'Tue, Oct 20', the forecast card heading."""
    return f"{when:%a}, {when:%b} {when.day}"


def next_phase_label(when: datetime | None) -> str:
    return NOT_FOUND if when is None else short_date(when)


def illumination_label(illumination: int) -> str:
    return f"{illumination}% Illuminated"


def card_illumination_label(illumination: int) -> str:
    return f"{illumination}% illuminated"


def age_label(age_days: float) -> str:
    return f"{age_days:.1f} days"
