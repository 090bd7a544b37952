"""Lunar computation layer: phase arithmetic, phase search, zodiac estimate, dashboard assembly."""

import logging
import math
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from thatnightmoon.models import (
    ForecastDay,
    MoonDashboard,
    MoonSnapshot,
    PhaseName,
)
from thatnightmoon.shapes import to_visual

logger = logging.getLogger(__name__)

# Known new moon used as the cycle anchor
REFERENCE_NEW_MOON = datetime(2025, 8, 23, 6, 6, tzinfo=timezone.utc)
SYNODIC_PERIOD = 29.53059  # days
SEARCH_LIMIT_DAYS = 60

PHASE_NAMES: tuple[PhaseName, ...] = (
    "New Moon",
    "Waxing Crescent",
    "First Quarter",
    "Waxing Gibbous",
    "Full Moon",
    "Waning Gibbous",
    "Last Quarter",
    "Waning Crescent",
)

# Upper (exclusive) phase bound of each band after New Moon. Quarter and full
# bands are deliberately narrow.
_PHASE_BANDS: tuple[tuple[float, PhaseName], ...] = (
    (0.235, "Waxing Crescent"),
    (0.265, "First Quarter"),
    (0.485, "Waxing Gibbous"),
    (0.515, "Full Moon"),
    (0.735, "Waning Gibbous"),
    (0.765, "Last Quarter"),
)
_NEW_MOON_LOW = 0.033
_NEW_MOON_HIGH = 0.967

ZODIAC_SIGNS: tuple[str, ...] = (
    "Aries",
    "Taurus",
    "Gemini",
    "Cancer",
    "Leo",
    "Virgo",
    "Libra",
    "Scorpio",
    "Sagittarius",
    "Capricorn",
    "Aquarius",
    "Pisces",
)


class PhaseNameError(ValueError):
    """Unknown lunar phase name."""


def _as_aware(when: datetime) -> datetime:
    # Naive datetimes are read as UTC
    if when.tzinfo is None:
        return when.replace(tzinfo=timezone.utc)
    return when


def illumination_for(phase: float) -> int:
    """Percentage of the disc lit at `phase`, modelled as a cosine of the cycle.

    Rounds half up, so 50.5 → 51.
    """
    return math.floor(50 * (1 - math.cos(phase * 2 * math.pi)) + 0.5)


def classify_phase_name(phase: float) -> PhaseName:
    """Map a cycle position in [0, 1) to one of the eight phase names."""
    if phase < _NEW_MOON_LOW or phase > _NEW_MOON_HIGH:
        return "New Moon"
    for upper, name in _PHASE_BANDS:
        if phase < upper:
            return name
    return "Waning Crescent"


def compute_moon_phase(when: datetime) -> MoonSnapshot:
    """Compute the lunar phase at an instant.

    Uses elapsed time since REFERENCE_NEW_MOON modulo the synodic period, so
    instants before the anchor work the same as instants after it.

    Args:
        when: Instant to evaluate. Naive values are treated as UTC.

    Returns:
        MoonSnapshot with phase in [0, 1) and illumination in 0..100.
    """
    when = _as_aware(when)
    days = (when - REFERENCE_NEW_MOON).total_seconds() / 86400
    # Python's % is already non-negative for a positive modulus, but a tiny
    # negative `days` rounds up to the period itself
    cycle_position = days % SYNODIC_PERIOD
    if cycle_position >= SYNODIC_PERIOD:
        cycle_position = 0.0

    phase = cycle_position / SYNODIC_PERIOD
    illumination = illumination_for(phase)
    phase_name = classify_phase_name(phase)

    logger.debug(
        "date=%s phase=%.3f illumination=%d%% name=%s",
        when.isoformat(),
        phase,
        illumination,
        phase_name,
    )

    return MoonSnapshot(
        when=when,
        phase=phase,
        illumination=illumination,
        phase_name=phase_name,
        age_days=cycle_position,
    )


def find_next_phase(from_date: datetime, target_name: str) -> datetime | None:
    """Scan forward one day at a time for the next date carrying `target_name`.

    The first candidate is the day after `from_date`; at most SEARCH_LIMIT_DAYS
    candidates are evaluated.

    Returns:
        The first matching date, or None if the scan ran out.

    Raises:
        PhaseNameError: If `target_name` is not one of PHASE_NAMES.
    """
    if target_name not in PHASE_NAMES:
        raise PhaseNameError(f"Unknown phase name: {target_name!r}")

    candidate = _as_aware(from_date)
    for _ in range(SEARCH_LIMIT_DAYS):
        candidate = candidate + timedelta(days=1)
        if compute_moon_phase(candidate).phase_name == target_name:
            return candidate

    logger.info("No %s within %d days of %s", target_name, SEARCH_LIMIT_DAYS, from_date)
    return None


def estimate_zodiac(when: datetime) -> str:
    """Coarse zodiac sign by bucketing the day of year into twelve slices.

    Not an ecliptic calculation. Uses the calendar fields of `when` as given.
    """
    day_of_year = when.timetuple().tm_yday
    index = math.floor(day_of_year / 365 * 12) % 12
    return ZODIAC_SIGNS[index]


def build_forecast(now: datetime, days: int = 7) -> tuple[ForecastDay, ...]:
    """Snapshots for each of the `days` days following `now`, same time of day."""
    if days < 0:
        raise ValueError(f"Forecast length must be >= 0, got {days}")

    now = _as_aware(now)
    cards: list[ForecastDay] = []
    for i in range(1, days + 1):
        date = now + timedelta(days=i)
        snapshot = compute_moon_phase(date)
        cards.append(ForecastDay(date=date, snapshot=snapshot, shape=to_visual(snapshot)))
    return tuple(cards)


def build_dashboard(now: datetime, forecast_days: int = 7) -> MoonDashboard:
    """Compute everything the dashboard shows for `now`.

    Args:
        now: Current instant from the host clock.
        forecast_days: Number of forecast cards after `now`.

    Returns:
        Fully computed MoonDashboard.
    """
    now = _as_aware(now)
    snapshot = compute_moon_phase(now)
    return MoonDashboard(
        now=now,
        snapshot=snapshot,
        shape=to_visual(snapshot),
        next_full=find_next_phase(now, "Full Moon"),
        next_new=find_next_phase(now, "New Moon"),
        zodiac=estimate_zodiac(now),
        forecast=build_forecast(now, forecast_days),
    )


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def run(
    now: datetime | None = None,
    forecast_days: int = 7,
    clock: Callable[[], datetime] = _utc_now,
) -> MoonDashboard:
    """Top-level entry point: reads the clock only when `now` is not given.

    Args:
        now: Instant to render. Defaults to `clock()`.
        forecast_days: Number of forecast cards.
        clock: Zero-argument callable returning the current instant.

    Returns:
        Fully computed MoonDashboard.
    """
    if now is None:
        now = clock()
    return build_dashboard(now, forecast_days)
