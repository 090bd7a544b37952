"""CLI entry point for a moon dashboard snapshot.

Prints the dashboard and saves a PNG under results/:
    uv run python src/thatnightmoon/moonchart.py [YYYY-MM-DD[THH:MM]]

Without an argument the current UTC time is used.
"""

import sys
from datetime import datetime

from dotenv import load_dotenv

load_dotenv()

from thatnightmoon.compute import run  # noqa: E402
from thatnightmoon.config import configure_logging, load_settings  # noqa: E402
from thatnightmoon.models import MoonDashboard  # noqa: E402
from thatnightmoon.renderers import labels  # noqa: E402
from thatnightmoon.renderers.static import save_static_card  # noqa: E402
from thatnightmoon.starfield import generate_starfield  # noqa: E402


def format_dashboard(dashboard: MoonDashboard) -> list[str]:
    """Dashboard as plain text lines."""
    snap = dashboard.snapshot
    lines = [
        labels.long_date(dashboard.now),
        f"{snap.phase_name} — {labels.illumination_label(snap.illumination)}",
        f"Moon Age:       {labels.age_label(snap.age_days)}",
        f"Next Full Moon: {labels.next_phase_label(dashboard.next_full)}",
        f"Next New Moon:  {labels.next_phase_label(dashboard.next_new)}",
        f"Zodiac Sign:    {dashboard.zodiac}",
    ]
    for day in dashboard.forecast:
        lines.append(
            f"  {labels.card_date(day.date):<12} {day.snapshot.phase_name:<16}"
            f" {labels.card_illumination_label(day.snapshot.illumination)}"
        )
    return lines


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    settings = load_settings()
    configure_logging(settings.log_level)

    now = datetime.fromisoformat(args[0]) if args else None
    dashboard = run(now, forecast_days=settings.forecast_days)
    for line in format_dashboard(dashboard):
        print(line)

    stars = generate_starfield(settings.star_count, settings.star_seed)
    path = save_static_card(dashboard, stars)
    print(f"Saved: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
