from datetime import datetime, timezone

import matplotlib
import pytest

# Headless backend for the static renderer
matplotlib.use("Agg")

UTC = timezone.utc


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 10, 19, 21, 30, tzinfo=UTC)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "THATNIGHTMOON_STAR_COUNT",
        "THATNIGHTMOON_FORECAST_DAYS",
        "THATNIGHTMOON_STAR_SEED",
        "THATNIGHTMOON_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
