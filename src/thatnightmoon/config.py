"""Environment-driven settings and logging setup.

Entry points call `load_dotenv()` first, so values may come from a `.env` file.
"""

import logging
import os
from dataclasses import dataclass


class ConfigError(ValueError):
    """Unparsable environment setting."""


@dataclass(frozen=True)
class Settings:
    star_count: int = 100
    forecast_days: int = 7
    star_seed: int | None = None  # None → a new starfield on every render
    log_level: str = "WARNING"


def _env_int(name: str) -> int | None:
    """Non-negative integer from the environment, None when unset or blank."""
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from e
    if value < 0:
        raise ConfigError(f"{name} must be >= 0, got {value}")
    return value


def load_settings() -> Settings:
    """Read THATNIGHTMOON_* variables from the environment.

    Raises:
        ConfigError: If a numeric variable is not a non-negative integer or the
            log level is not a known logging level name.
    """
    log_level = os.environ.get("THATNIGHTMOON_LOG_LEVEL", "").strip().upper() or "WARNING"
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"THATNIGHTMOON_LOG_LEVEL is not a logging level: {log_level!r}")

    defaults = Settings()
    star_count = _env_int("THATNIGHTMOON_STAR_COUNT")
    forecast_days = _env_int("THATNIGHTMOON_FORECAST_DAYS")
    return Settings(
        star_count=defaults.star_count if star_count is None else star_count,
        forecast_days=defaults.forecast_days if forecast_days is None else forecast_days,
        star_seed=_env_int("THATNIGHTMOON_STAR_SEED"),
        log_level=log_level,
    )


def configure_logging(level: str) -> None:
    """Install a basic stderr handler on the root logger (no-op if one exists)."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
