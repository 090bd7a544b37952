import pytest

from thatnightmoon.config import ConfigError, Settings, load_settings


def test_defaults_without_environment():
    assert load_settings() == Settings()


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("THATNIGHTMOON_STAR_COUNT", "250")
    monkeypatch.setenv("THATNIGHTMOON_FORECAST_DAYS", "14")
    monkeypatch.setenv("THATNIGHTMOON_STAR_SEED", "12345")
    monkeypatch.setenv("THATNIGHTMOON_LOG_LEVEL", "debug")

    settings = load_settings()
    assert settings.star_count == 250
    assert settings.forecast_days == 14
    assert settings.star_seed == 12345
    assert settings.log_level == "DEBUG"


def test_blank_values_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("THATNIGHTMOON_STAR_COUNT", "  ")
    monkeypatch.setenv("THATNIGHTMOON_STAR_SEED", "")
    settings = load_settings()
    assert settings.star_count == 100
    assert settings.star_seed is None


@pytest.mark.parametrize(
    "name, value",
    [
        ("THATNIGHTMOON_STAR_COUNT", "many"),
        ("THATNIGHTMOON_FORECAST_DAYS", "-3"),
        ("THATNIGHTMOON_LOG_LEVEL", "LOUD"),
    ],
)
def test_invalid_values_raise(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigError):
        load_settings()
