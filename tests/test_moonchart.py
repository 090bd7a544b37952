from pathlib import Path

from thatnightmoon import moonchart
from thatnightmoon.compute import REFERENCE_NEW_MOON, build_dashboard


def test_format_dashboard_lines():
    dashboard = build_dashboard(REFERENCE_NEW_MOON, forecast_days=2)
    lines = moonchart.format_dashboard(dashboard)

    assert lines[0] == "Saturday, August 23, 2025"
    assert lines[1] == "New Moon — 0% Illuminated"
    assert lines[2].endswith("0.0 days")
    assert lines[4].endswith("Sep 21")
    assert len(lines) == 6 + 2


def test_main_prints_and_saves(monkeypatch, capsys, tmp_path):
    saved: list[Path] = []

    def _fake_save(dashboard, stars):
        path = tmp_path / "moon.png"
        saved.append(path)
        return path

    monkeypatch.setattr(moonchart, "save_static_card", _fake_save)
    monkeypatch.setenv("THATNIGHTMOON_FORECAST_DAYS", "3")

    assert moonchart.main(["2025-08-23T06:06:00+00:00"]) == 0

    out = capsys.readouterr().out
    assert "New Moon" in out
    assert f"Saved: {tmp_path / 'moon.png'}" in out
    assert len(saved) == 1
