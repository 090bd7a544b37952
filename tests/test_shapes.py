from datetime import datetime, timezone

import pytest

from thatnightmoon.compute import classify_phase_name, compute_moon_phase, illumination_for
from thatnightmoon.models import MoonSnapshot, VisualShape
from thatnightmoon.shapes import to_visual

_WHEN = datetime(2025, 8, 23, tzinfo=timezone.utc)


def _snapshot(phase: float, illumination: int | None = None) -> MoonSnapshot:
    return MoonSnapshot(
        when=_WHEN,
        phase=phase,
        illumination=illumination_for(phase) if illumination is None else illumination,
        phase_name=classify_phase_name(phase),
        age_days=phase * 29.53059,
    )


def _outline(shape: VisualShape) -> tuple[str, float]:
    """Reduce a shape to (lit side, lit width %) so adjacent quartiles compare."""
    if shape.kind == "crescent-right":
        return "right", shape.radius_x
    if shape.kind == "crescent-left":
        return "left", shape.radius_x
    if shape.kind == "gibbous-inset-left":
        return "right", 100 - shape.inset
    if shape.kind == "gibbous-inset-right":
        return "left", 100 - shape.inset
    if shape.kind == "full":
        return "both", 100.0
    return "none", 0.0


def test_new_moon_is_dark():
    shape = to_visual(compute_moon_phase(datetime(2025, 8, 23, 6, 6, tzinfo=timezone.utc)))
    assert shape == VisualShape(kind="dark")
    assert shape.anchor is None


@pytest.mark.parametrize("illumination", [0, 1])
def test_dark_whenever_illumination_at_most_one(illumination):
    # Illumination decides darkness, whatever the phase says
    assert to_visual(_snapshot(0.3, illumination)).kind == "dark"


def test_two_percent_is_not_dark():
    assert to_visual(_snapshot(0.02, 2)).kind == "crescent-right"


@pytest.mark.parametrize(
    "phase, kind, anchor",
    [
        (0.1, "crescent-right", "right"),
        (0.3, "gibbous-inset-left", "left"),
        (0.6, "gibbous-inset-right", "right"),
        (0.9, "crescent-left", "left"),
    ],
)
def test_quartile_families(phase, kind, anchor):
    shape = to_visual(_snapshot(phase))
    assert shape.kind == kind
    assert shape.anchor == anchor


def test_exact_full_moon_is_full_disc():
    shape = to_visual(_snapshot(0.5))
    assert shape.kind == "full"
    assert shape.inset == 0


@pytest.mark.parametrize(
    "phase, radius_x, inset",
    [
        (0.125, 25.0, 0.0),
        (0.375, 0.0, 25.0),
        (0.625, 0.0, 25.0),
        (0.875, 25.0, 0.0),
    ],
)
def test_quartile_midpoints(phase, radius_x, inset):
    shape = to_visual(_snapshot(phase))
    assert shape.radius_x == pytest.approx(radius_x)
    assert shape.inset == pytest.approx(inset)


@pytest.mark.parametrize(
    "lo, hi, attr, direction",
    [
        (0.02, 0.25, "radius_x", 1),
        (0.25, 0.5, "inset", -1),
        (0.5, 0.75, "inset", 1),
        (0.75, 0.98, "radius_x", -1),
    ],
)
def test_parameters_monotonic_within_quartile(lo, hi, attr, direction):
    steps = 200
    values = []
    for i in range(steps):
        phase = lo + (hi - lo) * i / steps
        shape = to_visual(_snapshot(phase))
        if shape.kind in ("dark", "full"):
            continue
        values.append(getattr(shape, attr))
    assert len(values) > steps // 2
    for a, b in zip(values, values[1:]):
        assert (b - a) * direction > 0


@pytest.mark.parametrize("boundary", [0.25, 0.5, 0.75])
def test_outline_continuous_across_quartiles(boundary):
    eps = 1e-9
    before = _outline(to_visual(_snapshot(boundary - eps)))
    after = _outline(to_visual(_snapshot(boundary + eps)))
    assert before[1] == pytest.approx(after[1], abs=1e-6)


def test_right_crescent_meets_left_inset_at_first_quarter():
    before = to_visual(_snapshot(0.25 - 1e-9))
    after = to_visual(_snapshot(0.25))
    assert before.radius_x == pytest.approx(50)
    assert after.inset == pytest.approx(50)
    assert _outline(before)[0] == _outline(after)[0] == "right"
