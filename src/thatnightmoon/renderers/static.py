"""Matplotlib static PNG renderer."""

from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Circle, Ellipse, Patch, Rectangle

from thatnightmoon.models import MoonDashboard, StarParticle, VisualShape
from thatnightmoon.renderers import labels

_ROOT = Path(__file__).parent.parent.parent.parent

_BG = "#0d1b35"
_MOON_LIGHT = "#f5f0d6"
_MOON_DARK = "#1c2540"
_TEXT = "#e8d5a3"
_MUTED = "#aaaaaa"

# Canvas in data units: 8 wide, 6 tall
_WIDTH = 8.0
_HEIGHT = 6.0


def _clip_patch(shape: VisualShape, cx: float, cy: float, r: float) -> Patch | None:
    """Clip region for the lit disc. VisualShape percentages span the diameter."""
    unit = 2 * r / 100
    left = cx - r
    if shape.kind == "crescent-right":
        return Ellipse((cx + r, cy), 2 * shape.radius_x * unit, 2 * r)
    if shape.kind == "crescent-left":
        return Ellipse((cx - r, cy), 2 * shape.radius_x * unit, 2 * r)
    if shape.kind == "gibbous-inset-left":
        return Rectangle((left + shape.inset * unit, cy - r), (100 - shape.inset) * unit, 2 * r)
    if shape.kind == "gibbous-inset-right":
        return Rectangle((left, cy - r), (100 - shape.inset) * unit, 2 * r)
    return None


def draw_moon(ax: Axes, shape: VisualShape, cx: float, cy: float, r: float) -> None:
    """Draw one moon disc onto `ax` in data coordinates."""
    ax.add_patch(Circle((cx, cy), r, color=_MOON_DARK, zorder=2))
    if shape.kind == "dark":
        return
    lit = Circle((cx, cy), r, color=_MOON_LIGHT, zorder=3)
    ax.add_patch(lit)
    clip = _clip_patch(shape, cx, cy, r)
    if clip is not None:
        clip.set_transform(ax.transData)
        lit.set_clip_path(clip)


def render_static_card(
    dashboard: MoonDashboard,
    stars: tuple[StarParticle, ...] = (),
    size: float = 8,
) -> Figure:
    """Render the dashboard as a static matplotlib image.

    Args:
        dashboard: Fully computed lunar state.
        stars: Background particles; positions are percentages of the canvas.
        size: Output image width in inches (height is 3/4 of it).

    Returns:
        matplotlib Figure object.
    """
    fig, ax = plt.subplots(figsize=(size, size * _HEIGHT / _WIDTH))
    fig.patch.set_facecolor(_BG)
    ax.set_facecolor(_BG)

    if stars:
        ax.scatter(
            [s.left / 100 * _WIDTH for s in stars],
            [_HEIGHT - s.top / 100 * _HEIGHT for s in stars],
            s=[(s.size * 2) ** 2 for s in stars],
            color="white",
            alpha=0.6,
            marker=".",
            linewidths=0,
            zorder=1,
        )

    snap = dashboard.snapshot
    draw_moon(ax, dashboard.shape, _WIDTH / 2, 4.35, 0.95)
    ax.text(_WIDTH / 2, 5.6, labels.long_date(dashboard.now), color=_MUTED, ha="center", fontsize=10)
    ax.text(_WIDTH / 2, 3.0, snap.phase_name, color=_TEXT, ha="center", fontsize=16)
    ax.text(
        _WIDTH / 2,
        2.65,
        f"{labels.illumination_label(snap.illumination)}  ·  "
        f"Age {labels.age_label(snap.age_days)}  ·  {dashboard.zodiac}",
        color=_MUTED,
        ha="center",
        fontsize=9,
    )
    ax.text(
        _WIDTH / 2,
        2.3,
        f"Next Full Moon {labels.next_phase_label(dashboard.next_full)}  ·  "
        f"Next New Moon {labels.next_phase_label(dashboard.next_new)}",
        color=_MUTED,
        ha="center",
        fontsize=9,
    )

    count = len(dashboard.forecast)
    if count:
        step = _WIDTH / count
        for i, day in enumerate(dashboard.forecast):
            cx = step * (i + 0.5)
            draw_moon(ax, day.shape, cx, 1.2, min(0.35, step * 0.35))
            ax.text(cx, 1.75, labels.card_date(day.date), color=_MUTED, ha="center", fontsize=7)
            ax.text(cx, 0.6, day.snapshot.phase_name, color=_TEXT, ha="center", fontsize=6)
            ax.text(
                cx,
                0.35,
                labels.card_illumination_label(day.snapshot.illumination),
                color=_MUTED,
                ha="center",
                fontsize=6,
            )

    ax.set_xlim(0, _WIDTH)
    ax.set_ylim(0, _HEIGHT)
    ax.set_aspect("equal")
    ax.axis("off")

    return fig


def save_static_card(
    dashboard: MoonDashboard,
    stars: tuple[StarParticle, ...] = (),
    output_path: Path | None = None,
) -> Path:
    """Save the dashboard as a PNG file.

    Args:
        dashboard: Fully computed lunar state.
        stars: Background particles.
        output_path: Destination path. Auto-generated under results/ if None.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        when_str = dashboard.now.strftime("%Y_%m_%d_%H_%M")
        output_path = _ROOT / "results" / f"moon__{when_str}.png"

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_static_card(dashboard, stars)
    fig.savefig(output_path, facecolor=_BG)
    plt.close(fig)
    return output_path
