"""SVG moon-phase dashboard renderer.

Produces a self-contained HTML string (inline SVG + CSS) for embedding via
st.components.v1.html(). Every moon disc is an SVG in a 100×100 viewBox, so
the percentages carried by VisualShape map one-to-one onto user units:

  crescent-*          lit disc clipped by an ellipse centred on the left/right edge
  gibbous-inset-*     lit disc clipped by a rectangle with one side cut away
  full / dark         whole disc lit / nothing lit
"""

from __future__ import annotations

import html

from thatnightmoon.models import MoonDashboard, StarParticle, VisualShape
from thatnightmoon.renderers import labels

_BG = "#0d1b35"
_MOON_LIGHT = "#f5f0d6"
_MOON_DARK = "#1c2540"
_ACCENT = "#c9a96e"
_STAR_COLOR = "#f0e0b0"


def _clip_element(shape: VisualShape) -> str | None:
    """SVG clip geometry for the lit region, or None when no clipping applies."""
    if shape.kind == "crescent-right":
        return f'<ellipse cx="100" cy="50" rx="{shape.radius_x:.3f}" ry="50"/>'
    if shape.kind == "crescent-left":
        return f'<ellipse cx="0" cy="50" rx="{shape.radius_x:.3f}" ry="50"/>'
    if shape.kind == "gibbous-inset-left":
        return (
            f'<rect x="{shape.inset:.3f}" y="0"'
            f' width="{100 - shape.inset:.3f}" height="100"/>'
        )
    if shape.kind == "gibbous-inset-right":
        return f'<rect x="0" y="0" width="{100 - shape.inset:.3f}" height="100"/>'
    return None


def render_moon_svg(shape: VisualShape, size: int = 120, clip_id: str = "moon-clip") -> str:
    """Render one moon disc as an inline SVG element.

    Args:
        shape: Lit-region descriptor.
        size: Rendered width/height in px.
        clip_id: Document-unique id for the clipPath; pages with several
            moons must pass distinct ids.

    Returns:
        SVG markup string.
    """
    parts = [
        f'<svg class="moon" width="{size}" height="{size}" viewBox="0 0 100 100"'
        f' xmlns="http://www.w3.org/2000/svg">',
        f'<circle cx="50" cy="50" r="50" fill="{_MOON_DARK}"/>',
    ]
    if shape.kind == "full":
        parts.append(f'<circle cx="50" cy="50" r="50" fill="{_MOON_LIGHT}"/>')
    elif shape.kind != "dark":
        clip = _clip_element(shape)
        parts.append(f'<defs><clipPath id="{clip_id}">{clip}</clipPath></defs>')
        parts.append(
            f'<circle cx="50" cy="50" r="50" fill="{_MOON_LIGHT}"'
            f' clip-path="url(#{clip_id})"/>'
        )
    # rim so a dark disc stays visible against the background
    parts.append(
        f'<circle cx="50" cy="50" r="49.5" fill="none" stroke="{_ACCENT}"'
        f' stroke-width="1" stroke-opacity="0.35"/>'
    )
    parts.append("</svg>")
    return "".join(parts)


def _render_starfield(stars: tuple[StarParticle, ...]) -> str:
    # Each star is a positioned dot; twinkle is staggered by its delay
    dots = [
        f'<div class="star" style="left:{s.left:.2f}%;top:{s.top:.2f}%;'
        f"width:{s.size:.2f}px;height:{s.size:.2f}px;"
        f'animation-delay:{s.delay:.2f}s"></div>'
        for s in stars
    ]
    return "\n  ".join(dots)


def _render_forecast(dashboard: MoonDashboard) -> str:
    cards: list[str] = []
    for i, day in enumerate(dashboard.forecast):
        snap = day.snapshot
        cards.append(
            '<div class="day-card">'
            f'<div class="day-date">{html.escape(labels.card_date(day.date))}</div>'
            f'<div class="day-moon">{render_moon_svg(day.shape, 56, f"day-clip-{i}")}</div>'
            f'<div class="day-phase">{html.escape(snap.phase_name)}</div>'
            '<div class="day-illumination">'
            f"{html.escape(labels.card_illumination_label(snap.illumination))}</div>"
            "</div>"
        )
    return "\n    ".join(cards)


def render_dashboard_html(
    dashboard: MoonDashboard,
    stars: tuple[StarParticle, ...] = (),
    show_forecast: bool = False,
) -> str:
    """Return a self-contained HTML page with the moon dashboard.

    Args:
        dashboard: Fully computed lunar state.
        stars: Background particles from generate_starfield.
        show_forecast: Include the forecast strip below the main panel.

    Returns:
        HTML string suitable for st.components.v1.html().
    """
    snap = dashboard.snapshot
    info_rows = (
        ("Moon Age", labels.age_label(snap.age_days)),
        ("Next Full Moon", labels.next_phase_label(dashboard.next_full)),
        ("Next New Moon", labels.next_phase_label(dashboard.next_new)),
        ("Zodiac Sign", dashboard.zodiac),
    )
    info_html = "\n      ".join(
        f'<div class="info-item"><div class="info-label">{label}</div>'
        f'<div class="info-value">{html.escape(value)}</div></div>'
        for label, value in info_rows
    )
    forecast_html = (
        f'<div id="sevenDays" class="seven-days">\n    {_render_forecast(dashboard)}\n  </div>'
        if show_forecast
        else ""
    )

    return f"""<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<style>
* {{ margin: 0; padding: 0; box-sizing: border-box; }}
html, body {{
    width: 100%;
    min-height: 100%;
    background: {_BG};
    color: #e8d5a3;
    font-family: 'Apple SD Gothic Neo', 'Helvetica Neue', sans-serif;
}}
#starfield {{
    position: fixed;
    inset: 0;
    pointer-events: none;
    z-index: 0;
}}
.star {{
    position: absolute;
    background: {_STAR_COLOR};
    border-radius: 50%;
    animation: twinkle 3s ease-in-out infinite;
}}
@keyframes twinkle {{
    0%, 100% {{ opacity: 0.25; }}
    50%      {{ opacity: 1; }}
}}
.panel {{
    position: relative;
    z-index: 1;
    max-width: 720px;
    margin: 0 auto;
    padding: 2rem 1rem;
    text-align: center;
}}
.current-date {{ color: #aaaaaa; font-size: 0.95rem; margin-bottom: 1.2rem; }}
.moon {{ filter: drop-shadow(0 0 18px rgba(245,240,214,0.25)); }}
.phase-name {{ font-size: 1.6rem; margin-top: 1rem; }}
.illumination {{ color: {_ACCENT}; margin-top: 0.3rem; }}
.info-grid {{
    display: grid;
    grid-template-columns: repeat(auto-fit, minmax(140px, 1fr));
    gap: 0.8rem;
    margin-top: 1.6rem;
}}
.info-item {{
    border: 1px solid rgba(201,169,110,0.25);
    border-radius: 8px;
    padding: 0.6rem;
}}
.info-label {{ color: #999999; font-size: 0.8rem; }}
.info-value {{ font-size: 1.05rem; margin-top: 0.2rem; }}
.seven-days {{
    display: flex;
    gap: 0.6rem;
    overflow-x: auto;
    margin-top: 1.6rem;
    justify-content: center;
    flex-wrap: wrap;
}}
.day-card {{
    border: 1px solid rgba(201,169,110,0.2);
    border-radius: 8px;
    padding: 0.6rem;
    width: 88px;
    font-size: 0.75rem;
}}
.day-date {{ color: #aaaaaa; margin-bottom: 0.4rem; }}
.day-phase {{ margin-top: 0.4rem; }}
.day-illumination {{ color: {_ACCENT}; }}
</style>
</head>
<body>
<div id="starfield">
  {_render_starfield(stars)}
</div>
<div class="panel">
  <div id="currentDate" class="current-date">{html.escape(labels.long_date(dashboard.now))}</div>
  {render_moon_svg(dashboard.shape, 180, "current-moon-clip")}
  <div id="currentPhaseName" class="phase-name">{html.escape(snap.phase_name)}</div>
  <div id="currentIllumination" class="illumination">{html.escape(labels.illumination_label(snap.illumination))}</div>
  <div class="info-grid">
      {info_html}
  </div>
  {forecast_html}
</div>
</body>
</html>"""
