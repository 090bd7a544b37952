"""Plotly illumination curve for today plus the forecast window."""

import numpy as np
import plotly.graph_objects as go

from thatnightmoon.models import MoonDashboard
from thatnightmoon.renderers import labels

_BG = "#0d1b35"
_LINE_COLOR = "#c9a96e"
_MARKER_COLOR = "#f5f0d6"


def render_illumination_chart(dashboard: MoonDashboard) -> go.Figure:
    """Render illumination (%) per day as a Plotly line chart.

    The first point is `dashboard.now`, followed by each forecast day.
    Hovering a point shows the phase name.

    Args:
        dashboard: Fully computed lunar state.

    Returns:
        Plotly Figure object.
    """
    snapshots = [dashboard.snapshot] + [day.snapshot for day in dashboard.forecast]
    x_vals = [labels.card_date(s.when) for s in snapshots]
    illum = np.array([s.illumination for s in snapshots])

    # Brighter moon → bigger marker
    sizes = np.clip(6 + illum / 10, 6, 16)

    trace = go.Scatter(
        x=x_vals,
        y=illum.tolist(),
        mode="lines+markers",
        line=dict(color=_LINE_COLOR, width=2),
        marker=dict(size=sizes.tolist(), color=_MARKER_COLOR, line=dict(width=0)),
        text=[s.phase_name for s in snapshots],
        hovertemplate="%{x}<br>%{text}<br>%{y}% illuminated<extra></extra>",
        name="illumination",
    )

    fig = go.Figure(data=[trace])
    fig.update_layout(
        paper_bgcolor=_BG,
        plot_bgcolor=_BG,
        showlegend=False,
        margin=dict(l=40, r=20, t=20, b=40),
        height=260,
        font=dict(color="#e8d5a3"),
        xaxis=dict(showgrid=False, fixedrange=True),
        yaxis=dict(
            range=[-5, 105],
            ticksuffix="%",
            gridcolor="rgba(201,169,110,0.15)",
            fixedrange=True,
        ),
    )
    return fig
