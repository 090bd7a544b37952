"""Data model definitions — explicit boundaries between compute and render layers."""

from dataclasses import dataclass
from datetime import datetime
from typing import Literal

PhaseName = Literal[
    "New Moon",
    "Waxing Crescent",
    "First Quarter",
    "Waxing Gibbous",
    "Full Moon",
    "Waning Gibbous",
    "Last Quarter",
    "Waning Crescent",
]

ShapeKind = Literal[
    "dark",
    "full",
    "crescent-right",
    "crescent-left",
    "gibbous-inset-left",
    "gibbous-inset-right",
]


@dataclass(frozen=True)
class MoonSnapshot:
    """Lunar state at a single instant."""

    when: datetime  # Instant the snapshot describes (tz-aware)
    phase: float  # Position in the synodic cycle, [0, 1); 0=new, 0.5=full
    illumination: int  # Lit share of the disc in percent, 0..100
    phase_name: PhaseName
    age_days: float  # Days since the most recent new moon point


@dataclass(frozen=True)
class VisualShape:
    """How to draw the lit part of a moon disc. Renderer-agnostic."""

    kind: ShapeKind
    radius_x: float = 0.0  # Lit ellipse horizontal radius, % of disc width (crescents)
    inset: float = 0.0  # Dark band cut from one side, % of disc width (gibbous)

    @property
    def anchor(self) -> Literal["left", "right"] | None:
        """Side of the disc the lit ellipse or the dark inset is attached to."""
        if self.kind in ("crescent-right", "gibbous-inset-right"):
            return "right"
        if self.kind in ("crescent-left", "gibbous-inset-left"):
            return "left"
        return None


@dataclass(frozen=True)
class ForecastDay:
    """One card of the forecast strip."""

    date: datetime
    snapshot: MoonSnapshot
    shape: VisualShape


@dataclass(frozen=True)
class StarParticle:
    """A single decorative star in the background field."""

    left: float  # Horizontal position, % of viewport width
    top: float  # Vertical position, % of viewport height
    size: float  # Diameter in px
    delay: float  # Twinkle animation delay in seconds


@dataclass(frozen=True)
class MoonDashboard:
    """The sole input to renderers. Fully computed state."""

    now: datetime
    snapshot: MoonSnapshot
    shape: VisualShape
    next_full: datetime | None  # None when the bounded search found nothing
    next_new: datetime | None
    zodiac: str
    forecast: tuple[ForecastDay, ...]
