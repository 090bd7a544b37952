"""Phase → disc shape mapping. Knows nothing about how the shape gets drawn."""

from thatnightmoon.models import MoonSnapshot, VisualShape


def to_visual(snapshot: MoonSnapshot) -> VisualShape:
    """Describe the lit part of the disc for a snapshot.

    Four quartiles, each with its own shape family:
      [0, 0.25)     crescent on the right, lit radius 0% → 50%
      [0.25, 0.5)   gibbous, dark inset on the left 50% → 0%
      [0.5, 0.75)   gibbous, dark inset on the right 0% → 50%
      [0.75, 1)     crescent on the left, lit radius 50% → 0%

    Adjacent quartiles meet at the same drawn outline, so the shape changes
    smoothly as the phase advances.

    Args:
        snapshot: Output of compute_moon_phase.

    Returns:
        VisualShape; kind "dark" when at most 1% is lit.
    """
    phase = snapshot.phase
    if snapshot.illumination <= 1:
        return VisualShape(kind="dark")

    if phase < 0.25:
        progress = phase / 0.25
        return VisualShape(kind="crescent-right", radius_x=progress * 50)
    if phase < 0.5:
        progress = (phase - 0.25) / 0.25
        return VisualShape(kind="gibbous-inset-left", inset=50 * (1 - progress))
    if phase < 0.75:
        progress = (phase - 0.5) / 0.25
        inset = 50 * progress
        if inset == 0:
            return VisualShape(kind="full")
        return VisualShape(kind="gibbous-inset-right", inset=inset)
    progress = (phase - 0.75) / 0.25
    return VisualShape(kind="crescent-left", radius_x=50 * (1 - progress))
