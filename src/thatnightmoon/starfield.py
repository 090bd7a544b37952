"""Decorative background starfield."""

import random

from thatnightmoon.models import StarParticle


def generate_starfield(count: int = 100, seed: int | None = None) -> tuple[StarParticle, ...]:
    """Scatter `count` star particles uniformly over the viewport.

    Args:
        count: Number of particles.
        seed: PRNG seed. The same seed always yields the same field; None
            draws a fresh field each call.

    Returns:
        Tuple of StarParticle with left/top in [0, 100), size in [0, 2) px and
        delay in [0, 3) s.
    """
    if count < 0:
        raise ValueError(f"Star count must be >= 0, got {count}")

    rng = random.Random(seed)
    return tuple(
        StarParticle(
            left=rng.random() * 100,
            top=rng.random() * 100,
            size=rng.random() * 2,
            delay=rng.random() * 3,
        )
        for _ in range(count)
    )
