import pytest

from thatnightmoon.starfield import generate_starfield


def test_default_field_has_hundred_stars():
    assert len(generate_starfield()) == 100


def test_particles_stay_within_bounds():
    for star in generate_starfield(500, seed=7):
        assert 0 <= star.left < 100
        assert 0 <= star.top < 100
        assert 0 <= star.size < 2
        assert 0 <= star.delay < 3


def test_same_seed_same_field():
    assert generate_starfield(20, seed=42) == generate_starfield(20, seed=42)
    assert generate_starfield(20, seed=42) != generate_starfield(20, seed=43)


def test_zero_stars():
    assert generate_starfield(0) == ()


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        generate_starfield(-1)
