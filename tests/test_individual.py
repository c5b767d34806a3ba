import random

from pydantic import ValidationError
import pytest

from cannonevo.evolution.individual import GeneBounds, Individual


def test_individual_is_immutable():
    ind = Individual(velocity=10.0, angle=30.0)
    with pytest.raises(ValidationError):
        ind.velocity = 12.0
    assert (ind.velocity, ind.angle) == (10.0, 30.0)


@pytest.mark.parametrize(
    "velocity,angle", [(0.0, 45.0), (-1.0, 45.0), (10.0, 0.0), (10.0, 90.0), (10.0, 120.0)]
)
def test_individual_rejects_out_of_domain_genes(velocity, angle):
    with pytest.raises(ValidationError):
        Individual(velocity=velocity, angle=angle)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"velocity_min": 0.0},
        {"velocity_min": 20.0, "velocity_max": 10.0},
        {"angle_min": 50.0, "angle_max": 40.0},
        {"angle_max": 90.0},
        {"angle_min": 0.0},
    ],
)
def test_gene_bounds_validation(kwargs):
    with pytest.raises(ValidationError):
        GeneBounds(**kwargs)


def test_clamp(bounds):
    assert bounds.clamp(100.0, 95.0) == (bounds.velocity_max, bounds.angle_max)
    assert bounds.clamp(-5.0, -10.0) == (bounds.velocity_min, bounds.angle_min)
    assert bounds.clamp(12.0, 33.0) == (12.0, 33.0)


def test_make_clamps_into_valid_individual(bounds):
    ind = bounds.make(0.0, 90.0)
    assert ind == Individual(velocity=bounds.velocity_min, angle=bounds.angle_max)


def test_sample_stays_within_bounds(bounds):
    rng = random.Random(7)
    for _ in range(500):
        ind = bounds.sample(rng)
        assert bounds.velocity_min <= ind.velocity <= bounds.velocity_max
        assert bounds.angle_min <= ind.angle <= bounds.angle_max


def test_sample_is_reproducible(bounds):
    rng_a, rng_b = random.Random(3), random.Random(3)
    a = [bounds.sample(rng_a) for _ in range(5)]
    b = [bounds.sample(rng_b) for _ in range(5)]
    assert a == b
