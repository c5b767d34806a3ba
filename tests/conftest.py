import random

import pytest

from cannonevo.evolution.fitness import Evaluation
from cannonevo.evolution.individual import GeneBounds, Individual
from cannonevo.physics.models import Wall
from cannonevo.physics.simulator import analyze_flight


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def wall() -> Wall:
    return Wall(distance=10.0, height=5.0)


@pytest.fixture
def bounds() -> GeneBounds:
    return GeneBounds(velocity_min=1.0, velocity_max=30.0, angle_min=1.0, angle_max=89.0)


def make_evaluation(fitness: float, velocity: float = 10.0, angle: float = 45.0) -> Evaluation:
    """Evaluation with a real flight but an arbitrary fitness value."""
    individual = Individual(velocity=velocity, angle=angle)
    flight = analyze_flight(velocity, angle, Wall(distance=10.0, height=5.0))
    return Evaluation(individual=individual, flight=flight, fitness=fitness)
