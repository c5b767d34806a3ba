from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
import random

from cannonevo.evolution.individual import Individual


class CrossoverPolicy(str, Enum):
    """How a child's genes are derived from its two parents."""

    UNIFORM = "uniform"  # each gene copied from one parent, 50/50
    BLEND = "blend"  # each gene interpolated between the parents


class CrossoverOperator(ABC):
    def __init__(self, rng: random.Random):
        self.rng = rng

    @abstractmethod
    def crossover(
        self, parent_a: Individual, parent_b: Individual
    ) -> tuple[float, float]:
        """Return the child's (velocity, angle)."""

    def __call__(
        self, parent_a: Individual, parent_b: Individual
    ) -> tuple[float, float]:
        return self.crossover(parent_a, parent_b)


class UniformCrossover(CrossoverOperator):
    def crossover(
        self, parent_a: Individual, parent_b: Individual
    ) -> tuple[float, float]:
        velocity = parent_a.velocity if self.rng.random() < 0.5 else parent_b.velocity
        angle = parent_a.angle if self.rng.random() < 0.5 else parent_b.angle
        return velocity, angle


class BlendCrossover(CrossoverOperator):
    """Per-gene convex combination ``w * a + (1 - w) * b`` with ``w ~ U(0, 1)``.

    Children never leave the box spanned by their parents, so the population
    contracts unless mutation widens it again.
    """

    def crossover(
        self, parent_a: Individual, parent_b: Individual
    ) -> tuple[float, float]:
        w_v = self.rng.random()
        w_a = self.rng.random()
        velocity = w_v * parent_a.velocity + (1.0 - w_v) * parent_b.velocity
        angle = w_a * parent_a.angle + (1.0 - w_a) * parent_b.angle
        return velocity, angle


def build_crossover(policy: CrossoverPolicy, rng: random.Random) -> CrossoverOperator:
    if policy is CrossoverPolicy.UNIFORM:
        return UniformCrossover(rng)
    if policy is CrossoverPolicy.BLEND:
        return BlendCrossover(rng)
    raise ValueError(f"Unknown crossover policy: {policy}")
