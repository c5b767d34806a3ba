from __future__ import annotations

import random
from typing import Iterator, Sequence

import numpy as np

from cannonevo.evolution.fitness import Evaluation, FitnessFunction
from cannonevo.evolution.individual import GeneBounds, Individual


class Population:
    """Fixed-size generation of individuals."""

    def __init__(self, individuals: Sequence[Individual]):
        if not individuals:
            raise ValueError("Population cannot be empty")
        self._individuals: tuple[Individual, ...] = tuple(individuals)

    @classmethod
    def random(cls, size: int, bounds: GeneBounds, rng: random.Random) -> Population:
        return cls([bounds.sample(rng) for _ in range(size)])

    @property
    def individuals(self) -> tuple[Individual, ...]:
        return self._individuals

    def __len__(self) -> int:
        return len(self._individuals)

    def __iter__(self) -> Iterator[Individual]:
        return iter(self._individuals)

    def evaluate(self, fitness: FitnessFunction) -> EvaluatedPopulation:
        return EvaluatedPopulation([fitness.evaluate(ind) for ind in self._individuals])


class EvaluatedPopulation:
    """A generation after evaluation, ranked by descending fitness.

    Ties keep their original order.
    """

    def __init__(self, evaluations: Sequence[Evaluation]):
        if not evaluations:
            raise ValueError("EvaluatedPopulation cannot be empty")
        self._ranked: tuple[Evaluation, ...] = tuple(
            sorted(evaluations, key=lambda e: e.fitness, reverse=True)
        )

    @property
    def ranked(self) -> tuple[Evaluation, ...]:
        return self._ranked

    @property
    def best(self) -> Evaluation:
        return self._ranked[0]

    @property
    def individuals(self) -> list[Individual]:
        return [e.individual for e in self._ranked]

    @property
    def fitness_values(self) -> list[float]:
        return [e.fitness for e in self._ranked]

    @property
    def mean_fitness(self) -> float:
        return float(np.mean(self.fitness_values))

    @property
    def std_fitness(self) -> float:
        return float(np.std(self.fitness_values))

    def __len__(self) -> int:
        return len(self._ranked)

    def __iter__(self) -> Iterator[Evaluation]:
        return iter(self._ranked)
