from abc import ABC, abstractmethod
import random

from loguru import logger

from cannonevo.evolution.individual import Individual
from cannonevo.evolution.population import EvaluatedPopulation


class ParentSelector(ABC):
    """Abstract base class for choosing parents from an evaluated generation."""

    def __init__(self, rng: random.Random):
        self.rng = rng

    @abstractmethod
    def select_parent(self, population: EvaluatedPopulation) -> Individual:
        """Pick one parent. Selection is with replacement."""

    def select_pair(
        self, population: EvaluatedPopulation
    ) -> tuple[Individual, Individual]:
        """Two independent draws; the same individual may be picked twice."""
        return self.select_parent(population), self.select_parent(population)


class RouletteWheelSelector(ParentSelector):
    """Fitness-proportionate selection."""

    def select_parent(self, population: EvaluatedPopulation) -> Individual:
        fitnesses = population.fitness_values
        min_fitness = min(fitnesses)
        if min_fitness < 0:
            fitnesses = [f - min_fitness + 1e-6 for f in fitnesses]  # shift to positive space
            logger.debug(
                "[RouletteWheelSelector] shifted fitnesses by {:.3f}", -min_fitness
            )

        if sum(fitnesses) <= 0:
            logger.debug("[RouletteWheelSelector] zero total fitness, choosing uniformly")
            return self.rng.choice(population.individuals)

        return self.rng.choices(population.individuals, weights=fitnesses, k=1)[0]


class TournamentSelector(ParentSelector):
    """Best of ``tournament_size`` individuals drawn with replacement."""

    def __init__(self, rng: random.Random, tournament_size: int = 3):
        super().__init__(rng)
        if tournament_size < 1:
            raise ValueError(f"tournament_size must be at least 1, got {tournament_size}")
        self.tournament_size = tournament_size

    def select_parent(self, population: EvaluatedPopulation) -> Individual:
        contestants = self.rng.choices(population.ranked, k=self.tournament_size)
        return max(contestants, key=lambda e: e.fitness).individual
