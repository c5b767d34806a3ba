from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from cannonevo.evolution.engine.metrics import EngineMetrics
from cannonevo.evolution.individual import Individual
from cannonevo.evolution.population import EvaluatedPopulation
from cannonevo.physics.models import Flight, FlightOutcome


class TerminationReason(str, Enum):
    CONVERGED = "converged"
    MAX_GENERATIONS = "max_generations"


class GenerationSnapshot(BaseModel):
    """Immutable summary of one evaluated generation."""

    generation: int = Field(ge=0)
    best: Individual
    best_fitness: float
    best_flight: Flight
    mean_fitness: float
    std_fitness: float
    population_size: int = Field(gt=0)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_population(
        cls, generation: int, evaluated: EvaluatedPopulation
    ) -> GenerationSnapshot:
        top = evaluated.best
        return cls(
            generation=generation,
            best=top.individual,
            best_fitness=top.fitness,
            best_flight=top.flight,
            mean_fitness=evaluated.mean_fitness,
            std_fitness=evaluated.std_fitness,
            population_size=len(evaluated),
        )

    @property
    def best_distance(self) -> float:
        return self.best_flight.distance

    @property
    def best_outcome(self) -> FlightOutcome:
        return self.best_flight.outcome

    @property
    def best_overshoot(self) -> float:
        return self.best_flight.overshoot


class BestSoFar(BaseModel):
    """Best individual seen up to some generation, and where it was found."""

    individual: Individual
    flight: Flight
    fitness: float
    generation: int = Field(ge=0)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_snapshot(cls, snapshot: GenerationSnapshot) -> BestSoFar:
        return cls(
            individual=snapshot.best,
            flight=snapshot.best_flight,
            fitness=snapshot.best_fitness,
            generation=snapshot.generation,
        )


def update_best(previous: BestSoFar | None, snapshot: GenerationSnapshot) -> BestSoFar:
    """Fold one snapshot into the running best; earlier finds win ties."""
    if previous is None or snapshot.best_fitness > previous.fitness:
        return BestSoFar.from_snapshot(snapshot)
    return previous


class RunResult(BaseModel):
    best: BestSoFar
    generations: int = Field(gt=0, description="Number of generations evaluated")
    reason: TerminationReason
    history: list[GenerationSnapshot]
    metrics: EngineMetrics

    model_config = ConfigDict(frozen=True)

    @property
    def best_individual(self) -> Individual:
        return self.best.individual

    @property
    def found_at_generation(self) -> int:
        return self.best.generation

    @property
    def converged(self) -> bool:
        return self.reason is TerminationReason.CONVERGED
