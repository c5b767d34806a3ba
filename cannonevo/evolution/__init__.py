from cannonevo.evolution.fitness import (
    Evaluation,
    FitnessConfig,
    FitnessFunction,
    OvershootFalloff,
    fitness,
)
from cannonevo.evolution.individual import GeneBounds, Individual
from cannonevo.evolution.population import EvaluatedPopulation, Population

__all__ = [
    "EvaluatedPopulation",
    "Evaluation",
    "FitnessConfig",
    "FitnessFunction",
    "GeneBounds",
    "Individual",
    "OvershootFalloff",
    "Population",
    "fitness",
]
