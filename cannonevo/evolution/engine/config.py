from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from cannonevo.evolution.fitness import FitnessConfig
from cannonevo.evolution.individual import GeneBounds
from cannonevo.evolution.operators.crossover import CrossoverPolicy
from cannonevo.physics.models import Wall
from cannonevo.physics.simulator import GRAVITY


class SelectionPolicy(str, Enum):
    ROULETTE = "roulette"
    TOURNAMENT = "tournament"


class EngineConfig(BaseModel):
    """Configuration options controlling EvolutionEngine behaviour."""

    population_size: int = Field(default=50, gt=0)
    mutation_rate: float = Field(
        default=0.05, gt=0, le=1, description="Per-gene mutation probability"
    )
    crossover_policy: CrossoverPolicy = CrossoverPolicy.BLEND
    selection: SelectionPolicy = SelectionPolicy.ROULETTE
    tournament_size: int = Field(default=3, gt=0)
    elitism: bool = Field(
        default=True, description="Carry the best individual over unchanged"
    )
    max_generations: int = Field(
        default=100, gt=0, description="Maximum number of generations to evaluate"
    )
    convergence_tolerance: float = Field(
        default=1.0,
        gt=0,
        description="Largest overshoot past the wall (m) that counts as converged",
    )
    convergence_window: int = Field(
        default=10,
        gt=0,
        description="Generations over which best fitness must stop improving",
    )
    min_improvement: float = Field(
        default=5e-2,
        ge=0,
        description="Best-fitness gain over the window still counted as improving",
    )
    wall: Wall = Field(default_factory=lambda: Wall(distance=10.0, height=2.0))
    bounds: GeneBounds = Field(default_factory=GeneBounds)
    gravity: float = Field(default=GRAVITY, gt=0)
    velocity_step: float = Field(
        default=1.0, gt=0, description="Largest velocity mutation (m/s)"
    )
    angle_step: float = Field(default=2.0, gt=0, description="Largest angle mutation (deg)")
    fitness: FitnessConfig = Field(default_factory=FitnessConfig)
    seed: int | None = Field(
        default=None, description="Random seed (None = nondeterministic)"
    )

    model_config = ConfigDict(frozen=True, extra="forbid")
