from __future__ import annotations

from pydantic import BaseModel, Field


class EngineMetrics(BaseModel):
    """Counters accumulated over one run."""

    total_generations: int = Field(
        default=0, description="Total number of generations evaluated"
    )
    evaluations: int = Field(default=0, description="Total fitness evaluations")
    offspring_bred: int = Field(
        default=0, description="Children produced by crossover and mutation"
    )
    genes_mutated: int = Field(default=0, description="Genes perturbed by mutation")
    elites_carried: int = Field(
        default=0, description="Individuals carried over unchanged"
    )
    best_improvements: int = Field(
        default=0, description="Generations that raised the best-so-far fitness"
    )

    def record_evaluation(self, evaluated: int) -> None:
        self.total_generations += 1
        self.evaluations += evaluated

    def record_breeding(self, offspring: int, elites: int, genes_mutated: int) -> None:
        self.offspring_bred += offspring
        self.elites_carried += elites
        self.genes_mutated += genes_mutated

    def record_improvement(self) -> None:
        self.best_improvements += 1
