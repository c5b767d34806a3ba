from __future__ import annotations

import random
from typing import Any, Mapping, Sequence

from loguru import logger

from cannonevo.evolution.engine.config import EngineConfig, SelectionPolicy
from cannonevo.evolution.engine.metrics import EngineMetrics
from cannonevo.evolution.engine.models import (
    BestSoFar,
    GenerationSnapshot,
    RunResult,
    TerminationReason,
    update_best,
)
from cannonevo.evolution.engine.validation import validate_config
from cannonevo.evolution.fitness import FitnessFunction
from cannonevo.evolution.individual import Individual
from cannonevo.evolution.operators.crossover import build_crossover
from cannonevo.evolution.operators.mutation import BoundedMutation
from cannonevo.evolution.operators.selectors import (
    ParentSelector,
    RouletteWheelSelector,
    TournamentSelector,
)
from cannonevo.evolution.population import EvaluatedPopulation, Population
from cannonevo.exceptions import CannonEvoError, EvolutionError
from cannonevo.utils.trackers.base import GenerationTracker

__all__ = ["EvolutionEngine"]


class EvolutionEngine:
    """
    Generational GA loop:
    - evaluate the whole population, reduce it to a GenerationSnapshot
    - hand the snapshot to every tracker
    - stop on convergence or the generation cap
    - otherwise breed a full replacement population (optionally keeping the elite)

    All randomness comes from one injected ``random.Random``.
    """

    def __init__(
        self,
        config: EngineConfig | Mapping[str, Any] | None = None,
        trackers: Sequence[GenerationTracker] = (),
        rng: random.Random | None = None,
    ):
        self.config = validate_config(config)
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.trackers = list(trackers)

        self.fitness = FitnessFunction(
            self.config.wall, self.config.fitness, self.config.gravity
        )
        self.selector = self._build_selector()
        self.crossover = build_crossover(self.config.crossover_policy, self.rng)
        self.mutator = BoundedMutation(
            self.rng,
            self.config.bounds,
            velocity_step=self.config.velocity_step,
            angle_step=self.config.angle_step,
        )

        self.generation = 0
        self.population: Population | None = None
        self.metrics = EngineMetrics()

        logger.info(
            "[EvolutionEngine] Init | N={}, selection={}, crossover={}, elitism={}, seed={}",
            self.config.population_size,
            self.config.selection.value,
            self.config.crossover_policy.value,
            self.config.elitism,
            self.config.seed,
        )

    def _build_selector(self) -> ParentSelector:
        if self.config.selection is SelectionPolicy.TOURNAMENT:
            return TournamentSelector(self.rng, self.config.tournament_size)
        return RouletteWheelSelector(self.rng)

    def initialize(self) -> Population:
        """Start a fresh run; a configured seed restarts the random stream."""
        if self.config.seed is not None:
            self.rng.seed(self.config.seed)
        self.generation = 0
        self.metrics = EngineMetrics()
        self.population = Population.random(
            self.config.population_size, self.config.bounds, self.rng
        )
        logger.debug(
            "[EvolutionEngine] Initialized population of {}", len(self.population)
        )
        return self.population

    def evaluate(self) -> EvaluatedPopulation:
        if self.population is None:
            raise EvolutionError("Population not initialized; call initialize() first")
        evaluated = self.population.evaluate(self.fitness)
        self.metrics.record_evaluation(len(evaluated))
        return evaluated

    def breed_child(self, evaluated: EvaluatedPopulation) -> Individual:
        parent_a, parent_b = self.selector.select_pair(evaluated)
        velocity, angle = self.crossover(parent_a, parent_b)
        velocity, angle = self.mutator(velocity, angle, self.config.mutation_rate)
        return self.config.bounds.make(velocity, angle)

    def breed(self, evaluated: EvaluatedPopulation) -> Population:
        size = self.config.population_size
        mutated_before = self.mutator.genes_mutated

        next_gen: list[Individual] = []
        if self.config.elitism:
            next_gen.append(evaluated.best.individual)
        elites = len(next_gen)

        while len(next_gen) < size:
            next_gen.append(self.breed_child(evaluated))

        self.metrics.record_breeding(
            offspring=size - elites,
            elites=elites,
            genes_mutated=self.mutator.genes_mutated - mutated_before,
        )
        return Population(next_gen)

    def evolve_step(self) -> tuple[GenerationSnapshot, EvaluatedPopulation]:
        """Evaluate the current population and report it."""
        try:
            evaluated = self.evaluate()
            snapshot = GenerationSnapshot.from_population(self.generation, evaluated)
        except CannonEvoError:
            raise
        except Exception as exc:
            raise EvolutionError(
                f"Evaluation of generation {self.generation} failed: {exc}"
            ) from exc

        for tracker in self.trackers:
            tracker.on_generation(snapshot)
        return snapshot, evaluated

    def replace(self, evaluated: EvaluatedPopulation) -> None:
        try:
            self.population = self.breed(evaluated)
        except CannonEvoError:
            raise
        except Exception as exc:
            raise EvolutionError(
                f"Breeding after generation {self.generation} failed: {exc}"
            ) from exc
        self.generation += 1

    def has_converged(self, best: BestSoFar, trace: list[float]) -> bool:
        """Best clears the wall within tolerance and stopped improving over the window."""
        flight = best.flight
        if not flight.cleared or flight.overshoot > self.config.convergence_tolerance:
            return False
        window = self.config.convergence_window
        if len(trace) <= window:
            return False
        return trace[-1] - trace[-1 - window] <= self.config.min_improvement

    def run(self) -> RunResult:
        logger.info("[EvolutionEngine] Start")
        self.initialize()

        best: BestSoFar | None = None
        trace: list[float] = []
        history: list[GenerationSnapshot] = []

        while True:
            snapshot, evaluated = self.evolve_step()
            history.append(snapshot)

            updated = update_best(best, snapshot)
            if best is not None and updated is not best:
                self.metrics.record_improvement()
                logger.debug(
                    "[EvolutionEngine] New best at generation {}: fitness {:.4f} -> {:.4f}",
                    snapshot.generation,
                    best.fitness,
                    updated.fitness,
                )
            best = updated
            trace.append(best.fitness)

            if self.has_converged(best, trace):
                reason = TerminationReason.CONVERGED
                break
            if len(history) >= self.config.max_generations:
                reason = TerminationReason.MAX_GENERATIONS
                break

            self.replace(evaluated)

        logger.info(
            "[EvolutionEngine] Stop: {} after {} generation(s) | best {} found at generation {} "
            "(fitness={:.4f}, {} at {:.3f} m)",
            reason.value,
            len(history),
            best.individual,
            best.generation,
            best.fitness,
            best.flight.outcome.value,
            best.flight.distance,
        )
        return RunResult(
            best=best,
            generations=len(history),
            reason=reason,
            history=history,
            metrics=self.metrics.model_copy(),
        )
