from __future__ import annotations

import random

from cannonevo.evolution.individual import GeneBounds


class BoundedMutation:
    """Per-gene uniform perturbation followed by clamping into the gene bounds.

    Each gene mutates independently with probability ``mutation_rate`` by a
    delta drawn from ``U(-step, +step)``.
    """

    def __init__(
        self,
        rng: random.Random,
        bounds: GeneBounds,
        velocity_step: float = 1.0,
        angle_step: float = 2.0,
    ):
        if velocity_step <= 0 or angle_step <= 0:
            raise ValueError(
                f"Mutation steps must be positive, got velocity_step={velocity_step}, angle_step={angle_step}"
            )
        self.rng = rng
        self.bounds = bounds
        self.velocity_step = velocity_step
        self.angle_step = angle_step
        self.genes_mutated = 0

    def mutate(
        self, velocity: float, angle: float, mutation_rate: float
    ) -> tuple[float, float]:
        if self.rng.random() < mutation_rate:
            velocity += self.rng.uniform(-self.velocity_step, self.velocity_step)
            self.genes_mutated += 1
        if self.rng.random() < mutation_rate:
            angle += self.rng.uniform(-self.angle_step, self.angle_step)
            self.genes_mutated += 1
        return self.bounds.clamp(velocity, angle)

    def __call__(
        self, velocity: float, angle: float, mutation_rate: float
    ) -> tuple[float, float]:
        return self.mutate(velocity, angle, mutation_rate)
