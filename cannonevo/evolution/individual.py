from __future__ import annotations

import random

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Individual(BaseModel):
    """One firing plan: the unit of selection, crossover and mutation.

    Genes are immutable; operators build new individuals instead of editing
    existing ones.
    """

    velocity: float = Field(gt=0, description="Launch speed (m/s)")
    angle: float = Field(gt=0, lt=90, description="Launch angle above horizontal (deg)")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"Individual(v={self.velocity:.3f} m/s, angle={self.angle:.3f} deg)"


class GeneBounds(BaseModel):
    """Closed domain each gene is initialised and clamped into."""

    velocity_min: float = Field(default=1.0, gt=0)
    velocity_max: float = Field(default=30.0, gt=0)
    angle_min: float = Field(default=1.0, gt=0, lt=90)
    angle_max: float = Field(default=89.0, gt=0, lt=90)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_order(self) -> GeneBounds:
        if self.velocity_min >= self.velocity_max:
            raise ValueError(
                f"velocity_min ({self.velocity_min}) must be < velocity_max ({self.velocity_max})"
            )
        if self.angle_min >= self.angle_max:
            raise ValueError(
                f"angle_min ({self.angle_min}) must be < angle_max ({self.angle_max})"
            )
        return self

    def clamp(self, velocity: float, angle: float) -> tuple[float, float]:
        return (
            min(max(velocity, self.velocity_min), self.velocity_max),
            min(max(angle, self.angle_min), self.angle_max),
        )

    def sample(self, rng: random.Random) -> Individual:
        return Individual(
            velocity=rng.uniform(self.velocity_min, self.velocity_max),
            angle=rng.uniform(self.angle_min, self.angle_max),
        )

    def make(self, velocity: float, angle: float) -> Individual:
        """Build an individual with genes clamped into bounds."""
        v, a = self.clamp(velocity, angle)
        return Individual(velocity=v, angle=a)
