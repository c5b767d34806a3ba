"""
Three-tier fitness for firing plans.

Scores are strictly ordered by outcome class, whatever the wall:

    SHORT  in [0, short_weight)          grows with distance travelled
    HIT    == hit_reward                 flat, however the wall was reached
    CLEAR  in (clear_base, clear_base + clear_bonus]
                                         shrinks as the landing point moves
                                         further past the wall

The tier bounds are validated so that short_weight <= hit_reward < clear_base.
"""

from __future__ import annotations

from enum import Enum
import math

from pydantic import BaseModel, ConfigDict, Field, model_validator

from cannonevo.evolution.individual import Individual
from cannonevo.physics.models import Flight, FlightOutcome, Wall
from cannonevo.physics.simulator import GRAVITY, analyze_flight


class OvershootFalloff(str, Enum):
    """Shape of the clear-tier reward as overshoot grows."""

    RECIPROCAL = "reciprocal"
    EXPONENTIAL = "exponential"


class FitnessConfig(BaseModel):
    short_weight: float = Field(default=1.0, gt=0)
    hit_reward: float = Field(default=2.0, gt=0)
    clear_base: float = Field(default=3.0, gt=0)
    clear_bonus: float = Field(default=10.0, gt=0)
    falloff: OvershootFalloff = OvershootFalloff.RECIPROCAL
    falloff_scale: float = Field(
        default=1.0, gt=0, description="Overshoot (m) over which the bonus decays"
    )

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_tiers(self) -> FitnessConfig:
        if self.short_weight > self.hit_reward:
            raise ValueError(
                f"short_weight ({self.short_weight}) must not exceed hit_reward ({self.hit_reward})"
            )
        if self.hit_reward >= self.clear_base:
            raise ValueError(
                f"hit_reward ({self.hit_reward}) must be below clear_base ({self.clear_base})"
            )
        return self


class Evaluation(BaseModel):
    """An individual together with its flight and fitness for one generation."""

    individual: Individual
    flight: Flight
    fitness: float

    model_config = ConfigDict(frozen=True)


class FitnessFunction:
    """Turns a firing plan into a scalar score against a fixed wall."""

    def __init__(
        self,
        wall: Wall,
        config: FitnessConfig | None = None,
        gravity: float = GRAVITY,
    ):
        self.wall = wall
        self.config = config or FitnessConfig()
        self.gravity = gravity

    def _falloff(self, overshoot: float) -> float:
        o = max(overshoot, 0.0) / self.config.falloff_scale
        if self.config.falloff is OvershootFalloff.EXPONENTIAL:
            return math.exp(-o)
        return 1.0 / (1.0 + o)

    def score(self, flight: Flight) -> float:
        cfg = self.config
        if flight.outcome is FlightOutcome.SHORT:
            return cfg.short_weight * flight.distance / flight.wall.distance
        if flight.outcome is FlightOutcome.HIT:
            return cfg.hit_reward
        return cfg.clear_base + cfg.clear_bonus * self._falloff(flight.overshoot)

    def evaluate(self, individual: Individual) -> Evaluation:
        flight = analyze_flight(
            individual.velocity, individual.angle, self.wall, self.gravity
        )
        return Evaluation(individual=individual, flight=flight, fitness=self.score(flight))

    def __call__(self, individual: Individual) -> float:
        return self.evaluate(individual).fitness


def fitness(
    individual: Individual,
    wall: Wall,
    config: FitnessConfig | None = None,
    gravity: float = GRAVITY,
) -> float:
    """Score ``individual`` against ``wall``; higher is better."""
    return FitnessFunction(wall, config, gravity)(individual)
