from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field


class Wall(BaseModel):
    """Obstacle standing on the ground at a fixed distance from the launch point."""

    distance: float = Field(gt=0, description="Horizontal distance from launch (m)")
    height: float = Field(ge=0, description="Wall height (m)")

    model_config = ConfigDict(frozen=True)


class FlightOutcome(str, Enum):
    """How a trajectory ends relative to the wall."""

    SHORT = "short"  # lands before reaching the wall
    HIT = "hit"  # strikes the wall face
    CLEAR = "clear"  # passes over the wall


class Flight(BaseModel):
    """Result of simulating one firing plan against a wall."""

    outcome: FlightOutcome
    distance: float = Field(
        ge=0, description="Distance actually travelled (wall distance on a hit)"
    )
    range: float = Field(ge=0, description="Unobstructed range back to ground level")
    height_at_wall: float = Field(
        description="Trajectory height at the wall's horizontal position"
    )
    wall: Wall

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def overshoot(self) -> float:
        """How far beyond the wall a clearing shot lands (0 otherwise)."""
        if self.outcome is not FlightOutcome.CLEAR:
            return 0.0
        return max(self.range - self.wall.distance, 0.0)

    @property
    def cleared(self) -> bool:
        return self.outcome is FlightOutcome.CLEAR
