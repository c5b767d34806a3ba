from cannonevo.physics.models import Flight, FlightOutcome, Wall
from cannonevo.physics.simulator import (
    GRAVITY,
    analyze_flight,
    height_at,
    max_height_at,
    simulate,
    trajectory_points,
    unobstructed_range,
)

__all__ = [
    "GRAVITY",
    "Flight",
    "FlightOutcome",
    "Wall",
    "analyze_flight",
    "height_at",
    "max_height_at",
    "simulate",
    "trajectory_points",
    "unobstructed_range",
]
