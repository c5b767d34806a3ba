"""
Closed-form projectile kinematics.

A projectile is launched from ground level with speed ``velocity`` (m/s) at
``angle`` degrees above the horizontal, under constant gravity and without
drag. The wall stands on the ground at ``wall.distance`` and is ``wall.height``
tall. All functions here are pure.
"""

from __future__ import annotations

import math

import numpy as np

from cannonevo.exceptions import DegenerateTrajectoryError
from cannonevo.physics.models import Flight, FlightOutcome, Wall

__all__ = [
    "GRAVITY",
    "analyze_flight",
    "height_at",
    "max_height_at",
    "simulate",
    "trajectory_points",
    "unobstructed_range",
]

GRAVITY = 9.81


def _check_plan(velocity: float, angle: float, gravity: float) -> None:
    if not (math.isfinite(velocity) and math.isfinite(angle)):
        raise DegenerateTrajectoryError(
            f"Non-finite firing plan: velocity={velocity}, angle={angle}"
        )
    if velocity <= 0:
        raise DegenerateTrajectoryError(f"Velocity must be positive, got {velocity}")
    if not 0.0 < angle < 90.0:
        raise DegenerateTrajectoryError(
            f"Angle must lie strictly between 0 and 90 degrees, got {angle}"
        )
    if gravity <= 0:
        raise DegenerateTrajectoryError(f"Gravity must be positive, got {gravity}")


def unobstructed_range(velocity: float, angle: float, gravity: float = GRAVITY) -> float:
    """Horizontal distance at which the projectile returns to ground level."""
    _check_plan(velocity, angle, gravity)
    theta = math.radians(angle)
    vx = velocity * math.cos(theta)
    vy = velocity * math.sin(theta)
    flight_time = 2.0 * vy / gravity
    return vx * flight_time


def height_at(x: float, velocity: float, angle: float, gravity: float = GRAVITY) -> float:
    """Height of the trajectory at horizontal position ``x``.

    Written as x tan(theta) (1 - x / R), which is never negative for x within
    the range R.
    """
    full_range = unobstructed_range(velocity, angle, gravity)
    return x * math.tan(math.radians(angle)) * (1.0 - x / full_range)


def analyze_flight(
    velocity: float, angle: float, wall: Wall, gravity: float = GRAVITY
) -> Flight:
    """Simulate a firing plan and classify how it ends against ``wall``."""
    rng_x = unobstructed_range(velocity, angle, gravity)
    y_wall = height_at(wall.distance, velocity, angle, gravity)

    if rng_x < wall.distance:
        outcome, distance = FlightOutcome.SHORT, rng_x
    elif y_wall < wall.height:
        outcome, distance = FlightOutcome.HIT, wall.distance
    else:
        outcome, distance = FlightOutcome.CLEAR, rng_x

    return Flight(
        outcome=outcome,
        distance=distance,
        range=rng_x,
        height_at_wall=y_wall,
        wall=wall,
    )


def simulate(
    velocity: float, angle: float, wall: Wall, gravity: float = GRAVITY
) -> float:
    """Distance travelled before landing or striking the wall."""
    return analyze_flight(velocity, angle, wall, gravity).distance


def max_height_at(
    distance: float,
    velocity: float,
    angle_min: float,
    angle_max: float,
    gravity: float = GRAVITY,
) -> float:
    """Greatest height reachable at ``distance`` with any angle in [angle_min, angle_max].

    The height at a fixed x is concave in tan(angle), so the unconstrained
    optimum tan = v^2 / (g x) clamped into the bounds is the constrained one.
    """
    lo = math.tan(math.radians(angle_min))
    hi = math.tan(math.radians(angle_max))
    best_tan = min(max(velocity * velocity / (gravity * distance), lo), hi)
    best_angle = math.degrees(math.atan(best_tan))
    return height_at(distance, velocity, best_angle, gravity)


def trajectory_points(
    velocity: float,
    angle: float,
    wall: Wall,
    samples: int = 200,
    gravity: float = GRAVITY,
) -> tuple[np.ndarray, np.ndarray]:
    """Sampled (x, y) path of the projectile, stopping at the wall on a hit."""
    if samples < 2:
        raise ValueError(f"samples must be at least 2, got {samples}")
    flight = analyze_flight(velocity, angle, wall, gravity)
    x = np.linspace(0.0, flight.distance, samples)
    y = x * math.tan(math.radians(angle)) * (1.0 - x / flight.range)
    if flight.outcome is not FlightOutcome.HIT:
        y[-1] = 0.0
    return x, np.clip(y, 0.0, None)
