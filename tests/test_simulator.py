import math

import numpy as np
import pytest

from cannonevo.exceptions import DegenerateTrajectoryError
from cannonevo.physics import (
    FlightOutcome,
    Wall,
    analyze_flight,
    height_at,
    max_height_at,
    simulate,
    trajectory_points,
    unobstructed_range,
)

VELOCITIES = [0.5, 1.0, 5.0, 12.3, 20.0, 30.0, 80.0]
ANGLES = [0.5, 10.0, 30.0, 45.0, 60.0, 80.0, 89.5]
WALLS = [
    Wall(distance=10.0, height=25.0),
    Wall(distance=10.0, height=5.0),
    Wall(distance=3.0, height=0.0),
    Wall(distance=40.0, height=1.0),
]


def test_scenario_steep_wall_is_hit():
    wall = Wall(distance=10.0, height=25.0)
    flight = analyze_flight(20.0, 45.0, wall, gravity=9.81)

    assert flight.range == pytest.approx(400.0 / 9.81)
    assert flight.height_at_wall == pytest.approx(10.0 - 9.81 * 100.0 / 400.0)
    assert flight.height_at_wall < wall.height
    assert flight.outcome is FlightOutcome.HIT
    assert flight.distance == wall.distance
    assert simulate(20.0, 45.0, wall) == wall.distance


def test_short_flight_reports_range():
    wall = Wall(distance=10.0, height=1.0)
    flight = analyze_flight(5.0, 45.0, wall)

    assert flight.outcome is FlightOutcome.SHORT
    assert flight.distance == pytest.approx(25.0 / 9.81)
    assert flight.overshoot == 0.0


def test_clearing_flight_reports_range_and_overshoot():
    wall = Wall(distance=10.0, height=5.0)
    flight = analyze_flight(20.0, 45.0, wall)

    assert flight.outcome is FlightOutcome.CLEAR
    assert flight.cleared
    assert flight.distance == pytest.approx(flight.range)
    assert flight.overshoot == pytest.approx(flight.range - 10.0)


@pytest.mark.parametrize("wall", WALLS)
def test_distance_is_finite_non_negative_and_within_range(wall):
    for v in VELOCITIES:
        for a in ANGLES:
            d = simulate(v, a, wall)
            assert math.isfinite(d)
            assert d >= 0.0
            assert d <= unobstructed_range(v, a) + 1e-12


def test_zero_height_wall_is_never_hit():
    for distance in (0.1, 1.0, 10.0, 50.0):
        wall = Wall(distance=distance, height=0.0)
        for v in VELOCITIES:
            for a in ANGLES:
                flight = analyze_flight(v, a, wall)
                assert flight.outcome is not FlightOutcome.HIT
                if flight.range >= distance:
                    assert flight.outcome is FlightOutcome.CLEAR


def test_zero_height_wall_at_exact_range_clears():
    r = unobstructed_range(20.0, 30.0)
    flight = analyze_flight(20.0, 30.0, Wall(distance=r, height=0.0))
    assert flight.outcome is FlightOutcome.CLEAR


@pytest.mark.parametrize("angle", ANGLES)
def test_range_is_monotone_in_velocity(angle):
    velocities = np.linspace(0.1, 100.0, 200)
    ranges = [unobstructed_range(float(v), angle) for v in velocities]
    assert all(b >= a for a, b in zip(ranges, ranges[1:]))


@pytest.mark.parametrize("v,a", [(10.0, 30.0), (25.0, 60.0), (3.0, 85.0)])
def test_range_matches_closed_form(v, a):
    expected = v * v * math.sin(2 * math.radians(a)) / 9.81
    assert unobstructed_range(v, a) == pytest.approx(expected)


def test_height_is_zero_at_launch_and_landing():
    r = unobstructed_range(15.0, 40.0)
    assert height_at(0.0, 15.0, 40.0) == 0.0
    assert height_at(r, 15.0, 40.0) == pytest.approx(0.0, abs=1e-9)
    assert height_at(r / 2, 15.0, 40.0) > 0.0


@pytest.mark.parametrize(
    "velocity,angle",
    [
        (10.0, 0.0),
        (10.0, 90.0),
        (10.0, -5.0),
        (10.0, 95.0),
        (0.0, 45.0),
        (-3.0, 45.0),
        (float("nan"), 45.0),
        (10.0, float("inf")),
    ],
)
def test_degenerate_plans_are_rejected(velocity, angle):
    with pytest.raises(DegenerateTrajectoryError):
        simulate(velocity, angle, Wall(distance=10.0, height=1.0))


@pytest.mark.parametrize(
    "distance,velocity,angle_min,angle_max",
    [(10.0, 30.0, 1.0, 89.0), (10.0, 12.0, 1.0, 30.0), (50.0, 20.0, 50.0, 89.0)],
)
def test_max_height_at_matches_brute_force(distance, velocity, angle_min, angle_max):
    angles = np.linspace(angle_min, angle_max, 4001)
    brute = max(height_at(distance, velocity, float(a)) for a in angles)
    best = max_height_at(distance, velocity, angle_min, angle_max)
    assert best >= brute - 1e-9
    assert best == pytest.approx(brute, rel=1e-4, abs=1e-6)


def test_trajectory_points_stop_at_wall_on_hit():
    wall = Wall(distance=10.0, height=25.0)
    x, y = trajectory_points(20.0, 45.0, wall, samples=50)

    assert len(x) == len(y) == 50
    assert x[0] == 0.0 and y[0] == 0.0
    assert x[-1] == pytest.approx(10.0)
    assert y[-1] == pytest.approx(analyze_flight(20.0, 45.0, wall).height_at_wall)


def test_trajectory_points_land_on_ground_when_clearing():
    wall = Wall(distance=10.0, height=5.0)
    x, y = trajectory_points(20.0, 45.0, wall)

    assert x[-1] == pytest.approx(unobstructed_range(20.0, 45.0))
    assert y[-1] == 0.0
    assert np.all(y >= 0.0)


def test_trajectory_points_require_two_samples():
    with pytest.raises(ValueError):
        trajectory_points(20.0, 45.0, Wall(distance=10.0, height=5.0), samples=1)
