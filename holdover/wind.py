"""
Wind Drift
==========
Reduces a set of wind readings taken along the bullet path to a single
lateral drift at the target.

Clock convention (looking downrange):
  12 = headwind, 3 = full value from the right, 6 = tailwind,
  9 = full value from the left

Each reading's crosswind is weighted by where it was taken, so wind near
the shooter counts more than wind near the target:

    w = 1 − (d / D) · 0.5

The weighted sum is divided by the number of readings, not by Σw.
Drift then scales with time of flight:

    drift (in) = avg_crosswind (mph) · tof (s) · 12 · 0.5
"""

import math
from dataclasses import dataclass
from typing import Sequence


NEAR_WEIGHT_FALLOFF = 0.5   # weight lost between muzzle and target
DRIFT_FACTOR        = 0.5   # empirical lag factor
INCHES_PER_FOOT     = 12.0


@dataclass(frozen=True)
class WindVector:
    """A wind reading at one point along the bullet path."""
    distance_yards: float
    speed_mph: float
    direction_clock: int      # 1–12

    @property
    def crosswind_mph(self) -> float:
        """Full-value crosswind (mph), positive from the right."""
        return self.speed_mph * crosswind_component(self.direction_clock)


def crosswind_component(direction_clock: float) -> float:
    """Fraction of the wind acting across the bullet path (-1 … 1)."""
    return math.sin(math.radians((direction_clock - 12) * 30))


def position_weight(distance_yards: float, target_distance_yards: float) -> float:
    if target_distance_yards <= 0:
        return 1.0
    return 1 - (distance_yards / target_distance_yards) * NEAR_WEIGHT_FALLOFF


def weighted_crosswind(winds: Sequence[WindVector],
                       target_distance_yards: float) -> float:
    """Distance-weighted crosswind averaged over the reading count (mph)."""
    if not winds:
        return 0.0
    total = 0.0
    for wind in winds:
        total += wind.crosswind_mph * position_weight(wind.distance_yards,
                                                      target_distance_yards)
    return total / len(winds)


def wind_drift_inches(winds: Sequence[WindVector], target_distance_yards: float,
                      time_of_flight_s: float) -> float:
    """Lateral drift at the target (in), positive for wind from the right."""
    avg = weighted_crosswind(winds, target_distance_yards)
    return avg * time_of_flight_s * INCHES_PER_FOOT * DRIFT_FACTOR


def format_wind(wind: WindVector) -> str:
    return f"{wind.speed_mph:.0f} mph @ {wind.direction_clock} o'clock"
