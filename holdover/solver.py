"""
Ballistic Solver
================
Composes the drag tables, density correction, integrator, unit
conversion and wind model into one firing solution:

1. Angle of fire shortens the horizontal range: R = d · cos|θ|
2. Air-density ratio from the environment (once)
3. Integrate to R
4. Integrate to the zero distance; the drop there fixes the sight angle
5. Subtract the sight line from the drop at R
6. Aggregate wind readings into drift, weighted against R
7. Express drop and drift in inches, mil and MOA

Every call is a pure function of its arguments.
"""

import math
from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from .atmosphere import Environment, STANDARD_ENVIRONMENT, air_density_ratio
from .integrator import integrate
from .profiles import RifleProfile
from .units import MIL, MOA, INCHES_PER_YARD, inches_to_angle
from .wind import WindVector, wind_drift_inches


# Range card distances (yd)
DEFAULT_DOPE_RANGES = np.arange(200, 1501, 100)


@dataclass(frozen=True)
class BallisticSolution:
    """Firing solution at one distance."""
    distance_yards: float
    drop_inches: float
    drop_mils: float
    drop_moa: float
    time_of_flight_s: float
    wind_drift_inches: float
    wind_drift_mils: float
    wind_drift_moa: float
    velocity_fps: float
    energy_ftlbs: float

    @property
    def hold_mils(self) -> float:
        """Elevation hold (mil), positive = hold/dial up."""
        return -self.drop_mils

    @property
    def hold_moa(self) -> float:
        return -self.drop_moa

    def summary(self) -> str:
        """Human-readable summary string."""
        lines = [
            f"╔══════════════════════════════════════════════════════╗",
            f"║  FIRING SOLUTION — {self.distance_yards:>7.0f} yd{'':<25s} ║",
            f"╠══════════════════════════════════════════════════════╣",
            f"║  Drop         : {self.drop_inches:>9.1f} in  {self.drop_mils:>6.2f} mil  {self.drop_moa:>6.2f} MOA ║",
            f"║  Wind drift   : {self.wind_drift_inches:>9.1f} in  {self.wind_drift_mils:>6.2f} mil  {self.wind_drift_moa:>6.2f} MOA ║",
            f"╠══════════════════════════════════════════════════════╣",
            f"║  Flight time  : {self.time_of_flight_s:>10.3f} s{'':<25s} ║",
            f"║  Velocity     : {self.velocity_fps:>10.0f} ft/s{'':<22s} ║",
            f"║  Energy       : {self.energy_ftlbs:>10.0f} ft·lbs{'':<20s} ║",
            f"╚══════════════════════════════════════════════════════╝",
        ]
        return '\n'.join(lines)


def true_ballistic_range(distance_yards: float, angle_degrees: float) -> float:
    """Horizontal component of a line-of-sight distance (uphill or downhill)."""
    return distance_yards * math.cos(math.radians(abs(angle_degrees)))


def solve(rifle: RifleProfile, distance_yards: float, angle_degrees: float = 0.0,
          winds: Sequence[WindVector] = (),
          environment: Environment = STANDARD_ENVIRONMENT) -> BallisticSolution:
    """
    Firing solution for ``rifle`` at ``distance_yards`` line of sight.

    Parameters
    ----------
    rifle : RifleProfile
    distance_yards : float
        Line-of-sight distance to the target.
    angle_degrees : float
        Angle of fire, positive uphill, negative downhill.
    winds : sequence of WindVector
        Readings along the path; may be empty.
    environment : Environment
    """
    true_range = true_ballistic_range(distance_yards, angle_degrees)
    density_ratio = air_density_ratio(environment)

    trajectory = integrate(
        rifle.muzzle_velocity_fps,
        rifle.ballistic_coefficient,
        rifle.drag_model,
        rifle.bullet_mass_grains,
        true_range,
        density_ratio,
    )

    zero_trajectory = integrate(
        rifle.muzzle_velocity_fps,
        rifle.ballistic_coefficient,
        rifle.drag_model,
        rifle.bullet_mass_grains,
        rifle.zero_distance_yards,
        density_ratio,
    )

    # Sight line passes through the point of impact at the zero distance
    sight_angle = math.atan2(zero_trajectory.drop_inches,
                             rifle.zero_distance_yards * INCHES_PER_YARD)
    drop = trajectory.drop_inches - math.tan(sight_angle) * true_range * INCHES_PER_YARD

    drift = wind_drift_inches(winds, true_range, trajectory.time_of_flight_s)

    return BallisticSolution(
        distance_yards=distance_yards,
        drop_inches=drop,
        drop_mils=inches_to_angle(drop, MIL, distance_yards),
        drop_moa=inches_to_angle(drop, MOA, distance_yards),
        time_of_flight_s=trajectory.time_of_flight_s,
        wind_drift_inches=drift,
        wind_drift_mils=inches_to_angle(drift, MIL, distance_yards),
        wind_drift_moa=inches_to_angle(drift, MOA, distance_yards),
        velocity_fps=trajectory.velocity_fps,
        energy_ftlbs=trajectory.energy_ftlbs,
    )


def dope_table(rifle: RifleProfile, distances=DEFAULT_DOPE_RANGES,
               angle_degrees: float = 0.0, winds: Sequence[WindVector] = (),
               environment: Environment = STANDARD_ENVIRONMENT) -> List[BallisticSolution]:
    """Solutions at each distance, in the order given (a range card)."""
    return [solve(rifle, float(d), angle_degrees, winds, environment)
            for d in distances]
