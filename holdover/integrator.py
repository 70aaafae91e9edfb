"""
Trajectory Integrator
=====================
Point-mass trajectory in the vertical plane, stepped with forward Euler
over a fixed downrange distance rather than a fixed time:

    dt      = Δx / vx                (Δx = 0.5 yd)
    v       = |(vx, vy)|
    a_drag  = (Cd / BC) · (ρ/ρ₀) · v² / 100000
    vx     -= a_drag · (vx / v) · dt
    vy     -= g · dt + a_drag · (vy / v) · dt     (drag term only once vy ≠ 0)

The line of departure is horizontal; sight-in and angle corrections
belong to the solver. Units are feet, seconds and pounds throughout,
with drop reported in inches.

Precondition: ballistic coefficient > 0. It is not checked here.
"""

import math
from dataclasses import dataclass

from .drag_model import get_drag_model


GRAVITY             = 32.174     # ft/s²
STEP_YARDS          = 0.5        # downrange step
STEP_FEET           = STEP_YARDS * 3
MIN_VELOCITY_FPS    = 100.0      # stop stepping below this
RETARDATION_SCALE   = 100000.0   # empirical
GRAINS_PER_POUND    = 7000.0


@dataclass(frozen=True)
class TrajectoryPoint:
    """State of the bullet at the end of an integration run."""
    drop_inches: float          # negative = below line of departure
    time_of_flight_s: float
    velocity_fps: float
    energy_ftlbs: float


def kinetic_energy(bullet_mass_grains: float, velocity_fps: float) -> float:
    """Kinetic energy in ft·lbs."""
    mass_lbs = bullet_mass_grains / GRAINS_PER_POUND
    return mass_lbs * velocity_fps * velocity_fps / (2 * GRAVITY)


def integrate(muzzle_velocity_fps: float, ballistic_coefficient: float,
              model: str, bullet_mass_grains: float, range_yards: float,
              air_density_ratio: float = 1.0) -> TrajectoryPoint:
    """
    Step the trajectory out to ``range_yards``.

    Stops early if horizontal velocity falls below ``MIN_VELOCITY_FPS``.
    A range of zero takes no steps and returns zero drop and time.
    """
    drag = get_drag_model(model)

    x = 0.0        # ft downrange
    y = 0.0        # ft, goes negative as the bullet drops
    vx = float(muzzle_velocity_fps)
    vy = 0.0
    t = 0.0

    range_feet = range_yards * 3

    while x < range_feet:
        speed = math.hypot(vx, vy)
        cd = drag.cd(speed)
        retardation = (cd / ballistic_coefficient) * air_density_ratio \
            * speed * speed / RETARDATION_SCALE

        dt = STEP_FEET / vx

        drag_x = retardation * (vx / speed)
        drag_y = retardation * (vy / speed)

        vx -= drag_x * dt
        # Vertical drag is skipped while vy is exactly zero (first step).
        # Known approximation; removing it shifts every drop value.
        vy -= GRAVITY * dt + (drag_y * dt if vy != 0 else 0.0)

        x += vx * dt
        y += vy * dt
        t += dt

        if vx < MIN_VELOCITY_FPS:
            break

    velocity = math.hypot(vx, vy)
    return TrajectoryPoint(
        drop_inches=y * 12,
        time_of_flight_s=t,
        velocity_fps=velocity,
        energy_ftlbs=kinetic_energy(bullet_mass_grains, velocity),
    )
