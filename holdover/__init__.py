"""
Holdover — Exterior Ballistics Solver for Rifle Training
========================================================
Computes the firing solution for a rifle/load at a given distance:
  - Drop below the line of sight (in, mil, MOA)
  - Time of flight, remaining velocity and energy
  - Wind drift from readings taken along the bullet path

Point-mass model: G1/G7 drag tables, Euler integration over a fixed
downrange step, pressure/temperature density correction, sight-in
compensation from the rifle's zero distance and distance-weighted wind
aggregation. A training-grade approximation, not a certified ballistic
computer.
"""

from .drag_model import DragModel, drag_coefficient, G1_TABLE, G7_TABLE, DRAG_TABLES
from .atmosphere import (
    Environment, air_density_ratio,
    STANDARD_ENVIRONMENT, DEFAULT_ENVIRONMENT,
)
from .integrator import TrajectoryPoint, integrate
from .units import (
    MIL, MOA, angle_to_inches, inches_to_angle, mils_to_moa, moa_to_mils,
)
from .wind import WindVector, crosswind_component, weighted_crosswind, wind_drift_inches
from .profiles import RifleProfile, DEFAULT_RIFLES, get_rifle_by_name
from .solver import BallisticSolution, solve, true_ballistic_range, dope_table
from .validation import compare_to_rule_of_thumb, rule_of_thumb_mils

__version__ = "1.0.0"
__all__ = [
    'DragModel', 'drag_coefficient', 'G1_TABLE', 'G7_TABLE', 'DRAG_TABLES',
    'Environment', 'air_density_ratio',
    'STANDARD_ENVIRONMENT', 'DEFAULT_ENVIRONMENT',
    'TrajectoryPoint', 'integrate',
    'MIL', 'MOA', 'angle_to_inches', 'inches_to_angle',
    'mils_to_moa', 'moa_to_mils',
    'WindVector', 'crosswind_component', 'weighted_crosswind', 'wind_drift_inches',
    'RifleProfile', 'DEFAULT_RIFLES', 'get_rifle_by_name',
    'BallisticSolution', 'solve', 'true_ballistic_range', 'dope_table',
    'compare_to_rule_of_thumb', 'rule_of_thumb_mils',
]
