"""
Rifle / Ammunition Profiles
===========================
A ``RifleProfile`` is checked once, when it is built, so the solver can
assume sane inputs (positive BC, velocity, mass and zero distance, a known
drag family).
"""

from dataclasses import dataclass
from typing import Optional

from .drag_model import DRAG_TABLES


TWIST_DIRECTIONS = ('right', 'left')


@dataclass(frozen=True)
class RifleProfile:
    """
    Rifle and load as seen by the solver.

    Twist rate and direction are descriptive only.
    """
    name: str
    ballistic_coefficient: float
    drag_model: str
    muzzle_velocity_fps: float
    bullet_mass_grains: float
    zero_distance_yards: float = 100.0
    caliber: str = ''
    barrel_twist_inches: Optional[float] = None
    twist_direction: str = 'right'

    def __post_init__(self):
        if self.drag_model not in DRAG_TABLES:
            raise ValueError(
                f"Unknown drag model '{self.drag_model}'. "
                f"Available: {list(DRAG_TABLES.keys())}"
            )
        for attr in ('ballistic_coefficient', 'muzzle_velocity_fps',
                     'bullet_mass_grains', 'zero_distance_yards'):
            value = getattr(self, attr)
            if not value > 0:
                raise ValueError(f"{attr} must be > 0, got {value!r}")
        if self.twist_direction not in TWIST_DIRECTIONS:
            raise ValueError(
                f"twist_direction must be one of {list(TWIST_DIRECTIONS)}, "
                f"got {self.twist_direction!r}"
            )


DEFAULT_RIFLES = [
    RifleProfile(
        name='6.5 Creedmoor (140gr)',
        caliber='6.5 Creedmoor',
        bullet_mass_grains=140,
        ballistic_coefficient=0.610,
        drag_model='G7',
        muzzle_velocity_fps=2750,
        zero_distance_yards=100,
        barrel_twist_inches=8,
    ),
    RifleProfile(
        name='.308 Win (175gr)',
        caliber='.308 Winchester',
        bullet_mass_grains=175,
        ballistic_coefficient=0.505,
        drag_model='G7',
        muzzle_velocity_fps=2600,
        zero_distance_yards=100,
        barrel_twist_inches=10,
    ),
    RifleProfile(
        name='6mm Creedmoor (105gr)',
        caliber='6mm Creedmoor',
        bullet_mass_grains=105,
        ballistic_coefficient=0.540,
        drag_model='G7',
        muzzle_velocity_fps=3000,
        zero_distance_yards=100,
        barrel_twist_inches=7.5,
    ),
    RifleProfile(
        name='.300 Win Mag (190gr)',
        caliber='.300 Win Mag',
        bullet_mass_grains=190,
        ballistic_coefficient=0.640,
        drag_model='G7',
        muzzle_velocity_fps=2900,
        zero_distance_yards=100,
        barrel_twist_inches=10,
    ),
]


def get_rifle_by_name(name: str) -> RifleProfile:
    """Preset with the given name, or the first preset if there is none."""
    for rifle in DEFAULT_RIFLES:
        if rifle.name == name:
            return rifle
    return DEFAULT_RIFLES[0]
