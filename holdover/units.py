"""
Angular subtension ↔ linear inches at a given distance.

1 mil subtends 1/1000 of the distance (36 in/yd × d / 1000);
1 MOA is taken as 1.047 in per 100 yd.
"""

MIL = 'mil'
MOA = 'moa'
ANGLE_UNITS = (MIL, MOA)

INCHES_PER_YARD      = 36.0
MOA_INCHES_PER_100YD = 1.047
MOA_PER_MIL          = 3.438


def _check_unit(unit: str):
    if unit not in ANGLE_UNITS:
        raise ValueError(f"Unknown angle unit '{unit}'. Available: {list(ANGLE_UNITS)}")


def angle_to_inches(value: float, unit: str, distance_yards: float) -> float:
    """Linear size (in) subtended by ``value`` mil/MOA at ``distance_yards``."""
    _check_unit(unit)
    if unit == MIL:
        return value * distance_yards * INCHES_PER_YARD / 1000
    return value * MOA_INCHES_PER_100YD * distance_yards / 100


def inches_to_angle(inches: float, unit: str, distance_yards: float) -> float:
    """
    Angle (mil/MOA) subtended by ``inches`` at ``distance_yards``.

    Returns 0.0 at or inside the muzzle (distance <= 0).
    """
    _check_unit(unit)
    if distance_yards <= 0:
        return 0.0
    if unit == MIL:
        return inches * 1000 / (distance_yards * INCHES_PER_YARD)
    return inches / (MOA_INCHES_PER_100YD * distance_yards / 100)


def mils_to_moa(mils: float) -> float:
    return mils * MOA_PER_MIL


def moa_to_mils(moa: float) -> float:
    return moa / MOA_PER_MIL
