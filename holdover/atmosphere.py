"""
Air Density Correction
======================
Scales drag by how dense the air is relative to the standard atmosphere
(59 °F, 29.92 inHg): pressure ratio times inverse absolute-temperature
ratio.

Humidity and altitude are carried on ``Environment`` for the callers that
display them, but they do not enter the ratio.
"""

from dataclasses import dataclass


# ── Standard atmosphere ───────────────────────────────────────────────────
STANDARD_TEMP_F         = 59.0        # °F
RANKINE_OFFSET          = 459.67      # °F → °R
STANDARD_TEMP_R         = STANDARD_TEMP_F + RANKINE_OFFSET   # 518.67 °R
STANDARD_PRESSURE_INHG  = 29.92       # inHg


@dataclass(frozen=True)
class Environment:
    """Shooting-site conditions."""
    temperature_f: float = STANDARD_TEMP_F
    pressure_inhg: float = STANDARD_PRESSURE_INHG
    altitude_ft: float = 0.0         # not used by the density ratio
    humidity_pct: float = 0.0        # not used by the density ratio

    @property
    def temperature_r(self) -> float:
        """Absolute temperature (°R)."""
        return self.temperature_f + RANKINE_OFFSET

    @property
    def temperature_c(self) -> float:
        return (self.temperature_f - 32.0) * 5.0 / 9.0


STANDARD_ENVIRONMENT = Environment()

# Typical range day
DEFAULT_ENVIRONMENT = Environment(
    temperature_f=70.0,
    pressure_inhg=29.92,
    altitude_ft=1000.0,
    humidity_pct=50.0,
)


def air_density_ratio(environment: Environment) -> float:
    """
    Density relative to standard atmosphere.

    ρ/ρ₀ = (P / P₀) × (T₀ / T), temperatures absolute (°R).
    """
    pressure_ratio = environment.pressure_inhg / STANDARD_PRESSURE_INHG
    temp_ratio = STANDARD_TEMP_R / environment.temperature_r
    return pressure_ratio * temp_ratio
