"""
Drag Coefficient Tables
=======================
Velocity-dependent retardation coefficients for the two standard drag
families supported by the solver:

- G1 — flat-base reference projectile (classic hunting bullets)
- G7 — long boat-tail reference projectile (modern long-range bullets)

Both tables are stored highest velocity first. Lookups interpolate
linearly between bracketing rows and clamp to the end rows outside the
tabulated span, so no velocity ever produces an error or a runaway
coefficient.
"""

import numpy as np
from scipy.interpolate import interp1d


# ══════════════════════════════════════════════════════════════════════════
#  Coefficient tables — (velocity ft/s, coefficient), strictly descending
# ══════════════════════════════════════════════════════════════════════════

G1_TABLE = (
    (4500, 0.230),
    (4000, 0.229),
    (3500, 0.230),
    (3000, 0.238),
    (2500, 0.256),
    (2000, 0.310),
    (1800, 0.348),
    (1600, 0.415),
    (1400, 0.485),
    (1200, 0.520),
    (1000, 0.500),
    (800, 0.460),
    (600, 0.420),
)

G7_TABLE = (
    (4500, 0.120),
    (4000, 0.119),
    (3500, 0.118),
    (3000, 0.120),
    (2500, 0.126),
    (2000, 0.145),
    (1800, 0.158),
    (1600, 0.175),
    (1400, 0.195),
    (1200, 0.215),
    (1000, 0.225),
    (800, 0.220),
    (600, 0.210),
)

DRAG_TABLES = {
    'G1': G1_TABLE,
    'G7': G7_TABLE,
}

# Plot styling per family
MODEL_STYLES = {
    'G1': {'name': 'G1 (flat base)', 'color': '#ff6b35', 'linestyle': '--'},
    'G7': {'name': 'G7 (boat-tail)', 'color': '#00d4ff', 'linestyle': '-'},
}


class DragModel:
    """
    Coefficient lookup for one drag family.

    Piecewise-linear in velocity, flat beyond both ends of the table.
    """

    def __init__(self, model: str = 'G7'):
        if model not in DRAG_TABLES:
            raise ValueError(
                f"Unknown drag model '{model}'. "
                f"Available: {list(DRAG_TABLES.keys())}"
            )

        self.model = model
        self.name = MODEL_STYLES[model]['name']
        self.table = DRAG_TABLES[model]

        # interp1d wants ascending abscissae
        vel_arr = np.array([row[0] for row in reversed(self.table)], dtype=float)
        cd_arr = np.array([row[1] for row in reversed(self.table)], dtype=float)

        self.v_min = float(vel_arr[0])
        self.v_max = float(vel_arr[-1])

        self._interp = interp1d(
            vel_arr, cd_arr,
            kind='linear',
            bounds_error=False,
            fill_value=(cd_arr[0], cd_arr[-1]),
            assume_sorted=True,
        )

    def cd(self, velocity_fps: float) -> float:
        """Return the retardation coefficient at the given velocity (ft/s)."""
        return float(self._interp(velocity_fps))

    def cd_array(self, velocity_array: np.ndarray) -> np.ndarray:
        """Vectorized coefficient lookup."""
        return self._interp(np.asarray(velocity_array, dtype=float))

    def __repr__(self) -> str:
        return f"DragModel({self.model!r})"


# Tables never change, so one lookup object per family is shared
_MODELS = {key: DragModel(key) for key in DRAG_TABLES}


def get_drag_model(model: str) -> DragModel:
    """Shared lookup object for a drag family."""
    try:
        return _MODELS[model]
    except KeyError:
        raise ValueError(
            f"Unknown drag model '{model}'. "
            f"Available: {list(DRAG_TABLES.keys())}"
        ) from None


def drag_coefficient(velocity_fps: float, model: str) -> float:
    """
    Retardation coefficient for ``model`` ('G1' or 'G7') at ``velocity_fps``.

    Velocities above the table return the top-row coefficient, velocities
    below it return the bottom-row coefficient.
    """
    return get_drag_model(model).cd(velocity_fps)
