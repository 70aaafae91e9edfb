"""
Unit Tests for the Holdover Ballistics Solver
=============================================
Run: python -m pytest tests/ -v
"""

import sys
import os
import math
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from holdover.drag_model import DragModel, drag_coefficient, G1_TABLE, G7_TABLE
from holdover.atmosphere import (
    Environment, air_density_ratio, STANDARD_ENVIRONMENT, DEFAULT_ENVIRONMENT,
)
from holdover.integrator import integrate, kinetic_energy, STEP_YARDS
from holdover.units import (
    MIL, MOA, angle_to_inches, inches_to_angle, mils_to_moa, moa_to_mils,
)
from holdover.wind import (
    WindVector, crosswind_component, weighted_crosswind, wind_drift_inches,
    format_wind,
)
from holdover.profiles import RifleProfile, DEFAULT_RIFLES, get_rifle_by_name
from holdover.solver import solve, dope_table, true_ballistic_range, DEFAULT_DOPE_RANGES
from holdover.validation import compare_to_rule_of_thumb, rule_of_thumb_mils


CREEDMOOR = RifleProfile(
    name='6.5 Creedmoor (140gr)',
    ballistic_coefficient=0.610,
    drag_model='G7',
    muzzle_velocity_fps=2750,
    bullet_mass_grains=140,
    zero_distance_yards=100,
)
RANGE_DAY = Environment(temperature_f=70.0, pressure_inhg=29.92)


class TestDragModel:
    """Table lookup, interpolation and clamping."""

    def test_tables_sorted_descending(self):
        for table in (G1_TABLE, G7_TABLE):
            velocities = [v for v, _ in table]
            assert velocities == sorted(velocities, reverse=True)
            assert len(set(velocities)) == len(velocities)

    def test_table_rows_reproduced(self):
        for model, table in (('G1', G1_TABLE), ('G7', G7_TABLE)):
            for v, cd in table:
                assert drag_coefficient(v, model) == pytest.approx(cd, abs=1e-12)

    def test_linear_interpolation_midpoint(self):
        # 2750 sits halfway between the 3000 and 2500 rows
        assert drag_coefficient(2750, 'G7') == pytest.approx(0.123, abs=1e-12)
        assert drag_coefficient(2750, 'G1') == pytest.approx(0.247, abs=1e-12)

    def test_flat_above_table(self):
        for model in ('G1', 'G7'):
            top = drag_coefficient(4500, model)
            for v in (4501, 5000, 10000):
                assert drag_coefficient(v, model) == pytest.approx(top, abs=1e-12)

    def test_flat_below_table(self):
        assert drag_coefficient(599, 'G7') == pytest.approx(0.210, abs=1e-12)
        assert drag_coefficient(100, 'G7') == pytest.approx(0.210, abs=1e-12)
        assert drag_coefficient(0, 'G1') == pytest.approx(0.420, abs=1e-12)

    def test_g7_lower_than_g1(self):
        for v in (800, 1200, 2000, 3000):
            assert drag_coefficient(v, 'G7') < drag_coefficient(v, 'G1')

    def test_cd_array_matches_scalar(self):
        model = DragModel('G1')
        vals = model.cd_array([500, 1100, 2750, 5000])
        for v, cd in zip([500, 1100, 2750, 5000], vals):
            assert cd == pytest.approx(model.cd(v))

    def test_unknown_model_raises(self):
        with pytest.raises(ValueError):
            DragModel('G5')
        with pytest.raises(ValueError):
            drag_coefficient(2000, 'GX')


class TestAtmosphere:
    """Air density ratio."""

    def test_standard_conditions_exact(self):
        env = Environment(temperature_f=59.0, pressure_inhg=29.92)
        assert air_density_ratio(env) == 1.0
        assert air_density_ratio(STANDARD_ENVIRONMENT) == 1.0

    def test_warm_air_is_thinner(self):
        assert air_density_ratio(RANGE_DAY) < 1.0
        assert air_density_ratio(RANGE_DAY) == pytest.approx(518.67 / 529.67)

    def test_cold_air_is_denser(self):
        assert air_density_ratio(Environment(temperature_f=0.0)) > 1.0

    def test_low_pressure_is_thinner(self):
        env = Environment(temperature_f=59.0, pressure_inhg=25.0)
        assert air_density_ratio(env) == pytest.approx(25.0 / 29.92)

    def test_humidity_and_altitude_ignored(self):
        dry = Environment(temperature_f=70.0, pressure_inhg=29.92)
        wet = Environment(temperature_f=70.0, pressure_inhg=29.92,
                          altitude_ft=5000.0, humidity_pct=90.0)
        assert air_density_ratio(dry) == air_density_ratio(wet)


class TestIntegrator:
    """Euler stepping over fixed downrange increments."""

    def test_zero_range(self):
        pt = integrate(2750, 0.61, 'G7', 140, 0.0)
        assert pt.drop_inches == 0.0
        assert pt.time_of_flight_s == 0.0
        assert pt.velocity_fps == 2750
        assert pt.energy_ftlbs == pytest.approx(kinetic_energy(140, 2750))

    def test_single_step_range(self):
        pt = integrate(2750, 0.61, 'G7', 140, STEP_YARDS)
        assert abs(pt.drop_inches) < 0.01
        assert 0 < pt.time_of_flight_s < 0.002

    def test_energy_formula(self):
        # 140 gr at 2750 fps ≈ 2350 ft·lbs
        assert kinetic_energy(140, 2750) == pytest.approx(
            (140 / 7000) * 2750 ** 2 / (2 * 32.174))
        assert abs(kinetic_energy(140, 2750) - 2350.5) < 1.0

    def test_drop_monotonic_with_range(self):
        drops = [integrate(2750, 0.61, 'G7', 140, r).drop_inches
                 for r in (50, 100, 200, 400, 600, 800, 1000)]
        assert all(d < 0 for d in drops)
        for near, far in zip(drops, drops[1:]):
            assert far < near

    def test_velocity_and_time_progress(self):
        near = integrate(2750, 0.61, 'G7', 140, 300)
        far = integrate(2750, 0.61, 'G7', 140, 900)
        assert far.velocity_fps < near.velocity_fps < 2750
        assert far.time_of_flight_s > near.time_of_flight_s
        assert far.energy_ftlbs < near.energy_ftlbs

    def test_near_vacuum_drop(self):
        """High BC at 100 yd should sit close to ½gt²."""
        pt = integrate(2750, 0.61, 'G7', 140, 100)
        vacuum_in = 0.5 * 32.174 * pt.time_of_flight_s ** 2 * 12
        assert abs(pt.drop_inches + vacuum_in) < 0.05

    def test_denser_air_more_drop(self):
        thin = integrate(2600, 0.505, 'G7', 175, 800, 0.8)
        thick = integrate(2600, 0.505, 'G7', 175, 800, 1.2)
        assert thick.drop_inches < thin.drop_inches
        assert thick.velocity_fps < thin.velocity_fps

    def test_g1_slows_more_than_g7(self):
        g1 = integrate(2600, 0.5, 'G1', 175, 800)
        g7 = integrate(2600, 0.5, 'G7', 175, 800)
        assert g1.velocity_fps < g7.velocity_fps

    def test_velocity_floor_terminates(self):
        """A very draggy bullet stops stepping once it drops below 100 ft/s."""
        pt = integrate(2750, 0.001, 'G1', 140, 1000)
        assert math.isfinite(pt.drop_inches)
        assert math.isfinite(pt.time_of_flight_s)
        assert pt.velocity_fps < 500


class TestUnits:
    """Angular subtension conversions."""

    def test_known_values(self):
        assert angle_to_inches(1, MIL, 100) == pytest.approx(3.6)
        assert angle_to_inches(1, MOA, 100) == pytest.approx(1.047)
        assert angle_to_inches(2, MIL, 500) == pytest.approx(36.0)
        assert inches_to_angle(10.47, MOA, 1000) == pytest.approx(1.0)

    @pytest.mark.parametrize('unit', [MIL, MOA])
    @pytest.mark.parametrize('distance', [1, 100, 537.5, 1500])
    def test_round_trip(self, unit, distance):
        for value in (-3.7, 0.0, 0.25, 12.0):
            inches = angle_to_inches(value, unit, distance)
            assert inches_to_angle(inches, unit, distance) == pytest.approx(value, abs=1e-12)

    def test_zero_distance_angle(self):
        assert inches_to_angle(5.0, MIL, 0) == 0.0
        assert inches_to_angle(5.0, MOA, 0) == 0.0

    def test_mil_moa(self):
        assert mils_to_moa(1.0) == pytest.approx(3.438)
        assert moa_to_mils(mils_to_moa(2.5)) == pytest.approx(2.5)

    def test_unknown_unit_raises(self):
        with pytest.raises(ValueError):
            angle_to_inches(1, 'deg', 100)
        with pytest.raises(ValueError):
            inches_to_angle(1, 'deg', 100)


class TestWind:
    """Clock-face crosswind and distance-weighted aggregation."""

    def test_crosswind_clock_positions(self):
        assert crosswind_component(3) == pytest.approx(1.0, abs=1e-12)
        assert crosswind_component(9) == pytest.approx(-1.0, abs=1e-12)
        assert crosswind_component(12) == pytest.approx(0.0, abs=1e-12)
        assert crosswind_component(6) == pytest.approx(0.0, abs=1e-12)

    def test_crosswind_speed_scaling(self):
        assert WindVector(0, 10, 3).crosswind_mph == pytest.approx(10.0)
        assert WindVector(0, 10, 9).crosswind_mph == pytest.approx(-10.0)
        assert WindVector(0, 10, 2).crosswind_mph == pytest.approx(10 * math.sin(math.radians(60)))

    def test_no_winds(self):
        assert weighted_crosswind([], 500) == 0.0
        assert wind_drift_inches([], 500, 0.6) == 0.0

    def test_divides_by_count_not_weights(self):
        winds = [WindVector(0, 10, 3), WindVector(500, 10, 3)]
        # weights 1.0 and 0.5 → (10 + 5) / 2
        assert weighted_crosswind(winds, 500) == pytest.approx(7.5)

    def test_near_wind_counts_more(self):
        near = weighted_crosswind([WindVector(100, 10, 3)], 1000)
        far = weighted_crosswind([WindVector(900, 10, 3)], 1000)
        assert near > far > 0

    def test_zero_target_distance(self):
        assert weighted_crosswind([WindVector(0, 10, 3)], 0) == pytest.approx(10.0)

    def test_drift_formula(self):
        winds = [WindVector(0, 10, 3)]
        assert wind_drift_inches(winds, 500, 0.5) == pytest.approx(10 * 0.5 * 12 * 0.5)

    def test_format_wind(self):
        assert format_wind(WindVector(250, 9.6, 3)) == "10 mph @ 3 o'clock"


class TestProfiles:
    """Rifle profile validation and presets."""

    def test_presets_valid(self):
        assert len(DEFAULT_RIFLES) == 4
        for rifle in DEFAULT_RIFLES:
            assert rifle.drag_model == 'G7'
            assert rifle.zero_distance_yards == 100

    @pytest.mark.parametrize('field', [
        'ballistic_coefficient', 'muzzle_velocity_fps',
        'bullet_mass_grains', 'zero_distance_yards',
    ])
    def test_non_positive_rejected(self, field):
        kwargs = dict(name='bad', ballistic_coefficient=0.5, drag_model='G7',
                      muzzle_velocity_fps=2700, bullet_mass_grains=150,
                      zero_distance_yards=100)
        kwargs[field] = 0
        with pytest.raises(ValueError):
            RifleProfile(**kwargs)

    def test_unknown_drag_model_rejected(self):
        with pytest.raises(ValueError):
            RifleProfile('bad', 0.5, 'G2', 2700, 150)

    def test_twist_direction_checked(self):
        with pytest.raises(ValueError):
            RifleProfile('bad', 0.5, 'G7', 2700, 150, twist_direction='up')

    def test_lookup_by_name(self):
        assert get_rifle_by_name('.308 Win (175gr)').bullet_mass_grains == 175
        assert get_rifle_by_name('no such rifle') is DEFAULT_RIFLES[0]


class TestSolver:
    """End-to-end firing solutions."""

    def test_reference_scenario(self):
        """6.5 CM, 500 yd, level, no wind: hold in the low mils, sub-second flight."""
        s = solve(CREEDMOOR, 500, 0.0, [], RANGE_DAY)
        assert s.drop_inches < 0
        assert 2.0 < s.hold_mils < 5.0
        assert s.time_of_flight_s < 1.0
        # regression baseline
        assert s.hold_mils == pytest.approx(2.56, abs=0.15)
        assert s.time_of_flight_s == pytest.approx(0.546, abs=0.01)

    def test_no_wind_no_drift(self):
        s = solve(CREEDMOOR, 800, 5.0, [], RANGE_DAY)
        assert s.wind_drift_inches == 0
        assert s.wind_drift_mils == 0
        assert s.wind_drift_moa == 0

    def test_zero_distance_reads_zero(self):
        s = solve(CREEDMOOR, 100, 0.0, [], RANGE_DAY)
        assert abs(s.drop_inches) < 1e-9

    def test_muzzle(self):
        s = solve(CREEDMOOR, 0, 0.0, [], RANGE_DAY)
        assert s.drop_inches == pytest.approx(0.0, abs=1e-12)
        assert s.time_of_flight_s == 0.0
        assert s.drop_mils == 0.0
        assert s.drop_moa == 0.0

    def test_drop_grows_past_zero(self):
        drops = [solve(CREEDMOOR, d, 0.0, [], RANGE_DAY).drop_inches
                 for d in range(200, 1101, 100)]
        for near, far in zip(drops, drops[1:]):
            assert abs(far) >= abs(near)

    def test_units_consistent(self):
        s = solve(CREEDMOOR, 600, 0.0, [WindVector(300, 10, 3)], RANGE_DAY)
        assert s.drop_mils == pytest.approx(inches_to_angle(s.drop_inches, MIL, 600))
        assert s.drop_moa == pytest.approx(inches_to_angle(s.drop_inches, MOA, 600))
        assert s.wind_drift_mils == pytest.approx(inches_to_angle(s.wind_drift_inches, MIL, 600))
        assert s.hold_mils == -s.drop_mils

    def test_angle_symmetric(self):
        up = solve(CREEDMOOR, 700, 20.0, [], RANGE_DAY)
        down = solve(CREEDMOOR, 700, -20.0, [], RANGE_DAY)
        assert up.drop_inches == down.drop_inches
        assert up.time_of_flight_s == down.time_of_flight_s

    def test_angle_reduces_hold(self):
        level = solve(CREEDMOOR, 700, 0.0, [], RANGE_DAY)
        steep = solve(CREEDMOOR, 700, 30.0, [], RANGE_DAY)
        assert steep.hold_mils < level.hold_mils
        assert steep.distance_yards == 700

    def test_true_ballistic_range(self):
        assert true_ballistic_range(600, 60) == pytest.approx(300.0)
        assert true_ballistic_range(600, -60) == pytest.approx(300.0)
        assert true_ballistic_range(600, 0) == 600

    def test_wind_direction_sign(self):
        right = solve(CREEDMOOR, 600, 0.0, [WindVector(300, 10, 3)], RANGE_DAY)
        left = solve(CREEDMOOR, 600, 0.0, [WindVector(300, 10, 9)], RANGE_DAY)
        assert right.wind_drift_inches > 0
        assert left.wind_drift_inches == pytest.approx(-right.wind_drift_inches)

    def test_wind_drift_value(self):
        s = solve(CREEDMOOR, 500, 0.0, [WindVector(0, 10, 3)], RANGE_DAY)
        assert s.wind_drift_inches == pytest.approx(10 * s.time_of_flight_s * 6)

    def test_wind_weight_uses_true_range(self):
        # 600 yd at 60° → 300 yd true range, reading at 300 yd gets weight 0.5
        s = solve(CREEDMOOR, 600, 60.0, [WindVector(300, 10, 3)], RANGE_DAY)
        assert s.wind_drift_inches == pytest.approx(5 * s.time_of_flight_s * 6)

    def test_default_environment_is_standard(self):
        a = solve(CREEDMOOR, 500)
        b = solve(CREEDMOOR, 500, 0.0, [], STANDARD_ENVIRONMENT)
        assert a == b

    def test_pure_function(self):
        winds = [WindVector(0, 8, 2), WindVector(250, 12, 4)]
        assert solve(CREEDMOOR, 500, 5, winds, RANGE_DAY) == \
            solve(CREEDMOOR, 500, 5, winds, RANGE_DAY)

    def test_dope_table(self):
        card = dope_table(CREEDMOOR, environment=RANGE_DAY)
        assert len(card) == len(DEFAULT_DOPE_RANGES)
        assert [s.distance_yards for s in card] == [float(d) for d in DEFAULT_DOPE_RANGES]
        holds = [s.hold_mils for s in card]
        assert holds == sorted(holds)

    def test_summary_text(self):
        text = solve(CREEDMOOR, 500, 0.0, [], RANGE_DAY).summary()
        assert 'FIRING SOLUTION' in text
        assert '500 yd' in text


class TestRuleOfThumb:
    """Comparison against the half-distance-plus-0.1 shortcut."""

    def test_rule_values(self):
        assert rule_of_thumb_mils(500) == pytest.approx(2.6)
        assert rule_of_thumb_mils(1000) == pytest.approx(5.1)

    def test_comparison_rows(self):
        results = compare_to_rule_of_thumb(CREEDMOOR, environment=DEFAULT_ENVIRONMENT,
                                           verbose=False)
        assert len(results) == len(DEFAULT_DOPE_RANGES)
        for r in results:
            assert r.diff_mils == pytest.approx(r.solver_mils - r.rule_mils)

    def test_close_at_medium_range(self):
        results = compare_to_rule_of_thumb(CREEDMOOR, distances=[300, 500],
                                           verbose=False)
        for r in results:
            assert abs(r.diff_mils) < 0.5

    def test_verbose_prints(self, capsys):
        compare_to_rule_of_thumb(CREEDMOOR, distances=[400], verbose=True)
        out = capsys.readouterr().out
        assert 'RULE-OF-THUMB CHECK' in out
        assert 'Mean absolute difference' in out


if __name__ == "__main__":
    pytest.main([__file__, '-v'])
