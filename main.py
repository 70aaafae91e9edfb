#!/usr/bin/env python3
"""
═══════════════════════════════════════════════════════════════════════════════
  HOLDOVER — Main Runner
═══════════════════════════════════════════════════════════════════════════════

  Runs the solver end to end on the built-in rifle presets:
    1. Air-density correction
    2. Drag coefficient curves
    3. Reference firing solution (6.5 Creedmoor @ 500 yd)
    4. Range card for every preset
    5. Wind drift from multiple readings
    6. Angle-of-fire compensation
    7. Rule-of-thumb comparison

  Plots are saved to outputs/.

  Usage:
    python main.py              # Run everything
    python main.py --quick      # Console output only, no plots
═══════════════════════════════════════════════════════════════════════════════
"""

import sys
import os
import time

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from holdover.atmosphere import Environment, DEFAULT_ENVIRONMENT, air_density_ratio
from holdover.drag_model import DRAG_TABLES, drag_coefficient
from holdover.profiles import DEFAULT_RIFLES
from holdover.solver import solve, dope_table, true_ballistic_range
from holdover.validation import compare_to_rule_of_thumb
from holdover.wind import WindVector, format_wind
from holdover.visualization import (
    plot_drag_curves, plot_drop_chart, plot_velocity_energy, plot_wind_drift,
    ensure_output_dir,
)

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt


def section(title):
    print(f"\n{'─'*60}")
    print(f"  {title}")
    print(f"{'─'*60}")


def main():
    start_time = time.time()
    quick = '--quick' in sys.argv
    out = None if quick else ensure_output_dir('outputs')
    rifle = DEFAULT_RIFLES[0]

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 1: Air Density
    # ══════════════════════════════════════════════════════════════════════
    section("PHASE 1: Air Density Ratio")
    print(f"  {'Temp (°F)':>10} {'Press (inHg)':>13} {'ρ/ρ₀':>8}")
    for temp, press in [(59, 29.92), (0, 29.92), (100, 29.92), (70, 25.0), (70, 29.92)]:
        env = Environment(temperature_f=temp, pressure_inhg=press)
        print(f"  {temp:>10} {press:>13.2f} {air_density_ratio(env):>8.4f}")

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 2: Drag Curves
    # ══════════════════════════════════════════════════════════════════════
    section("PHASE 2: Drag Coefficient vs Velocity")
    for model in DRAG_TABLES:
        print(f"  {model}  Cd @ 3000={drag_coefficient(3000, model):.3f}  "
              f"Cd @ 2000={drag_coefficient(2000, model):.3f}  "
              f"Cd @ 1100={drag_coefficient(1100, model):.3f}")
    if out:
        fig = plot_drag_curves(save_path=f'{out}/01_drag_curves.png')
        plt.close(fig)
        print(f"\n  ✓ Saved: {out}/01_drag_curves.png")

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 3: Reference Solution
    # ══════════════════════════════════════════════════════════════════════
    section(f"PHASE 3: Reference Solution ({rifle.name} @ 500 yd)")
    print(solve(rifle, 500, 0.0, [], DEFAULT_ENVIRONMENT).summary())

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 4: Range Cards
    # ══════════════════════════════════════════════════════════════════════
    section("PHASE 4: Range Cards")
    for preset in DEFAULT_RIFLES:
        card = dope_table(preset, environment=DEFAULT_ENVIRONMENT)
        print(f"\n  {preset.name}")
        print(f"  {'Dist':>6} {'Hold mil':>9} {'Hold MOA':>9} {'ToF s':>7} {'Vel':>6} {'Energy':>7}")
        for s in card:
            print(f"  {s.distance_yards:>6.0f} {s.hold_mils:>9.2f} {s.hold_moa:>9.2f} "
                  f"{s.time_of_flight_s:>7.3f} {s.velocity_fps:>6.0f} {s.energy_ftlbs:>7.0f}")
        if out and preset is rifle:
            fig = plot_drop_chart(card, title=preset.name,
                                  save_path=f'{out}/02_drop_chart.png')
            plt.close(fig)
            fig = plot_velocity_energy(card, save_path=f'{out}/03_velocity_energy.png')
            plt.close(fig)
            print(f"\n  ✓ Saved: {out}/02_drop_chart.png, {out}/03_velocity_energy.png")

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 5: Wind
    # ══════════════════════════════════════════════════════════════════════
    section("PHASE 5: Wind Drift (600 yd)")
    winds = [
        WindVector(distance_yards=0, speed_mph=10, direction_clock=3),
        WindVector(distance_yards=300, speed_mph=8, direction_clock=2),
        WindVector(distance_yards=480, speed_mph=12, direction_clock=4),
    ]
    for w in winds:
        print(f"  @ {w.distance_yards:>4.0f} yd: {format_wind(w)}")
    s = solve(rifle, 600, 0.0, winds, DEFAULT_ENVIRONMENT)
    print(f"  Drift: {s.wind_drift_inches:.1f} in  |  {s.wind_drift_mils:.2f} mil  |  "
          f"{s.wind_drift_moa:.2f} MOA")
    if out:
        fig = plot_wind_drift(rifle, 600, environment=DEFAULT_ENVIRONMENT,
                              save_path=f'{out}/04_wind_drift.png')
        plt.close(fig)
        print(f"\n  ✓ Saved: {out}/04_wind_drift.png")

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 6: Angle of Fire
    # ══════════════════════════════════════════════════════════════════════
    section("PHASE 6: Angle of Fire (700 yd line of sight)")
    for angle in [0, 10, -10, 20, 30]:
        s = solve(rifle, 700, angle, [], DEFAULT_ENVIRONMENT)
        print(f"  {angle:>+4d}°  true range {true_ballistic_range(700, angle):>6.1f} yd  "
              f"hold {s.hold_mils:>5.2f} mil")

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 7: Rule of Thumb
    # ══════════════════════════════════════════════════════════════════════
    section("PHASE 7: Rule-of-Thumb Comparison")
    compare_to_rule_of_thumb(rifle)

    elapsed = time.time() - start_time
    section("COMPLETE")
    if out:
        print(f"  All outputs saved to: {os.path.abspath(out)}/")
    print(f"  Total runtime: {elapsed:.1f} seconds\n")


if __name__ == "__main__":
    main()
