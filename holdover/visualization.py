"""
Visualization
=============
Range-card style plots for solver output:
  1. Drag coefficient vs velocity (G1 / G7)
  2. Drop chart (inches and mil hold vs distance)
  3. Velocity and energy vs distance
  4. Wind drift vs clock position
"""

import os
from typing import List, Optional

import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from .atmosphere import Environment, STANDARD_ENVIRONMENT
from .drag_model import DRAG_TABLES, MODEL_STYLES, get_drag_model
from .profiles import RifleProfile
from .solver import BallisticSolution, solve
from .wind import WindVector


# ── Style Configuration ───────────────────────────────────────────────────
STYLE = {
    'bg_color': '#0a0a0a',
    'text_color': '#e0e0e0',
    'grid_color': '#333333',
    'accent_colors': ['#00d4ff', '#ff6b35', '#00e676', '#ffeb3b',
                      '#e040fb', '#ff5252'],
}


def _apply_dark_style(fig, axes):
    """Apply consistent dark theme to figure and axes."""
    fig.patch.set_facecolor(STYLE['bg_color'])
    if not isinstance(axes, np.ndarray):
        axes = [axes]
    else:
        axes = axes.flatten()

    for ax in axes:
        ax.set_facecolor(STYLE['bg_color'])
        ax.tick_params(colors=STYLE['text_color'])
        ax.xaxis.label.set_color(STYLE['text_color'])
        ax.yaxis.label.set_color(STYLE['text_color'])
        ax.title.set_color(STYLE['text_color'])
        ax.grid(True, color=STYLE['grid_color'], alpha=0.4, linewidth=0.5)
        for spine in ax.spines.values():
            spine.set_color(STYLE['grid_color'])


def _legend(ax):
    ax.legend(fontsize=10, facecolor='#1a1a1a', edgecolor='#444',
              labelcolor=STYLE['text_color'])


def _finish(fig, save_path):
    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight',
                    facecolor=STYLE['bg_color'])
    return fig


def ensure_output_dir(path: str = 'outputs'):
    os.makedirs(path, exist_ok=True)
    return path


# ══════════════════════════════════════════════════════════════════════════
#  1. Drag Curves
# ══════════════════════════════════════════════════════════════════════════

def plot_drag_curves(save_path: str = None) -> plt.Figure:
    """Coefficient vs velocity for every drag family, table rows marked."""
    fig, ax = plt.subplots(figsize=(11, 6))
    _apply_dark_style(fig, ax)

    velocities = np.linspace(300, 5000, 500)
    for key, table in DRAG_TABLES.items():
        style = MODEL_STYLES[key]
        model = get_drag_model(key)
        ax.plot(velocities, model.cd_array(velocities), color=style['color'],
                linestyle=style['linestyle'], linewidth=2.5, label=style['name'])
        ax.plot([v for v, _ in table], [cd for _, cd in table], 'o',
                color=style['color'], markersize=5)

    # Speed of sound at standard conditions
    ax.axvline(x=1116, color='#ff5252', linestyle=':', alpha=0.6)
    ax.text(1130, ax.get_ylim()[1] * 0.95, 'Mach 1', color='#ff5252',
            fontsize=10, alpha=0.8, va='top')

    ax.set_xlabel('Velocity (ft/s)', fontsize=12)
    ax.set_ylabel('Drag Coefficient', fontsize=12)
    ax.set_title('Drag Coefficient vs Velocity — Standard Models',
                 fontsize=14, fontweight='bold')
    _legend(ax)
    return _finish(fig, save_path)


# ══════════════════════════════════════════════════════════════════════════
#  2. Drop Chart
# ══════════════════════════════════════════════════════════════════════════

def plot_drop_chart(solutions: List[BallisticSolution], title: str = '',
                    save_path: str = None) -> plt.Figure:
    """Drop (in) and elevation hold (mil / MOA) against distance."""
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(14, 5))
    _apply_dark_style(fig, np.array([ax1, ax2]))

    dist = np.array([s.distance_yards for s in solutions])
    drop = np.array([s.drop_inches for s in solutions])
    hold_mil = np.array([s.hold_mils for s in solutions])
    hold_moa = np.array([s.hold_moa for s in solutions])

    ax1.plot(dist, drop, color=STYLE['accent_colors'][0], linewidth=2.5, marker='o')
    ax1.axhline(y=0, color='#555', linestyle='--', alpha=0.5)
    ax1.set_xlabel('Distance (yd)')
    ax1.set_ylabel('Drop (in)')
    ax1.set_title('Drop Below Line of Sight', fontweight='bold')

    ax2.plot(dist, hold_mil, color=STYLE['accent_colors'][1], linewidth=2.5,
             marker='o', label='mil')
    ax2b = ax2.twinx()
    ax2b.plot(dist, hold_moa, color=STYLE['accent_colors'][2], linewidth=1.5,
              linestyle='--', label='MOA')
    ax2b.tick_params(colors=STYLE['text_color'])
    ax2.set_xlabel('Distance (yd)')
    ax2.set_ylabel('Hold (mil)')
    ax2b.set_ylabel('Hold (MOA)', color=STYLE['text_color'])
    ax2.set_title('Elevation Hold', fontweight='bold')
    _legend(ax2)

    if title:
        fig.suptitle(title, fontsize=14, fontweight='bold',
                     color=STYLE['text_color'], y=1.02)
    return _finish(fig, save_path)


# ══════════════════════════════════════════════════════════════════════════
#  3. Velocity & Energy
# ══════════════════════════════════════════════════════════════════════════

def plot_velocity_energy(solutions: List[BallisticSolution],
                         save_path: str = None) -> plt.Figure:
    """Remaining velocity and energy against distance."""
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(14, 5))
    _apply_dark_style(fig, np.array([ax1, ax2]))

    dist = [s.distance_yards for s in solutions]

    ax1.plot(dist, [s.velocity_fps for s in solutions],
             color=STYLE['accent_colors'][0], linewidth=2.5)
    ax1.axhline(y=1116, color='#ff5252', linestyle='--', alpha=0.6, label='Mach 1')
    ax1.set_xlabel('Distance (yd)')
    ax1.set_ylabel('Velocity (ft/s)')
    ax1.set_title('Remaining Velocity', fontweight='bold')
    _legend(ax1)

    ax2.plot(dist, [s.energy_ftlbs for s in solutions],
             color=STYLE['accent_colors'][3], linewidth=2.5)
    ax2.set_xlabel('Distance (yd)')
    ax2.set_ylabel('Energy (ft·lbs)')
    ax2.set_title('Remaining Energy', fontweight='bold')

    return _finish(fig, save_path)


# ══════════════════════════════════════════════════════════════════════════
#  4. Wind Drift vs Clock Position
# ══════════════════════════════════════════════════════════════════════════

def plot_wind_drift(rifle: RifleProfile, distance_yards: float,
                    speed_mph: float = 10.0,
                    environment: Environment = STANDARD_ENVIRONMENT,
                    save_path: Optional[str] = None) -> plt.Figure:
    """Drift (mil) for a single mid-range reading at each clock position."""
    fig, ax = plt.subplots(figsize=(10, 5))
    _apply_dark_style(fig, ax)

    clocks = list(range(1, 13))
    drift = []
    for clock in clocks:
        wind = WindVector(distance_yards=distance_yards / 2,
                          speed_mph=speed_mph, direction_clock=clock)
        drift.append(solve(rifle, distance_yards, 0.0, [wind], environment).wind_drift_mils)

    colors = [STYLE['accent_colors'][0] if d >= 0 else STYLE['accent_colors'][1]
              for d in drift]
    ax.bar(clocks, drift, color=colors, alpha=0.85, edgecolor='#555')
    ax.axhline(y=0, color='#555', linestyle='--', alpha=0.5)
    ax.set_xticks(clocks)
    ax.set_xlabel("Wind Direction (o'clock)")
    ax.set_ylabel('Drift (mil)')
    ax.set_title(f'Wind Drift — {rifle.name}, {speed_mph:.0f} mph @ '
                 f'{distance_yards:.0f} yd', fontweight='bold')
    return _finish(fig, save_path)
