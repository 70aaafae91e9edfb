"""
Rule-of-Thumb Comparison
========================
Checks solver holds against the field shortcut for a typical long-range
load zeroed at 100 yd:

    hold (mil) ≈ (distance / 100) / 2 + 0.1

The shortcut is only a sanity reference. Large, growing differences at
long range are expected once the bullet slows down.
"""

from dataclasses import dataclass
from typing import List

import numpy as np

from .atmosphere import Environment, DEFAULT_ENVIRONMENT
from .profiles import RifleProfile
from .solver import solve, DEFAULT_DOPE_RANGES


@dataclass
class RuleOfThumbResult:
    """One distance of the comparison."""
    distance_yards: float
    solver_mils: float      # elevation hold from the solver
    rule_mils: float        # elevation hold from the shortcut
    diff_mils: float        # solver − rule


def rule_of_thumb_mils(distance_yards: float) -> float:
    return (distance_yards / 100) / 2 + 0.1


def compare_to_rule_of_thumb(rifle: RifleProfile, distances=DEFAULT_DOPE_RANGES,
                             environment: Environment = DEFAULT_ENVIRONMENT,
                             verbose: bool = True) -> List[RuleOfThumbResult]:
    """
    Solve at each distance (no wind, level shot) and compare the
    elevation hold with the shortcut.
    """
    results = []

    if verbose:
        print(f"\n{'='*52}")
        print(f"  RULE-OF-THUMB CHECK: {rifle.name}")
        print(f"  BC: {rifle.ballistic_coefficient} ({rifle.drag_model}) | "
              f"MV: {rifle.muzzle_velocity_fps:.0f} fps | "
              f"Zero: {rifle.zero_distance_yards:.0f} yd")
        print(f"{'='*52}")
        print(f"{'Distance':>9} {'Hold (mil)':>11} {'Rule (mil)':>11} {'Diff':>7}")
        print("-" * 52)

    for dist in distances:
        dist = float(dist)
        solution = solve(rifle, dist, 0.0, [], environment)
        hold = solution.hold_mils
        rule = rule_of_thumb_mils(dist)
        results.append(RuleOfThumbResult(
            distance_yards=dist,
            solver_mils=hold,
            rule_mils=rule,
            diff_mils=hold - rule,
        ))

        if verbose:
            print(f"{dist:>6.0f} yd {hold:>11.2f} {rule:>11.2f} {hold - rule:>+7.2f}")

    if verbose and results:
        mean_abs = np.mean([abs(r.diff_mils) for r in results])
        print("-" * 52)
        print(f"  Mean absolute difference: {mean_abs:.2f} mil")
        print(f"{'='*52}\n")

    return results
