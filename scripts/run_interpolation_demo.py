#!/usr/bin/env python
"""
Curve Interpolation Demo Script

Binds a small volatility-style curve with the chosen interpolator and
extrapolators, then prints values, first derivatives and the node
sensitivity table at a grid of query points.

Usage:
    python run_interpolation_demo.py [--interpolator NAME] [--left NAME] [--right NAME]
"""

import argparse
import logging
import sys
from pathlib import Path

import numpy as np

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from ratesinterp import CurveDefinition, check_sensitivities, registry, sensitivity_matrix
from ratesinterp.curves import StrategyCategory


SAMPLE_X = [0.001, 0.4, 1.0, 1.8, 2.8, 5.0]
SAMPLE_Y = [3.0, 4.0, 3.1, 2.0, 7.0, 2.0]


def main() -> int:
    parser = argparse.ArgumentParser(description="Curve Interpolation Demo")
    parser.add_argument(
        "--interpolator",
        default="TimeSquare",
        choices=registry.names(StrategyCategory.INTERPOLATOR),
        help="Interpolator name"
    )
    parser.add_argument(
        "--left",
        default="Flat",
        choices=registry.names(StrategyCategory.EXTRAPOLATOR),
        help="Left extrapolator name"
    )
    parser.add_argument(
        "--right",
        default="Flat",
        choices=registry.names(StrategyCategory.EXTRAPOLATOR),
        help="Right extrapolator name"
    )
    parser.add_argument("--points", type=int, default=11, help="Number of query points")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    definition = CurveDefinition(
        name="DEMO",
        x_values=SAMPLE_X,
        y_values=SAMPLE_Y,
        interpolator=args.interpolator,
        left_extrapolator=args.left,
        right_extrapolator=args.right,
    )
    bound = definition.bind()

    print("=" * 60)
    print(f"Curve {definition.name}: {bound}")
    print("=" * 60)
    x_points = np.linspace(-0.5, 6.0, args.points)
    print(f"{'x':>8} {'value':>14} {'derivative':>14}")
    for x in x_points:
        print(f"{x:8.3f} {bound.interpolate(x):14.10f} {bound.first_derivative(x):14.10f}")

    print("\nNode sensitivities:")
    print(sensitivity_matrix(bound, x_points).round(6).to_string())

    check = check_sensitivities(bound, x_points, tolerance=1e-5)
    print(f"\nBump check: max error {check.max_abs_error:.2e} ({'OK' if check.passed else 'FAILED'})")
    print(f"\nDefinition JSON: {definition.to_json()}")
    return 0 if check.passed else 1


if __name__ == "__main__":
    sys.exit(main())
