"""
Node sensitivity tables and bump-and-rebind validation.

Analytic parameter sensitivities come from the bound interpolator. This
module arranges them into a Jacobian table (query points x nodes) for
bucketed risk, and checks them against finite differences obtained by
bumping one node y-value at a time and rebinding the curve.
"""

from dataclasses import dataclass
import logging
from typing import Dict, Sequence

import numpy as np
import pandas as pd

from ..config import SENSITIVITY_BUMP, SENSITIVITY_TOLERANCE
from ..curves.interpolation import BoundCurveInterpolator

logger = logging.getLogger(__name__)


def sensitivity_matrix(
    bound: BoundCurveInterpolator,
    x_points: Sequence[float]
) -> pd.DataFrame:
    """
    Jacobian of curve values with respect to node y-values.

    Args:
        bound: Bound interpolator
        x_points: Query points

    Returns:
        DataFrame indexed by query point with one column per node x-value
    """
    rows = [bound.parameter_sensitivity(x) for x in x_points]
    matrix = np.vstack(rows) if rows else np.zeros((0, bound.node_set.size))
    return pd.DataFrame(
        matrix,
        index=pd.Index([float(x) for x in x_points], name="x"),
        columns=pd.Index(bound.x_values.tolist(), name="node"),
    )


def _rebind(bound: BoundCurveInterpolator, y_values: np.ndarray) -> BoundCurveInterpolator:
    nodes = bound.node_set.with_y_values(y_values)
    return bound.interpolator.bind(
        nodes.x_values,
        nodes.y_values,
        bound.left_extrapolator,
        bound.right_extrapolator,
    )


def bumped_sensitivity(
    bound: BoundCurveInterpolator,
    x: float,
    bump: float = SENSITIVITY_BUMP
) -> np.ndarray:
    """
    Central finite-difference sensitivity of the value at x to each node.

    Each node is bumped up and down by `bump` and the curve is rebound.
    """
    base = np.array(bound.y_values)
    result = np.zeros(len(base))
    for i in range(len(base)):
        up = base.copy()
        down = base.copy()
        up[i] += bump
        down[i] -= bump
        result[i] = (_rebind(bound, up).interpolate(x) - _rebind(bound, down).interpolate(x)) / (2 * bump)
    return result


@dataclass
class SensitivityCheck:
    """
    Comparison of analytic and bumped sensitivities.

    Attributes:
        x_points: Query points checked
        max_abs_error: Largest absolute difference over all points and nodes
        tolerance: Acceptance threshold
    """
    x_points: Sequence[float]
    max_abs_error: float
    tolerance: float

    @property
    def passed(self) -> bool:
        return self.max_abs_error <= self.tolerance

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {
            "x_points": [float(x) for x in self.x_points],
            "max_abs_error": self.max_abs_error,
            "tolerance": self.tolerance,
            "passed": self.passed,
        }


def check_sensitivities(
    bound: BoundCurveInterpolator,
    x_points: Sequence[float],
    bump: float = SENSITIVITY_BUMP,
    tolerance: float = SENSITIVITY_TOLERANCE
) -> SensitivityCheck:
    """Validate analytic sensitivities against bump-and-rebind at each point."""
    max_error = 0.0
    for x in x_points:
        analytic = bound.parameter_sensitivity(x)
        bumped = bumped_sensitivity(bound, x, bump)
        max_error = max(max_error, float(np.max(np.abs(analytic - bumped))))

    check = SensitivityCheck(x_points=list(x_points), max_abs_error=max_error, tolerance=tolerance)
    if not check.passed:
        logger.warning(
            "%s sensitivities differ from bumped values by %.3e (tolerance %.1e)",
            bound.interpolator.name, max_error, tolerance
        )
    return check
