"""
Interpolation methods for curves.

Provides:
- TimeSquareInterpolator: Linear interpolation of total variance x * y^2
- LinearInterpolator: Simple linear interpolation
- LogLinearInterpolator: Linear interpolation of log(y)
- NaturalCubicSplineInterpolator: Natural cubic spline

An interpolator is a stateless strategy. Calling bind() with node data and
a left/right extrapolator returns a BoundCurveInterpolator which evaluates
the curve, its first derivative and the sensitivity of the value to each
node's y-value over the whole real line.
"""

from abc import ABC, abstractmethod
import logging
import math
from typing import Sequence, Union

import numpy as np

from ..errors import DomainError
from .extrapolation import BoundCurveExtrapolator, CurveExtrapolator
from .nodes import NodeSet
from .strategy import NamedStrategy, StrategyCategory

logger = logging.getLogger(__name__)

ExtrapolatorLike = Union[CurveExtrapolator, str]


def _resolve_extrapolator(extrapolator: ExtrapolatorLike) -> CurveExtrapolator:
    if isinstance(extrapolator, CurveExtrapolator):
        return extrapolator
    from .registry import lookup
    return lookup(StrategyCategory.EXTRAPOLATOR, extrapolator)


class CurveInterpolator(NamedStrategy, ABC):
    """Abstract base class for curve interpolation families."""

    category = StrategyCategory.INTERPOLATOR

    def bind(
        self,
        x_values: Sequence[float],
        y_values: Sequence[float],
        left_extrapolator: ExtrapolatorLike,
        right_extrapolator: ExtrapolatorLike,
    ) -> "BoundCurveInterpolator":
        """
        Bind this interpolator to node data.

        Args:
            x_values: Strictly increasing node abscissas
            y_values: Node values
            left_extrapolator: Extrapolator (or its name) used below x[0]
            right_extrapolator: Extrapolator (or its name) used above x[n-1]

        Returns:
            Bound interpolator ready to be queried

        Raises:
            InvalidNodeSetError: Too few nodes, mismatched lengths or unsorted x
            DomainError: Non-finite values or values outside this family's domain
            UnknownStrategyNameError: An extrapolator name is not registered
        """
        left = _resolve_extrapolator(left_extrapolator)
        right = _resolve_extrapolator(right_extrapolator)
        nodes = NodeSet(x_values, y_values)
        self._check_domain(nodes)
        bound = self._bind_nodes(nodes, left, right)
        logger.debug(
            "Bound %s to %d nodes on [%g, %g] (left=%s, right=%s)",
            self.name, nodes.size, nodes.first_x, nodes.last_x, left, right
        )
        return bound

    def _check_domain(self, nodes: NodeSet) -> None:
        """Reject node values the family cannot represent."""

    @abstractmethod
    def _bind_nodes(
        self,
        nodes: NodeSet,
        left: CurveExtrapolator,
        right: CurveExtrapolator
    ) -> "BoundCurveInterpolator":
        pass


class BoundCurveInterpolator(ABC):
    """
    Interpolator attached to a node set and two extrapolators.

    Queries below the first node go to the left extrapolator, above the last
    node to the right extrapolator, everything else to the interior rule.
    Instances are never mutated and may be shared between threads.
    """

    def __init__(
        self,
        interpolator: CurveInterpolator,
        nodes: NodeSet,
        left: CurveExtrapolator,
        right: CurveExtrapolator,
    ):
        self._interpolator = interpolator
        self._node_set = nodes
        self._left_extrapolator = left
        self._right_extrapolator = right
        self._first_x = nodes.first_x
        self._last_x = nodes.last_x
        self._last_y = nodes.last_y
        # Extrapolators may query the interior rule while binding
        self._left: BoundCurveExtrapolator = left.bind(nodes, self)
        self._right: BoundCurveExtrapolator = right.bind(nodes, self)

    def __call__(self, x: float) -> float:
        return self.interpolate(x)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(interpolator={self.interpolator}, nodes={self.node_set.size}, "
            f"left={self.left_extrapolator}, right={self.right_extrapolator})"
        )

    @property
    def interpolator(self) -> CurveInterpolator:
        return self._interpolator

    @property
    def node_set(self) -> NodeSet:
        return self._node_set

    @property
    def left_extrapolator(self) -> CurveExtrapolator:
        return self._left_extrapolator

    @property
    def right_extrapolator(self) -> CurveExtrapolator:
        return self._right_extrapolator

    @property
    def x_values(self) -> np.ndarray:
        return self.node_set.x_values

    @property
    def y_values(self) -> np.ndarray:
        return self.node_set.y_values

    def interpolate(self, x: float) -> float:
        """Curve value at x."""
        x = float(x)
        if x < self._first_x:
            return self._left.left_extrapolate(x)
        if x > self._last_x:
            return self._right.right_extrapolate(x)
        if x == self._last_x:
            return self._last_y
        return self._interior_value(x)

    def first_derivative(self, x: float) -> float:
        """Analytic first derivative of the curve at x."""
        x = float(x)
        if x < self._first_x:
            return self._left.left_extrapolate_first_derivative(x)
        if x > self._last_x:
            return self._right.right_extrapolate_first_derivative(x)
        return self._interior_derivative(x)

    def parameter_sensitivity(self, x: float) -> np.ndarray:
        """
        Sensitivity of the value at x to each node y-value.

        Returns:
            Array s of length n with s[i] = d interpolate(x) / d y[i]
        """
        x = float(x)
        if x < self._first_x:
            return self._left.left_extrapolate_parameter_sensitivity(x)
        if x > self._last_x:
            return self._right.right_extrapolate_parameter_sensitivity(x)
        if x == self._last_x:
            return self.node_set.unit_vector(self.node_set.size - 1)
        return self._interior_sensitivity(x)

    @abstractmethod
    def _interior_value(self, x: float) -> float:
        pass

    @abstractmethod
    def _interior_derivative(self, x: float) -> float:
        pass

    @abstractmethod
    def _interior_sensitivity(self, x: float) -> np.ndarray:
        pass


class _TwoPointBound(BoundCurveInterpolator):
    """Bound interpolator whose interior rule uses only the bracketing nodes."""

    def _bracket(self, x: float):
        i = self.node_set.interval_index(x)
        xs = self.node_set.x_values
        ys = self.node_set.y_values
        return i, float(xs[i]), float(xs[i + 1]), float(ys[i]), float(ys[i + 1])

    def _two_point_vector(self, i: int, lower: float, upper: float) -> np.ndarray:
        result = np.zeros(self.node_set.size)
        result[i] = lower
        result[i + 1] = upper
        return result


class TimeSquareInterpolator(CurveInterpolator):
    """
    Time-square interpolation.

    Interpolates total variance v = x * y^2 linearly in x and returns
    y(x) = sqrt(v(x) / x). Used for volatility-like curves where the
    node values are annualised and x is time. Requires x > 0 and y > 0.
    """

    name = "TimeSquare"

    def _check_domain(self, nodes: NodeSet) -> None:
        if nodes.first_x <= 0:
            raise DomainError(f"{self.name} requires positive x_values, got x[0]={nodes.first_x}")
        if np.any(nodes.y_values <= 0):
            raise DomainError(f"{self.name} requires positive y_values: {nodes.y_values.tolist()}")

    def _bind_nodes(self, nodes, left, right):
        return BoundTimeSquareInterpolator(self, nodes, left, right)


class BoundTimeSquareInterpolator(_TwoPointBound):
    """Time-square rule; caches the node total variances x * y^2."""

    def __init__(self, interpolator, nodes, left, right):
        self._variance = nodes.x_values * nodes.y_values * nodes.y_values
        super().__init__(interpolator, nodes, left, right)

    def _weights(self, x: float):
        i, x1, x2, y1, y2 = self._bracket(x)
        w = (x2 - x) / (x2 - x1)
        a = float(self._variance[i])
        b = float(self._variance[i + 1])
        value = math.sqrt((w * a + (1.0 - w) * b) / x)
        return i, x1, x2, y1, y2, w, a, b, value

    def _interior_value(self, x: float) -> float:
        return self._weights(x)[-1]

    def _interior_derivative(self, x: float) -> float:
        _, x1, x2, _, _, _, a, b, value = self._weights(x)
        slope = (b - a) / (x2 - x1)
        return 0.5 * (slope / value - value) / x

    def _interior_sensitivity(self, x: float) -> np.ndarray:
        i, x1, x2, y1, y2, w, _, _, value = self._weights(x)
        scale = x * value
        return self._two_point_vector(i, w * x1 * y1 / scale, (1.0 - w) * x2 * y2 / scale)


class LinearInterpolator(CurveInterpolator):
    """Linear interpolation between bracketing nodes."""

    name = "Linear"

    def _bind_nodes(self, nodes, left, right):
        return BoundLinearInterpolator(self, nodes, left, right)


class BoundLinearInterpolator(_TwoPointBound):
    """Linear rule between bracketing nodes."""

    def _interior_value(self, x: float) -> float:
        _, x1, x2, y1, y2 = self._bracket(x)
        t = (x - x1) / (x2 - x1)
        return y1 + t * (y2 - y1)

    def _interior_derivative(self, x: float) -> float:
        _, x1, x2, y1, y2 = self._bracket(x)
        return (y2 - y1) / (x2 - x1)

    def _interior_sensitivity(self, x: float) -> np.ndarray:
        i, x1, x2, _, _ = self._bracket(x)
        t = (x - x1) / (x2 - x1)
        return self._two_point_vector(i, 1.0 - t, t)


class LogLinearInterpolator(CurveInterpolator):
    """
    Log-linear interpolation.

    Interpolates linearly in log(y), which on discount factors corresponds
    to piecewise constant forward rates. Requires y > 0.
    """

    name = "LogLinear"

    def _check_domain(self, nodes: NodeSet) -> None:
        if np.any(nodes.y_values <= 0):
            raise DomainError(f"{self.name} requires positive y_values: {nodes.y_values.tolist()}")

    def _bind_nodes(self, nodes, left, right):
        return BoundLogLinearInterpolator(self, nodes, left, right)


class BoundLogLinearInterpolator(_TwoPointBound):
    """Log-linear rule between bracketing nodes."""

    def _interior_value(self, x: float) -> float:
        _, x1, x2, y1, y2 = self._bracket(x)
        t = (x - x1) / (x2 - x1)
        return y1 * math.exp(t * math.log(y2 / y1))

    def _interior_derivative(self, x: float) -> float:
        _, x1, x2, y1, y2 = self._bracket(x)
        return self._interior_value(x) * math.log(y2 / y1) / (x2 - x1)

    def _interior_sensitivity(self, x: float) -> np.ndarray:
        i, x1, x2, y1, y2 = self._bracket(x)
        t = (x - x1) / (x2 - x1)
        value = self._interior_value(x)
        return self._two_point_vector(i, (1.0 - t) * value / y1, t * value / y2)


class NaturalCubicSplineInterpolator(CurveInterpolator):
    """
    Natural cubic spline interpolation.

    Second derivative is zero at both end nodes. With two nodes the
    spline degenerates to a straight line.
    """

    name = "NaturalCubicSpline"

    def _bind_nodes(self, nodes, left, right):
        return BoundNaturalCubicSplineInterpolator(self, nodes, left, right)


class BoundNaturalCubicSplineInterpolator(BoundCurveInterpolator):
    """
    Natural cubic spline in second-derivative form.

    On [x_i, x_{i+1}] with t = (x - x_i) / h_i and u = 1 - t:
        S(x) = u*y_i + t*y_{i+1} + h_i^2/6 * ((u^3 - u)*M_i + (t^3 - t)*M_{i+1})
    The second derivatives solve a tridiagonal system A M = B y, so
    M = K y with K = A^-1 B fixed by the x-values alone. Rows of K give
    the exact sensitivity of M to each node.
    """

    def __init__(self, interpolator, nodes, left, right):
        xs = nodes.x_values
        n = len(xs)
        h = np.diff(xs)

        # Natural boundary: M[0] = M[n-1] = 0
        A = np.zeros((n, n))
        B = np.zeros((n, n))
        A[0, 0] = 1.0
        A[n-1, n-1] = 1.0
        for i in range(1, n-1):
            A[i, i-1] = h[i-1]
            A[i, i] = 2 * (h[i-1] + h[i])
            A[i, i+1] = h[i]
            B[i, i-1] = 6.0 / h[i-1]
            B[i, i] = -6.0 / h[i-1] - 6.0 / h[i]
            B[i, i+1] = 6.0 / h[i]

        self._h = h
        self._m_sensitivity = np.linalg.solve(A, B)
        self._m = self._m_sensitivity @ nodes.y_values
        super().__init__(interpolator, nodes, left, right)

    def _local(self, x: float):
        i = self.node_set.interval_index(x)
        h = float(self._h[i])
        t = (x - float(self.node_set.x_values[i])) / h
        return i, h, t, 1.0 - t

    def _interior_value(self, x: float) -> float:
        i, h, t, u = self._local(x)
        ys = self.node_set.y_values
        m = self._m
        return float(
            u * ys[i] + t * ys[i+1]
            + h * h / 6.0 * ((u**3 - u) * m[i] + (t**3 - t) * m[i+1])
        )

    def _interior_derivative(self, x: float) -> float:
        i, h, t, u = self._local(x)
        ys = self.node_set.y_values
        m = self._m
        return float(
            (ys[i+1] - ys[i]) / h
            - (3 * u**2 - 1) / 6.0 * h * m[i]
            + (3 * t**2 - 1) / 6.0 * h * m[i+1]
        )

    def _interior_sensitivity(self, x: float) -> np.ndarray:
        i, h, t, u = self._local(x)
        k = self._m_sensitivity
        result = h * h / 6.0 * ((u**3 - u) * k[i] + (t**3 - t) * k[i+1])
        result[i] += u
        result[i+1] += t
        return result


# Singleton instances, one per family
TIME_SQUARE = TimeSquareInterpolator()
LINEAR = LinearInterpolator()
LOG_LINEAR = LogLinearInterpolator()
NATURAL_CUBIC_SPLINE = NaturalCubicSplineInterpolator()


__all__ = [
    "CurveInterpolator",
    "BoundCurveInterpolator",
    "TimeSquareInterpolator",
    "LinearInterpolator",
    "LogLinearInterpolator",
    "NaturalCubicSplineInterpolator",
    "TIME_SQUARE",
    "LINEAR",
    "LOG_LINEAR",
    "NATURAL_CUBIC_SPLINE",
]
