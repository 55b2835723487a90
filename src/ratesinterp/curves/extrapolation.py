"""
Extrapolation methods for curves.

Provides:
- FlatExtrapolator: Boundary node value held constant
- LinearExtrapolator: Tangent line at the boundary node

An extrapolator is a stateless strategy. It is bound by the interpolator
against the same node set, producing an object that evaluates the curve,
its derivative and its node sensitivities below x[0] and above x[n-1].
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import numpy as np

from ..config import LINEAR_EXTRAPOLATION_EPS
from .nodes import NodeSet
from .strategy import NamedStrategy, StrategyCategory

if TYPE_CHECKING:
    from .interpolation import BoundCurveInterpolator


class CurveExtrapolator(NamedStrategy, ABC):
    """Abstract base class for curve extrapolation families."""

    category = StrategyCategory.EXTRAPOLATOR

    @abstractmethod
    def bind(
        self,
        nodes: NodeSet,
        interpolator: "BoundCurveInterpolator"
    ) -> "BoundCurveExtrapolator":
        """
        Bind to a node set and the interior rule of a bound interpolator.

        Called by BoundCurveInterpolator during its construction; only the
        interior rule of the interpolator may be queried at that point.
        """
        pass


class BoundCurveExtrapolator(ABC):
    """Extrapolation rules on both sides of a bound node set."""

    @abstractmethod
    def left_extrapolate(self, x: float) -> float:
        pass

    @abstractmethod
    def left_extrapolate_first_derivative(self, x: float) -> float:
        pass

    @abstractmethod
    def left_extrapolate_parameter_sensitivity(self, x: float) -> np.ndarray:
        pass

    @abstractmethod
    def right_extrapolate(self, x: float) -> float:
        pass

    @abstractmethod
    def right_extrapolate_first_derivative(self, x: float) -> float:
        pass

    @abstractmethod
    def right_extrapolate_parameter_sensitivity(self, x: float) -> np.ndarray:
        pass


class FlatExtrapolator(CurveExtrapolator):
    """
    Flat extrapolation.

    Returns the boundary node value, a zero derivative, and a sensitivity
    of exactly one to the boundary node only.
    """

    name = "Flat"

    def bind(self, nodes, interpolator):
        return BoundFlatExtrapolator(nodes)


class BoundFlatExtrapolator(BoundCurveExtrapolator):
    """Flat extrapolation bound to a node set."""

    def __init__(self, nodes: NodeSet):
        self._nodes = nodes
        self._first_y = nodes.first_y
        self._last_y = nodes.last_y

    def left_extrapolate(self, x: float) -> float:
        return self._first_y

    def left_extrapolate_first_derivative(self, x: float) -> float:
        return 0.0

    def left_extrapolate_parameter_sensitivity(self, x: float) -> np.ndarray:
        return self._nodes.unit_vector(0)

    def right_extrapolate(self, x: float) -> float:
        return self._last_y

    def right_extrapolate_first_derivative(self, x: float) -> float:
        return 0.0

    def right_extrapolate_parameter_sensitivity(self, x: float) -> np.ndarray:
        return self._nodes.unit_vector(self._nodes.size - 1)


class LinearExtrapolator(CurveExtrapolator):
    """
    Linear extrapolation.

    Extends the curve along its tangent at the boundary node, so the
    extrapolated curve is C1 at x[0] and x[n-1]. The sensitivity of the
    boundary gradient is a one-sided difference of interior sensitivities.
    """

    name = "Linear"

    def bind(self, nodes, interpolator):
        return BoundLinearExtrapolator(nodes, interpolator)


class BoundLinearExtrapolator(BoundCurveExtrapolator):
    """
    Tangent-line extrapolation bound to a node set.

    Gradient sensitivities are differenced over a step that stays inside
    the end interval, so closely spaced end nodes are handled.
    """

    def __init__(self, nodes: NodeSet, interpolator: "BoundCurveInterpolator"):
        xs = nodes.x_values
        n = nodes.size
        self._nodes = nodes

        self._first_x = nodes.first_x
        self._first_y = nodes.first_y
        left_x = self._first_x + min(LINEAR_EXTRAPOLATION_EPS, 0.5 * float(xs[1] - xs[0]))
        left_step = left_x - self._first_x
        self._left_gradient = interpolator.first_derivative(self._first_x)
        self._left_gradient_sensitivity = (
            interpolator.parameter_sensitivity(left_x)
            - nodes.unit_vector(0)
        ) / left_step

        self._last_x = nodes.last_x
        self._last_y = nodes.last_y
        right_x = self._last_x - min(LINEAR_EXTRAPOLATION_EPS, 0.5 * float(xs[n - 1] - xs[n - 2]))
        right_step = self._last_x - right_x
        self._right_gradient = interpolator.first_derivative(self._last_x)
        self._right_gradient_sensitivity = (
            nodes.unit_vector(n - 1)
            - interpolator.parameter_sensitivity(right_x)
        ) / right_step

    def left_extrapolate(self, x: float) -> float:
        return self._first_y + self._left_gradient * (x - self._first_x)

    def left_extrapolate_first_derivative(self, x: float) -> float:
        return self._left_gradient

    def left_extrapolate_parameter_sensitivity(self, x: float) -> np.ndarray:
        result = self._left_gradient_sensitivity * (x - self._first_x)
        result[0] += 1.0
        return result

    def right_extrapolate(self, x: float) -> float:
        return self._last_y + self._right_gradient * (x - self._last_x)

    def right_extrapolate_first_derivative(self, x: float) -> float:
        return self._right_gradient

    def right_extrapolate_parameter_sensitivity(self, x: float) -> np.ndarray:
        result = self._right_gradient_sensitivity * (x - self._last_x)
        result[-1] += 1.0
        return result


# Singleton instances, one per family
FLAT = FlatExtrapolator()
LINEAR = LinearExtrapolator()


__all__ = [
    "CurveExtrapolator",
    "BoundCurveExtrapolator",
    "FlatExtrapolator",
    "LinearExtrapolator",
    "FLAT",
    "LINEAR",
]
