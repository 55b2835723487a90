"""
Curves package - interpolation and extrapolation of curve nodes.

Provides:
- NodeSet: Validated (x, y) curve nodes
- CurveInterpolator / BoundCurveInterpolator: Interpolation families and their bound evaluators
- CurveExtrapolator: Behaviour outside the node range
- registry: Lookup of strategies by name
- CurveDefinition: Curve definitions persisted by strategy name
"""

from . import registry
from .nodes import NodeSet
from .strategy import NamedStrategy, StrategyCategory
from .extrapolation import (
    CurveExtrapolator,
    BoundCurveExtrapolator,
    FlatExtrapolator,
    LinearExtrapolator,
    FLAT,
    LINEAR as LINEAR_EXTRAPOLATOR,
)
from .interpolation import (
    CurveInterpolator,
    BoundCurveInterpolator,
    TimeSquareInterpolator,
    LinearInterpolator,
    LogLinearInterpolator,
    NaturalCubicSplineInterpolator,
    TIME_SQUARE,
    LINEAR,
    LOG_LINEAR,
    NATURAL_CUBIC_SPLINE,
)
from .definition import CurveDefinition

__all__ = [
    "registry",
    "NodeSet",
    "NamedStrategy",
    "StrategyCategory",
    "CurveExtrapolator",
    "BoundCurveExtrapolator",
    "FlatExtrapolator",
    "LinearExtrapolator",
    "FLAT",
    "LINEAR_EXTRAPOLATOR",
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
    "CurveDefinition",
]
