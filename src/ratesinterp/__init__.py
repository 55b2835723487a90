"""
RatesInterp: Curve interpolation and extrapolation for rates analytics

A small library for:
- Binding interpolation families to curve nodes (TimeSquare, Linear, LogLinear, natural cubic spline)
- Extrapolating beyond the node range (flat, linear)
- Analytic first derivatives and node parameter sensitivities
- Persisting curve definitions by strategy name

Curve construction (bootstrapping) and market data are out of scope.
"""

__version__ = "0.1.0"

# Errors
from .errors import (
    CurveInterpolationError,
    InvalidNodeSetError,
    DomainError,
    UnknownStrategyNameError,
)

# Curves
from .curves import (
    registry,
    NodeSet,
    StrategyCategory,
    CurveInterpolator,
    BoundCurveInterpolator,
    CurveExtrapolator,
    TimeSquareInterpolator,
    LinearInterpolator,
    LogLinearInterpolator,
    NaturalCubicSplineInterpolator,
    FlatExtrapolator,
    LinearExtrapolator,
    CurveDefinition,
)

# Risk
from .risk import sensitivity_matrix, bumped_sensitivity, check_sensitivities, SensitivityCheck

__all__ = [
    # Version
    "__version__",
    # Errors
    "CurveInterpolationError",
    "InvalidNodeSetError",
    "DomainError",
    "UnknownStrategyNameError",
    # Curves
    "registry",
    "NodeSet",
    "StrategyCategory",
    "CurveInterpolator",
    "BoundCurveInterpolator",
    "CurveExtrapolator",
    "TimeSquareInterpolator",
    "LinearInterpolator",
    "LogLinearInterpolator",
    "NaturalCubicSplineInterpolator",
    "FlatExtrapolator",
    "LinearExtrapolator",
    "CurveDefinition",
    # Risk
    "sensitivity_matrix",
    "bumped_sensitivity",
    "check_sensitivities",
    "SensitivityCheck",
]
