"""
Exceptions raised by the interpolation engine.

All errors are raised synchronously at construction or lookup time.
Once a curve is bound, querying it never raises for a finite x.
"""


class CurveInterpolationError(ValueError):
    """Base class for interpolation errors."""


class InvalidNodeSetError(CurveInterpolationError):
    """Node set has too few points, mismatched lengths or unsorted x-values."""


class DomainError(CurveInterpolationError):
    """Node values are not finite or lie outside an interpolator's domain."""


class UnknownStrategyNameError(CurveInterpolationError):
    """No interpolator or extrapolator is registered under the given name."""

    def __init__(self, category: str, name: str, available=()):
        self.category = category
        self.name = name
        self.available = tuple(available)
        super().__init__(
            f"Unknown {category} '{name}'. Available: {list(self.available)}"
        )


__all__ = [
    "CurveInterpolationError",
    "InvalidNodeSetError",
    "DomainError",
    "UnknownStrategyNameError",
]
