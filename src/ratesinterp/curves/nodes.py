"""
Node sets anchoring an interpolated curve.

A NodeSet is an immutable pair of equal-length float arrays: x-values
(strictly increasing, typically year fractions) and y-values (rates,
discount factors, volatilities). It is validated once, at construction.
"""

from typing import Sequence

import numpy as np

from ..config import MIN_NODES
from ..errors import DomainError, InvalidNodeSetError


def _frozen_array(values: Sequence[float], label: str) -> np.ndarray:
    """Copy values into a read-only 1-D float64 array."""
    try:
        arr = np.array(values, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidNodeSetError(f"{label} must be numeric: {exc}") from exc
    if arr.ndim != 1:
        raise InvalidNodeSetError(f"{label} must be one-dimensional, got shape {arr.shape}")
    arr.setflags(write=False)
    return arr


class NodeSet:
    """
    Validated (x, y) nodes.

    Attributes:
        x_values: Strictly increasing abscissas
        y_values: Node values, same length as x_values
    """

    __slots__ = ("x_values", "y_values")

    def __init__(self, x_values: Sequence[float], y_values: Sequence[float]):
        x = _frozen_array(x_values, "x_values")
        y = _frozen_array(y_values, "y_values")

        if len(x) != len(y):
            raise InvalidNodeSetError(
                f"x_values and y_values must have same length, got {len(x)} and {len(y)}"
            )
        if len(x) < MIN_NODES:
            raise InvalidNodeSetError(
                f"Need at least {MIN_NODES} nodes for interpolation, got {len(x)}"
            )
        if not np.all(np.isfinite(x)):
            raise DomainError(f"x_values must be finite: {x.tolist()}")
        if not np.all(np.isfinite(y)):
            raise DomainError(f"y_values must be finite: {y.tolist()}")

        steps = np.diff(x)
        if np.any(steps <= 0):
            bad = int(np.argmax(steps <= 0))
            raise InvalidNodeSetError(
                f"x_values must be strictly increasing: x[{bad}]={x[bad]} >= x[{bad + 1}]={x[bad + 1]}"
            )

        object.__setattr__(self, "x_values", x)
        object.__setattr__(self, "y_values", y)

    def __setattr__(self, name, value):
        raise AttributeError("NodeSet is immutable")

    def __len__(self) -> int:
        return len(self.x_values)

    def __repr__(self) -> str:
        return f"NodeSet(x_values={self.x_values.tolist()}, y_values={self.y_values.tolist()})"

    @property
    def size(self) -> int:
        return len(self.x_values)

    @property
    def first_x(self) -> float:
        return float(self.x_values[0])

    @property
    def last_x(self) -> float:
        return float(self.x_values[-1])

    @property
    def first_y(self) -> float:
        return float(self.y_values[0])

    @property
    def last_y(self) -> float:
        return float(self.y_values[-1])

    def interval_index(self, x: float) -> int:
        """
        Index i of the interval [x[i], x[i+1]] used for x.

        Points beyond either end map to the nearest end interval, and the
        last node belongs to the last interval.
        """
        idx = int(np.searchsorted(self.x_values, x, side='right')) - 1
        return max(0, min(idx, len(self.x_values) - 2))

    def unit_vector(self, index: int) -> np.ndarray:
        """Sensitivity vector that is 1 at index and 0 elsewhere."""
        result = np.zeros(len(self.x_values))
        result[index] = 1.0
        return result

    def with_y_values(self, y_values: Sequence[float]) -> "NodeSet":
        """Copy of this node set with replaced y-values."""
        return NodeSet(self.x_values, y_values)
