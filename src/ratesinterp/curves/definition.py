"""
Persisted curve definitions.

A CurveDefinition records node data and the names of the interpolator and
extrapolators. It serialises to plain dicts / JSON and rebinds to an
operationally identical BoundCurveInterpolator.
"""

from dataclasses import dataclass, field
import json
import logging
from typing import Dict, List

from ..config import DEFAULT_EXTRAPOLATOR, DEFAULT_INTERPOLATOR
from . import registry
from .interpolation import BoundCurveInterpolator

logger = logging.getLogger(__name__)


@dataclass
class CurveDefinition:
    """
    Named interpolated curve definition.

    Attributes:
        name: Curve identifier (e.g. "USD-SOFR-VOL")
        x_values: Node abscissas, usually year fractions
        y_values: Node values
        interpolator: Interpolator name
        left_extrapolator: Extrapolator name used below the first node
        right_extrapolator: Extrapolator name used above the last node
    """
    name: str
    x_values: List[float]
    y_values: List[float]
    interpolator: str = DEFAULT_INTERPOLATOR
    left_extrapolator: str = DEFAULT_EXTRAPOLATOR
    right_extrapolator: str = DEFAULT_EXTRAPOLATOR
    metadata: Dict[str, str] = field(default_factory=dict)

    def bind(self) -> BoundCurveInterpolator:
        """Resolve strategy names and bind the node data."""
        interp = registry.interpolator(self.interpolator)
        bound = interp.bind(
            self.x_values,
            self.y_values,
            registry.extrapolator(self.left_extrapolator),
            registry.extrapolator(self.right_extrapolator),
        )
        logger.debug("Bound curve definition %s", self.name)
        return bound

    @classmethod
    def from_bound(cls, name: str, bound: BoundCurveInterpolator) -> "CurveDefinition":
        """Definition reproducing an existing bound interpolator."""
        return cls(
            name=name,
            x_values=bound.x_values.tolist(),
            y_values=bound.y_values.tolist(),
            interpolator=bound.interpolator.name,
            left_extrapolator=bound.left_extrapolator.name,
            right_extrapolator=bound.right_extrapolator.name,
        )

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "x_values": [float(x) for x in self.x_values],
            "y_values": [float(y) for y in self.y_values],
            "interpolator": self.interpolator,
            "left_extrapolator": self.left_extrapolator,
            "right_extrapolator": self.right_extrapolator,
            "metadata": dict(self.metadata),
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "CurveDefinition":
        """
        Create a definition from a dictionary.

        Strategy names are checked against the registry so that an unknown
        name fails here rather than at bind time.
        """
        missing = [k for k in ("name", "x_values", "y_values") if k not in data]
        if missing:
            raise ValueError(f"Curve definition missing keys: {missing}")

        definition = cls(
            name=data["name"],
            x_values=list(data["x_values"]),
            y_values=list(data["y_values"]),
            interpolator=data.get("interpolator", DEFAULT_INTERPOLATOR),
            left_extrapolator=data.get("left_extrapolator", DEFAULT_EXTRAPOLATOR),
            right_extrapolator=data.get("right_extrapolator", DEFAULT_EXTRAPOLATOR),
            metadata=dict(data.get("metadata", {})),
        )
        registry.interpolator(definition.interpolator)
        registry.extrapolator(definition.left_extrapolator)
        registry.extrapolator(definition.right_extrapolator)
        return definition

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str) -> "CurveDefinition":
        return cls.from_dict(json.loads(text))
