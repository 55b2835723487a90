"""
Unit tests for persisted curve definitions.
"""

import numpy as np
import pytest

from ratesinterp.curves import CurveDefinition, FLAT, LINEAR_EXTRAPOLATOR, LOG_LINEAR, TIME_SQUARE
from ratesinterp.errors import InvalidNodeSetError, UnknownStrategyNameError


@pytest.fixture
def definition():
    """Reference time-square definition."""
    return CurveDefinition(
        name="VOL-TEST",
        x_values=[0.001, 0.4, 1.0, 1.8, 2.8, 5.0],
        y_values=[3.0, 4.0, 3.1, 2.0, 7.0, 2.0],
    )


class TestCurveDefinition:
    """Tests for CurveDefinition."""

    def test_defaults(self, definition):
        """Defaults are time-square with flat extrapolation."""
        assert definition.interpolator == "TimeSquare"
        assert definition.left_extrapolator == "Flat"
        assert definition.right_extrapolator == "Flat"

    def test_bind(self, definition):
        """Binding resolves strategy names."""
        bound = definition.bind()
        assert bound.interpolator is TIME_SQUARE
        assert bound.left_extrapolator is FLAT
        assert abs(bound(1.1) - 2.909037641557771) < 1e-12

    def test_dict_round_trip(self, definition):
        """Dictionary form restores an equal definition."""
        data = definition.to_dict()
        assert data["interpolator"] == "TimeSquare"
        restored = CurveDefinition.from_dict(data)
        assert restored == definition

    def test_json_round_trip(self):
        """JSON round trip rebinds to identical outputs."""
        original = CurveDefinition(
            name="DF",
            x_values=[0.5, 1.0, 2.0, 5.0],
            y_values=[0.99, 0.97, 0.93, 0.82],
            interpolator="LogLinear",
            left_extrapolator="Flat",
            right_extrapolator="Linear",
            metadata={"ccy": "USD"},
        )
        restored = CurveDefinition.from_json(original.to_json())
        assert restored.metadata == {"ccy": "USD"}

        a = original.bind()
        b = restored.bind()
        assert b.interpolator is LOG_LINEAR
        assert b.right_extrapolator is LINEAR_EXTRAPOLATOR
        for q in [0.0, 0.7, 3.0, 9.0]:
            assert a(q) == b(q)
            assert a.first_derivative(q) == b.first_derivative(q)

    def test_from_bound(self, definition):
        """A bound curve can be persisted again."""
        bound = definition.bind()
        again = CurveDefinition.from_bound("VOL-TEST", bound)
        assert again == definition

    def test_from_dict_missing_keys(self):
        """Node data is required."""
        with pytest.raises(ValueError, match="missing keys"):
            CurveDefinition.from_dict({"name": "X", "x_values": [1.0, 2.0]})

    def test_from_dict_unknown_name(self, definition):
        """Unknown strategy names fail on load."""
        data = definition.to_dict()
        data["right_extrapolator"] = "Exponential"
        with pytest.raises(UnknownStrategyNameError):
            CurveDefinition.from_dict(data)

    def test_bind_invalid_nodes(self):
        """Invalid nodes fail when the definition is bound."""
        bad = CurveDefinition(name="BAD", x_values=[1.0, 1.0], y_values=[1.0, 2.0])
        with pytest.raises(InvalidNodeSetError):
            bad.bind()

    def test_numpy_inputs_serialise(self):
        """numpy node arrays are written as plain floats."""
        d = CurveDefinition(name="NP", x_values=np.array([1.0, 2.0]), y_values=np.array([0.1, 0.2]))
        data = d.to_dict()
        assert data["x_values"] == [1.0, 2.0]
        assert all(type(v) is float for v in data["y_values"])
