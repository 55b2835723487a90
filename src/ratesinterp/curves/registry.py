"""
Name-based lookup of interpolators and extrapolators.

The tables are built once at import time and exposed read-only. Persisted
curve definitions refer to strategies by these names, and pickled
strategies are restored through lookup().
"""

import logging
from types import MappingProxyType
from typing import Iterable, List, Mapping, Union

from ..errors import UnknownStrategyNameError
from . import extrapolation, interpolation
from .extrapolation import CurveExtrapolator
from .interpolation import CurveInterpolator
from .strategy import NamedStrategy, StrategyCategory

logger = logging.getLogger(__name__)


def _build(strategies: Iterable[NamedStrategy]) -> Mapping[str, NamedStrategy]:
    table = {}
    for strategy in strategies:
        if strategy.name in table:
            raise ValueError(f"{strategy.category.value} '{strategy.name}' already registered")
        table[strategy.name] = strategy
    return MappingProxyType(table)


_REGISTRY: Mapping[StrategyCategory, Mapping[str, NamedStrategy]] = MappingProxyType({
    StrategyCategory.INTERPOLATOR: _build([
        interpolation.TIME_SQUARE,
        interpolation.LINEAR,
        interpolation.LOG_LINEAR,
        interpolation.NATURAL_CUBIC_SPLINE,
    ]),
    StrategyCategory.EXTRAPOLATOR: _build([
        extrapolation.FLAT,
        extrapolation.LINEAR,
    ]),
})


def _category(category: Union[StrategyCategory, str]) -> StrategyCategory:
    try:
        return StrategyCategory(category)
    except ValueError as exc:
        raise UnknownStrategyNameError(
            "category", str(category), [c.value for c in StrategyCategory]
        ) from exc


def lookup(category: Union[StrategyCategory, str], name: str) -> NamedStrategy:
    """
    Retrieve a registered strategy by category and name.

    Args:
        category: StrategyCategory or its value ("interpolator", "extrapolator")
        name: Exact strategy name, e.g. "TimeSquare" or "Flat"

    Raises:
        UnknownStrategyNameError: If category is unknown or no strategy is
            registered under name
    """
    category = _category(category)
    table = _REGISTRY[category]
    try:
        return table[name]
    except (KeyError, TypeError) as exc:
        logger.debug("Lookup of unknown %s %r", category.value, name)
        raise UnknownStrategyNameError(category.value, name, table) from exc


def interpolator(name: str) -> CurveInterpolator:
    """Retrieve an interpolator by name."""
    return lookup(StrategyCategory.INTERPOLATOR, name)


def extrapolator(name: str) -> CurveExtrapolator:
    """Retrieve an extrapolator by name."""
    return lookup(StrategyCategory.EXTRAPOLATOR, name)


def names(category: Union[StrategyCategory, str]) -> List[str]:
    """Registered names in a category, in registration order."""
    return list(_REGISTRY[_category(category)])


__all__ = ["lookup", "interpolator", "extrapolator", "names"]
