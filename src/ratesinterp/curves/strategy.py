"""
Common behaviour of named interpolation and extrapolation strategies.

Strategies are stateless singletons identified by a name that is unique
within their category. Equality, hashing, str() and pickling all go
through that name, so a strategy persisted by name is restored as the
very same registered instance.
"""

from enum import Enum


class StrategyCategory(Enum):
    """Kind of curve strategy held by the registry."""
    INTERPOLATOR = "interpolator"
    EXTRAPOLATOR = "extrapolator"


class NamedStrategy:
    """Base for strategies identified by (category, name)."""

    name: str = ""
    category: StrategyCategory = StrategyCategory.INTERPOLATOR

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, NamedStrategy):
            return NotImplemented
        return self.category is other.category and self.name == other.name

    def __hash__(self) -> int:
        return hash((self.category, self.name))

    def __reduce__(self):
        from .registry import lookup
        return (lookup, (self.category, self.name))
