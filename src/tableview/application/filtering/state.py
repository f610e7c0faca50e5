"""Application filtering – NumericRange, FilterState, parse_bound.

``FilterState`` is an immutable value. Every update returns a new state.
"""
from __future__ import annotations

import dataclasses
import math
from types import MappingProxyType
from typing import Any, Hashable, Mapping


def parse_bound(raw: Any) -> float | None:
    """Interpret a user-entered range bound.

    Empty, non-numeric, boolean and NaN input means "no restriction".
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    else:
        return None
    if math.isnan(value):
        return None
    return value


@dataclasses.dataclass(frozen=True)
class NumericRange:
    """Inclusive ``[min, max]``; an absent bound does not restrict."""
    min: float | None = None
    max: float | None = None

    @classmethod
    def parse(cls, min: Any = None, max: Any = None) -> "NumericRange":  # noqa: A002
        return cls(min=parse_bound(min), max=parse_bound(max))

    @property
    def is_unbounded(self) -> bool:
        return self.min is None and self.max is None

    def contains(self, value: Any) -> bool:
        if self.is_unbounded:
            return True
        if value is None:
            return False
        if self.min is not None and value < self.min:
            return False
        if self.max is not None and value > self.max:
            return False
        return True


@dataclasses.dataclass(frozen=True)
class FilterState:
    """Categorical accepted-value sets and numeric ranges, keyed by field.

    Fields with an empty set or an unbounded range are dropped on
    construction, so an absent key always means "no restriction".
    """

    categorical: Mapping[str, frozenset[Hashable]] = dataclasses.field(default_factory=dict)
    numeric: Mapping[str, NumericRange] = dataclasses.field(default_factory=dict)

    def __post_init__(self) -> None:
        categorical = {f: frozenset(v) for f, v in self.categorical.items() if v}
        numeric = {f: r for f, r in self.numeric.items() if not r.is_unbounded}
        object.__setattr__(self, "categorical", MappingProxyType(categorical))
        object.__setattr__(self, "numeric", MappingProxyType(numeric))

    def __hash__(self) -> int:
        return hash((frozenset(self.categorical.items()), frozenset(self.numeric.items())))

    @property
    def is_empty(self) -> bool:
        return not self.categorical and not self.numeric

    def accepted(self, field: str) -> frozenset[Hashable]:
        return self.categorical.get(field, frozenset())

    def range_for(self, field: str) -> NumericRange:
        return self.numeric.get(field, NumericRange())

    def toggle(self, field: str, value: Hashable) -> "FilterState":
        """Add *value* to the accepted set of *field*, or remove it if present."""
        categorical = dict(self.categorical)
        categorical[field] = self.accepted(field) ^ {value}
        return FilterState(categorical=categorical, numeric=self.numeric)

    def with_range(self, field: str, min: Any = None, max: Any = None) -> "FilterState":  # noqa: A002
        numeric = dict(self.numeric)
        numeric[field] = NumericRange.parse(min, max)
        return FilterState(categorical=self.categorical, numeric=numeric)

    def clear_field(self, field: str) -> "FilterState":
        categorical = {f: v for f, v in self.categorical.items() if f != field}
        numeric = {f: r for f, r in self.numeric.items() if f != field}
        return FilterState(categorical=categorical, numeric=numeric)

    @classmethod
    def cleared(cls) -> "FilterState":
        return cls()


__all__ = ["FilterState", "NumericRange", "parse_bound"]
