"""Application filtering – predicate evaluation over a fetched page.

Filters only ever see the records already fetched, never the remote
collection.
"""
from __future__ import annotations

from typing import Any, Hashable, Iterable, TypeVar

from tableview.application.filtering.state import FilterState
from tableview.kernel.records import RecordSchema, value_of

R = TypeVar("R")


def matches(record: Any, state: FilterState) -> bool:
    """AND of every configured field predicate."""
    for field, accepted in state.categorical.items():
        if value_of(record, field) not in accepted:
            return False
    for field, bounds in state.numeric.items():
        if not bounds.contains(value_of(record, field)):
            return False
    return True


def apply_filters(records: Iterable[R], state: FilterState) -> tuple[R, ...]:
    if state.is_empty:
        return tuple(records)
    return tuple(r for r in records if matches(r, state))


def distinct_values(records: Iterable[Any], field: str) -> tuple[Hashable, ...]:
    """Distinct non-``None`` values of *field* in first-seen order."""
    seen: dict[Hashable, None] = {}
    for record in records:
        value = value_of(record, field)
        if value is not None:
            seen.setdefault(value, None)
    return tuple(seen)


def distinct_values_by_field(
    records: Iterable[Any], schema: RecordSchema[Any]
) -> dict[str, tuple[Hashable, ...]]:
    rows = list(records)
    return {field: distinct_values(rows, field) for field in schema.categorical_fields}


__all__ = ["apply_filters", "distinct_values", "distinct_values_by_field", "matches"]
