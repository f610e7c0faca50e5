"""Application sorting – stable single-key sort."""
from __future__ import annotations

from typing import Iterable, TypeVar

from tableview.application.sorting.state import SortDirection, SortState
from tableview.kernel.records import value_of

R = TypeVar("R")


def sort_records(records: Iterable[R], state: SortState) -> tuple[R, ...]:
    """Order *records* by ``state.field`` using the value type's native ordering.

    ``sorted`` is stable for ``reverse=True`` as well, so ties keep their
    fetch order in both directions. Records missing the value go last.
    """
    rows = tuple(records)
    if not state.is_active:
        return rows
    field = state.field
    present = [r for r in rows if value_of(r, field) is not None]
    missing = [r for r in rows if value_of(r, field) is None]
    ordered = sorted(
        present,
        key=lambda r: value_of(r, field),
        reverse=state.direction is SortDirection.DESCENDING,
    )
    return tuple(ordered) + tuple(missing)


__all__ = ["sort_records"]
