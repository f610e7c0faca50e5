"""Application sorting – SortDirection, SortState."""
from __future__ import annotations

import dataclasses
from enum import Enum


class SortDirection(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"
    NONE = "none"


@dataclasses.dataclass(frozen=True)
class SortState:
    """Single-column tri-state sort.

    After a third click the field is kept with direction ``NONE`` so the
    column can still show a neutral indicator.
    """
    field: str | None = None
    direction: SortDirection = SortDirection.NONE

    @property
    def is_active(self) -> bool:
        return self.field is not None and self.direction is not SortDirection.NONE

    def click(self, field: str) -> "SortState":
        """Advance the ascending → descending → none cycle for *field*."""
        if field != self.field:
            return SortState(field, SortDirection.ASCENDING)
        if self.direction is SortDirection.ASCENDING:
            return SortState(field, SortDirection.DESCENDING)
        if self.direction is SortDirection.DESCENDING:
            return SortState(field, SortDirection.NONE)
        return SortState(field, SortDirection.ASCENDING)

    def indicator(self, field: str) -> str:
        """``"asc"``, ``"desc"`` or ``"neutral"`` for the header of *field*."""
        if field != self.field or self.direction is SortDirection.NONE:
            return "neutral"
        return self.direction.value


__all__ = ["SortDirection", "SortState"]
