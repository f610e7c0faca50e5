"""Application viewer – ViewSnapshot and Column, the render-facing model."""
from __future__ import annotations

import dataclasses
from typing import Any, Generic, Hashable, Mapping, TypeVar

from tableview.application.filtering import FilterState
from tableview.application.pagination import PaginationState
from tableview.application.projection import ShowingRange
from tableview.application.sorting import SortState
from tableview.kernel.errors import BaseError
from tableview.kernel.records import FieldKind

R = TypeVar("R")


@dataclasses.dataclass(frozen=True)
class Column:
    """Header metadata for one field."""
    name: str
    kind: FieldKind
    indicator: str = "neutral"

    @property
    def label(self) -> str:
        return self.name[:1].upper() + self.name[1:]

    @property
    def align(self) -> str:
        return "right" if self.kind is FieldKind.NUMERIC and self.name != "id" else "left"


@dataclasses.dataclass(frozen=True)
class ViewSnapshot(Generic[R]):
    """Everything the presentation layer needs for one render."""

    rows: tuple[R, ...]
    pagination: PaginationState
    loading: bool
    error: BaseError | None
    distinct_values: Mapping[str, tuple[Hashable, ...]]
    search_term: str
    filters: FilterState
    sort: SortState
    total: int

    @property
    def showing(self) -> ShowingRange:
        return ShowingRange.compute(
            self.pagination.current_page, self.pagination.page_size, len(self.rows)
        )

    @property
    def has_error(self) -> bool:
        return self.error is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "rows": [dataclasses.asdict(r) if dataclasses.is_dataclass(r) else r for r in self.rows],
            "pagination": dataclasses.asdict(self.pagination),
            "loading": self.loading,
            "error": self.error.to_dict() if self.error is not None else None,
            "distinct_values": {f: list(v) for f, v in self.distinct_values.items()},
            "search_term": self.search_term,
            "sort": {"field": self.sort.field, "direction": self.sort.direction.value},
            "showing": dataclasses.asdict(self.showing),
            "total": self.total,
        }


__all__ = ["Column", "ViewSnapshot"]
