"""Application projection – the filtered-then-sorted view of the fetched page."""
from __future__ import annotations

import dataclasses
from typing import Iterable, TypeVar

from tableview.application.filtering import FilterState, apply_filters
from tableview.application.sorting import SortState, sort_records

R = TypeVar("R")


def project(records: Iterable[R], filters: FilterState, sort: SortState) -> tuple[R, ...]:
    """Filter, then sort. Neither the records nor the states are mutated."""
    return sort_records(apply_filters(records, filters), sort)


@dataclasses.dataclass(frozen=True)
class ShowingRange:
    """The "showing X to Y" footer numbers.

    ``end`` mixes the client-filtered row count with server-side paging,
    so with an active filter it can fall below ``start``.
    """

    start: int
    end: int

    @classmethod
    def compute(cls, current_page: int, page_size: int, shown_count: int) -> "ShowingRange":
        return cls(
            start=(current_page - 1) * page_size + 1,
            end=min(current_page * page_size, shown_count * current_page),
        )


__all__ = ["ShowingRange", "project"]
