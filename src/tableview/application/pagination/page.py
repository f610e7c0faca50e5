"""Application pagination – Page, PaginationState."""
from __future__ import annotations

import dataclasses
import math
from typing import Generic, TypeVar

from tableview.kernel.errors import InvalidParameterError

T = TypeVar("T")


def total_pages_for(total: int, page_size: int) -> int:
    """``ceil(total / page_size)``; zero for an empty collection."""
    if total <= 0:
        return 0
    return math.ceil(total / page_size)


@dataclasses.dataclass(frozen=True)
class Page(Generic[T]):
    """One server-fetched batch of records plus the server-side total.

    ``total`` counts the whole remote collection matching the search term,
    independent of any local filter.
    """

    items: tuple[T, ...]
    total: int

    def __post_init__(self) -> None:
        if self.total < 0:
            raise InvalidParameterError("total", self.total, "must be >= 0")

    def __len__(self) -> int:
        return len(self.items)

    @classmethod
    def empty(cls) -> "Page[T]":
        return cls(items=(), total=0)


@dataclasses.dataclass(frozen=True)
class PaginationState:
    """Snapshot of the coordinator: current page, page size, total pages."""

    current_page: int
    page_size: int
    total_pages: int

    @property
    def last_page(self) -> int:
        return max(self.total_pages, 1)

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1


__all__ = ["Page", "PaginationState", "total_pages_for"]
