"""Application pagination – PaginationCoordinator.

Owns ``current_page`` / ``page_size`` / ``total_pages``. Every mutator
returns ``True`` when the coordinate changed and the caller must fetch.
"""
from __future__ import annotations

from tableview.application.pagination.page import PaginationState, total_pages_for
from tableview.application.pagination.page_request import PageRequest
from tableview.kernel.errors import InvalidParameterError


class PaginationCoordinator:
    """Saturating page navigation over a server-reported total."""

    def __init__(self, page_size: int = 20) -> None:
        self._check_size(page_size)
        self._current_page = 1
        self._page_size = page_size
        self._total = 0
        self._total_pages = 0

    @staticmethod
    def _check_size(n: int) -> None:
        if isinstance(n, bool) or not isinstance(n, int) or n < 1:
            raise InvalidParameterError("page_size", n, "must be an integer >= 1")

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def total_pages(self) -> int:
        return self._total_pages

    @property
    def last_page(self) -> int:
        return max(self._total_pages, 1)

    @property
    def coordinate(self) -> tuple[int, int]:
        return (self._current_page, self._page_size)

    @property
    def state(self) -> PaginationState:
        return PaginationState(
            current_page=self._current_page,
            page_size=self._page_size,
            total_pages=self._total_pages,
        )

    def request(self, search_term: str = "") -> PageRequest:
        return PageRequest(page=self._current_page, size=self._page_size, search_term=search_term)

    def set_page_size(self, n: int) -> bool:
        """Change the page size and return to page 1; always needs a fetch.

        ``total_pages`` is recomputed from the last known total so the
        bounds stay consistent until the new fetch lands.
        """
        self._check_size(n)
        self._page_size = n
        self._total_pages = total_pages_for(self._total, n)
        self._current_page = 1
        return True

    def next_page(self) -> bool:
        return self._move_to(min(self._current_page + 1, self.last_page))

    def prev_page(self) -> bool:
        return self._move_to(max(self._current_page - 1, 1))

    def go_to_page(self, n: int) -> bool:
        if isinstance(n, bool) or not isinstance(n, int):
            raise InvalidParameterError("page", n, "must be an integer")
        return self._move_to(min(max(n, 1), self.last_page))

    def reset(self) -> bool:
        return self._move_to(1)

    def on_fetch_result(self, total: int) -> bool:
        """Recompute ``total_pages`` from the server total.

        Returns ``True`` when the current page fell out of range and was
        clamped, meaning the clamped coordinate must be fetched.
        """
        if total < 0:
            raise InvalidParameterError("total", total, "must be >= 0")
        self._total = total
        self._total_pages = total_pages_for(total, self._page_size)
        return self._move_to(min(self._current_page, self.last_page))

    def _move_to(self, page: int) -> bool:
        if page == self._current_page:
            return False
        self._current_page = page
        return True

    def __repr__(self) -> str:
        return (
            f"PaginationCoordinator(current_page={self._current_page}, "
            f"page_size={self._page_size}, total_pages={self._total_pages})"
        )


__all__ = ["PaginationCoordinator"]
