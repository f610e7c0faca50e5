"""Application viewer – DataViewer.

Ties the pagination coordinator to a :class:`PageSource` and keeps the
filter / sort state that the projection reads. Only pagination changes and
explicit fetch requests hit the source; filter and sort changes re-project
the page already in memory.

Overlapping fetches are reconciled with a monotonic token: the fetch issued
last is the only one allowed to update state when it completes.
"""
from __future__ import annotations

import itertools
from types import MappingProxyType
from typing import Any, Generic, Hashable, Mapping, Sequence, TypeVar

from tableview.application.filtering import FilterState, distinct_values_by_field
from tableview.application.pagination import Page, PaginationCoordinator, PaginationState
from tableview.application.projection import project
from tableview.application.sorting import SortState
from tableview.application.viewer.snapshot import Column, ViewSnapshot
from tableview.application.viewer.source import PageSource
from tableview.kernel.errors import BaseError, InfrastructureError, InvalidParameterError
from tableview.kernel.records import PRODUCT_SCHEMA, FieldKind, RecordSchema
from tableview.observability.logging import get_logger

R = TypeVar("R")

DEFAULT_PAGE_SIZE_OPTIONS: tuple[int, ...] = (5, 10, 20, 50)


class DataViewer(Generic[R]):
    """Paginated, filterable, sortable view over a remote collection."""

    def __init__(
        self,
        source: PageSource[R],
        schema: RecordSchema[R] = PRODUCT_SCHEMA,  # type: ignore[assignment]
        *,
        page_size: int = 20,
        page_size_options: Sequence[int] = DEFAULT_PAGE_SIZE_OPTIONS,
    ) -> None:
        for option in page_size_options:
            if isinstance(option, bool) or not isinstance(option, int) or option < 1:
                raise InvalidParameterError("page_size_options", option, "must be integers >= 1")
        self._source = source
        self._schema = schema
        self._page_size_options = tuple(page_size_options)
        self._pagination = PaginationCoordinator(page_size)
        self._page: Page[R] = Page.empty()
        self._distinct: Mapping[str, tuple[Hashable, ...]] = self._distinct_for(())
        self._filters = FilterState()
        self._sort = SortState()
        self._search_term = ""
        self._loading = False
        self._error: BaseError | None = None
        self._tokens = itertools.count(1)
        self._latest_token = 0
        self._log = get_logger(__name__)

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    @property
    def schema(self) -> RecordSchema[R]:
        return self._schema

    @property
    def page_size_options(self) -> tuple[int, ...]:
        return self._page_size_options

    @property
    def pagination(self) -> PaginationState:
        return self._pagination.state

    @property
    def page(self) -> Page[R]:
        return self._page

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def error(self) -> BaseError | None:
        return self._error

    @property
    def search_term(self) -> str:
        return self._search_term

    @property
    def filters(self) -> FilterState:
        return self._filters

    @property
    def sort(self) -> SortState:
        return self._sort

    @property
    def distinct_values(self) -> Mapping[str, tuple[Hashable, ...]]:
        return self._distinct

    @property
    def rows(self) -> tuple[R, ...]:
        return project(self._page.items, self._filters, self._sort)

    def snapshot(self) -> ViewSnapshot[R]:
        return ViewSnapshot(
            rows=self.rows,
            pagination=self._pagination.state,
            loading=self._loading,
            error=self._error,
            distinct_values=self._distinct,
            search_term=self._search_term,
            filters=self._filters,
            sort=self._sort,
            total=self._page.total,
        )

    def columns(self) -> tuple[Column, ...]:
        return tuple(
            Column(name=spec.name, kind=spec.kind, indicator=self._sort.indicator(spec.name))
            for spec in self._schema.fields
        )

    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------

    async def request_fetch(self) -> bool:
        """Fetch the current coordinate.

        Returns ``True`` when the result was applied, ``False`` when it
        failed or was superseded by a later fetch.
        """
        request = self._pagination.request(self._search_term)
        token = next(self._tokens)
        self._latest_token = token
        self._loading = True
        log = self._log.bind(
            token=token,
            page=request.page,
            page_size=request.size,
            search_term=request.search_term or None,
        )
        log.debug("page_fetch_requested")
        try:
            page = await self._source.fetch(request.page, request.size, request.search_term)
        except InfrastructureError as exc:
            if self._is_stale(token):
                log.info("stale_fetch_discarded", outcome="error", latest_token=self._latest_token)
                return False
            log.warning("page_fetch_failed", error=exc.to_dict())
            self._error = exc
            return False
        finally:
            if not self._is_stale(token):
                self._loading = False

        if self._is_stale(token):
            log.info("stale_fetch_discarded", outcome="ok", latest_token=self._latest_token)
            return False

        if self._pagination.on_fetch_result(page.total):
            log.info(
                "page_out_of_range",
                total=page.total,
                clamped_to=self._pagination.current_page,
            )
            return await self.request_fetch()

        self._page = page
        self._distinct = self._distinct_for(page.items)
        self._error = None
        log.debug("page_applied", rows=len(page), total=page.total)
        return True

    def _is_stale(self, token: int) -> bool:
        return token != self._latest_token

    def _distinct_for(self, items: Sequence[R]) -> Mapping[str, tuple[Hashable, ...]]:
        return MappingProxyType(distinct_values_by_field(items, self._schema))

    # ------------------------------------------------------------------
    # Pagination events
    # ------------------------------------------------------------------

    async def set_page_size(self, n: int) -> bool:
        self._pagination.set_page_size(n)
        return await self.request_fetch()

    async def next_page(self) -> bool:
        if not self._pagination.next_page():
            return False
        return await self.request_fetch()

    async def prev_page(self) -> bool:
        if not self._pagination.prev_page():
            return False
        return await self.request_fetch()

    async def go_to_page(self, n: int) -> bool:
        if not self._pagination.go_to_page(n):
            return False
        return await self.request_fetch()

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def set_search_term(self, term: str) -> None:
        """Store the term; it is used by the next fetch."""
        self._search_term = term

    async def submit_search(self, term: str | None = None) -> bool:
        """Search from the first page."""
        if term is not None:
            self._search_term = term
        self._pagination.reset()
        return await self.request_fetch()

    # ------------------------------------------------------------------
    # Filter and sort events (never fetch)
    # ------------------------------------------------------------------

    def toggle_categorical_value(self, field: str, value: Hashable) -> FilterState:
        self._schema.require_kind(field, FieldKind.CATEGORICAL)
        self._filters = self._filters.toggle(field, value)
        return self._filters

    def set_numeric_range(self, field: str, min: Any = None, max: Any = None) -> FilterState:  # noqa: A002
        self._schema.require_kind(field, FieldKind.NUMERIC)
        self._filters = self._filters.with_range(field, min, max)
        return self._filters

    def clear_filters(self) -> FilterState:
        self._filters = FilterState.cleared()
        return self._filters

    def click_sort_column(self, field: str) -> SortState:
        self._schema.field(field)
        self._sort = self._sort.click(field)
        return self._sort

    def close(self) -> None:
        """Teardown: drop filter and sort state."""
        self._filters = FilterState.cleared()
        self._sort = SortState()

    def __repr__(self) -> str:
        return (
            f"DataViewer(pagination={self._pagination!r}, rows={len(self._page)}, "
            f"loading={self._loading})"
        )


__all__ = ["DEFAULT_PAGE_SIZE_OPTIONS", "DataViewer"]
