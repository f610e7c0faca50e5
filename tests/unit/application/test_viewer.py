"""Unit tests for DataViewer – fetch flow, staleness, errors, events."""

from __future__ import annotations

import asyncio

import pytest

from tableview.application.pagination import Page, PaginationState
from tableview.application.sorting import SortDirection, SortState
from tableview.application.viewer import DataViewer, PageSource
from tableview.kernel.errors import (
    InvalidParameterError,
    MalformedResponseError,
    TransportError,
)
from tableview.kernel.records import PRODUCT_SCHEMA, FieldKind, Product
from tableview.testing.fakes import ControlledPageSource, InMemoryPageSource


async def _settle() -> None:
    for _ in range(5):
        await asyncio.sleep(0)


def _viewer(records: list[Product], page_size: int = 10) -> tuple[DataViewer[Product], InMemoryPageSource[Product]]:
    source = InMemoryPageSource(records, PRODUCT_SCHEMA)
    return DataViewer(source, page_size=page_size), source


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_fakes_satisfy_port(self) -> None:
        assert isinstance(InMemoryPageSource([]), PageSource)
        assert isinstance(ControlledPageSource(), PageSource)

    def test_initial_snapshot(self) -> None:
        viewer, _ = _viewer([])
        snap = viewer.snapshot()
        assert snap.rows == ()
        assert snap.pagination == PaginationState(current_page=1, page_size=10, total_pages=0)
        assert snap.loading is False
        assert snap.error is None
        assert dict(snap.distinct_values) == {"brand": (), "category": ()}

    def test_default_page_size_options(self) -> None:
        viewer, _ = _viewer([])
        assert viewer.page_size_options == (5, 10, 20, 50)

    def test_invalid_page_size_option_rejected(self) -> None:
        with pytest.raises(InvalidParameterError):
            DataViewer(InMemoryPageSource([]), page_size_options=(10, 0))

    def test_invalid_page_size_rejected(self) -> None:
        with pytest.raises(InvalidParameterError):
            DataViewer(InMemoryPageSource([]), page_size=0)


# ---------------------------------------------------------------------------
# Fetching and pagination
# ---------------------------------------------------------------------------


class TestFetchFlow:
    def test_request_fetch_loads_first_page(self, catalogue: list[Product]) -> None:
        viewer, source = _viewer(catalogue)

        assert asyncio.run(viewer.request_fetch()) is True
        assert [p.id for p in viewer.rows] == list(range(1, 11))
        assert viewer.pagination.total_pages == 5
        assert viewer.page.total == 45
        assert source.calls[-1].offset == 0

    def test_distinct_values_come_from_fetched_page(self, catalogue: list[Product]) -> None:
        viewer, _ = _viewer(catalogue, page_size=2)
        asyncio.run(viewer.request_fetch())
        # Products 1 and 2 are both laptops.
        assert viewer.distinct_values["category"] == ("laptops",)
        assert viewer.distinct_values["brand"] == ("Acme", "Zeta")

    def test_next_and_prev_fetch_with_offset(self, catalogue: list[Product]) -> None:
        viewer, source = _viewer(catalogue)

        async def run() -> None:
            await viewer.request_fetch()
            assert await viewer.next_page() is True
            assert source.calls[-1].offset == 10
            assert viewer.rows[0].id == 11
            assert await viewer.prev_page() is True
            assert viewer.rows[0].id == 1

        asyncio.run(run())

    def test_prev_on_first_page_does_not_fetch(self, catalogue: list[Product]) -> None:
        viewer, source = _viewer(catalogue)

        async def run() -> None:
            await viewer.request_fetch()
            assert await viewer.prev_page() is False

        asyncio.run(run())
        assert len(source.calls) == 1

    def test_next_on_last_page_does_not_fetch(self, catalogue: list[Product]) -> None:
        viewer, source = _viewer(catalogue)

        async def run() -> None:
            await viewer.request_fetch()
            await viewer.go_to_page(5)
            assert await viewer.next_page() is False

        asyncio.run(run())
        assert viewer.pagination.current_page == 5
        assert len(source.calls) == 2
        assert [p.id for p in viewer.rows] == list(range(41, 46))

    def test_set_page_size_returns_to_first_page(self, catalogue: list[Product]) -> None:
        viewer, source = _viewer(catalogue)

        async def run() -> None:
            await viewer.request_fetch()
            await viewer.go_to_page(3)
            await viewer.set_page_size(20)

        asyncio.run(run())
        assert viewer.pagination == PaginationState(current_page=1, page_size=20, total_pages=3)
        assert (source.calls[-1].page, source.calls[-1].size) == (1, 20)

    def test_page_beyond_new_total_is_clamped_and_refetched(self, catalogue: list[Product]) -> None:
        viewer, source = _viewer(catalogue)

        async def run() -> None:
            await viewer.request_fetch()
            await viewer.go_to_page(4)
            viewer.set_search_term("Phone")
            await viewer.request_fetch()

        asyncio.run(run())
        # 15 phones -> 2 pages; page 4 is clamped to 2 and fetched again.
        assert viewer.pagination.current_page == 2
        assert source.calls[-1].page == 2
        assert len(viewer.rows) == 5


class TestStaleFetch:
    def test_later_fetch_wins_when_earlier_resolves_last(self, product_factory) -> None:
        source: ControlledPageSource[Product] = ControlledPageSource()
        viewer = DataViewer(source, page_size=2)
        page_one = [product_factory(1), product_factory(2)]
        page_two = [product_factory(3), product_factory(4)]

        async def run() -> None:
            prime = asyncio.create_task(viewer.request_fetch())
            await _settle()
            source.last().resolve(page_one, total=4)
            await prime

            fetch_a = asyncio.create_task(viewer.request_fetch())
            await _settle()
            fetch_b = asyncio.create_task(viewer.next_page())
            await _settle()
            a, b = source.pending[1], source.pending[2]
            assert (a.page_index, b.page_index) == (1, 2)
            assert viewer.loading is True

            b.resolve(page_two, total=4)
            assert await fetch_b is True
            a.resolve(page_one, total=4)
            assert await fetch_a is False

        asyncio.run(run())
        assert [p.id for p in viewer.rows] == [3, 4]
        assert viewer.pagination.current_page == 2
        assert viewer.loading is False

    def test_stale_result_ignored_while_latest_in_flight(self, product_factory) -> None:
        source: ControlledPageSource[Product] = ControlledPageSource()
        viewer = DataViewer(source, page_size=2)

        async def run() -> None:
            first = asyncio.create_task(viewer.request_fetch())
            await _settle()
            second = asyncio.create_task(viewer.set_page_size(5))
            await _settle()
            source.pending[0].resolve([product_factory(1)], total=1)
            assert await first is False
            assert viewer.loading is True
            assert viewer.rows == ()
            source.pending[1].resolve([product_factory(9)], total=1)
            assert await second is True

        asyncio.run(run())
        assert [p.id for p in viewer.rows] == [9]

    def test_stale_failure_does_not_set_error(self, product_factory) -> None:
        source: ControlledPageSource[Product] = ControlledPageSource()
        viewer = DataViewer(source, page_size=2)

        async def run() -> None:
            first = asyncio.create_task(viewer.request_fetch())
            await _settle()
            second = asyncio.create_task(viewer.request_fetch())
            await _settle()
            source.pending[1].resolve([product_factory(1)], total=1)
            await second
            source.pending[0].fail(TransportError("http://svc", "down"))
            assert await first is False

        asyncio.run(run())
        assert viewer.error is None
        assert [p.id for p in viewer.rows] == [1]


class TestFetchErrors:
    def test_transport_error_keeps_prior_rows(self, catalogue: list[Product]) -> None:
        viewer, source = _viewer(catalogue)

        async def run() -> None:
            await viewer.request_fetch()
            source.fail_with = TransportError("http://svc/products", "connection refused")
            assert await viewer.next_page() is False

        asyncio.run(run())
        assert [p.id for p in viewer.rows] == list(range(1, 11))
        assert isinstance(viewer.error, TransportError)
        assert viewer.loading is False
        assert viewer.snapshot().has_error

    def test_malformed_response_surfaces_as_error(self, catalogue: list[Product]) -> None:
        viewer, source = _viewer(catalogue)
        source.fail_with = MalformedResponseError("no total", missing_key="total")

        assert asyncio.run(viewer.request_fetch()) is False
        assert isinstance(viewer.error, MalformedResponseError)
        assert viewer.rows == ()

    def test_successful_fetch_clears_error(self, catalogue: list[Product]) -> None:
        viewer, source = _viewer(catalogue)

        async def run() -> None:
            source.fail_with = TransportError("http://svc")
            await viewer.request_fetch()
            source.fail_with = None
            await viewer.request_fetch()

        asyncio.run(run())
        assert viewer.error is None
        assert len(viewer.rows) == 10

    def test_unexpected_errors_propagate_and_clear_loading(self) -> None:
        class Broken:
            async def fetch(self, page_index: int, page_size: int, search_term: str = "") -> Page[Product]:
                raise RuntimeError("bug")

        viewer: DataViewer[Product] = DataViewer(Broken())
        with pytest.raises(RuntimeError):
            asyncio.run(viewer.request_fetch())
        assert viewer.loading is False


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------


class TestSearch:
    def test_set_search_term_does_not_fetch(self, catalogue: list[Product]) -> None:
        viewer, source = _viewer(catalogue)
        viewer.set_search_term("Phone")
        assert source.calls == []
        assert viewer.search_term == "Phone"

    def test_submit_search_fetches_first_page(self, catalogue: list[Product]) -> None:
        viewer, source = _viewer(catalogue)

        async def run() -> None:
            await viewer.request_fetch()
            await viewer.next_page()
            await viewer.submit_search("phone")

        asyncio.run(run())
        assert source.calls[-1].page == 1
        assert source.calls[-1].search_term == "phone"
        assert viewer.page.total == 15
        assert all(p.category == "phones" for p in viewer.rows)

    def test_pagination_keeps_search_term(self, catalogue: list[Product]) -> None:
        viewer, source = _viewer(catalogue, page_size=5)

        async def run() -> None:
            await viewer.submit_search("phone")
            await viewer.next_page()

        asyncio.run(run())
        assert source.calls[-1].search_term == "phone"
        assert source.calls[-1].offset == 5


# ---------------------------------------------------------------------------
# Filter and sort events
# ---------------------------------------------------------------------------


class TestLocalEvents:
    def _loaded(self, records: list[Product]) -> tuple[DataViewer[Product], InMemoryPageSource[Product]]:
        viewer, source = _viewer(records)
        asyncio.run(viewer.request_fetch())
        return viewer, source

    def test_filters_and_sort_do_not_fetch(self, five_products: list[Product]) -> None:
        viewer, source = self._loaded(five_products)
        viewer.toggle_categorical_value("brand", "Acme")
        viewer.set_numeric_range("price", "1", "")
        viewer.click_sort_column("price")
        viewer.clear_filters()
        assert len(source.calls) == 1

    def test_brand_toggle_narrows_rows(self, five_products: list[Product]) -> None:
        viewer, _ = self._loaded(five_products)
        viewer.toggle_categorical_value("brand", "Acme")
        assert [p.id for p in viewer.rows] == [1, 3]
        viewer.toggle_categorical_value("brand", "Acme")
        assert len(viewer.rows) == 5

    def test_price_range_with_text_bounds(self, five_products: list[Product]) -> None:
        viewer, _ = self._loaded(five_products)
        viewer.set_numeric_range("price", "10", "30")
        assert [p.price for p in viewer.rows] == [10, 25, 15]
        viewer.set_numeric_range("price", "ten", "")
        assert len(viewer.rows) == 5

    def test_sort_cycle_example(self, five_products: list[Product]) -> None:
        viewer, _ = self._loaded(five_products)
        viewer.click_sort_column("price")
        assert [p.price for p in viewer.rows] == [5, 10, 15, 25, 40]
        viewer.click_sort_column("price")
        assert [p.price for p in viewer.rows] == [40, 25, 15, 10, 5]
        assert viewer.click_sort_column("price") == SortState("price", SortDirection.NONE)
        assert [p.price for p in viewer.rows] == [10, 25, 5, 40, 15]

    def test_unknown_fields_rejected(self, five_products: list[Product]) -> None:
        viewer, _ = self._loaded(five_products)
        with pytest.raises(InvalidParameterError):
            viewer.toggle_categorical_value("colour", "red")
        with pytest.raises(InvalidParameterError):
            viewer.set_numeric_range("brand", 1, 2)
        with pytest.raises(InvalidParameterError):
            viewer.click_sort_column("colour")

    def test_filters_survive_page_change(self, catalogue: list[Product]) -> None:
        viewer, _ = _viewer(catalogue)

        async def run() -> None:
            await viewer.request_fetch()
            viewer.toggle_categorical_value("category", "phones")
            await viewer.next_page()

        asyncio.run(run())
        assert [p.id for p in viewer.rows] == [12, 15, 18]

    def test_close_resets_filter_and_sort(self, five_products: list[Product]) -> None:
        viewer, _ = self._loaded(five_products)
        viewer.toggle_categorical_value("brand", "Acme")
        viewer.click_sort_column("price")
        viewer.close()
        assert viewer.filters.is_empty
        assert viewer.sort == SortState()


# ---------------------------------------------------------------------------
# Render model
# ---------------------------------------------------------------------------


class TestRenderModel:
    def test_columns(self, five_products: list[Product]) -> None:
        viewer, _ = _viewer(five_products)
        viewer.click_sort_column("price")
        columns = {c.name: c for c in viewer.columns()}
        assert list(columns) == ["id", "title", "brand", "category", "price", "stock", "rating"]
        assert columns["price"].label == "Price"
        assert columns["price"].indicator == "asc"
        assert columns["title"].indicator == "neutral"
        assert columns["price"].align == "right"
        assert columns["id"].align == "left"
        assert columns["brand"].kind is FieldKind.CATEGORICAL

    def test_snapshot_showing_and_dict(self, catalogue: list[Product]) -> None:
        viewer, _ = _viewer(catalogue)

        async def run() -> None:
            await viewer.request_fetch()
            await viewer.next_page()

        asyncio.run(run())
        viewer.toggle_categorical_value("category", "phones")
        snap = viewer.snapshot()
        assert (snap.showing.start, snap.showing.end) == (11, 6)
        payload = snap.to_dict()
        assert payload["pagination"] == {"current_page": 2, "page_size": 10, "total_pages": 5}
        assert payload["total"] == 45
        assert [row["id"] for row in payload["rows"]] == [12, 15, 18]
        assert payload["error"] is None
