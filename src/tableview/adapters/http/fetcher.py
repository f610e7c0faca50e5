"""HTTP adapter – RemotePageFetcher and CollectionEndpoint.

The listing path is used for plain paging and a separate search path when
a search term is present; both take the same ``limit`` / ``skip`` pair.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Generic, Mapping, TypeVar

from tableview.adapters.http.client import HttpxHttpClient
from tableview.application.pagination import Page, PageRequest
from tableview.kernel.errors import InfrastructureError, MalformedResponseError
from tableview.kernel.records import PRODUCT_SCHEMA, RecordSchema
from tableview.observability.logging import get_logger
from tableview.resilience import TenacityRetryPolicy, TimeoutPolicy

R = TypeVar("R")


@dataclasses.dataclass(frozen=True)
class CollectionEndpoint:
    """Paths, query parameter names and response keys of one deployment."""
    list_path: str = "/products"
    search_path: str = "/products/search"
    limit_param: str = "limit"
    offset_param: str = "skip"
    query_param: str = "q"
    records_key: str = "products"
    total_key: str = "total"

    def route(self, request: PageRequest) -> tuple[str, dict[str, Any]]:
        """Return the path and query parameters for *request*."""
        params: dict[str, Any] = {
            self.limit_param: request.size,
            self.offset_param: request.offset,
        }
        if request.is_search:
            params = {self.query_param: request.search_term.strip(), **params}
            return self.search_path, params
        return self.list_path, params


class RemotePageFetcher(Generic[R]):
    """Fetch one page of records and the remote total over HTTP.

    Parameters
    ----------
    client:
        The HTTP client, already pointed at the collection's base URL.
    schema:
        Builds records from the decoded JSON objects.
    endpoint:
        Paths and names of the deployment.
    timeout:
        Bounds each attempt. Defaults to 10 seconds.
    retry:
        Retries transient transport failures. ``None`` means one attempt.
    """

    def __init__(
        self,
        client: HttpxHttpClient,
        schema: RecordSchema[R] = PRODUCT_SCHEMA,  # type: ignore[assignment]
        endpoint: CollectionEndpoint | None = None,
        *,
        timeout: TimeoutPolicy | None = None,
        retry: TenacityRetryPolicy | None = None,
    ) -> None:
        self._client = client
        self._schema = schema
        self._endpoint = endpoint or CollectionEndpoint()
        self._timeout = timeout or TimeoutPolicy()
        self._retry = retry
        self._log = get_logger(__name__)

    @property
    def endpoint(self) -> CollectionEndpoint:
        return self._endpoint

    async def fetch(self, page_index: int, page_size: int, search_term: str = "") -> Page[R]:
        """Fetch page *page_index* of size *page_size*.

        Raises
        ------
        InvalidParameterError
            When *page_index* or *page_size* is below 1.
        TransportError
            When the request fails, times out or returns non-JSON.
        MalformedResponseError
            When the payload lacks a usable total or records sequence.
        """
        request = PageRequest(page=page_index, size=page_size, search_term=search_term)
        path, params = self._endpoint.route(request)
        log = self._log.bind(path=path, **params)
        log.debug("page_fetch_started")
        try:
            payload = await self._call(path, params)
            page = self.parse(payload)
        except InfrastructureError as exc:
            log.warning("page_fetch_failed", error_code=exc.code, error=exc.message)
            raise
        log.info("page_fetch_completed", rows=len(page), total=page.total)
        return page

    async def _call(self, path: str, params: Mapping[str, Any]) -> Any:
        async def attempt() -> Any:
            return await self._timeout.execute(lambda: self._client.get_json(path, params=dict(params)))

        if self._retry is None:
            return await attempt()
        return await self._retry.execute_async(attempt)

    def parse(self, payload: Any) -> Page[R]:
        """Turn a decoded response body into a :class:`Page`."""
        if not isinstance(payload, Mapping):
            raise MalformedResponseError(
                f"Response body must be an object, got {type(payload).__name__}",
            )
        total_key = self._endpoint.total_key
        records_key = self._endpoint.records_key
        if total_key not in payload:
            raise MalformedResponseError(f"Response has no '{total_key}'", missing_key=total_key)
        total = payload[total_key]
        if isinstance(total, bool) or not isinstance(total, int) or total < 0:
            raise MalformedResponseError(
                f"'{total_key}' must be a non-negative integer, got {total!r}",
                detail={total_key: total},
            )
        if records_key not in payload:
            raise MalformedResponseError(f"Response has no '{records_key}'", missing_key=records_key)
        raw_records = payload[records_key]
        if not isinstance(raw_records, list):
            raise MalformedResponseError(
                f"'{records_key}' must be a list, got {type(raw_records).__name__}",
            )
        items = tuple(self._schema.parse(raw) for raw in raw_records)
        return Page(items=items, total=total)


__all__ = ["CollectionEndpoint", "RemotePageFetcher"]
