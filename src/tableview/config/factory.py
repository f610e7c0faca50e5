"""Config – build_viewer wiring from ViewerSettings."""
from __future__ import annotations

from typing import Any

from tableview.adapters.http import CollectionEndpoint, HttpxHttpClient, RemotePageFetcher
from tableview.application.viewer import DataViewer
from tableview.config.settings import ViewerSettings
from tableview.kernel.records import PRODUCT_SCHEMA, Product
from tableview.observability.logging import JsonLoggerFactory
from tableview.resilience import TenacityRetryPolicy, TimeoutPolicy


def build_viewer(
    settings: ViewerSettings | None = None,
    *,
    client: HttpxHttpClient | None = None,
    configure_logging: bool = True,
    **client_kwargs: Any,
) -> DataViewer[Product]:
    """Wire an httpx client, a :class:`RemotePageFetcher` and a :class:`DataViewer`.

    Pass *client* to reuse an existing HTTP client; otherwise one is created
    from ``settings.base_url`` and *client_kwargs*. The caller owns closing it.

    Logging is set up from ``settings.log_level`` and ``settings.log_json``
    unless *configure_logging* is false, for hosts that own the root logger.
    """
    settings = settings or ViewerSettings()
    if configure_logging:
        JsonLoggerFactory.configure(settings.log_level, json=settings.log_json)
    client = client or HttpxHttpClient(
        base_url=settings.base_url, timeout=settings.timeout_seconds, **client_kwargs
    )
    endpoint = CollectionEndpoint(list_path=settings.list_path, search_path=settings.search_path)
    retry = (
        TenacityRetryPolicy(max_attempts=settings.max_attempts)
        if settings.max_attempts > 1
        else None
    )
    fetcher = RemotePageFetcher(
        client,
        PRODUCT_SCHEMA,
        endpoint,
        timeout=TimeoutPolicy(settings.timeout_seconds, target=settings.base_url),
        retry=retry,
    )
    return DataViewer(
        fetcher,
        PRODUCT_SCHEMA,
        page_size=settings.default_page_size,
        page_size_options=settings.page_size_options,
    )


__all__ = ["build_viewer"]
