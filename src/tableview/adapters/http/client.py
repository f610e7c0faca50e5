"""HTTP adapter – HttpxHttpClient."""
from __future__ import annotations

from typing import Any

import httpx

from tableview.kernel.errors import FetchTimeoutError, TransportError


class HttpxHttpClient:
    """Thin async httpx wrapper with structured error mapping.

    Every failure surfaces as :class:`TransportError` (or its
    :class:`FetchTimeoutError` subclass) so callers never handle httpx
    exceptions directly.
    """

    def __init__(self, base_url: str = "", timeout: float = 10.0, **kwargs: Any) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, **kwargs)

    async def __aenter__(self) -> "HttpxHttpClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("GET", url, **kwargs)

    async def get_json(self, url: str, **kwargs: Any) -> Any:
        """GET *url* and decode the body as JSON."""
        response = await self.get(url, **kwargs)
        try:
            return response.json()
        except ValueError as exc:
            raise TransportError(
                str(response.request.url),
                f"Response from GET {url} is not valid JSON",
                status_code=response.status_code,
            ) from exc

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.request(method, url, **kwargs)
            response.raise_for_status()
            return response
        except httpx.TimeoutException as exc:
            raise FetchTimeoutError(url, f"HTTP request timed out: {method} {url}") from exc
        except httpx.HTTPStatusError as exc:
            raise TransportError(
                url,
                f"HTTP {exc.response.status_code} from {method} {url}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(url, f"{method} {url} failed: {exc}") from exc


__all__ = ["HttpxHttpClient"]
