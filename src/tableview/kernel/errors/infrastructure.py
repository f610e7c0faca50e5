"""Infrastructure errors – failures talking to the remote collection."""

from __future__ import annotations

from typing import Any

from tableview.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a caller mistake."""

    default_code = "infrastructure_error"


class TransportError(InfrastructureError):
    """The network call failed or its body could not be decoded."""

    default_code = "transport_error"
    retryable = True

    def __init__(
        self,
        url: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        kwargs.setdefault("detail", {"url": url, "status_code": status_code})
        super().__init__(message or f"Request to '{url}' failed", **kwargs)
        self.url = url
        self.status_code = status_code


class FetchTimeoutError(TransportError):
    """A fetch exceeded its deadline."""

    default_code = "fetch_timeout"


class MalformedResponseError(InfrastructureError):
    """The payload decoded but lacks a usable ``total`` or records sequence."""

    default_code = "malformed_response"

    def __init__(
        self,
        message: str,
        *,
        missing_key: str | None = None,
        **kwargs: Any,
    ) -> None:
        if missing_key is not None:
            kwargs.setdefault("detail", {"missing_key": missing_key})
        super().__init__(message, **kwargs)
        self.missing_key = missing_key


__all__ = [
    "FetchTimeoutError",
    "InfrastructureError",
    "MalformedResponseError",
    "TransportError",
]
