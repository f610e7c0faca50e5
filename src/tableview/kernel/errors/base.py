"""Root error class for the tableview error hierarchy."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """An error the viewer raises on purpose and knows how to show.

    ``code`` is a stable slug a front end can switch on, and ``detail``
    holds the fields a log line needs to identify the failing request.
    ``retryable`` tells the retry policy whether asking again can help.
    Chain the underlying exception with ``raise ... from exc``; it is then
    reported under ``cause`` by :meth:`to_dict`.
    """

    default_code: str = "tableview_error"
    retryable: bool = False

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Plain, JSON-ready form used for log events and ``ViewSnapshot.to_dict``."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "retryable": self.retryable,
            "detail": self.detail,
        }
        if self.__cause__ is not None:
            payload["cause"] = repr(self.__cause__)
        return payload


def is_retryable(exc: BaseException) -> bool:
    return isinstance(exc, BaseError) and exc.retryable


__all__ = ["BaseError", "is_retryable"]
