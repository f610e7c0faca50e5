"""Application-layer errors – bad input reaching the viewer core."""

from __future__ import annotations

from typing import Any

from tableview.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class InvalidParameterError(ApplicationError):
    """A caller passed a value outside the accepted domain.

    ``parameter`` names the offending argument, ``value`` is what was passed.
    """

    default_code = "invalid_parameter"

    def __init__(
        self,
        parameter: str,
        value: Any,
        reason: str | None = None,
        **kwargs: Any,
    ) -> None:
        msg = f"Invalid value {value!r} for '{parameter}'"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg, **kwargs)
        self.parameter = parameter
        self.value = value
        self.reason = reason

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["parameter"] = self.parameter
        return base


__all__ = ["ApplicationError", "InvalidParameterError"]
