"""Config validation errors."""
from __future__ import annotations

from typing import Any

from tableview.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """The viewer cannot be configured from the given settings."""

    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A setting parsed, but its value would build a broken viewer.

    ``setting`` is the field or environment key at fault, so a message can
    point at ``TABLEVIEW_PAGE_SIZE_OPTIONS`` rather than at a stack frame.
    """

    default_code = "invalid_setting_value"

    def __init__(self, setting: str, value: Any, reason: str) -> None:
        super().__init__(
            f"{setting}={value!r} rejected: {reason}",
            detail={"setting": setting, "value": repr(value), "reason": reason},
        )
        self.setting = setting
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError"]
