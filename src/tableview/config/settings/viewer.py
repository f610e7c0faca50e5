"""Config settings – ViewerSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from tableview.config.settings.base import Settings
from tableview.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class ViewerSettings(Settings):
    """Settings for the remote collection and the viewer defaults.

    Loaded from ``TABLEVIEW_*`` environment variables, e.g.
    ``TABLEVIEW_BASE_URL`` or ``TABLEVIEW_PAGE_SIZE_OPTIONS=5,10,20,50``.
    """

    _prefix: ClassVar[str] = "TABLEVIEW"

    base_url: str = "https://dummyjson.com"
    list_path: str = "/products"
    search_path: str = "/products/search"
    timeout_seconds: float = 10.0
    max_attempts: int = 1
    default_page_size: int = 20
    page_size_options: list[int] = dataclasses.field(default_factory=lambda: [5, 10, 20, 50])
    log_level: str = "INFO"
    log_json: bool = True

    def _validate(self) -> None:
        self.page_size_options = [int(v) for v in self.page_size_options]
        if self.timeout_seconds <= 0:
            raise InvalidSettingValueError("timeout_seconds", self.timeout_seconds, "must be > 0")
        if self.max_attempts < 1:
            raise InvalidSettingValueError("max_attempts", self.max_attempts, "must be >= 1")
        if not self.page_size_options or any(v < 1 for v in self.page_size_options):
            raise InvalidSettingValueError(
                "page_size_options", self.page_size_options, "must be a non-empty list of sizes >= 1"
            )
        if self.default_page_size not in self.page_size_options:
            raise InvalidSettingValueError(
                "default_page_size",
                self.default_page_size,
                f"must be one of {self.page_size_options}",
            )


__all__ = ["ViewerSettings"]
