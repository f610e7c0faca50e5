"""Application pagination – PageRequest."""
from __future__ import annotations

import dataclasses

from tableview.kernel.errors import InvalidParameterError


@dataclasses.dataclass(frozen=True)
class PageRequest:
    """Offset-based pagination parameters for one remote fetch."""
    page: int = 1
    size: int = 20
    search_term: str = ""

    def __post_init__(self) -> None:
        if self.page < 1:
            raise InvalidParameterError("page", self.page, "must be >= 1")
        if self.size < 1:
            raise InvalidParameterError("size", self.size, "must be >= 1")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size

    @property
    def is_search(self) -> bool:
        return bool(self.search_term.strip())


__all__ = ["PageRequest"]
