"""Application viewer – PageSource port."""
from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from tableview.application.pagination import Page

R_co = TypeVar("R_co", covariant=True)


@runtime_checkable
class PageSource(Protocol[R_co]):
    """Anything that can fetch one page of records plus the remote total.

    Implementations raise :class:`~tableview.kernel.errors.TransportError`
    or :class:`~tableview.kernel.errors.MalformedResponseError` and never
    touch viewer state.
    """

    async def fetch(self, page_index: int, page_size: int, search_term: str = "") -> Page[R_co]: ...


__all__ = ["PageSource"]
