"""Resilience – TimeoutPolicy."""
from __future__ import annotations

import asyncio
import dataclasses
from typing import Awaitable, Callable, TypeVar

from tableview.kernel.errors import FetchTimeoutError

T = TypeVar("T")


@dataclasses.dataclass
class TimeoutPolicy:
    """Bound an awaitable by ``timeout_seconds``; ``None`` disables the bound."""
    timeout_seconds: float | None = 10.0
    target: str = "remote collection"

    async def execute(self, func: Callable[[], Awaitable[T]]) -> T:
        if self.timeout_seconds is None:
            return await func()
        try:
            return await asyncio.wait_for(func(), timeout=self.timeout_seconds)
        except (asyncio.TimeoutError, TimeoutError) as exc:
            raise FetchTimeoutError(
                self.target,
                f"Fetch from {self.target} timed out after {self.timeout_seconds}s",
            ) from exc


__all__ = ["TimeoutPolicy"]
