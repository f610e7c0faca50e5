"""Resilience – TenacityRetryPolicy adapter.

Retries errors flagged ``retryable``, i.e. transport failures and timeouts.
:class:`~tableview.kernel.errors.MalformedResponseError` is never retried:
asking again for the same page returns the same payload.
"""
from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, TypeVar

import tenacity

from tableview.kernel.errors import is_retryable

T = TypeVar("T")
logger = logging.getLogger(__name__)


class TenacityRetryPolicy:
    """Retry policy backed by the ``tenacity`` library.

    Parameters
    ----------
    max_attempts:
        Maximum number of call attempts (including the first call).
        ``1`` disables retrying.
    wait:
        A ``tenacity`` wait strategy. Defaults to
        ``wait_exponential(multiplier=0.1, max=2)``.
    retry:
        A ``tenacity`` retry predicate. Defaults to
        ``retry_if_exception(is_retryable)``.
    kwargs:
        Additional keyword arguments forwarded to
        :class:`tenacity.AsyncRetrying`.

    Example
    -------
    ::

        policy = TenacityRetryPolicy(max_attempts=3, wait=tenacity.wait_none())
        page = await policy.execute_async(lambda: fetcher.fetch(1, 20))
    """

    def __init__(
        self,
        max_attempts: int = 3,
        wait: Any = None,
        retry: Any = None,
        **kwargs: Any,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        self._max_attempts = max_attempts
        self._wait = wait or tenacity.wait_exponential(multiplier=0.1, max=2)
        self._retry = retry or tenacity.retry_if_exception(is_retryable)
        self._extra_kwargs = kwargs

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    def _build_async_retrying(self) -> tenacity.AsyncRetrying:
        return tenacity.AsyncRetrying(
            stop=tenacity.stop_after_attempt(self._max_attempts),
            wait=self._wait,
            retry=self._retry,
            reraise=True,
            before_sleep=tenacity.before_sleep_log(logger, logging.DEBUG),
            **self._extra_kwargs,
        )

    async def execute_async(self, func: Callable[[], Awaitable[T]]) -> T:
        """Execute *func* asynchronously with tenacity retry."""
        async for attempt in self._build_async_retrying():
            with attempt:
                result = await func()
        return result  # type: ignore[return-value]


__all__ = ["TenacityRetryPolicy"]
