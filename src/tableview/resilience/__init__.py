"""Resilience – timeout and retry wrappers for remote fetches."""
from tableview.resilience.retry import TenacityRetryPolicy
from tableview.resilience.timeouts import TimeoutPolicy

__all__ = ["TenacityRetryPolicy", "TimeoutPolicy"]
