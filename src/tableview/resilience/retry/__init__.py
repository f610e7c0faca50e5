"""Resilience – tenacity-backed retry."""
from tableview.resilience.retry.tenacity_adapter import TenacityRetryPolicy

__all__ = ["TenacityRetryPolicy"]
