"""Resilience – timeouts."""
from tableview.resilience.timeouts.policy import TimeoutPolicy

__all__ = ["TimeoutPolicy"]
