"""Testing fakes – in-memory doubles for the PageSource port."""
from tableview.testing.fakes.controlled import ControlledPageSource, PendingFetch
from tableview.testing.fakes.page_source import InMemoryPageSource

__all__ = ["ControlledPageSource", "InMemoryPageSource", "PendingFetch"]
