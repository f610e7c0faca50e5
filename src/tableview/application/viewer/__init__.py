"""Application viewer – the stateful table component and its render model."""
from tableview.application.viewer.snapshot import Column, ViewSnapshot
from tableview.application.viewer.source import PageSource
from tableview.application.viewer.viewer import DEFAULT_PAGE_SIZE_OPTIONS, DataViewer

__all__ = ["DEFAULT_PAGE_SIZE_OPTIONS", "Column", "DataViewer", "PageSource", "ViewSnapshot"]
