"""Application sorting – tri-state column sort."""
from tableview.application.sorting.engine import sort_records
from tableview.application.sorting.state import SortDirection, SortState

__all__ = ["SortDirection", "SortState", "sort_records"]
