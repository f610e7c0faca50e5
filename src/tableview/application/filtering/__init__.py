"""Application filtering – composable categorical and numeric-range predicates."""
from tableview.application.filtering.engine import (
    apply_filters,
    distinct_values,
    distinct_values_by_field,
    matches,
)
from tableview.application.filtering.state import FilterState, NumericRange, parse_bound

__all__ = [
    "FilterState",
    "NumericRange",
    "apply_filters",
    "distinct_values",
    "distinct_values_by_field",
    "matches",
    "parse_bound",
]
