"""
Core domain layer: signal records, filter / sort / pagination engines,
column configuration and the view controller that composes them
"""

from .filter_engine import apply_filters
from .filter_state import DateTimeRange, FilterSpec, NumericRange, empty_filter_spec
from .pagination import PaginationState, paginate
from .record import SignalRecord
from .sort_engine import SortSpec, sort_records
from .view_controller import SignalBrowserController

__all__ = [
    "SignalRecord",
    "FilterSpec",
    "NumericRange",
    "DateTimeRange",
    "empty_filter_spec",
    "apply_filters",
    "SortSpec",
    "sort_records",
    "PaginationState",
    "paginate",
    "SignalBrowserController",
]
