"""
Core domain layer: records, filter/sort/page state, the pure pipeline
stages and the view-state coordinator
"""

from .record import Record
from .filter_state import FilterState
from .sort_key import SortKey
from .view_state import PageState, ViewState
from .record_store import RecordStore, StoreStatus
from .pipeline import Page, filter_records, sort_records, paginate
from .stage_cache import StageCache
from .coordinator import ViewStateCoordinator, ViewSnapshot

__all__ = [
    "Record",
    "FilterState",
    "SortKey",
    "PageState",
    "ViewState",
    "RecordStore",
    "StoreStatus",
    "Page",
    "filter_records",
    "sort_records",
    "paginate",
    "StageCache",
    "ViewStateCoordinator",
    "ViewSnapshot",
]
