from __future__ import annotations

from typing import Dict, Tuple

from directory_browser.core.collation import CollationKey, default_collation_key
from directory_browser.core.filter_state import FilterState
from directory_browser.core.pipeline import filter_records, sort_records
from directory_browser.core.record import Record
from directory_browser.core.record_store import RecordStore
from directory_browser.core.sort_key import SortKey


FilterKey = Tuple[str, tuple]
SortCacheKey = Tuple[str, tuple, SortKey]


class StageCache:
    """
    Memoises the filter and sort stages keyed by their inputs.

    Keys include the store token, so results never leak between record
    collections. The cache can be shared by many coordinators over the same
    store (one per UI callback), since every entry is a pure function of its key.
    """

    MAX_FILTER_CACHE = 128
    MAX_SORT_CACHE = 128

    def __init__(self, collation: CollationKey = default_collation_key) -> None:
        self.collation = collation
        self._filtered: Dict[FilterKey, Tuple[Record, ...]] = {}
        self._sorted: Dict[SortCacheKey, Tuple[Record, ...]] = {}
        self.stats: Dict[str, int] = {"filter_runs": 0, "sort_runs": 0}

    def filtered(self, store: RecordStore, state: FilterState) -> Tuple[Record, ...]:
        key = (store.token or "", state.cache_key())
        cached = self._filtered.get(key)
        if cached is not None:
            return cached

        result = filter_records(store.records, state)
        self.stats["filter_runs"] += 1
        self._filtered[key] = result

        # Prevent unbounded growth
        if len(self._filtered) > self.MAX_FILTER_CACHE:
            self._filtered.clear()

        return result

    def ordered(self, store: RecordStore, state: FilterState, sort_key: SortKey) -> Tuple[Record, ...]:
        key = (store.token or "", state.cache_key(), sort_key)
        cached = self._sorted.get(key)
        if cached is not None:
            return cached

        result = sort_records(self.filtered(store, state), sort_key, self.collation)
        self.stats["sort_runs"] += 1
        self._sorted[key] = result

        if len(self._sorted) > self.MAX_SORT_CACHE:
            self._sorted.clear()

        return result

    def clear(self) -> None:
        self._filtered.clear()
        self._sorted.clear()
