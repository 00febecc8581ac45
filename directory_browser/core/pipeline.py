"""
Pure stages of the derived-view pipeline.

    records -> filter_records -> sort_records -> paginate -> Page

None of these functions mutate their inputs or keep state; the
coordinator decides when each one needs to run.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

from directory_browser.core.collation import CollationKey, default_collation_key
from directory_browser.core.exceptions import InvalidArgument
from directory_browser.core.filter_state import FilterState
from directory_browser.core.record import Record
from directory_browser.core.sort_key import SortKey


@dataclass(frozen=True)
class Page:
    items: Tuple[Record, ...]
    total_pages: int
    page_number: int


# -----------------------------------------------------------------------------
# Filter
# -----------------------------------------------------------------------------
def filter_records(records: Sequence[Record], state: FilterState) -> Tuple[Record, ...]:
    """
    Return the records matching all three predicates, in input order.

    - name contains the trimmed query (case-insensitive); empty query matches all
    - location equals state.location exactly, unless the facet is unset
    - industry equals state.industry exactly, unless the facet is unset
    """
    query = state.normalised_query
    location = state.location or None
    industry = state.industry or None

    return tuple(
        r
        for r in records
        if (not query or query in r.name.casefold())
        and (location is None or r.location == location)
        and (industry is None or r.industry == industry)
    )


# -----------------------------------------------------------------------------
# Sort
# -----------------------------------------------------------------------------
def sort_records(
    records: Sequence[Record],
    key: SortKey,
    collation: CollationKey = default_collation_key,
) -> Tuple[Record, ...]:
    """
    Stable sort by name. Descending uses the same collation key reversed,
    so for unique names it is exactly the ascending order backwards.
    """
    return tuple(
        sorted(records, key=lambda r: collation(r.name), reverse=key.descending)
    )


# -----------------------------------------------------------------------------
# Paginate
# -----------------------------------------------------------------------------
def total_pages_for(n_items: int, page_size: int) -> int:
    _check_page_size(page_size)
    return max(1, math.ceil(n_items / page_size))


def clamp_page(page_number: int, total_pages: int) -> int:
    return min(max(1, page_number), total_pages)


def paginate(records: Sequence[Record], page_size: int, page_number: int) -> Page:
    """
    Slice out one page. Out-of-range page numbers are clamped, never rejected.

    :raises InvalidArgument: if page_size is not a positive integer.
    """
    total_pages = total_pages_for(len(records), page_size)
    effective = clamp_page(page_number, total_pages)
    start = (effective - 1) * page_size
    return Page(
        items=tuple(records[start:start + page_size]),
        total_pages=total_pages,
        page_number=effective,
    )


def _check_page_size(page_size: int) -> None:
    if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size <= 0:
        raise InvalidArgument(f"page_size must be a positive integer, got {page_size!r}")
