from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional

from directory_browser.core.exceptions import InvalidArgument
from directory_browser.core.filter_state import FilterState
from directory_browser.core.sort_key import SortKey

DEFAULT_PAGE_SIZE = 9


def parse_int(value: Any, name: str) -> int:
    """
    Accept an int, or a string of digits as the browser sends it.

    Anything else (floats, bools, "6.9", None) raises InvalidArgument rather
    than being truncated into a valid-looking number.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip()
        digits = text[1:] if text.startswith("-") else text
        if digits.isascii() and digits.isdigit():
            return int(text)
    raise InvalidArgument(f"{name} must be an integer, got {value!r}")


@dataclass(frozen=True)
class PageState:
    """
    Page size and 1-based page number.

    The page number stored here is what the user asked for; the coordinator
    keeps it clamped to [1, total_pages] after every transition.
    """
    page_size: int = DEFAULT_PAGE_SIZE
    page_number: int = 1

    def first(self) -> PageState:
        return replace(self, page_number=1)


@dataclass(frozen=True)
class ViewState:
    """
    Everything the user can change in one browsing session.

    Serialises to a plain dict so the UI can hold it in a dcc.Store
    between callbacks.
    """
    filter: FilterState = field(default_factory=FilterState)
    sort: SortKey = SortKey.NAME_ASC
    page: PageState = field(default_factory=PageState)

    def to_dict(self) -> Dict[str, Any]:
        return {
            **self.filter.to_dict(),
            "sort": self.sort.value,
            "page_size": self.page.page_size,
            "page_number": self.page.page_number,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], defaults: Optional[ViewState] = None) -> ViewState:
        base = defaults or cls()
        return cls(
            filter=FilterState.from_dict(data),
            sort=SortKey.parse(data.get("sort", base.sort)),
            page=PageState(
                page_size=parse_int(data.get("page_size", base.page.page_size), "page_size"),
                page_number=parse_int(data.get("page_number", base.page.page_number), "page_number"),
            ),
        )
