from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from directory_browser.core.exceptions import InvalidArgument
from directory_browser.core.filter_state import FilterState
from directory_browser.core.pipeline import Page, paginate
from directory_browser.core.record import Record
from directory_browser.core.record_store import RecordStore
from directory_browser.core.sort_key import SortKey
from directory_browser.core.stage_cache import StageCache
from directory_browser.core.view_state import PageState, ViewState

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE_CHOICES: Tuple[int, ...] = (6, 9, 12)


@dataclass(frozen=True)
class ViewSnapshot:
    """
    What the presentation layer renders after each transition.
    """
    page_items: Tuple[Record, ...]
    match_count: int
    total_pages: int
    current_page: int
    loading: bool
    error: Optional[str]
    state: ViewState

    @property
    def has_prev(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages


class ViewStateCoordinator:
    """
    Sole owner of the filter/sort/page state for one browsing session.

    Transitions
    -----------
    - set_query / set_location / set_industry / set_sort / set_page_size:
      page number goes back to 1, then filter -> sort -> paginate is recomputed
      (filter and sort come from the StageCache when their inputs are unchanged)
    - next_page / prev_page / set_page: paginate only, clamped to [1, total_pages]
    - clear_filters: everything back to the session defaults in one step

    While the record store is still loading every transition is denied and
    the snapshot reports loading=True.
    """

    def __init__(
        self,
        store: RecordStore,
        *,
        defaults: Optional[ViewState] = None,
        page_size_choices: Iterable[int] = DEFAULT_PAGE_SIZE_CHOICES,
        cache: Optional[StageCache] = None,
        state: Optional[ViewState] = None,
    ) -> None:
        self._store = store
        self._choices = tuple(page_size_choices)
        self._defaults = defaults or ViewState()
        self._validate_page_size(self._defaults.page.page_size)
        self._cache = cache if cache is not None else StageCache()

        self._state = state or self._defaults
        self._validate_page_size(self._state.page.page_size)

        self._ordered: Tuple[Record, ...] = ()
        self._page = Page(items=(), total_pages=1, page_number=1)
        self._seen_token: Optional[str] = None
        self._loading = True
        self._error: Optional[str] = None
        self._recompute()

    @classmethod
    def restore(
        cls,
        store: RecordStore,
        data: Optional[Dict[str, Any]],
        **kwargs: Any,
    ) -> ViewStateCoordinator:
        """
        Rebuild a coordinator from `ViewState.to_dict()` output.

        The restored page number is clamped against the current result set.

        :raises InvalidArgument: if the stored sort key or page size is not allowed.
        """
        defaults = kwargs.get("defaults") or ViewState()
        if not data:
            return cls(store, **kwargs)
        try:
            state = ViewState.from_dict(data, defaults=defaults)
        except InvalidArgument:
            raise
        except (TypeError, ValueError) as e:
            raise InvalidArgument(f"Malformed view state: {e}") from e
        return cls(store, state=state, **kwargs)

    # -------------------------------------------------------------------------
    # Read side
    # -------------------------------------------------------------------------
    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def defaults(self) -> ViewState:
        return self._defaults

    @property
    def loading(self) -> bool:
        self._sync()
        return self._loading

    @property
    def error(self) -> Optional[str]:
        self._sync()
        return self._error

    @property
    def page_items(self) -> Tuple[Record, ...]:
        self._sync()
        return self._page.items

    @property
    def total_pages(self) -> int:
        self._sync()
        return self._page.total_pages

    @property
    def current_page(self) -> int:
        self._sync()
        return self._page.page_number

    @property
    def match_count(self) -> int:
        self._sync()
        return len(self._ordered)

    def snapshot(self) -> ViewSnapshot:
        self._sync()
        return ViewSnapshot(
            page_items=self._page.items,
            match_count=len(self._ordered),
            total_pages=self._page.total_pages,
            current_page=self._page.page_number,
            loading=self._loading,
            error=self._error,
            state=self._state,
        )

    def to_dict(self) -> Dict[str, Any]:
        return self._state.to_dict()

    # -------------------------------------------------------------------------
    # Transitions that reset the page
    # -------------------------------------------------------------------------
    def set_query(self, query: Optional[str]) -> ViewSnapshot:
        new_filter = replace(self._state.filter, query=query or "")
        return self._reset_transition("set_query", replace(self._state, filter=new_filter))

    def set_location(self, location: Optional[str]) -> ViewSnapshot:
        new_filter = replace(self._state.filter, location=location or None)
        return self._reset_transition("set_location", replace(self._state, filter=new_filter))

    def set_industry(self, industry: Optional[str]) -> ViewSnapshot:
        new_filter = replace(self._state.filter, industry=industry or None)
        return self._reset_transition("set_industry", replace(self._state, filter=new_filter))

    def set_sort(self, sort_key: Union[str, SortKey]) -> ViewSnapshot:
        key = SortKey.parse(sort_key)
        return self._reset_transition("set_sort", replace(self._state, sort=key))

    def set_page_size(self, page_size: int) -> ViewSnapshot:
        self._validate_page_size(page_size)
        new_page = PageState(page_size=page_size, page_number=1)
        return self._reset_transition("set_page_size", replace(self._state, page=new_page))

    def clear_filters(self) -> ViewSnapshot:
        return self._reset_transition("clear_filters", self._defaults)

    # -------------------------------------------------------------------------
    # Paging transitions
    # -------------------------------------------------------------------------
    def next_page(self) -> ViewSnapshot:
        return self._page_transition("next_page", self.current_page + 1)

    def prev_page(self) -> ViewSnapshot:
        return self._page_transition("prev_page", self.current_page - 1)

    def set_page(self, page_number: int) -> ViewSnapshot:
        if isinstance(page_number, bool) or not isinstance(page_number, int):
            raise InvalidArgument(f"page_number must be an integer, got {page_number!r}")
        return self._page_transition("set_page", page_number)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------
    def _validate_page_size(self, page_size: Any) -> None:
        if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size <= 0:
            raise InvalidArgument(f"page_size must be a positive integer, got {page_size!r}")
        if self._choices and page_size not in self._choices:
            raise InvalidArgument(
                f"page_size {page_size} is not one of the allowed choices {list(self._choices)}"
            )

    def _denied(self, transition: str) -> bool:
        if self.loading:
            logger.info("Transition denied while records are loading", extra={"transition": transition})
            return True
        return False

    def _reset_transition(self, transition: str, new_state: ViewState) -> ViewSnapshot:
        if self._denied(transition):
            return self.snapshot()
        self._state = replace(new_state, page=new_state.page.first())
        self._recompute()
        self._log_transition(transition)
        return self.snapshot()

    def _page_transition(self, transition: str, page_number: int) -> ViewSnapshot:
        if self._denied(transition):
            return self.snapshot()
        self._sync()
        self._state = replace(self._state, page=replace(self._state.page, page_number=page_number))
        self._repaginate()
        self._log_transition(transition)
        return self.snapshot()

    def _sync(self) -> None:
        # The store may resolve after this coordinator was built
        if self._seen_token is None or self._store.token != self._seen_token:
            self._recompute()

    def _recompute(self) -> None:
        # RecordStore publishes its token last, so a token means a resolved store
        token = self._store.token
        if token is None:
            self._loading, self._error = True, None
            self._ordered = ()
        else:
            self._loading, self._error = False, self._store.error
            self._ordered = self._cache.ordered(self._store, self._state.filter, self._state.sort)
        self._seen_token = token
        self._repaginate()

    def _repaginate(self) -> None:
        page = self._state.page
        self._page = paginate(self._ordered, page.page_size, page.page_number)
        if self._page.page_number != page.page_number:
            # keep the stored page inside [1, total_pages]
            self._state = replace(self._state, page=replace(page, page_number=self._page.page_number))

    def _log_transition(self, transition: str) -> None:
        logger.debug(
            "View state transition",
            extra={
                "transition": transition,
                "match_count": len(self._ordered),
                "current_page": self._page.page_number,
                "total_pages": self._page.total_pages,
            },
        )
