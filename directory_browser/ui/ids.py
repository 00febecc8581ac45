from __future__ import annotations

__all__ = ["IDs"]


class IDs:
    class Store:
        VIEW_STATE = "view-state"

    class Control:
        # Filters
        SEARCH_INPUT = "search-input"
        LOCATION_SELECT = "location-select"
        INDUSTRY_SELECT = "industry-select"

        # Toolbar
        SORT_SELECT = "sort-select"
        PAGE_SIZE_SELECT = "page-size-select"
        CLEAR_FILTERS_BTN = "clear-filters-btn"
        RESULTS_SUMMARY = "results-summary"

        # Results
        LOAD_ERROR = "load-error"
        LOADING_INDICATOR = "loading-indicator"
        LOAD_POLL = "load-poll"
        COMPANY_GRID = "company-grid"

        # Pager
        PAGER_CONTAINER = "pager-container"
        PREV_PAGE_BTN = "prev-page-btn"
        NEXT_PAGE_BTN = "next-page-btn"
        PAGE_LABEL = "page-label"
