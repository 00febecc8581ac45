from __future__ import annotations

from typing import Any, Dict, List, Sequence

import dash_bootstrap_components as dbc
from dash import html

from directory_browser.core.coordinator import ViewSnapshot, ViewStateCoordinator
from directory_browser.core.record import Record
from directory_browser.core.sort_key import SortKey
from directory_browser.core.view_state import parse_int
from directory_browser.ui.ids import IDs



def facet_options(values: Sequence[str]) -> List[Dict[str, str]]:
    return [{"label": v, "value": v} for v in values]


def sort_options() -> List[Dict[str, str]]:
    return [{"label": key.label, "value": key.value} for key in SortKey]


def page_size_options(choices: Sequence[int]) -> List[Dict[str, Any]]:
    return [{"label": str(c), "value": c} for c in choices]


def apply_control_change(coord: ViewStateCoordinator, control_id: Any, value: Any) -> ViewSnapshot:
    """
    Map the UI control that fired to exactly one coordinator transition.

    Unknown ids (e.g. the initial call, where nothing triggered) leave the
    state as it is.
    """
    if control_id == IDs.Control.SEARCH_INPUT:
        return coord.set_query(value)
    if control_id == IDs.Control.LOCATION_SELECT:
        return coord.set_location(value)
    if control_id == IDs.Control.INDUSTRY_SELECT:
        return coord.set_industry(value)
    if control_id == IDs.Control.SORT_SELECT:
        return coord.set_sort(value)
    if control_id == IDs.Control.PAGE_SIZE_SELECT:
        return coord.set_page_size(parse_int(value, "page_size"))
    if control_id == IDs.Control.CLEAR_FILTERS_BTN:
        return coord.clear_filters()
    if control_id == IDs.Control.PREV_PAGE_BTN:
        return coord.prev_page()
    if control_id == IDs.Control.NEXT_PAGE_BTN:
        return coord.next_page()
    return coord.snapshot()


def results_summary(snapshot: ViewSnapshot) -> List[Any]:
    return [
        "Showing ",
        html.Strong(str(len(snapshot.page_items))),
        " of ",
        html.Strong(str(snapshot.match_count)),
        " results",
    ]


def page_label(snapshot: ViewSnapshot) -> List[Any]:
    return [
        "Page ",
        html.Strong(str(snapshot.current_page)),
        " of ",
        html.Strong(str(snapshot.total_pages)),
    ]


def company_card(record: Record) -> dbc.Card:
    return dbc.Card(
        dbc.CardBody(
            [
                html.H5(record.name, className="company-name card-title"),
                html.P(
                    [html.I(className="bi bi-geo-alt-fill me-1"), html.Strong("Location: "), record.location],
                    className="mb-1",
                ),
                html.P(
                    [html.I(className="bi bi-building me-1"), html.Strong("Industry: "), record.industry],
                    className="mb-0",
                ),
            ]
        ),
        className="company-card h-100",
    )


def company_grid(records: Sequence[Record]) -> Any:
    if not records:
        return html.P("No companies found.", className="p-3")
    # duplicate names are legal, so the index goes into the key too
    return dbc.Row(
        [
            dbc.Col(company_card(r), md=4, className="mb-3", key=f"{r.name}-{idx}")
            for idx, r in enumerate(records)
        ],
        className="g-3",
    )
