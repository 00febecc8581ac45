from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from directory_browser.config.model import DirectoryConfig
from directory_browser.ui.helpers import page_size_options, sort_options
from directory_browser.ui.ids import IDs

# How often the page checks whether the one-time record load has finished
LOAD_POLL_MS = 500


def build_toolbar(cfg: DirectoryConfig) -> html.Div:
    return html.Div(
        [
            html.Div(id=IDs.Control.RESULTS_SUMMARY, style={"fontSize": 14}),
            html.Div(
                [
                    html.Label("Sort", htmlFor=IDs.Control.SORT_SELECT, className="me-2 mb-0"),
                    dcc.Dropdown(
                        id=IDs.Control.SORT_SELECT,
                        options=sort_options(),
                        value=cfg.default_view_state().sort.value,
                        clearable=False,
                        style={"width": 180},
                    ),
                    html.Label("Per page", htmlFor=IDs.Control.PAGE_SIZE_SELECT, className="ms-3 me-2 mb-0"),
                    dcc.Dropdown(
                        id=IDs.Control.PAGE_SIZE_SELECT,
                        options=page_size_options(cfg.page_size_choices),
                        value=cfg.default_page_size,
                        clearable=False,
                        style={"width": 100},
                    ),
                    dbc.Button(
                        "Clear filters",
                        id=IDs.Control.CLEAR_FILTERS_BTN,
                        color="light",
                        className="ms-3",
                    ),
                ],
                className="d-flex align-items-center",
            ),
        ],
        className="d-flex justify-content-between align-items-center mb-3",
    )


def build_pager() -> html.Div:
    return html.Div(
        [
            dbc.Button("Prev", id=IDs.Control.PREV_PAGE_BTN, color="light", disabled=True),
            html.Span(id=IDs.Control.PAGE_LABEL, className="mx-3", style={"fontSize": 14}),
            dbc.Button("Next", id=IDs.Control.NEXT_PAGE_BTN, color="light", disabled=True),
        ],
        id=IDs.Control.PAGER_CONTAINER,
        className="d-flex justify-content-center align-items-center my-3",
    )


def build_results_panel(cfg: DirectoryConfig) -> html.Div:
    return html.Div(
        [
            build_toolbar(cfg),
            dbc.Alert(id=IDs.Control.LOAD_ERROR, color="danger", is_open=False),
            html.Div(
                dbc.Spinner(color="primary"),
                id=IDs.Control.LOADING_INDICATOR,
                className="text-center my-4",
            ),
            dcc.Interval(id=IDs.Control.LOAD_POLL, interval=LOAD_POLL_MS, disabled=False),
            html.Div(id=IDs.Control.COMPANY_GRID),
            build_pager(),
        ]
    )
