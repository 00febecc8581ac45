from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from directory_browser.config.model import DirectoryConfig
from directory_browser.ui.helpers import facet_options
from directory_browser.ui.ids import IDs


def build_filter_panel(cfg: DirectoryConfig) -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader("Filters", className="fw-semibold"),
            dbc.CardBody(
                dbc.Row(
                    [
                        dbc.Col(
                            [
                                html.Label("Search by name", htmlFor=IDs.Control.SEARCH_INPUT, className="form-label"),
                                dbc.Input(
                                    id=IDs.Control.SEARCH_INPUT,
                                    type="search",
                                    placeholder="Search by name...",
                                    value="",
                                ),
                            ],
                            md=4,
                        ),
                        dbc.Col(
                            [
                                html.Label("Location", htmlFor=IDs.Control.LOCATION_SELECT, className="form-label"),
                                dcc.Dropdown(
                                    id=IDs.Control.LOCATION_SELECT,
                                    options=facet_options(cfg.locations),
                                    placeholder="All Locations",
                                    clearable=True,
                                ),
                            ],
                            md=4,
                        ),
                        dbc.Col(
                            [
                                html.Label("Industry", htmlFor=IDs.Control.INDUSTRY_SELECT, className="form-label"),
                                dcc.Dropdown(
                                    id=IDs.Control.INDUSTRY_SELECT,
                                    options=facet_options(cfg.industries),
                                    placeholder="All Industries",
                                    clearable=True,
                                ),
                            ],
                            md=4,
                        ),
                    ],
                    className="g-3",
                )
            ),
        ],
        className="mb-3",
    )
