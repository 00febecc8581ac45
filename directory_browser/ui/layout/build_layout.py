from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc, html

from directory_browser.ui.ids import IDs
from directory_browser.ui.layout.build_filter_panel import build_filter_panel
from directory_browser.ui.layout.build_header import build_header
from directory_browser.ui.layout.build_results_panel import build_results_panel

if TYPE_CHECKING:
    from directory_browser.ui.config import AppConfig


def build_footer() -> html.Footer:
    return html.Footer(
        html.P(
            "Built with Python, Dash and Bootstrap.",
            className="text-muted text-center small mb-0",
        ),
        className="py-3 border-top mt-4",
    )


def build_layout(ctx: "AppConfig"):
    cfg = ctx.directory_config

    return dbc.Container(
        fluid=True,
        className="directory-root",
        children=[
            build_header(cfg),

            # In-memory view state: gone on reload, never persisted
            dcc.Store(
                id=IDs.Store.VIEW_STATE,
                storage_type="memory",
                data=cfg.default_view_state().to_dict(),
            ),

            html.Main(
                dbc.Container(
                    [
                        html.H1("Companies Directory", className="h3 mb-3"),
                        build_filter_panel(cfg),
                        build_results_panel(cfg),
                    ]
                )
            ),
            build_footer(),
        ],
    )
