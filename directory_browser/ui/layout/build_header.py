from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from directory_browser.config.model import DirectoryConfig


def build_header(cfg: DirectoryConfig) -> dbc.Navbar:
    brand = []
    if cfg.logo_src:
        brand.append(
            html.Img(src=cfg.logo_src, alt="Logo", style={"height": "56px"}, className="me-3")
        )
    brand.append(
        html.Div(
            [
                html.H2(cfg.ui_title, className="mb-0"),
                html.Small(cfg.subtitle, className="text-muted"),
            ],
            className="d-flex flex-column justify-content-center",
        )
    )

    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[html.Div(brand, className="d-flex align-items-center")],
        ),
        className="mb-3",
    )
