from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional, Tuple

import dash
from dash import Input, Output

from directory_browser.ui.callbacks.callbacks_state import restore_coordinator
from directory_browser.ui.helpers import company_grid, page_label, results_summary
from directory_browser.ui.ids import IDs

if TYPE_CHECKING:
    from directory_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

HIDDEN = {"display": "none"}
SHOWN: dict[str, Any] = {}

RENDER_ERROR_MESSAGE = "The app hit an unexpected error while building this page."

# grid, summary, page label, prev disabled, next disabled, pager style,
# alert text, alert open, spinner style, poll disabled
RenderOutputs = Tuple[Any, Any, Any, bool, bool, dict, Optional[str], bool, dict, bool]


def render_directory(ctx: AppConfig, state_data: Optional[dict[str, Any]]) -> RenderOutputs:
    try:
        snapshot = restore_coordinator(ctx, state_data).snapshot()
    except Exception:
        logger.exception("Error while rendering directory", extra={"view_state": state_data})
        return None, "", "", True, True, HIDDEN, RENDER_ERROR_MESSAGE, True, HIDDEN, True

    if snapshot.loading:
        return None, "Loading…", "", True, True, HIDDEN, None, False, SHOWN, False

    if snapshot.error:
        return (
            None,
            results_summary(snapshot),
            "",
            True,
            True,
            HIDDEN,
            snapshot.error,
            True,
            HIDDEN,
            True,
        )

    return (
        company_grid(snapshot.page_items),
        results_summary(snapshot),
        page_label(snapshot),
        not snapshot.has_prev,
        not snapshot.has_next,
        SHOWN,
        None,
        False,
        HIDDEN,
        True,
    )


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # View state (or load completion) -> grid, summary, pager
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.COMPANY_GRID, "children"),
        Output(IDs.Control.RESULTS_SUMMARY, "children"),
        Output(IDs.Control.PAGE_LABEL, "children"),
        Output(IDs.Control.PREV_PAGE_BTN, "disabled"),
        Output(IDs.Control.NEXT_PAGE_BTN, "disabled"),
        Output(IDs.Control.PAGER_CONTAINER, "style"),
        Output(IDs.Control.LOAD_ERROR, "children"),
        Output(IDs.Control.LOAD_ERROR, "is_open"),
        Output(IDs.Control.LOADING_INDICATOR, "style"),
        Output(IDs.Control.LOAD_POLL, "disabled"),
        Input(IDs.Store.VIEW_STATE, "data"),
        Input(IDs.Control.LOAD_POLL, "n_intervals"),
    )
    def on_state_or_poll(state_data, _n_intervals):
        return render_directory(ctx, state_data)
