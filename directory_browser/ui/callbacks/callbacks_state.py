from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

import dash
from dash import Input, Output, State

from directory_browser.core.coordinator import ViewStateCoordinator
from directory_browser.core.exceptions import InvalidArgument
from directory_browser.ui.helpers import apply_control_change
from directory_browser.ui.ids import IDs

if TYPE_CHECKING:
    from directory_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

# view-state data, then search, location, industry, sort, page size
StateOutputs = Tuple[Any, Any, Any, Any, Any, Any]


def restore_coordinator(ctx: AppConfig, state_data: Optional[dict[str, Any]]) -> ViewStateCoordinator:
    """Restore the session coordinator, starting fresh if the stored state is unusable."""
    try:
        return ctx.coordinator(state_data)
    except InvalidArgument:
        logger.warning("Discarding invalid stored view state", extra={"view_state": state_data})
        return ctx.coordinator(None)


def _controls_from_state(coord: ViewStateCoordinator) -> StateOutputs:
    state = coord.state
    return (
        state.to_dict(),
        state.filter.query,
        state.filter.location,
        state.filter.industry,
        state.sort.value,
        state.page.page_size,
    )


def update_view_state(
    ctx: AppConfig,
    control_id: Any,
    values: Dict[str, Any],
    state_data: Optional[dict[str, Any]],
) -> StateOutputs:
    """
    Apply the change from `control_id` and return the new stored state.

    Controls are only written back when they may disagree with the state:
    after clear, while records are loading (the change was denied) and after
    a rejected value.
    """
    try:
        coord = restore_coordinator(ctx, state_data)
    except Exception:
        logger.exception("Error while restoring view state", extra={"control": control_id})
        return (dash.no_update,) * 6

    sync_controls = control_id == IDs.Control.CLEAR_FILTERS_BTN or coord.loading
    try:
        apply_control_change(coord, control_id, values.get(control_id))
    except (InvalidArgument, TypeError, ValueError):
        logger.warning(
            "Rejected control change",
            extra={"control": control_id, "value": values.get(control_id)},
        )
        sync_controls = True

    if not sync_controls:
        return (coord.state.to_dict(),) + (dash.no_update,) * 5
    return _controls_from_state(coord)


def register_state_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Any control change -> exactly one coordinator transition
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.VIEW_STATE, "data"),
        Output(IDs.Control.SEARCH_INPUT, "value"),
        Output(IDs.Control.LOCATION_SELECT, "value"),
        Output(IDs.Control.INDUSTRY_SELECT, "value"),
        Output(IDs.Control.SORT_SELECT, "value"),
        Output(IDs.Control.PAGE_SIZE_SELECT, "value"),
        Input(IDs.Control.SEARCH_INPUT, "value"),
        Input(IDs.Control.LOCATION_SELECT, "value"),
        Input(IDs.Control.INDUSTRY_SELECT, "value"),
        Input(IDs.Control.SORT_SELECT, "value"),
        Input(IDs.Control.PAGE_SIZE_SELECT, "value"),
        Input(IDs.Control.CLEAR_FILTERS_BTN, "n_clicks"),
        Input(IDs.Control.PREV_PAGE_BTN, "n_clicks"),
        Input(IDs.Control.NEXT_PAGE_BTN, "n_clicks"),
        State(IDs.Store.VIEW_STATE, "data"),
        prevent_initial_call=True,
    )
    def on_control_change(query, location, industry, sort, page_size, _clear, _prev, _next, state_data):
        values = {
            IDs.Control.SEARCH_INPUT: query,
            IDs.Control.LOCATION_SELECT: location,
            IDs.Control.INDUSTRY_SELECT: industry,
            IDs.Control.SORT_SELECT: sort,
            IDs.Control.PAGE_SIZE_SELECT: page_size,
        }
        return update_view_state(ctx, dash.ctx.triggered_id, values, state_data)
