from __future__ import annotations

from pathlib import Path

import dash
import dash_bootstrap_components as dbc

from directory_browser.config.model import DirectoryConfig, RecordsSourceConfig
from directory_browser.core.exceptions import LoadFailure
from directory_browser.core.record import Record
from directory_browser.core.record_store import RecordStore
from directory_browser.sources.base import RecordSource
from directory_browser.ui.callbacks.callbacks_render import (
    HIDDEN,
    RENDER_ERROR_MESSAGE,
    SHOWN,
    render_directory,
)
from directory_browser.ui.callbacks.callbacks_state import restore_coordinator, update_view_state
from directory_browser.ui.config import AppConfig
from directory_browser.ui.ids import IDs

C = IDs.Control


class _FailingSource(RecordSource):
    def fetch(self):
        raise LoadFailure("Failed to load data")

    def describe(self) -> str:
        return "<failing>"


def _make_ctx(store: RecordStore) -> AppConfig:
    directory_config = DirectoryConfig(
        config_root=Path("."),
        records=RecordsSourceConfig(file=Path("companies.json")),
    )
    return AppConfig(directory_config=directory_config, store=store)


def _ready_ctx(n: int = 20) -> AppConfig:
    records = [
        Record(name=f"Company {i:02d}", location="London" if i % 2 else "Paris", industry="Finance")
        for i in range(n)
    ]
    return _make_ctx(RecordStore.from_records(records))


def _failed_ctx() -> AppConfig:
    store = RecordStore()
    store.load(_FailingSource())
    return _make_ctx(store)


def _values(**overrides):
    values = {
        C.SEARCH_INPUT: "",
        C.LOCATION_SELECT: None,
        C.INDUSTRY_SELECT: None,
        C.SORT_SELECT: "name-asc",
        C.PAGE_SIZE_SELECT: 9,
    }
    values.update(overrides)
    return values


def _boom(*_args, **_kwargs):
    raise RuntimeError("boom")


# -----------------------------------------------------------------------------
# State callback
# -----------------------------------------------------------------------------
def test_control_change_updates_store_only():
    ctx = _ready_ctx()

    out = update_view_state(ctx, C.LOCATION_SELECT, _values(**{C.LOCATION_SELECT: "London"}), None)

    assert out[0]["location"] == "London"
    assert out[0]["page_number"] == 1
    assert all(v is dash.no_update for v in out[1:])


def test_next_page_moves_stored_page():
    ctx = _ready_ctx()
    state = ctx.coordinator(None).to_dict()

    out = update_view_state(ctx, C.NEXT_PAGE_BTN, _values(), state)

    assert out[0]["page_number"] == 2


def test_transition_denied_while_loading_writes_controls_back():
    ctx = _make_ctx(RecordStore())

    out = update_view_state(ctx, C.SEARCH_INPUT, _values(**{C.SEARCH_INPUT: "acme"}), None)

    assert out[0]["query"] == ""
    assert out[1:] == ("", None, None, "name-asc", 9)


def test_clear_filters_writes_defaults_to_controls():
    ctx = _ready_ctx()
    coord = ctx.coordinator(None)
    coord.set_query("company")
    coord.set_location("Paris")
    coord.set_page_size(6)

    out = update_view_state(ctx, C.CLEAR_FILTERS_BTN, _values(), coord.to_dict())

    assert out[0] == ctx.directory_config.default_view_state().to_dict()
    assert out[1:] == ("", None, None, "name-asc", 9)


def test_rejected_page_size_keeps_state_and_resets_control():
    ctx = _ready_ctx()
    coord = ctx.coordinator(None)
    coord.set_page_size(12)
    before = coord.to_dict()

    out = update_view_state(ctx, C.PAGE_SIZE_SELECT, _values(**{C.PAGE_SIZE_SELECT: 7}), before)

    assert out[0] == before
    assert out[5] == 12


def test_invalid_stored_state_falls_back_to_defaults():
    ctx = _ready_ctx()
    defaults = ctx.directory_config.default_view_state()

    assert restore_coordinator(ctx, {"sort": "sideways"}).state == defaults
    assert restore_coordinator(ctx, {"page_size": 6.9}).state == defaults

    out = update_view_state(ctx, None, _values(), {"page_size": "lots"})
    assert out[0] == defaults.to_dict()


def test_state_callback_does_not_raise_on_unexpected_error(monkeypatch):
    ctx = _ready_ctx()
    monkeypatch.setattr(ctx, "coordinator", _boom)

    out = update_view_state(ctx, C.SEARCH_INPUT, _values(**{C.SEARCH_INPUT: "acme"}), None)

    assert all(v is dash.no_update for v in out)


# -----------------------------------------------------------------------------
# Render callback
# -----------------------------------------------------------------------------
def test_render_ready_directory():
    grid, _summary, _label, prev_disabled, next_disabled, pager, alert, alert_open, spinner, poll_off = (
        render_directory(_ready_ctx(), None)
    )

    assert isinstance(grid, dbc.Row)
    assert len(grid.children) == 9
    assert prev_disabled is True
    assert next_disabled is False
    assert pager == SHOWN
    assert alert is None and alert_open is False
    assert spinner == HIDDEN
    assert poll_off is True


def test_render_last_page_disables_next():
    ctx = _ready_ctx()
    coord = ctx.coordinator(None)
    coord.set_page(3)

    out = render_directory(ctx, coord.to_dict())

    assert len(out[0].children) == 2
    assert out[3] is False
    assert out[4] is True


def test_render_while_loading_keeps_polling():
    grid, summary, _label, _prev, _next, pager, _alert, alert_open, spinner, poll_off = (
        render_directory(_make_ctx(RecordStore()), None)
    )

    assert grid is None
    assert summary == "Loading…"
    assert pager == HIDDEN
    assert alert_open is False
    assert spinner == SHOWN
    assert poll_off is False


def test_render_after_load_failure_shows_alert_and_hides_pager():
    grid, _summary, _label, _prev, _next, pager, alert, alert_open, spinner, poll_off = (
        render_directory(_failed_ctx(), None)
    )

    assert grid is None
    assert alert == "Failed to load data"
    assert alert_open is True
    assert pager == HIDDEN
    assert spinner == HIDDEN
    assert poll_off is True


def test_render_with_invalid_stored_state_uses_defaults():
    out = render_directory(_ready_ctx(), {"sort": "sideways", "page_number": 2})

    assert out[5] == SHOWN
    assert len(out[0].children) == 9
    assert out[7] is False


def test_render_does_not_raise_on_unexpected_error(monkeypatch):
    ctx = _ready_ctx()
    monkeypatch.setattr(ctx, "coordinator", _boom)

    out = render_directory(ctx, None)

    assert out[6] == RENDER_ERROR_MESSAGE
    assert out[7] is True
    assert out[5] == HIDDEN
    assert out[9] is True
