from __future__ import annotations

import logging
import threading
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from directory_browser.config.loader import load_config
from directory_browser.core.collation import make_collation_key
from directory_browser.core.record_store import RecordStore
from directory_browser.core.stage_cache import StageCache
from directory_browser.ui.layout.build_layout import build_layout
from directory_browser.ui.callbacks.callbacks_state import register_state_callbacks
from directory_browser.ui.callbacks.callbacks_render import register_render_callbacks

logger = logging.getLogger(__name__)


def start_record_load(ctx: AppConfig, *, background: bool = True) -> None:
    """
    Kick off the one-time record load.

    In the background the page renders straight away and reports "loading"
    (every transition is denied) until the store resolves.
    """
    source = ctx.directory_config.records.build_source()
    if not background:
        ctx.store.load(source)
        return

    thread = threading.Thread(
        target=ctx.store.load,
        args=(source,),
        name="record-load",
        daemon=True,
    )
    thread.start()


def create_dash_app(config_root: Path | str = Path("config"), *, load_in_background: bool = True) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    directory_config = load_config(config_root)

    # 2) Core services: one store and one stage cache per process
    cache = StageCache(collation=make_collation_key(directory_config.collation_locale))
    ctx = AppConfig(
        directory_config=directory_config,
        store=RecordStore(),
        cache=cache,
    )

    # 3) One-shot record load
    start_record_load(ctx, background=load_in_background)

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY, dbc.icons.BOOTSTRAP],
    )
    app.title = directory_config.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_state_callbacks(app, ctx)
    register_render_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={"config_root": str(config_root), "ui_title": directory_config.ui_title},
    )
    return app
