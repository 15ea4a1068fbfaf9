from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from signal_browser.config.loader import load_global_config
from signal_browser.services.record_source import build_record_source
from signal_browser.services.session_service import ControllerSessions
from signal_browser.ui.callbacks.callbacks_columns import register_column_callbacks
from signal_browser.ui.callbacks.callbacks_detail import register_detail_callbacks
from signal_browser.ui.callbacks.callbacks_filters import register_filter_callbacks
from signal_browser.ui.callbacks.callbacks_io import register_io_callbacks
from signal_browser.ui.callbacks.callbacks_render import register_render_callbacks
from signal_browser.ui.config import AppConfig
from signal_browser.ui.layout.build_layout import build_layout

logger = logging.getLogger(__name__)


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Acquire the record snapshot once; a failed source aborts startup
    source = build_record_source(global_config.record_source)
    records = tuple(source.load())
    logger.info(
        "Record snapshot ready",
        extra={"n_records": len(records), "source": global_config.record_source.type},
    )

    # 3) Per-session controllers over the shared immutable snapshot
    sessions = ControllerSessions(
        lambda: records,
        page_size=global_config.default_page_size,
        max_sessions=global_config.max_sessions,
    )

    # 4) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        sessions=sessions,
    )
    ctx.validate()

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
    )
    app.title = global_config.ui_title

    # Layout is a function so every page load gets its own session
    def serve_layout():
        return build_layout(ctx)

    app.layout = serve_layout

    # Register callbacks
    register_filter_callbacks(app, ctx)
    register_render_callbacks(app, ctx)
    register_column_callbacks(app, ctx)
    register_detail_callbacks(app, ctx)
    register_io_callbacks(app, ctx)

    return app
