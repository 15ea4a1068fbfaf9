from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from signal_browser.core.columns import default_columns
from signal_browser.core.filter_state import empty_filter_spec
from signal_browser.services.session_service import generate_session_id
from signal_browser.ui.ids import IDs
from signal_browser.ui.layout.build_detail_modal import build_detail_modal
from signal_browser.ui.layout.build_filter_panel import build_filter_panel
from signal_browser.ui.layout.build_navbar import build_navbar
from signal_browser.ui.layout.build_results_panel import build_results_panel

if TYPE_CHECKING:
    from signal_browser.ui.config import AppConfig


def build_layout(ctx: "AppConfig"):
    """
    Build the page for one browser session.

    Called on every page load, so each visitor gets a fresh session id and
    therefore a controller of their own.
    """
    session_id = generate_session_id()
    with ctx.locked_controller(session_id) as controller:
        filter_options = controller.available_filter_options()

    return dbc.Container(
        fluid=True,
        className="sb-root",
        children=[
            build_navbar(ctx.global_config),

            # App-level stores
            dcc.Store(id=IDs.Store.SESSION_ID, data=session_id, storage_type="memory"),
            dcc.Store(id=IDs.Store.FILTER_STATE, data=empty_filter_spec().to_dict(), storage_type="memory"),

            dbc.Row(
                [
                    dbc.Col(
                        build_filter_panel(filter_options),
                        md=3,
                        className="mt-3",
                    ),
                    dbc.Col(
                        build_results_panel(ctx.global_config, default_columns()),
                        md=9,
                        className="mt-3",
                    ),
                ],
                className="gx-3",
            ),
            build_detail_modal(),
        ],
    )
