from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State, dcc, exceptions

from signal_browser.core.record import records_to_frame
from signal_browser.ui.ids import IDs

if TYPE_CHECKING:
    from signal_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_io_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # CSV export of the filtered + sorted set (all pages)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DOWNLOAD_CSV, "data"),
        Input(IDs.Control.DOWNLOAD_CSV_BTN, "n_clicks"),
        State(IDs.Store.SESSION_ID, "data"),
        prevent_initial_call=True,
    )
    def download_csv(n_clicks, session_id):
        if not n_clicks:
            raise exceptions.PreventUpdate

        with ctx.locked_controller(session_id) as controller:
            ordered = controller.ordered
        df = records_to_frame(ordered)

        logger.info(
            "csv_export",
            extra={"session_id": session_id, "n_rows": len(df)},
        )
        return dcc.send_data_frame(df.to_csv, "signals.csv", index=False)
