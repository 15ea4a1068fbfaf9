from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import dash
from dash import ALL, Input, Output, State, exceptions

from signal_browser.ui.ids import IDs
from signal_browser.ui.layout.build_detail_modal import detail_body, detail_title

if TYPE_CHECKING:
    from signal_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def _clicked_record_id(triggered_id, active_cell: Optional[dict]) -> Optional[int]:
    if triggered_id == IDs.Control.SIGNAL_TABLE:
        if not active_cell or active_cell.get("row_id") is None:
            return None
        return int(active_cell["row_id"])

    if isinstance(triggered_id, dict) and triggered_id.get("type") == IDs.Pattern.THUMBNAIL_CARD:
        # Re-rendered cards fire with n_clicks=0; only real clicks count
        if not dash.ctx.triggered or not dash.ctx.triggered[0].get("value"):
            return None
        return int(triggered_id["index"])

    return None


def register_detail_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    @app.callback(
        Output(IDs.Control.DETAIL_MODAL, "is_open"),
        Output(IDs.Control.DETAIL_TITLE, "children"),
        Output(IDs.Control.DETAIL_BODY, "children"),
        Output(IDs.Control.SIGNAL_TABLE, "active_cell"),
        Input(IDs.Control.SIGNAL_TABLE, "active_cell"),
        Input({"type": IDs.Pattern.THUMBNAIL_CARD, "index": ALL}, "n_clicks"),
        Input(IDs.Control.DETAIL_CLOSE_BTN, "n_clicks"),
        State(IDs.Store.SESSION_ID, "data"),
        prevent_initial_call=True,
    )
    def toggle_detail_modal(active_cell, _card_clicks, _close_clicks, session_id):
        triggered = dash.ctx.triggered_id

        if triggered == IDs.Control.DETAIL_CLOSE_BTN:
            return False, dash.no_update, dash.no_update, None

        record_id = _clicked_record_id(triggered, active_cell)
        if record_id is None:
            raise exceptions.PreventUpdate

        with ctx.locked_controller(session_id) as controller:
            record = controller.get_record(record_id)
        if record is None:
            logger.warning("Detail requested for unknown record", extra={"record_id": record_id})
            raise exceptions.PreventUpdate

        # Clearing active_cell lets the same cell be clicked again
        return True, detail_title(record), detail_body(record), None
