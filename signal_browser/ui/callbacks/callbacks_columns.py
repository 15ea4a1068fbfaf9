from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State, exceptions

from signal_browser.core.columns import (
    default_columns,
    reset_to_default,
    select_all,
    select_none,
    set_visible_keys,
)
from signal_browser.ui.helpers import table_columns
from signal_browser.ui.ids import IDs

if TYPE_CHECKING:
    from signal_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_column_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # All / None / Reset buttons -> checklist
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.COLUMN_CHECKLIST, "value"),
        Input(IDs.Control.COLUMNS_ALL_BTN, "n_clicks"),
        Input(IDs.Control.COLUMNS_NONE_BTN, "n_clicks"),
        Input(IDs.Control.COLUMNS_RESET_BTN, "n_clicks"),
        State(IDs.Control.COLUMN_CHECKLIST, "value"),
        prevent_initial_call=True,
    )
    def bulk_select_columns(_all, _none, _reset, current):
        columns = set_visible_keys(default_columns(), current or [])
        triggered = dash.ctx.triggered_id

        if triggered == IDs.Control.COLUMNS_ALL_BTN:
            columns = select_all(columns)
        elif triggered == IDs.Control.COLUMNS_NONE_BTN:
            columns = select_none(columns)
        elif triggered == IDs.Control.COLUMNS_RESET_BTN:
            columns = reset_to_default(columns)
        else:
            raise exceptions.PreventUpdate

        return [c.key for c in columns if c.visible]

    # ---------------------------------------------------------
    # Checklist -> table columns
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.SIGNAL_TABLE, "columns"),
        Input(IDs.Control.COLUMN_CHECKLIST, "value"),
    )
    def update_table_columns(visible_keys):
        columns = set_visible_keys(default_columns(), visible_keys or [])
        return table_columns(columns)
