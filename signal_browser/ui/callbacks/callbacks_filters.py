from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
import dash_bootstrap_components as dbc
from dash import Input, Output, State, html

from signal_browser.core.exceptions import InvalidTimeFormatError
from signal_browser.core.filter_state import FilterSpec, empty_filter_spec
from signal_browser.ui.helpers import (
    active_filter_summary,
    filter_spec_from_inputs,
    normalize_time_input,
)
from signal_browser.ui.ids import IDs

if TYPE_CHECKING:
    from signal_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def _status(spec: FilterSpec):
    chips = active_filter_summary(spec)
    if not chips:
        return "No filters applied."
    return html.Div([dbc.Badge(c, color="light", text_color="dark", className="me-1 mb-1") for c in chips])


def register_filter_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Apply: sidebar values -> filter-state store
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.FILTER_STATE, "data"),
        Output(IDs.Control.FILTER_STATUS, "children"),
        Input(IDs.Control.APPLY_FILTERS_BTN, "n_clicks"),
        State(IDs.Control.MODE_SELECT, "value"),
        State(IDs.Control.BAND_SELECT, "value"),
        State(IDs.Control.COUNTRY_SELECT, "value"),
        State(IDs.Control.CALLSIGN_SELECT, "value"),
        State(IDs.Control.START_DATE, "date"),
        State(IDs.Control.START_TIME, "value"),
        State(IDs.Control.END_DATE, "date"),
        State(IDs.Control.END_TIME, "value"),
        State(IDs.Control.FREQUENCY_MIN, "value"),
        State(IDs.Control.FREQUENCY_MAX, "value"),
        State(IDs.Control.STRENGTH_MIN, "value"),
        State(IDs.Control.STRENGTH_MAX, "value"),
        prevent_initial_call=True,
    )
    def apply_filters(
        _n_clicks,
        modes, bands, countries, call_signs,
        start_date, start_time, end_date, end_time,
        frequency_min, frequency_max, strength_min, strength_max,
    ):
        spec = filter_spec_from_inputs(
            modes=modes,
            bands=bands,
            countries=countries,
            call_signs=call_signs,
            start_date=start_date,
            start_time=start_time,
            end_date=end_date,
            end_time=end_time,
            frequency_min=frequency_min,
            frequency_max=frequency_max,
            strength_min=strength_min,
            strength_max=strength_max,
        )
        logger.info("filters_submitted", extra={"filter": spec.to_dict()})
        return spec.to_dict(), _status(spec)

    # ---------------------------------------------------------
    # Clear: reset every control and the store
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.FILTER_STATE, "data", allow_duplicate=True),
        Output(IDs.Control.FILTER_STATUS, "children", allow_duplicate=True),
        Output(IDs.Control.MODE_SELECT, "value"),
        Output(IDs.Control.BAND_SELECT, "value"),
        Output(IDs.Control.COUNTRY_SELECT, "value"),
        Output(IDs.Control.CALLSIGN_SELECT, "value"),
        Output(IDs.Control.START_DATE, "date"),
        Output(IDs.Control.START_TIME, "value", allow_duplicate=True),
        Output(IDs.Control.END_DATE, "date"),
        Output(IDs.Control.END_TIME, "value", allow_duplicate=True),
        Output(IDs.Control.FREQUENCY_MIN, "value"),
        Output(IDs.Control.FREQUENCY_MAX, "value"),
        Output(IDs.Control.STRENGTH_MIN, "value"),
        Output(IDs.Control.STRENGTH_MAX, "value"),
        Input(IDs.Control.CLEAR_FILTERS_BTN, "n_clicks"),
        prevent_initial_call=True,
    )
    def clear_filters(_n_clicks):
        empty = empty_filter_spec()
        return (
            empty.to_dict(), _status(empty),
            [], [], [], [],
            None, "", None, "",
            None, None, None, None,
        )

    # ---------------------------------------------------------
    # Time inputs: normalise to HH:MM:SS on blur / enter
    # ---------------------------------------------------------
    def _register_time_normaliser(time_id: str) -> None:
        @app.callback(
            Output(time_id, "value"),
            Output(time_id, "invalid"),
            Input(time_id, "value"),
            prevent_initial_call=True,
        )
        def normalise_time(raw):
            if not raw:
                return "", False
            try:
                return normalize_time_input(raw), False
            except InvalidTimeFormatError:
                return dash.no_update, True

    _register_time_normaliser(IDs.Control.START_TIME)
    _register_time_normaliser(IDs.Control.END_TIME)
