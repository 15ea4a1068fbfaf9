from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from signal_browser.core.view_controller import FilterOptions
from signal_browser.ui.helpers import get_filter_dropdown_options
from signal_browser.ui.ids import IDs


def _multi_select(label: str, component_id: str, options: list, placeholder: str) -> html.Div:
    return html.Div(
        [
            html.Label(label, className="form-label"),
            dcc.Dropdown(
                id=component_id,
                options=options,
                value=[],
                multi=True,
                placeholder=placeholder,
                className="mb-3",
            ),
        ]
    )


def _range_inputs(label: str, min_id: str, max_id: str, unit: str, step: float) -> html.Div:
    return html.Div(
        [
            html.Label(f"{label} ({unit})", className="form-label"),
            dbc.InputGroup(
                [
                    dbc.Input(id=min_id, type="number", placeholder="Min", step=step, debounce=True),
                    dbc.Input(id=max_id, type="number", placeholder="Max", step=step, debounce=True),
                ],
                size="sm",
                className="mb-3",
            ),
        ]
    )


def _date_time_inputs(label: str, date_id: str, time_id: str) -> html.Div:
    return html.Div(
        [
            html.Label(label, className="form-label"),
            dbc.Row(
                [
                    dbc.Col(
                        dcc.DatePickerSingle(
                            id=date_id,
                            display_format="YYYY-MM-DD",
                            placeholder="Date",
                            clearable=True,
                        ),
                        width=7,
                    ),
                    dbc.Col(
                        dbc.Input(
                            id=time_id,
                            type="text",
                            placeholder="HH:MM:SS",
                            debounce=True,
                            value="",
                        ),
                        width=5,
                    ),
                ],
                className="g-1 mb-3",
            ),
        ]
    )


def build_filter_panel(options: FilterOptions) -> dbc.Card:
    mode_options, band_options, country_options, callsign_options = get_filter_dropdown_options(options)

    return dbc.Card(
        [
            dbc.CardHeader("Filters", className="fw-semibold"),
            dbc.CardBody(
                [
                    _multi_select("Modes", IDs.Control.MODE_SELECT, mode_options, "All modes"),
                    _multi_select("Bands", IDs.Control.BAND_SELECT, band_options, "All bands"),
                    _multi_select("Countries", IDs.Control.COUNTRY_SELECT, country_options, "All countries"),
                    _multi_select("Call signs", IDs.Control.CALLSIGN_SELECT, callsign_options, "All call signs"),
                    html.Hr(),
                    _date_time_inputs("From", IDs.Control.START_DATE, IDs.Control.START_TIME),
                    _date_time_inputs("Until", IDs.Control.END_DATE, IDs.Control.END_TIME),
                    html.Hr(),
                    _range_inputs(
                        "Frequency", IDs.Control.FREQUENCY_MIN, IDs.Control.FREQUENCY_MAX, "MHz", 0.001
                    ),
                    _range_inputs(
                        "Signal strength", IDs.Control.STRENGTH_MIN, IDs.Control.STRENGTH_MAX, "dB", 0.1
                    ),
                    html.Div(
                        [
                            dbc.Button(
                                "Apply",
                                id=IDs.Control.APPLY_FILTERS_BTN,
                                color="primary",
                                size="sm",
                                className="me-2",
                            ),
                            dbc.Button(
                                "Clear",
                                id=IDs.Control.CLEAR_FILTERS_BTN,
                                color="secondary",
                                outline=True,
                                size="sm",
                            ),
                        ],
                        className="d-flex",
                    ),
                    html.Div(id=IDs.Control.FILTER_STATUS, className="mt-2 small text-muted"),
                ]
            ),
        ],
        className="sb-sidebar",
    )
