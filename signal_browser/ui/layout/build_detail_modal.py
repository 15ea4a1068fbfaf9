from __future__ import annotations

from typing import List

import dash_bootstrap_components as dbc
import plotly.graph_objs as go
from dash import dcc, html

from signal_browser.core.record import SignalRecord
from signal_browser.ui.formatting import (
    format_frequency,
    format_power,
    format_signal_strength,
    format_timestamp,
)
from signal_browser.ui.ids import IDs


def build_detail_modal() -> dbc.Modal:
    return dbc.Modal(
        [
            dbc.ModalHeader(dbc.ModalTitle(id=IDs.Control.DETAIL_TITLE)),
            dbc.ModalBody(id=IDs.Control.DETAIL_BODY),
            dbc.ModalFooter(
                dbc.Button("Close", id=IDs.Control.DETAIL_CLOSE_BTN, color="secondary", size="sm")
            ),
        ],
        id=IDs.Control.DETAIL_MODAL,
        is_open=False,
        size="lg",
        scrollable=True,
    )


def strength_gauge(record: SignalRecord) -> go.Figure:
    fig = go.Figure(
        go.Indicator(
            mode="gauge+number",
            value=record.signal_strength_db,
            number={"suffix": " dB", "valueformat": ".1f"},
            gauge={
                "axis": {"range": [-120, 0]},
                "bar": {"color": "#2c7be5"},
                "steps": [
                    {"range": [-120, -90], "color": "#f8d7da"},
                    {"range": [-90, -60], "color": "#fff3cd"},
                    {"range": [-60, 0], "color": "#d1e7dd"},
                ],
            },
            title={"text": "Signal strength"},
        )
    )
    fig.update_layout(margin=dict(l=30, r=30, t=50, b=10), height=240)
    return fig


def detail_title(record: SignalRecord) -> str:
    return f"{record.call_sign} · {format_frequency(record.frequency_mhz)}"


def detail_body(record: SignalRecord) -> List:
    rows = [
        ("ID", str(record.id)),
        ("Call sign", record.call_sign),
        ("Frequency", format_frequency(record.frequency_mhz)),
        ("Mode", record.mode),
        ("Band", record.band),
        ("Signal strength", format_signal_strength(record.signal_strength_db)),
        ("Received", format_timestamp(record.timestamp)),
        ("Location", record.location),
        ("Country", record.country),
        ("Power", format_power(record.power_watts)),
        ("Notes", record.notes or "-"),
    ]

    return [
        dbc.Tabs(
            [
                dbc.Tab(
                    dbc.Table(
                        html.Tbody(
                            [html.Tr([html.Th(label), html.Td(value)]) for label, value in rows]
                        ),
                        bordered=False,
                        size="sm",
                        className="mt-2",
                    ),
                    label="Details",
                ),
                dbc.Tab(
                    dcc.Graph(figure=strength_gauge(record), config={"displayModeBar": False}),
                    label="Signal",
                ),
            ]
        )
    ]
