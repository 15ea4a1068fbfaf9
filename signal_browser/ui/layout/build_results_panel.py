from __future__ import annotations

from typing import List, Sequence

import dash_bootstrap_components as dbc
from dash import dash_table, dcc, html

from signal_browser.config.model import VIEW_TABLE, VIEW_THUMBNAILS, GlobalConfig
from signal_browser.core.columns import Columns
from signal_browser.core.record import SignalRecord
from signal_browser.ui.formatting import (
    format_frequency,
    format_signal_strength,
    format_timestamp,
    strength_percent,
)
from signal_browser.ui.helpers import table_columns
from signal_browser.ui.ids import IDs, thumbnail_card_id

_CELL_FONT = 'system-ui, -apple-system, BlinkMacSystemFont, "SF Pro Text", "Segoe UI", sans-serif'


def build_column_selector(columns: Columns) -> html.Div:
    return html.Div(
        [
            dbc.Button(
                "Columns",
                id=IDs.Control.COLUMNS_TOGGLE_BTN,
                color="secondary",
                outline=True,
                size="sm",
                className="me-2",
            ),
            dbc.Popover(
                [
                    dbc.PopoverHeader("Visible columns"),
                    dbc.PopoverBody(
                        [
                            dbc.Checklist(
                                id=IDs.Control.COLUMN_CHECKLIST,
                                options=[{"label": c.label, "value": c.key} for c in columns],
                                value=[c.key for c in columns if c.visible],
                            ),
                            html.Hr(className="my-2"),
                            dbc.ButtonGroup(
                                [
                                    dbc.Button("All", id=IDs.Control.COLUMNS_ALL_BTN, outline=True),
                                    dbc.Button("None", id=IDs.Control.COLUMNS_NONE_BTN, outline=True),
                                    dbc.Button("Reset", id=IDs.Control.COLUMNS_RESET_BTN, outline=True),
                                ],
                                size="sm",
                            ),
                        ]
                    ),
                ],
                target=IDs.Control.COLUMNS_TOGGLE_BTN,
                trigger="legacy",
                placement="bottom",
            ),
        ]
    )


def build_signal_table(columns: Columns) -> dash_table.DataTable:
    return dash_table.DataTable(
        id=IDs.Control.SIGNAL_TABLE,
        data=[],
        columns=table_columns(columns),
        page_action="none",
        sort_action="custom",
        sort_mode="single",
        sort_by=[],
        style_table={"overflowX": "auto"},
        style_as_list_view=True,
        style_cell={
            "fontFamily": _CELL_FONT,
            "fontSize": "12px",
            "padding": "6px 8px",
            "border": "none",
            "textAlign": "left",
            "minWidth": "80px",
            "maxWidth": "260px",
            "whiteSpace": "nowrap",
            "textOverflow": "ellipsis",
            "cursor": "pointer",
        },
        style_header={
            "fontFamily": _CELL_FONT,
            "fontSize": "12px",
            "fontWeight": "600",
            "backgroundColor": "#f3f4f6",
            "borderBottom": "1px solid #e5e7eb",
        },
        style_data={
            "borderBottom": "1px solid #e5e7eb",
        },
    )


def _thumbnail_card(rec: SignalRecord) -> dbc.Card:
    return dbc.Card(
        dbc.CardBody(
            [
                html.Div(
                    [
                        html.Strong(rec.call_sign),
                        dbc.Badge(rec.mode, color="info", className="ms-auto"),
                    ],
                    className="d-flex align-items-center mb-1",
                ),
                html.Div(format_frequency(rec.frequency_mhz), className="fs-5"),
                html.Small(
                    f"{rec.band} · {rec.country} · {format_timestamp(rec.timestamp)}",
                    className="text-muted d-block mb-2",
                ),
                dbc.Progress(
                    value=strength_percent(rec.signal_strength_db),
                    label=format_signal_strength(rec.signal_strength_db),
                    style={"height": "14px"},
                ),
            ]
        ),
        className="h-100 shadow-sm sb-thumbnail",
    )


def thumbnail_cards(records: Sequence[SignalRecord]) -> List:
    if not records:
        return [html.Div("No signals match the current filters.", className="text-muted p-3")]

    # Cards are wrapped in a clickable Div; pattern-matching ids open the detail modal
    return [
        dbc.Col(
            html.Div(
                _thumbnail_card(rec),
                id=thumbnail_card_id(rec.id),
                n_clicks=0,
                className="h-100",
                style={"cursor": "pointer"},
            ),
            xs=12,
            md=6,
            xl=4,
            className="mb-3",
        )
        for rec in records
    ]


def build_results_panel(global_config: GlobalConfig, columns: Columns) -> dbc.Card:
    page_size_options = [
        {"label": f"{n} / page", "value": n} for n in global_config.page_size_options
    ]
    show_table = global_config.default_view == VIEW_TABLE

    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        dbc.Tabs(
                            id=IDs.Control.VIEW_TABS,
                            active_tab=global_config.default_view,
                            children=[
                                dbc.Tab(label="Table", tab_id=VIEW_TABLE),
                                dbc.Tab(label="Thumbnails", tab_id=VIEW_THUMBNAILS),
                            ],
                        ),
                        html.Div(
                            [
                                build_column_selector(columns),
                                dbc.Button(
                                    "Download data (CSV)",
                                    id=IDs.Control.DOWNLOAD_CSV_BTN,
                                    color="secondary",
                                    size="sm",
                                ),
                                dcc.Download(id=IDs.Control.DOWNLOAD_CSV),
                            ],
                            className="ms-auto d-flex align-items-center",
                        ),
                    ],
                    className="d-flex align-items-center",
                ),
                className="p-2",
            ),
            dbc.CardBody(
                [
                    html.Div(id=IDs.Control.RESULT_SUMMARY, className="small text-muted mb-2"),
                    dcc.Loading(
                        type="default",
                        children=[
                            html.Div(
                                build_signal_table(columns),
                                id=IDs.Control.TABLE_CONTAINER,
                                style={} if show_table else {"display": "none"},
                            ),
                            html.Div(
                                dbc.Row(id=IDs.Control.THUMBNAIL_GRID),
                                id=IDs.Control.THUMBNAIL_CONTAINER,
                                style={"display": "none"} if show_table else {},
                            ),
                        ],
                    ),
                    html.Div(
                        [
                            dbc.Pagination(
                                id=IDs.Control.PAGER,
                                max_value=1,
                                active_page=1,
                                fully_expanded=False,
                                first_last=True,
                                previous_next=True,
                                size="sm",
                            ),
                            dcc.Dropdown(
                                id=IDs.Control.PAGE_SIZE_SELECT,
                                options=page_size_options,
                                value=global_config.default_page_size,
                                clearable=False,
                                style={"width": "140px"},
                                className="ms-auto",
                            ),
                        ],
                        className="d-flex align-items-center mt-3",
                    ),
                ],
                className="sb-main-body",
            ),
        ],
        className="sb-maincard",
    )
