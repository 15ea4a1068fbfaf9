from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
from dash import Input, Output, State

from signal_browser.config.model import VIEW_TABLE
from signal_browser.core.exceptions import SignalBrowserError
from signal_browser.core.filter_state import FilterSpec, empty_filter_spec
from signal_browser.core.view_controller import SignalBrowserController, ViewSnapshot
from signal_browser.ui.helpers import record_to_row, sort_spec_from_sort_by
from signal_browser.ui.ids import IDs
from signal_browser.ui.layout.build_results_panel import thumbnail_cards

if TYPE_CHECKING:
    from signal_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def _summary_text(snap: ViewSnapshot) -> str:
    if snap.filtered_count == 0:
        return f"No signals match the current filters ({snap.total_count} total)."
    if not snap.visible_page:
        return f"Page {snap.page_index + 1} is past the end of {snap.filtered_count} signals."
    first = snap.page_index * snap.page_size + 1
    last = first + len(snap.visible_page) - 1
    return f"Showing {first}–{last} of {snap.filtered_count} signals ({snap.total_count} total)."


def sync_controller(
    controller: SignalBrowserController,
    *,
    fs_data: Optional[dict[str, Any]],
    sort_by: Optional[list],
    active_page: Optional[int],
    page_size: Optional[int],
    triggered_id: Any,
) -> None:
    """
    Push UI state into the controller, touching only the stages that changed:
    filter -> sort -> page size -> page.
    """
    spec = FilterSpec.from_dict(fs_data) if fs_data else empty_filter_spec()
    filter_changed = spec != controller.filter_spec
    if filter_changed:
        controller.set_filter(spec)

    sort_spec = sort_spec_from_sort_by(sort_by)
    if sort_spec != controller.sort_spec:
        controller.set_sort(sort_spec)

    size = page_size or controller.pagination.page_size
    if size != controller.pagination.page_size:
        controller.set_page(0, size)
    elif not filter_changed and triggered_id == IDs.Control.PAGER:
        controller.set_page(max(0, (active_page or 1) - 1))


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Filter / sort / page state -> visible page
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.SIGNAL_TABLE, "data"),
        Output(IDs.Control.THUMBNAIL_GRID, "children"),
        Output(IDs.Control.RESULT_SUMMARY, "children"),
        Output(IDs.Control.PAGER, "max_value"),
        Output(IDs.Control.PAGER, "active_page"),
        Input(IDs.Store.FILTER_STATE, "data"),
        Input(IDs.Control.SIGNAL_TABLE, "sort_by"),
        Input(IDs.Control.PAGER, "active_page"),
        Input(IDs.Control.PAGE_SIZE_SELECT, "value"),
        State(IDs.Store.SESSION_ID, "data"),
    )
    def update_visible_page(fs_data, sort_by, active_page, page_size, session_id):
        try:
            # Sync and snapshot under one lock so the snapshot is never half-updated
            with ctx.locked_controller(session_id) as controller:
                sync_controller(
                    controller,
                    fs_data=fs_data,
                    sort_by=sort_by,
                    active_page=active_page,
                    page_size=page_size,
                    triggered_id=dash.ctx.triggered_id,
                )
                snap = controller.snapshot()
        except SignalBrowserError as e:
            logger.warning("Rejected view update", extra={"error": str(e), "session_id": session_id})
            return dash.no_update, dash.no_update, str(e), dash.no_update, dash.no_update
        except Exception:
            logger.exception(
                "Error in update_visible_page",
                extra={"session_id": session_id, "filter_state": fs_data},
            )
            return [], [], "The app hit an unexpected error. Grab the logs and open an issue.", 1, 1

        return (
            [record_to_row(rec) for rec in snap.visible_page],
            thumbnail_cards(snap.visible_page),
            _summary_text(snap),
            max(1, snap.page_count),
            snap.page_index + 1,
        )

    # ---------------------------------------------------------
    # Table / thumbnail switch
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.TABLE_CONTAINER, "style"),
        Output(IDs.Control.THUMBNAIL_CONTAINER, "style"),
        Input(IDs.Control.VIEW_TABS, "active_tab"),
    )
    def switch_view(active_tab: str | None):
        hidden = {"display": "none"}
        if active_tab == VIEW_TABLE or active_tab is None:
            return {}, hidden
        return hidden, {}
