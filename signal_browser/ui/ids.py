from __future__ import annotations

__all__ = ["IDs", "thumbnail_card_id"]


class IDs:
    class Store:
        SESSION_ID = "session-id"
        FILTER_STATE = "filter-state"

    class Control:
        # Filter sidebar
        MODE_SELECT = "mode-select"
        BAND_SELECT = "band-select"
        COUNTRY_SELECT = "country-select"
        CALLSIGN_SELECT = "callsign-select"

        START_DATE = "start-date"
        START_TIME = "start-time"
        END_DATE = "end-date"
        END_TIME = "end-time"

        FREQUENCY_MIN = "frequency-min"
        FREQUENCY_MAX = "frequency-max"
        STRENGTH_MIN = "strength-min"
        STRENGTH_MAX = "strength-max"

        APPLY_FILTERS_BTN = "apply-filters-btn"
        CLEAR_FILTERS_BTN = "clear-filters-btn"
        FILTER_STATUS = "filter-status"

        # Results
        VIEW_TABS = "view-tabs"
        TABLE_CONTAINER = "table-container"
        THUMBNAIL_CONTAINER = "thumbnail-container"
        SIGNAL_TABLE = "signal-table"
        THUMBNAIL_GRID = "thumbnail-grid"
        RESULT_SUMMARY = "result-summary"
        PAGER = "pager"
        PAGE_SIZE_SELECT = "page-size-select"

        # Column selector
        COLUMNS_TOGGLE_BTN = "columns-toggle-btn"
        COLUMN_CHECKLIST = "column-checklist"
        COLUMNS_ALL_BTN = "columns-all-btn"
        COLUMNS_NONE_BTN = "columns-none-btn"
        COLUMNS_RESET_BTN = "columns-reset-btn"

        # Detail modal
        DETAIL_MODAL = "detail-modal"
        DETAIL_TITLE = "detail-title"
        DETAIL_BODY = "detail-body"
        DETAIL_CLOSE_BTN = "detail-close-btn"

        # Downloads
        DOWNLOAD_CSV = "download-csv"
        DOWNLOAD_CSV_BTN = "download-csv-btn"

    class Pattern:
        # pattern-matching "type" strings
        THUMBNAIL_CARD = "thumbnail-card"


def thumbnail_card_id(record_id: int) -> dict:
    return {"type": IDs.Pattern.THUMBNAIL_CARD, "index": record_id}
