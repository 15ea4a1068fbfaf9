import json
from pathlib import Path

from signal_browser.services.record_source import MockRecordSource
from signal_browser.ui.callbacks.callbacks_detail import _clicked_record_id
from signal_browser.ui.dash_app import create_dash_app
from signal_browser.ui.ids import IDs, thumbnail_card_id
from signal_browser.ui.layout.build_detail_modal import detail_body, detail_title, strength_gauge
from signal_browser.ui.layout.build_results_panel import thumbnail_cards


def _write_config(root: Path) -> None:
    (root / "global.json").write_text(
        json.dumps(
            {
                "ui_title": "Test Monitor",
                "max_sessions": 3,
                "record_source": {"type": "mock", "count": 30, "seed": 1},
            }
        )
    )


def test_create_dash_app_and_layout(tmp_path: Path):
    _write_config(tmp_path)

    app = create_dash_app(tmp_path)

    assert app.title == "Test Monitor"
    layout = app.layout()
    assert layout is not None
    assert app.server is not None


def test_clicked_record_id_from_table():
    assert _clicked_record_id(IDs.Control.SIGNAL_TABLE, {"row": 0, "column": 0, "row_id": 17}) == 17
    assert _clicked_record_id(IDs.Control.SIGNAL_TABLE, None) is None
    assert _clicked_record_id(IDs.Control.SIGNAL_TABLE, {"row": 0, "column": 0}) is None
    assert _clicked_record_id("something-else", None) is None


def test_detail_and_thumbnail_components():
    records = MockRecordSource(count=3, seed=2).load()
    rec = records[0]

    assert rec.call_sign in detail_title(rec)
    assert len(detail_body(rec)) == 1
    assert strength_gauge(rec).data[0].value == rec.signal_strength_db

    cards = thumbnail_cards(records)
    assert len(cards) == 3
    assert cards[0].children.id == thumbnail_card_id(rec.id)

    empty = thumbnail_cards([])
    assert len(empty) == 1
