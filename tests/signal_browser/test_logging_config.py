import logging

import pytest
from pythonjsonlogger import jsonlogger

from signal_browser.logging_config import (
    LOG_FORMAT_ENV,
    LOG_LEVEL_ENV,
    configure_logging,
    resolve_log_level,
)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.parametrize(
    "raw, expected",
    [("", logging.INFO), ("DEBUG", logging.DEBUG), ("warning", logging.WARNING), ("15", 15), ("chatty", logging.INFO)],
)
def test_resolve_log_level_from_env(monkeypatch, raw, expected):
    monkeypatch.setenv(LOG_LEVEL_ENV, raw)

    assert resolve_log_level() == expected


def test_configure_logging_defaults_to_json(monkeypatch, restore_root_logger):
    monkeypatch.delenv(LOG_FORMAT_ENV, raising=False)
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")

    configure_logging()

    assert restore_root_logger.level == logging.DEBUG
    assert len(restore_root_logger.handlers) == 1
    assert isinstance(restore_root_logger.handlers[0].formatter, jsonlogger.JsonFormatter)


def test_configure_logging_plain_and_explicit_level(monkeypatch, restore_root_logger):
    monkeypatch.setenv(LOG_FORMAT_ENV, "PLAIN")
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")

    configure_logging(level="error")

    assert restore_root_logger.level == logging.ERROR
    assert not isinstance(restore_root_logger.handlers[0].formatter, jsonlogger.JsonFormatter)
