import json
import logging

import pytest

from core.correlation import get_request_id, new_request_id, set_request_id
from core.logging import JSONFormatter, RequestIDFilter, configure_logging


def _record(message: str = "hello", exc_info=None) -> logging.LogRecord:
    return logging.LogRecord(
        "services.language_id", logging.INFO, __file__, 1, message, None, exc_info
    )


def test_filter_stamps_request_id() -> None:
    set_request_id("rid-log")
    record = _record()
    assert RequestIDFilter().filter(record)
    assert record.request_id == "rid-log"


def test_json_formatter_fields() -> None:
    set_request_id("rid-json")
    record = _record("Detected %s")
    record.args = ("fin",)
    RequestIDFilter().filter(record)

    payload = json.loads(JSONFormatter().format(record))

    assert payload == {
        "level": "INFO",
        "logger": "services.language_id",
        "message": "Detected fin",
        "request_id": "rid-json",
    }


def test_json_formatter_keeps_non_ascii() -> None:
    line = JSONFormatter().format(_record("Привет"))
    assert "Привет" in line


def test_json_formatter_includes_exception() -> None:
    try:
        raise ValueError("bad")
    except ValueError:
        import sys

        record = _record(exc_info=sys.exc_info())
    payload = json.loads(JSONFormatter().format(record))
    assert "ValueError: bad" in payload["exc_info"]


def test_new_request_id() -> None:
    rid = new_request_id()
    assert len(rid) == 12
    assert get_request_id() == rid


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)


def test_configure_logging(restore_root_logger) -> None:
    configure_logging("debug", json_output=False)
    root = restore_root_logger
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    handler = root.handlers[0]
    assert any(isinstance(f, RequestIDFilter) for f in handler.filters)
    assert not isinstance(handler.formatter, JSONFormatter)

    configure_logging()
    assert isinstance(root.handlers[0].formatter, JSONFormatter)
    assert root.level == logging.INFO
