import io
import json
import logging

import pytest

import ats_config.logging as log_module
from ats_config.logging import JsonFormatter, configure_logging, current_request_id, request_context


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("ats_config.test", logging.INFO, __file__, 1, "config %s", ("loaded",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_emits_extra_fields_and_request_id():
    formatter = JsonFormatter("config_preview")
    with request_context("req-9"):
        assert current_request_id() == "req-9"
        payload = json.loads(formatter.format(_record(field_id="cost-center", valid=True)))
    assert current_request_id() is None
    assert payload["message"] == "config loaded"
    assert payload["service"] == "config_preview"
    assert payload["request_id"] == "req-9"
    assert payload["field_id"] == "cost-center"
    assert payload["valid"] is True
    assert "levelno" not in payload


def test_formatter_reprs_unserializable_values():
    payload = json.loads(JsonFormatter().format(_record(source={1, 2})))
    assert payload["source"] == repr({1, 2})


def test_configure_logging_writes_json_to_stream(monkeypatch: pytest.MonkeyPatch):
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    monkeypatch.setattr(log_module, "_configured", False)
    stream = io.StringIO()
    try:
        configure_logging("ats_config_cli", level="debug", stream=stream)
        configure_logging("ignored", stream=io.StringIO())
        logging.getLogger("ats_config.sources").debug("config fetched", extra={"location": "https://x.example/"})
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
    payload = json.loads(stream.getvalue().strip().splitlines()[-1])
    assert payload["service"] == "ats_config_cli"
    assert payload["level"] == "DEBUG"
    assert payload["location"] == "https://x.example/"
    assert payload["timestamp"].endswith("Z")
    assert logging.getLogger("httpx").level == logging.WARNING
