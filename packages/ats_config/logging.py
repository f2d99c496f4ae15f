import json
import logging
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, TextIO

_configured = False
_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)

# Attributes every LogRecord carries; anything else came in through `extra=`.
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))) | {"message", "asctime"}

# Loggers that chatter at INFO about every request they make.
_QUIET_LOGGERS = ("httpx", "httpcore")


def _json_value(value: Any) -> Any:
    try:
        json.dumps(value)
    except (TypeError, ValueError):
        return repr(value)
    return value


def _extra_fields(record: logging.LogRecord) -> Iterator[tuple[str, Any]]:
    for key, value in record.__dict__.items():
        if key in _RECORD_ATTRS or key.startswith("_"):
            continue
        yield key, _json_value(value)


class JsonFormatter(logging.Formatter):
    """One JSON object per line: timestamp, level, logger, message, then any
    request id, service name, traceback and ``extra=`` fields."""

    def __init__(self, service_name: str | None = None):
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: dict[str, Any] = {
            "timestamp": created.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        request_id = _request_id.get()
        if request_id:
            payload["request_id"] = request_id
        if self.service_name:
            payload["service"] = self.service_name
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        for key, value in _extra_fields(record):
            payload.setdefault(key, value)
        return json.dumps(payload, ensure_ascii=False)


def configure_logging(
    service_name: str | None = None,
    level: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """Route the root logger through ``JsonFormatter``; later calls are no-ops.

    ``level`` falls back to ``LOG_LEVEL`` and then INFO. Output goes to stderr
    unless ``stream`` is given, so CLI stdout stays machine readable.
    """
    global _configured
    if _configured:
        return
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JsonFormatter(service_name))
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel((level or os.getenv("LOG_LEVEL", "INFO")).upper())
    root.addHandler(handler)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    _configured = True


@contextmanager
def request_context(request_id: str | None) -> Iterator[None]:
    token = _request_id.set(request_id)
    try:
        yield
    finally:
        _request_id.reset(token)


def current_request_id() -> str | None:
    return _request_id.get()


__all__ = ["JsonFormatter", "configure_logging", "current_request_id", "request_context"]
