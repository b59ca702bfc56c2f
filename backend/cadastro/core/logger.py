"""Structured logging configuration with request correlation."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from flask import Flask, g, has_request_context, request

REQUEST_ID_HEADER = "X-Request-ID"
CORRELATION_HEADERS = ("X-Request-ID", "X-Correlation-ID")

# Structured keys callers may pass through ``extra=`` and that we keep in the payload
EXTRA_KEYS = ("endpoint", "elapsed_ms", "stage", "code", "cep", "status")


class JSONFormatter(logging.Formatter):
    """Render log records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "time": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", None),
        }
        for key in EXTRA_KEYS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, ensure_ascii=False)


class RequestIdFilter(logging.Filter):
    """Ensure a ``request_id`` attribute is always present on log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = ensure_request_id() if has_request_context() else None
        return True


def ensure_request_id() -> str:
    """Return the current request identifier, generating one when necessary.

    The id is read from the first correlation header present on the request
    and cached on :data:`flask.g` so every log line of one request shares it.
    Outside a request context a throwaway UUID4 is returned.
    """
    if not has_request_context():
        return str(uuid4())
    cached = getattr(g, "request_id", None)
    if cached:
        return str(cached)
    for header in CORRELATION_HEADERS:
        value = request.headers.get(header)
        if value:
            g.request_id = value
            return value
    request_id = str(uuid4())
    g.request_id = request_id
    return request_id


def configure_logging(level: str | int = "INFO") -> None:
    """Configure the root logger with JSON-formatted stdout output."""

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter())
    handler.addFilter(RequestIdFilter())
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    level_value: int | str = level
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        level_value = resolved if isinstance(resolved, int) else logging.INFO
    root.setLevel(level_value)
    # urllib3 logs every outbound connection at DEBUG; keep lookups quiet
    logging.getLogger("urllib3").setLevel(max(root.level, logging.WARNING))


def init_app(app: Flask) -> None:
    """Seed request ids and echo them back on every response."""

    app.logger.addFilter(RequestIdFilter())

    @app.before_request
    def _seed_request_id() -> None:  # pragma: no cover - integration glue
        # ``g`` outlives the request when the app context was pushed earlier
        g.pop("request_id", None)
        ensure_request_id()

    @app.after_request
    def _inject_response_header(response):  # pragma: no cover - integration glue
        response.headers.setdefault(REQUEST_ID_HEADER, ensure_request_id())
        return response


__all__ = ["configure_logging", "init_app", "ensure_request_id", "JSONFormatter"]
