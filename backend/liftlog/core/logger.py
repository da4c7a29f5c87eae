"""JSON logging for the LiftLog API with per-request correlation ids.

Every record leaves the process as a single JSON object on stdout. Inside a
request the object also carries the correlation id plus the HTTP method and
path; service code adds domain context through ``extra`` (see
:data:`EXTRA_KEYS`).
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import IO, Any
from uuid import uuid4

from flask import Flask, Response, has_request_context, request

REQUEST_ID_HEADER = "X-Request-ID"
#: WSGI environ key holding the id adopted for the current request
REQUEST_ID_ENVIRON_KEY = "liftlog.request_id"
CORRELATION_HEADERS = ("X-Request-ID", "X-Correlation-ID")

#: ``extra`` keys copied into the JSON payload when set on a record
EXTRA_KEYS = (
    "endpoint",
    "elapsed_ms",
    "status",
    "workout_id",
    "owner_id",
    "operation",
    "count",
    "muscle_group",
)


class JSONFormatter(logging.Formatter):
    """Render log records as compact JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, timezone.utc).isoformat(
                timespec="milliseconds"
            ),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", None),
        }
        method = getattr(record, "method", None)
        if method:
            payload["method"] = method
            payload["path"] = getattr(record, "path", None)
        for key in EXTRA_KEYS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class RequestContextFilter(logging.Filter):
    """Stamp ``request_id``, ``method`` and ``path`` on every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        if has_request_context():
            record.request_id = ensure_request_id()
            record.method = request.method
            record.path = request.path
        else:
            record.request_id = None
            record.method = None
            record.path = None
        return True


def ensure_request_id() -> str:
    """Return the current request id, adopting a client header or minting a UUID4.

    The id lives in the WSGI environ of the current request, so it never
    outlives that request even when the application context does. Outside a
    request a fresh id is returned on every call.
    """
    if not has_request_context():
        return str(uuid4())
    environ = request.environ
    cached = environ.get(REQUEST_ID_ENVIRON_KEY)
    if cached:
        return cached  # type: ignore[no-any-return]
    value = next(
        (request.headers[h] for h in CORRELATION_HEADERS if request.headers.get(h)),
        None,
    ) or str(uuid4())
    environ[REQUEST_ID_ENVIRON_KEY] = value
    return value


def resolve_level(level: str | int) -> int:
    """Turn ``"debug"``/``"INFO"``/``logging.WARNING`` into a numeric level.

    Unknown names fall back to ``logging.INFO``.
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: str | int = "INFO", *, stream: IO[str] | None = None) -> None:
    """Send root logging to ``stream`` (stdout by default) as JSON."""
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(JSONFormatter())
    handler.addFilter(RequestContextFilter())
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(resolve_level(level))


def init_app(app: Flask) -> None:
    """Seed the request id early and echo it back on every response."""
    app.logger.addFilter(RequestContextFilter())

    @app.before_request
    def _seed_request_id() -> None:
        ensure_request_id()

    @app.after_request
    def _inject_response_header(response: Response) -> Response:
        response.headers.setdefault(REQUEST_ID_HEADER, ensure_request_id())
        return response


__all__ = [
    "EXTRA_KEYS",
    "JSONFormatter",
    "RequestContextFilter",
    "configure_logging",
    "ensure_request_id",
    "init_app",
    "resolve_level",
]
