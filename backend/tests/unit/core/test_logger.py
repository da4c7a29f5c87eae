from __future__ import annotations

import io
import json
import logging

import pytest
from liftlog.core.logger import (
    JSONFormatter,
    configure_logging,
    ensure_request_id,
    resolve_level,
)


@pytest.fixture()
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="liftlog.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Workout %s",
        args=("created",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_renders_known_extras():
    payload = json.loads(
        JSONFormatter().format(_record(workout_id=7, count=2, request_id="req-1", secret="x"))
    )

    assert payload["message"] == "Workout created"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "liftlog.test"
    assert payload["workout_id"] == 7
    assert payload["count"] == 2
    assert payload["request_id"] == "req-1"
    assert "secret" not in payload
    assert "method" not in payload


def test_json_formatter_adds_http_context():
    payload = json.loads(
        JSONFormatter().format(_record(method="GET", path="/api/v1/workouts"))
    )
    assert (payload["method"], payload["path"]) == ("GET", "/api/v1/workouts")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("debug", logging.DEBUG), (" Warning ", logging.WARNING), (logging.ERROR, logging.ERROR), ("loud", logging.INFO)],
)
def test_resolve_level(raw, expected):
    assert resolve_level(raw) == expected


def test_configure_logging_writes_json(restore_root_logger):
    stream = io.StringIO()
    configure_logging("debug", stream=stream)

    logging.getLogger("liftlog.services").debug("Listed", extra={"owner_id": 3})

    assert restore_root_logger.level == logging.DEBUG
    assert len(restore_root_logger.handlers) == 1
    line = json.loads(stream.getvalue().strip().splitlines()[-1])
    assert line["message"] == "Listed"
    assert line["owner_id"] == 3
    assert line["request_id"] is None


def test_request_id_is_scoped_to_one_request(app):
    with app.test_request_context("/", headers={"X-Request-ID": "first"}):
        assert ensure_request_id() == "first"
    with app.test_request_context("/", headers={"X-Correlation-ID": "second"}):
        assert ensure_request_id() == "second"
    with app.test_request_context("/"):
        minted = ensure_request_id()
        assert minted not in {"first", "second"}
        assert ensure_request_id() == minted


def test_request_id_outside_request_is_fresh():
    assert ensure_request_id() != ensure_request_id()
