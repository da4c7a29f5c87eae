"""Liveness and database readiness probe."""

from __future__ import annotations

import time

from flask import Blueprint, current_app
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from liftlog.api.deps import json_response, timing
from liftlog.core.extensions import db

bp = Blueprint("health", __name__)


def _probe_database() -> tuple[bool, float]:
    """Run ``SELECT 1``; return ``(reachable, latency_ms)``."""
    start = time.perf_counter()
    try:
        db.session.execute(text("SELECT 1"))
        reachable = True
    except SQLAlchemyError:
        current_app.logger.exception("healthcheck.db_error")
        db.session.rollback()
        reachable = False
    return reachable, round((time.perf_counter() - start) * 1000, 2)


@bp.get("/health")
@timing
def healthcheck():
    """Report build metadata and database reachability.

    Answers ``503`` with ``status="degraded"`` when the database probe fails
    so load balancers can drain the instance.
    """
    reachable, latency_ms = _probe_database()
    payload = {
        "status": "ok" if reachable else "degraded",
        "db": "ok" if reachable else "fail",
        "dbLatencyMs": latency_ms,
        "environment": current_app.config.get("APP_ENV", "development"),
        "version": current_app.config.get("APP_VERSION", "dev"),
        "commit": current_app.config.get("APP_COMMIT", "unknown"),
    }
    return json_response(payload, status=200 if reachable else 503)
