"""Engine-level tuning applied once the shared SQLAlchemy engine exists.

SQLite needs two adjustments to honor the schema contract:

* ``PRAGMA foreign_keys=ON`` on every new DBAPI connection, otherwise
  ``ON DELETE CASCADE`` from workouts to logged exercises never fires.
* pysqlite's implicit transaction handling is disabled and ``BEGIN`` is
  emitted explicitly, so SAVEPOINT-based units of work nest correctly.

Other dialects are left untouched.
"""

from __future__ import annotations

import logging

from sqlalchemy import event
from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)


def _sqlite_on_connect(dbapi_connection, connection_record) -> None:  # pragma: no cover - driver glue
    dbapi_connection.isolation_level = None
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA foreign_keys=ON")
    finally:
        cursor.close()


def _sqlite_on_begin(conn) -> None:  # pragma: no cover - driver glue
    conn.exec_driver_sql("BEGIN")


def configure_engine(engine: Engine) -> None:
    """Install dialect-specific listeners on ``engine`` (idempotent)."""

    if engine.dialect.name != "sqlite":
        return
    if not event.contains(engine, "connect", _sqlite_on_connect):
        event.listen(engine, "connect", _sqlite_on_connect)
        event.listen(engine, "begin", _sqlite_on_begin)
        log.debug("SQLite engine configured with foreign keys and explicit BEGIN")
