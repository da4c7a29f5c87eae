from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError

from liftlog.core import errors as api_errors
from liftlog.services._shared.errors import (
    NotFoundError,
    ServiceError,
    StorageError,
    ValidationError,
)
from liftlog.uow.sqlalchemy_uow import (
    SQLAlchemyReadOnlyUnitOfWork,
    SQLAlchemyUnitOfWork,
)

log = logging.getLogger(__name__)


@dataclass(slots=True)
class ServiceContext:
    """
    Carry request-scoped data across service calls.

    :param request_id: Correlation id for logging.
    """

    request_id: str | None = None


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Provide helpers to run read-only and read-write units of work.
    * Turn store failures into :class:`StorageError`.
    * Keep services orchestration-only, with no web concerns.

    Notes
    -----
    Services never touch the global session directly; they always go
    through a Unit of Work.
    """

    DEFAULT_READ_ISOLATION = "READ COMMITTED"

    def __init__(self, *, ctx: ServiceContext | None = None) -> None:
        self.ctx = ctx or ServiceContext()

    # -------------------------- UoW helpers ---------------------------------

    def rw_uow(self) -> SQLAlchemyUnitOfWork:
        """
        Create a read-write Unit of Work.

        :returns: Read-write UoW instance.
        :rtype: SQLAlchemyUnitOfWork
        """
        return SQLAlchemyUnitOfWork()

    def ro_uow(
        self, *, isolation: str | None = None, enforce_db_readonly: bool = True
    ) -> SQLAlchemyReadOnlyUnitOfWork:
        """
        Create a read-only Unit of Work.

        :param isolation: Transaction isolation level hint.
        :type isolation: str | None
        :param enforce_db_readonly: Apply ``SET TRANSACTION READ ONLY`` when supported.
        :type enforce_db_readonly: bool
        :returns: Read-only UoW instance.
        :rtype: SQLAlchemyReadOnlyUnitOfWork
        """
        return SQLAlchemyReadOnlyUnitOfWork(
            isolation_level=isolation or self.DEFAULT_READ_ISOLATION,
            enforce_db_readonly=enforce_db_readonly,
        )

    # -------------------------- Error handling ------------------------------

    @contextmanager
    def storage_boundary(self, operation: str) -> Iterator[None]:
        """
        Re-raise any SQLAlchemy failure inside the block as :class:`StorageError`.

        Wrap the whole ``with uow:`` block so failures raised on commit are
        covered too. Service errors pass through untouched.

        :param operation: Use-case name recorded on the error and in the log.
        :type operation: str
        :raises StorageError: When the store raises.
        """
        try:
            yield
        except SQLAlchemyError as exc:
            log.error("Storage failure", extra={"operation": operation}, exc_info=True)
            raise StorageError(operation) from exc


def translate_exceptions(exc: Exception) -> Exception:
    """
    Map service-level errors to API-level (HTTP) errors.

    :param exc: Exception raised within a service.
    :type exc: Exception
    :returns: Translated exception ready to be re-raised.
    :rtype: Exception
    """
    if isinstance(exc, ValidationError):
        # → 400 Bad Request
        return api_errors.BadRequest(str(exc), details={"field": exc.field})

    if isinstance(exc, NotFoundError):
        # → 404 Not Found
        return api_errors.NotFound(str(exc))

    if isinstance(exc, StorageError):
        # → 500, without leaking driver messages
        return api_errors.StorageFailure()

    if isinstance(exc, ServiceError):
        return api_errors.APIError(message=str(exc), status_code=400, code="bad_request")

    # Untouched; bubbles up to the Flask handlers
    return exc
