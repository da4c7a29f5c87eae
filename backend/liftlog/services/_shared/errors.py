"""
Domain-level exceptions used within the service layer.

These exceptions are framework-agnostic: they never depend on Flask or HTTP.
``liftlog.services._shared.base.translate_exceptions`` maps them to the
RFC 7807 errors of ``liftlog.core.errors``.
"""

from __future__ import annotations

from dataclasses import dataclass


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - Each carries a human-readable message via ``str(exc)``.
    """

    pass


@dataclass(slots=True)
class ValidationError(ServiceError):
    """
    Raised when a required field is missing or malformed.

    :param field: Public field name (e.g., ``"name"``).
    :type field: str
    :param detail: Short human-readable explanation.
    :type detail: str
    """

    field: str
    detail: str

    def __str__(self) -> str:
        return f"Invalid {self.field}: {self.detail}"


@dataclass(slots=True)
class NotFoundError(ServiceError):
    """
    Raised when an entity is not found in the repository.

    :param entity: Entity name (e.g., ``"Workout"``).
    :type entity: str
    :param key: Identifier or search key.
    :type key: str | int
    """

    entity: str
    key: str | int

    def __str__(self) -> str:
        return f"{self.entity} not found: {self.key}"


@dataclass(slots=True)
class StorageError(ServiceError):
    """
    Raised when the backing store cannot complete an operation.

    :param operation: Name of the use case that failed (e.g., ``"create_workout"``).
    :type operation: str
    """

    operation: str

    def __str__(self) -> str:
        return f"Storage failure during {self.operation}"
