"""Factory Boy base wiring for the per-test SQLAlchemy session.

The ``session`` fixture binds its scoped session with :func:`bind_session`;
factories resolve it lazily so each test persists into its own transaction.
"""

from __future__ import annotations

import factory

_bound_session = None


def bind_session(session) -> None:
    """Register (or clear, with ``None``) the session factories write to."""
    global _bound_session
    _bound_session = session


def current_session():
    """Return the bound session; factories used outside a test fail loudly."""
    if _bound_session is None:
        raise RuntimeError("No session bound for factories; request the 'session' fixture.")
    return _bound_session


class BaseFactory(factory.alchemy.SQLAlchemyModelFactory):
    """Persist with ``flush`` so ids exist while the test transaction stays open."""

    class Meta:
        abstract = True
        sqlalchemy_session_factory = current_session
        sqlalchemy_session_persistence = "flush"
