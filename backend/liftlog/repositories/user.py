from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from sqlalchemy import select
from sqlalchemy.orm import InstrumentedAttribute

from liftlog.models.user import User
from liftlog.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Persistence-only repository for :class:`User`."""

    model = User

    def _filterable_fields(self) -> Mapping[str, InstrumentedAttribute[Any]]:
        return {"id": self.model.id, "email": self.model.email}

    def get_by_email(self, email: str) -> User | None:
        """Return the user with the given (normalized) email, if any."""
        stmt = select(self.model).where(self.model.email == email.strip().lower())
        return cast(User | None, self.session.execute(stmt).scalars().first())
