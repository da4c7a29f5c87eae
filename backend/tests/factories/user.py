"""Factory Boy definition for :class:`liftlog.models.user.User`."""

from __future__ import annotations

from liftlog.models.user import User

import factory
from tests.factories import BaseFactory


class UserFactory(BaseFactory):
    """Build persisted users with unique emails."""

    class Meta:
        model = User

    id = None  # let autoincrement handle it
    email = factory.Sequence(lambda n: f"lifter{n}@example.com")
