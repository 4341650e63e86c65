"""In-memory implementation of UserRepository."""

import dataclasses
from typing import Optional

from ..interfaces.user_repository import IUserRepository
from ...domain.user import User
from .base import InMemoryRepository


class InMemoryUserRepository(InMemoryRepository[User], IUserRepository):
    """In-memory implementation of user repository."""

    def __init__(self, records=None):
        super().__init__("user", records)

    def get_by_email(self, email: str, role: Optional[str] = None) -> Optional[User]:
        """Gets the first user with an email (case-insensitive), optionally restricted to a role."""
        wanted = email.strip().lower()
        return next(
            (
                u
                for u in self._items
                if u.email and u.email.lower() == wanted and (role is None or u.role == role)
            ),
            None,
        )

    def update(self, user_id: str, **changes) -> Optional[User]:
        """Applies a partial update and returns the updated user."""
        user = self.get_by_id(user_id)
        if user is None:
            return None
        return self.save(dataclasses.replace(user, **changes))
