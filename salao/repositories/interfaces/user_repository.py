"""Interface for user repository."""

from abc import abstractmethod
from typing import Optional

from ...domain.user import User
from .crud_repository import ICrudRepository


class IUserRepository(ICrudRepository[User]):
    """Contract for login identities."""

    @abstractmethod
    def get_by_email(self, email: str, role: Optional[str] = None) -> Optional[User]:
        """Gets the first user with an email (case-insensitive), optionally restricted to a role."""
        pass

    @abstractmethod
    def update(self, user_id: str, **changes) -> Optional[User]:
        """Applies a partial update and returns the updated user."""
        pass
