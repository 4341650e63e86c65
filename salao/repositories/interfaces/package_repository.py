"""Interface for client package repository."""

from abc import abstractmethod
from typing import Optional

from ...domain.plan import ClientPackage
from .crud_repository import ICrudRepository


class IClientPackageRepository(ICrudRepository[ClientPackage]):
    """Contract for client plan subscriptions."""

    @abstractmethod
    def get_by_client(self, client_id: str, status: Optional[str] = None) -> list[ClientPackage]:
        """Gets a client's packages, optionally filtered by status."""
        pass

    @abstractmethod
    def get_by_status(self, status: str) -> list[ClientPackage]:
        """Gets every package in a status."""
        pass

    @abstractmethod
    def remove_where(self, client_id: str, status: str, plan_id: Optional[str] = None) -> int:
        """Removes a client's packages in a status. Returns how many were removed."""
        pass
