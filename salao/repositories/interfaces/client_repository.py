"""Interface for client repository."""

from abc import abstractmethod
from typing import Optional

from ...domain.client import Client
from .crud_repository import ICrudRepository


class IClientRepository(ICrudRepository[Client]):
    """Contract for client data access."""

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[Client]:
        """Gets a client by email (case-insensitive)."""
        pass

    @abstractmethod
    def get_by_cpf(self, cpf: str) -> Optional[Client]:
        """Gets a client by CPF digits."""
        pass

    @abstractmethod
    def search_by_name(self, term: str) -> list[Client]:
        """Finds clients whose name contains the term."""
        pass
