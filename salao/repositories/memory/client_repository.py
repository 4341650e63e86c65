"""In-memory implementation of ClientRepository."""

from typing import Optional

from ..interfaces.client_repository import IClientRepository
from ...domain.client import Client
from ...utils.formatters import only_digits
from .base import InMemoryRepository


class InMemoryClientRepository(InMemoryRepository[Client], IClientRepository):
    """In-memory implementation of client repository."""

    def __init__(self, records=None):
        super().__init__("client", records)

    def get_by_email(self, email: str) -> Optional[Client]:
        """Gets a client by email (case-insensitive)."""
        wanted = email.strip().lower()
        return next(
            (c for c in self._items if c.email and c.email.lower() == wanted), None
        )

    def get_by_cpf(self, cpf: str) -> Optional[Client]:
        """Gets a client by CPF digits."""
        wanted = only_digits(cpf)
        if not wanted:
            return None
        return next(
            (c for c in self._items if c.cpf and only_digits(c.cpf) == wanted), None
        )

    def search_by_name(self, term: str) -> list[Client]:
        """Finds clients whose name contains the term."""
        wanted = term.lower()
        return [c for c in self._items if wanted in c.name.lower()]
