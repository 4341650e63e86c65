"""In-memory implementation of ClientPackageRepository."""

from typing import Optional

from ..interfaces.package_repository import IClientPackageRepository
from ...domain.plan import ClientPackage
from .base import InMemoryRepository


class InMemoryClientPackageRepository(InMemoryRepository[ClientPackage], IClientPackageRepository):
    """In-memory implementation of client package repository."""

    def __init__(self, records=None):
        super().__init__("package", records)

    def get_by_client(self, client_id: str, status: Optional[str] = None) -> list[ClientPackage]:
        """Gets a client's packages, optionally filtered by status."""
        return [
            p
            for p in self._items
            if p.client_id == client_id and (status is None or p.status == status)
        ]

    def get_by_status(self, status: str) -> list[ClientPackage]:
        """Gets every package in a status."""
        return [p for p in self._items if p.status == status]

    def remove_where(self, client_id: str, status: str, plan_id: Optional[str] = None) -> int:
        """Removes a client's packages in a status."""
        kept = [
            p
            for p in self._items
            if not (
                p.client_id == client_id
                and p.status == status
                and (plan_id is None or p.plan_id == plan_id)
            )
        ]
        removed = len(self._items) - len(kept)
        self._replace_all(kept)
        return removed
