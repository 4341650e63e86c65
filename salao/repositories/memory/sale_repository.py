"""In-memory implementation of SaleRepository."""

from ..interfaces.sale_repository import ISaleRepository
from ...domain.sale import Sale
from .base import InMemoryRepository


class InMemorySaleRepository(InMemoryRepository[Sale], ISaleRepository):
    """In-memory implementation of sale repository."""

    def __init__(self, records=None):
        super().__init__("sale", records)

    def add(self, sale: Sale) -> Sale:
        """Records a new sale ahead of older ones."""
        self._items.insert(0, sale)
        return sale

    def get_by_client(self, client_id: str) -> list[Sale]:
        """Gets a client's sales, newest first."""
        results = [s for s in self._items if s.client_id == client_id]
        return sorted(results, key=lambda s: s.created_at, reverse=True)
