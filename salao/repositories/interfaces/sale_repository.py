"""Interface for sale repository."""

from abc import abstractmethod

from ...domain.sale import Sale
from .crud_repository import ICrudRepository


class ISaleRepository(ICrudRepository[Sale]):
    """Contract for closed sales."""

    @abstractmethod
    def add(self, sale: Sale) -> Sale:
        """Records a new sale ahead of older ones."""
        pass

    @abstractmethod
    def get_by_client(self, client_id: str) -> list[Sale]:
        """Gets a client's sales, newest first."""
        pass
