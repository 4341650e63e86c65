"""Generic interface for list-backed CRUD repositories."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ICrudRepository(ABC, Generic[T]):
    """Contract shared by every entity list held in the session."""

    @abstractmethod
    def get_all(self) -> list[T]:
        """Gets every record, in insertion order."""
        pass

    @abstractmethod
    def get_active(self) -> list[T]:
        """Gets records whose ``active`` flag is set."""
        pass

    @abstractmethod
    def get_by_id(self, record_id: str) -> Optional[T]:
        """Gets a record by ID."""
        pass

    @abstractmethod
    def save(self, record: T) -> T:
        """Replaces the record with the same ID, or appends it."""
        pass

    @abstractmethod
    def delete(self, record_id: str) -> bool:
        """Removes a record by ID. Returns False if nothing was removed."""
        pass

    @abstractmethod
    def set_active(self, record_id: str, active: bool) -> bool:
        """Toggles the ``active`` flag of a record."""
        pass
