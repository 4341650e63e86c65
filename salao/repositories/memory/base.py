"""In-memory list repository shared by every entity."""

import dataclasses
import uuid
from typing import Iterable, Optional

from ..interfaces.crud_repository import ICrudRepository, T
from ...config import logger as log


class InMemoryRepository(ICrudRepository[T]):
    """Holds records in a plain list owned by the container.

    Records are dataclasses with an ``id`` attribute. Lookups are linear.
    """

    def __init__(self, context: str, records: Optional[Iterable[T]] = None):
        self._context = f"repo.{context}"
        self._items: list[T] = list(records or [])

    def count(self) -> int:
        return len(self._items)

    def get_all(self) -> list[T]:
        """Gets every record, in insertion order."""
        return list(self._items)

    def get_active(self) -> list[T]:
        """Gets records whose ``active`` flag is set."""
        return [item for item in self._items if getattr(item, "active", True)]

    def get_by_id(self, record_id: str) -> Optional[T]:
        """Gets a record by ID."""
        result = next((item for item in self._items if item.id == record_id), None)
        log.debug(self._context, "get_by_id", record_id=record_id, found=result is not None)
        return result

    def save(self, record: T) -> T:
        """Replaces the record with the same ID, or appends it.

        A record without an ID gets a fresh UUID before being appended.
        """
        if not record.id:
            record = dataclasses.replace(record, id=str(uuid.uuid4()))

        for index, item in enumerate(self._items):
            if item.id == record.id:
                self._items[index] = record
                log.debug(self._context, "save replaced", record_id=record.id)
                return record

        self._items.append(record)
        log.debug(self._context, "save appended", record_id=record.id, count=len(self._items))
        return record

    def delete(self, record_id: str) -> bool:
        """Removes a record by ID."""
        before = len(self._items)
        self._items = [item for item in self._items if item.id != record_id]
        removed = len(self._items) < before
        log.debug(self._context, "delete", record_id=record_id, removed=removed)
        return removed

    def set_active(self, record_id: str, active: bool) -> bool:
        """Toggles the ``active`` flag of a record."""
        record = self.get_by_id(record_id)
        if record is None:
            return False
        self.save(dataclasses.replace(record, active=active))
        return True

    def _replace_all(self, records: Iterable[T]) -> None:
        self._items = list(records)
