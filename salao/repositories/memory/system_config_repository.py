"""In-memory implementation of SystemConfigRepository."""

from datetime import datetime
from typing import Optional

from ..interfaces.system_config_repository import ISystemConfigRepository
from ...config import logger as log
from ...domain.system_config import SystemConfig


class InMemorySystemConfigRepository(ISystemConfigRepository):
    """Settings keyed by name, kept for the lifetime of the container."""

    def __init__(self):
        self._entries: dict[str, SystemConfig] = {}

    def get_value(self, key: str, default: Optional[str] = None) -> Optional[str]:
        entry = self._entries.get(key)
        return entry.value if entry else default

    def get_int(self, key: str, default: str) -> int:
        entry = self._entries.get(key)
        if entry is None:
            return int(default)
        return entry.as_int(int(default))

    def set(self, key: str, value: Optional[str], label: Optional[str] = None) -> SystemConfig:
        previous = self._entries.get(key)
        entry = SystemConfig(
            key=key,
            value="" if value is None else str(value),
            label=label or (previous.label if previous else None),
            updated_at=datetime.now(),
        )
        self._entries[key] = entry
        log.debug("repo.config", "Setting saved", key=key)
        return entry

    def entries(self) -> list[SystemConfig]:
        return [self._entries[key] for key in sorted(self._entries)]
