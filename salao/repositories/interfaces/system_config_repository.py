"""Interface for the salon settings store."""

from abc import ABC, abstractmethod
from typing import Optional

from ...domain.system_config import SystemConfig


class ISystemConfigRepository(ABC):
    """Key-value settings read by scheduling, plans, reports and birthdays."""

    @abstractmethod
    def get_value(self, key: str, default: Optional[str] = None) -> Optional[str]:
        pass

    @abstractmethod
    def get_int(self, key: str, default: str) -> int:
        """Integer setting; an unparsable stored value falls back to ``default``."""
        pass

    @abstractmethod
    def set(self, key: str, value: Optional[str], label: Optional[str] = None) -> SystemConfig:
        """Creates or overwrites a setting. A missing label keeps the previous one."""
        pass

    @abstractmethod
    def entries(self) -> list[SystemConfig]:
        """Every setting sorted by key, for the settings screen."""
        pass
