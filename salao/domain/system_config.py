"""Salon setting entity (slot interval, plan validity, birthday campaign)."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class SystemConfig:
    key: str
    value: str
    label: Optional[str] = None
    updated_at: Optional[datetime] = None

    def as_int(self, default: int) -> int:
        """Numeric settings typed in a settings screen may hold garbage."""
        try:
            return int(self.value)
        except ValueError:
            return default

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "value": self.value,
            "label": self.label,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
