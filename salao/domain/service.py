"""Service entity - something the salon performs on a client."""

from dataclasses import dataclass, field
from decimal import Decimal

from .converters import to_decimal


@dataclass
class Service:
    """A bookable, sellable service."""

    id: str
    name: str
    duration: int
    price: Decimal
    active: bool = True
    specialty_ids: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "Service":
        """Creates a Service from a dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            duration=int(data.get("duration", 0)),
            price=to_decimal(data["price"]),
            active=bool(data.get("active", True)),
            specialty_ids=list(data.get("specialty_ids") or []),
        )

    def to_dict(self) -> dict:
        """Converts to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "duration": self.duration,
            "price": self.price,
            "active": self.active,
            "specialty_ids": list(self.specialty_ids),
        }

    @property
    def duration_formatted(self) -> str:
        """Formatted duration."""
        if self.duration >= 60:
            hours, mins = divmod(self.duration, 60)
            return f"{hours}h {mins}min" if mins else f"{hours}h"
        return f"{self.duration} min"
