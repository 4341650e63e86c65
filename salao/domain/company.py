"""Company entity - the salon and its opening hours."""

from dataclasses import dataclass, field
from datetime import time
from decimal import Decimal
from typing import Optional

from .converters import time_to_str, to_decimal, to_time


@dataclass
class BusinessHours:
    """Working hours for one weekday, with an optional break."""

    day: str
    start_time: time
    end_time: time
    break_start: Optional[time] = None
    break_end: Optional[time] = None
    active: bool = True

    @classmethod
    def from_dict(cls, data: dict) -> "BusinessHours":
        """Creates BusinessHours from a dictionary."""
        return cls(
            day=data["day"],
            start_time=to_time(data["start_time"]),
            end_time=to_time(data["end_time"]),
            break_start=to_time(data.get("break_start")),
            break_end=to_time(data.get("break_end")),
            active=bool(data.get("active", True)),
        )

    def to_dict(self) -> dict:
        """Converts to dictionary."""
        return {
            "day": self.day,
            "start_time": time_to_str(self.start_time),
            "end_time": time_to_str(self.end_time),
            "break_start": time_to_str(self.break_start),
            "break_end": time_to_str(self.break_end),
            "active": self.active,
        }

    @property
    def has_break(self) -> bool:
        return self.break_start is not None and self.break_end is not None


@dataclass
class Company:
    """The business operating the system.

    ``discount_limit`` and ``markup_limit`` are percentages of the cart
    subtotal that a manual discount or markup may not exceed.
    """

    id: str
    document: str
    name: str
    phone: str
    address: str
    business_hours: list[BusinessHours] = field(default_factory=list)
    discount_limit: Decimal = Decimal("100")
    markup_limit: Decimal = Decimal("100")
    logo_url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Company":
        """Creates a Company from a dictionary."""
        return cls(
            id=data["id"],
            document=data["document"],
            name=data["name"],
            phone=data["phone"],
            address=data["address"],
            business_hours=[
                h if isinstance(h, BusinessHours) else BusinessHours.from_dict(h)
                for h in data.get("business_hours", [])
            ],
            discount_limit=to_decimal(data.get("discount_limit", 100)),
            markup_limit=to_decimal(data.get("markup_limit", 100)),
            logo_url=data.get("logo_url"),
        )

    def to_dict(self) -> dict:
        """Converts to dictionary."""
        return {
            "id": self.id,
            "document": self.document,
            "name": self.name,
            "phone": self.phone,
            "address": self.address,
            "business_hours": [h.to_dict() for h in self.business_hours],
            "discount_limit": self.discount_limit,
            "markup_limit": self.markup_limit,
            "logo_url": self.logo_url,
        }
