"""Combo entity - a bundle of products and/or services sold at a fixed price."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Literal, Optional


@dataclass
class ComboItem:
    type: Literal["product", "service"]
    id: str
    quantity: int = 1


@dataclass
class Combo:
    """A bundle. ``type`` decides which catalog tab lists it.

    Service combos carry a ``duration`` so they can be scheduled.
    """

    id: str
    name: str
    type: Literal["service", "product"]
    items: list[ComboItem] = field(default_factory=list)
    price: Decimal = Decimal("0")
    duration: Optional[int] = None
    allow_discount: bool = True
    active: bool = True

    @property
    def service_ids(self) -> list[str]:
        return [item.id for item in self.items if item.type == "service"]
