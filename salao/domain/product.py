"""Product entity - retail stock sold at the counter."""

from dataclasses import dataclass
from decimal import Decimal

from .converters import to_decimal


@dataclass
class Product:
    id: str
    name: str
    stock: int
    min_stock: int
    price: Decimal
    company_id: str
    active: bool = True

    @classmethod
    def from_dict(cls, data: dict) -> "Product":
        return cls(
            id=data["id"],
            name=data["name"],
            stock=int(data.get("stock", 0)),
            min_stock=int(data.get("min_stock", 0)),
            price=to_decimal(data["price"]),
            company_id=data["company_id"],
            active=bool(data.get("active", True)),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "stock": self.stock,
            "min_stock": self.min_stock,
            "price": self.price,
            "company_id": self.company_id,
            "active": self.active,
        }

    @property
    def is_low_stock(self) -> bool:
        return self.stock <= self.min_stock
