"""PaymentMethod entity - a way the salon accepts payment."""

from dataclasses import dataclass


@dataclass
class PaymentMethod:
    id: str
    name: str
    active: bool = True

    @classmethod
    def from_dict(cls, data: dict) -> "PaymentMethod":
        return cls(id=data["id"], name=data["name"], active=bool(data.get("active", True)))

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "active": self.active}
