"""Specialty entity - a skill employees hold and services require."""

from dataclasses import dataclass


@dataclass
class Specialty:
    id: str
    name: str
    active: bool = True

    @classmethod
    def from_dict(cls, data: dict) -> "Specialty":
        return cls(id=data["id"], name=data["name"], active=bool(data.get("active", True)))

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "active": self.active}
