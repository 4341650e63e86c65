"""User entity - anyone who can log in (staff or client)."""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..constants.statuses import UserRole
from .converters import to_date


@dataclass
class User:
    """A login identity. Clients also have a matching ``Client`` record."""

    id: str
    name: str
    email: str
    role: UserRole
    cpf: Optional[str] = None
    phone: Optional[str] = None
    birth_date: Optional[date] = None
    avatar_url: Optional[str] = None
    company_id: Optional[str] = None
    permissions: list[str] = field(default_factory=list)
    is_new_client: bool = False
    service_history: list[dict] = field(default_factory=list)
    used_vouchers: list[dict] = field(default_factory=list)
    plan: Optional[str] = None
    plan_id: Optional[str] = None
    plan_usage: dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        """Creates a User from a dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            email=data["email"],
            role=data["role"],
            cpf=data.get("cpf"),
            phone=data.get("phone"),
            birth_date=to_date(data.get("birth_date")),
            avatar_url=data.get("avatar_url"),
            company_id=data.get("company_id"),
            permissions=list(data.get("permissions") or []),
            is_new_client=bool(data.get("is_new_client", False)),
            service_history=list(data.get("service_history") or []),
            used_vouchers=list(data.get("used_vouchers") or []),
            plan=data.get("plan"),
            plan_id=data.get("plan_id"),
            plan_usage=dict(data.get("plan_usage") or {}),
        )

    def to_dict(self) -> dict:
        """Converts to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role,
            "cpf": self.cpf,
            "phone": self.phone,
            "birth_date": self.birth_date,
            "avatar_url": self.avatar_url,
            "company_id": self.company_id,
            "permissions": list(self.permissions),
            "is_new_client": self.is_new_client,
            "service_history": list(self.service_history),
            "used_vouchers": list(self.used_vouchers),
            "plan": self.plan,
            "plan_id": self.plan_id,
            "plan_usage": dict(self.plan_usage),
        }

    @property
    def is_client(self) -> bool:
        return self.role == "cliente"

    @property
    def first_name(self) -> str:
        return self.name.split(" ")[0] if self.name else ""
