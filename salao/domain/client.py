"""Client entity - a customer of the salon."""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from .converters import to_date


@dataclass
class Client:
    """A customer record. Client logins share the id of their ``User``."""

    id: str
    name: str
    phone: str
    company_id: str
    email: Optional[str] = None
    cpf: Optional[str] = None
    birth_date: Optional[date] = None
    active: bool = True
    preferred_employee: Optional[str] = None
    is_new_client: bool = False
    service_history: list[dict] = field(default_factory=list)
    used_vouchers: list[dict] = field(default_factory=list)
    plan_id: Optional[str] = None
    plan_usage: dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> "Client":
        """Creates a Client from a dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            phone=data.get("phone", ""),
            company_id=data["company_id"],
            email=data.get("email") or None,
            cpf=data.get("cpf") or None,
            birth_date=to_date(data.get("birth_date")),
            active=bool(data.get("active", True)),
            preferred_employee=data.get("preferred_employee"),
            is_new_client=bool(data.get("is_new_client", False)),
            service_history=list(data.get("service_history") or []),
            used_vouchers=list(data.get("used_vouchers") or []),
            plan_id=data.get("plan_id"),
            plan_usage=dict(data.get("plan_usage") or {}),
        )

    def to_dict(self) -> dict:
        """Converts to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "phone": self.phone,
            "company_id": self.company_id,
            "email": self.email,
            "cpf": self.cpf,
            "birth_date": self.birth_date,
            "active": self.active,
            "preferred_employee": self.preferred_employee,
            "is_new_client": self.is_new_client,
            "service_history": list(self.service_history),
            "used_vouchers": list(self.used_vouchers),
            "plan_id": self.plan_id,
            "plan_usage": dict(self.plan_usage),
        }

    def usage_of(self, service_id: str) -> int:
        """How many times a plan service has been consumed."""
        return self.plan_usage.get(service_id, 0)
