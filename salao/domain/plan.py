"""Monthly plan and the client subscription (package) built on it."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..constants.statuses import PackageStatus
from .converters import to_datetime, to_decimal


@dataclass
class PlanService:
    service_id: str
    quantity: int


@dataclass
class MonthlyPlan:
    """A package of services sold for a fixed monthly price."""

    id: str
    name: str
    price: Decimal
    services: list[PlanService] = field(default_factory=list)
    validity_in_days: int = 30
    active: bool = True

    def quota_for(self, service_id: str) -> Optional[int]:
        """Number of sessions of a service the plan includes, if any."""
        entry = next((s for s in self.services if s.service_id == service_id), None)
        return entry.quantity if entry else None


@dataclass
class ClientPackage:
    """A client's subscription instance of a MonthlyPlan."""

    id: str
    client_id: str
    client_name: str
    plan_id: str
    plan_name: str
    plan_price: Decimal
    status: PackageStatus
    request_date: datetime
    is_recurring: bool = False
    activation_date: Optional[datetime] = None
    renewal_date: Optional[datetime] = None
    expiration_date: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> "ClientPackage":
        """Creates a ClientPackage from a dictionary."""
        return cls(
            id=data["id"],
            client_id=data["client_id"],
            client_name=data["client_name"],
            plan_id=data["plan_id"],
            plan_name=data["plan_name"],
            plan_price=to_decimal(data["plan_price"]),
            status=data["status"],
            request_date=to_datetime(data["request_date"]),
            is_recurring=bool(data.get("is_recurring", False)),
            activation_date=to_datetime(data.get("activation_date")),
            renewal_date=to_datetime(data.get("renewal_date")),
            expiration_date=to_datetime(data.get("expiration_date")),
        )

    def to_dict(self) -> dict:
        """Converts to dictionary."""
        return {
            "id": self.id,
            "client_id": self.client_id,
            "client_name": self.client_name,
            "plan_id": self.plan_id,
            "plan_name": self.plan_name,
            "plan_price": self.plan_price,
            "status": self.status,
            "request_date": self.request_date,
            "is_recurring": self.is_recurring,
            "activation_date": self.activation_date,
            "renewal_date": self.renewal_date,
            "expiration_date": self.expiration_date,
        }

    @property
    def is_active(self) -> bool:
        return self.status == "ativo"
