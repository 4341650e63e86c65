"""Voucher entity - a discount code with eligibility rules."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Literal, Optional

from ..constants.item_types import AmountType
from .converters import to_date, to_decimal

VoucherScope = Literal["all", "products", "services", "plans"]
VoucherEligibility = Literal["all", "new_clients", "birthday_month", "fidelity"]


@dataclass
class Voucher:
    """A discount code.

    Fidelity vouchers unlock once the client received
    ``fidelity_target_count`` sessions of ``fidelity_target_service_id``.
    """

    id: str
    name: str
    code: str
    description: str
    type: AmountType
    value: Decimal
    valid_from: date
    valid_to: date
    active: bool = True
    applies_to: VoucherScope = "all"
    eligibility: VoucherEligibility = "all"
    fidelity_target_service_id: Optional[str] = None
    fidelity_target_count: Optional[int] = None
    single_use_per_client: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "Voucher":
        """Creates a Voucher from a dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            code=data["code"],
            description=data.get("description", ""),
            type=data.get("type", "value"),
            value=to_decimal(data["value"]),
            valid_from=to_date(data["valid_from"]),
            valid_to=to_date(data["valid_to"]),
            active=bool(data.get("active", True)),
            applies_to=data.get("applies_to", "all"),
            eligibility=data.get("eligibility", "all"),
            fidelity_target_service_id=data.get("fidelity_target_service_id"),
            fidelity_target_count=data.get("fidelity_target_count"),
            single_use_per_client=bool(data.get("single_use_per_client", False)),
        )

    def to_dict(self) -> dict:
        """Converts to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "code": self.code,
            "description": self.description,
            "type": self.type,
            "value": self.value,
            "valid_from": self.valid_from.isoformat(),
            "valid_to": self.valid_to.isoformat(),
            "active": self.active,
            "applies_to": self.applies_to,
            "eligibility": self.eligibility,
            "fidelity_target_service_id": self.fidelity_target_service_id,
            "fidelity_target_count": self.fidelity_target_count,
            "single_use_per_client": self.single_use_per_client,
        }

    def is_valid_on(self, day: date) -> bool:
        return self.valid_from <= day <= self.valid_to
