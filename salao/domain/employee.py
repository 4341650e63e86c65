"""Employee entity - a professional who performs services."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from .company import BusinessHours


@dataclass
class Employee:
    """A professional with specialties, commissions and a weekly schedule."""

    id: str
    name: str
    phone: str
    company_id: str
    specialties: list[str] = field(default_factory=list)
    commission_products: Decimal = Decimal("0")
    commission_services: Decimal = Decimal("0")
    commission_combos: Decimal = Decimal("0")
    schedule: list[BusinessHours] = field(default_factory=list)
    active: bool = True

    def schedule_for(self, day_name: str) -> Optional[BusinessHours]:
        """Returns the schedule entry for a pt-BR weekday name."""
        return next((s for s in self.schedule if s.day == day_name), None)

    def has_specialties(self, specialty_ids) -> bool:
        """True when the employee holds every given specialty."""
        return all(spec_id in self.specialties for spec_id in specialty_ids)
