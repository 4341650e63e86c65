"""Sale entities - cart lines, payments and the recorded sale."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..constants.item_types import AmountType, ItemType


@dataclass
class CartItem:
    """A line in the point-of-sale cart before the sale is closed."""

    id: str
    name: str
    price: Decimal
    type: ItemType
    quantity: int = 1
    covered_by_plan: bool = False
    employee_id: Optional[str] = None

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity


@dataclass
class SaleItem:
    type: ItemType
    id: str
    name: str
    quantity: int
    price: Decimal
    total: Decimal
    employee_id: Optional[str] = None
    covered_by_plan: bool = False

    @classmethod
    def from_cart_item(cls, item: CartItem) -> "SaleItem":
        return cls(
            type=item.type,
            id=item.id,
            name=item.name,
            quantity=item.quantity,
            price=item.price,
            total=item.line_total,
            employee_id=item.employee_id,
            covered_by_plan=item.covered_by_plan,
        )


@dataclass
class Payment:
    method: str
    amount: Decimal


@dataclass
class Sale:
    """A closed sale.

    ``subtotal`` already excludes plan-covered lines, whose value is kept in
    ``package_credit``; ``total = subtotal - discount + markup``.
    """

    id: str
    items: list[SaleItem]
    employee_id: str
    company_id: str
    subtotal: Decimal
    discount: Decimal
    total: Decimal
    created_at: datetime
    client_id: Optional[str] = None
    discount_type: AmountType = "value"
    voucher_code: Optional[str] = None
    markup: Decimal = Decimal("0")
    markup_type: AmountType = "value"
    package_credit: Decimal = Decimal("0")
    payments: list[Payment] = field(default_factory=list)
    appointment_id: Optional[str] = None

    def to_dict(self) -> dict:
        """Flat representation used by reports."""
        return {
            "id": self.id,
            "created_at": self.created_at.isoformat(),
            "client_id": self.client_id,
            "employee_id": self.employee_id,
            "items": ", ".join(item.name for item in self.items),
            "subtotal": self.subtotal,
            "discount": self.discount,
            "markup": self.markup,
            "package_credit": self.package_credit,
            "total": self.total,
            "payments": ", ".join(p.method for p in self.payments),
            "voucher_code": self.voucher_code,
        }

    @property
    def short_id(self) -> str:
        return self.id[:8]

    @property
    def total_paid(self) -> Decimal:
        return sum((p.amount for p in self.payments), Decimal("0"))
