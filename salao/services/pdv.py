"""
Point of sale (PDV).

The PDV is a small state machine: items are picked while ``selecting_items``
and the cart is frozen for payment in ``paying``. Totals are always derived
from the cart, never stored.
"""

import dataclasses
import uuid
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..config import logger as log
from ..config.env import get_company_id
from ..constants.item_types import AmountType, ItemType, ItemTypes
from ..container import get_container
from ..domain.appointment import Appointment
from ..domain.client import Client
from ..domain.company import Company
from ..domain.employee import Employee
from ..domain.sale import CartItem, Payment, Sale, SaleItem
from ..domain.service import Service
from ..domain.user import User
from .plans import activate_client_package, plan_uses_left, use_plan_service
from .results import OperationResult
from .vouchers import check_eligibility, find_voucher

SELECTING_ITEMS = "selecting_items"
PAYING = "paying"

ZERO = Decimal("0")
HUNDRED = Decimal("100")


@dataclass
class PdvState:
    status: str = SELECTING_ITEMS
    client: Optional[Client] = None
    cart: list[CartItem] = field(default_factory=list)
    appointment_id: Optional[str] = None
    discount: Decimal = ZERO
    discount_type: AmountType = "value"
    voucher_code: Optional[str] = None
    markup: Decimal = ZERO
    markup_type: AmountType = "value"


@dataclass(frozen=True)
class CartTotals:
    subtotal: Decimal
    discount: Decimal
    markup: Decimal
    package_credit: Decimal
    total: Decimal


def _amount(value: Decimal, amount_type: AmountType, base: Decimal) -> Decimal:
    if amount_type == "percentage":
        return base * value / HUNDRED
    return value


def calculate_totals(state: PdvState) -> CartTotals:
    """Plan-covered lines leave the subtotal and count as package credit.

    The discount is capped at the subtotal.
    """
    subtotal = sum((i.line_total for i in state.cart if not i.covered_by_plan), ZERO)
    package_credit = sum((i.line_total for i in state.cart if i.covered_by_plan), ZERO)
    discount = min(subtotal, _amount(state.discount, state.discount_type, subtotal))
    markup = _amount(state.markup, state.markup_type, subtotal)
    return CartTotals(
        subtotal=subtotal,
        discount=discount,
        markup=markup,
        package_credit=package_credit,
        total=subtotal - discount + markup,
    )


class PointOfSale:
    """One PDV screen. ``user`` is the seller recorded on the sale."""

    def __init__(self, user: Optional[User] = None, company: Optional[Company] = None):
        self.user = user
        self.company = company
        self.state = PdvState()

    # -------------------------------------------------------------------------
    # Client
    # -------------------------------------------------------------------------

    def select_client(self, client: Optional[Client]) -> None:
        self.state.client = client
        self.state.status = SELECTING_ITEMS
        log.debug("pdv", "Client selected", client_id=client.id if client else None)

    def start_walk_in_sale(self) -> None:
        self.state = PdvState()
        log.debug("pdv", "Walk-in sale started")

    @property
    def is_walk_in(self) -> bool:
        return self.state.client is None

    # -------------------------------------------------------------------------
    # Cart
    # -------------------------------------------------------------------------

    def add_item(self, item, item_type: ItemType) -> bool:
        """Adds a catalog record to the cart. Returns False when refused.

        A package needs a client and only one package fits in a cart. Adding
        an item already in the cart increments its quantity.
        """
        cart = self.state.cart
        if item_type == ItemTypes.PACKAGE:
            if self.state.client is None:
                log.debug("pdv", "Package refused without client", item_id=item.id)
                return False
            if any(line.type == ItemTypes.PACKAGE for line in cart):
                log.debug("pdv", "Only one package per cart", item_id=item.id)
                return False

        covered = item_type == ItemTypes.SERVICE and self._covered_units(item.id) < plan_uses_left(
            self.state.client, item.id
        )

        existing = next(
            (
                line
                for line in cart
                if line.id == item.id and line.type == item_type and line.covered_by_plan == covered
            ),
            None,
        )
        if existing is not None and item_type != ItemTypes.PACKAGE:
            existing.quantity += 1
        else:
            cart.append(
                CartItem(
                    id=item.id,
                    name=item.name,
                    price=item.price,
                    type=item_type,
                    quantity=1,
                    covered_by_plan=covered,
                )
            )
        log.debug("pdv", "Item added", item_id=item.id, type=item_type, covered=covered)
        return True

    def import_appointment(
        self, appointment: Appointment, client: Client, service: Service, employee: Employee
    ) -> None:
        """Starts a fresh sale from a scheduled appointment."""
        self.state = PdvState(
            client=client,
            appointment_id=appointment.id,
            cart=[
                CartItem(
                    id=service.id,
                    name=service.name,
                    price=service.price,
                    type=ItemTypes.SERVICE,
                    employee_id=employee.id,
                )
            ],
        )
        log.info("pdv", "Appointment imported", appointment_id=appointment.id)

    def remove_item(self, item_id: str) -> None:
        self.state.cart = [line for line in self.state.cart if line.id != item_id]

    def _covered_units(self, service_id: str) -> int:
        return sum(
            line.quantity
            for line in self.state.cart
            if line.id == service_id and line.type == ItemTypes.SERVICE and line.covered_by_plan
        )

    def update_quantity(self, item_id: str, quantity: int) -> None:
        """Sets the total quantity of an item.

        For a service, units beyond the plan's remaining uses go to a separate
        line that is charged normally.
        """
        if quantity <= 0:
            self.remove_item(item_id)
            return
        cart = self.state.cart
        lines = [line for line in cart if line.id == item_id]
        if not lines:
            return
        first = lines[0]
        if first.type != ItemTypes.SERVICE:
            first.quantity = quantity
            return

        covered = min(quantity, plan_uses_left(self.state.client, item_id))
        split = [
            dataclasses.replace(first, quantity=units, covered_by_plan=is_covered)
            for units, is_covered in ((covered, True), (quantity - covered, False))
            if units > 0
        ]
        position = cart.index(first)
        rest = [line for line in cart if line.id != item_id]
        self.state.cart = rest[:position] + split + rest[position:]

    def assign_employee(self, item_id: str, employee_id: str) -> None:
        for line in self.state.cart:
            if line.id == item_id:
                line.employee_id = employee_id

    def employee_for(self, line: CartItem) -> Optional[Employee]:
        if not line.employee_id:
            return None
        return get_container().employees.get_by_id(line.employee_id)

    def start_payment(self) -> bool:
        if not self.state.cart:
            return False
        self.state.status = PAYING
        return True

    def back_to_items(self) -> None:
        self.state.status = SELECTING_ITEMS

    def reset(self) -> None:
        self.state = PdvState()

    # -------------------------------------------------------------------------
    # Discount and markup
    # -------------------------------------------------------------------------

    @property
    def totals(self) -> CartTotals:
        return calculate_totals(self.state)

    def _exceeds_limit(self, value: Decimal, amount_type: AmountType, limit: Optional[Decimal]) -> bool:
        if limit is None:
            return False
        if amount_type == "percentage":
            return value > limit
        subtotal = self.totals.subtotal
        if subtotal == ZERO:
            return value > ZERO
        return value * HUNDRED / subtotal > limit

    def apply_voucher(self, code: str) -> OperationResult:
        voucher = find_voucher(code)
        if voucher is None:
            return OperationResult(False, "Voucher inválido ou inativo.")

        client = self.state.client
        if client is not None:
            # history and used vouchers change with every closed sale
            client = get_container().clients.get_by_id(client.id) or client
        eligible, message = check_eligibility(voucher, client)
        if not eligible:
            log.info("pdv", "Voucher refused", code=voucher.code, reason=message)
            return OperationResult(False, message)

        self.state.discount = voucher.value
        self.state.discount_type = voucher.type
        self.state.voucher_code = voucher.code
        log.info("pdv", "Voucher applied", code=voucher.code)
        return OperationResult(True, "Voucher aplicado com sucesso!", voucher)

    def apply_manual_discount(self, discount: Decimal, discount_type: AmountType) -> OperationResult:
        limit = self.company.discount_limit if self.company else None
        if discount < ZERO or self._exceeds_limit(discount, discount_type, limit):
            return OperationResult(False, f"Desconto acima do limite permitido ({limit}%).")
        self.state.discount = discount
        self.state.discount_type = discount_type
        self.state.voucher_code = None
        return OperationResult(True, "Desconto manual aplicado.")

    def remove_discount(self) -> None:
        self.state.discount = ZERO
        self.state.discount_type = "value"
        self.state.voucher_code = None

    def apply_markup(self, markup: Decimal, markup_type: AmountType) -> OperationResult:
        limit = self.company.markup_limit if self.company else None
        if markup < ZERO or self._exceeds_limit(markup, markup_type, limit):
            return OperationResult(False, f"Acréscimo acima do limite permitido ({limit}%).")
        self.state.markup = markup
        self.state.markup_type = markup_type
        return OperationResult(True, "Acréscimo aplicado.")

    # -------------------------------------------------------------------------
    # Closing
    # -------------------------------------------------------------------------

    def complete_sale(self, payments: list[Payment]) -> Optional[Sale]:
        """Records the sale and applies its side effects.

        A sold package is activated for the client and every plan-covered
        service counts as one use of the plan.
        """
        if self.user is None:
            log.error("pdv", "No logged user to complete the sale")
            return None

        container = get_container()
        state = self.state
        client = state.client

        package_line = next((line for line in state.cart if line.type == ItemTypes.PACKAGE), None)
        if package_line is not None and client is not None:
            activate_client_package(client.id, package_line.id)

        items = [SaleItem.from_cart_item(line) for line in state.cart]
        if client is not None:
            for item in items:
                if item.covered_by_plan:
                    use_plan_service(client.id, item.id, item.quantity)

        totals = self.totals
        sale = container.sales.add(
            Sale(
                id=str(uuid.uuid4()),
                items=items,
                employee_id=self.user.id,
                company_id=self.user.company_id or get_company_id(),
                subtotal=totals.subtotal,
                discount=totals.discount,
                total=totals.total,
                created_at=datetime.now(),
                client_id=client.id if client else None,
                discount_type=state.discount_type,
                voucher_code=state.voucher_code,
                markup=totals.markup,
                markup_type=state.markup_type,
                package_credit=totals.package_credit,
                payments=list(payments),
                appointment_id=state.appointment_id,
            )
        )

        if client is not None:
            self._record_client_history(client.id, items, state.voucher_code)

        log.info("pdv", "Sale completed", sale_id=sale.id, total=sale.total, items=len(items))
        return sale

    def _record_client_history(self, client_id: str, items: list[SaleItem], voucher_code: Optional[str]) -> None:
        """Services received and voucher used feed the voucher eligibility rules."""
        container = get_container()
        today = date.today().isoformat()
        services = [{"service_id": i.id, "date": today} for i in items if i.type == ItemTypes.SERVICE for _ in range(i.quantity)]
        voucher = find_voucher(voucher_code) if voucher_code else None
        used = [{"voucher_id": voucher.id, "used_date": today}] if voucher else []

        client = container.clients.get_by_id(client_id)
        if client is not None:
            container.clients.save(
                dataclasses.replace(
                    client,
                    service_history=client.service_history + services,
                    used_vouchers=client.used_vouchers + used,
                    is_new_client=False,
                )
            )
        user = container.users.get_by_id(client_id)
        if user is not None:
            container.users.update(
                client_id,
                service_history=user.service_history + services,
                used_vouchers=user.used_vouchers + used,
                is_new_client=False,
            )
