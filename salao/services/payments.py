"""Payment modal: split payments across active methods, then finalize."""

from decimal import Decimal, InvalidOperation
from typing import Callable, Optional, Union

from ..config import logger as log
from ..container import get_container
from ..domain.payment_method import PaymentMethod
from ..domain.sale import Payment
from ..utils.formatters import format_currency
from .results import OperationResult

CompleteSale = Callable[[list[Payment]], object]

FALLBACK_METHOD = "Dinheiro"


def active_payment_methods() -> list[PaymentMethod]:
    return get_container().payment_methods.get_active()


def _parse_amount(value: Union[str, Decimal, int, float, None]) -> Optional[Decimal]:
    if value is None or value == "":
        return None
    try:
        amount = Decimal(str(value).replace(",", "."))
    except InvalidOperation:
        return None
    return amount if amount > 0 else None


class PaymentCollector:
    """Collects partial payments for a sale total.

    ``on_complete`` receives the final payment list, normally
    ``PointOfSale.complete_sale``.
    """

    def __init__(self, total: Decimal, on_complete: CompleteSale):
        self.total = total
        self.on_complete = on_complete
        self.payments: list[Payment] = []
        methods = active_payment_methods()
        self.current_method = methods[0].name if methods else FALLBACK_METHOD

    @property
    def methods(self) -> list[PaymentMethod]:
        return active_payment_methods()

    @property
    def total_paid(self) -> Decimal:
        return sum((p.amount for p in self.payments), Decimal("0"))

    @property
    def remaining(self) -> Decimal:
        """Negative once the client paid more than the total (change due)."""
        return self.total - self.total_paid

    @property
    def change(self) -> Decimal:
        return max(-self.remaining, Decimal("0"))

    def status_text(self) -> str:
        if self.remaining > 0:
            return f"Faltam: {format_currency(self.remaining)}"
        return f"Troco: {format_currency(abs(self.remaining))}"

    def add_payment(self, amount, method: Optional[str] = None) -> bool:
        """Adds a partial payment; non-positive or unparsable amounts are ignored."""
        parsed = _parse_amount(amount)
        if parsed is None:
            return False
        self.payments.append(Payment(method or self.current_method, parsed))
        log.debug("payments", "Payment added", method=method or self.current_method, amount=parsed)
        return True

    def remove_payment(self, index: int) -> None:
        self.payments = [p for i, p in enumerate(self.payments) if i != index]

    def quick_pay(self, method: str) -> OperationResult:
        """Pays whatever is left with a single method and completes the sale."""
        if self.remaining <= 0 and self.payments:
            final = list(self.payments)
        else:
            final = self.payments + [Payment(method, self.remaining)]
        result = self.on_complete(final)
        log.info("payments", "Quick pay", method=method, payments=len(final))
        return OperationResult(True, "", result)

    def finalize(self, pending_amount=None, pending_method: Optional[str] = None) -> OperationResult:
        """Completes the sale with the collected payments.

        A value still typed in the amount field counts as one more payment.
        Paying less than the total is refused.
        """
        final = list(self.payments)
        parsed = _parse_amount(pending_amount)
        if parsed is not None:
            final.append(Payment(pending_method or self.current_method, parsed))

        paid = sum((p.amount for p in final), Decimal("0"))
        if paid < self.total:
            log.warn("payments", "Insufficient payment", paid=paid, total=self.total)
            return OperationResult(
                False,
                "Valor Insuficiente: "
                f"O valor pago ({format_currency(paid)}) é menor que o total da venda "
                f"({format_currency(self.total)}).",
            )

        result = self.on_complete(final)
        return OperationResult(True, "", result)
