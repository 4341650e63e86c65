"""Voucher lookup, eligibility rules and the voucher report filter."""

from datetime import date
from typing import Optional

from ..config import logger as log
from ..container import get_container
from ..domain.voucher import Voucher

ALL = "todos"

ELIGIBILITY_LABELS = {
    "all": "Todos os Clientes",
    "new_clients": "Novos Clientes",
    "birthday_month": "Aniversariantes",
    "fidelity": "Fidelidade",
}


def find_voucher(code: str) -> Optional[Voucher]:
    """Active voucher whose code matches, ignoring case."""
    if not code:
        return None
    needle = code.strip().lower()
    return next(
        (v for v in get_container().vouchers.get_all() if v.active and v.code.lower() == needle),
        None,
    )


def service_count(client, service_id: str) -> int:
    return sum(1 for entry in client.service_history if entry.get("service_id") == service_id)


def check_eligibility(voucher: Voucher, client, today: Optional[date] = None) -> tuple[bool, str]:
    """Whether ``client`` may use ``voucher`` today, plus the reason if not.

    Args:
        voucher: Voucher being applied.
        client: Client or User record; ``None`` for a walk-in sale.
        today: Reference date, defaults to today.

    Returns:
        (eligible, message) with an empty message when eligible.
    """
    today = today or date.today()

    if not voucher.active:
        return False, "Voucher inválido ou inativo."
    if not voucher.is_valid_on(today):
        return False, "Voucher fora do período de validade."

    if voucher.eligibility != "all" and client is None:
        return False, "Selecione um cliente para usar este voucher."

    if voucher.eligibility == "new_clients" and not client.is_new_client:
        return False, "Voucher exclusivo para novos clientes."
    if voucher.eligibility == "birthday_month":
        if client.birth_date is None or client.birth_date.month != today.month:
            return False, "Voucher válido apenas no mês de aniversário."
    if voucher.eligibility == "fidelity":
        target = voucher.fidelity_target_count or 0
        done = service_count(client, voucher.fidelity_target_service_id)
        if done < target:
            return False, f"Fidelidade incompleta: {done} de {target} atendimentos."

    if voucher.single_use_per_client and client is not None:
        if any(u.get("voucher_id") == voucher.id for u in client.used_vouchers):
            return False, "Este voucher já foi utilizado por este cliente."

    return True, ""


def eligible_vouchers(client, today: Optional[date] = None) -> list[Voucher]:
    return [v for v in get_container().vouchers.get_all() if check_eligibility(v, client, today)[0]]


def filter_vouchers(status: str = ALL, amount_type: str = ALL, eligibility: str = ALL) -> list[Voucher]:
    """Voucher report filter.

    ``status`` is ``"true"``/``"false"`` for active/inactive, and every
    filter accepts ``"todos"`` to match everything.
    """
    result = []
    for voucher in get_container().vouchers.get_all():
        if status != ALL and str(voucher.active).lower() != status:
            continue
        if amount_type != ALL and voucher.type != amount_type:
            continue
        if eligibility != ALL and voucher.eligibility != eligibility:
            continue
        result.append(voucher)
    log.debug("vouchers", "Report filtered", status=status, type=amount_type, eligibility=eligibility, count=len(result))
    return result


def voucher_report_text(vouchers: list[Voucher]) -> str:
    return f"*Relatório de Vouchers*\n\nTotal de Vouchers: *{len(vouchers)}*"
