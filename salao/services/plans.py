"""Monthly plans sold to clients and the lifecycle of each ClientPackage.

Every mutator is a no-op when its precondition fails (no logged client,
unknown plan, no package in the expected status).
"""

import calendar
import dataclasses
from datetime import datetime, timedelta
from typing import Callable, Optional

from ..config import logger as log
from ..constants.config_keys import ConfigDefaults, ConfigKeys
from ..constants.statuses import PackageStatuses
from ..container import get_container
from ..domain.plan import ClientPackage, MonthlyPlan
from ..domain.user import User
from .results import OperationResult

ConfirmPrompt = Callable[[str, str], bool]


def add_months(moment: datetime, months: int) -> datetime:
    """Same day ``months`` later, clamped to the last day of the month."""
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def _validity_days(plan: Optional[MonthlyPlan]) -> int:
    if plan is not None and plan.validity_in_days:
        return plan.validity_in_days
    return get_container().config.get_int(
        ConfigKeys.DEFAULT_PLAN_VALIDITY_DAYS, ConfigDefaults.DEFAULT_PLAN_VALIDITY_DAYS
    )


def _packages_matching(client_id: str, status: str, plan_id: Optional[str] = None) -> list[ClientPackage]:
    return [
        p
        for p in get_container().packages.get_by_client(client_id, status)
        if plan_id is None or p.plan_id == plan_id
    ]


# =============================================================================
# CLIENT SIDE
# =============================================================================


def request_plan_subscription(user: Optional[User], plan_id: str, is_recurring: bool) -> Optional[ClientPackage]:
    """Creates a pending request, replacing any earlier pending one."""
    container = get_container()
    if user is None:
        return None
    plan = container.plans.get_by_id(plan_id)
    if plan is None:
        return None

    container.packages.remove_where(user.id, PackageStatuses.PENDING)
    package = container.packages.save(
        ClientPackage(
            id="",
            client_id=user.id,
            client_name=user.name,
            plan_id=plan.id,
            plan_name=plan.name,
            plan_price=plan.price,
            status=PackageStatuses.PENDING,
            request_date=datetime.now(),
            is_recurring=is_recurring,
        )
    )
    log.info("plans", "Subscription requested", client_id=user.id, plan_id=plan_id)
    return package


def cancel_plan_subscription_request(user: Optional[User]) -> int:
    if user is None:
        return 0
    return get_container().packages.remove_where(user.id, PackageStatuses.PENDING)


def cancel_client_package(user: Optional[User], package_id: str) -> bool:
    """A client cancels one of their own packages."""
    container = get_container()
    package = container.packages.get_by_id(package_id)
    if user is None or package is None or package.client_id != user.id:
        return False
    container.packages.save(dataclasses.replace(package, status=PackageStatuses.CANCELLED))
    log.info("plans", "Package cancelled by client", package_id=package_id)
    return True


# =============================================================================
# SHOP SIDE
# =============================================================================


def approve_package(client_id: str, plan_id: str, payment_method: str) -> int:
    """Turns a pending request into an active package."""
    container = get_container()
    now = datetime.now()
    days = _validity_days(container.plans.get_by_id(plan_id))

    approved = 0
    for package in _packages_matching(client_id, PackageStatuses.PENDING, plan_id):
        container.packages.save(
            dataclasses.replace(
                package,
                status=PackageStatuses.ACTIVE,
                activation_date=now,
                expiration_date=now + timedelta(days=days),
                renewal_date=add_months(now, 1),
            )
        )
        approved += 1
    log.info("plans", "Package approved", client_id=client_id, plan_id=plan_id, method=payment_method, count=approved)
    return approved


def reject_package(client_id: str, plan_id: str) -> int:
    removed = get_container().packages.remove_where(client_id, PackageStatuses.PENDING, plan_id)
    log.info("plans", "Package rejected", client_id=client_id, plan_id=plan_id, removed=removed)
    return removed


def cancel_package_subscription(client_id: str, permanent: bool) -> int:
    """Resolves an overdue package.

    Permanent cancellation expires it and stops recurrence; otherwise it goes
    back to active. Either way the renewal date moves one month ahead.
    """
    container = get_container()
    changed = 0
    for package in _packages_matching(client_id, PackageStatuses.OVERDUE):
        renewal = add_months(package.renewal_date or datetime.now(), 1)
        container.packages.save(
            dataclasses.replace(
                package,
                status=PackageStatuses.EXPIRED if permanent else PackageStatuses.ACTIVE,
                is_recurring=False if permanent else package.is_recurring,
                renewal_date=renewal,
            )
        )
        changed += 1
    log.info("plans", "Overdue package resolved", client_id=client_id, permanent=permanent, count=changed)
    return changed


def register_overdue_payment(client_id: str, plan_id: str) -> int:
    container = get_container()
    now = datetime.now()
    days = _validity_days(container.plans.get_by_id(plan_id))

    paid = 0
    for package in _packages_matching(client_id, PackageStatuses.OVERDUE, plan_id):
        container.packages.save(
            dataclasses.replace(
                package,
                status=PackageStatuses.ACTIVE,
                expiration_date=now + timedelta(days=days),
                renewal_date=add_months(now, 1),
            )
        )
        paid += 1
    log.info("plans", "Overdue payment registered", client_id=client_id, plan_id=plan_id, count=paid)
    return paid


def activate_client_package(client_id: str, plan_id: str) -> Optional[ClientPackage]:
    """Starts a new active package for a client (sold at the PDV).

    Any active package of the client is replaced and plan usage starts over.
    """
    container = get_container()
    person = container.users.get_by_id(client_id) or container.clients.get_by_id(client_id)
    plan = container.plans.get_by_id(plan_id)
    if person is None or plan is None:
        return None

    now = datetime.now()
    container.packages.remove_where(client_id, PackageStatuses.ACTIVE)
    package = container.packages.save(
        ClientPackage(
            id="",
            client_id=client_id,
            client_name=person.name,
            plan_id=plan.id,
            plan_name=plan.name,
            plan_price=plan.price,
            status=PackageStatuses.ACTIVE,
            request_date=now,
            is_recurring=False,
            activation_date=now,
            expiration_date=now + timedelta(days=_validity_days(plan)),
            renewal_date=add_months(now, 1),
        )
    )
    _update_person(client_id, plan_id=package.id, plan_usage={})
    log.info("plans", "Package activated", client_id=client_id, package_id=package.id)
    return package


def use_plan_service(client_id: str, service_id: str, uses: int = 1) -> int:
    """Counts ``uses`` of a plan-covered service. Returns the new usage."""
    container = get_container()
    client = container.clients.get_by_id(client_id)
    user = container.users.get_by_id(client_id)
    source = client or user
    if source is None:
        return 0
    usage = dict(source.plan_usage)
    usage[service_id] = usage.get(service_id, 0) + uses
    _update_person(client_id, plan_usage=usage)
    log.debug("plans", "Plan service used", client_id=client_id, service_id=service_id, used=usage[service_id])
    return usage[service_id]


def _update_person(client_id: str, **changes) -> None:
    """Keeps the client record and its login user in step."""
    container = get_container()
    client = container.clients.get_by_id(client_id)
    if client is not None:
        container.clients.save(dataclasses.replace(client, **changes))
    container.users.update(client_id, **changes)


# =============================================================================
# COVERAGE
# =============================================================================


def active_package_for(client) -> Optional[ClientPackage]:
    """The active package referenced by a client's ``plan_id``."""
    if client is None or not client.plan_id:
        return None
    package = get_container().packages.get_by_id(client.plan_id)
    if package is None or not package.is_active:
        return None
    return package


def plan_uses_left(client, service_id: str) -> int:
    """Uses of ``service_id`` still available in the client's active plan."""
    package = active_package_for(client)
    if package is None:
        return 0
    plan = get_container().plans.get_by_id(package.plan_id)
    quota = plan.quota_for(service_id) if plan is not None else None
    if quota is None:
        return 0
    return max(quota - client.plan_usage.get(service_id, 0), 0)


def is_covered_by_plan(client, service_id: str) -> bool:
    """True while the client's active plan still has uses of the service."""
    return plan_uses_left(client, service_id) > 0



def plan_balance(client) -> list[dict]:
    """Remaining uses per service of the client's active plan."""
    container = get_container()
    package = active_package_for(client)
    plan = container.plans.get_by_id(package.plan_id) if package is not None else None
    if plan is None:
        return []
    balance = []
    for item in plan.services:
        service = container.services.get_by_id(item.service_id)
        used = client.plan_usage.get(item.service_id, 0)
        balance.append(
            {
                "service_id": item.service_id,
                "service_name": service.name if service else item.service_id,
                "quantity": item.quantity,
                "used": used,
                "remaining": max(item.quantity - used, 0),
            }
        )
    return balance


# =============================================================================
# CANCELLED PLANS SCREEN
# =============================================================================


def cancelled_packages(search: str = "") -> list[ClientPackage]:
    """Cancelled packages whose client name contains ``search``."""
    packages = get_container().packages.get_by_status(PackageStatuses.CANCELLED)
    if not search:
        return packages
    needle = search.lower()
    return [p for p in packages if needle in p.client_name.lower()]


def reactivate_package(package_id: str, confirm: ConfirmPrompt) -> OperationResult:
    container = get_container()
    package = container.packages.get_by_id(package_id)
    if package is None or package.status != PackageStatuses.CANCELLED:
        return OperationResult(False, "Pacote não encontrado.")
    question = f'Deseja reativar o pacote "{package.plan_name}" para o cliente {package.client_name}?'
    if not confirm("Reativar Pacote?", question):
        return OperationResult(False, "")

    reactivated = container.packages.save(dataclasses.replace(package, status=PackageStatuses.ACTIVE))
    log.info("plans", "Package reactivated", package_id=package_id)
    return OperationResult(True, "O pacote foi reativado com sucesso.", reactivated)


def delete_package_permanently(package_id: str, confirm: ConfirmPrompt) -> OperationResult:
    container = get_container()
    package = container.packages.get_by_id(package_id)
    if package is None:
        return OperationResult(False, "Pacote não encontrado.")
    question = (
        "Esta ação removerá permanentemente a solicitação de cancelamento de "
        f"{package.client_name}. Deseja continuar?"
    )
    if not confirm("Excluir Definitivamente?", question):
        return OperationResult(False, "")

    container.packages.delete(package_id)
    log.info("plans", "Package deleted", package_id=package_id)
    return OperationResult(True, "O registro foi removido.")
