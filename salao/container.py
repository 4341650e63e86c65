"""Dependency injection container holding the session's in-memory lists."""

from dataclasses import dataclass
from typing import Optional

from .domain.combo import Combo
from .domain.company import Company
from .domain.employee import Employee
from .domain.payment_method import PaymentMethod
from .domain.plan import MonthlyPlan
from .domain.product import Product
from .domain.service import Service
from .domain.specialty import Specialty
from .domain.voucher import Voucher
from .repositories.interfaces.appointment_repository import IAppointmentRepository
from .repositories.interfaces.client_repository import IClientRepository
from .repositories.interfaces.crud_repository import ICrudRepository
from .repositories.interfaces.package_repository import IClientPackageRepository
from .repositories.interfaces.sale_repository import ISaleRepository
from .repositories.interfaces.system_config_repository import ISystemConfigRepository
from .repositories.interfaces.user_repository import IUserRepository


@dataclass
class Container:
    """Holds all repository instances shared by every screen."""

    config: ISystemConfigRepository
    companies: ICrudRepository[Company]
    users: IUserRepository
    clients: IClientRepository
    employees: ICrudRepository[Employee]
    services: ICrudRepository[Service]
    products: ICrudRepository[Product]
    combos: ICrudRepository[Combo]
    plans: ICrudRepository[MonthlyPlan]
    vouchers: ICrudRepository[Voucher]
    specialties: ICrudRepository[Specialty]
    payment_methods: ICrudRepository[PaymentMethod]
    appointments: IAppointmentRepository
    sales: ISaleRepository
    packages: IClientPackageRepository


_container: Optional[Container] = None


def get_container() -> Container:
    """Returns the global container instance.

    Raises:
        RuntimeError: If container has not been initialized.
    """
    if _container is None:
        raise RuntimeError(
            "Container not initialized. Call set_container() in the application entry point."
        )
    return _container


def set_container(container: Container) -> None:
    """Sets the global container instance.

    Args:
        container: Container with concrete repository implementations.
    """
    global _container
    _container = container


def reset_container() -> None:
    """Resets the global container. Useful for testing."""
    global _container
    _container = None
