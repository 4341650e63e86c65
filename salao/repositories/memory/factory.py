"""Factory for creating Container with the in-memory implementation."""

from ...container import Container
from .appointment_repository import InMemoryAppointmentRepository
from .base import InMemoryRepository
from .client_repository import InMemoryClientRepository
from .package_repository import InMemoryClientPackageRepository
from .sale_repository import InMemorySaleRepository
from .system_config_repository import InMemorySystemConfigRepository
from .user_repository import InMemoryUserRepository


def create_memory_container(seed: bool = True) -> Container:
    """Creates a Container with in-memory repository implementations.

    Args:
        seed: Load the demo data set (company, catalog, clients, plans).

    Returns:
        Container: Configured with in-memory repositories.
    """
    container = Container(
        config=InMemorySystemConfigRepository(),
        companies=InMemoryRepository("company"),
        users=InMemoryUserRepository(),
        clients=InMemoryClientRepository(),
        employees=InMemoryRepository("employee"),
        services=InMemoryRepository("service"),
        products=InMemoryRepository("product"),
        combos=InMemoryRepository("combo"),
        plans=InMemoryRepository("plan"),
        vouchers=InMemoryRepository("voucher"),
        specialties=InMemoryRepository("specialty"),
        payment_methods=InMemoryRepository("payment_method"),
        appointments=InMemoryAppointmentRepository(),
        sales=InMemorySaleRepository(),
        packages=InMemoryClientPackageRepository(),
    )

    if seed:
        from ...db.seed import seed_all

        seed_all(container)

    return container
