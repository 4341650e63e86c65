"""Client-facing history: purchases, services received and appointments."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional

from ..config import logger as log
from ..constants.item_types import ItemTypes
from ..constants.statuses import AppointmentStatuses
from ..container import get_container
from ..domain.appointment import Appointment
from ..domain.sale import Sale
from .results import OperationResult

ALL = "todos"
STATUS_FILTERS = (ALL, AppointmentStatuses.SCHEDULED, AppointmentStatuses.COMPLETED, AppointmentStatuses.CANCELLED)

FILTER_LABELS = {
    ALL: "Todos",
    AppointmentStatuses.SCHEDULED: "Agendados",
    AppointmentStatuses.COMPLETED: "Concluídos",
    AppointmentStatuses.CANCELLED: "Cancelados",
}

DEFAULT_EMPLOYEE_NAME = "Profissional"


@dataclass(frozen=True)
class ServiceRecord:
    id: str
    date: datetime
    service: str
    employee: str
    value: Decimal


def client_sales(client_id: Optional[str]) -> list[Sale]:
    """A client's purchases, newest first."""
    if not client_id:
        return []
    return get_container().sales.get_by_client(client_id)


def client_services(client_id: Optional[str]) -> list[ServiceRecord]:
    """Every service line of the client's purchases."""
    container = get_container()
    records = []
    for sale in client_sales(client_id):
        for item in sale.items:
            if item.type != ItemTypes.SERVICE:
                continue
            employee = container.employees.get_by_id(item.employee_id) if item.employee_id else None
            records.append(
                ServiceRecord(
                    id=f"{sale.id}-{item.id}",
                    date=sale.created_at,
                    service=item.name,
                    employee=employee.name if employee else DEFAULT_EMPLOYEE_NAME,
                    value=item.price,
                )
            )
    return records


def client_appointments(client_id: Optional[str], status: str = ALL) -> list[Appointment]:
    if status not in STATUS_FILTERS:
        raise ValueError(f"Unknown appointment filter: {status}")
    if not client_id:
        return []
    appointments = get_container().appointments.get_by_client(client_id)
    if status == ALL:
        return appointments
    return [a for a in appointments if a.status == status]


def cancel_client_appointment(
    client_id: str, appointment_id: str, confirm: Callable[[str, str], bool]
) -> OperationResult:
    """Clients may cancel only their own scheduled appointments."""
    container = get_container()
    appointment = container.appointments.get_by_id(appointment_id)
    if appointment is None or appointment.client_id != client_id:
        return OperationResult(False, "Agendamento não encontrado.")
    if appointment.status != AppointmentStatuses.SCHEDULED:
        return OperationResult(False, "Apenas agendamentos futuros podem ser cancelados.")

    question = "Tem certeza que deseja cancelar este agendamento? Esta ação não pode ser desfeita."
    if not confirm("Cancelar Agendamento?", question):
        return OperationResult(False, "")

    container.appointments.cancel(appointment_id)
    log.info("history", "Appointment cancelled by client", client_id=client_id, appointment_id=appointment_id)
    return OperationResult(True, "Agendamento cancelado com sucesso.")
