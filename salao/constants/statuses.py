"""Status values stored on appointments and client packages."""

from typing import Literal

AppointmentStatus = Literal["agendado", "concluido", "cancelado"]
PackageStatus = Literal["ativo", "pendente", "em-atraso", "expirado", "cancelado"]
UserRole = Literal["tecnico", "administrador", "funcionario", "cliente"]


class AppointmentStatuses:
    SCHEDULED = "agendado"
    COMPLETED = "concluido"
    CANCELLED = "cancelado"


class PackageStatuses:
    ACTIVE = "ativo"
    PENDING = "pendente"
    OVERDUE = "em-atraso"
    EXPIRED = "expirado"
    CANCELLED = "cancelado"


class UserRoles:
    TECHNICIAN = "tecnico"
    ADMIN = "administrador"
    EMPLOYEE = "funcionario"
    CLIENT = "cliente"


APPOINTMENT_STATUS_LABELS = {
    AppointmentStatuses.SCHEDULED: "Agendado",
    AppointmentStatuses.COMPLETED: "Concluído",
    AppointmentStatuses.CANCELLED: "Cancelado",
}

# Pt-BR weekday names indexed by date.weekday() (Monday == 0)
WEEKDAY_NAMES = (
    "Segunda-feira",
    "Terça-feira",
    "Quarta-feira",
    "Quinta-feira",
    "Sexta-feira",
    "Sábado",
    "Domingo",
)
