"""In-memory implementation of AppointmentRepository."""

import dataclasses
from datetime import date
from typing import Optional

from ..interfaces.appointment_repository import IAppointmentRepository
from ...domain.appointment import Appointment
from ...config import logger as log
from .base import InMemoryRepository


class InMemoryAppointmentRepository(InMemoryRepository[Appointment], IAppointmentRepository):
    """In-memory implementation of appointment repository."""

    def __init__(self, records=None):
        super().__init__("appointment", records)

    def get_by_client(self, client_id: str) -> list[Appointment]:
        """Gets all appointments for a client, newest first."""
        results = [a for a in self._items if a.client_id == client_id]
        return sorted(results, key=lambda a: a.starts_at, reverse=True)

    def get_by_employee_and_date(
        self, employee_id: str, appointment_date: date, exclude_id: Optional[str] = None
    ) -> list[Appointment]:
        """Gets appointments for an employee on a specific date."""
        results = [
            a
            for a in self._items
            if a.employee_id == employee_id
            and a.date == appointment_date
            and a.id != exclude_id
        ]
        log.debug(
            "repo.appointment",
            "get_by_employee_and_date",
            employee_id=employee_id,
            date=appointment_date,
            count=len(results),
        )
        return results

    def get_by_date(self, appointment_date: date) -> list[Appointment]:
        """Gets appointments on a date, ordered by start time."""
        results = [a for a in self._items if a.date == appointment_date]
        return sorted(results, key=lambda a: a.start_time)

    def cancel(self, appointment_id: str) -> bool:
        """Cancels an appointment."""
        appointment = self.get_by_id(appointment_id)
        if appointment is None or appointment.is_cancelled:
            return False
        self.save(dataclasses.replace(appointment, status="cancelado"))
        log.info("repo.appointment", "cancelled", appointment_id=appointment_id)
        return True
