"""Interface for appointment repository."""

from abc import abstractmethod
from datetime import date
from typing import Optional

from ...domain.appointment import Appointment
from .crud_repository import ICrudRepository


class IAppointmentRepository(ICrudRepository[Appointment]):
    """Contract for appointment data access."""

    @abstractmethod
    def get_by_client(self, client_id: str) -> list[Appointment]:
        """Gets all appointments for a client, newest first."""
        pass

    @abstractmethod
    def get_by_employee_and_date(
        self, employee_id: str, appointment_date: date, exclude_id: Optional[str] = None
    ) -> list[Appointment]:
        """Gets appointments for an employee on a specific date."""
        pass

    @abstractmethod
    def get_by_date(self, appointment_date: date) -> list[Appointment]:
        """Gets appointments on a date, ordered by start time."""
        pass

    @abstractmethod
    def cancel(self, appointment_id: str) -> bool:
        """Cancels an appointment."""
        pass
