"""Appointment entity - represents a scheduled appointment."""

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

from ..constants.statuses import AppointmentStatus
from .converters import time_to_str, to_date, to_datetime, to_time


@dataclass
class Appointment:
    """A service booked with an employee at a specific date and time."""

    id: str
    client_id: str
    employee_id: str
    service_id: str
    date: date
    start_time: time
    end_time: time
    company_id: str
    status: AppointmentStatus = "agendado"
    created_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Appointment":
        """Creates an Appointment from a dictionary."""
        return cls(
            id=data["id"],
            client_id=data["client_id"],
            employee_id=data["employee_id"],
            service_id=data["service_id"],
            date=to_date(data["date"]),
            start_time=to_time(data["start_time"]),
            end_time=to_time(data["end_time"]),
            company_id=data["company_id"],
            status=data.get("status", "agendado"),
            created_at=to_datetime(data.get("created_at")),
        )

    def to_dict(self) -> dict:
        """Converts to dictionary."""
        return {
            "id": self.id,
            "client_id": self.client_id,
            "employee_id": self.employee_id,
            "service_id": self.service_id,
            "date": self.date.isoformat(),
            "start_time": time_to_str(self.start_time),
            "end_time": time_to_str(self.end_time),
            "company_id": self.company_id,
            "status": self.status,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    @property
    def starts_at(self) -> datetime:
        return datetime.combine(self.date, self.start_time)

    @property
    def ends_at(self) -> datetime:
        return datetime.combine(self.date, self.end_time)

    @property
    def is_cancelled(self) -> bool:
        """Checks if appointment is cancelled."""
        return self.status == "cancelado"

    @property
    def is_upcoming(self) -> bool:
        """Checks if appointment is upcoming."""
        return self.date >= date.today() and self.status == "agendado"
