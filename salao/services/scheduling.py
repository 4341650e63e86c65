"""Scheduling: who can perform an item and which start times are free."""

import dataclasses
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Literal, Optional

from ..config import logger as log
from ..config.env import get_company_id
from ..constants.config_keys import ConfigDefaults, ConfigKeys
from ..constants.item_types import ItemType, ItemTypes
from ..constants.statuses import WEEKDAY_NAMES, AppointmentStatuses
from ..container import get_container
from ..domain.appointment import Appointment
from ..domain.employee import Employee
from .results import OperationResult

SlotReason = Literal["past", "break", "occupied"]


@dataclass(frozen=True)
class TimeSlot:
    time: str
    disabled: bool = False
    reason: Optional[SlotReason] = None


def weekday_name(day: date) -> str:
    return WEEKDAY_NAMES[day.weekday()]


def item_specialties(item, item_type: ItemType) -> list[str]:
    """Specialties required by a service, or by every service of a combo."""
    container = get_container()
    if item_type == ItemTypes.SERVICE:
        required = list(item.specialty_ids)
    elif item_type == ItemTypes.COMBO:
        required = []
        for combo_item in item.items:
            if combo_item.type != "service":
                continue
            service = container.services.get_by_id(combo_item.id)
            if service is not None:
                required.extend(service.specialty_ids)
    else:
        return []
    return list(dict.fromkeys(required))


def qualified_employees(item, item_type: ItemType) -> list[Employee]:
    """Active employees holding every specialty the item requires."""
    required = item_specialties(item, item_type)
    return [e for e in get_container().employees.get_active() if e.has_specialties(required)]


def item_duration(item, item_type: ItemType) -> int:
    """Minutes an item takes; a combo without duration takes 0."""
    if item_type == ItemTypes.COMBO:
        return item.duration or 0
    return getattr(item, "duration", 0) or 0


def _slot_interval() -> int:
    return get_container().config.get_int(
        ConfigKeys.SLOT_INTERVAL_MINUTES, ConfigDefaults.SLOT_INTERVAL_MINUTES
    )


def _overlaps(start: datetime, end: datetime, other_start: datetime, other_end: datetime) -> bool:
    return start < other_end and end > other_start


def available_time_slots(
    employee_id: str,
    day: date,
    duration: int,
    exclude_appointment_id: Optional[str] = None,
    now: Optional[datetime] = None,
) -> list[TimeSlot]:
    """Candidate start times for ``duration`` minutes with an employee.

    Slots start at the employee's start time every interval (15 minutes by
    default) while the service still ends by the end time. A slot is disabled
    when the day already went by (``past``), when it overlaps the break
    (``break``) or another appointment of the employee that day
    (``occupied``). The appointment being edited does not count.
    """
    container = get_container()
    now = now or datetime.now()

    employee = container.employees.get_by_id(employee_id)
    if employee is None or duration <= 0:
        return []
    schedule = employee.schedule_for(weekday_name(day))
    if schedule is None or not schedule.active:
        return []

    booked = [
        a
        for a in container.appointments.get_by_employee_and_date(employee_id, day, exclude_appointment_id)
        if a.status != AppointmentStatuses.CANCELLED
    ]

    step = timedelta(minutes=_slot_interval())
    length = timedelta(minutes=duration)
    current = datetime.combine(day, schedule.start_time)
    end_of_day = datetime.combine(day, schedule.end_time)

    slots = []
    while current + length <= end_of_day:
        slot_end = current + length
        reason = None

        if current < now and day != now.date():
            reason = "past"

        if reason is None and schedule.has_break:
            break_start = datetime.combine(day, schedule.break_start)
            break_end = datetime.combine(day, schedule.break_end)
            if _overlaps(current, slot_end, break_start, break_end):
                reason = "break"

        if reason is None and any(_overlaps(current, slot_end, a.starts_at, a.ends_at) for a in booked):
            reason = "occupied"

        slots.append(TimeSlot(current.strftime("%H:%M"), reason is not None, reason))
        current += step

    log.debug(
        "scheduling",
        "Slots computed",
        employee_id=employee_id,
        day=day,
        total=len(slots),
        free=sum(1 for s in slots if not s.disabled),
    )
    return slots


def is_slot_available(
    employee_id: str,
    day: date,
    start: time,
    duration: int,
    exclude_appointment_id: Optional[str] = None,
) -> bool:
    wanted = start.strftime("%H:%M")
    return any(
        s.time == wanted and not s.disabled
        for s in available_time_slots(employee_id, day, duration, exclude_appointment_id)
    )


def save_appointment(
    client_id: str,
    employee_id: str,
    item,
    item_type: ItemType,
    day: date,
    start: time,
    editing_id: Optional[str] = None,
) -> OperationResult:
    """Books (or reschedules) an appointment after re-checking the slot."""
    container = get_container()
    duration = item_duration(item, item_type)

    if not is_slot_available(employee_id, day, start, duration, editing_id):
        log.warn("scheduling", "Slot no longer available", employee_id=employee_id, day=day, start=start)
        return OperationResult(
            False,
            "O horário selecionado não está mais disponível. Por favor, escolha outro horário.",
        )

    end = (datetime.combine(day, start) + timedelta(minutes=duration)).time()
    existing = container.appointments.get_by_id(editing_id) if editing_id else None
    if existing is not None:
        appointment = dataclasses.replace(
            existing,
            client_id=client_id,
            employee_id=employee_id,
            service_id=item.id,
            date=day,
            start_time=start,
            end_time=end,
        )
        message = "Agendamento atualizado com sucesso!"
    else:
        appointment = Appointment(
            id="",
            client_id=client_id,
            employee_id=employee_id,
            service_id=item.id,
            date=day,
            start_time=start,
            end_time=end,
            company_id=get_company_id(),
            created_at=datetime.now(),
        )
        message = "Agendamento confirmado com sucesso!"

    saved = container.appointments.save(appointment)
    log.info("scheduling", "Appointment saved", appointment_id=saved.id, employee_id=employee_id, day=day)
    return OperationResult(True, message, saved)


def confirmation_text(client_name: str, item_name: str, day: date, start: str) -> str:
    return f"Cliente: {client_name}\nServiço: {item_name}\nData: {day.strftime('%d/%m/%Y')} às {start}"


def cancel_appointment(appointment_id: str) -> bool:
    return get_container().appointments.cancel(appointment_id)


def appointments_for_day(day: date) -> list[Appointment]:
    return get_container().appointments.get_by_date(day)
