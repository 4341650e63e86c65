from datetime import date, datetime, time, timedelta

import pytest

from salao.domain.appointment import Appointment
from salao.services.scheduling import (
    available_time_slots,
    cancel_appointment,
    item_duration,
    qualified_employees,
    save_appointment,
    weekday_name,
)


def _next(weekday: int) -> date:
    """Next date (after today) falling on ``weekday`` (Monday == 0)."""
    day = date.today() + timedelta(days=1)
    while day.weekday() != weekday:
        day += timedelta(days=1)
    return day


@pytest.fixture
def monday():
    return _next(0)


def _slot(slots, hhmm):
    return next(s for s in slots if s.time == hhmm)


def test_weekday_names_are_portuguese():
    assert weekday_name(date(2024, 3, 4)) == "Segunda-feira"
    assert weekday_name(date(2024, 3, 10)) == "Domingo"


def test_qualified_employees_need_every_specialty(container):
    corte = container.services.get_by_id("srv-corte")
    escova = container.services.get_by_id("srv-escova")
    combo = container.combos.get_by_id("cmb-corte-barba")

    assert [e.id for e in qualified_employees(corte, "service")] == ["emp-rafael"]
    assert [e.id for e in qualified_employees(escova, "service")] == ["emp-ana"]
    assert [e.id for e in qualified_employees(combo, "combo")] == ["emp-rafael"]


def test_item_duration(container):
    assert item_duration(container.services.get_by_id("srv-barba"), "service") == 20
    assert item_duration(container.combos.get_by_id("cmb-corte-barba"), "combo") == 50
    assert item_duration(container.combos.get_by_id("cmb-kit-barba"), "combo") == 0


def test_slots_every_fifteen_minutes_until_end(monday):
    slots = available_time_slots("emp-rafael", monday, 30)

    assert slots[0].time == "09:00"
    assert slots[1].time == "09:15"
    assert slots[-1].time == "17:30"
    assert all(not s.disabled for s in slots if s.time < "11:30")


def test_break_overlap_disables_slot(monday):
    slots = available_time_slots("emp-rafael", monday, 30)
    assert _slot(slots, "11:30").disabled is False
    assert _slot(slots, "11:45").reason == "break"
    assert _slot(slots, "12:45").reason == "break"
    assert _slot(slots, "13:00").disabled is False


def test_occupied_by_same_employee_appointment(container, monday):
    container.appointments.save(
        Appointment("apt-x", "cli-joao", "emp-rafael", "srv-corte", monday, time(15, 0), time(15, 30), "demo-company")
    )

    slots = available_time_slots("emp-rafael", monday, 30)
    assert _slot(slots, "14:30").disabled is False
    assert _slot(slots, "14:45").reason == "occupied"
    assert _slot(slots, "15:15").reason == "occupied"
    assert _slot(slots, "15:30").disabled is False

    editing = available_time_slots("emp-rafael", monday, 30, exclude_appointment_id="apt-x")
    assert _slot(editing, "15:00").disabled is False

    other = available_time_slots("emp-ana", monday, 30)
    assert _slot(other, "15:00").disabled is False


def test_cancelled_appointment_frees_slot(container, monday):
    container.appointments.save(
        Appointment("apt-y", "cli-joao", "emp-rafael", "srv-corte", monday, time(16, 0), time(16, 30), "demo-company")
    )
    assert cancel_appointment("apt-y")
    assert _slot(available_time_slots("emp-rafael", monday, 30), "16:00").disabled is False


def test_past_days_are_disabled():
    yesterday = date.today() - timedelta(days=1)
    slots = available_time_slots("emp-ana", yesterday, 30)
    if slots:
        assert all(s.reason == "past" for s in slots)


def test_earlier_slots_today_are_not_past(container):
    now = datetime.combine(_next(2), time(17, 0))
    slots = available_time_slots("emp-ana", now.date(), 30, now=now)
    assert all(s.reason != "past" for s in slots)


def test_no_slots_on_inactive_day_or_zero_duration(monday):
    assert available_time_slots("emp-rafael", _next(6), 30) == []
    assert available_time_slots("emp-rafael", monday, 0) == []
    assert available_time_slots("unknown", monday, 30) == []


def test_save_appointment_books_and_blocks_slot(container, monday):
    corte = container.services.get_by_id("srv-corte")

    result = save_appointment("cli-pedro", "emp-rafael", corte, "service", monday, time(10, 0))
    assert result.success
    assert result.message == "Agendamento confirmado com sucesso!"
    assert result.record.end_time == time(10, 30)
    assert result.record.status == "agendado"

    again = save_appointment("cli-joao", "emp-rafael", corte, "service", monday, time(10, 15))
    assert not again.success


def test_reschedule_keeps_id(container, monday):
    corte = container.services.get_by_id("srv-corte")
    booked = save_appointment("cli-pedro", "emp-rafael", corte, "service", monday, time(10, 0)).record

    moved = save_appointment(
        "cli-pedro", "emp-rafael", corte, "service", monday, time(10, 15), editing_id=booked.id
    )

    assert moved.success
    assert moved.message == "Agendamento atualizado com sucesso!"
    assert moved.record.id == booked.id
    assert container.appointments.get_by_id(booked.id).start_time == time(10, 15)
