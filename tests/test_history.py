from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from salao.domain.sale import Sale, SaleItem
from salao.services.history import (
    cancel_client_appointment,
    client_appointments,
    client_sales,
    client_services,
)


def _sale(sale_id, created_at, items):
    return Sale(
        id=sale_id,
        items=items,
        employee_id="master-user",
        company_id="demo-company",
        subtotal=Decimal("0"),
        discount=Decimal("0"),
        total=Decimal("0"),
        created_at=created_at,
        client_id="cli-com-plano",
    )


@pytest.fixture
def sales(container):
    now = datetime.now()
    older = _sale(
        "sale-old",
        now - timedelta(days=3),
        [SaleItem("service", "srv-corte", "Corte Masculino", 1, Decimal("45"), Decimal("45"), "emp-rafael")],
    )
    newer = _sale(
        "sale-new",
        now,
        [
            SaleItem("service", "srv-barba", "Barba", 1, Decimal("30"), Decimal("30")),
            SaleItem("product", "prd-oleo", "Óleo para Barba", 1, Decimal("49.90"), Decimal("49.90")),
        ],
    )
    container.sales.add(newer)
    container.sales.add(older)
    return older, newer


def test_client_sales_newest_first(sales):
    assert [s.id for s in client_sales("cli-com-plano")] == ["sale-new", "sale-old"]
    assert client_sales(None) == []
    assert client_sales("cli-pedro") == []


def test_client_services_lists_service_lines_with_employee(sales):
    records = client_services("cli-com-plano")
    assert [(r.service, r.employee) for r in records] == [
        ("Barba", "Profissional"),
        ("Corte Masculino", "Rafael Lima"),
    ]
    assert records[0].id == "sale-new-srv-barba"
    assert records[1].value == Decimal("45")


def test_appointment_status_filter():
    assert {a.id for a in client_appointments("cli-com-plano")} == {"apt-1", "apt-4", "apt-5"}
    assert [a.id for a in client_appointments("cli-com-plano", "concluido")] == ["apt-4"]
    assert [a.id for a in client_appointments("cli-com-plano", "cancelado")] == ["apt-5"]
    assert [a.id for a in client_appointments("cli-com-plano", "agendado")] == ["apt-1"]


def test_unknown_filter_is_an_error():
    with pytest.raises(ValueError):
        client_appointments("cli-com-plano", "pendente")


def test_client_cancels_own_scheduled_appointment(container, always_yes, always_no):
    assert not cancel_client_appointment("cli-com-plano", "apt-1", always_no).success
    assert container.appointments.get_by_id("apt-1").status == "agendado"

    result = cancel_client_appointment("cli-com-plano", "apt-1", always_yes)
    assert result.success
    assert result.message == "Agendamento cancelado com sucesso."
    assert container.appointments.get_by_id("apt-1").status == "cancelado"


def test_client_cannot_cancel_others_or_finished(always_yes):
    assert not cancel_client_appointment("cli-pedro", "apt-2", always_yes).success
    assert not cancel_client_appointment("cli-com-plano", "apt-4", always_yes).success
