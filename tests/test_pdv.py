from decimal import Decimal

import pytest

from salao.domain.sale import Payment
from salao.services.pdv import PAYING, SELECTING_ITEMS, PointOfSale


@pytest.fixture
def seller(container):
    return container.users.get_by_id("master-user")


@pytest.fixture
def pdv(container, seller):
    return PointOfSale(user=seller, company=container.companies.get_by_id("demo-company"))


@pytest.fixture
def carlos(container):
    return container.clients.get_by_id("cli-com-plano")


def test_repeated_item_increments_quantity(pdv, container):
    corte = container.services.get_by_id("srv-corte")
    pdv.add_item(corte, "service")
    pdv.add_item(corte, "service")

    assert len(pdv.state.cart) == 1
    assert pdv.state.cart[0].quantity == 2
    assert pdv.totals.subtotal == Decimal("90.00")


def test_package_requires_client_and_only_one_per_cart(pdv, container, carlos):
    plan = container.plans.get_by_id("plan-maos")
    assert pdv.add_item(plan, "package") is False
    assert pdv.state.cart == []

    pdv.select_client(carlos)
    assert pdv.add_item(plan, "package") is True
    assert pdv.add_item(container.plans.get_by_id("plan-barba-cabelo"), "package") is False
    assert len(pdv.state.cart) == 1


def test_service_in_active_plan_is_covered(pdv, container, carlos):
    pdv.select_client(carlos)
    pdv.add_item(container.services.get_by_id("srv-corte"), "service")
    pdv.add_item(container.services.get_by_id("srv-manicure"), "service")

    covered = {line.id: line.covered_by_plan for line in pdv.state.cart}
    assert covered == {"srv-corte": True, "srv-manicure": False}

    totals = pdv.totals
    assert totals.subtotal == Decimal("35.00")
    assert totals.package_credit == Decimal("45.00")
    assert totals.total == Decimal("35.00")


def test_service_not_covered_once_quota_is_used(pdv, container, carlos):
    import dataclasses

    used_up = dataclasses.replace(carlos, plan_usage={"srv-corte": 4})
    pdv.select_client(used_up)
    pdv.add_item(container.services.get_by_id("srv-corte"), "service")
    assert pdv.state.cart[0].covered_by_plan is False


def test_update_quantity_to_zero_removes_item(pdv, container):
    pdv.add_item(container.products.get_by_id("prd-pomada"), "product")
    pdv.update_quantity("prd-pomada", 3)
    assert pdv.state.cart[0].quantity == 3

    pdv.update_quantity("prd-pomada", 0)
    assert pdv.state.cart == []


def test_start_payment_needs_items(pdv, container):
    assert pdv.start_payment() is False
    assert pdv.state.status == SELECTING_ITEMS

    pdv.add_item(container.products.get_by_id("prd-oleo"), "product")
    assert pdv.start_payment() is True
    assert pdv.state.status == PAYING


def test_voucher_code_is_case_insensitive(pdv, container, carlos):
    pdv.select_client(carlos)
    pdv.add_item(container.services.get_by_id("srv-escova"), "service")
    pdv.add_item(container.services.get_by_id("srv-escova"), "service")
    pdv.add_item(container.products.get_by_id("prd-pomada"), "product")

    result = pdv.apply_voucher("niver10")

    assert result.success
    assert result.message == "Voucher aplicado com sucesso!"
    assert pdv.state.voucher_code == "NIVER10"
    totals = pdv.totals
    assert totals.subtotal == Decimal("159.90")
    assert totals.discount == Decimal("15.99")
    assert totals.total == Decimal("143.91")


def test_voucher_needs_client_for_restricted_rules(pdv, container):
    pdv.add_item(container.services.get_by_id("srv-escova"), "service")

    result = pdv.apply_voucher("NIVER10")

    assert not result.success
    assert result.message == "Selecione um cliente para usar este voucher."
    assert pdv.state.voucher_code is None
    assert pdv.totals.discount == 0


def test_new_client_voucher_refused_for_returning_client(pdv, container, carlos):
    pdv.select_client(carlos)
    pdv.add_item(container.services.get_by_id("srv-escova"), "service")

    result = pdv.apply_voucher("BEMVINDO")

    assert not result.success
    assert result.message == "Voucher exclusivo para novos clientes."
    assert pdv.state.voucher_code is None


def test_single_use_voucher_refused_after_sale(pdv, container):
    maria = container.clients.get_by_id("cli-maria")
    pdv.select_client(maria)
    pdv.add_item(container.services.get_by_id("srv-escova"), "service")
    assert pdv.apply_voucher("BEMVINDO").success
    pdv.complete_sale([Payment("Pix", Decimal("45.00"))])

    pdv.reset()
    pdv.select_client(maria)
    pdv.add_item(container.services.get_by_id("srv-escova"), "service")
    result = pdv.apply_voucher("BEMVINDO")

    assert not result.success
    assert pdv.state.voucher_code is None
    used = container.clients.get_by_id("cli-maria").used_vouchers
    assert [u["voucher_id"] for u in used] == ["voucher-boas-vindas"]


def test_inactive_voucher_is_refused(pdv):
    result = pdv.apply_voucher("VELHO20")
    assert not result.success
    assert result.message == "Voucher inválido ou inativo."


def test_discount_is_capped_at_subtotal(container):
    pdv = PointOfSale(user=container.users.get_by_id("master-user"))
    pdv.add_item(container.services.get_by_id("srv-barba"), "service")
    assert pdv.apply_manual_discount(Decimal("50"), "value").success

    totals = pdv.totals
    assert totals.discount == Decimal("30.00")
    assert totals.total == Decimal("0.00")


def test_company_limits_refuse_large_discount_and_markup(pdv, container):
    pdv.add_item(container.services.get_by_id("srv-escova"), "service")

    assert not pdv.apply_manual_discount(Decimal("30"), "percentage").success
    assert not pdv.apply_manual_discount(Decimal("20"), "value").success
    assert pdv.apply_manual_discount(Decimal("12"), "value").success
    assert pdv.state.voucher_code is None

    assert not pdv.apply_markup(Decimal("20"), "percentage").success
    assert pdv.apply_markup(Decimal("10"), "percentage").success

    totals = pdv.totals
    assert totals.subtotal == Decimal("60.00")
    assert totals.markup == Decimal("6.00")
    assert totals.total == Decimal("54.00")


def test_remove_discount_resets_fields(pdv, container):
    pdv.select_client(container.clients.get_by_id("cli-maria"))
    pdv.add_item(container.services.get_by_id("srv-corte"), "service")
    assert pdv.apply_voucher("BEMVINDO").success
    pdv.remove_discount()

    assert pdv.state.discount == 0
    assert pdv.state.discount_type == "value"
    assert pdv.state.voucher_code is None


def test_import_appointment_starts_fresh_sale(pdv, container, carlos):
    pdv.add_item(container.products.get_by_id("prd-oleo"), "product")
    appointment = container.appointments.get_by_id("apt-1")

    pdv.import_appointment(
        appointment,
        carlos,
        container.services.get_by_id("srv-corte"),
        container.employees.get_by_id("emp-rafael"),
    )

    assert pdv.state.appointment_id == "apt-1"
    assert pdv.state.client.id == "cli-com-plano"
    assert [(line.id, line.employee_id) for line in pdv.state.cart] == [("srv-corte", "emp-rafael")]
    assert pdv.employee_for(pdv.state.cart[0]).name == "Rafael Lima"


def test_complete_sale_records_plan_usage(pdv, container, carlos):
    pdv.select_client(carlos)
    pdv.add_item(container.services.get_by_id("srv-corte"), "service")
    pdv.add_item(container.products.get_by_id("prd-pomada"), "product")

    sale = pdv.complete_sale([Payment("Pix", Decimal("39.90"))])

    assert sale is not None
    assert container.sales.get_all()[0].id == sale.id
    assert sale.subtotal == Decimal("39.90")
    assert sale.package_credit == Decimal("45.00")
    assert sale.employee_id == "master-user"
    assert sale.client_id == "cli-com-plano"
    assert container.clients.get_by_id("cli-com-plano").plan_usage["srv-corte"] == 2
    assert container.users.get_by_id("cli-com-plano").plan_usage["srv-corte"] == 2


def test_complete_sale_activates_sold_package(pdv, container):
    maria = container.clients.get_by_id("cli-maria")
    pdv.select_client(maria)
    pdv.add_item(container.plans.get_by_id("plan-maos"), "package")

    pdv.complete_sale([Payment("Dinheiro", Decimal("110.00"))])

    active = container.packages.get_by_client("cli-maria", "ativo")
    assert len(active) == 1
    assert active[0].plan_id == "plan-maos"
    updated = container.clients.get_by_id("cli-maria")
    assert updated.plan_id == active[0].id
    assert updated.plan_usage == {}
    assert updated.is_new_client is False


def test_complete_sale_without_user_returns_none(container):
    pdv = PointOfSale()
    pdv.add_item(container.products.get_by_id("prd-oleo"), "product")
    assert pdv.complete_sale([]) is None
    assert container.sales.count() == 0


def test_walk_in_resets_state(pdv, container, carlos):
    pdv.select_client(carlos)
    pdv.add_item(container.services.get_by_id("srv-barba"), "service")
    pdv.start_walk_in_sale()

    assert pdv.is_walk_in
    assert pdv.state.cart == []


def test_plan_covers_only_remaining_units(pdv, container, carlos):
    pdv.select_client(carlos)
    corte = container.services.get_by_id("srv-corte")
    for _ in range(4):
        pdv.add_item(corte, "service")

    lines = [(line.quantity, line.covered_by_plan) for line in pdv.state.cart]
    assert lines == [(3, True), (1, False)]
    totals = pdv.totals
    assert totals.subtotal == Decimal("45.00")
    assert totals.package_credit == Decimal("135.00")

    sale = pdv.complete_sale([Payment("Pix", Decimal("45.00"))])

    assert sale is not None
    assert container.clients.get_by_id("cli-com-plano").plan_usage["srv-corte"] == 4
    assert container.users.get_by_id("cli-com-plano").plan_usage["srv-corte"] == 4


def test_update_quantity_splits_covered_and_charged_units(pdv, container, carlos):
    pdv.select_client(carlos)
    pdv.add_item(container.products.get_by_id("prd-oleo"), "product")
    pdv.add_item(container.services.get_by_id("srv-corte"), "service")
    pdv.assign_employee("srv-corte", "emp-rafael")

    pdv.update_quantity("srv-corte", 5)
    assert [(line.id, line.quantity, line.covered_by_plan) for line in pdv.state.cart] == [
        ("prd-oleo", 1, False),
        ("srv-corte", 3, True),
        ("srv-corte", 2, False),
    ]
    assert all(line.employee_id == "emp-rafael" for line in pdv.state.cart[1:])

    pdv.update_quantity("srv-corte", 2)
    assert [(line.id, line.quantity, line.covered_by_plan) for line in pdv.state.cart] == [
        ("prd-oleo", 1, False),
        ("srv-corte", 2, True),
    ]
