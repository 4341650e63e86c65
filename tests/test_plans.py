from datetime import datetime, timedelta

from salao.services import plans


def _user(container, user_id):
    return container.users.get_by_id(user_id)


def test_add_months_clamps_to_month_end():
    assert plans.add_months(datetime(2024, 1, 31), 1) == datetime(2024, 2, 29)
    assert plans.add_months(datetime(2024, 12, 15, 10, 30), 1) == datetime(2025, 1, 15, 10, 30)


def test_request_replaces_pending_request(container):
    maria = _user(container, "cli-maria")

    request = plans.request_plan_subscription(maria, "plan-barba-cabelo", is_recurring=True)

    pending = container.packages.get_by_client("cli-maria", "pendente")
    assert [p.id for p in pending] == [request.id]
    assert pending[0].plan_name == "Plano Barba & Cabelo"
    assert pending[0].is_recurring is True


def test_request_without_user_or_plan_is_noop(container):
    before = container.packages.count()
    assert plans.request_plan_subscription(None, "plan-maos", False) is None
    assert plans.request_plan_subscription(_user(container, "cli-pedro"), "nope", False) is None
    assert container.packages.count() == before


def test_cancel_pending_request(container):
    assert plans.cancel_plan_subscription_request(_user(container, "cli-maria")) == 1
    assert container.packages.get_by_client("cli-maria", "pendente") == []


def test_client_can_cancel_only_own_package(container):
    assert plans.cancel_client_package(_user(container, "cli-maria"), "pkg-carlos") is False
    assert plans.cancel_client_package(_user(container, "cli-com-plano"), "pkg-carlos") is True
    assert container.packages.get_by_id("pkg-carlos").status == "cancelado"


def test_approve_sets_dates(container):
    before = datetime.now()
    assert plans.approve_package("cli-maria", "plan-maos", "Pix") == 1

    package = container.packages.get_by_id("pkg-maria")
    assert package.status == "ativo"
    assert package.activation_date >= before
    assert package.expiration_date.date() == (package.activation_date + timedelta(days=30)).date()
    assert package.renewal_date == plans.add_months(package.activation_date, 1)


def test_approve_wrong_plan_changes_nothing(container):
    assert plans.approve_package("cli-maria", "plan-barba-cabelo", "Pix") == 0
    assert container.packages.get_by_id("pkg-maria").status == "pendente"


def test_reject_removes_pending(container):
    assert plans.reject_package("cli-maria", "plan-maos") == 1
    assert container.packages.get_by_id("pkg-maria") is None


def test_overdue_permanent_cancellation_expires(container):
    renewal = container.packages.get_by_id("pkg-joao").renewal_date

    assert plans.cancel_package_subscription("cli-joao", permanent=True) == 1

    package = container.packages.get_by_id("pkg-joao")
    assert package.status == "expirado"
    assert package.is_recurring is False
    assert package.renewal_date == plans.add_months(renewal, 1)


def test_overdue_soft_cancellation_reactivates(container):
    plans.cancel_package_subscription("cli-joao", permanent=False)
    package = container.packages.get_by_id("pkg-joao")
    assert package.status == "ativo"
    assert package.is_recurring is True


def test_register_overdue_payment(container):
    assert plans.register_overdue_payment("cli-joao", "plan-barba-cabelo") == 1
    package = container.packages.get_by_id("pkg-joao")
    assert package.status == "ativo"
    assert package.expiration_date > datetime.now()


def test_activate_replaces_active_package_and_resets_usage(container):
    package = plans.activate_client_package("cli-com-plano", "plan-maos")

    active = container.packages.get_by_client("cli-com-plano", "ativo")
    assert [p.id for p in active] == [package.id]
    assert container.packages.get_by_id("pkg-carlos") is None
    client = container.clients.get_by_id("cli-com-plano")
    assert client.plan_id == package.id
    assert client.plan_usage == {}


def test_use_plan_service_increments_usage(container):
    assert plans.use_plan_service("cli-com-plano", "srv-barba") == 1
    assert plans.use_plan_service("cli-com-plano", "srv-barba") == 2
    assert container.clients.get_by_id("cli-com-plano").plan_usage == {"srv-corte": 1, "srv-barba": 2}


def test_plan_balance(container):
    carlos = container.clients.get_by_id("cli-com-plano")
    balance = {b["service_id"]: b["remaining"] for b in plans.plan_balance(carlos)}
    assert balance == {"srv-corte": 3, "srv-barba": 4}


def test_coverage_requires_active_package(container):
    joao = container.clients.get_by_id("cli-joao")
    carlos = container.clients.get_by_id("cli-com-plano")
    assert plans.is_covered_by_plan(carlos, "srv-barba")
    assert not plans.is_covered_by_plan(carlos, "srv-manicure")
    assert not plans.is_covered_by_plan(joao, "srv-corte")
    assert not plans.is_covered_by_plan(None, "srv-corte")


def test_cancelled_packages_search_by_client_name():
    assert [p.id for p in plans.cancelled_packages()] == ["pkg-pedro"]
    assert [p.id for p in plans.cancelled_packages("PEDRO")] == ["pkg-pedro"]
    assert plans.cancelled_packages("maria") == []


def test_reactivate_cancelled_package(container, always_yes, always_no):
    assert not plans.reactivate_package("pkg-pedro", always_no).success
    assert container.packages.get_by_id("pkg-pedro").status == "cancelado"

    result = plans.reactivate_package("pkg-pedro", always_yes)
    assert result.success
    assert result.message == "O pacote foi reativado com sucesso."
    assert container.packages.get_by_id("pkg-pedro").status == "ativo"


def test_delete_package_permanently(container, always_yes):
    result = plans.delete_package_permanently("pkg-pedro", always_yes)
    assert result.success
    assert result.message == "O registro foi removido."
    assert container.packages.get_by_id("pkg-pedro") is None
