from decimal import Decimal

from salao.services.payments import PaymentCollector, active_payment_methods


def _collector(total="100.00"):
    completed = []
    collector = PaymentCollector(Decimal(total), on_complete=lambda payments: completed.append(payments) or "sale")
    return collector, completed


def test_only_active_methods_are_offered():
    names = [m.name for m in active_payment_methods()]
    assert "Fiado" not in names
    assert names[0] == "Dinheiro"


def test_first_active_method_is_preselected():
    collector, _ = _collector()
    assert collector.current_method == "Dinheiro"


def test_partial_payments_track_remaining():
    collector, _ = _collector()
    assert collector.add_payment("60", "Pix")
    assert collector.add_payment("0") is False
    assert collector.add_payment("abc") is False

    assert collector.total_paid == Decimal("60")
    assert collector.remaining == Decimal("40.00")
    assert collector.status_text().startswith("Faltam:")

    collector.remove_payment(0)
    assert collector.payments == []


def test_overpayment_shows_change():
    collector, _ = _collector("45.00")
    collector.add_payment("50,00")
    assert collector.change == Decimal("5.00")
    assert collector.status_text().startswith("Troco:")


def test_finalize_refuses_underpayment():
    collector, completed = _collector()
    collector.add_payment("30", "Pix")

    result = collector.finalize()

    assert not result.success
    assert result.message.startswith("Valor Insuficiente")
    assert completed == []


def test_finalize_counts_pending_amount():
    collector, completed = _collector()
    collector.add_payment("30", "Pix")

    result = collector.finalize(pending_amount="70", pending_method="Cartão de Débito")

    assert result.success
    assert result.record == "sale"
    assert [(p.method, p.amount) for p in completed[0]] == [
        ("Pix", Decimal("30")),
        ("Cartão de Débito", Decimal("70")),
    ]


def test_quick_pay_covers_remaining_with_one_method():
    collector, completed = _collector()
    collector.add_payment("25", "Dinheiro")

    collector.quick_pay("Pix")

    assert [(p.method, p.amount) for p in completed[0]] == [
        ("Dinheiro", Decimal("25")),
        ("Pix", Decimal("75.00")),
    ]


def test_quick_pay_when_already_paid_keeps_payments():
    collector, completed = _collector("20.00")
    collector.add_payment("20", "Pix")

    collector.quick_pay("Dinheiro")

    assert len(completed[0]) == 1
