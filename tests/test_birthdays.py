from datetime import date

from salao.services.birthdays import (
    BirthdayConfig,
    birthday_message,
    birthday_vouchers,
    birthdays_in_month,
    get_birthday_config,
    month_options,
    preview_message,
    update_birthday_config,
)


def test_default_config():
    config = get_birthday_config()
    assert config.message.startswith("Olá, {cliente}! A equipe da {empresa}")
    assert config.voucher_id == "voucher-aniversario"


def test_message_uses_first_name_and_voucher_code():
    text = birthday_message("Carlos Andrade", "Barbearia Demo")
    assert text.startswith("Olá, Carlos! A equipe da Barbearia Demo te deseja")
    assert text.endswith("\n\nUse o código *NIVER10* para resgatar seu presente!")


def test_message_without_voucher():
    config = BirthdayConfig(message="Parabéns, {cliente}!", voucher_id="")
    assert birthday_message("Ana Costa", "X", config) == "Parabéns, Ana!"


def test_preview_uses_placeholder_name():
    assert preview_message("Barbearia Demo").startswith("Olá, Fulano!")


def test_update_config():
    message = update_birthday_config("Feliz aniversário, {cliente}!", None)
    assert message == "Configurações de aniversário salvas com sucesso!"
    assert get_birthday_config() == BirthdayConfig("Feliz aniversário, {cliente}!", "")


def test_only_birthday_vouchers_are_offered():
    assert [v.code for v in birthday_vouchers()] == ["NIVER10"]


def test_birthdays_in_month():
    assert "cli-com-plano" in [c.id for c in birthdays_in_month(date.today().month)]
    assert "cli-joao" in [c.id for c in birthdays_in_month(3)]
    assert "cli-maria" in [c.id for c in birthdays_in_month(11)]
    assert all(c.birth_date for c in birthdays_in_month())


def test_month_options_in_portuguese():
    options = month_options()
    assert options[0] == (1, "Janeiro")
    assert options[2] == (3, "Março")
    assert len(options) == 12
