"""Birthday campaign: configured message, preview and monthly list."""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from babel.dates import get_month_names

from ..config import logger as log
from ..constants.config_keys import ConfigDefaults, ConfigKeys
from ..container import get_container
from ..domain.client import Client
from ..domain.voucher import Voucher
from ..utils.formatters import LOCALE

PREVIEW_CLIENT_NAME = "Fulano"


@dataclass
class BirthdayConfig:
    message: str
    voucher_id: str = ""


def month_options() -> list[tuple[int, str]]:
    """``(1, "Janeiro") ... (12, "Dezembro")`` for the month filter."""
    names = get_month_names("wide", locale=LOCALE)
    return [(number, names[number].capitalize()) for number in range(1, 13)]


def get_birthday_config() -> BirthdayConfig:
    config = get_container().config
    return BirthdayConfig(
        message=config.get_value(ConfigKeys.BIRTHDAY_MESSAGE, ConfigDefaults.BIRTHDAY_MESSAGE),
        voucher_id=config.get_value(ConfigKeys.BIRTHDAY_VOUCHER_ID, ConfigDefaults.BIRTHDAY_VOUCHER_ID) or "",
    )


def update_birthday_config(message: str, voucher_id: Optional[str]) -> str:
    config = get_container().config
    config.set(ConfigKeys.BIRTHDAY_MESSAGE, message)
    config.set(ConfigKeys.BIRTHDAY_VOUCHER_ID, voucher_id or "")
    log.info("birthdays", "Config updated", voucher_id=voucher_id)
    return "Configurações de aniversário salvas com sucesso!"


def birthday_vouchers() -> list[Voucher]:
    """Only ``birthday_month`` vouchers can be attached to the message."""
    return [v for v in get_container().vouchers.get_all() if v.eligibility == "birthday_month"]


def birthday_message(client_name: str, company_name: str, config: Optional[BirthdayConfig] = None) -> str:
    """Message for one client, greeting them by first name.

    The voucher line is added only when the configured voucher exists.
    """
    config = config or get_birthday_config()
    first_name = client_name.split(" ")[0] if client_name else ""
    text = config.message.replace("{empresa}", company_name, 1).replace("{cliente}", first_name, 1)
    voucher = get_container().vouchers.get_by_id(config.voucher_id) if config.voucher_id else None
    if voucher is not None:
        text += f"\n\nUse o código *{voucher.code}* para resgatar seu presente!"
    return text


def preview_message(company_name: str, config: Optional[BirthdayConfig] = None) -> str:
    return birthday_message(PREVIEW_CLIENT_NAME, company_name, config)


def birthdays_in_month(month: Optional[int] = None) -> list[Client]:
    """Clients born in ``month`` (defaults to the current month)."""
    month = month or date.today().month
    clients = [c for c in get_container().clients.get_all() if c.birth_date and c.birth_date.month == month]
    log.debug("birthdays", "Birthdays listed", month=month, count=len(clients))
    return clients


def broadcast_question(count: int) -> str:
    return f"Tem certeza que deseja enviar a mensagem de aniversário para {count} clientes?"
