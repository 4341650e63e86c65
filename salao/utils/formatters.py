"""Display formatters for Brazilian phone numbers, CPF, money and dates.

All functions are pure. Invalid input never raises: date converters return an
empty string and masks simply format whatever digits are present.
"""

import re
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Optional, Union

from babel.dates import format_date
from babel.numbers import format_currency as babel_format_currency

LOCALE = "pt_BR"
CURRENCY = "BRL"

_NON_DIGITS = re.compile(r"\D")
_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}$")


def only_digits(value: str) -> str:
    return _NON_DIGITS.sub("", value or "")


def format_phone(value: str) -> str:
    """Masks a phone number as the user types: ``(11) 98765-4321``."""
    if not value:
        return value
    digits = only_digits(value)[:11]
    length = len(digits)

    if length <= 2:
        return f"({digits}"
    if length <= 6:
        return f"({digits[:2]}) {digits[2:]}"
    if length <= 10:
        return f"({digits[:2]}) {digits[2:6]}-{digits[6:]}"
    return f"({digits[:2]}) {digits[2:7]}-{digits[7:11]}"


def format_currency(value: Union[Decimal, float, int]) -> str:
    """Formats a value in Brazilian Real, e.g. ``R$ 1.234,56``."""
    return babel_format_currency(value, CURRENCY, locale=LOCALE)


def format_birth_date(value: str) -> str:
    """Masks a birth date as the user types: ``25/12/1990``."""
    if not value:
        return value
    digits = only_digits(value)[:8]
    length = len(digits)

    if length <= 2:
        return digits
    if length <= 4:
        return f"{digits[:2]}/{digits[2:]}"
    return f"{digits[:2]}/{digits[2:4]}/{digits[4:]}"


def format_cpf(value: str) -> str:
    """Masks a CPF progressively: ``123.456.789-01``."""
    if not value:
        return ""
    cpf = only_digits(value)[:11]
    cpf = re.sub(r"(\d{3})(\d)", r"\1.\2", cpf, count=1)
    cpf = re.sub(r"(\d{3})(\d)", r"\1.\2", cpf, count=1)
    return re.sub(r"(\d{3})(\d{1,2})$", r"\1-\2", cpf, count=1)


def to_yyyymmdd(value: Optional[str]) -> str:
    """Converts typed ``DD/MM/YYYY`` into ``YYYY-MM-DD`` storage form.

    Only the ranges are checked (day 1-31, month 1-12, year 1901-2099); an
    impossible day such as 31/02 passes through unchanged.
    """
    if not value or len(value) != 10:
        return ""
    parts = value.split("/")
    if len(parts) != 3:
        return ""
    day, month, year = parts
    if not (day and month and len(year) == 4):
        return ""
    try:
        d, m, y = int(day), int(month), int(year)
    except ValueError:
        return ""
    if 0 < d <= 31 and 0 < m <= 12 and 1900 < y < 2100:
        return f"{year}-{month.zfill(2)}-{day.zfill(2)}"
    return ""


def to_ddmmyyyy(value: Optional[str]) -> str:
    """Converts ``YYYY-MM-DD`` (or a full ISO timestamp) into ``DD/MM/YYYY``.

    Timestamps carrying an offset are converted to UTC before taking the date.
    """
    if not value or (len(value) != 10 and "T" not in value):
        return ""
    try:
        if "T" in value:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
            if parsed.tzinfo is not None:
                parsed = parsed.astimezone(timezone.utc)
            day = parsed.date()
        elif _ISO_DATE.match(value):
            day = date.fromisoformat(value)
        else:
            return ""
    except ValueError:
        return ""
    return day.strftime("%d/%m/%Y")


def format_long_date(value: Union[date, datetime]) -> str:
    """``5 de março`` style date used on history cards."""
    return format_date(value, "d 'de' MMMM", locale=LOCALE)


def format_amount(value: Decimal, amount_type: str) -> str:
    """Voucher/discount value: currency for fixed values, ``10%`` otherwise."""
    if amount_type == "percentage":
        return f"{value.normalize():f}%"
    return format_currency(value)
