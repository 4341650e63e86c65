"""Value converters shared by the entity ``from_dict`` constructors."""

from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Optional


def to_decimal(val: Any) -> Decimal:
    if isinstance(val, Decimal):
        return val
    return Decimal(str(val if val not in (None, "") else 0))


def to_date(val: Any) -> Optional[date]:
    if val in (None, ""):
        return None
    if isinstance(val, datetime):
        return val.date()
    if isinstance(val, date):
        return val
    return date.fromisoformat(str(val)[:10])


def to_time(val: Any) -> Optional[time]:
    if val in (None, ""):
        return None
    if isinstance(val, time):
        return val
    return time.fromisoformat(str(val))


def to_datetime(val: Any) -> Optional[datetime]:
    if val in (None, ""):
        return None
    if isinstance(val, datetime):
        return val
    return datetime.fromisoformat(str(val).replace("Z", "+00:00"))


def time_to_str(val: Optional[time]) -> Optional[str]:
    return val.strftime("%H:%M") if val else None
