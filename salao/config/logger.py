"""Console logger for the salon core.

Every call takes a context (``pdv``, ``plans``, ``repo.client``...) and free
keyword data: ``log.info("pdv", "Sale completed", total=sale.total)``.
Output goes to stderr so the demo screen stays readable.
"""

from datetime import date, datetime, time
from decimal import Decimal
from typing import Any

from rich.console import Console

from .env import get_log_level

console = Console(stderr=True)

# level -> (weight, style)
LEVELS = {
    "debug": (10, "dim"),
    "info": (20, "cyan"),
    "warn": (30, "yellow"),
    "error": (40, "red bold"),
}

_threshold = LEVELS.get(get_log_level(), LEVELS["info"])[0]


def set_level(level: str) -> None:
    """Unknown names leave the current level untouched."""
    global _threshold
    if level.lower() in LEVELS:
        _threshold = LEVELS[level.lower()][0]


def is_enabled(level: str) -> bool:
    return LEVELS.get(level, (0, ""))[0] >= _threshold


def _render(value: Any, max_length: int = 120) -> str:
    if value is None:
        return "-"
    if isinstance(value, Decimal):
        text = f"{value:.2f}"
    elif isinstance(value, (datetime, date, time)):
        text = value.isoformat()
    elif isinstance(value, (list, tuple, set)) and len(value) > 5:
        text = f"[{len(value)} itens]"
    else:
        text = str(value)
    return text if len(text) <= max_length else text[:max_length] + "..."


def log(level: str, context: str, message: str, **data):
    if not is_enabled(level):
        return

    style = LEVELS.get(level, (0, "white"))[1]
    stamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]
    extra = ""
    if data:
        extra = " | " + ", ".join(f"{key}={_render(value)}" for key, value in data.items())

    console.print(
        f"[dim]{stamp}[/dim] [{style}]{level.upper():<5}[/{style}] [blue]\\[{context}][/blue] {message}{extra}",
        highlight=False,
    )


def debug(context: str, message: str, **data):
    log("debug", context, message, **data)


def info(context: str, message: str, **data):
    log("info", context, message, **data)


def warn(context: str, message: str, **data):
    log("warn", context, message, **data)


def error(context: str, message: str, **data):
    log("error", context, message, **data)
