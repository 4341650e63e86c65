"""Result object returned by form actions instead of raising."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class OperationResult:
    """Outcome of a form action, carrying the message shown to the user."""

    success: bool
    message: str = ""
    record: Optional[Any] = None

    def __bool__(self) -> bool:
        return self.success
