"""Quiz lessons: apple pricing, a string transformer and report cards."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


def calculate_price_of_apples(quantity: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    price = 1 if quantity > 40 else 2
    return price * quantity


class CommandKind(enum.Enum):
    UPPERCASE = "uppercase"
    TRIM = "trim"
    APPEND = "append"


@dataclass(frozen=True)
class Command:
    """What to do to a string; APPEND adds "bar" `times` times."""

    kind: CommandKind
    times: int = 0

    def __post_init__(self) -> None:
        if self.times < 0:
            raise ValueError("times must not be negative")

    @classmethod
    def uppercase(cls) -> Command:
        return cls(CommandKind.UPPERCASE)

    @classmethod
    def trim(cls) -> Command:
        return cls(CommandKind.TRIM)

    @classmethod
    def append(cls, times: int) -> Command:
        return cls(CommandKind.APPEND, times)

    def apply(self, text: str) -> str:
        match self.kind:
            case CommandKind.UPPERCASE:
                return text.upper()
            case CommandKind.TRIM:
                return text.strip()
            case CommandKind.APPEND:
                return text + "bar" * self.times
        raise ValueError(f"unknown command kind: {self.kind!r}")


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string, in order."""
    return [command.apply(text) for text, command in items]


def _display(value: Any) -> str:
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass
class ReportCard:
    """A student's grade, which may be numeric or alphabetical."""

    grade: Any
    student_name: str
    student_age: int

    def __str__(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {_display(self.grade)}"
        )