"""Linked list and copy-on-write lessons."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Cons:
    """A cell of a linked list; `rest` is None at the end of the list."""

    value: int
    rest: Cons | None = None


def create_empty_list() -> Cons | None:
    return None


def create_non_empty_list() -> Cons:
    return Cons(3, None)


def abs_all(values: Sequence[int]) -> Sequence[int]:
    """Absolute values; the input itself is returned when nothing needs changing."""
    if all(value >= 0 for value in values):
        return values
    return [abs(value) for value in values]