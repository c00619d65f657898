"""Optional value lessons: ice cream left in the fridge and popping nested values."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def maybe_icecream(time_of_day: int) -> int | None:
    """Ice creams left at an hour of a 24-hour day; None for hours past 23."""
    if time_of_day < 22:
        return 5
    if time_of_day <= 23:
        return 0
    return None


def take_while_present(values: Sequence[int | None]) -> Iterator[int]:
    """Yield values from the end backwards, stopping at the first missing one."""
    for value in reversed(values):
        if value is None:
            return
        yield value