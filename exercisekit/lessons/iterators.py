"""Iterator lessons: capitalising, dividing, factorials and counting progress."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Mapping


def _ascii_upper(char: str) -> str:
    return char.upper() if "a" <= char <= "z" else char


def capitalize_first(text: str) -> str:
    """Upper-case the first character if it is an ASCII letter."""
    if not text:
        return ""
    return _ascii_upper(text[0]) + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    return "".join(capitalize_words_vector(words))


class DivisionError(ArithmeticError):
    """A division that does not give a whole result."""

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class NotDivisibleError(DivisionError):
    def __init__(self, dividend: int, divisor: int):
        super().__init__(dividend, divisor)
        self.dividend = dividend
        self.divisor = divisor

    def __str__(self) -> str:
        return f"{self.dividend} is not divisible by {self.divisor}"


class DivideByZeroError(DivisionError):
    def __str__(self) -> str:
        return "division by zero"


def divide(a: int, b: int) -> int:
    """a divided by b when evenly divisible; raise a DivisionError otherwise."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(dividend=a, divisor=b)
    return a // b


_NUMBERS = (27, 297, 38502, 81)


def result_with_list() -> list[int]:
    """Divide each number by 27; raise the first error met."""
    return [divide(n, 27) for n in _NUMBERS]


def list_of_results() -> list[int | DivisionError]:
    """Divide each number by 27, keeping any error in place of its result."""

    def attempt(n: int) -> int | DivisionError:
        try:
            return divide(n, 27)
        except DivisionError as exc:
            return exc

    return [attempt(n) for n in _NUMBERS]


def factorial(num: int) -> int:
    if num < 0:
        raise ValueError("factorial of a negative number")
    return math.prod(range(2, num + 1))


class Progress(enum.Enum):
    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    count = 0
    for progress in progress_map.values():
        if progress == value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    return sum(1 for progress in progress_map.values() if progress == value)


def count_collection_for(collection: Iterable[Mapping[str, Progress]], value: Progress) -> int:
    count = 0
    for progress_map in collection:
        for progress in progress_map.values():
            if progress == value:
                count += 1
    return count


def count_collection_iterator(collection: Iterable[Mapping[str, Progress]], value: Progress) -> int:
    return sum(count_iterator(progress_map, value) for progress_map in collection)