"""Functions and generics lessons."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices 3 off."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    return num * num


@dataclass
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T