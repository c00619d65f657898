"""List lessons: building lists and doubling their elements."""

from __future__ import annotations


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed tuple and a list built up to hold the same elements."""
    a = (10, 20, 30, 40)
    v = [10, 20]
    v.extend((30, 40))
    return a, v


def vec_loop(values: list[int]) -> list[int]:
    """Double every element of the list in place and return it."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: list[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]