"""Sequence lessons: arrays and lists, doubling values, optional results."""

from __future__ import annotations

from collections.abc import Iterable

_U16_MAX = 2**16 - 1


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed tuple and a list holding the same elements."""
    fixed = (10, 20, 30, 40)
    values = [10, 20, 30, 40]
    return fixed, values


def vec_loop(values: list[int]) -> list[int]:
    """Double every element of the list in place and return it."""
    values[:] = [element * 2 for element in values]
    return values


def vec_map(values: Iterable[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [element * 2 for element in values]


def maybe_icecream(time_of_day: int) -> int | None:
    """Ice cream left at the given hour; None for hours past 23."""
    if not 0 <= time_of_day <= _U16_MAX:
        raise ValueError(f"{time_of_day} is not an unsigned 16-bit integer")
    if time_of_day < 22:
        return 5
    if time_of_day < 24:
        return 0
    return None