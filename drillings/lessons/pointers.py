"""Pointer lessons: a cons list and a copy-on-write sequence."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A value followed by the rest of the list."""

    value: int
    rest: Cons | Nil


ConsList = Cons | Nil


def create_empty_list() -> ConsList:
    """A list without items."""
    return Nil()


def create_non_empty_list() -> ConsList:
    """A list holding a single item."""
    return Cons(4, Nil())


class Cow(Generic[T]):
    """A sequence that is copied the first time it needs changing, unless owned."""

    __slots__ = ("_data", "_owned")

    def __init__(self, data: Sequence[T], owned: bool) -> None:
        self._data = data
        self._owned = owned

    @classmethod
    def borrowed(cls, data: Sequence[T]) -> Cow[T]:
        """Share data without copying it."""
        return cls(data, owned=False)

    @classmethod
    def owned(cls, data: Sequence[T]) -> Cow[T]:
        """Take data as our own."""
        return cls(data if isinstance(data, list) else list(data), owned=True)

    @property
    def is_owned(self) -> bool:
        return self._owned

    def to_mut(self) -> list[T]:
        """A list that may be changed, copying shared data first."""
        if not self._owned:
            self._data = list(self._data)
            self._owned = True
        return self._data  # type: ignore[return-value]

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> T:
        return self._data[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __repr__(self) -> str:
        kind = "Owned" if self._owned else "Borrowed"
        return f"Cow.{kind}({list(self._data)!r})"


def abs_all(cow: Cow[int]) -> Cow[int]:
    """Make every value non-negative, copying shared data only when needed."""
    for index, value in enumerate(cow):
        if value < 0:
            cow.to_mut()[index] = -value
    return cow