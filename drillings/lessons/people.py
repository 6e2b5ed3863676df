"""Building a person from "name,age" text, leniently or strictly."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

_USIZE_MAX = 2**64 - 1
_DIGITS = frozenset("0123456789")


class PersonErrorKind(Enum):
    """Why a person could not be parsed."""

    EMPTY = auto()
    BAD_LEN = auto()
    NO_NAME = auto()
    PARSE_INT = auto()


class ParsePersonError(ValueError):
    """Text could not be parsed into a person."""

    def __init__(self, kind: PersonErrorKind, message: str | None = None) -> None:
        super().__init__(message or kind.name.lower())
        self.kind = kind


def _parse_age(text: str) -> int:
    """Parse an unsigned machine-sized integer the strict way."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text.startswith("+") else text
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError("invalid digit found in string")
    value = int(digits)
    if value > _USIZE_MAX:
        raise ValueError("number too large to fit in target type")
    return value


@dataclass(frozen=True)
class Person:
    """A named person with an age."""

    name: str
    age: int

    @classmethod
    def default(cls) -> Person:
        """The fallback person: John, aged 30."""
        return cls(name="John", age=30)

    @classmethod
    def from_text(cls, text: str) -> Person:
        """Parse "name,age", falling back to the default person on any problem.

        Fields after the age are ignored.
        """
        if not text:
            return cls.default()
        fields = text.split(",")
        name = fields[0]
        if not name or len(fields) < 2:
            return cls.default()
        try:
            age = _parse_age(fields[1])
        except ValueError:
            return cls.default()
        return cls(name=name, age=age)

    @classmethod
    def parse(cls, text: str) -> Person:
        """Parse exactly "name,age", raising ParsePersonError otherwise."""
        if not text:
            raise ParsePersonError(PersonErrorKind.EMPTY, "empty input")
        fields = text.split(",")
        name = fields[0]
        if not name:
            raise ParsePersonError(PersonErrorKind.NO_NAME, "empty name field")
        if len(fields) < 2:
            raise ParsePersonError(PersonErrorKind.BAD_LEN, "incorrect number of fields")
        try:
            age = _parse_age(fields[1])
        except ValueError as exc:
            raise ParsePersonError(PersonErrorKind.PARSE_INT, str(exc)) from exc
        if len(fields) > 2:
            raise ParsePersonError(PersonErrorKind.BAD_LEN, "incorrect number of fields")
        return cls(name=name, age=age)