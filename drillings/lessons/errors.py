"""Error handling lessons: name tags, token costs and positive integers."""

from __future__ import annotations

from dataclasses import dataclass

_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1
_I64_MIN, _I64_MAX = -(2**63), 2**63 - 1
_DIGITS = frozenset("0123456789")

_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


def _parse_int(text: str, low: int, high: int) -> int:
    """Parse a signed integer strictly, with the given inclusive bounds."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    negative = text.startswith("-")
    digits = text[1:] if text[0] in "+-" else text
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError("invalid digit found in string")
    value = -int(digits) if negative else int(digits)
    if value > high:
        raise ValueError("number too large to fit in target type")
    if value < low:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; an empty name is refused."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Token cost of buying the typed-in quantity of items, fee included."""
    quantity = _parse_int(item_quantity, _I32_MIN, _I32_MAX)
    cost = quantity * _COST_PER_ITEM + _PROCESSING_FEE
    if not _I32_MIN <= cost <= _I32_MAX:
        raise OverflowError("attempt to multiply with overflow")
    return cost


def spend_tokens(tokens: int, item_quantity: str) -> int:
    """Pay for the items and return the tokens left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        raise ValueError("You can't afford that many!")
    return tokens - cost


class CreationError(ValueError):
    """A positive non-zero integer could not be created."""


class NegativeError(CreationError):
    """The value was negative."""

    def __init__(self, message: str = "number is negative") -> None:
        super().__init__(message)


class ZeroError(CreationError):
    """The value was zero."""

    def __init__(self, message: str = "number is zero") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer known to be greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise NegativeError()
        if self.value == 0:
            raise ZeroError()


class ParsePosNonzeroError(ValueError):
    """Text did not hold a positive non-zero integer; error holds the reason."""

    def __init__(self, error: ValueError) -> None:
        super().__init__(str(error))
        self.error = error


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a positive non-zero integer."""
    try:
        value = _parse_int(text, _I64_MIN, _I64_MAX)
    except ValueError as exc:
        raise ParsePosNonzeroError(exc) from exc
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as exc:
        raise ParsePosNonzeroError(exc) from exc