"""Conditional lessons: the bigger number, fizz words and animal habitats."""

from __future__ import annotations


def bigger(a: int, b: int) -> int:
    """The bigger of two numbers."""
    if a > b:
        return a
    return b


def foo_if_fizz(fizzish: str) -> str:
    """"foo" for "fizz", "bar" for "fuzz", otherwise "baz"."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def animal_habitat(animal: str) -> str:
    """Where the animal lives."""
    match animal:
        case "crab":
            return "Beach"
        case "gopher":
            return "Burrow"
        case "snake":
            return "Desert"
    return "Unknown"