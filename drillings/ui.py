"""Coloured status lines printed to the terminal."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text


def _no_emoji() -> bool:
    return "NO_EMOJI" in os.environ


def _print_status(symbol: str, message: str, colour: str) -> None:
    console = Console(highlight=False, soft_wrap=True)
    console.print(Text.assemble((symbol, colour), " ", (message, colour)))


def warn(message: str) -> None:
    """Print a red warning line."""
    symbol = "!" if _no_emoji() else "⚠️ "
    _print_status(symbol, message, "red")


def success(message: str) -> None:
    """Print a green success line."""
    symbol = "✓" if _no_emoji() else "✅"
    _print_status(symbol, message, "green")