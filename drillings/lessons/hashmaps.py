"""Dictionary lessons: fruit baskets and a football scores table."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import MutableMapping

_U8_MAX = 255
_DIGITS = frozenset("0123456789")


def fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds and five pieces of fruit."""
    return {"banana": 2, "apple": 3, "pear": 4}


class Fruit(Enum):
    APPLE = auto()
    BANANA = auto()
    MANGO = auto()
    LYCHEE = auto()
    PINEAPPLE = auto()


def fill_fruit_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add four of every kind of fruit not yet in the basket."""
    for fruit in Fruit:
        basket.setdefault(fruit, 4)


@dataclass
class Team:
    """Goals a team has scored and conceded."""

    goals_scored: int = 0
    goals_conceded: int = 0

    def record(self, scored: int, conceded: int) -> None:
        self.goals_scored += scored
        self.goals_conceded += conceded
        if self.goals_scored > _U8_MAX or self.goals_conceded > _U8_MAX:
            raise OverflowError("goal count does not fit in 8 bits")


def _parse_goals(text: str) -> int:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError(f"invalid goal count {text!r}")
    value = int(digits)
    if value > _U8_MAX:
        raise ValueError(f"goal count {text!r} is too large")
    return value


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [line.removesuffix("\r") for line in lines] if text else []


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of goals per team from "team1,team2,goals1,goals2" lines."""
    scores: dict[str, Team] = {}
    for line in _lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line {line!r}")
        team_1, team_2 = fields[0], fields[1]
        score_1, score_2 = _parse_goals(fields[2]), _parse_goals(fields[3])
        scores.setdefault(team_1, Team()).record(score_1, score_2)
        scores.setdefault(team_2, Team()).record(score_2, score_1)
    return scores