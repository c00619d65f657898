"""Dictionary lessons: fruit baskets and a football scores table."""

from __future__ import annotations

import enum
from dataclasses import dataclass


def fruit_basket() -> dict[str, int]:
    """A basket holding at least three kinds of fruit and at least five fruits."""
    basket = {"banana": 2}
    basket["apple"] = 4
    basket["oreos"] = 50
    return basket


class Fruit(enum.Enum):
    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


_NEW_FRUIT_COUNT = 8


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add 8 of every kind of fruit not already in the basket; leave the others alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, _NEW_FRUIT_COUNT)


@dataclass
class Team:
    """A team's goals scored and conceded over all matches."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0


def _parse_goals(text: str) -> int:
    if not text.isascii() or not text.isdigit():
        raise ValueError(f"invalid goal count: {text!r}")
    goals = int(text)
    if goals > 255:
        raise ValueError(f"goal count out of range: {text!r}")
    return goals


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of teams from lines of 'team_1,team_2,goals_1,goals_2'."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_goals = _parse_goals(fields[2])
        team_2_goals = _parse_goals(fields[3])

        team_1 = scores.setdefault(team_1_name, Team(team_1_name))
        team_1.goals_scored += team_1_goals
        team_1.goals_conceded += team_2_goals

        team_2 = scores.setdefault(team_2_name, Team(team_2_name))
        team_2.goals_scored += team_2_goals
        team_2.goals_conceded += team_1_goals
    return scores