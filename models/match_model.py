"""
Small data models for league records.

These lightweight dataclasses document the fields the rest of the app works
with. They are frozen (immutable) so they are safe to pass around between the
Streamlit layer and the calculators without accidental modification.

    - `Match`: one completed fixture with final and half-time scores.
    - `StandingsRow`: one aggregated line of the league table.
    - `Outcome` / `FormEntry`: a team's results from its own perspective.
    - `LeagueData`: league metadata edited from the dashboard.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date as Date
from enum import Enum
from typing import Tuple

from common.constants import POINTS_DRAW, POINTS_LOSS, POINTS_WIN


class Outcome(str, Enum):
    WIN = "W"
    DRAW = "D"
    LOSS = "L"

    @property
    def points(self) -> int:
        return {"W": POINTS_WIN, "D": POINTS_DRAW, "L": POINTS_LOSS}[self.value]


@dataclass(frozen=True)
class Match:
    date: Date
    home_team: str
    away_team: str
    home_score: int
    away_score: int
    ht_home_score: int = 0
    ht_away_score: int = 0

    @property
    def result(self) -> str:
        """'H' for a home win, 'A' for an away win, 'D' for a draw."""
        if self.home_score > self.away_score:
            return "H"
        if self.home_score < self.away_score:
            return "A"
        return "D"

    def involves(self, team: str) -> bool:
        return team in (self.home_team, self.away_team)

    def outcome_for(self, team: str) -> Outcome:
        """Result of this match seen from `team`'s side."""
        if team == self.home_team:
            own, other = self.home_score, self.away_score
        elif team == self.away_team:
            own, other = self.away_score, self.home_score
        else:
            raise ValueError(f"{team!r} did not play in {self.home_team} vs {self.away_team}")
        if own > other:
            return Outcome.WIN
        if own < other:
            return Outcome.LOSS
        return Outcome.DRAW


@dataclass(frozen=True)
class StandingsRow:
    team: str
    played: int = 0
    won: int = 0
    drawn: int = 0
    lost: int = 0
    goals_for: int = 0
    goals_against: int = 0

    @property
    def goal_difference(self) -> int:
        return self.goals_for - self.goals_against

    @property
    def points(self) -> int:
        return POINTS_WIN * self.won + POINTS_DRAW * self.drawn

    def to_dict(self) -> dict:
        return {
            "team": self.team,
            "played": self.played,
            "won": self.won,
            "drawn": self.drawn,
            "lost": self.lost,
            "goals_for": self.goals_for,
            "goals_against": self.goals_against,
            "goal_difference": self.goal_difference,
            "points": self.points,
        }


@dataclass(frozen=True)
class FormEntry:
    team: str
    sequence: Tuple[Outcome, ...] = field(default_factory=tuple)

    def last(self, n: int) -> Tuple[Outcome, ...]:
        """The final `n` outcomes (the most recent ones for an oldest-first sequence)."""
        if n <= 0:
            return ()
        return self.sequence[-n:]

    @property
    def points(self) -> int:
        return sum(o.points for o in self.sequence)


@dataclass(frozen=True)
class LeagueData:
    name: str = ""
    country: str = ""
    season: str = ""
    description: str = ""
