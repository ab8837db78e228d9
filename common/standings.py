"""
League table computation.

`calculate_standings` turns a list of `Match` records into ranked
`StandingsRow` objects. Everything is recomputed from scratch on each call;
nothing is cached between calls.

Ranking order:
    1. points (descending)
    2. goal difference (descending)
    3. goals scored (descending)
    4. team name (ascending), so equal stat lines still have a fixed order
"""

from __future__ import annotations
import logging
from typing import Dict, Iterable, List

from common.utils import check_match
from models.match_model import Match, StandingsRow

logger = logging.getLogger(__name__)

_FIELDS = ("played", "won", "drawn", "lost", "goals_for", "goals_against")


def ranking_key(row: StandingsRow):
    return (-row.points, -row.goal_difference, -row.goals_for, row.team)


def calculate_standings(matches: Iterable[Match]) -> List[StandingsRow]:
    matches = list(matches)
    # Validate everything first so a bad record never yields a partial table.
    for m in matches:
        check_match(m)

    table: Dict[str, Dict[str, int]] = {}
    for m in matches:
        home = table.setdefault(m.home_team, dict.fromkeys(_FIELDS, 0))
        away = table.setdefault(m.away_team, dict.fromkeys(_FIELDS, 0))

        home["played"] += 1
        away["played"] += 1
        home["goals_for"] += m.home_score
        home["goals_against"] += m.away_score
        away["goals_for"] += m.away_score
        away["goals_against"] += m.home_score

        if m.home_score > m.away_score:
            home["won"] += 1
            away["lost"] += 1
        elif m.home_score < m.away_score:
            away["won"] += 1
            home["lost"] += 1
        else:
            home["drawn"] += 1
            away["drawn"] += 1

    rows = [StandingsRow(team=team, **stats) for team, stats in table.items()]
    rows.sort(key=ranking_key)
    logger.debug("standings computed: %d teams from %d matches", len(rows), len(matches))
    return rows
