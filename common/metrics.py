"""
Data preparation for the Statistics page charts.

This module provides:
    - `form_string`, which renders the last N outcomes as a compact 'WDLWW'
        string for tables, and
    - `build_points_progression`, which turns the match list into a long
        DataFrame of cumulative points per team after every match, used by the
        points race chart.

Function notes:
    - Points per match come from `Match.outcome_for`, so the progression
        always agrees with the standings table.
    - Matches on the same date keep their upload order (stable mergesort).
"""

#Import libraries
from __future__ import annotations
from typing import Iterable, Sequence

import numpy as np
import pandas as pd

from common.constants import FORM_WINDOW
from common.utils import check_match
from models.match_model import Match, Outcome

PROGRESSION_COLUMNS = ["team", "date", "match_no", "opponent", "venue", "outcome", "points", "cum_points"]


def form_string(sequence: Sequence[Outcome], window: int = FORM_WINDOW) -> str:
    """Return the final `window` outcomes as letters, e.g. 'WWDLW'."""
    if window <= 0:
        return ""
    return "".join(o.value for o in list(sequence)[-window:])


def build_points_progression(matches: Iterable[Match]) -> pd.DataFrame:
    """
    One row per (team, match) with:
      - 'venue' ('home'/'away') and 'opponent'
      - 'outcome' letter and 'points' earned
      - 'match_no' (1-based per team) and running 'cum_points'
    """
    matches = list(matches)
    for m in matches:
        check_match(m)

    rows = []
    for order, m in enumerate(matches):
        for team, opponent, venue in ((m.home_team, m.away_team, "home"), (m.away_team, m.home_team, "away")):
            outcome = m.outcome_for(team)
            rows.append({
                "team": team,
                "date": pd.Timestamp(m.date),
                "order": order,
                "opponent": opponent,
                "venue": venue,
                "outcome": outcome.value,
                "points": outcome.points,
            })
    if not rows:
        return pd.DataFrame(columns=PROGRESSION_COLUMNS)

    df = pd.DataFrame(rows)
    df = df.sort_values(by=["team", "date", "order"], kind="mergesort").reset_index(drop=True)
    df["match_no"] = df.groupby("team").cumcount() + 1
    df["cum_points"] = df.groupby("team")["points"].cumsum().astype(np.int64)
    return df[PROGRESSION_COLUMNS]
