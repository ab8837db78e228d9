from typing import Iterable

import pandas as pd

from common.constants import FORM_WINDOW
from common.form import form_entries
from common.metrics import form_string
from common.standings import calculate_standings
from models.match_model import Match

STANDINGS_COLUMNS = ["Pos", "Team", "P", "W", "D", "L", "GF", "GA", "GD", "Pts", "Form"]
FORM_COLUMNS = ["Team", "Form", "Last", "FormPts", "P"]


def standings_table(matches: Iterable[Match], window: int = FORM_WINDOW) -> pd.DataFrame:
    matches = list(matches)
    rows = calculate_standings(matches)
    if not rows:
        return pd.DataFrame(columns=STANDINGS_COLUMNS)

    forms = {e.team: e for e in form_entries(matches)}
    table = pd.DataFrame([
        {
            "Pos": pos,
            "Team": r.team,
            "P": r.played,
            "W": r.won,
            "D": r.drawn,
            "L": r.lost,
            "GF": r.goals_for,
            "GA": r.goals_against,
            "GD": r.goal_difference,
            "Pts": r.points,
            "Form": form_string(forms[r.team].sequence, window),
        }
        for pos, r in enumerate(rows, start=1)
    ])
    return table[STANDINGS_COLUMNS]


def form_table(matches: Iterable[Match], window: int = FORM_WINDOW) -> pd.DataFrame:
    """
    Full form per team in standings order, plus the last-`window` slice and
    the points that slice is worth.
    """
    matches = list(matches)
    order = [r.team for r in calculate_standings(matches)]
    entries = form_entries(matches, teams=order)
    if not entries:
        return pd.DataFrame(columns=FORM_COLUMNS)

    return pd.DataFrame([
        {
            "Team": e.team,
            "Form": form_string(e.sequence, len(e.sequence)),
            "Last": form_string(e.sequence, window),
            "FormPts": sum(o.points for o in e.last(window)),
            "P": len(e.sequence),
        }
        for e in entries
    ])[FORM_COLUMNS]
