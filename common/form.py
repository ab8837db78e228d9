"""
Per-team form: the ordered list of Win/Draw/Loss outcomes for every team.

Each match is placed in both teams' lists. Lists are ordered by match date
(oldest first); matches on the same date keep their input order because
`sorted` is stable. The UI decides how many results to show.
"""

from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Optional, Sequence

from common.utils import check_match
from models.match_model import FormEntry, Match, Outcome

logger = logging.getLogger(__name__)


def calculate_team_forms(matches: Iterable[Match], newest_first: bool = False) -> Dict[str, List[Outcome]]:
    matches = list(matches)
    for m in matches:
        check_match(m)

    by_team: Dict[str, List[Match]] = {}
    for m in matches:
        by_team.setdefault(m.home_team, []).append(m)
        by_team.setdefault(m.away_team, []).append(m)

    forms: Dict[str, List[Outcome]] = {}
    for team, played in by_team.items():
        ordered = sorted(played, key=lambda m: m.date)
        seq = [m.outcome_for(team) for m in ordered]
        if newest_first:
            seq.reverse()
        forms[team] = seq
    logger.debug("form computed for %d teams", len(forms))
    return forms


def form_entries(
    matches: Iterable[Match],
    teams: Optional[Sequence[str]] = None,
    newest_first: bool = False,
) -> List[FormEntry]:
    """
    Wrap `calculate_team_forms` into `FormEntry` objects.
    When `teams` is given (e.g. the standings order) entries follow it and
    teams without matches are skipped; otherwise first-appearance order is used.
    """
    forms = calculate_team_forms(matches, newest_first=newest_first)
    order = list(teams) if teams is not None else list(forms)
    return [FormEntry(team=t, sequence=tuple(forms[t])) for t in order if t in forms]
