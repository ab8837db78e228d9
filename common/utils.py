"""
Common helpers shared by the ingestion boundary and the calculators.

Score checks live here so the standings and form calculators reject bad
input the same way: a score must be a real integer (bools are not), and it
must not be negative.
"""

# Import libraries
from __future__ import annotations
import numbers
from typing import Any, Optional

import numpy as np
import pandas as pd

from common.constants import SCORE_COLUMNS
from common.exceptions import InvalidFixture, InvalidScore


def is_blank(val: Any) -> bool:
    if val is None:
        return True
    if isinstance(val, str):
        return not val.strip()
    try:
        return bool(pd.isna(val))
    except (TypeError, ValueError):
        return False


def coerce_score(val: Any) -> Optional[int]:
    """
    Turn a decoded cell into a score, or None if it is not one.
    Accepts 2, '2', ' 2 ', 2.0, '2.0'. Rejects blanks, text, negatives and fractions.
    """
    if is_blank(val) or isinstance(val, (bool, np.bool_)):
        return None
    if isinstance(val, str):
        val = val.strip()
    num = pd.to_numeric(val, errors="coerce")
    if pd.isna(num):
        return None
    num = float(num)
    if not num.is_integer() or num < 0:
        return None
    return int(num)


def check_score(value: Any, field: str, match: Optional[object] = None) -> int:
    # np.int64 counts as Integral; bool subclasses int and is excluded
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral):
        raise InvalidScore(field, value, match)
    if value < 0:
        raise InvalidScore(field, value, match)
    return int(value)


def check_match_scores(match) -> None:
    """Raise `InvalidScore` unless all four score fields of `match` are valid."""
    for field in SCORE_COLUMNS:
        check_score(getattr(match, field), field, match)


def check_match(match) -> None:
    """Scores as in `check_match_scores`, plus two distinct teams."""
    check_match_scores(match)
    if match.home_team == match.away_team:
        raise InvalidFixture(match.home_team, match)
