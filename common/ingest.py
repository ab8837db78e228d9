"""
Ingestion boundary: decoded rows (dicts / DataFrame rows) -> strict `Match`.

Uploaded files are decoded by pandas; this module decides which rows are
real matches. A row is kept only if `date`, `home_team` and `away_team` are
present and all four score columns hold non-negative whole numbers. Anything
else is rejected and reported, so the calculators only ever see clean
`Match` objects.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Tuple

import pandas as pd

from common.constants import REQUIRED_COLUMNS, SCORE_COLUMNS
from common.exceptions import InvalidMatchRecord
from common.utils import coerce_score, is_blank
from models.match_model import Match

logger = logging.getLogger(__name__)

MATCH_COLUMNS = ["date", "home_team", "away_team", "home_score", "away_score",
                 "ht_home_score", "ht_away_score"]


@dataclass(frozen=True)
class IngestReport:
    matches: Tuple[Match, ...] = ()
    rejected: Tuple[Tuple[int, str], ...] = field(default_factory=tuple)   # (row index, reason)

    @property
    def ok(self) -> bool:
        return bool(self.matches)


def parse_match_record(row: Mapping[str, Any]) -> Match:
    missing = [c for c in ("date", "home_team", "away_team") if is_blank(row.get(c))]
    if missing:
        raise InvalidMatchRecord(f"missing {', '.join(missing)}", dict(row))

    ts = pd.to_datetime(row.get("date"), errors="coerce")
    if pd.isna(ts):
        raise InvalidMatchRecord(f"unreadable date {row.get('date')!r}", dict(row))

    scores: Dict[str, int] = {}
    for col in SCORE_COLUMNS:
        val = coerce_score(row.get(col))
        if val is None:
            raise InvalidMatchRecord(f"{col} is not a non-negative whole number: {row.get(col)!r}", dict(row))
        scores[col] = val

    home, away = str(row["home_team"]).strip(), str(row["away_team"]).strip()
    if home == away:
        raise InvalidMatchRecord("home_team and away_team are the same", dict(row))
    return Match(date=ts.date(), home_team=home, away_team=away, **scores)


def records_to_matches(records: Iterable[Mapping[str, Any]]) -> IngestReport:
    matches: List[Match] = []
    rejected: List[Tuple[int, str]] = []
    for i, row in enumerate(records):
        try:
            matches.append(parse_match_record(row))
        except InvalidMatchRecord as exc:
            logger.warning("rejected row %d: %s", i, exc.reason)
            rejected.append((i, exc.reason))
    logger.info("ingested %d matches, rejected %d rows", len(matches), len(rejected))
    return IngestReport(matches=tuple(matches), rejected=tuple(rejected))


def normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Lower-case, trim and snake_case the headers ('Home Team' -> 'home_team')."""
    df = df.copy()
    df.columns = [str(c).strip().lower().replace(" ", "_") for c in df.columns]
    return df


def matches_from_frame(df: pd.DataFrame) -> IngestReport:
    if df is None or df.empty:
        return IngestReport()
    df = normalize_columns(df)
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        # every row fails the same way
        reason = f"missing columns: {', '.join(missing)}"
        logger.warning("upload %s", reason)
        return IngestReport(rejected=tuple((i, reason) for i in range(len(df))))
    return records_to_matches(df.to_dict("records"))


def matches_to_frame(matches: Iterable[Match]) -> pd.DataFrame:
    """Matches tab view: one row per match plus score strings and the H/D/A result."""
    rows = []
    for m in matches:
        rows.append({
            "date": m.date,
            "home_team": m.home_team,
            "away_team": m.away_team,
            "home_score": m.home_score,
            "away_score": m.away_score,
            "ht_home_score": m.ht_home_score,
            "ht_away_score": m.ht_away_score,
            "score": f"{m.home_score} - {m.away_score}",
            "half_time": f"{m.ht_home_score} - {m.ht_away_score}",
            "result": m.result,
        })
    if not rows:
        return pd.DataFrame(columns=MATCH_COLUMNS + ["score", "half_time", "result"])
    return pd.DataFrame(rows)
