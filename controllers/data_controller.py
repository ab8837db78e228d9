"""
Data controller helpers that glue CSV uploads to the Streamlit pages.

This module exposes three convenience functions used by pages:
    - `load_matches_csv(file)` decodes an uploaded CSV with pandas and returns
        an `IngestReport` with the valid matches and the rejected rows.
    - `sync_upload(session, uploaded)` reloads the session matches whenever the
        uploader holds a new file, and clears them when it is emptied.
    - `matches_view(matches)` returns the DataFrame shown in the Matches tab.

Row validation is implemented in `common.ingest`. This module adds the
file-level step: decoding, and turning "nothing usable" into an error the
page can show.
"""

import logging
from typing import IO, Iterable, MutableMapping, Optional, Union

import pandas as pd

from common.exceptions import LeagueDataError, NoValidMatches
from common.ingest import IngestReport, matches_from_frame, matches_to_frame
from models.match_model import Match

logger = logging.getLogger(__name__)


def load_matches_csv(file: Union[str, IO]) -> IngestReport:
    # 1) Decode with pandas; keep every cell as text so validation sees what was uploaded.
    try:
        df = pd.read_csv(file, dtype=str, skip_blank_lines=True)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
        logger.error("Error parsing CSV: %s", exc)
        raise LeagueDataError("Failed to parse CSV file. Please check the format and try again.") from exc

    # 2) Validate rows into Match records.
    report = matches_from_frame(df)
    if not report.ok:
        raise NoValidMatches(rejected=len(report.rejected))
    return report


def sync_upload(session: MutableMapping, uploaded) -> Optional[IngestReport]:
    """
    Keep `session["matches"]` in step with the file uploader.
    Returns the new report when a fresh upload was ingested, otherwise None.
    Clearing the uploader, or a failed upload, drops the previous matches.
    """
    if uploaded is None:
        session.pop("matches", None)
        session.pop("matches_token", None)
        return None
    # file_id changes on every upload, even for an identical file name and size
    if session.get("matches_token") == uploaded.file_id:
        return None
    session.pop("matches", None)
    session.pop("matches_token", None)
    report = load_matches_csv(uploaded)
    session["matches"] = report.matches
    session["matches_token"] = uploaded.file_id
    return report


def matches_view(matches: Iterable[Match]) -> pd.DataFrame:
    df = matches_to_frame(matches)
    return df[["date", "home_team", "score", "away_team", "half_time", "result"]]
