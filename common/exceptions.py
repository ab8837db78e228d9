"""
Domain errors raised by the calculators and the ingestion boundary.

Pages catch `LeagueDataError` and show a friendly `st.error` message instead
of a traceback.
"""

from __future__ import annotations
from typing import Any, Optional


class LeagueDataError(Exception):
    """Base class for league data problems."""


class InvalidScore(LeagueDataError):
    def __init__(self, field: str, value: Any, match: Optional[object] = None) -> None:
        self.field = field
        self.value = value
        self.match = match
        super().__init__(f"invalid {field}: {value!r} (expected a non-negative integer)")


class InvalidMatchRecord(LeagueDataError):
    def __init__(self, reason: str, row: Optional[dict] = None) -> None:
        self.reason = reason
        self.row = row
        super().__init__(reason)


class NoValidMatches(LeagueDataError):
    def __init__(self, rejected: int = 0) -> None:
        self.rejected = rejected
        super().__init__(
            "No valid matches found in the CSV file. Please check the format and try again."
        )


class InvalidFixture(LeagueDataError):
    def __init__(self, team: str, match: Optional[object] = None) -> None:
        self.team = team
        self.match = match
        super().__init__(f"{team!r} cannot play itself")
