import os
import sys
from datetime import date

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from models.match_model import Match  # noqa: E402


def make_match(day, home, away, hs, as_, ht_h=0, ht_a=0) -> Match:
    return Match(
        date=date(2024, 1, day),
        home_team=home,
        away_team=away,
        home_score=hs,
        away_score=as_,
        ht_home_score=ht_h,
        ht_away_score=ht_a,
    )


@pytest.fixture
def two_matches():
    """Team A 3-1 Team B, then Team B 2-2 Team A."""
    return [
        make_match(1, "Team A", "Team B", 3, 1, 2, 0),
        make_match(2, "Team B", "Team A", 2, 2, 1, 1),
    ]


@pytest.fixture
def season():
    return [
        make_match(3, "Rovers", "United", 2, 0),
        make_match(1, "City", "Rovers", 1, 1),
        make_match(1, "United", "Athletic", 0, 3),
        make_match(2, "Athletic", "City", 2, 2),
        make_match(4, "City", "United", 4, 1),
        make_match(4, "Athletic", "Rovers", 0, 1),
        make_match(5, "United", "City", 1, 1),
        make_match(6, "Rovers", "Athletic", 2, 2),
    ]
