import numpy as np
import pytest

from conftest import make_match
from common.exceptions import InvalidFixture, InvalidScore
from common.standings import calculate_standings, ranking_key
from models.match_model import Match


def test_two_match_example(two_matches) -> None:
    a, b = calculate_standings(two_matches)
    assert a.to_dict() == {
        "team": "Team A", "played": 2, "won": 1, "drawn": 1, "lost": 0,
        "goals_for": 5, "goals_against": 3, "goal_difference": 2, "points": 4,
    }
    assert b.to_dict() == {
        "team": "Team B", "played": 2, "won": 0, "drawn": 1, "lost": 1,
        "goals_for": 3, "goals_against": 5, "goal_difference": -2, "points": 1,
    }


def test_empty_input_gives_empty_table() -> None:
    assert calculate_standings([]) == []


def test_season_table(season) -> None:
    rows = calculate_standings(season)
    assert [r.team for r in rows] == ["Rovers", "City", "Athletic", "United"]
    by_team = {r.team: r for r in rows}
    assert (by_team["Rovers"].won, by_team["Rovers"].drawn, by_team["Rovers"].points) == (2, 2, 8)
    assert (by_team["City"].goals_for, by_team["City"].goals_against) == (8, 5)
    assert by_team["Athletic"].lost == 1
    assert by_team["United"].goal_difference == -8


def test_row_laws(season) -> None:
    for r in calculate_standings(season):
        assert r.points == 3 * r.won + r.drawn
        assert r.played == r.won + r.drawn + r.lost
        assert r.goal_difference == r.goals_for - r.goals_against


def test_conservation(season) -> None:
    rows = calculate_standings(season)
    assert sum(r.won for r in rows) == sum(r.lost for r in rows)
    assert sum(r.drawn for r in rows) % 2 == 0
    assert sum(r.played for r in rows) == 2 * len(season)
    assert sum(r.goals_for for r in rows) == sum(r.goals_against for r in rows)


def test_deterministic(season) -> None:
    assert calculate_standings(season) == calculate_standings(season)
    assert calculate_standings(season) == calculate_standings(list(reversed(season)))


def test_ranking_is_total_order(season) -> None:
    rows = calculate_standings(season)
    keys = [ranking_key(r) for r in rows]
    assert keys == sorted(keys)
    assert len(set(keys)) == len(keys)


def test_goal_difference_breaks_points_tie() -> None:
    rows = calculate_standings([
        make_match(1, "A", "X", 3, 0),
        make_match(1, "B", "Y", 1, 0),
    ])
    assert [r.team for r in rows] == ["A", "B", "Y", "X"]


def test_goals_for_breaks_goal_difference_tie() -> None:
    rows = calculate_standings([
        make_match(1, "A", "X", 1, 0),
        make_match(1, "B", "Y", 3, 2),
    ])
    assert [r.team for r in rows] == ["B", "A", "Y", "X"]


def test_team_name_breaks_full_tie() -> None:
    rows = calculate_standings([make_match(1, "Zeta", "Alpha", 1, 1)])
    assert [r.team for r in rows] == ["Alpha", "Zeta"]


def test_only_teams_with_matches_appear() -> None:
    rows = calculate_standings([make_match(1, "A", "B", 0, 0)])
    assert {r.team for r in rows} == {"A", "B"}


def test_accepts_numpy_integers() -> None:
    m = Match(date=make_match(1, "A", "B", 0, 0).date, home_team="A", away_team="B",
              home_score=np.int64(2), away_score=np.int64(1))
    (a, b) = calculate_standings([m])
    assert a.team == "A" and a.points == 3 and b.lost == 1


@pytest.mark.parametrize(
    "bad",
    ["2", -1, 1.5, True, None],
    ids=["string", "negative", "fraction", "bool", "none"],
)
def test_rejects_invalid_scores(bad) -> None:
    good = make_match(1, "A", "B", 1, 0)
    broken = make_match(2, "B", "A", bad, 0)
    with pytest.raises(InvalidScore) as exc:
        calculate_standings([good, broken])
    assert exc.value.field == "home_score"
    assert exc.value.value == bad


def test_rejects_invalid_half_time_score() -> None:
    with pytest.raises(InvalidScore) as exc:
        calculate_standings([make_match(1, "A", "B", 1, 0, ht_a=-3)])
    assert exc.value.field == "ht_away_score"


def test_rejects_team_playing_itself() -> None:
    with pytest.raises(InvalidFixture) as exc:
        calculate_standings([make_match(1, "A", "B", 1, 0), make_match(2, "A", "A", 2, 1)])
    assert exc.value.team == "A"
