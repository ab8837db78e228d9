import pytest

from conftest import make_match
from common.exceptions import InvalidFixture, InvalidScore
from common.form import calculate_team_forms, form_entries
from models.match_model import FormEntry, Outcome

W, D, L = Outcome.WIN, Outcome.DRAW, Outcome.LOSS


def test_two_match_example(two_matches) -> None:
    forms = calculate_team_forms(two_matches)
    assert forms == {"Team A": [W, D], "Team B": [L, D]}


def test_empty_input() -> None:
    assert calculate_team_forms([]) == {}
    assert form_entries([]) == []


def test_orders_by_date(season) -> None:
    forms = calculate_team_forms(season)
    assert forms["Rovers"] == [D, W, W, D]
    assert forms["City"] == [D, D, W, D]
    assert forms["Athletic"] == [W, D, L, D]
    assert forms["United"] == [L, L, L, D]


def test_first_appearance_key_order(season) -> None:
    assert list(calculate_team_forms(season)) == ["Rovers", "United", "City", "Athletic"]


def test_form_length_matches_games_played(season) -> None:
    forms = calculate_team_forms(season)
    for team, seq in forms.items():
        assert len(seq) == sum(1 for m in season if m.involves(team))


def test_same_date_keeps_input_order() -> None:
    first = make_match(1, "A", "B", 1, 0)
    second = make_match(1, "C", "A", 2, 0)
    assert calculate_team_forms([first, second])["A"] == [W, L]
    assert calculate_team_forms([second, first])["A"] == [L, W]


def test_newest_first(season) -> None:
    assert calculate_team_forms(season, newest_first=True)["Rovers"] == [D, W, W, D][::-1]
    assert calculate_team_forms(season, newest_first=True)["United"] == [D, L, L, L]


def test_deterministic(season) -> None:
    assert calculate_team_forms(season) == calculate_team_forms(season)


def test_form_entries_follow_given_order(season) -> None:
    entries = form_entries(season, teams=["United", "Nobody", "Rovers"])
    assert [e.team for e in entries] == ["United", "Rovers"]
    assert entries[1] == FormEntry(team="Rovers", sequence=(D, W, W, D))
    assert entries[1].last(2) == (W, D)
    assert entries[1].points == 8


def test_rejects_invalid_score() -> None:
    with pytest.raises(InvalidScore):
        calculate_team_forms([make_match(1, "A", "B", "3", 1)])


def test_outcome_for_unknown_team() -> None:
    with pytest.raises(ValueError):
        make_match(1, "A", "B", 1, 0).outcome_for("C")


def test_rejects_team_playing_itself() -> None:
    with pytest.raises(InvalidFixture):
        calculate_team_forms([make_match(1, "A", "A", 2, 1)])
