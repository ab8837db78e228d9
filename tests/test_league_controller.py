import pytest

from controllers import league_controller as lc
from models.match_model import LeagueData


def test_new_state_uses_default_season() -> None:
    state = lc.new_state()
    assert state.saved.season == "2023-2024"
    assert not state.editing and not state.dirty


def test_edit_and_save() -> None:
    state = lc.new_state(LeagueData(name="Premier", season="2024"))
    state = lc.start_editing(state)
    assert state.editing and not state.dirty

    edited = lc.update_field(state, "name", "Championship")
    assert edited.dirty
    assert state.draft.name == "Premier"       # previous state untouched
    assert edited.saved.name == "Premier"

    saved = lc.save(edited)
    assert saved.saved.name == "Championship"
    assert not saved.editing and not saved.dirty


def test_reverting_a_field_clears_dirty() -> None:
    state = lc.start_editing(lc.new_state(LeagueData(name="Premier")))
    state = lc.update_field(state, "name", "Other")
    state = lc.update_field(state, "name", "Premier")
    assert not state.dirty


def test_cancel_discards_draft() -> None:
    state = lc.update_field(lc.new_state(LeagueData(name="Premier")), "country", "England")
    assert state.editing
    cancelled = lc.cancel(state)
    assert cancelled.saved == LeagueData(name="Premier")
    assert cancelled.draft == cancelled.saved
    assert not cancelled.editing


def test_unknown_field() -> None:
    with pytest.raises(ValueError):
        lc.update_field(lc.new_state(), "owner", "x")
