"""
League metadata editing as explicit state transitions.

The League view lets the user toggle an edit mode, change a few text fields
and save or discard the draft. Instead of mutating session keys one by one,
the page keeps a single immutable `LeagueEditState` in `st.session_state` and
replaces it with the value returned by these functions.

Key functions:
    - `new_state(league)`: a fresh, non-editing state.
    - `start_editing(state)`: open the form with a draft copy of the league.
    - `update_field(state, name, value)`: change one draft field.
    - `save(state)` / `cancel(state)`: commit or discard the draft.
"""

from __future__ import annotations
from dataclasses import dataclass, fields, replace

from common.constants import DEFAULT_SEASON
from models.match_model import LeagueData

EDITABLE_FIELDS = tuple(f.name for f in fields(LeagueData))


@dataclass(frozen=True)
class LeagueEditState:
    saved: LeagueData
    draft: LeagueData
    editing: bool = False
    dirty: bool = False


def new_state(league: LeagueData | None = None) -> LeagueEditState:
    league = league or LeagueData(season=DEFAULT_SEASON)
    return LeagueEditState(saved=league, draft=league)


def start_editing(state: LeagueEditState) -> LeagueEditState:
    if state.editing:
        return state
    return replace(state, draft=state.saved, editing=True, dirty=False)


def update_field(state: LeagueEditState, name: str, value: str) -> LeagueEditState:
    if name not in EDITABLE_FIELDS:
        raise ValueError(f"unknown league field: {name!r}")
    if not state.editing:
        state = start_editing(state)
    draft = replace(state.draft, **{name: value})
    return replace(state, draft=draft, dirty=draft != state.saved)


def save(state: LeagueEditState) -> LeagueEditState:
    """Commit the draft. Saving with no changes just leaves edit mode."""
    return LeagueEditState(saved=state.draft, draft=state.draft)


def cancel(state: LeagueEditState) -> LeagueEditState:
    return LeagueEditState(saved=state.saved, draft=state.saved)
