"""
Main application entry for the Soccer League Dashboard Streamlit app.

This module defines the top-level Streamlit page that users see when they
open the app. It handles:
    - application configuration (`st.set_page_config`),
    - environment variable loading via `python-dotenv` and logging setup,
    - the league header and the league metadata edit form (state transitions
        live in `controllers.league_controller`),
    - CSV upload of match results (decoded and validated by
        `controllers.data_controller`),
    - the Matches / Standings / Form tabs, computed from the uploaded matches
        by `controllers.stats_controller`.

Session state:
    - `matches`: tuple of validated `Match` records; the calculators only ever
        receive this finalized collection.
    - `league_state`: the current `LeagueEditState`.
"""

# Import libraries
import logging

import streamlit as st
from dotenv import load_dotenv

# Load `.env` before reading env-backed constants.
load_dotenv(override=False)

from common.constants import FORM_WINDOW, LOG_LEVEL
from common.exceptions import LeagueDataError
from common.ui import page_header, safe_rerun, sidebar_header
from controllers import league_controller as lc
from controllers.data_controller import matches_view, sync_upload
from controllers.stats_controller import form_table, standings_table

st.set_page_config(page_title="Soccer League — Home", layout="wide")
logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)


def _league_editor(state: lc.LeagueEditState) -> lc.LeagueEditState:
    """Render the league info block and return the (possibly new) state."""
    col_info, col_btn = st.columns([4, 1])
    with col_btn:
        if not state.editing and st.button("✏️ Edit League", key="edit_league"):
            return lc.start_editing(state)

    if not state.editing:
        with col_info:
            league = state.saved
            st.subheader(league.name or "Unnamed league")
            st.caption(" | ".join(p for p in (league.country, league.season) if p))
            if league.description:
                st.write(league.description)
        return state

    with st.form("league_form", clear_on_submit=False):
        values = {
            "name": st.text_input("League name", value=state.draft.name),
            "country": st.text_input("Country", value=state.draft.country),
            "season": st.text_input("Season", value=state.draft.season),
            "description": st.text_area("Description", value=state.draft.description),
        }
        c1, c2 = st.columns(2)
        ok = c1.form_submit_button("💾 Save")
        dismiss = c2.form_submit_button("Cancel")

    if dismiss:
        return lc.cancel(state)
    if ok:
        for name, value in values.items():
            state = lc.update_field(state, name, value)
        return lc.save(state)
    return state


def _upload_block():
    uploaded = st.file_uploader("Upload matches (CSV)", type=["csv"], key="matches_csv")
    try:
        report = sync_upload(st.session_state, uploaded)
    except LeagueDataError as exc:
        st.error(str(exc))
        return
    if report is None:
        return
    msg = f"Loaded {len(report.matches)} matches."
    if report.rejected:
        st.warning(f"{msg} Skipped {len(report.rejected)} invalid rows.")
    else:
        st.success(msg)


def main():
    state = st.session_state.get("league_state") or lc.new_state()
    sidebar_header(league=state.saved, show_custom_nav=True)
    page_header(state.saved.season)

    new_state = _league_editor(state)
    if new_state is not state:
        st.session_state["league_state"] = new_state
        safe_rerun()
    st.session_state["league_state"] = state

    _upload_block()
    matches = st.session_state.get("matches", ())

    tab_matches, tab_standings, tab_form = st.tabs(["Matches", "Standings", "Form"])
    if not matches:
        for tab in (tab_matches, tab_standings, tab_form):
            tab.info("Upload a CSV with columns: date, home_team, away_team, "
                     "home_score, away_score, ht_home_score, ht_away_score.")
        return

    try:
        standings = standings_table(matches, window=FORM_WINDOW)
        forms = form_table(matches, window=FORM_WINDOW)
    except LeagueDataError as exc:
        logger.exception("could not compute league tables")
        st.error(f"Could not compute the league tables: {exc}")
        return

    with tab_matches:
        st.dataframe(matches_view(matches), use_container_width=True, hide_index=True)
    with tab_standings:
        st.dataframe(standings, use_container_width=True, hide_index=True)
    with tab_form:
        st.caption(f"Last {FORM_WINDOW} results, oldest first.")
        st.dataframe(forms, use_container_width=True, hide_index=True)


if __name__ == "__main__":
    main()
