import streamlit as st
import matplotlib.pyplot as plt

from common.colors import team_palette
from common.constants import FORM_WINDOW
from common.exceptions import LeagueDataError
from common.form import form_entries
from common.metrics import build_points_progression
from common.plots import plot_form_strips, plot_points_progression
from common.standings import calculate_standings
from common.ui import sidebar_header

# ------------------------------------------------------------
# Page setup & consistent sidebar
# ------------------------------------------------------------
SMALL_FIGSIZE = (5.2, 2.0)  # <- compact size for all charts

st.set_page_config(page_title="Statistics", layout="wide")


def _ensure_matches_loaded():
    if not st.session_state.get("matches"):
        st.info("Go to **League** and upload a matches CSV first.")
        st.stop()


def main():
    league_state = st.session_state.get("league_state")
    sidebar_header(league=league_state.saved if league_state else None, show_custom_nav=True)
    _ensure_matches_loaded()

    matches = st.session_state["matches"]
    try:
        order = [r.team for r in calculate_standings(matches)]
        entries = form_entries(matches, teams=order)
        progression = build_points_progression(matches)
    except LeagueDataError as exc:
        st.error(f"Could not compute statistics: {exc}")
        st.stop()

    st.header("📊 League Statistics")
    window = st.slider("Form window (matches)", min_value=1, max_value=10, value=min(FORM_WINDOW, 10))
    selected = st.multiselect("Teams", options=order, default=order[:6])
    colors_map = team_palette(order)

    left, right = st.columns(2)
    with left:
        st.subheader("Points race")
        fig, ax = plt.subplots(figsize=SMALL_FIGSIZE, constrained_layout=True)
        plot_points_progression(progression, teams=selected or order, colors_map=colors_map, ax=ax)
        st.pyplot(fig, use_container_width=True)
        plt.close(fig)
    with right:
        st.subheader(f"Form — last {window}")
        shown = [e for e in entries if not selected or e.team in selected]
        fig, ax = plt.subplots(figsize=(SMALL_FIGSIZE[0], max(1.2, 0.28 * len(shown) + 0.6)), constrained_layout=True)
        plot_form_strips(shown, window=window, ax=ax)
        st.pyplot(fig, use_container_width=True)
        plt.close(fig)


if __name__ == "__main__":
    main()
