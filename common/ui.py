# common/ui.py
from __future__ import annotations
from pathlib import Path
import streamlit as st

from common.constants import APP_SUBTITLE, APP_TITLE
from models.match_model import LeagueData

# Project root = .../soccer_league_dashboard
APP_ROOT = Path(__file__).resolve().parents[1]


def _link_if_exists(rel_path: str, label: str, icon: str = "📄"):
    """Safely add a page link if the target file exists."""
    target = (APP_ROOT / rel_path)
    if target.exists():
        # Streamlit expects an app-relative path with forward slashes
        st.sidebar.page_link(rel_path.replace("\\", "/"), label=label, icon=icon)


def safe_rerun() -> None:
    if hasattr(st, "rerun"): st.rerun()
    elif hasattr(st, "experimental_rerun"): st.experimental_rerun()
    else: st.stop()


def page_header(season: str):
    st.title(f"🏆 {APP_TITLE}")
    st.caption(f"{APP_SUBTITLE}  |  **Season:** {season}")


def sidebar_header(league: LeagueData | None, show_custom_nav: bool = False):
    # Hide the built-in pages nav so only our custom links appear
    st.markdown(
        "<style>[data-testid='stSidebarNav']{display:none !important;}</style>",
        unsafe_allow_html=True,
    )
    with st.sidebar:
        st.markdown("**League:** " + ((league.name if league else "") or "—"))
        if league and league.season:
            st.caption(f"Season {league.season}")

        if show_custom_nav:
            st.divider()
            st.markdown("#### Pages")
            _link_if_exists("main.py", label="League", icon="🏠")
            _link_if_exists("pages/1_Statistics.py", label="Statistics", icon="📊")
