# common/plots.py
from __future__ import annotations
from typing import Dict, List, Optional

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from matplotlib.patches import Patch, Rectangle
import matplotlib.patheffects as pe

from common.colors import is_light_color, outcome_color, team_palette
from common.constants import FORM_WINDOW
from common.metrics import form_string
from models.match_model import FormEntry

DEFAULT_FIGSIZE = (6.6, 2.6)  # compact; tweak if you want even smaller


def _new_ax(ax=None, figsize=DEFAULT_FIGSIZE):
    """Return a compact figure/axes when ax is None; otherwise reuse the axes."""
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize, constrained_layout=True)
    else:
        fig = ax.figure
    return fig, ax


def _outline_line_if_light(line_obj, hexs: str):
    """Give a black stroke outline to very light lines so they’re visible."""
    if is_light_color(hexs):
        lw = line_obj.get_linewidth()
        line_obj.set_path_effects([pe.Stroke(linewidth=lw + 1.5, foreground="black"), pe.Normal()])


# --- Points race (cumulative points per match played) ----------------
def plot_points_progression(progression: pd.DataFrame,
                            teams: Optional[List[str]] = None,
                            colors_map: Optional[Dict[str, str]] = None,
                            ax: Optional[plt.Axes] = None,
                            show_legend: bool = True,
                            title: str = "") -> plt.Axes:
    fig, ax = _new_ax(ax)
    if teams is None:
        teams = list(dict.fromkeys(progression["team"]))
    colors = colors_map or team_palette(teams)

    for team in teams:
        tmp = progression[progression["team"] == team]
        if tmp.empty:
            continue
        # start every line at (0, 0) so teams with one match still draw a segment
        x = np.r_[0, tmp["match_no"].values]
        y = np.r_[0, tmp["cum_points"].values]
        col = colors.get(team, "#888888")
        line = ax.step(x, y, where="post", label=team, color=col, linewidth=1.5)[0]
        _outline_line_if_light(line, col)

    ax.set_xlabel("Matches played", fontsize=6); ax.set_ylabel("Points", fontsize=6)
    ax.tick_params(axis="both", labelsize=6)
    ax.set_title(title)
    if show_legend and teams:
        ax.legend(fontsize=5, ncol=2, frameon=False, loc="upper left")
    return ax


# --- Form strips (one row of W/D/L squares per team) ----------------
def plot_form_strips(entries: List[FormEntry],
                     window: int = FORM_WINDOW,
                     ax: Optional[plt.Axes] = None,
                     show_legend: bool = True,
                     title: str = "") -> plt.Axes:
    height = max(1.2, 0.28 * len(entries) + 0.6)
    fig, ax = _new_ax(ax, figsize=(DEFAULT_FIGSIZE[0], height))

    for row, entry in enumerate(entries):
        letters = form_string(entry.sequence, window)
        for col, letter in enumerate(letters):
            ax.add_patch(Rectangle((col, row), 0.9, 0.8, color=outcome_color(letter)))
            ax.text(col + 0.45, row + 0.4, letter, ha="center", va="center", fontsize=6, color="white")

    ax.set_xlim(-0.1, max(window, 1))
    ax.set_ylim(len(entries), -0.2)
    ax.set_yticks([r + 0.4 for r in range(len(entries))], [e.team for e in entries])
    ax.set_xticks([])
    ax.tick_params(axis="both", labelsize=6)
    for side in ("top", "right", "bottom", "left"):
        ax.spines[side].set_visible(False)
    ax.set_title(title)

    if show_legend:
        handles = [Patch(color=outcome_color(k), label=lab) for k, lab in (("W", "Win"), ("D", "Draw"), ("L", "Loss"))]
        ax.legend(handles=handles, fontsize=5, ncol=3, frameon=False, loc="lower right", bbox_to_anchor=(1.0, 1.0))
    return ax
