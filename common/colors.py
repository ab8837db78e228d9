# common/colors.py
from __future__ import annotations
from typing import Dict, Iterable, Tuple
import colorsys
import zlib

from common.constants import OUTCOME_COLORS


# -------------------- Simple color math --------------------
def _hex_to_rgb(hexs: str) -> Tuple[float, float, float]:
    h = hexs.strip().lstrip("#")
    return int(h[0:2], 16) / 255.0, int(h[2:4], 16) / 255.0, int(h[4:6], 16) / 255.0


def _rgb_to_hex(r: float, g: float, b: float) -> str:
    return "#{:02X}{:02X}{:02X}".format(int(r * 255), int(g * 255), int(b * 255))


def _lighten_or_darken(hexs: str, factor: float = 0.15) -> str:
    """Positive factor lightens, negative darkens."""
    r, g, b = _hex_to_rgb(hexs)
    if factor >= 0:
        r += (1 - r) * factor; g += (1 - g) * factor; b += (1 - b) * factor
    else:
        r *= (1 + factor); g *= (1 + factor); b *= (1 + factor)
    return _rgb_to_hex(r, g, b)


def is_light_color(hexs: str, thr: float = 0.90) -> bool:
    """Perceived luminance threshold (Y) to decide if we need an outline."""
    r, g, b = _hex_to_rgb(hexs)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b >= thr


# -------------------- Public API --------------------
def team_color(team: str) -> str:
    """Deterministic color per team name (crc32, stable across reruns unlike hash())."""
    h = (zlib.crc32((team or "").encode("utf-8")) % 360) / 360.0
    r, g, b = colorsys.hsv_to_rgb(h, 0.65, 0.95)
    return _rgb_to_hex(r, g, b)


def team_palette(teams: Iterable[str]) -> Dict[str, str]:
    """{team: hex}; a team whose color collides with an earlier one is darkened."""
    palette: Dict[str, str] = {}
    for t in dict.fromkeys(teams):
        c = team_color(t)
        if c in palette.values():
            c = _lighten_or_darken(c, -0.25)
        palette[t] = c
    return palette


def outcome_color(letter: str) -> str:
    return OUTCOME_COLORS.get(letter, "#777777")
