import logging
import os

logger = logging.getLogger(__name__)


def env_int(name: str, default: int, minimum: int = 1) -> int:
    """Integer setting from the environment; bad or too-small values fall back to `default`."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        val = int(raw)
    except ValueError:
        logger.warning("%s=%r is not an integer, using %d", name, raw, default)
        return default
    if val < minimum:
        logger.warning("%s=%d is below %d, using %d", name, val, minimum, default)
        return default
    return val


def env_log_level(name: str, default: str = "INFO") -> str:
    """Logging level name from the environment; unknown names fall back to `default`."""
    raw = os.getenv(name, default).strip().upper()
    if isinstance(logging.getLevelName(raw), int):
        return raw
    logger.warning("%s=%r is not a logging level, using %s", name, raw, default)
    return default


APP_TITLE      = "Soccer Championship Analysis"
APP_SUBTITLE   = "Professional Soccer Statistics & Analysis"
DEFAULT_SEASON = os.getenv("SLD_DEFAULT_SEASON", "2023-2024")
FORM_WINDOW    = env_int("SLD_FORM_WINDOW", 5)
LOG_LEVEL      = env_log_level("SLD_LOG_LEVEL", "INFO")

POINTS_WIN  = 3
POINTS_DRAW = 1
POINTS_LOSS = 0

SCORE_COLUMNS    = ["home_score", "away_score", "ht_home_score", "ht_away_score"]
REQUIRED_COLUMNS = ["date", "home_team", "away_team"] + SCORE_COLUMNS

OUTCOME_COLORS = {"W": "#22C55E", "D": "#9CA3AF", "L": "#EF4444"}
