# core/config.py

"""
Policy constants and environment-driven settings for the grade roster.

The grading policy (pass threshold, rounding, score bounds) lives here as named values
so it can be audited and exercised in isolation from the rest of the program.
"""

import logging
import os

# === grading policy ===

PASSING_AVERAGE = 6.0
AVERAGE_DECIMALS = 1
MIN_SCORE = 0.0
MAX_SCORE = 10.0

# === persistence ===

STORAGE_KEY = "alunosData"
STORAGE_DIR_ENV = "GRADE_ROSTER_DIR"
DEFAULT_STORAGE_DIR = os.path.join(os.path.expanduser("~"), ".grade_roster")

# === notifications (seconds) ===

NOTIFY_DISPLAY_SECONDS = 3.0
NOTIFY_FADE_SECONDS = 0.5

# === logging ===

LOG_LEVEL_ENV = "GRADE_ROSTER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def get_storage_dir() -> str:
    """
    Resolves the directory used by the file-backed storage.

    Returns:
        The expanded, absolute value of `GRADE_ROSTER_DIR` if set and non-blank,
        otherwise `~/.grade_roster`.
    """
    dir_path = os.environ.get(STORAGE_DIR_ENV, "").strip()

    if not dir_path:
        return DEFAULT_STORAGE_DIR

    return os.path.abspath(os.path.expanduser(dir_path))


def get_log_level() -> int:
    level_name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(level_name)

    # getLevelName() returns a "Level X" string for unknown names
    return level if isinstance(level, int) else logging.WARNING
