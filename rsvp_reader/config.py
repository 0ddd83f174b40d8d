"""Configuration constants and .env loading.

WHY: Centralizes every tunable value so it is easy to find, update, and
override. Pacing limits, the paused poll interval, the focus style, and
logging destinations are plain data, not buried in logic.

HOW: python-dotenv loads the .env file on import. Constants are defined
at module level; overridable ones are read from the environment through
load_int_setting(), which fails loudly on malformed values.

RULES:
- MIN_RATE and RATE_STEP are fixed (25 WPM); they are not overridable
- RSVP_DEFAULT_WPM sets the initial rate when --wpm is not given
- RSVP_PAUSED_POLL_MS bounds input latency while paused
- RSVP_LOG_FILE, when set, receives all log records instead of stderr
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the working directory (where the reader is launched)
load_dotenv()

# ---------------------------------------------------------------------------
# Pacing
# ---------------------------------------------------------------------------

MS_PER_MINUTE = 60_000
"""Milliseconds in one minute; interval = MS_PER_MINUTE // rate."""

MIN_RATE = 25
"""Lowest allowed reading rate in words per minute."""

RATE_STEP = 25
"""WPM change per increase/decrease key press."""


def load_int_setting(name: str, default: int) -> int:
    """Read an integer setting from the environment.

    WHY: A typo in .env (``RSVP_DEFAULT_WPM=fast``) should stop the
    program with a clear message, not surface later as a TypeError.

    RULES:
    - Missing or blank variables return the default
    - Non-integer values raise ValueError naming the variable
    """
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(
            "{} must be an integer, got {!r}. "
            "Fix the value in the environment or the .env file.".format(name, raw)
        ) from None


DEFAULT_WPM = load_int_setting("RSVP_DEFAULT_WPM", 250)
PAUSED_POLL_MS = load_int_setting("RSVP_PAUSED_POLL_MS", 100)

# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------

FOCUS_STYLE = os.getenv("RSVP_FOCUS_STYLE", "bold red")
"""rich style applied to the ORP character and its marker."""

FINISHED_TEXT = "Finished!"
HELP_TEXT = "[Space] Toggle [u/d] WPM [n/p] Prev/Next [q] Quit"

EMPTY_TEXT_MESSAGE = (
    "No text to display. Please provide a file, text in clipboard, "
    "or pipe text into the program."
)

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_LEVEL = os.getenv("RSVP_LOG_LEVEL", "WARNING").upper()
LOG_FILE = os.getenv("RSVP_LOG_FILE", "").strip() or None
