"""Command-line interface for the RSVP reader.

WHY: The reader is a terminal tool; the CLI wires text acquisition,
tokenization, the terminal session and the reader loop behind one
command: ``rsvp [FILE] [--wpm N] [--focus]``.

HOW: Uses argparse for arguments, configures logging from config,
acquires text (file -> clipboard -> stdin), splits it into words and,
if there is anything to read, runs the reader loop inside a
TerminalSession. Diagnostics go to stderr.

RULES:
- Optional positional argument: the file to read
- --wpm defaults to RSVP_DEFAULT_WPM (250); values below 25 are clamped
- --focus enables ORP highlighting
- Empty text prints a diagnostic and returns 0 without touching the
  terminal mode
- Normal quit returns 0; read and terminal errors propagate
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console

from rsvp_reader import __version__
from rsvp_reader.config import (
    DEFAULT_WPM,
    EMPTY_TEXT_MESSAGE,
    LOG_FILE,
    LOG_LEVEL,
    MIN_RATE,
    PAUSED_POLL_MS,
)
from rsvp_reader.core.words import split_words
from rsvp_reader.reader import run
from rsvp_reader.render import Renderer
from rsvp_reader.source import acquire_text
from rsvp_reader.terminal import TerminalSession

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = LOG_LEVEL, log_file: Optional[str] = LOG_FILE) -> None:
    """Configure the root logger.

    WHY: The reader owns the whole screen while running, so log lines on
    stderr would be drawn over the word. A log file keeps them readable.

    RULES:
    - log_file set: records go to that file (appended)
    - otherwise: records go to stderr
    - Unknown level names fall back to WARNING
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING
    if log_file:
        logging.basicConfig(level=numeric_level, format=LOG_FORMAT, filename=log_file)
    else:
        logging.basicConfig(level=numeric_level, format=LOG_FORMAT, stream=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable; tests can inspect parsed defaults without running a session.
    """
    parser = argparse.ArgumentParser(
        prog="rsvp",
        description="Speed-read text in the terminal, one word at a time. "
                    "Reads FILE, or the clipboard, or standard input.",
    )

    parser.add_argument(
        "file",
        nargs="?",
        default=None,
        help="Text file to read. Without it the clipboard is used, "
             "then standard input.",
    )

    parser.add_argument(
        "-w", "--wpm",
        type=int,
        default=DEFAULT_WPM,
        help="Initial reading rate in words per minute (default: %(default)s).",
    )

    parser.add_argument(
        "-f", "--focus",
        action="store_true",
        help="Highlight the optimal recognition point of each word.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    return parser


def _clamp_rate(wpm: int) -> int:
    if wpm < MIN_RATE:
        logger.warning("--wpm %d is below the minimum; using %d", wpm, MIN_RATE)
        return MIN_RATE
    return wpm


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``rsvp`` command and ``python -m rsvp_reader``.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    - Returns the process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging()

    text = acquire_text(args.file)
    words = split_words(text)
    if not words:
        print(EMPTY_TEXT_MESSAGE, file=sys.stderr)
        return 0

    rate = _clamp_rate(args.wpm)
    console = Console(highlight=False)
    with TerminalSession(console) as session:
        run(
            words,
            session,
            Renderer(console),
            rate=rate,
            focus=args.focus,
            poll_ms=PAUSED_POLL_MS,
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
