"""Text acquisition: file, then clipboard, then standard input.

WHY: The quickest way to speed-read something is to copy it and run
``rsvp``. Files and pipes are still supported for longer texts, so the
reader tries each source in a fixed order.

HOW: An explicit path always wins and read errors propagate. Without a
path, the clipboard is read through pyperclip; an unavailable or
whitespace-only clipboard falls through to reading all of stdin.

RULES:
- File read errors (missing, unreadable, bad encoding) are fatal
- Clipboard errors are logged and skipped, never fatal
- stdin is only read when both earlier sources produced nothing
- Files are decoded as UTF-8
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

import pyperclip

logger = logging.getLogger(__name__)


def read_file(path: str | Path) -> str:
    """Read the whole file as UTF-8 text."""
    return Path(path).read_text(encoding="utf-8")


def read_clipboard() -> Optional[str]:
    """Return clipboard text, or None if it is empty or unavailable."""
    try:
        text = pyperclip.paste()
    except pyperclip.PyperclipException as exc:
        logger.debug("Clipboard unavailable: %s", exc)
        return None
    if not text or not text.strip():
        return None
    return text


def acquire_text(path: Optional[str], stdin: Optional[TextIO] = None) -> str:
    """Return the text to read, following the file -> clipboard -> stdin chain.

    Args:
        path: Explicit file path from the command line, or None.
        stdin: Stream to fall back to; defaults to sys.stdin.

    Returns:
        The raw text. May be empty or whitespace-only; the caller decides
        how to report that.
    """
    if path is not None:
        logger.info("Reading text from %s", path)
        return read_file(path)

    text = read_clipboard()
    if text is not None:
        logger.info("Reading text from clipboard (%d chars)", len(text))
        return text

    stream = stdin if stdin is not None else sys.stdin
    logger.info("Reading text from standard input")
    return stream.read()
