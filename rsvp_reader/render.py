"""Draw render snapshots on the terminal with rich.

WHY: The reader shows a single word pinned to the middle of the screen
plus a status line. rich gives styled text and cursor control without
hand-written ANSI escapes.

HOW: Each frame clears the screen, moves to the word's start column on
the middle row, prints the word with the ORP character styled, draws the
focus marker below the center column, and writes the status line on the
bottom row. Output is batched inside ``with console`` so a frame lands
in one write.

RULES:
- The ORP character sits on the center column when focus is enabled
- Nothing is ever written past the last column of the bottom row (it
  would scroll the alternate screen)
- Finished frames show only FINISHED_TEXT, centered
"""

from __future__ import annotations

from rich.console import Console
from rich.control import Control
from rich.text import Text

from rsvp_reader.config import FINISHED_TEXT, FOCUS_STYLE, HELP_TEXT
from rsvp_reader.core.orp import NO_FOCUS, word_start_column
from rsvp_reader.core.snapshot import Snapshot

FOCUS_MARKER = "^"


def word_text(snapshot: Snapshot, focus_style: str = FOCUS_STYLE) -> Text:
    """Build the styled word for ``snapshot`` (plain when focus is off)."""
    word = snapshot.word or ""
    text = Text(word)
    if snapshot.orp_index != NO_FOCUS and snapshot.orp_index < len(word):
        text.stylize(focus_style, snapshot.orp_index, snapshot.orp_index + 1)
    return text


def status_line(snapshot: Snapshot) -> str:
    return "WPM: {} | Word: {}/{} | Status: {} | {}".format(
        snapshot.rate,
        snapshot.position,
        snapshot.total,
        snapshot.status_label,
        HELP_TEXT,
    )


class Renderer:
    """Draws one Snapshot per call on a rich Console."""

    def __init__(self, console: Console, focus_style: str = FOCUS_STYLE) -> None:
        self.console = console
        self.focus_style = focus_style

    def draw(self, snapshot: Snapshot) -> None:
        width, height = self.console.size
        center_x = width // 2
        center_y = height // 2

        with self.console:
            self.console.control(Control.clear())
            if snapshot.word is None:
                self._put(word_start_column(FINISHED_TEXT, center_x, NO_FOCUS), center_y, Text(FINISHED_TEXT))
                return

            start = word_start_column(snapshot.word, center_x, snapshot.orp_index)
            self._put(start, center_y, word_text(snapshot, self.focus_style))

            if snapshot.orp_index != NO_FOCUS and snapshot.orp_index < len(snapshot.word):
                self._put(center_x, center_y + 1, Text(FOCUS_MARKER, style=self.focus_style))

            status = Text(status_line(snapshot))
            status.truncate(max(width - 1, 0))
            self._put(0, max(height - 1, 0), status)

    def _put(self, x: int, y: int, text: Text) -> None:
        self.console.control(Control.move_to(x, y))
        self.console.print(text, end="", soft_wrap=True)
