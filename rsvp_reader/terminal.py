"""Terminal session: cbreak input, alternate screen, and bounded key waits.

WHY: The reader loop needs exactly one blocking primitive, "wait at most
N ms for one key press", and a guarantee that the user's terminal is
put back the way it was, however the program exits.

HOW: TerminalSession is a context manager. On enter it switches the key
input descriptor to cbreak mode (termios/tty) and asks the rich Console
for the alternate screen with a hidden cursor. read_key() waits with
select() for at most the given budget, decodes whatever bytes arrived
into KeyEvents, and returns them one per call. On exit every change is
undone in reverse order.

RULES:
- Keys come from stdin when it is a TTY, otherwise from /dev/tty, so
  text piped on stdin is never mistaken for key presses
- A lone ESC byte is reported as "escape"; escape sequences (arrow keys,
  function keys, Alt+key) are consumed whole and reported by their raw text
- Several keys arriving in one read are queued, never dropped
- termios attributes, the cursor and the main screen are restored even
  if a later restore step fails
"""

from __future__ import annotations

import codecs
import logging
import os
import select
import sys
import termios
import tty
from collections import deque
from typing import Any, Deque, List, Optional

from rich.console import Console

from rsvp_reader.core.keys import ESCAPE, KeyEvent

logger = logging.getLogger(__name__)

# How long to wait for the rest of an escape sequence after a bare ESC.
ESCAPE_SEQUENCE_WAIT_MS = 25

_READ_SIZE = 64


def _is_csi_final(ch: str) -> bool:
    return "@" <= ch <= "~"


def parse_keys(text: str) -> List[KeyEvent]:
    """Split decoded terminal input into key events.

    Examples:
        ``"q"``          -> [q]
        ``"\\x1b"``       -> [escape]
        ``"\\x1b[A"``     -> ["\\x1b[A"] (up arrow, unbound)
        ``"nn"``         -> [n, n]
    """
    events: List[KeyEvent] = []
    i = 0
    length = len(text)
    while i < length:
        ch = text[i]
        if ch != "\x1b":
            events.append(KeyEvent(ch))
            i += 1
            continue

        # ESC at the end, or followed by another ESC, is a real Escape press
        if i + 1 >= length or text[i + 1] == "\x1b":
            events.append(KeyEvent(ESCAPE))
            i += 1
            continue

        lead = text[i + 1]
        end = i + 2
        if lead == "[":
            # CSI: parameters and intermediates, then one final byte
            while end < length and not _is_csi_final(text[end]):
                end += 1
            end = min(end + 1, length)
        elif lead == "O":
            # SS3: exactly one more character
            end = min(end + 1, length)
        events.append(KeyEvent(text[i:end]))
        i = end
    return events


class TerminalSession:
    """Scoped ownership of the terminal for one reading session.

    Args:
        console: rich Console used for screen control and drawing.
        input_stream: Override for the key input stream (tests). When
                      omitted, stdin is used if it is a TTY, else /dev/tty.
    """

    def __init__(self, console: Console, input_stream: Optional[Any] = None) -> None:
        self.console = console
        self._input_stream = input_stream
        self._owned_stream: Optional[Any] = None
        self._fd: Optional[int] = None
        self._saved_attrs: Optional[list] = None
        self._pending: Deque[KeyEvent] = deque()
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    # ------------------------------------------------------------------
    # Context management
    # ------------------------------------------------------------------

    def __enter__(self) -> TerminalSession:
        stream = self._input_stream
        if stream is None:
            if sys.stdin.isatty():
                stream = sys.stdin
            else:
                stream = open("/dev/tty", "rb", buffering=0)
                self._owned_stream = stream
        self._fd = stream.fileno()

        try:
            self._saved_attrs = termios.tcgetattr(self._fd)
            tty.setcbreak(self._fd)
            self.console.set_alt_screen(True)
            self.console.show_cursor(False)
        except BaseException:
            self._restore()
            raise

        logger.debug("Terminal session started on fd %d", self._fd)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._restore()
        logger.debug("Terminal session ended")

    def _restore(self) -> None:
        try:
            self.console.show_cursor(True)
            self.console.set_alt_screen(False)
        finally:
            try:
                if self._saved_attrs is not None and self._fd is not None:
                    termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved_attrs)
                    self._saved_attrs = None
            finally:
                if self._owned_stream is not None:
                    self._owned_stream.close()
                    self._owned_stream = None

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def read_key(self, timeout_ms: int) -> Optional[KeyEvent]:
        """Wait at most ``timeout_ms`` for one key event.

        Returns:
            The next KeyEvent, or None if the budget ran out.
        """
        if self._pending:
            return self._pending.popleft()
        if self._fd is None:
            raise RuntimeError("TerminalSession is not active")

        if not self._wait_readable(max(timeout_ms, 0)):
            return None

        data = os.read(self._fd, _READ_SIZE)
        if not data:
            raise EOFError("Terminal input closed")
        if data == b"\x1b" and self._wait_readable(ESCAPE_SEQUENCE_WAIT_MS):
            data += os.read(self._fd, _READ_SIZE)

        self._pending.extend(parse_keys(self._decoder.decode(data)))
        if self._pending:
            return self._pending.popleft()
        return None

    def _wait_readable(self, timeout_ms: int) -> bool:
        ready, _w, _e = select.select([self._fd], [], [], timeout_ms / 1000.0)
        return bool(ready)
