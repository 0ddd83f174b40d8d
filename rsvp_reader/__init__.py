"""rsvp_reader: terminal rapid serial visual presentation (RSVP) reader.

WHY: Reading one word at a time at a fixed position removes eye movement
from the reading process. A terminal reader lets you speed-read any text
file, the clipboard, or piped output without leaving the shell.

HOW: Three layers. The core (words, ORP, playback state machine, key
dispatcher, snapshot) is pure and clock-injected. The reader loop drives
the core from a single bounded wait on keyboard input. Thin adapters
acquire text, own the terminal mode, and draw snapshots with rich.

RULES:
- The core never touches the terminal or the wall clock directly
- PlaybackState is owned by the reader loop; nothing else mutates it
- Terminal modes are always restored, on every exit path
"""

__version__ = "0.1.0"
