"""Pure pacing engine: words, ORP, playback state, key dispatch, snapshots.

WHY: The core is the only part of the reader that must be correct under
interleaved time and input events. Keeping it free of terminal and clock
access makes every transition testable with plain integers.

HOW: words.py tokenizes text, orp.py computes focus positions,
playback.py owns the state machine, keys.py maps key events to commands,
snapshot.py freezes state into what the renderer draws.

RULES:
- Timestamps are integer milliseconds supplied by the caller
- No module here performs I/O
"""
