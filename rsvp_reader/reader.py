"""Reader loop: render, wait for one key or the next deadline, tick.

WHY: The reader must react to key presses promptly and advance words on
schedule, from a single thread. A separate timer thread would need
locking around the playback state; instead one bounded wait serves both
purposes.

HOW: Every iteration draws a snapshot, computes a wait budget (the fixed
paused poll interval, or the time left until the next advance), blocks
on the session for at most that long, dispatches the key if one arrived,
then calls tick() with a fresh timestamp. The budget is recomputed from
last_advance_ms each time, so a key press mid-interval never postpones
the next advance.

RULES:
- The loop owns the PlaybackState; only dispatch() and tick() change it
- While paused the wait is PAUSED_POLL_MS; while playing it is the
  remaining interval, floored at zero
- QUIT and KeyboardInterrupt both end the loop normally
- The clock, session and renderer are injected collaborators
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional, Sequence

from rsvp_reader.config import PAUSED_POLL_MS
from rsvp_reader.core.keys import Command, KeyEvent, dispatch
from rsvp_reader.core.playback import PlaybackState
from rsvp_reader.core.snapshot import Snapshot, build_snapshot

logger = logging.getLogger(__name__)

Clock = Callable[[], int]


def monotonic_ms() -> int:
    """Monotonic time in whole milliseconds."""
    return time.monotonic_ns() // 1_000_000


def wait_budget_ms(state: PlaybackState, now_ms: int, poll_ms: int = PAUSED_POLL_MS) -> int:
    """How long the loop may block before something needs to happen."""
    if state.paused:
        return poll_ms
    return state.ms_until_advance(now_ms)


def run(
    words: Sequence[str],
    session,
    renderer,
    rate: int,
    focus: bool = False,
    clock: Clock = monotonic_ms,
    poll_ms: int = PAUSED_POLL_MS,
) -> PlaybackState:
    """Run the reading session until the user quits.

    Args:
        words: The word sequence to present.
        session: Object with ``read_key(timeout_ms) -> KeyEvent | None``.
        renderer: Object with ``draw(snapshot)``.
        rate: Initial words per minute.
        focus: Whether to highlight the ORP character.
        clock: Returns monotonic time in milliseconds.
        poll_ms: Wait budget while paused.

    Returns:
        The final playback state.
    """
    state = PlaybackState.new(len(words), rate, clock())
    logger.info("Starting reader: %d words at %d WPM", state.word_count, state.rate)

    try:
        while True:
            snapshot: Snapshot = build_snapshot(words, state, focus)
            renderer.draw(snapshot)

            budget = wait_budget_ms(state, clock(), poll_ms)
            event: Optional[KeyEvent] = session.read_key(budget)
            if event is not None:
                command = dispatch(event, state, clock())
                if command == Command.QUIT:
                    break
                if command is not None:
                    logger.debug("%s -> index=%d rate=%d paused=%s",
                                 command.value, state.index, state.rate, state.paused)

            state.tick(clock())
    except KeyboardInterrupt:
        logger.info("Interrupted by user")

    logger.info("Reader stopped at word %d of %d", min(state.index + 1, state.word_count), state.word_count)
    return state
