"""Playback state machine: position, pause flag, rate, and auto-advance.

WHY: Pacing is the heart of the reader. Manual navigation, rate changes,
and time-driven advancement all touch the same four fields; funnelling
every change through one small state machine keeps the invariants in one
place and makes the timing testable without a real clock.

HOW: PlaybackState is a dataclass owned by the reader loop. Callers pass
the current monotonic time in integer milliseconds to every operation
that needs it. tick() compares elapsed time with interval_ms(rate),
recomputed on every call so live rate changes apply immediately.

RULES:
- 0 <= index <= word_count at all times
- index == word_count (Finished) implies paused is True
- Every pause toggle and manual step resets last_advance_ms to now
- Rate changes do not reset last_advance_ms
- Rate is floored at MIN_RATE; there is no ceiling
- A manual step while Finished moves to the last word and stays Paused
- toggle_pause() while Finished leaves the machine Paused
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from rsvp_reader.config import MIN_RATE, MS_PER_MINUTE, RATE_STEP

logger = logging.getLogger(__name__)


class Phase(str, enum.Enum):
    """Observable playback states.

    Inherits from str so values print cleanly in the status line and logs.
    """

    PAUSED = "Paused"
    PLAYING = "Playing"
    FINISHED = "Finished"


def interval_ms(rate: int) -> int:
    """Milliseconds each word stays on screen at ``rate`` words per minute.

    Uses integer floor division: 250 WPM -> 240 ms, 275 WPM -> 218 ms
    (60000 / 275 = 218.18...). Rates below MIN_RATE are treated as
    MIN_RATE so the result is always defined.
    """
    return MS_PER_MINUTE // max(rate, MIN_RATE)


@dataclass
class PlaybackState:
    """Mutable reading position and pacing for one word sequence.

    Attributes:
        word_count: Number of words in the sequence; fixed for the session.
        index: Current word, or word_count once playback has finished.
        rate: Words per minute.
        paused: Whether automatic advancement is suspended.
        last_advance_ms: Monotonic time of the last advance, pause toggle,
                         or manual step.
    """

    word_count: int
    index: int = 0
    rate: int = MIN_RATE
    paused: bool = True
    last_advance_ms: int = 0

    @classmethod
    def new(cls, word_count: int, rate: int, now_ms: int) -> PlaybackState:
        """Create the initial state: first word, paused.

        An empty sequence starts Finished (index == word_count == 0).
        """
        return cls(
            word_count=max(word_count, 0),
            index=0,
            rate=max(rate, MIN_RATE),
            paused=True,
            last_advance_ms=now_ms,
        )

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def finished(self) -> bool:
        return self.index >= self.word_count

    @property
    def phase(self) -> Phase:
        if self.finished:
            return Phase.FINISHED
        if self.paused:
            return Phase.PAUSED
        return Phase.PLAYING

    def interval_ms(self) -> int:
        return interval_ms(self.rate)

    def ms_until_advance(self, now_ms: int) -> int:
        """Time left before tick() would fire, floored at zero."""
        elapsed = now_ms - self.last_advance_ms
        return max(0, self.interval_ms() - elapsed)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def toggle_pause(self, now_ms: int) -> None:
        """Flip between Paused and Playing.

        Resetting last_advance_ms means resuming never fires an advance
        for time that passed while paused.
        """
        self.last_advance_ms = now_ms
        if self.finished:
            # Nothing left to play; stay in the terminal Paused condition.
            self.paused = True
            return
        self.paused = not self.paused
        logger.debug("Playback %s at word %d", self.phase.value.lower(), self.index)

    def step_forward(self, now_ms: int) -> None:
        """Move to the next word; a no-op on the last word."""
        self.last_advance_ms = now_ms
        if self._leave_finished():
            return
        if self.index + 1 < self.word_count:
            self.index += 1

    def step_backward(self, now_ms: int) -> None:
        """Move to the previous word; a no-op on the first word."""
        self.last_advance_ms = now_ms
        if self._leave_finished():
            return
        if self.index > 0:
            self.index -= 1

    def increase_rate(self) -> None:
        self.rate += RATE_STEP

    def decrease_rate(self) -> None:
        self.rate = max(self.rate - RATE_STEP, MIN_RATE)

    def tick(self, now_ms: int) -> bool:
        """Advance automatically if the current word's time is up.

        Returns:
            True if the index or pause flag changed.
        """
        if self.paused:
            return False
        if now_ms - self.last_advance_ms < self.interval_ms():
            return False

        if self.index + 1 < self.word_count:
            self.index += 1
            self.last_advance_ms = now_ms
        else:
            # Past the last word: finish in one step so the invariant
            # index == word_count -> paused holds after every call.
            self.paused = True
            self.index = self.word_count
            logger.debug("Playback finished after %d words", self.word_count)
        return True

    def _leave_finished(self) -> bool:
        """Return to the last word, paused, if playback had finished.

        Returns:
            True if the state was Finished (the step is fully handled).
        """
        if not self.finished:
            return False
        self.index = max(self.word_count - 1, 0)
        self.paused = True
        return True
