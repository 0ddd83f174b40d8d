"""Render snapshot: a frozen view of playback state for the renderer.

WHY: The renderer should never reach into the live PlaybackState or
recompute the ORP itself. A snapshot carries exactly what one frame
needs, so rendering can be tested from plain values.

RULES:
- word is None once playback has finished
- orp_index is NO_FOCUS when focus highlighting is disabled
- position is 1-based for display; it equals total + 1 when finished
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from rsvp_reader.core.orp import NO_FOCUS, focus_index
from rsvp_reader.core.playback import Phase, PlaybackState


@dataclass(frozen=True)
class Snapshot:
    word: Optional[str]
    orp_index: int
    position: int
    total: int
    rate: int
    phase: Phase
    focus: bool

    @property
    def status_label(self) -> str:
        """Status shown in the status line (Finished never reaches it)."""
        return Phase.PAUSED.value if self.phase != Phase.PLAYING else Phase.PLAYING.value


def build_snapshot(
    words: Sequence[str],
    state: PlaybackState,
    focus: bool,
) -> Snapshot:
    """Freeze ``state`` into a Snapshot for the current word."""
    if state.finished:
        word = None
        orp = NO_FOCUS
    else:
        word = words[state.index]
        orp = focus_index(word, focus)

    return Snapshot(
        word=word,
        orp_index=orp,
        position=state.index + 1,
        total=state.word_count,
        rate=state.rate,
        phase=state.phase,
        focus=focus,
    )
