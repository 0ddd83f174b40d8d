"""Shared test fixtures for the rsvp_reader test suite.

WHY: The reader loop talks to a clock, a terminal session and a renderer.
Tests drive it with deterministic fakes so timing scenarios are exact
integers instead of sleeps.

HOW: FakeClock holds the current time in ms. FakeSession replays a script
of (time_ms, key) pairs: read_key() either returns the next scripted key
(moving the clock to its timestamp) or lets the whole budget elapse and
returns None. RecordingRenderer keeps every snapshot it was asked to draw.

RULES:
- Every script must end with a quit key, or the loop would not stop
- FakeSession records each wait budget it received
"""

from typing import List, Optional, Sequence, Tuple

import pytest

from rsvp_reader.core.keys import KeyEvent, KeyKind


class FakeClock:
    def __init__(self, start_ms: int = 0) -> None:
        self.now = start_ms

    def __call__(self) -> int:
        return self.now


class FakeSession:
    def __init__(
        self,
        clock: FakeClock,
        script: Sequence[Tuple[int, str]],
    ) -> None:
        self.clock = clock
        self.script: List[Tuple[int, KeyEvent]] = [
            (at, KeyEvent(key)) for at, key in script
        ]
        self.budgets: List[int] = []

    def push(self, at_ms: int, key: str, kind: KeyKind = KeyKind.PRESS) -> None:
        self.script.append((at_ms, KeyEvent(key, kind)))
        self.script.sort(key=lambda item: item[0])

    def read_key(self, timeout_ms: int) -> Optional[KeyEvent]:
        self.budgets.append(timeout_ms)
        if not self.script:
            raise AssertionError("FakeSession script exhausted without quit")
        at, event = self.script[0]
        if at <= self.clock.now + timeout_ms:
            self.script.pop(0)
            self.clock.now = max(self.clock.now, at)
            return event
        self.clock.now += timeout_ms
        return None


class RecordingRenderer:
    def __init__(self) -> None:
        self.snapshots = []

    def draw(self, snapshot) -> None:
        self.snapshots.append(snapshot)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def three_words():
    return ("a", "bb", "ccc")


@pytest.fixture
def make_session(clock):
    """Build a FakeSession bound to the shared clock."""
    def _make(script):
        return FakeSession(clock, script)
    return _make
