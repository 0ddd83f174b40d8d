"""Unit tests for key resolution and dispatch."""

import pytest

from rsvp_reader.core.keys import (
    ESCAPE,
    KEY_BINDINGS,
    Command,
    KeyEvent,
    KeyKind,
    dispatch,
    resolve_command,
)
from rsvp_reader.core.playback import PlaybackState


def _state():
    return PlaybackState.new(word_count=5, rate=250, now_ms=0)


class TestResolveCommand:
    @pytest.mark.parametrize(
        "key,command",
        [
            ("q", Command.QUIT),
            (ESCAPE, Command.QUIT),
            (" ", Command.TOGGLE_PAUSE),
            ("n", Command.STEP_FORWARD),
            ("p", Command.STEP_BACKWARD),
            ("u", Command.INCREASE_RATE),
            ("d", Command.DECREASE_RATE),
        ],
    )
    def test_bindings(self, key, command):
        assert resolve_command(KeyEvent(key)) == command

    def test_repeat_triggers_like_press(self):
        assert resolve_command(KeyEvent("n", KeyKind.REPEAT)) == Command.STEP_FORWARD

    def test_release_is_ignored(self):
        for key in KEY_BINDINGS:
            assert resolve_command(KeyEvent(key, KeyKind.RELEASE)) is None

    @pytest.mark.parametrize("key", ["x", "Q", "N", "\x1b[A", "\n", ""])
    def test_unknown_keys_are_ignored(self, key):
        assert resolve_command(KeyEvent(key)) is None


class TestDispatch:
    def test_toggle_pause(self):
        state = _state()
        assert dispatch(KeyEvent(" "), state, 100) == Command.TOGGLE_PAUSE
        assert state.paused is False
        assert state.last_advance_ms == 100

    def test_step_forward_and_back(self):
        state = _state()
        dispatch(KeyEvent("n"), state, 10)
        dispatch(KeyEvent("n"), state, 20)
        dispatch(KeyEvent("p"), state, 30)
        assert state.index == 1

    def test_rate_keys(self):
        state = _state()
        dispatch(KeyEvent("u"), state, 0)
        assert state.rate == 275
        dispatch(KeyEvent("d"), state, 0)
        dispatch(KeyEvent("d"), state, 0)
        assert state.rate == 225

    def test_quit_leaves_state_untouched(self):
        state = _state()
        before = (state.index, state.rate, state.paused, state.last_advance_ms)
        assert dispatch(KeyEvent("q"), state, 999) == Command.QUIT
        assert (state.index, state.rate, state.paused, state.last_advance_ms) == before

    def test_release_does_nothing(self):
        state = _state()
        assert dispatch(KeyEvent(" ", KeyKind.RELEASE), state, 50) is None
        assert state.paused is True
        assert state.last_advance_ms == 0
