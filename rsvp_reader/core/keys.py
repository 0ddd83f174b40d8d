"""Key event model and dispatch to playback commands.

WHY: Terminal input arrives as raw key presses; the state machine speaks
in commands. Keeping the binding table here, away from both the terminal
adapter and the state machine, means a binding change touches one dict.

HOW: KEY_BINDINGS maps lowercase key names to Command values.
resolve_command() turns a KeyEvent into a Command (or None), and
dispatch() applies it to a PlaybackState through its public operations.

RULES:
- RELEASE events never trigger a command (avoids double firing)
- PRESS and REPEAT events are treated the same
- Bindings are case-sensitive lowercase literals; "Q" is not quit
- QUIT is returned to the caller and never touches the state
- Unknown keys are ignored
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, Optional

from rsvp_reader.core.playback import PlaybackState

ESCAPE = "escape"
"""Key name reported for a lone ESC byte."""


class KeyKind(str, enum.Enum):
    PRESS = "press"
    REPEAT = "repeat"
    RELEASE = "release"


@dataclass(frozen=True)
class KeyEvent:
    """One discrete key event.

    Attributes:
        key: A single printable character (``"q"``, ``" "``) or a key
             name such as ``"escape"``. Unrecognized escape sequences
             are reported with their raw text.
        kind: Press, repeat, or release.
    """

    key: str
    kind: KeyKind = KeyKind.PRESS


class Command(str, enum.Enum):
    QUIT = "quit"
    TOGGLE_PAUSE = "toggle_pause"
    STEP_FORWARD = "step_forward"
    STEP_BACKWARD = "step_backward"
    INCREASE_RATE = "increase_rate"
    DECREASE_RATE = "decrease_rate"


KEY_BINDINGS: Dict[str, Command] = {
    "q": Command.QUIT,
    ESCAPE: Command.QUIT,
    " ": Command.TOGGLE_PAUSE,
    "n": Command.STEP_FORWARD,
    "p": Command.STEP_BACKWARD,
    "u": Command.INCREASE_RATE,
    "d": Command.DECREASE_RATE,
}


def resolve_command(event: KeyEvent) -> Optional[Command]:
    """Return the command bound to ``event``, or None to ignore it."""
    if event.kind == KeyKind.RELEASE:
        return None
    return KEY_BINDINGS.get(event.key)


def dispatch(event: KeyEvent, state: PlaybackState, now_ms: int) -> Optional[Command]:
    """Apply the command bound to ``event`` to ``state``.

    Args:
        event: The key event read from the terminal.
        state: Playback state owned by the reader loop.
        now_ms: Current monotonic time in milliseconds.

    Returns:
        The command that was recognized (QUIT included), or None if the
        event was ignored.
    """
    command = resolve_command(event)
    if command is None or command == Command.QUIT:
        return command

    if command == Command.TOGGLE_PAUSE:
        state.toggle_pause(now_ms)
    elif command == Command.STEP_FORWARD:
        state.step_forward(now_ms)
    elif command == Command.STEP_BACKWARD:
        state.step_backward(now_ms)
    elif command == Command.INCREASE_RATE:
        state.increase_rate()
    elif command == Command.DECREASE_RATE:
        state.decrease_rate()
    return command
