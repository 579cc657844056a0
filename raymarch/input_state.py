"""
Held-direction input state and the pure key-event transition.
"""

from __future__ import annotations
import enum
from dataclasses import dataclass, replace
from typing import Iterable, NamedTuple


class Direction(enum.Enum):
    FORWARD = "forward"
    BACKWARD = "backward"
    TURN_LEFT = "turn_left"
    TURN_RIGHT = "turn_right"


class KeyEvent(NamedTuple):
    """A press (pressed=True) or release of one logical direction."""

    direction: Direction
    pressed: bool


@dataclass(frozen=True)
class InputState:
    forward: bool = False
    backward: bool = False
    turn_left: bool = False
    turn_right: bool = False

    def is_idle(self) -> bool:
        return not (
            self.forward or self.backward or self.turn_left or self.turn_right
        )


def apply_input_event(state: InputState, event: KeyEvent) -> InputState:
    """Return the state after one key transition; the input is not modified."""
    return replace(state, **{event.direction.value: event.pressed})


def apply_input_events(
    state: InputState, events: Iterable[KeyEvent]
) -> InputState:
    for event in events:
        state = apply_input_event(state, event)
    return state
