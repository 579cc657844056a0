"""
Input handling abstraction: turns Pygame key events into KeyEvents for the
core. The core never sees pygame.
"""

from __future__ import annotations
import pygame
from typing import Dict, List, Optional

from .input_state import Direction, KeyEvent

# Held-direction bindings (WASD plus arrow keys)
KEY_BINDINGS: Dict[int, Direction] = {
    pygame.K_w: Direction.FORWARD,
    pygame.K_UP: Direction.FORWARD,
    pygame.K_s: Direction.BACKWARD,
    pygame.K_DOWN: Direction.BACKWARD,
    pygame.K_a: Direction.TURN_LEFT,
    pygame.K_LEFT: Direction.TURN_LEFT,
    pygame.K_d: Direction.TURN_RIGHT,
    pygame.K_RIGHT: Direction.TURN_RIGHT,
}


def translate_event(event: pygame.event.Event) -> Optional[KeyEvent]:
    """Map a KEYDOWN/KEYUP for a bound key to a KeyEvent, else None."""
    if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
        return None
    direction = KEY_BINDINGS.get(event.key)
    if direction is None:
        return None
    return KeyEvent(direction, event.type == pygame.KEYDOWN)


class InputHandler:
    """
    Collects this frame's key transitions and the quit request. Events are
    handed to the engine in the order they arrived.
    """

    def __init__(self) -> None:
        self._quit = False
        self._events: List[KeyEvent] = []

    def process_events(self) -> None:
        """Poll Pygame events and record key transitions and quit requests."""
        self._quit = False
        self._events = []
        for event in pygame.event.get():
            self.handle_event(event)

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self._quit = True
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self._quit = True
        else:
            key_event = translate_event(event)
            if key_event is not None:
                self._events.append(key_event)

    def should_quit(self) -> bool:
        """Return True if a quit command was issued this frame."""
        return self._quit

    def key_events(self) -> List[KeyEvent]:
        """Key transitions gathered by the last process_events call."""
        return list(self._events)
