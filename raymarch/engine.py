"""
Frame orchestration: fold input events, advance the avatar, cast and project.

All state lives in an EngineState value that callers pass in and get back;
nothing is kept between calls.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, Tuple

from .avatar import Avatar
from .config import Settings
from .draw import Frame
from .grid import Grid, default_grid
from .input_state import InputState, KeyEvent, apply_input_events
from .motion import advance
from .projector import Projector
from .raycaster import RayCaster

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineState:
    settings: Settings
    grid: Grid
    avatar: Avatar
    input: InputState = field(default_factory=InputState)
    frame_count: int = 0

    @classmethod
    def initial(
        cls,
        settings: Optional[Settings] = None,
        grid: Optional[Grid] = None,
        avatar: Optional[Avatar] = None,
    ) -> EngineState:
        """Starting state; defaults to the built-in grid and a centred avatar."""
        settings = settings or Settings()
        if grid is None:
            grid = default_grid()
        if avatar is None:
            avatar = Avatar.centered(settings.screen_width, settings.screen_height)
        return cls(settings=settings, grid=grid, avatar=avatar)

    @property
    def cell_size(self) -> Tuple[float, float]:
        return (
            self.settings.screen_width / self.grid.width,
            self.settings.screen_height / self.grid.height,
        )


def apply_events(state: EngineState, events: Iterable[KeyEvent]) -> EngineState:
    new_input = apply_input_events(state.input, events)
    if new_input == state.input:
        return state
    return replace(state, input=new_input)


def update(state: EngineState, dt: float) -> EngineState:
    """Advance the avatar by one tick of the held input."""
    s = state.settings
    avatar = advance(
        state.avatar, state.input, dt, speed=s.move_speed, angle_step=s.angle_step
    )
    return replace(state, avatar=avatar, frame_count=state.frame_count + 1)


def render(state: EngineState) -> Frame:
    """Cast this frame's rays from the avatar and project them."""
    s = state.settings
    cell_size = state.cell_size
    caster = RayCaster(state.grid, s.world_size, cell_size, s.step_size)
    rays = caster.cast(state.avatar.position, state.avatar.heading, s.fov, s.ray_count)
    return Projector(s, cell_size).project(state.grid, state.avatar, rays)


def tick(
    state: EngineState, dt: float, events: Iterable[KeyEvent] = ()
) -> Tuple[EngineState, Frame]:
    """One host tick: apply pending key events, update, then render."""
    state = apply_events(state, events)
    state = update(state, dt)
    frame = render(state)
    logger.debug(
        "frame %d dt=%.4f pos=(%.1f, %.1f) heading=%.3f",
        state.frame_count,
        dt,
        state.avatar.x,
        state.avatar.y,
        state.avatar.heading,
    )
    return state, frame
