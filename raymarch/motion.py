"""
Avatar motion: translate along the heading, then turn.
"""

from __future__ import annotations
import math

from .avatar import TWO_PI, Avatar, wrap_heading
from .config import ANGLE_STEP, MOVE_SPEED
from .errors import InvalidConfiguration
from .input_state import InputState


def advance(
    avatar: Avatar,
    state: InputState,
    dt: float,
    speed: float = MOVE_SPEED,
    angle_step: float = ANGLE_STEP,
) -> Avatar:
    """
    Return the avatar after one tick of held input.

    speed is in world units per second and is scaled by dt; angle_step is a
    fixed per-tick rotation and is not. Translation always uses the heading
    from the start of the tick. Forward and backward together cancel out.
    Blocked cells do not stop the avatar.
    """
    if not math.isfinite(dt) or dt < 0:
        raise InvalidConfiguration(f"dt must be finite and >= 0, got {dt}")
    if not 0.0 <= angle_step < TWO_PI:
        raise InvalidConfiguration(
            f"angle_step must be in [0, 2*pi), got {angle_step}"
        )
    if state.is_idle():
        return avatar
    x, y = avatar.x, avatar.y
    # forward = 1, backward = -1, both held = 0
    direction = int(state.forward) - int(state.backward)
    if direction:
        dir_x, dir_y = avatar.direction()
        x += dir_x * speed * dt * direction
        y += dir_y * speed * dt * direction
    heading = avatar.heading
    if state.turn_right:
        heading = wrap_heading(heading + angle_step)
    if state.turn_left:
        heading = wrap_heading(heading - angle_step)
    return Avatar(x, y, heading)
