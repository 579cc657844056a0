from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Dict, Tuple

from .errors import InvalidConfiguration

# Screen settings
# Window presets selected at startup (not resizable at runtime)
RESOLUTIONS: Dict[str, Tuple[int, int]] = {
    "1080x600": (1080, 600),
    "1920x1080": (1920, 1080),
}
DEFAULT_RESOLUTION = "1080x600"
SCREEN_WIDTH, SCREEN_HEIGHT = RESOLUTIONS[DEFAULT_RESOLUTION]
FPS = 60
WINDOW_TITLE = "raymarch"

# Player settings
# Movement speed in world units per second (scaled by dt)
MOVE_SPEED = 200.0
# Rotation per tick in radians (NOT scaled by dt)
ANGLE_STEP = 0.03
# Side length of the player marker in world units
PLAYER_SIZE = 25.0
# Multiplier applied to the heading for the decorative facing delta
FACING_DELTA_FACTOR = 5.0

# Raycasting settings
# Field of view angle (in radians)
FOV = math.radians(60.0)
# Number of rays cast per frame
RAY_COUNT = 60
# Length of one march step in world units
STEP_SIZE = 1.0
# Wall height multiplier applied to screen_height / distance
HEIGHT_SCALE = 1.0
# Distances are floored at this value before projecting
MIN_DISTANCE = 1e-4

# Minimap settings
# Width of the minimap in pixels; height follows the screen aspect ratio
MINIMAP_SIZE = 270.0
MINIMAP_ORIGIN = (10.0, 10.0)
# Ray overlay width is (screen_width / 2) / distance on the minimap scale,
# clamped to this range
RAY_LINE_WIDTH = 1.0
RAY_LINE_MAX_WIDTH = 6.0
# Length of the heading indicator in world units
HEADING_LINE_LENGTH = 50.0
HEADING_LINE_WIDTH = 2.0

# Colors (RGBA floats in [0, 1])
BACKGROUND_COLOR = (0.2, 0.2, 0.2, 1.0)
MINIMAP_BACKGROUND_COLOR = (0.0, 0.0, 0.0, 0.6)
CELL_COLOR = (1.0, 1.0, 1.0, 1.0)
PLAYER_COLOR = (0.0, 1.0, 0.0, 1.0)
RAY_COLOR = (1.0, 0.0, 0.0, 1.0)
HEADING_COLOR = (1.0, 1.0, 0.0, 1.0)


@dataclass(frozen=True)
class Settings:
    """Session configuration, fixed once the host has started."""

    screen_width: int = SCREEN_WIDTH
    screen_height: int = SCREEN_HEIGHT
    fov: float = FOV
    ray_count: int = RAY_COUNT
    step_size: float = STEP_SIZE
    move_speed: float = MOVE_SPEED
    angle_step: float = ANGLE_STEP
    height_scale: float = HEIGHT_SCALE
    minimap_size: float = MINIMAP_SIZE
    minimap_origin: Tuple[float, float] = MINIMAP_ORIGIN
    fps: int = FPS

    def __post_init__(self) -> None:
        if self.screen_width <= 0 or self.screen_height <= 0:
            raise InvalidConfiguration(
                f"screen size must be positive, got "
                f"{self.screen_width}x{self.screen_height}"
            )
        if self.ray_count <= 0:
            raise InvalidConfiguration(
                f"ray_count must be positive, got {self.ray_count}"
            )
        if not self.fov > 0:
            raise InvalidConfiguration(f"fov must be positive, got {self.fov}")
        if not self.step_size > 0:
            raise InvalidConfiguration(
                f"step_size must be positive, got {self.step_size}"
            )
        if not self.minimap_size > 0:
            raise InvalidConfiguration(
                f"minimap_size must be positive, got {self.minimap_size}"
            )
        if not 0.0 <= self.angle_step < 2.0 * math.pi:
            raise InvalidConfiguration(
                f"angle_step must be in [0, 2*pi), got {self.angle_step}"
            )
        if self.fps <= 0:
            raise InvalidConfiguration(f"fps must be positive, got {self.fps}")

    @classmethod
    def from_resolution(cls, name: str, **overrides) -> "Settings":
        """Build settings for one of the RESOLUTIONS presets."""
        try:
            width, height = RESOLUTIONS[name]
        except KeyError:
            raise InvalidConfiguration(
                f"unknown resolution {name!r}; "
                f"expected one of {sorted(RESOLUTIONS)}"
            ) from None
        return cls(screen_width=width, screen_height=height, **overrides)

    @property
    def world_size(self) -> Tuple[int, int]:
        return (self.screen_width, self.screen_height)
