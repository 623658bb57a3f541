from dataclasses import dataclass
from typing import Tuple

import bouncers as B
from bouncers.fixed import Fixed


@dataclass(frozen=True)
class Viewport:
    min_x: Fixed
    max_x: Fixed
    min_y: Fixed
    max_y: Fixed

    def __post_init__(self):
        if self.min_x > self.max_x or self.min_y > self.max_y:
            raise ValueError(f"Inverted viewport bounds: {self}")

    @classmethod
    def from_display(cls, width: int = B.DISPLAY_WIDTH,
                     height: int = B.DISPLAY_HEIGHT) -> 'Viewport':
        half_w, half_h = width // 2, height // 2
        return cls(Fixed(-half_w), Fixed(half_w), Fixed(-half_h), Fixed(half_h))

    def contains(self, x, y) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y


@dataclass
class SimulationConfig:
    display_width: int = B.DISPLAY_WIDTH
    display_height: int = B.DISPLAY_HEIGHT
    max_bouncers: int = B.MAX_BOUNCERS
    speed_range: Tuple[int, int] = B.SPEED_RANGE
    fps: int = B.FPS
    seed: int = B.SEED
    # Average velocity counts the distinguished bouncer; average position never does.
    velocity_includes_distinguished: bool = True

    def validate(self) -> 'SimulationConfig':
        if self.max_bouncers < 1:
            raise ValueError(f"max_bouncers must be >= 1, got {self.max_bouncers}")
        lo, hi = self.speed_range
        if lo > hi:
            raise ValueError(f"Empty speed range: {self.speed_range}")
        if self.display_width <= 0 or self.display_height <= 0:
            raise ValueError(
                f"Display size must be positive, got "
                f"{self.display_width}x{self.display_height}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        return self

    @property
    def viewport(self) -> Viewport:
        return Viewport.from_display(self.display_width, self.display_height)
