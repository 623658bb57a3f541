"""
Bouncer: one dot moving in straight lines inside the viewport.

Position lives on the sprite and is only touched through the sprite factory;
the bouncer itself owns just its velocity.
Reflection is perfectly elastic and axis-aligned: crossing an edge snaps the
coordinate back onto that edge and negates that axis's speed.
"""

from typing import Tuple

import bouncers as B
from bouncers.config import Viewport
from bouncers.fixed import Fixed
from bouncers.rng import RandomSource
from bouncers.visual import SpriteFactory


class Bouncer:

    def __init__(self, sprites: SpriteFactory, rng: RandomSource,
                 speed_range: Tuple[int, int] = B.SPEED_RANGE):
        self.sprites = sprites
        self.sprite = sprites.create()
        self.x_speed = rng.get_fixed(*speed_range)
        self.y_speed = rng.get_fixed(*speed_range)

    @property
    def position(self) -> Tuple[Fixed, Fixed]:
        return self.sprites.get_position(self.sprite)

    @property
    def velocity(self) -> Tuple[Fixed, Fixed]:
        return self.x_speed, self.y_speed

    def update(self, viewport: Viewport):
        x, y = self.position
        x += self.x_speed
        y += self.y_speed

        if x > viewport.max_x:
            x = viewport.max_x
            self.x_speed = -self.x_speed
        if x < viewport.min_x:
            x = viewport.min_x
            self.x_speed = -self.x_speed
        if y > viewport.max_y:
            y = viewport.max_y
            self.y_speed = -self.y_speed
        if y < viewport.min_y:
            y = viewport.min_y
            self.y_speed = -self.y_speed

        self.sprites.set_position(self.sprite, x, y)

    def override_position(self, x, y):
        """Place the bouncer directly, skipping integration and reflection."""
        self.sprites.set_position(self.sprite, x, y)

    def __repr__(self):
        x, y = self.position
        return f"Bouncer(pos=({x}, {y}), vel=({self.x_speed}, {self.y_speed}))"
