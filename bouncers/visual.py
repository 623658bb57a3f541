from dataclasses import dataclass, field
from typing import Tuple

from bouncers.fixed import Fixed


@dataclass
class Sprite:
    """On-screen dot. Its coordinates are the authoritative bouncer position."""
    x: Fixed = field(default_factory=Fixed)
    y: Fixed = field(default_factory=Fixed)

    @property
    def position(self) -> Tuple[Fixed, Fixed]:
        return self.x, self.y

    def set_position(self, x, y):
        self.x, self.y = Fixed(x), Fixed(y)


class SpriteFactory:
    """Creates sprites at the default placement (the viewport origin)."""

    def __init__(self):
        self.created = 0

    def create(self) -> Sprite:
        self.created += 1
        return Sprite()

    def set_position(self, handle: Sprite, x, y):
        handle.set_position(x, y)

    def get_position(self, handle: Sprite) -> Tuple[Fixed, Fixed]:
        return handle.position
