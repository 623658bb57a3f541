"""
Fixed-capacity swarm of bouncers.

The first bouncer ever inserted is the distinguished (average) bouncer and is
held apart from the others, so centroid queries never see it.
"""

import logging
import numpy as np
from typing import Iterator, List, Optional, Tuple

import bouncers as B
from bouncers.bouncer import Bouncer
from bouncers.fixed import Fixed
from bouncers.rng import RandomSource
from bouncers.visual import SpriteFactory

logger = logging.getLogger(__name__)


def _mean(values: List[Fixed]) -> Fixed:
    if not values:
        return Fixed()
    return sum(values, Fixed()) / len(values)


class BouncerRegistry:

    def __init__(self, rng: RandomSource,
                 sprites: Optional[SpriteFactory] = None,
                 capacity: int = B.MAX_BOUNCERS,
                 speed_range: Tuple[int, int] = B.SPEED_RANGE,
                 velocity_includes_distinguished: bool = True):
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self.rng = rng
        self.sprites = sprites or SpriteFactory()
        self.capacity = capacity
        self.speed_range = speed_range
        self.velocity_includes_distinguished = velocity_includes_distinguished
        self.distinguished: Optional[Bouncer] = None
        self.others: List[Bouncer] = []

    def __len__(self) -> int:
        return len(self.others) + (self.distinguished is not None)

    def __iter__(self) -> Iterator[Bouncer]:
        """Insertion order: distinguished first."""
        if self.distinguished is not None:
            yield self.distinguished
        yield from self.others

    def __getitem__(self, index: int) -> Bouncer:
        if index < 0:
            index += len(self)
        if index == 0 and self.distinguished is not None:
            return self.distinguished
        if index < 1:
            raise IndexError("registry index out of range")
        return self.others[index - 1]

    @property
    def is_full(self) -> bool:
        return len(self) >= self.capacity

    def add(self) -> Optional[Bouncer]:
        """Insert a fresh bouncer; a no-op returning None once saturated."""
        if self.is_full:
            logger.debug("Registry saturated at %d bouncers, add ignored", self.capacity)
            return None

        bouncer = Bouncer(self.sprites, self.rng, self.speed_range)
        if self.distinguished is None:
            self.distinguished = bouncer
        else:
            self.others.append(bouncer)
        logger.debug("Added bouncer %d/%d: %r", len(self), self.capacity, bouncer)
        return bouncer

    # Aggregates

    def _velocity_pool(self) -> List[Bouncer]:
        if self.velocity_includes_distinguished:
            return list(self)
        return self.others

    def average_velocity_x(self) -> Fixed:
        if len(self) <= 1:
            return Fixed()
        return _mean([b.x_speed for b in self._velocity_pool()])

    def average_velocity_y(self) -> Fixed:
        if len(self) <= 1:
            return Fixed()
        return _mean([b.y_speed for b in self._velocity_pool()])

    def average_position_x(self) -> Fixed:
        return _mean([b.position[0] for b in self.others])

    def average_position_y(self) -> Fixed:
        return _mean([b.position[1] for b in self.others])

    def centroid(self) -> Tuple[Fixed, Fixed]:
        return self.average_position_x(), self.average_position_y()

    # State access

    def get_state(self) -> np.ndarray:
        """(n_bouncers, 4) → [x, y, vx, vy], distinguished first"""
        rows = [[float(v) for v in (*b.position, *b.velocity)] for b in self]
        return np.array(rows, dtype=np.float64).reshape(len(rows), 4)
