import numpy as np
from typing import Optional, Union

from bouncers.fixed import Fixed

Number = Union[int, float, Fixed]


class RandomSource:
    """Seeded generator of fixed-point values. Owned and advanced by the caller."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self.rng = np.random.RandomState(seed)

    def advance(self):
        """Step the generator state once, discarding the draw."""
        self.rng.randint(0, 2**31 - 1)

    def get_fixed(self, lo: Number, hi: Number) -> Fixed:
        """Uniform value in [lo, hi) at fixed-point resolution."""
        lo_data, hi_data = Fixed(lo).data, Fixed(hi).data
        if lo_data > hi_data:
            raise ValueError(f"Empty range: [{lo}, {hi})")
        if lo_data == hi_data:
            return Fixed.from_data(lo_data)
        return Fixed.from_data(int(self.rng.randint(lo_data, hi_data)))

