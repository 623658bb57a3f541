"""
Fixed-point numbers with 12 fractional bits.

Values are stored as a raw integer scaled by 2**12, so every operation is
integer arithmetic and rounds the same way on every run:
- multiplication floors (arithmetic right shift)
- division truncates toward zero
"""

from fractions import Fraction
from functools import total_ordering
from typing import Union

PRECISION = 12
SCALE = 1 << PRECISION


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


@total_ordering
class Fixed:
    __slots__ = ('data',)

    def __init__(self, value: Union[int, float, 'Fixed'] = 0):
        if isinstance(value, Fixed):
            self.data = value.data
        elif isinstance(value, int):
            self.data = value * SCALE
        else:
            self.data = round(value * SCALE)

    @classmethod
    def from_data(cls, data: int) -> 'Fixed':
        f = cls()
        f.data = int(data)
        return f

    @staticmethod
    def _coerce(other) -> 'Fixed':
        if isinstance(other, Fixed):
            return other
        if isinstance(other, (int, float)):
            return Fixed(other)
        return NotImplemented

    def __add__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return Fixed.from_data(self.data + other.data)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return Fixed.from_data(self.data - other.data)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return Fixed.from_data(other.data - self.data)

    def __neg__(self):
        return Fixed.from_data(-self.data)

    def __abs__(self):
        return Fixed.from_data(abs(self.data))

    def __mul__(self, other):
        if isinstance(other, int):
            return Fixed.from_data(self.data * other)
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return Fixed.from_data((self.data * other.data) >> PRECISION)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, int):
            if other == 0:
                raise ValueError("Fixed division by zero")
            return Fixed.from_data(_trunc_div(self.data, other))
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        if other.data == 0:
            raise ValueError("Fixed division by zero")
        return Fixed.from_data(_trunc_div(self.data * SCALE, other.data))

    def __eq__(self, other):
        # Exact against plain numbers so equal values hash alike
        if isinstance(other, (int, float)):
            return Fraction(self.data, SCALE) == other
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self.data == other.data

    def __lt__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self.data < other.data

    def __hash__(self):
        return hash(Fraction(self.data, SCALE))

    def __bool__(self):
        return self.data != 0

    def __float__(self):
        return self.data / SCALE

    def __int__(self):
        return _trunc_div(self.data, SCALE)

    def __repr__(self):
        return f"Fixed({float(self)!r})"

    def __str__(self):
        return f"{float(self):g}"
