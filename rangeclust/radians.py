"""Angles stored in radians, with comparisons that tolerate float noise."""

from __future__ import annotations

import math
from dataclasses import dataclass

# Machine epsilon of a single-precision float, used as comparison tolerance.
FLOAT_EPSILON = 2.0**-23


@dataclass(frozen=True)
class Radians:
    """An angle in radians.

    A default-constructed angle is marked invalid; every angle produced by
    the factory functions or by arithmetic is valid.
    """

    value: float = 0.0
    valid: bool = False

    @classmethod
    def from_radians(cls, radians: float) -> Radians:
        """Build a valid angle from a value in radians."""
        return cls(float(radians), True)

    @classmethod
    def from_degrees(cls, degrees: float) -> Radians:
        """Build a valid angle from a value in degrees."""
        return cls(float(degrees) * math.pi / 180.0, True)

    def to_degrees(self) -> float:
        """Return the angle in degrees."""
        return 180.0 * self.value / math.pi

    def normalize(self, start: Radians | None = None, end: Radians | None = None) -> Radians:
        """Return the angle shifted by whole periods into ``[start, end]``.

        The period is ``end - start``; defaults are 0 and 360 degrees.
        """
        start = deg(0) if start is None else start
        end = deg(360) if end is None else end
        span = (end - start).value
        value = self.value
        if (value < start.value or value > end.value) and span <= 0:
            raise ValueError("normalization range must have a positive width")
        while value < start.value:
            value += span
        while value > end.value:
            value -= span
        return Radians.from_radians(value)

    def abs(self) -> Radians:
        """Return the absolute value of the angle."""
        return Radians.from_radians(math.fabs(self.value))

    def floor(self) -> Radians:
        """Return the angle rounded down to a whole number of degrees."""
        return Radians.from_degrees(math.floor(self.to_degrees()))

    def __abs__(self) -> Radians:
        return self.abs()

    def __float__(self) -> float:
        return self.value

    def __add__(self, other: object) -> Radians:
        if not isinstance(other, Radians):
            return NotImplemented
        return Radians.from_radians(self.value + other.value)

    def __sub__(self, other: object) -> Radians:
        if not isinstance(other, Radians):
            return NotImplemented
        return Radians.from_radians(self.value - other.value)

    def __mul__(self, factor: object) -> Radians:
        if isinstance(factor, Radians) or not isinstance(factor, (int, float)):
            return NotImplemented
        return Radians.from_radians(self.value * factor)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> Radians | float:
        if isinstance(other, Radians):
            return self.value / other.value
        if isinstance(other, (int, float)):
            return Radians.from_radians(self.value / other)
        return NotImplemented

    def __neg__(self) -> Radians:
        return Radians.from_radians(-self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Radians):
            return NotImplemented
        return self.value < other.value - FLOAT_EPSILON

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Radians):
            return NotImplemented
        return self.value > other.value + FLOAT_EPSILON


def deg(value: float) -> Radians:
    """Return a valid angle given in degrees."""
    return Radians.from_degrees(value)


def rad(value: float) -> Radians:
    """Return a valid angle given in radians."""
    return Radians.from_radians(value)