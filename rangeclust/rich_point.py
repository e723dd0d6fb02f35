"""A 3D point that also carries the index of the laser ring that saw it."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

_MAX_RING = 0xFFFF


@dataclass(slots=True)
class RichPoint:
    """A point with coordinates and a ring index in ``0..65535``."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    ring: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.ring <= _MAX_RING:
            raise ValueError(f"ring must be in 0..{_MAX_RING}, got {self.ring}")

    def as_array(self) -> np.ndarray:
        """Return the coordinates as a numpy vector of length 3."""
        return np.array([self.x, self.y, self.z], dtype=float)

    def dist_to_sensor_2d(self) -> float:
        """Return the distance to the origin in the xy plane."""
        return math.hypot(self.x, self.y)

    def dist_to_sensor_3d(self) -> float:
        """Return the distance to the origin in space."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)