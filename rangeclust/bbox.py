"""Axis-aligned bounding boxes."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from rangeclust.pose import Pose

if TYPE_CHECKING:
    from rangeclust.cloud import Cloud

WRONG_VOLUME = -1.0

_FLOAT_MAX = float(np.finfo(np.float32).max)
_FLOAT_LOWEST = float(np.finfo(np.float32).min)


class Bbox:
    """An axis-aligned box given by its minimum and maximum corners.

    A box with no positive extent along some axis has zero scale and
    center and a volume of :data:`WRONG_VOLUME`.
    """

    WRONG_VOLUME = WRONG_VOLUME

    __slots__ = ("_min_point", "_max_point", "_center", "_scale", "_volume")

    def __init__(self, min_point=None, max_point=None) -> None:
        self._min_point = (
            np.full(3, _FLOAT_MAX) if min_point is None else self._vector(min_point)
        )
        self._max_point = (
            np.full(3, _FLOAT_LOWEST) if max_point is None else self._vector(max_point)
        )
        self._center = np.zeros(3)
        self._scale = np.zeros(3)
        self._volume = WRONG_VOLUME
        self._update_scale_and_center()

    @staticmethod
    def _vector(value) -> np.ndarray:
        array = np.array(value, dtype=float)
        if array.shape != (3,):
            raise ValueError(f"expected a 3D point, got shape {array.shape}")
        return array

    @classmethod
    def from_cloud(cls, cloud: Cloud) -> Bbox:
        """Return the tightest box around all points of ``cloud``."""
        if len(cloud) == 0:
            return cls()
        coords = cloud.as_array()
        return cls(coords.min(axis=0), coords.max(axis=0))

    def _update_scale_and_center(self) -> None:
        scale = self._max_point - self._min_point
        if np.any(scale <= 0.0):
            self._scale = np.zeros(3)
            self._center = np.zeros(3)
            self._volume = WRONG_VOLUME
            return
        self._scale = scale
        self._center = 0.5 * (self._min_point + self._max_point)
        self._volume = float(np.prod(scale))

    def intersect(self, other: Bbox) -> Bbox:
        """Return the box covering the overlap of this box and ``other``."""
        return Bbox(
            np.maximum(self._min_point, other._min_point),
            np.minimum(self._max_point, other._max_point),
        )

    def intersects(self, other: Bbox) -> bool:
        """Whether the two boxes overlap with a positive volume."""
        return self.intersect(other).volume > 0.0

    def move_by(self, pose: Pose) -> None:
        """Transform both corners by ``pose`` and re-sort them per axis."""
        moved_min = pose.transform_point(self._min_point)
        moved_max = pose.transform_point(self._max_point)
        self._min_point = np.minimum(moved_min, moved_max)
        self._max_point = np.maximum(moved_min, moved_max)
        self._update_scale_and_center()

    @property
    def volume(self) -> float:
        return self._volume

    @property
    def center(self) -> np.ndarray:
        return self._center.copy()

    @property
    def scale(self) -> np.ndarray:
        return self._scale.copy()

    @property
    def min_point(self) -> np.ndarray:
        return self._min_point.copy()

    @property
    def max_point(self) -> np.ndarray:
        return self._max_point.copy()

    @property
    def scale_x(self) -> float:
        return float(self._scale[0])

    @property
    def scale_y(self) -> float:
        return float(self._scale[1])

    @property
    def scale_z(self) -> float:
        return float(self._scale[2])

    def __repr__(self) -> str:
        return (
            f"Bbox(min={self._min_point.tolist()}, max={self._max_point.tolist()}, "
            f"volume={self._volume})"
        )