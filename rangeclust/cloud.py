"""A collection of rich points together with the pose it was taken from."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Iterator

import numpy as np

from rangeclust.pose import Pose
from rangeclust.rich_point import RichPoint


class Cloud:
    """An ordered list of :class:`RichPoint` with a pose and a sensor pose."""

    __slots__ = ("_points", "pose", "sensor_pose")

    def __init__(
        self,
        points: Iterable[RichPoint] | None = None,
        pose: Pose | None = None,
        sensor_pose: Pose | None = None,
    ) -> None:
        self._points: list[RichPoint] = list(points) if points is not None else []
        self.pose = pose if pose is not None else Pose()
        self.sensor_pose = sensor_pose if sensor_pose is not None else Pose()

    @property
    def points(self) -> list[RichPoint]:
        """The points of the cloud, in insertion order."""
        return self._points

    def append(self, point: RichPoint) -> None:
        """Add a point at the end of the cloud."""
        self._points.append(point)

    def resize(self, new_size: int) -> None:
        """Truncate the cloud, or pad it with default points, to ``new_size``."""
        if new_size < 0:
            raise ValueError(f"size must not be negative, got {new_size}")
        if new_size <= len(self._points):
            del self._points[new_size:]
        else:
            self._points.extend(RichPoint() for _ in range(new_size - len(self._points)))

    def copy(self) -> Cloud:
        """Return a deep copy: points and poses are not shared."""
        return Cloud(
            (replace(point) for point in self._points),
            self.pose.copy(),
            self.sensor_pose.copy(),
        )

    def transform_in_place(self, pose: Pose) -> None:
        """Move every point by ``pose``; ring indices are kept."""
        for point in self._points:
            point.x, point.y, point.z = (
                float(v) for v in pose.transform_point(point.as_array())
            )

    def transform(self, pose: Pose) -> Cloud:
        """Return a copy of the cloud with every point moved by ``pose``."""
        moved = self.copy()
        moved.transform_in_place(pose)
        return moved

    def as_array(self) -> np.ndarray:
        """Return the coordinates as an ``(n, 3)`` array."""
        if not self._points:
            return np.zeros((0, 3))
        return np.array([(p.x, p.y, p.z) for p in self._points], dtype=float)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[RichPoint]:
        return iter(self._points)

    def __getitem__(self, index: int) -> RichPoint:
        return self._points[index]

    def __setitem__(self, index: int, point: RichPoint) -> None:
        self._points[index] = point

    def __repr__(self) -> str:
        return f"Cloud({len(self._points)} points, pose={self.pose!r})"