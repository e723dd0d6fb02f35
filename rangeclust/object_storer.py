"""Thread-safe storage of the latest clusters, and cluster drawing helpers."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Mapping

import numpy as np

from rangeclust.cloud import Cloud


class UpdateListener(ABC):
    """Something that wants to hear when new clusters arrive."""

    @abstractmethod
    def on_update(self) -> None:
        """Called after new clusters were stored."""


class ObjectPtrStorer:
    """Keeps the most recently received clusters and notifies a listener."""

    def __init__(self) -> None:
        self._obj_clouds: dict[int, Cloud] = {}
        self._update_listener: UpdateListener | None = None
        self._lock = threading.RLock()

    def set_update_listener(self, listener: UpdateListener | None) -> None:
        """Set the listener told about each new set of clusters."""
        self._update_listener = listener

    def on_new_object_received(self, clouds: Mapping[int, Cloud], sender_id: int = 0) -> None:
        """Replace the stored clusters with ``clouds`` and notify the listener."""
        with self._lock:
            self._obj_clouds = dict(clouds)
            if self._update_listener is not None:
                self._update_listener.on_update()

    def object_clouds(self) -> dict[int, Cloud]:
        """Return a copy of the stored label-to-cluster mapping."""
        with self._lock:
            return dict(self._obj_clouds)


@dataclass(frozen=True)
class CubeStyle:
    """Color and line width used to draw a cluster's box."""

    color: tuple[float, float, float]
    line_width: float


_SMALL_OBJECT = CubeStyle((0.0, 0.2, 0.9), 4.0)
_LARGE_OBJECT = CubeStyle((0.3, 0.3, 0.3), 1.0)


def cluster_center_and_extent(cluster: Cloud) -> tuple[np.ndarray, np.ndarray]:
    """Return the mean of the points and the extent of their bounding box.

    The extent is zero when the points do not spread along x.
    """
    if len(cluster) == 0:
        raise ValueError("cannot compute the center of an empty cluster")
    coords = cluster.as_array()
    center = coords.mean(axis=0)
    min_point = coords.min(axis=0)
    max_point = coords.max(axis=0)
    if min_point[0] < max_point[0]:
        extent = max_point - min_point
    else:
        extent = np.zeros(3)
    return center, extent


def cube_style(scale) -> CubeStyle:
    """Highlight boxes under 30 cubic meters with every side under 6 meters."""
    sx, sy, sz = (float(v) for v in scale)
    volume = sx * sy * sz
    if volume < 30.0 and sx < 6 and sy < 6 and sz < 6:
        return _SMALL_OBJECT
    return _LARGE_OBJECT