"""Clustering of point clouds into separate objects."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import replace

import numpy as np
from scipy.spatial import cKDTree

from rangeclust.cloud import Cloud
from rangeclust.timer import Timer

logger = logging.getLogger(__name__)

_MAX_UINT16 = 0xFFFF


def extract_euclidean_clusters(
    points, tolerance: float, min_size: int = 1, max_size: int = _MAX_UINT16
) -> list[list[int]]:
    """Group point indices whose neighbours lie within ``tolerance``.

    Two points belong to one cluster when a chain of points connects them
    with every step no longer than ``tolerance``. Only clusters with
    ``min_size <= size <= max_size`` points are kept. Each cluster lists its
    indices in ascending order; clusters are ordered from largest to smallest.
    """
    if tolerance <= 0:
        raise ValueError(f"tolerance must be positive, got {tolerance}")
    coords = np.asarray(points, dtype=float)
    if coords.size == 0:
        return []
    if coords.ndim != 2 or coords.shape[1] != 3:
        raise ValueError(f"expected an (n, 3) array of points, got shape {coords.shape}")

    tree = cKDTree(coords)
    processed = np.zeros(len(coords), dtype=bool)
    clusters: list[list[int]] = []
    for seed in range(len(coords)):
        if processed[seed]:
            continue
        processed[seed] = True
        members = [seed]
        frontier = deque(members)
        while frontier:
            current = frontier.popleft()
            for neighbour in tree.query_ball_point(coords[current], tolerance):
                if not processed[neighbour]:
                    processed[neighbour] = True
                    members.append(neighbour)
                    frontier.append(neighbour)
        if min_size <= len(members) <= max_size:
            clusters.append(sorted(members))
    clusters.sort(key=len, reverse=True)
    return clusters


class EuclideanClusterer:
    """Splits clouds into clusters by euclidean distance.

    Only every ``skip``-th cloud is clustered, starting with the first one;
    for the others an empty mapping is produced.
    """

    def __init__(
        self,
        cluster_tolerance: float = 0.2,
        min_cluster_size: int = 100,
        max_cluster_size: int = 25000,
        skip: int = 10,
    ) -> None:
        for name, value in (
            ("min_cluster_size", min_cluster_size),
            ("max_cluster_size", max_cluster_size),
        ):
            if not 0 <= value <= _MAX_UINT16:
                raise ValueError(f"{name} must be in 0..{_MAX_UINT16}, got {value}")
        if not 1 <= skip <= _MAX_UINT16:
            raise ValueError(f"skip must be in 1..{_MAX_UINT16}, got {skip}")
        if cluster_tolerance <= 0:
            raise ValueError(f"cluster_tolerance must be positive, got {cluster_tolerance}")
        self.cluster_tolerance = float(cluster_tolerance)
        self.min_cluster_size = min_cluster_size
        self.max_cluster_size = max_cluster_size
        self.skip = skip
        self._counter = 0

    def process(self, cloud: Cloud) -> dict[int, Cloud]:
        """Cluster ``cloud`` and return clusters keyed by their rank.

        Every cluster carries a copy of the pose of ``cloud``.
        """
        index = self._counter
        self._counter += 1
        if index % self.skip != 0:
            return {}
        timer = Timer()
        indices = extract_euclidean_clusters(
            cloud.as_array(),
            self.cluster_tolerance,
            self.min_cluster_size,
            self.max_cluster_size,
        )
        logger.info("euclidean based labeling took: %d us", timer.measure())
        return {
            label: Cloud((replace(cloud[i]) for i in members), cloud.pose.copy())
            for label, members in enumerate(indices)
        }