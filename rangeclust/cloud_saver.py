"""Writers that store clouds and clusters as binary PCD files."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping

import numpy as np

from rangeclust.cloud import Cloud

logger = logging.getLogger(__name__)

_LEADING_ZEROS = 6

_PCD_DTYPE = np.dtype([("x", "<f4"), ("y", "<f4"), ("z", "<f4"), ("label", "<u4")])


def with_leading_zeros(num: int) -> str:
    """Return ``num`` as a decimal string padded with zeros to six digits."""
    if num < 0:
        raise ValueError(f"number must not be negative, got {num}")
    return str(num).zfill(_LEADING_ZEROS)


def write_pcd_binary(path: str | os.PathLike, cloud: Cloud) -> None:
    """Write ``cloud`` as a binary PCD file with fields ``x y z label``.

    The label of each point is its ring index.
    """
    count = len(cloud)
    header = (
        "# .PCD v0.7 - Point Cloud Data file format\n"
        "VERSION 0.7\n"
        "FIELDS x y z label\n"
        "SIZE 4 4 4 4\n"
        "TYPE F F F U\n"
        "COUNT 1 1 1 1\n"
        f"WIDTH {count}\n"
        "HEIGHT 1\n"
        "VIEWPOINT 0 0 0 1 0 0 0\n"
        f"POINTS {count}\n"
        "DATA binary\n"
    )
    records = np.array([(p.x, p.y, p.z, p.ring) for p in cloud], dtype=_PCD_DTYPE)
    with open(path, "wb") as handle:
        handle.write(header.encode("ascii"))
        handle.write(records.tobytes())


class VectorCloudSaver:
    """Saves every ``save_every``-th set of clusters into a fresh folder.

    Folders are named ``<prefix>_<NNNNNN>`` after the count of sets received;
    a folder that already exists is left untouched.
    """

    def __init__(self, prefix: str, save_every: int = 1) -> None:
        if save_every < 1:
            raise ValueError(f"save_every must be positive, got {save_every}")
        self._prefix = str(prefix)
        self._save_every = save_every
        self._folder_counter = 0

    def on_new_object_received(
        self, clouds: Mapping[int, Cloud], sender_id: int = 0
    ) -> Path | None:
        """Store ``clouds`` if it is due; return the folder written, if any."""
        index = self._folder_counter
        self._folder_counter += 1
        if index % self._save_every > 0:
            return None
        folder = Path(f"{self._prefix}_{with_leading_zeros(index)}")
        logger.info("saving clusters to '%s'", folder)
        try:
            folder.mkdir()
        except FileExistsError:
            return None
        for cloud_counter, cloud in enumerate(clouds.values()):
            write_pcd_binary(folder / f"cloud_{with_leading_zeros(cloud_counter)}.pcd", cloud)
        return folder


class CloudSaver:
    """Saves each received cloud as ``<prefix>_<N>.pcd``."""

    def __init__(self, prefix: str) -> None:
        self._prefix = str(prefix)
        self._counter = 0

    def on_new_object_received(self, cloud: Cloud, sender_id: int = 0) -> Path:
        """Write ``cloud`` to the next file and return its path."""
        path = Path(f"{self._prefix}_{self._counter}.pcd")
        self._counter += 1
        write_pcd_binary(path, cloud)
        return path