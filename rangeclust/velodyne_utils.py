"""Readers for KITTI velodyne scans and depth images."""

from __future__ import annotations

import logging
import os

import numpy as np
from PIL import Image

from rangeclust.cloud import Cloud
from rangeclust.rich_point import RichPoint

logger = logging.getLogger(__name__)

# Per-ring range corrections for KITTI depth images, in micrometres,
# one entry per laser ring from top to bottom.
_CORRECTIONS_UM: tuple[int, ...] = (
    25875, -6125, 31875, 1875, 29875, -196125, 49875, -34125,
    3875, 5875, 35875, -64125, 35875, 1875, -24125, -62125,
    39875, -20125, 75875, -24125, -4125, -58125, -32125, -58125,
    21875, -32125, 59875, -44125, 75875, -4125, 21875, 5875,
    -36125, -22125, -4125, -58125, -26125, -30125, 45875, 35875,
    -26125, 41875, -86125, -60125, 31875, -10125, -24125, -48125,
    -38125, 39875, -26125, 37875, -20125, 51875, -14125, 19875,
    -2125, 27875, 5875, 21875, 23875, 85875, 85875, 115875,
)

# Per-ring range corrections in meters.
MOOSMAN_CORRECTIONS: tuple[float, ...] = tuple(um / 1e6 for um in _CORRECTIONS_UM)

# Depth images store range in units of 1/500 m.
DEPTH_PNG_SCALE = 500.0

_MIN_VALID_DEPTH = 0.001
_KITTI_RECORD = 4 * 4  # x, y, z, intensity as 32-bit floats


def read_kitti_cloud(path: str | os.PathLike) -> Cloud:
    """Read a binary KITTI scan of little-endian ``x y z intensity`` floats.

    Intensity is dropped; an incomplete trailing record is ignored.
    """
    with open(path, "rb") as handle:
        data = handle.read()
    usable = len(data) - len(data) % _KITTI_RECORD
    records = np.frombuffer(data[:usable], dtype="<f4").reshape(-1, 4)
    return Cloud(RichPoint(float(x), float(y), float(z)) for x, y, z, _ in records)


def read_kitti_cloud_txt(path: str | os.PathLike) -> Cloud:
    """Read a text scan with four space-separated values per line.

    Lines that do not hold exactly four fields are logged and skipped.
    """
    logger.info("Reading cloud from %s.", path)
    cloud = Cloud()
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            fields = line.rstrip("\n").split(" ")
            if len(fields) != 4:
                logger.error("format of line is wrong.")
                continue
            x, y, z = (float(value) for value in fields[:3])
            cloud.append(RichPoint(x, y, z))
    return cloud


def fix_kitti_depth(original) -> np.ndarray:
    """Return a copy of a depth image with the per-row range corrections applied.

    Pixels with a depth below 0.001 m are treated as empty and left alone.
    """
    fixed = np.array(original, dtype=np.result_type(np.asarray(original), np.float32))
    if fixed.ndim != 2:
        raise ValueError(f"expected a 2D depth image, got shape {fixed.shape}")
    rows = fixed.shape[0]
    if rows > len(MOOSMAN_CORRECTIONS):
        raise ValueError(
            f"depth image has {rows} rows, corrections exist for "
            f"{len(MOOSMAN_CORRECTIONS)}"
        )
    corrections = np.asarray(MOOSMAN_CORRECTIONS[:rows], dtype=fixed.dtype)[:, None]
    valid = fixed >= _MIN_VALID_DEPTH
    fixed -= np.where(valid, corrections, 0)
    return fixed


def mat_from_depth_png(path: str | os.PathLike) -> np.ndarray:
    """Load a 16-bit KITTI depth PNG as a corrected float32 range image in meters."""
    with Image.open(path) as image:
        raw = np.asarray(image)
    depth = raw.astype(np.float32) / np.float32(DEPTH_PNG_SCALE)
    return fix_kitti_depth(depth)