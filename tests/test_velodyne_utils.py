import numpy as np
import pytest
from PIL import Image

from rangeclust.velodyne_utils import (
    MOOSMAN_CORRECTIONS,
    fix_kitti_depth,
    mat_from_depth_png,
    read_kitti_cloud,
    read_kitti_cloud_txt,
)


def test_corrections_applied_for_all_sixty_four_rings():
    fixed = fix_kitti_depth(np.ones((64, 1), dtype=np.float64))
    assert fixed.shape == (64, 1)
    assert len(MOOSMAN_CORRECTIONS) == 64
    assert fixed[0, 0] == pytest.approx(1.0 - 0.025875)
    assert fixed[5, 0] == pytest.approx(1.0 + 0.196125)
    assert fixed[63, 0] == pytest.approx(1.0 - 0.115875)


def test_read_kitti_cloud_round_trip(tmp_path):
    records = np.array(
        [[1.5, -2.25, 0.5, 0.9], [10.0, 20.0, -3.0, 0.1], [0.0, 0.0, 0.0, 0.0]],
        dtype="<f4",
    )
    path = tmp_path / "scan.bin"
    records.tofile(path)
    cloud = read_kitti_cloud(path)
    assert len(cloud) == 3
    for point, record in zip(cloud, records):
        assert (point.x, point.y, point.z) == tuple(float(v) for v in record[:3])
        assert point.ring == 0


def test_read_kitti_cloud_ignores_partial_record(tmp_path):
    records = np.array([[1.0, 2.0, 3.0, 4.0]], dtype="<f4")
    path = tmp_path / "scan.bin"
    path.write_bytes(records.tobytes() + b"\x00\x00\x80\x3f")
    cloud = read_kitti_cloud(path)
    assert len(cloud) == 1
    assert cloud[0].z == 3.0


def test_read_kitti_cloud_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_kitti_cloud(tmp_path / "absent.bin")


def test_read_kitti_cloud_txt_skips_bad_lines(tmp_path):
    path = tmp_path / "scan.txt"
    path.write_text("1.5 2.5 3.5 0.7\n1 2 3\n-4 5 -6 1\n", encoding="utf-8")
    cloud = read_kitti_cloud_txt(path)
    assert len(cloud) == 2
    assert (cloud[0].x, cloud[0].y, cloud[0].z) == (1.5, 2.5, 3.5)
    assert (cloud[1].x, cloud[1].y, cloud[1].z) == (-4.0, 5.0, -6.0)


def test_fix_kitti_depth_applies_row_corrections():
    image = np.ones((64, 3), dtype=np.float64)
    image[5, 1] = 0.0
    fixed = fix_kitti_depth(image)
    for row in (0, 5, 63):
        assert fixed[row, 0] == pytest.approx(1.0 - MOOSMAN_CORRECTIONS[row])
    assert fixed[5, 1] == 0.0
    assert np.all(image == np.where(image > 0, 1.0, 0.0))


def test_fix_kitti_depth_does_not_modify_input():
    image = np.full((4, 4), 2.0, dtype=np.float32)
    fixed = fix_kitti_depth(image)
    assert fixed[0, 0] == pytest.approx(2.0 - 0.025875, abs=1e-6)
    assert np.all(image == 2.0)


def test_fix_kitti_depth_rejects_too_many_rows():
    with pytest.raises(ValueError):
        fix_kitti_depth(np.ones((65, 2)))


def test_fix_kitti_depth_rejects_non_image():
    with pytest.raises(ValueError):
        fix_kitti_depth(np.ones(5))


def test_mat_from_depth_png_scales_and_corrects(tmp_path):
    raw = np.array([[0, 500, 1000], [250, 5000, 0]], dtype=np.uint16)
    path = tmp_path / "depth.png"
    Image.fromarray(raw).save(path)
    depth = mat_from_depth_png(path)
    assert depth.dtype == np.float32
    expected = fix_kitti_depth(raw.astype(np.float32) / np.float32(500.0))
    assert np.allclose(depth, expected, atol=1e-6)
    assert depth[0, 0] == 0.0
    assert depth[1, 2] == 0.0