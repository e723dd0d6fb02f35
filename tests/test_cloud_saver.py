import numpy as np
import pytest

from rangeclust.cloud import Cloud
from rangeclust.cloud_saver import (
    CloudSaver,
    VectorCloudSaver,
    with_leading_zeros,
    write_pcd_binary,
)
from rangeclust.rich_point import RichPoint


def _read_pcd(path):
    content = path.read_bytes()
    header, data = content.split(b"DATA binary\n", 1)
    lines = header.decode("ascii").splitlines()
    fields = dict(line.split(" ", 1) for line in lines if not line.startswith("#"))
    dtype = np.dtype([("x", "<f4"), ("y", "<f4"), ("z", "<f4"), ("label", "<u4")])
    return fields, np.frombuffer(data, dtype=dtype)


def _cloud(*coords):
    return Cloud(RichPoint(x, y, z, ring) for x, y, z, ring in coords)


def test_with_leading_zeros_pads_to_six():
    assert with_leading_zeros(7) == "000007"
    assert with_leading_zeros(0) == "000000"
    assert len(with_leading_zeros(12345)) == 6


def test_with_leading_zeros_rejects_negative():
    with pytest.raises(ValueError):
        with_leading_zeros(-1)


def test_write_pcd_binary_round_trip(tmp_path):
    cloud = _cloud((1.5, -2.0, 3.25, 4), (0.0, 0.5, -1.0, 63))
    path = tmp_path / "cloud.pcd"
    write_pcd_binary(path, cloud)
    fields, records = _read_pcd(path)
    assert fields["FIELDS"] == "x y z label"
    assert fields["TYPE"] == "F F F U"
    assert fields["POINTS"] == str(len(cloud))
    assert fields["WIDTH"] == str(len(cloud))
    assert len(records) == len(cloud)
    for record, point in zip(records, cloud):
        assert (float(record["x"]), float(record["y"]), float(record["z"])) == (
            point.x,
            point.y,
            point.z,
        )
        assert int(record["label"]) == point.ring


def test_write_pcd_binary_empty_cloud(tmp_path):
    path = tmp_path / "empty.pcd"
    write_pcd_binary(path, Cloud())
    fields, records = _read_pcd(path)
    assert fields["POINTS"] == "0"
    assert len(records) == 0


def test_vector_cloud_saver_saves_every_nth(tmp_path):
    prefix = str(tmp_path / "clusters")
    saver = VectorCloudSaver(prefix, save_every=2)
    clusters = {1: _cloud((1.0, 2.0, 3.0, 0)), 5: _cloud((4.0, 5.0, 6.0, 1))}
    written = [saver.on_new_object_received(clusters, 0) for _ in range(3)]
    assert written[1] is None
    assert written[0] == tmp_path / f"clusters_{with_leading_zeros(0)}"
    assert written[2] == tmp_path / f"clusters_{with_leading_zeros(2)}"
    assert not (tmp_path / f"clusters_{with_leading_zeros(1)}").exists()
    files = sorted(p.name for p in written[0].iterdir())
    assert files == [f"cloud_{with_leading_zeros(i)}.pcd" for i in range(len(clusters))]


def test_vector_cloud_saver_skips_existing_folder(tmp_path):
    prefix = str(tmp_path / "clusters")
    existing = tmp_path / f"clusters_{with_leading_zeros(0)}"
    existing.mkdir()
    saver = VectorCloudSaver(prefix)
    result = saver.on_new_object_received({1: _cloud((1.0, 1.0, 1.0, 0))})
    assert result is None
    assert list(existing.iterdir()) == []


def test_vector_cloud_saver_rejects_bad_period():
    with pytest.raises(ValueError):
        VectorCloudSaver("clusters", save_every=0)


def test_cloud_saver_numbers_files(tmp_path):
    saver = CloudSaver(str(tmp_path / "scan"))
    cloud = _cloud((1.0, 2.0, 3.0, 2))
    first = saver.on_new_object_received(cloud, 0)
    second = saver.on_new_object_received(cloud, 0)
    assert first == tmp_path / "scan_0.pcd"
    assert second == tmp_path / "scan_1.pcd"
    _, records = _read_pcd(second)
    assert int(records[0]["label"]) == cloud[0].ring