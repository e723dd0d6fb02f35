import numpy as np
import pytest

from rangeclust.bbox import WRONG_VOLUME, Bbox
from rangeclust.cloud import Cloud
from rangeclust.pose import Pose
from rangeclust.rich_point import RichPoint


def test_default_box_is_invalid():
    box = Bbox()
    assert box.volume == WRONG_VOLUME
    assert box.volume == -1.0
    assert box.scale.tolist() == [0.0, 0.0, 0.0]
    assert box.center.tolist() == [0.0, 0.0, 0.0]


def test_box_from_corners():
    box = Bbox([0.0, 0.0, 0.0], [1.0, 2.0, 3.0])
    assert box.scale.tolist() == [1.0, 2.0, 3.0]
    assert box.volume == pytest.approx(box.scale_x * box.scale_y * box.scale_z)
    assert np.allclose(box.center, (box.min_point + box.max_point) / 2)


def test_flat_box_is_invalid():
    box = Bbox([0.0, 0.0, 0.0], [1.0, 0.0, 3.0])
    assert box.volume == WRONG_VOLUME
    assert box.scale_x == 0.0


def test_bad_shape_raises():
    with pytest.raises(ValueError):
        Bbox([0.0, 0.0], [1.0, 1.0])


def test_from_cloud_spans_points():
    cloud = Cloud(
        [RichPoint(1.0, -2.0, 3.0), RichPoint(-1.0, 4.0, 0.5), RichPoint(0.0, 0.0, 1.0)]
    )
    box = Bbox.from_cloud(cloud)
    assert box.min_point.tolist() == [-1.0, -2.0, 0.5]
    assert box.max_point.tolist() == [1.0, 4.0, 3.0]
    assert box.volume > 0.0


def test_from_empty_cloud_is_invalid():
    assert Bbox.from_cloud(Cloud()).volume == WRONG_VOLUME


def test_intersect_overlapping_boxes():
    a = Bbox([0.0, 0.0, 0.0], [2.0, 2.0, 2.0])
    b = Bbox([1.0, 1.0, 1.0], [3.0, 3.0, 3.0])
    overlap = a.intersect(b)
    assert overlap.min_point.tolist() == b.min_point.tolist()
    assert overlap.max_point.tolist() == a.max_point.tolist()
    assert a.intersects(b)
    assert b.intersects(a)


def test_disjoint_boxes_do_not_intersect():
    a = Bbox([0.0, 0.0, 0.0], [1.0, 1.0, 1.0])
    b = Bbox([2.0, 2.0, 2.0], [3.0, 3.0, 3.0])
    assert not a.intersects(b)
    assert a.intersect(b).volume == WRONG_VOLUME


def test_touching_boxes_do_not_intersect():
    a = Bbox([0.0, 0.0, 0.0], [1.0, 1.0, 1.0])
    b = Bbox([1.0, 0.0, 0.0], [2.0, 1.0, 1.0])
    assert not a.intersects(b)


def test_self_intersection_is_same_box():
    a = Bbox([0.0, -1.0, 2.0], [1.0, 1.0, 5.0])
    assert a.intersect(a).volume == pytest.approx(a.volume)


def test_move_by_translation_keeps_volume():
    box = Bbox([0.0, 0.0, 0.0], [1.0, 2.0, 3.0])
    volume = box.volume
    box.move_by(Pose(5.0, -1.0, 0.0))
    assert box.min_point.tolist() == [5.0, -1.0, 0.0]
    assert box.volume == pytest.approx(volume)


def test_move_by_sorts_corners():
    box = Bbox([0.0, 0.0, 0.0], [1.0, 1.0, 1.0])
    box.move_by(Pose(0.0, 0.0, np.pi))
    assert np.all(box.min_point <= box.max_point)
    assert box.volume > 0.0