import numpy as np
import pytest

from xdscribe.shapes import BoundingBox, Box, Placement, bounding_box


def test_placement_rejects_negative_radius():
    with pytest.raises(ValueError):
        Placement([0.0, 0.0, 0.0], -1.0)


def test_placement_rejects_wrong_dimension():
    with pytest.raises(ValueError):
        Placement([0.0, 0.0], 1.0)


def test_box_is_placement():
    box = Box([1.0, 2.0, 3.0], 0.5)
    assert np.array_equal(box.center, [1.0, 2.0, 3.0])
    assert box.radius == 0.5


def test_bounding_box_corners():
    bbox = bounding_box([(0, 0, 0), (1, 2, 3), (-1, 5, 0)])
    assert np.array_equal(bbox.min, [-1, 0, 0])
    assert np.array_equal(bbox.max, [1, 5, 3])


def test_bounding_box_contains_all_points():
    points = np.array([(0.3, -2.0, 1.0), (4.0, 0.1, -0.7), (1.0, 1.0, 1.0)])
    bbox = bounding_box(points)
    assert np.array_equal(bbox.min, [0.3, -2.0, -0.7])
    assert np.array_equal(bbox.max, [4.0, 1.0, 1.0])


def test_bounding_box_of_single_point_is_degenerate():
    bbox = bounding_box([(2.0, 3.0, 4.0)])
    assert np.array_equal(bbox.min, bbox.max)
    assert bbox.to_box().radius == 0.0


def test_bounding_box_empty_raises():
    with pytest.raises(ValueError):
        bounding_box([])


def test_to_box_symmetric():
    box = BoundingBox([-1.0, -1.0, -1.0], [1.0, 1.0, 1.0]).to_box()
    assert np.array_equal(box.center, [0.0, 0.0, 0.0])
    assert box.radius == 1.0


def test_to_box_uses_largest_extent():
    box = BoundingBox([0.0, 0.0, 0.0], [2.0, 4.0, 6.0]).to_box()
    assert box.radius == 3.0
    assert np.allclose(box.center * 2, [2.0, 4.0, 6.0])