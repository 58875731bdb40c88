import pytest

from xdscribe.xd_iterator import iterate_grid


def test_visits_every_point_once():
    points = list(iterate_grid((2, 3, 4)))
    assert len(points) == 2 * 3 * 4
    assert len(set(points)) == len(points)
    assert all(0 <= x < 2 and 0 <= y < 3 and 0 <= z < 4 for x, y, z in points)


def test_first_axis_varies_fastest():
    points = list(iterate_grid((2, 2, 2)))
    assert points[0] == (0, 0, 0)
    assert points[1] == (1, 0, 0)
    assert points[2] == (0, 1, 0)
    assert points[-1] == (1, 1, 1)


def test_fewer_dims_pads_with_zeros():
    points = list(iterate_grid((2, 3, 5), dims=2))
    assert len(points) == 2 * 3
    assert all(point[2] == 0 for point in points)


def test_zero_dims_yields_origin_only():
    assert list(iterate_grid((4, 4, 4), dims=0)) == [(0, 0, 0)]


def test_empty_size_yields_nothing():
    assert list(iterate_grid((0, 3, 3))) == []


def test_too_many_dims_rejected():
    with pytest.raises(ValueError):
        list(iterate_grid((1, 1, 1, 1), dims=4))