import numpy as np
import pytest

from xdscribe.locations import Location
from xdscribe.refinement import REFINEMENT_SCALE, refine, shrink, voxels_bounding_box
from xdscribe.sampling import full_sampling
from xdscribe.shapes import Box
from xdscribe.stats import global_stats


@pytest.fixture(autouse=True)
def fresh_stats():
    global_stats().reset()


def test_voxels_bounding_box_single_voxel():
    box = voxels_bounding_box([(1, 1, 1)])
    assert np.allclose(box.center, [2.0, 2.0, 2.0])
    assert box.radius == pytest.approx(1.0)


def test_voxels_bounding_box_covers_and_is_aligned():
    selection = [(2, 5, 1), (4, 5, 6), (3, 7, 2)]
    box = voxels_bounding_box(selection)
    assert float(box.radius).is_integer()
    assert all(float(c).is_integer() for c in box.center)
    for coordinates in selection:
        point = np.array(coordinates, dtype=float)
        assert np.all(box.center - box.radius <= point)
        assert np.all(point + 1 <= box.center + box.radius)


def test_voxels_bounding_box_empty():
    with pytest.raises(ValueError):
        voxels_bounding_box([])


def test_refine_full_sampling():
    sampling = full_sampling(Box((0.0, 0.0, 0.0), 1.0), 2, Location.INNER)
    refined = refine(sampling)
    assert refined.grid_size == sampling.grid_size * REFINEMENT_SCALE
    assert len(refined) == len(sampling) * REFINEMENT_SCALE**3
    assert all(v.value == Location.BOUNDARY for v in refined.voxels())
    assert np.allclose(refined.container.center, sampling.container.center)


def test_refine_skips_outer_voxels():
    sampling = full_sampling(Box((0.0, 0.0, 0.0), 1.0), 2, Location.OUTER)
    sampling.find((1, 0, 1)).value = Location.INNER
    refined = refine(sampling)
    assert len(refined) == REFINEMENT_SCALE**3
    assert refined.find((2, 0, 2)) is not None and refined.find((3, 1, 3)) is not None
    assert refined.find((0, 0, 0)) is None


def test_shrink_keeps_voxel_positions():
    sampling = full_sampling(Box((0.0, 0.0, 0.0), 4.0), 8, Location.OUTER)
    kept = [(3, 4, 5), (4, 4, 5)]
    for coordinates in kept:
        sampling.find(coordinates).value = Location.INNER
    shrunk = shrink(sampling)

    assert len(shrunk) == len(kept)
    assert shrunk.grid_step == pytest.approx(sampling.grid_step)
    assert shrunk.grid_size % 2 == 0
    assert all(v.value == Location.BOUNDARY for v in shrunk.voxels())

    old_positions = sorted(tuple(sampling.to_global_coordinates(c)) for c in kept)
    new_positions = sorted(
        tuple(shrunk.to_global_coordinates(v.coordinates)) for v in shrunk.voxels()
    )
    assert np.allclose(old_positions, new_positions)
    assert all(shrunk.contains(v.coordinates) for v in shrunk.voxels())


def test_shrink_of_empty_sampling_fails():
    sampling = full_sampling(Box((0.0, 0.0, 0.0), 1.0), 2, Location.OUTER)
    with pytest.raises(ValueError):
        shrink(sampling)