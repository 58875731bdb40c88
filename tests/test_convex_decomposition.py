import numpy as np
import pytest

from xdscribe.convex_decomposition import dummy_decomposition, star_decomposition
from xdscribe.polytope import Polytope

CUBE_VERTICES = [
    (-0.5, -0.5, -0.5),
    (-0.5, -0.5, 0.5),
    (-0.5, 0.5, -0.5),
    (-0.5, 0.5, 0.5),
    (0.5, -0.5, -0.5),
    (0.5, -0.5, 0.5),
    (0.5, 0.5, -0.5),
    (0.5, 0.5, 0.5),
]
CUBE_FACES = [
    (4, 1, 2), (8, 3, 4), (6, 7, 8), (2, 5, 6), (3, 5, 1), (8, 2, 6),
    (4, 3, 1), (8, 7, 3), (6, 5, 7), (2, 1, 5), (3, 7, 5), (8, 4, 2),
]


@pytest.fixture
def cube():
    return Polytope(
        "decomposed cube", CUBE_VERTICES, [tuple(i - 1 for i in f) for f in CUBE_FACES]
    )


def test_dummy_yields_all_vertices_once(cube):
    parts = list(dummy_decomposition(cube))
    assert len(parts) == 1
    np.testing.assert_array_equal(parts[0], cube.vertices)


def test_star_yields_one_simplex_per_facet(cube):
    parts = list(star_decomposition(cube))
    assert len(parts) == len(CUBE_FACES)
    for part, facet in zip(parts, cube.facet_geometries()):
        assert part.shape == (4, 3)
        np.testing.assert_array_equal(part[0], np.zeros(3))
        np.testing.assert_array_equal(part[1:], facet)


def test_star_parts_cover_cube_volume(cube):
    volume = sum(
        abs(np.linalg.det(part[1:] - part[0])) / 6.0 for part in star_decomposition(cube)
    )
    assert volume == pytest.approx(1.0)


def test_decompositions_are_reiterable_by_calling_again(cube):
    first = [p.copy() for p in star_decomposition(cube)]
    second = list(star_decomposition(cube))
    assert all(np.array_equal(a, b) for a, b in zip(first, second))
    assert len(first) == len(second)