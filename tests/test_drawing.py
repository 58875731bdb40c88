import numpy as np
import pytest

from xdscribe.drawing import (
    ObjBuilder,
    draw_facets,
    draw_points,
    draw_sampling,
    dump_sampling,
    format_point,
    location_name,
)
from xdscribe.locations import Location
from xdscribe.mapper import Mapper
from xdscribe.sampling import Sampling, full_sampling
from xdscribe.shapes import Box


def _read_obj(path):
    vertices, faces = [], []
    for line in path.read_text().splitlines():
        tokens = line.split()
        if tokens[0] == "v":
            vertices.append([float(t) for t in tokens[1:]])
        elif tokens[0] == "f":
            faces.append([int(t) for t in tokens[1:]])
    return np.array(vertices), faces


def test_format_point_integers():
    assert format_point((1, 2, 3)) == "( 1 2 3 )"


def test_format_point_floats():
    assert format_point(np.array([0.5, -1.0, 2.0])) == "( 0.5 -1 2 )"


@pytest.mark.parametrize(
    "location, name",
    [
        (Location.OUTER, "outer"),
        (Location.BOUNDARY, "boundary"),
        (Location.INNER, "inner"),
    ],
)
def test_location_name(location, name):
    assert location_name(location) == name


def test_add_facet_writes_vertices_and_face(tmp_path):
    builder = ObjBuilder()
    builder.add_facet([[0, 0, 0], [1, 0, 0], [0, 1, 0]])
    builder.add_facet([[0, 0, 1], [1, 0, 1], [0, 1, 1]])
    path = tmp_path / "facets.obj"
    builder.write(path)
    lines = path.read_text().splitlines()
    assert lines[0] == "v 0 0 0"
    assert lines[1] == "v 1 0 0"
    assert lines[-2] == "f 1 2 3"
    assert lines[-1] == "f 4 5 6"


def test_tetrahedron_indices_are_offset(tmp_path):
    builder = ObjBuilder()
    builder.add_tetrahedron_at([0, 0, 0])
    builder.add_tetrahedron_at([5, 5, 5])
    path = tmp_path / "t.obj"
    builder.write(path)
    vertices, faces = _read_obj(path)
    assert len(vertices) == 8
    assert len(faces) == 8
    assert faces[0] == [4, 2, 1]
    assert faces[4] == [8, 6, 5]
    np.testing.assert_allclose(vertices[4:] - vertices[:4], 5.0, atol=1e-5)


def test_box_scale_sets_extent(tmp_path):
    builder = ObjBuilder()
    builder.add_box_at([1.0, 2.0, 3.0], 0.6)
    path = tmp_path / "box.obj"
    builder.write(path)
    vertices, faces = _read_obj(path)
    assert len(vertices) == 8
    assert len(faces) == 12
    np.testing.assert_allclose(vertices.mean(axis=0), [1.0, 2.0, 3.0], atol=1e-9)
    np.testing.assert_allclose(vertices.max(axis=0) - vertices.min(axis=0), 0.6, atol=1e-9)
    assert all(1 <= i <= 8 for face in faces for i in face)


def test_draw_points(tmp_path):
    path = tmp_path / "points.obj"
    draw_points(path, [np.zeros(3), np.ones(3), np.full(3, 2.0)])
    vertices, faces = _read_obj(path)
    assert len(vertices) == 12
    assert len(faces) == 12
    assert max(max(face) for face in faces) == 12


def test_draw_facets_round_trip(tmp_path):
    facets = [
        [[0, 0, 0], [1, 0, 0], [0, 1, 0]],
        [[0, 0, 0], [0, 0, 1], [1, 0, 0]],
    ]
    path = tmp_path / "mesh.obj"
    draw_facets(path, facets)
    vertices, faces = _read_obj(path)
    np.testing.assert_allclose(vertices, np.array(facets).reshape(-1, 3))
    assert faces == [[1, 2, 3], [4, 5, 6]]


def test_draw_facets_bad_path_raises(tmp_path):
    with pytest.raises(OSError):
        draw_facets(tmp_path / "missing" / "mesh.obj", [])


def test_draw_sampling_boxes_at_voxel_centres(tmp_path):
    mapper = Mapper(Box(np.zeros(3), 1.0), 2)
    sampling = Sampling(mapper, [(0, 0, 0), (1, 1, 1)], Location.INNER)
    path = tmp_path / "sampling.obj"
    draw_sampling(path, sampling)
    vertices, faces = _read_obj(path)
    assert len(vertices) == 16
    assert len(faces) == 24
    np.testing.assert_allclose(vertices[:8].mean(axis=0), [0.5, 0.5, 0.5], atol=1e-9)
    np.testing.assert_allclose(vertices[8:].mean(axis=0), [1.5, 1.5, 1.5], atol=1e-9)
    np.testing.assert_allclose(
        vertices[:8].max(axis=0) - vertices[:8].min(axis=0), 0.8, atol=1e-9
    )


def test_dump_full_sampling(tmp_path):
    sampling = full_sampling(Box(np.zeros(3), 1.0), 2, Location.INNER)
    path = tmp_path / "dump.txt"
    dump_sampling(path, sampling)
    assert path.read_text() == "# # \n# # \n\n# # \n# # \n\n\n"


def test_dump_sparse_sampling_symbols(tmp_path):
    mapper = Mapper(Box(np.zeros(3), 1.0), 2)
    sampling = Sampling(mapper, [(0, 0, 0), (1, 0, 0)], Location.OUTER)
    sampling.find((1, 0, 0)).value = Location.BOUNDARY
    path = tmp_path / "dump.txt"
    dump_sampling(path, sampling)
    text = path.read_text()
    assert text.startswith(". + \n")
    assert text.count("_") == 6
    assert text.count(" ") == 8
    assert text.endswith("\n\n\n")