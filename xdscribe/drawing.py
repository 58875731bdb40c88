"""Debug output: Wavefront OBJ models and text dumps of samplings."""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from xdscribe.kernel import DIMS
from xdscribe.locations import Location
from xdscribe.sampling import Sampling
from xdscribe.xd_iterator import iterate_grid

_TETRAHEDRON_SCALE = 0.1
_TETRAHEDRON_VERTICES = np.array(
    [
        [0.000000, 1.000000, -1.502657],
        [0.000000, 0.000000, 0.497343],
        [0.866025, -0.500000, -1.502657],
        [-0.866025, -0.500000, -1.502657],
    ]
)
_TETRAHEDRON_FACES = ((4, 2, 1), (1, 2, 3), (3, 2, 4), (1, 3, 4))

_BOX_VERTICES = np.array(
    [
        [-0.5, -0.5, -0.5],
        [-0.5, -0.5, 0.5],
        [-0.5, 0.5, -0.5],
        [-0.5, 0.5, 0.5],
        [0.5, -0.5, -0.5],
        [0.5, -0.5, 0.5],
        [0.5, 0.5, -0.5],
        [0.5, 0.5, 0.5],
    ]
)
_BOX_FACES = (
    (4, 1, 2),
    (8, 3, 4),
    (6, 7, 8),
    (2, 5, 6),
    (3, 5, 1),
    (8, 2, 6),
    (4, 3, 1),
    (8, 7, 3),
    (6, 5, 7),
    (2, 1, 5),
    (3, 7, 5),
    (8, 4, 2),
)

_LOCATION_NAMES = {
    Location.OUTER: "outer",
    Location.BOUNDARY: "boundary",
    Location.INNER: "inner",
}
_LOCATION_MODEL_SCALES = {
    Location.OUTER: 0.05,
    Location.BOUNDARY: 0.6,
    Location.INNER: 0.8,
}
_LOCATION_SYMBOLS = {
    Location.OUTER: ".",
    Location.BOUNDARY: "+",
    Location.INNER: "#",
}
_EMPTY_SYMBOL = "_"


def _format_number(value) -> str:
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    return f"{float(value):g}"


def format_point(point: Sequence) -> str:
    """Render a point as ``( x y z )``."""
    return "( " + "".join(f"{_format_number(c)} " for c in point) + ")"


def location_name(location: Location) -> str:
    """Human-readable name of a location."""
    return _LOCATION_NAMES[Location(location)]


class ObjBuilder:
    """Accumulates vertices and triangular faces of a Wavefront OBJ model."""

    def __init__(self) -> None:
        self.vertices: list[np.ndarray] = []
        self.faces: list[tuple[int, ...]] = []

    def add_facet(self, facet) -> None:
        offset = len(self.vertices)
        points = np.asarray(facet, dtype=float).reshape(DIMS, DIMS)
        self.vertices.extend(point.copy() for point in points)
        self.faces.append(tuple(offset + i + 1 for i in range(DIMS)))

    def add_tetrahedron_at(self, point) -> None:
        self._add_model_at(
            point, _TETRAHEDRON_SCALE, _TETRAHEDRON_VERTICES, _TETRAHEDRON_FACES
        )

    def add_box_at(self, point, scale: float = 1.0) -> None:
        self._add_model_at(point, scale, _BOX_VERTICES, _BOX_FACES)

    def _add_model_at(self, point, scale, vertices, faces) -> None:
        offset = len(self.vertices)
        origin = np.asarray(point, dtype=float)
        self.vertices.extend(origin + vertex * scale for vertex in vertices)
        self.faces.extend(tuple(index + offset for index in face) for face in faces)

    def write(self, path) -> None:
        """Write the model to ``path`` in OBJ format."""
        with open(path, "w", encoding="utf-8") as file:
            for vertex in self.vertices:
                file.write("v" + "".join(f" {_format_number(c)}" for c in vertex) + "\n")
            for face in self.faces:
                file.write("f" + "".join(f" {index}" for index in face) + "\n")


def draw_points(path, points: Iterable) -> None:
    """Draw a small tetrahedron at every point."""
    builder = ObjBuilder()
    for point in points:
        builder.add_tetrahedron_at(point)
    builder.write(path)


def draw_facets(path, facets: Iterable) -> None:
    """Draw the given facets as a triangle mesh."""
    builder = ObjBuilder()
    for facet in facets:
        builder.add_facet(facet)
    builder.write(path)


def draw_sampling(path, sampling: Sampling) -> None:
    """Draw a box at every stored voxel, sized by its location."""
    builder = ObjBuilder()
    for coordinates in iterate_grid(sampling.raster_size):
        voxel = sampling.find(coordinates)
        if voxel is None:
            continue
        builder.add_box_at(
            np.asarray(coordinates, dtype=float) + 0.5,
            _LOCATION_MODEL_SCALES[Location(voxel.value)],
        )
    builder.write(path)


def dump_sampling(path, sampling: Sampling) -> None:
    """Write the sampling as text layers, one symbol per voxel."""
    size = sampling.raster_size
    with open(path, "w", encoding="utf-8") as file:
        for coordinates in iterate_grid(size):
            voxel = sampling.find(coordinates)
            symbol = (
                _LOCATION_SYMBOLS[Location(voxel.value)]
                if voxel is not None
                else _EMPTY_SYMBOL
            )
            file.write(symbol + " ")
            for axis in range(DIMS):
                if coordinates[axis] != size[axis] - 1:
                    break
                file.write("\n")