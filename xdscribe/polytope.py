"""Triangulated closed polytopes: vertices, facets and their adjacency."""

from __future__ import annotations

from collections import defaultdict
from functools import cached_property
from itertools import combinations
from pathlib import Path
from typing import Iterator, Sequence

import numpy as np

from xdscribe.kernel import DIMS
from xdscribe.stats import PolytopeFaceKey, global_stats

FacetTopology = tuple[int, ...]


class Polytope:
    """A polytope given by its vertices and facets of DIMS vertex indices each."""

    def __init__(
        self,
        name: str,
        vertices: Sequence,
        facet_topologies: Sequence[Sequence[int]],
    ) -> None:
        self.name = str(name)
        array = np.array(vertices, dtype=float).reshape(-1, DIMS)
        array.flags.writeable = False
        self.vertices = array

        topologies = tuple(tuple(int(i) for i in facet) for facet in facet_topologies)
        for facet in topologies:
            if len(facet) != DIMS:
                raise ValueError(f"facet {facet} must have {DIMS} vertices")
            for index in facet:
                if not 0 <= index < len(array):
                    raise ValueError(f"vertex index {index} out of range")
        self.facet_topologies = topologies

        geometries = (
            array[np.array(topologies, dtype=int)]
            if topologies
            else np.empty((0, DIMS, DIMS))
        )
        geometries.flags.writeable = False
        self._facet_geometries = geometries

        global_stats().polytope_faces_count[PolytopeFaceKey(self.name, DIMS - 1)] = len(
            topologies
        )

    def facet_geometry(self, facet_index: int) -> np.ndarray:
        """Points of one facet."""
        return self._facet_geometries[facet_index]

    def facet_geometries(self) -> Iterator[np.ndarray]:
        """Points of every facet, in facet order."""
        return iter(self._facet_geometries)

    def faces(self, dim: int) -> Iterator[list[np.ndarray]]:
        """Yield all unique faces of dimension ``dim`` (``dim + 1`` vertices each)."""
        if not 0 <= dim < DIMS:
            raise ValueError(f"face dimension must lie in [0, {DIMS}), got {dim}")
        return self._faces(dim)

    def _faces(self, dim: int) -> Iterator[list[np.ndarray]]:
        unique_faces = {
            tuple(sorted(face))
            for facet in self.facet_topologies
            for face in combinations(facet, dim + 1)
        }
        for face in sorted(unique_faces):
            yield [self.vertices[index] for index in face]
        global_stats().polytope_faces_count[PolytopeFaceKey(self.name, dim)] = len(
            unique_faces
        )

    def neighbor_facet_indices(self, facet_index: int) -> list[int]:
        """Indices of the facets sharing a ridge with the given facet."""
        return list(self._neighbors_map[facet_index])

    @cached_property
    def _neighbors_map(self) -> list[list[int]]:
        ridges: dict[tuple[int, ...], list[int]] = defaultdict(list)
        for facet_index, facet in enumerate(self.facet_topologies):
            for ridge in combinations(facet, DIMS - 1):
                ridges[tuple(sorted(ridge))].append(facet_index)

        neighbors: list[list[int]] = [[] for _ in self.facet_topologies]
        for ridge in sorted(ridges):
            incident = ridges[ridge]
            if len(incident) != 2:
                raise ValueError(
                    f"ridge {ridge} has {len(incident)} incident facets, expected 2"
                )
            first, second = incident
            neighbors[first].append(second)
            neighbors[second].append(first)

        for facet_index, facet_neighbors in enumerate(neighbors):
            if len(facet_neighbors) != DIMS:
                raise ValueError(
                    f"facet {facet_index} has {len(facet_neighbors)} neighbors, "
                    f"expected {DIMS}"
                )
        return neighbors


def load_obj(filename) -> Polytope:
    """Read vertices and triangular faces from a Wavefront OBJ file."""
    vertices: list[tuple[float, ...]] = []
    facets: list[tuple[int, ...]] = []
    with open(filename, encoding="utf-8") as file:
        for line_number, line in enumerate(file, start=1):
            tokens = line.split()
            if not tokens or tokens[0] not in ("v", "f"):
                continue
            values = tokens[1 : DIMS + 1]
            if len(values) < DIMS:
                raise ValueError(f"line {line_number}: expected {DIMS} values")
            if tokens[0] == "v":
                vertices.append(tuple(float(value) for value in values))
            else:
                facets.append(tuple(int(value.split("/")[0]) - 1 for value in values))
    return Polytope(str(Path(filename)) if isinstance(filename, Path) else filename,
                    vertices, facets)


def invert(polytope: Polytope) -> Polytope:
    """The polytope reflected through the origin."""
    return Polytope(polytope.name, -polytope.vertices, polytope.facet_topologies)