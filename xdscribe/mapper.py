"""Conversion between global coordinates and local grid coordinates."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

import numpy as np

from xdscribe.kernel import DIMS, Coordinates
from xdscribe.shapes import Box
from xdscribe.stats import global_stats


class Mapper:
    """Maps a cubic container onto a grid of ``grid_size`` voxels per axis."""

    def __init__(self, container: Box, grid_size: int) -> None:
        grid_size = int(grid_size)
        if grid_size <= 0:
            raise ValueError(f"grid size must be positive, got {grid_size}")
        self.container = container
        self.grid_size = grid_size
        self.grid_step = (2.0 * container.radius) / grid_size
        self.raster_size: Coordinates = (grid_size,) * DIMS
        self._local_center = np.full(DIMS, grid_size / 2.0)
        global_stats().grid_size.report(grid_size)

    def contains(self, coordinates: Sequence[int]) -> bool:
        """Whether the grid coordinates lie inside the raster."""
        return all(0 <= int(c) < size for c, size in zip(coordinates, self.raster_size))

    def to_local_distance(self, distance: float) -> float:
        return distance / self.grid_step

    def to_local_point(self, point) -> np.ndarray:
        point = np.asarray(point, dtype=float)
        return self._local_center + (point - self.container.center) / self.grid_step

    def to_local_facet(self, facet) -> np.ndarray:
        return np.array([self.to_local_point(point) for point in facet])

    def to_local_facets(self, facets: Iterable) -> Iterator[np.ndarray]:
        return (self.to_local_facet(facet) for facet in facets)

    def to_global_distance(self, distance: float) -> float:
        return distance * self.grid_step

    def to_global_point(self, point) -> np.ndarray:
        point = np.asarray(point, dtype=float)
        return self.container.center + (point - self._local_center) * self.grid_step

    def to_global_coordinates(self, coordinates: Sequence[int]) -> np.ndarray:
        return self.to_global_point(np.asarray(coordinates, dtype=float))

    def to_global_box(self, box: Box) -> Box:
        return Box(self.to_global_point(box.center), self.to_global_distance(box.radius))