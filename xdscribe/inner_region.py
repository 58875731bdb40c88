"""Filling the inner region of a polytope whose boundary is already rasterized."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator

import numpy as np

from xdscribe.axis_distance import AxisDistance, DistanceResult
from xdscribe.kernel import DIMS, MEPS, Coordinates
from xdscribe.locations import Location
from xdscribe.point_location import locate_point
from xdscribe.sparse_raster import SparseRaster

# Only changes the voxels covered by the inner region.
InnerRegionRasterizer = Callable[[Iterable, SparseRaster], None]


def _voxel_center(coordinates: Coordinates) -> np.ndarray:
    return np.asarray(coordinates, dtype=float) + 0.5


def _unique_sorted(distances: list[DistanceResult]) -> list[DistanceResult]:
    distances.sort()
    result: list[DistanceResult] = []
    for distance in distances:
        if not result or not result[-1] == distance:
            result.append(distance)
    return result


def _sorted_distances_above(
    selection: Iterator[Coordinates], facets: list
) -> SparseRaster:
    result = SparseRaster(selection, [])

    for facet in facets:
        facet_distance = AxisDistance(facet)
        for voxel in result.voxels():
            point = _voxel_center(voxel.coordinates)
            distance = facet_distance(point)
            # Nudge the point when the geometry merely touches the vertical ray.
            axis = 0
            while distance.location == Location.BOUNDARY and axis < DIMS:
                point[axis] += 2.0 * MEPS
                distance = facet_distance(point)
                axis += 1
            if distance and distance.value > -MEPS:
                voxel.value.append(distance)

    for voxel in result.voxels():
        voxel.value = _unique_sorted(voxel.value)
    return result


def rasterize_inner_region_sequentially(facets: Iterable, raster: SparseRaster) -> None:
    """Locate every outer voxel centre independently against all facets."""
    facets = list(facets)
    for voxel in raster.voxels():
        if voxel.value != Location.OUTER:
            continue
        voxel.value = locate_point(_voxel_center(voxel.coordinates), facets)


def rasterize_inner_region_by_facets(facets: Iterable, raster: SparseRaster) -> None:
    """Process the geometry once, computing every outer voxel independently."""
    selection = (v.coordinates for v in raster.voxels() if v.value == Location.OUTER)
    distances_above = _sorted_distances_above(selection, list(facets))

    for distances_voxel in distances_above.voxels():
        distances = distances_voxel.value
        target = raster.find(distances_voxel.coordinates)
        if distances and distances[0].value < MEPS:
            target.value = Location.BOUNDARY
        elif len(distances) % 2:
            target.value = Location.INNER


def rasterize_inner_region_by_rays(facets: Iterable, raster: SparseRaster) -> None:
    """Process the geometry once, handling whole columns along the last axis."""
    selection = (
        v.coordinates[: DIMS - 1] + (0,)
        for v in raster.voxels()
        if v.value == Location.OUTER
    )
    distances_above = _sorted_distances_above(selection, list(facets))

    for distances_voxel in distances_above.voxels():
        distances = distances_voxel.value
        current = 0
        left_above = len(distances)

        for voxel in raster.vertical_slice(distances_voxel.coordinates):
            if voxel.value != Location.OUTER:
                continue
            bound = float(voxel.coordinates[DIMS - 1])

            while current < len(distances) and distances[current].value < bound - MEPS:
                current += 1
                left_above -= 1

            if current == len(distances):
                break

            if distances[current].value < bound + MEPS:
                voxel.value = Location.BOUNDARY
            elif left_above % 2 == 1:
                voxel.value = Location.INNER