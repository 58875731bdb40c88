"""Marking raster voxels touched by a single facet as boundary."""

from __future__ import annotations

from typing import Callable

import numpy as np

from xdscribe.facet_box_overlap import FacetBoxOverlap
from xdscribe.kernel import DIMS, floor_point
from xdscribe.locations import Location
from xdscribe.shapes import bounding_box
from xdscribe.sparse_raster import SparseRaster
from xdscribe.xd_iterator import iterate_grid

# Only changes the voxels covered by the facet image.
FacetRasterizer = Callable[[np.ndarray, SparseRaster], None]

_UNIT_BOX = np.ones(DIMS)


def rasterize_facet_by_overlap(facet, raster: SparseRaster) -> None:
    """Mark every stored voxel overlapping ``facet`` as BOUNDARY."""
    overlap = FacetBoxOverlap(_UNIT_BOX, facet)
    for voxel in raster.voxels():
        if overlap(voxel.coordinates):
            voxel.value = Location.BOUNDARY


def bbox_facet_rasterizer(coarse_threshold: float = 2.0) -> FacetRasterizer:
    """Facet rasterizer with an extra bounding box test.

    Facets spanning less than ``coarse_threshold`` along every axis get their
    whole voxel bounding box marked without the exact overlap test; a zero
    threshold gives exact rasterization.
    """

    def rasterize(facet, raster: SparseRaster) -> None:
        facet_box = bounding_box(np.asarray(facet, dtype=float).reshape(DIMS, DIMS))
        low = floor_point(facet_box.min)
        high = floor_point(facet_box.max)

        if float(np.max(facet_box.max - facet_box.min)) < coarse_threshold:
            size = tuple(h - l + 1 for l, h in zip(low, high))
            for offset in iterate_grid(size):
                voxel = raster.find(tuple(l + o for l, o in zip(low, offset)))
                if voxel is not None:
                    voxel.value = Location.BOUNDARY
            return

        overlap = FacetBoxOverlap(_UNIT_BOX, facet)
        for voxel in raster.voxels():
            if any(
                c < l or c > h for c, l, h in zip(voxel.coordinates, low, high)
            ):
                continue
            if overlap(voxel.coordinates):
                voxel.value = Location.BOUNDARY

    return rasterize