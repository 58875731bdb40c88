"""Full polytope rasterization: boundary facets first, then the inner region."""

from __future__ import annotations

from typing import Callable, Iterable

from xdscribe.facet_rasterizer import FacetRasterizer
from xdscribe.inner_region import InnerRegionRasterizer
from xdscribe.sparse_raster import SparseRaster

# Only changes the voxels covered by the polytope image.
PolytopeRasterizer = Callable[[Iterable, SparseRaster], None]


def polytope_rasterizer(
    facet_rasterizer: FacetRasterizer,
    inner_region_rasterizer: InnerRegionRasterizer,
) -> PolytopeRasterizer:
    """Combine a facet rasterizer and an inner region rasterizer."""

    def rasterize(facets: Iterable, raster: SparseRaster) -> None:
        facets = list(facets)
        for facet in facets:
            facet_rasterizer(facet, raster)
        inner_region_rasterizer(facets, raster)

    return rasterize