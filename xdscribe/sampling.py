"""Sparse rasters placed in global space through a mapper."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from xdscribe.mapper import Mapper
from xdscribe.shapes import Box
from xdscribe.sparse_raster import SparseRaster
from xdscribe.xd_iterator import iterate_grid


class Sampling(SparseRaster, Mapper):
    """A sparse raster of voxels together with its grid placement."""

    def __init__(
        self,
        mapper: Mapper,
        selection: Iterable[Sequence[int]] = (),
        value: Any = None,
    ) -> None:
        SparseRaster.__init__(self, selection, value)
        Mapper.__init__(self, mapper.container, mapper.grid_size)


def full_sampling(container: Box, grid_size: int, value: Any) -> Sampling:
    """A sampling holding every voxel of the grid, all set to ``value``."""
    mapper = Mapper(container, grid_size)
    return Sampling(mapper, iterate_grid(mapper.raster_size), value)