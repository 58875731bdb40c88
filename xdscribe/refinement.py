"""Shrinking and refining samplings around their non-empty voxels."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

import numpy as np

from xdscribe.kernel import DIMS, Coordinates, floor_point, int_floor
from xdscribe.locations import Location
from xdscribe.mapper import Mapper
from xdscribe.sampling import Sampling
from xdscribe.shapes import BoundingBox, Box
from xdscribe.xd_iterator import iterate_grid

REFINEMENT_SCALE = 2


def voxels_bounding_box(selection: Iterable[Sequence[int]]) -> Box:
    """Cube holding all selected voxels, aligned to voxel boundaries."""
    points = [tuple(int(c) for c in coordinates) for coordinates in selection]
    if not points:
        raise ValueError("cannot bound an empty voxel selection")
    low = [min(min(p[i] for p in points), 2**31 - 1) for i in range(DIMS)]
    high = [max(0, max(p[i] for p in points)) + 1 for i in range(DIMS)]
    for i in range(DIMS):
        if high[i] <= low[i]:
            raise ValueError("voxel coordinates must be non-negative")
        # An even extent keeps the centre and radius integer.
        if (high[i] - low[i]) % 2:
            high[i] += 1
    return BoundingBox(np.array(low, dtype=float), np.array(high, dtype=float)).to_box()


def shrink(sampling: Sampling) -> Sampling:
    """Drop empty voxels and shrink the container around the rest.

    The result is filled with BOUNDARY (undefined) values.
    """
    selection = [v.coordinates for v in sampling.voxels() if v.value != Location.OUTER]
    local_container = voxels_bounding_box(selection)
    grid_size = int_floor(local_container.radius * 2.0)
    mapper = Mapper(sampling.to_global_box(local_container), grid_size)

    center = floor_point(local_container.center)
    offset = tuple(c - grid_size // 2 for c in center)
    shifted: list[Coordinates] = [
        tuple(c - o for c, o in zip(coordinates, offset)) for coordinates in selection
    ]
    for coordinates in shifted:
        if not mapper.contains(coordinates):
            raise RuntimeError(f"shrunk voxel {coordinates} left the new grid")
    return Sampling(mapper, shifted, Location.BOUNDARY)


def _refined_selection(sampling: Sampling) -> Iterator[Coordinates]:
    offsets = list(iterate_grid((REFINEMENT_SCALE,) * DIMS))
    for voxel in sampling.voxels():
        if voxel.value == Location.OUTER:
            continue
        base = tuple(c * REFINEMENT_SCALE for c in voxel.coordinates)
        for offset in offsets:
            yield tuple(b + o for b, o in zip(base, offset))


def refine(sampling: Sampling) -> Sampling:
    """Split every non-empty voxel into finer ones.

    The result is filled with BOUNDARY (undefined) values.
    """
    mapper = Mapper(sampling.container, sampling.grid_size * REFINEMENT_SCALE)
    return Sampling(mapper, _refined_selection(sampling), Location.BOUNDARY)