"""Sparse sets of valued voxels on a rectangular integer grid."""

from __future__ import annotations

import copy
from bisect import bisect_left
from dataclasses import dataclass
from math import prod
from typing import Any, Generic, Iterable, Iterator, Sequence, TypeVar

from xdscribe.kernel import DIMS, Coordinates
from xdscribe.xd_iterator import iterate_grid

Value = TypeVar("Value")


@dataclass(eq=False, slots=True)
class Voxel(Generic[Value]):
    """Grid coordinates with a mutable value attached."""

    coordinates: Coordinates
    value: Any


def _as_coordinates(coordinates: Sequence[int]) -> Coordinates:
    result = tuple(int(c) for c in coordinates)
    if len(result) != DIMS:
        raise ValueError(f"expected {DIMS} coordinates, got {len(result)}")
    return result


class SparseRaster(Generic[Value]):
    """Voxels kept in lexicographic order of their coordinates.

    The selection may come in any order and hold duplicates; each voxel
    receives its own copy of ``value``.
    """

    def __init__(self, selection: Iterable[Sequence[int]] = (), value: Any = None) -> None:
        unique = sorted({_as_coordinates(c) for c in selection})
        self._keys: list[Coordinates] = unique
        self._voxels: list[Voxel] = [Voxel(c, copy.copy(value)) for c in unique]

    def __len__(self) -> int:
        return len(self._voxels)

    def voxels(self) -> Iterator[Voxel]:
        """All stored voxels in lexicographic order."""
        return iter(self._voxels)

    def find(self, coordinates: Sequence[int]) -> Voxel | None:
        """The voxel at ``coordinates``, or None if it is not stored."""
        key = _as_coordinates(coordinates)
        index = bisect_left(self._keys, key)
        if index < len(self._keys) and self._keys[index] == key:
            return self._voxels[index]
        return None

    def vertical_slice(self, start: Sequence[int]) -> Iterator[Voxel]:
        """Stored voxels along the last axis, starting at ``start``."""
        key = _as_coordinates(start)
        prefix = key[: DIMS - 1]
        for voxel in self._voxels[bisect_left(self._keys, key):]:
            if voxel.coordinates[: DIMS - 1] != prefix:
                break
            yield voxel


def raster_capacity(raster_size: Sequence[int]) -> int:
    """Number of voxels in a full raster of the given size."""
    sizes = [int(c) for c in raster_size]
    for size in sizes:
        if size <= 0:
            raise ValueError(f"raster size must be positive, got {tuple(sizes)}")
    return prod(sizes)


def full_raster(raster_size: Sequence[int], value: Any) -> SparseRaster:
    """A raster holding every voxel of the given size, all set to ``value``."""
    raster_capacity(raster_size)
    return SparseRaster(iterate_grid(raster_size), value)