"""Basic geometric constants and integer grid helpers."""

from __future__ import annotations

from typing import Sequence

# Solutions are supported up to 1e-5 precision with double epsilon ~1e-16.
MEPS = 5e-11
DIMS = 3

Coordinates = tuple[int, ...]


def int_floor(x: float) -> int:
    """Floor of ``x`` tolerant to values lying within MEPS below an integer."""
    result = int(x + MEPS)
    return result - 1 if x < -MEPS else result


def floor_point(point: Sequence[float]) -> Coordinates:
    """Integer grid coordinates of the voxel holding ``point``."""
    return tuple(int_floor(float(value)) for value in point)


def preceding(lhs: Sequence[int], rhs: Sequence[int]) -> bool:
    """Lexicographic strict ordering of grid coordinates."""
    return tuple(int(c) for c in lhs) < tuple(int(c) for c in rhs)