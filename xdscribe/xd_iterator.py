"""Iteration over all integer points of a rectangular grid."""

from __future__ import annotations

from itertools import product
from typing import Iterator, Sequence

from xdscribe.kernel import DIMS, Coordinates


def iterate_grid(size: Sequence[int], dims: int = DIMS) -> Iterator[Coordinates]:
    """Yield grid coordinates with the first axis varying fastest.

    Only the first ``dims`` entries of ``size`` are used; the remaining
    coordinates are always zero.
    """
    if not 0 <= dims <= DIMS:
        raise ValueError(f"dims must lie between 0 and {DIMS}, got {dims}")
    padding = (0,) * (DIMS - dims)
    ranges = [range(int(size[axis])) for axis in reversed(range(dims))]
    for combination in product(*ranges):
        yield tuple(reversed(combination)) + padding