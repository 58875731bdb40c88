"""Placements (centred boxes or balls) and axis-aligned bounding boxes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from xdscribe.kernel import DIMS


def _frozen_point(values) -> np.ndarray:
    point = np.array(values, dtype=float)
    if point.shape != (DIMS,):
        raise ValueError(f"expected a point of {DIMS} coordinates, got shape {point.shape}")
    point.flags.writeable = False
    return point


@dataclass(frozen=True, eq=False)
class Placement:
    """A centre and a radius; as a box the radius is a half side (uniform norm)."""

    center: np.ndarray
    radius: float

    def __post_init__(self) -> None:
        if self.radius < 0.0:
            raise ValueError(f"radius must be non-negative, got {self.radius}")
        object.__setattr__(self, "center", _frozen_point(self.center))
        object.__setattr__(self, "radius", float(self.radius))


Box = Placement


@dataclass(frozen=True, eq=False)
class BoundingBox:
    """Axis-aligned box given by its lowest and highest corners."""

    min: np.ndarray
    max: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "min", _frozen_point(self.min))
        object.__setattr__(self, "max", _frozen_point(self.max))

    def to_box(self) -> Placement:
        """Cube centred in this box with half side of its largest extent."""
        return Placement(
            (self.max + self.min) / 2.0,
            float(np.max(self.max - self.min)) / 2.0,
        )


def bounding_box(points: Iterable) -> BoundingBox:
    """Smallest axis-aligned box holding all ``points``."""
    array = np.asarray(list(points), dtype=float)
    if array.size == 0:
        raise ValueError("cannot bound an empty set of points")
    array = array.reshape(-1, DIMS)
    return BoundingBox(array.min(axis=0), array.max(axis=0))