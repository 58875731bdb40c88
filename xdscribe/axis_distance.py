"""Distance from points to a facet along the last coordinate axis."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from xdscribe.kernel import DIMS, MEPS
from xdscribe.locations import Location, location_in_face
from xdscribe.shapes import bounding_box


@dataclass(frozen=True, eq=False)
class DistanceResult:
    """Signed distance along the last axis and where the projection hits the facet."""

    value: float
    location: Location

    def __bool__(self) -> bool:
        return self.location != Location.OUTER

    def __lt__(self, other: "DistanceResult") -> bool:
        # Distances differing by less than MEPS are considered the same.
        return self.value < other.value - MEPS

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DistanceResult):
            return NotImplemented
        return self.location == other.location and abs(self.value - other.value) < MEPS

    __hash__ = None  # tolerant equality cannot be hashed


class AxisDistance:
    """Distance along the last axis to a fixed facet, for many query points."""

    def __init__(self, facet) -> None:
        points = np.asarray(facet, dtype=float).reshape(DIMS, DIMS)
        self._bounding_box = bounding_box(points)
        self._origin = points[0].copy()

        # Ray-plane intersection in facet coordinates (Moller-Trumbore style);
        # the ray is collinear with the last axis.
        matrix = np.zeros((DIMS, DIMS))
        matrix[DIMS - 1, 0] = -1.0
        for i in range(1, DIMS):
            matrix[:, i] = points[i] - self._origin

        singular = np.linalg.svd(matrix, compute_uv=False)
        scale = float(singular.max())
        rank = int(np.count_nonzero(singular > MEPS * scale)) if scale > 0.0 else 0
        self._inverse = np.linalg.inv(matrix) if rank == DIMS else None

    def __call__(self, point) -> DistanceResult:
        point = np.asarray(point, dtype=float)
        low, high = self._bounding_box.min, self._bounding_box.max
        for i in range(DIMS - 1):
            if point[i] < low[i] or point[i] > high[i]:
                return DistanceResult(-1.0, Location.OUTER)
        # Vertical facets are skipped assuming closed polytopes.
        if self._inverse is None:
            return DistanceResult(-1.0, Location.OUTER)

        solution = self._inverse @ (point - self._origin)
        return DistanceResult(float(solution[0]), location_in_face(solution[1:]))