"""Overlap test between a simplex and facets by the separating axis theorem."""

from __future__ import annotations

from itertools import combinations

import numpy as np

from xdscribe.kernel import DIMS, MEPS
from xdscribe.locations import Location
from xdscribe.perpendicular import common_perpendicular


def _projection(points: np.ndarray, direction: np.ndarray) -> tuple[float, float]:
    values = points @ direction
    return float(values.min()), float(values.max())


class SimplexFacetOverlap:
    """Tests one simplex against many facets.

    Returns INNER on overlap, BOUNDARY on touching and OUTER when disjoint.
    """

    def __init__(self, simplex) -> None:
        self._simplex = np.asarray(simplex, dtype=float).reshape(DIMS + 1, DIMS)

    def __call__(self, facet) -> Location:
        facet_points = np.asarray(facet, dtype=float).reshape(DIMS, DIMS)
        result = Location.INNER
        for simplex_face_dim in range(DIMS):
            for simplex_face in combinations(self._simplex, simplex_face_dim + 1):
                for facet_face in combinations(facet_points, DIMS - simplex_face_dim):
                    axis = common_perpendicular(simplex_face, facet_face)
                    simplex_min, simplex_max = _projection(self._simplex, axis)
                    facet_min, facet_max = _projection(facet_points, axis)

                    if simplex_max < facet_min - MEPS or facet_max < simplex_min - MEPS:
                        result = Location.OUTER
                    elif simplex_max < facet_min + MEPS or facet_max < simplex_min + MEPS:
                        if result == Location.INNER:
                            result = Location.BOUNDARY
        return result