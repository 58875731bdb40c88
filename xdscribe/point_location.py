"""Point location against a closed polytope surface."""

from __future__ import annotations

from typing import Iterable

import numpy as np

from xdscribe.axis_distance import AxisDistance, DistanceResult
from xdscribe.kernel import MEPS
from xdscribe.locations import Location


def _equivalent(lhs: DistanceResult, rhs: DistanceResult) -> bool:
    return not lhs < rhs and not rhs < lhs


def locate_point(point, facets: Iterable) -> Location:
    """Locate ``point`` relative to a closed surface given by its facets.

    Counts crossings of the upward ray along the last axis; crossings at
    (nearly) the same distance, such as shared edges, are merged.
    """
    point = np.asarray(point, dtype=float)
    upper_distances: list[DistanceResult] = []

    for facet in facets:
        distance = AxisDistance(facet)(point)
        if distance and distance.value > -MEPS:
            if not any(_equivalent(distance, known) for known in upper_distances):
                upper_distances.append(distance)

    if upper_distances and min(d.value for d in upper_distances) < MEPS:
        return Location.BOUNDARY
    return Location.OUTER if len(upper_distances) % 2 == 0 else Location.INNER