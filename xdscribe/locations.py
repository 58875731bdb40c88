"""Point locations relative to geometric entities."""

from __future__ import annotations

from enum import IntEnum
from typing import Sequence

from xdscribe.kernel import MEPS


class Location(IntEnum):
    OUTER = 0
    BOUNDARY = 1
    INNER = 2


def location_in_face(base_coordinates: Sequence[float]) -> Location:
    """Locate a point given by its coordinates over the basis induced by a face.

    The face is the simplex spanned by the origin and the basis vectors.
    """
    total = 0.0
    boundary = False
    for coordinate in base_coordinates:
        coordinate = float(coordinate)
        if coordinate < -MEPS or coordinate > 1.0 + MEPS:
            return Location.OUTER
        if coordinate < MEPS or coordinate > 1.0 - MEPS:
            boundary = True
        total += coordinate

    if total > 1.0 + MEPS:
        return Location.OUTER
    if total > 1.0 - MEPS:
        boundary = True
    return Location.BOUNDARY if boundary else Location.INNER