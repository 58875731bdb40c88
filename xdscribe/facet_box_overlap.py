"""Overlap test between one facet and many equally sized axis-aligned boxes.

Follows the plane and edge-projection tests of Schwarz and Seidel's
surface voxelization; every derived quantity is computed lazily.
"""

from __future__ import annotations

from functools import cached_property
from typing import Sequence

import numpy as np

from xdscribe.kernel import DIMS, MEPS
from xdscribe.linear_test import LinearTest
from xdscribe.perpendicular import common_perpendicular, unit_normal
from xdscribe.shapes import bounding_box


def lowest_point(box_size: Sequence[float], normal: Sequence[float]) -> np.ndarray:
    """Corner offset of an axis-aligned box that is lowest along ``normal``."""
    box_size = np.asarray(box_size, dtype=float)
    normal = np.asarray(normal, dtype=float)
    return np.where(normal < -MEPS, box_size, 0.0)


def _edge_normal(axis: int, facet: np.ndarray, edge: int) -> np.ndarray:
    """Normal to a facet edge lying in the plane perpendicular to ``axis``.

    The edge is given by its starting vertex; the result points away from
    the facet.
    """
    edge_points = (facet[edge], facet[(edge + 1) % DIMS])
    axis_points = (np.zeros(DIMS), np.eye(DIMS)[axis])
    result = common_perpendicular(edge_points, axis_points)

    opposite = DIMS - 1 if edge == 0 else edge - 1
    if np.dot(result, facet[opposite] - facet[edge]) > 0.0:
        result = -result
    return result


class FacetBoxOverlap:
    """Tests whether boxes of a fixed size, given by their lower corners, touch a facet."""

    def __init__(self, box_size: Sequence[float], facet) -> None:
        if DIMS != 3:
            raise ValueError("facet-box overlap is defined for three dimensions only")
        box = np.array(box_size, dtype=float)
        if box.shape != (DIMS,):
            raise ValueError(f"box size must have {DIMS} coordinates")
        self._box_size = box
        self._facet = np.array(facet, dtype=float).reshape(DIMS, DIMS)
        self._bounding_box = bounding_box(self._facet)

    @cached_property
    def _normal(self) -> np.ndarray:
        return unit_normal(self._facet)

    @cached_property
    def _plane_tests(self) -> tuple[LinearTest, LinearTest]:
        normal = self._normal
        critical = lowest_point(self._box_size, normal)
        origin = self._facet[0]
        return (
            LinearTest(normal, float(np.dot(normal, critical - origin))),
            LinearTest(normal, float(np.dot(normal, self._box_size - critical - origin))),
        )

    @cached_property
    def _axis_degenerate(self) -> tuple[bool, ...]:
        return tuple(bool(abs(component) < MEPS) for component in self._normal)

    @cached_property
    def _edge_tests(self) -> list[list[LinearTest]]:
        tests = []
        for axis in range(DIMS):
            axis_tests = []
            for edge in range(DIMS):
                normal = _edge_normal(axis, self._facet, edge)
                critical = lowest_point(self._box_size, normal)
                axis_tests.append(
                    LinearTest(normal, float(np.dot(normal, critical - self._facet[edge])))
                )
            tests.append(axis_tests)
        return tests

    def __call__(self, lower_corner) -> bool:
        corner = np.asarray(lower_corner, dtype=float)
        if np.any(corner > self._bounding_box.max) or np.any(
            corner + self._box_size < self._bounding_box.min
        ):
            return False

        first, second = self._plane_tests
        if first(corner) * second(corner) > 0.0:
            return False

        for degenerate, axis_tests in zip(self._axis_degenerate, self._edge_tests):
            if degenerate:
                continue
            if any(test(corner) > MEPS for test in axis_tests):
                return False
        return True