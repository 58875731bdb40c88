"""Decompositions of polytopes into convex parts given by their points."""

from __future__ import annotations

from typing import Callable, Iterator

import numpy as np

from xdscribe.kernel import DIMS
from xdscribe.polytope import Polytope

ConvexDecomposition = Iterator[np.ndarray]
ConvexDecompositor = Callable[[Polytope], ConvexDecomposition]


def dummy_decomposition(polytope: Polytope) -> ConvexDecomposition:
    """Yield the polytope's vertices as one part; convexity is not checked."""
    yield polytope.vertices


def star_decomposition(polytope: Polytope) -> ConvexDecomposition:
    """Yield a simplex from the origin to every facet.

    The polytope is assumed star-shaped around the origin; this is not checked.
    """
    origin = np.zeros((1, DIMS))
    for facet in polytope.facet_geometries():
        yield np.vstack((origin, facet))