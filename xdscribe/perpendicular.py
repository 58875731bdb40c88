"""Vectors orthogonal to pairs of faces."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from xdscribe.kernel import DIMS, MEPS


def _as_points(points) -> np.ndarray:
    return np.asarray([np.asarray(p, dtype=float) for p in points], dtype=float).reshape(
        -1, DIMS
    )


def common_perpendicular(lhs: Sequence, rhs: Sequence) -> np.ndarray:
    """One vector orthogonal to both faces; they must hold DIMS + 1 points together."""
    lhs_points = _as_points(lhs)
    rhs_points = _as_points(rhs)
    if len(lhs_points) < 1 or len(rhs_points) < 1:
        raise ValueError("each face needs at least one point")
    if len(lhs_points) + len(rhs_points) != DIMS + 1:
        raise ValueError(f"faces must hold {DIMS + 1} points together")

    rows = np.vstack(
        (lhs_points[1:] - lhs_points[0], rhs_points[1:] - rhs_points[0])
    )
    _, singular, vt = np.linalg.svd(rows, full_matrices=True)
    scale = float(singular.max()) if singular.size else 0.0
    rank = int(np.count_nonzero(singular > MEPS * scale)) if scale > 0.0 else 0
    return vt[rank].copy()


def unit_normal(facet: Sequence) -> np.ndarray:
    """One of the two unit normals of a facet."""
    result = common_perpendicular(facet, [np.zeros(DIMS)])
    return result / np.linalg.norm(result)