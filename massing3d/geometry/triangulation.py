"""
Footprint triangulation for roof caps and bottom faces.

The default is a fan from vertex 0. It is exact for convex footprints only;
concave footprints can come out with overlapping or inverted triangles.
Pass strict=True to use ear clipping instead, which handles any simple
polygon at O(n^2) cost.
"""

import logging
from typing import Any, List, Tuple

import numpy as np

from .polygon import as_points, signed_area

logger = logging.getLogger(__name__)

Triangle = Tuple[int, int, int]

# Cross products at or below this are treated as collinear
_EPSILON = 1e-12


def fan_triangulate(count: int) -> List[Triangle]:
    """Fan triangles (0, i, i + 1) for a polygon with count vertices."""
    if count < 3:
        return []
    if count == 3:
        return [(0, 1, 2)]
    return [(0, i, i + 1) for i in range(1, count - 1)]


def ear_clip_triangulate(points: np.ndarray) -> List[Triangle]:
    """
    Triangulate a simple polygon by ear clipping.

    Triangles keep the winding of the input polygon. If no ear can be found
    (self-intersecting or fully degenerate input) the remaining vertices are
    fanned so the result still has n - 2 triangles.
    """
    count = len(points)
    if count < 3:
        return []
    if count == 3:
        return [(0, 1, 2)]

    orientation = 1.0 if signed_area(points) >= 0 else -1.0
    remaining = list(range(count))
    triangles: List[Triangle] = []

    while len(remaining) > 3:
        size = len(remaining)
        for k in range(size):
            prev_idx = remaining[k - 1]
            cur_idx = remaining[k]
            next_idx = remaining[(k + 1) % size]
            if _is_ear(points, prev_idx, cur_idx, next_idx, remaining, orientation):
                triangles.append((prev_idx, cur_idx, next_idx))
                del remaining[k]
                break
        else:
            logger.debug(f"No ear found with {size} vertices left, fanning remainder")
            triangles.extend(
                (remaining[0], remaining[i], remaining[i + 1])
                for i in range(1, size - 1)
            )
            return triangles

    triangles.append((remaining[0], remaining[1], remaining[2]))
    return triangles


def triangulate_polygon(vertices: Any, strict: bool = False) -> List[Triangle]:
    """
    Triangulate a footprint into index triples.

    Args:
        vertices: Footprint vertices (see as_points)
        strict: Use ear clipping instead of the convex-only fan

    Returns:
        List of (a, b, c) vertex index triples
    """
    points = as_points(vertices)
    if strict:
        return ear_clip_triangulate(points)
    return fan_triangulate(len(points))


def _cross(a: np.ndarray, b: np.ndarray, c: np.ndarray) -> float:
    return float((b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0]))


def _is_ear(points: np.ndarray, prev_idx: int, cur_idx: int, next_idx: int,
            remaining: List[int], orientation: float) -> bool:
    a, b, c = points[prev_idx], points[cur_idx], points[next_idx]

    # Reflex or collinear corner
    if _cross(a, b, c) * orientation <= _EPSILON:
        return False

    for idx in remaining:
        if idx in (prev_idx, cur_idx, next_idx):
            continue
        p = points[idx]
        if np.array_equal(p, a) or np.array_equal(p, b) or np.array_equal(p, c):
            continue
        if (_cross(a, b, p) * orientation >= 0 and
                _cross(b, c, p) * orientation >= 0 and
                _cross(c, a, p) * orientation >= 0):
            return False

    return True
