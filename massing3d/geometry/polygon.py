"""
Footprint polygon helpers shared by the roof builders.
Converts editor vertex records to numpy arrays and measures bounds/distances.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Iterable, Optional

import numpy as np


@dataclass(frozen=True)
class PolygonBounds:
    """Axis-aligned bounding box of a footprint."""
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def depth(self) -> float:
        return self.max_y - self.min_y

    @property
    def center_x(self) -> float:
        return (self.min_x + self.max_x) / 2

    @property
    def center_y(self) -> float:
        return (self.min_y + self.max_y) / 2

    @property
    def center(self) -> np.ndarray:
        return np.array([self.center_x, self.center_y])

    def axis_range(self, axis: int):
        """Return (min, max) along axis 0 (x) or 1 (y)."""
        if axis == 0:
            return self.min_x, self.max_x
        return self.min_y, self.max_y


def as_points(vertices: Optional[Iterable[Any]]) -> np.ndarray:
    """
    Convert footprint vertices to a float (n, 2) array.

    Accepts (x, y) pairs, mappings with 'x'/'y' keys (editor vertex records,
    extra keys such as 'id' are ignored) or an existing numpy array.
    Extra coordinates beyond x/y are dropped.

    Raises:
        ValueError: if a vertex cannot be read as two numbers
    """
    if vertices is None:
        return np.empty((0, 2))

    if isinstance(vertices, np.ndarray):
        raw = vertices
    else:
        raw = []
        for vertex in vertices:
            if isinstance(vertex, Mapping):
                try:
                    raw.append((vertex['x'], vertex['y']))
                except KeyError as e:
                    raise ValueError(f"Vertex record missing coordinate {e}") from e
            else:
                try:
                    raw.append(tuple(vertex)[:2])
                except TypeError as e:
                    raise ValueError(f"Vertex {vertex!r} is not a coordinate pair") from e

    points = np.asarray(raw, dtype=float)
    if points.size == 0:
        return np.empty((0, 2))
    if points.ndim != 2 or points.shape[1] < 2:
        raise ValueError(f"Expected 2D points, got array of shape {points.shape}")

    return np.ascontiguousarray(points[:, :2])


def polygon_bounds(points: np.ndarray) -> PolygonBounds:
    """Bounding box of an (n, 2) point array."""
    mins = points.min(axis=0)
    maxs = points.max(axis=0)
    return PolygonBounds(
        min_x=float(mins[0]), max_x=float(maxs[0]),
        min_y=float(mins[1]), max_y=float(maxs[1])
    )


def signed_area(points: np.ndarray) -> float:
    """Shoelace area; positive for counter-clockwise winding."""
    x = points[:, 0]
    y = points[:, 1]
    return float(0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def min_edge_distance(point: np.ndarray, points: np.ndarray) -> float:
    """
    Minimum distance from a point to the closed polygon outline.

    Zero-length edges are skipped. Returns inf when every edge is
    zero-length.
    """
    starts = points
    deltas = np.roll(points, -1, axis=0) - starts
    len_sq = np.einsum('ij,ij->i', deltas, deltas)

    valid = len_sq > 0
    if not np.any(valid):
        return float('inf')
    starts = starts[valid]
    deltas = deltas[valid]
    len_sq = len_sq[valid]

    t = np.einsum('ij,ij->i', point - starts, deltas) / len_sq
    t = np.clip(t, 0.0, 1.0)
    closest = starts + t[:, None] * deltas

    return float(np.min(np.linalg.norm(point - closest, axis=1)))
