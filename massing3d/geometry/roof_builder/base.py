"""
Shared guards and face assembly for the roof builders.

Every roof is a closed solid: a top surface, a bottom cap at the eave
elevation and side walls joining the two perimeter rings. Faces are wound
counter-clockwise when seen from outside, given a counter-clockwise
footprint.
"""

import logging
from typing import Any, List, Optional

import numpy as np

from ..polygon import as_points
from ..triangulation import Triangle, triangulate_polygon

logger = logging.getLogger(__name__)


class RoofBuilderBase:
    """Common behaviour of the sloped roof builders."""

    roof_type = ''

    def __init__(self, strict_triangulation: bool = False):
        """
        Args:
            strict_triangulation: Ear-clip footprint caps instead of fanning
        """
        self.strict_triangulation = strict_triangulation

    def _prepare_footprint(self, vertices: Any, base_z: float,
                           ridge_z: float) -> Optional[np.ndarray]:
        """Return footprint points, or None when no roof should be built."""
        if ridge_z <= base_z:
            logger.debug(f"No {self.roof_type} roof: ridge {ridge_z} not above base {base_z}")
            return None

        points = as_points(vertices)
        if len(points) < 3:
            logger.debug(f"No {self.roof_type} roof: footprint has {len(points)} vertices")
            return None

        return points

    def _cap_faces(self, points: np.ndarray) -> List[Triangle]:
        return triangulate_polygon(points, strict=self.strict_triangulation)

    def _bottom_faces(self, points: np.ndarray, offset: int) -> List[Triangle]:
        """Footprint cap facing down, vertices starting at offset."""
        return [
            (offset + a, offset + c, offset + b)
            for a, b, c in self._cap_faces(points)
        ]

    def _side_walls(self, count: int, top_offset: int,
                    bottom_offset: int) -> List[Triangle]:
        """Two outward-facing triangles per perimeter edge."""
        faces = []
        for i in range(count):
            j = (i + 1) % count
            top_i, top_j = top_offset + i, top_offset + j
            bottom_i, bottom_j = bottom_offset + i, bottom_offset + j
            faces.append((top_i, bottom_j, top_j))
            faces.append((top_i, bottom_i, bottom_j))
        return faces
