"""
Hip roof builder for creating 3D hip roof geometry.

All sides slope toward a single ridge point at the footprint center. Vertex
heights scale with distance to the outline, normalized by the distance
sampled at the center. This stands in for the true inradius and is only
exact for regular footprints; elongated or irregular footprints get a
pyramid rather than a medial-axis hip.
"""

import logging
import math
from typing import Any, Optional

import numpy as np

from ..mesh import RoofMesh
from ..polygon import min_edge_distance, polygon_bounds
from .base import RoofBuilderBase
from .types import RoofType

logger = logging.getLogger(__name__)


class HipRoofBuilder(RoofBuilderBase):
    """Builds 3D hip roof geometry."""

    roof_type = RoofType.HIPPED.value

    def build_hip_roof(self, vertices: Any, base_z: float, ridge_z: float,
                       ridge_direction: Optional[str] = None) -> Optional[RoofMesh]:
        """
        Build a hip roof over a footprint.

        Args:
            vertices: Footprint vertices
            base_z: Eave elevation
            ridge_z: Apex elevation
            ridge_direction: Accepted for a uniform signature; the single
                point ridge has no axis

        Returns:
            RoofMesh with 2n + 1 vertices, or None if no roof applies
        """
        points = self._prepare_footprint(vertices, base_z, ridge_z)
        if points is None:
            return None

        bounds = polygon_bounds(points)
        center = bounds.center
        max_dist = min_edge_distance(center, points)
        if not (max_dist > 0 and math.isfinite(max_dist)):
            logger.debug(f"No hipped roof: degenerate footprint (center distance {max_dist})")
            return None

        n = len(points)
        rise = ridge_z - base_z

        distances = np.array([min_edge_distance(p, points) for p in points])
        top = np.column_stack([points, base_z + (distances / max_dist) * rise])
        apex = np.array([[center[0], center[1], ridge_z]], dtype=float)
        bottom = np.column_stack([points, np.full(n, float(base_z))])

        # Top ring 0..n-1, apex n, bottom ring n+1..2n
        positions = np.vstack([top, apex, bottom])
        apex_idx = n
        bottom_offset = n + 1

        faces = [(i, (i + 1) % n, apex_idx) for i in range(n)]
        faces.extend(self._bottom_faces(points, bottom_offset))
        faces.extend(self._side_walls(n, 0, bottom_offset))

        return RoofMesh(
            positions=positions,
            indices=faces,
            roof_type=self.roof_type,
            metadata={
                'center_distance': max_dist,
                'rise': rise,
            }
        )


def build_hip_roof(vertices: Any, base_z: float, ridge_z: float,
                   ridge_direction: Optional[str] = None,
                   **kwargs) -> Optional[RoofMesh]:
    """
    Convenience function to build hip roof.

    Args:
        vertices: Footprint vertices
        base_z: Eave elevation
        ridge_z: Apex elevation
        ridge_direction: Ignored
        **kwargs: Additional arguments for HipRoofBuilder

    Returns:
        Hip roof mesh or None
    """
    builder = HipRoofBuilder(**kwargs)
    return builder.build_hip_roof(vertices, base_z, ridge_z, ridge_direction)
