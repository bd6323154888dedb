"""
Shed roof builder for creating 3D shed roof geometry.
Handles a single plane rising linearly across the footprint bounding box.
"""

import logging
from typing import Any, Optional

import numpy as np

from ..mesh import RoofMesh
from ..polygon import PolygonBounds, polygon_bounds
from .base import RoofBuilderBase
from .types import DEFAULT_SHED_DIRECTION, SHED_DIRECTIONS, RoofType

logger = logging.getLogger(__name__)


class ShedRoofBuilder(RoofBuilderBase):
    """Builds 3D shed roof geometry."""

    roof_type = RoofType.SHED.value

    def __init__(self,
                 default_direction: str = DEFAULT_SHED_DIRECTION,
                 strict_triangulation: bool = False):
        """
        Initialize the shed roof builder.

        Args:
            default_direction: Slope direction used when none is given
            strict_triangulation: Ear-clip the roof caps
        """
        super().__init__(strict_triangulation=strict_triangulation)
        self.default_direction = default_direction

    def build_shed_roof(self, vertices: Any, base_z: float, ridge_z: float,
                        shed_direction: Optional[str] = None) -> Optional[RoofMesh]:
        """
        Build a shed roof over a footprint.

        Args:
            vertices: Footprint vertices
            base_z: Low eave elevation
            ridge_z: High eave elevation
            shed_direction: '+x', '-x', '+y' or '-y', low side to high side

        Returns:
            RoofMesh with 2n vertices, or None if no roof applies
        """
        points = self._prepare_footprint(vertices, base_z, ridge_z)
        if points is None:
            return None

        direction = shed_direction
        if direction is None:
            direction = self.default_direction
        n = len(points)
        rise = ridge_z - base_z
        bounds = polygon_bounds(points)

        t = self._slope_parameter(points, bounds, direction)

        # Top ring 0..n-1, bottom ring n..2n-1
        top = np.column_stack([points, base_z + t * rise])
        bottom = np.column_stack([points, np.full(n, float(base_z))])
        positions = np.vstack([top, bottom])

        faces = list(self._cap_faces(points))
        faces.extend(self._bottom_faces(points, n))
        faces.extend(self._side_walls(n, 0, n))

        return RoofMesh(
            positions=positions,
            indices=faces,
            roof_type=self.roof_type,
            metadata={
                'shed_direction': direction,
                'rise': rise,
            }
        )

    def _slope_parameter(self, points: np.ndarray, bounds: PolygonBounds,
                         direction: str) -> np.ndarray:
        """Normalized position of each vertex along the slope, 0 low to 1 high."""
        if direction not in SHED_DIRECTIONS:
            logger.warning(f"Unknown shed direction {direction!r}, using '-y'")
            direction = '-y'
        axis, descending = SHED_DIRECTIONS[direction]

        lo, hi = bounds.axis_range(axis)
        extent = hi - lo
        if extent <= 0:
            # Zero extent along the slope axis: flat slab at base_z
            return np.zeros(len(points))

        coords = points[:, axis]
        if descending:
            return (hi - coords) / extent
        return (coords - lo) / extent


def build_shed_roof(vertices: Any, base_z: float, ridge_z: float,
                    shed_direction: str = DEFAULT_SHED_DIRECTION,
                    **kwargs) -> Optional[RoofMesh]:
    """
    Convenience function to build shed roof.

    Args:
        vertices: Footprint vertices
        base_z: Eave elevation
        ridge_z: High side elevation
        shed_direction: Slope direction
        **kwargs: Additional arguments for ShedRoofBuilder

    Returns:
        Shed roof mesh or None
    """
    builder = ShedRoofBuilder(**kwargs)
    return builder.build_shed_roof(vertices, base_z, ridge_z, shed_direction)
