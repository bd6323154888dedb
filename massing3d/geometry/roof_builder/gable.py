"""
Gable roof builder for creating 3D gable roof geometry.
Handles ridge line placement, sloped planes and triangular gable ends.
"""

import logging
from typing import Any, List, Optional, Tuple

import numpy as np

from ..mesh import RoofMesh
from ..polygon import polygon_bounds
from ..triangulation import Triangle
from .base import RoofBuilderBase
from .types import DEFAULT_RIDGE_DIRECTION, RIDGE_DIRECTIONS, RoofType

logger = logging.getLogger(__name__)


class GableRoofBuilder(RoofBuilderBase):
    """Builds 3D gable roof geometry."""

    roof_type = RoofType.GABLED.value

    def __init__(self,
                 default_direction: str = DEFAULT_RIDGE_DIRECTION,
                 strict_triangulation: bool = False):
        """
        Initialize the gable roof builder.

        Args:
            default_direction: Ridge axis used when none is given
            strict_triangulation: Ear-clip the bottom cap
        """
        super().__init__(strict_triangulation=strict_triangulation)
        self.default_direction = default_direction

    def build_gable_roof(self, vertices: Any, base_z: float, ridge_z: float,
                         ridge_direction: Optional[str] = None) -> Optional[RoofMesh]:
        """
        Build a gable roof over a footprint.

        The ridge spans the bounding box along the ridge axis and passes
        through the footprint center on the other axis. Footprint edges on
        one side of the ridge become sloped planes; edges crossing it close
        off as gable-end triangles.

        Args:
            vertices: Footprint vertices
            base_z: Eave elevation
            ridge_z: Ridge elevation
            ridge_direction: 'x' or 'y'

        Returns:
            RoofMesh with 2n + 2 vertices, or None if no roof applies
        """
        points = self._prepare_footprint(vertices, base_z, ridge_z)
        if points is None:
            return None

        if ridge_direction is None:
            ridge_direction = self.default_direction
        axis = self._ridge_axis(ridge_direction)
        perp = 1 - axis
        bounds = polygon_bounds(points)

        perp_lo, perp_hi = bounds.axis_range(perp)
        if perp_hi - perp_lo <= 0:
            logger.debug("No gabled roof: footprint has no extent across the ridge")
            return None

        n = len(points)
        ridge_start, ridge_end = self._ridge_endpoints(bounds, axis, ridge_z)

        # Eave ring 0..n-1, ridge n and n+1, bottom ring n+2..2n+1
        eaves = np.column_stack([points, np.full(n, float(base_z))])
        positions = np.vstack([eaves, ridge_start, ridge_end, eaves])
        start_idx, end_idx = n, n + 1
        bottom_offset = n + 2

        faces = self._slope_faces(points, bounds, axis, start_idx, end_idx)
        faces.extend(self._bottom_faces(points, bottom_offset))
        faces.extend(self._side_walls(n, 0, bottom_offset))

        ridge_length = float(np.linalg.norm(ridge_end - ridge_start))
        return RoofMesh(
            positions=positions,
            indices=faces,
            roof_type=self.roof_type,
            metadata={
                'ridge_direction': 'x' if axis == 0 else 'y',
                'ridge_length': ridge_length,
                'rise': ridge_z - base_z,
            }
        )

    def _ridge_axis(self, direction: str) -> int:
        if direction not in RIDGE_DIRECTIONS:
            logger.warning(f"Unknown ridge direction {direction!r}, using 'y'")
            return RIDGE_DIRECTIONS['y']
        return RIDGE_DIRECTIONS[direction]

    def _ridge_endpoints(self, bounds, axis: int,
                         ridge_z: float) -> Tuple[np.ndarray, np.ndarray]:
        """Ridge ends at the bounding box extremes along the ridge axis."""
        lo, hi = bounds.axis_range(axis)
        center = bounds.center

        start = np.array([center[0], center[1], ridge_z], dtype=float)
        end = start.copy()
        start[axis] = lo
        end[axis] = hi
        return start, end

    def _slope_faces(self, points: np.ndarray, bounds, axis: int,
                     start_idx: int, end_idx: int) -> List[Triangle]:
        """Sloped quads and gable-end triangles, one group per footprint edge."""
        perp = 1 - axis
        side = np.sign(points[:, perp] - bounds.center[perp])
        along = points[:, axis]
        lo, hi = bounds.axis_range(axis)
        along_center = (lo + hi) / 2

        faces = []
        n = len(points)
        for i in range(n):
            j = (i + 1) % n
            if side[i] * side[j] < 0:
                # Edge crosses the ridge line: gable end
                midpoint = (along[i] + along[j]) / 2
                apex = start_idx if midpoint <= along_center else end_idx
                faces.append((i, j, apex))
            else:
                # Same side (or touching the ridge line): slope quad
                if along[i] <= along[j]:
                    ridge_i, ridge_j = start_idx, end_idx
                else:
                    ridge_i, ridge_j = end_idx, start_idx
                faces.append((i, j, ridge_j))
                faces.append((i, ridge_j, ridge_i))

        return faces


def build_gable_roof(vertices: Any, base_z: float, ridge_z: float,
                     ridge_direction: str = DEFAULT_RIDGE_DIRECTION,
                     **kwargs) -> Optional[RoofMesh]:
    """
    Convenience function to build gable roof.

    Args:
        vertices: Footprint vertices
        base_z: Eave elevation
        ridge_z: Ridge elevation
        ridge_direction: Ridge axis
        **kwargs: Additional arguments for GableRoofBuilder

    Returns:
        Gable roof mesh or None
    """
    builder = GableRoofBuilder(**kwargs)
    return builder.build_gable_roof(vertices, base_z, ridge_z, ridge_direction)
