"""
Single entry point that picks a roof builder by roof type.
"""

import logging
from typing import Any, Mapping, Optional

from ..mesh import RoofMesh
from .gable import GableRoofBuilder
from .hip import HipRoofBuilder
from .shed import ShedRoofBuilder
from .types import (
    DEFAULT_RIDGE_DIRECTION, DEFAULT_SHED_DIRECTION, RoofType, parse_roof_type
)

logger = logging.getLogger(__name__)


def _option(options: Mapping[str, Any], key: str, camel_key: str, default: Any) -> Any:
    value = options.get(key)
    if value is None:
        value = options.get(camel_key)
    return default if value is None else value


def generate_roof_geometry(vertices: Any, roof_type: Any, base_z: float,
                           ridge_z: float,
                           options: Optional[Mapping[str, Any]] = None) -> Optional[RoofMesh]:
    """
    Generate roof geometry for a footprint.

    Args:
        vertices: Footprint vertices
        roof_type: RoofType or tag ('flat', 'shed', 'gabled', 'hipped')
        base_z: Eave elevation
        ridge_z: Ridge elevation
        options: ridge_direction (default 'x'), shed_direction (default
            '+y') and strict_triangulation (default False). The editor's
            camelCase keys are accepted too.

    Returns:
        RoofMesh, or None for flat roofs, unknown types and degenerate input
    """
    options = options or {}
    ridge_direction = _option(options, 'ridge_direction', 'ridgeDirection',
                              DEFAULT_RIDGE_DIRECTION)
    shed_direction = _option(options, 'shed_direction', 'shedDirection',
                             DEFAULT_SHED_DIRECTION)
    strict = bool(_option(options, 'strict_triangulation', 'strictTriangulation', False))

    kind = parse_roof_type(roof_type)
    if kind is RoofType.SHED:
        builder = ShedRoofBuilder(strict_triangulation=strict)
        return builder.build_shed_roof(vertices, base_z, ridge_z, shed_direction)
    if kind is RoofType.GABLED:
        builder = GableRoofBuilder(strict_triangulation=strict)
        return builder.build_gable_roof(vertices, base_z, ridge_z, ridge_direction)
    if kind is RoofType.HIPPED:
        builder = HipRoofBuilder(strict_triangulation=strict)
        return builder.build_hip_roof(vertices, base_z, ridge_z, ridge_direction)

    if kind is None:
        logger.debug(f"Unrecognized roof type {roof_type!r}, no geometry")
    return None
