"""
Geometry module for massing3d.
Contains footprint helpers, roof pitch, roof mesh generation and massing.
"""

from .mesh import RoofMesh
from .pitch import RoofPitch, calculate_roof_pitch
from .triangulation import triangulate_polygon, fan_triangulate, ear_clip_triangulate
from .roof_builder import (
    RoofType,
    GableRoofBuilder, build_gable_roof,
    HipRoofBuilder, build_hip_roof,
    ShedRoofBuilder, build_shed_roof,
    generate_roof_geometry
)
from .massing import (
    BuildingCondition,
    RoofSettings,
    Floor,
    floor_stack,
    rectangle_footprint,
    resolve_ridge_height,
    total_building_height
)

__all__ = [
    'RoofMesh',
    'RoofPitch',
    'calculate_roof_pitch',
    'triangulate_polygon',
    'fan_triangulate',
    'ear_clip_triangulate',
    'RoofType',
    'GableRoofBuilder',
    'build_gable_roof',
    'HipRoofBuilder',
    'build_hip_roof',
    'ShedRoofBuilder',
    'build_shed_roof',
    'generate_roof_geometry',
    'BuildingCondition',
    'RoofSettings',
    'Floor',
    'floor_stack',
    'rectangle_footprint',
    'resolve_ridge_height',
    'total_building_height'
]
