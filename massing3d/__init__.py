"""
massing3d: roof massing geometry for zoning comparisons.

Generates shed, gabled and hipped roof meshes over building footprints,
with roof pitch analytics and an existing/proposed comparison pipeline.
"""

__version__ = "0.1.0"

from .geometry import (
    BuildingCondition,
    RoofMesh,
    RoofPitch,
    RoofSettings,
    RoofType,
    calculate_roof_pitch,
    generate_roof_geometry,
    triangulate_polygon
)
from .pipeline import RoofMassingPipeline, run_pipeline

__all__ = [
    'BuildingCondition',
    'RoofMesh',
    'RoofPitch',
    'RoofSettings',
    'RoofType',
    'calculate_roof_pitch',
    'generate_roof_geometry',
    'triangulate_polygon',
    'RoofMassingPipeline',
    'run_pipeline'
]
