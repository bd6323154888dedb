"""
Roof builder module for massing3d.
Contains the sloped roof builders and the roof type dispatcher.
"""

from .types import RoofType, SHED_DIRECTIONS, RIDGE_DIRECTIONS, parse_roof_type
from .gable import GableRoofBuilder, build_gable_roof
from .hip import HipRoofBuilder, build_hip_roof
from .shed import ShedRoofBuilder, build_shed_roof
from .dispatch import generate_roof_geometry

__all__ = [
    'RoofType',
    'SHED_DIRECTIONS',
    'RIDGE_DIRECTIONS',
    'parse_roof_type',
    'GableRoofBuilder',
    'build_gable_roof',
    'HipRoofBuilder',
    'build_hip_roof',
    'ShedRoofBuilder',
    'build_shed_roof',
    'generate_roof_geometry'
]
