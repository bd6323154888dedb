"""
Validation module for massing3d.
"""

from .quality_checks import (
    QualityValidator,
    RoofMeshValidator,
    ValidationCheck,
    ValidationLevel,
    ValidationReport,
    ValidationResult,
    validate_roof_mesh
)

__all__ = [
    'QualityValidator',
    'RoofMeshValidator',
    'ValidationCheck',
    'ValidationLevel',
    'ValidationReport',
    'ValidationResult',
    'validate_roof_mesh'
]
