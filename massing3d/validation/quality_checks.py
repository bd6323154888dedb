"""
Quality validation for generated roof meshes.
Checks that a mesh is renderable: finite, in-range, closed and consistently wound.
"""

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

import numpy as np

from ..geometry.mesh import RoofMesh

logger = logging.getLogger(__name__)


class ValidationLevel(Enum):
    """Validation levels."""
    BASIC = "basic"
    STANDARD = "standard"
    STRICT = "strict"


class ValidationResult(Enum):
    """Validation results."""
    PASS = "pass"
    WARNING = "warning"
    FAIL = "fail"


@dataclass
class ValidationCheck:
    """Individual validation check result."""
    name: str
    result: ValidationResult
    message: str
    value: Any
    threshold: Optional[Any] = None
    severity: str = "medium"


@dataclass
class ValidationReport:
    """Complete validation report."""
    timestamp: float
    validation_level: ValidationLevel
    overall_result: ValidationResult
    checks: List[ValidationCheck]
    summary: Dict[str, Any] = field(default_factory=dict)
    recommendations: List[str] = field(default_factory=list)


class RoofMeshValidator:
    """Validates roof mesh geometry."""

    def __init__(self, area_epsilon: float = 1e-9):
        """
        Args:
            area_epsilon: Faces with area at or below this count as degenerate
        """
        self.area_epsilon = area_epsilon

    def validate_mesh(self, mesh: RoofMesh) -> List[ValidationCheck]:
        """Run the basic checks that every renderable roof must pass."""
        checks = []

        face_count = mesh.triangle_count
        checks.append(ValidationCheck(
            name="face_count",
            result=ValidationResult.PASS if face_count > 0 else ValidationResult.FAIL,
            message=f"Mesh has {face_count} faces",
            value=face_count,
            threshold=1,
            severity="high" if face_count == 0 else "low"
        ))

        finite = bool(np.all(np.isfinite(mesh.positions)))
        checks.append(ValidationCheck(
            name="finite_positions",
            result=ValidationResult.PASS if finite else ValidationResult.FAIL,
            message="All positions are finite" if finite else "Positions contain NaN or inf",
            value=finite,
            severity="high" if not finite else "low"
        ))

        in_range = bool(
            face_count == 0 or
            (mesh.indices.min() >= 0 and mesh.indices.max() < mesh.vertex_count)
        )
        checks.append(ValidationCheck(
            name="index_range",
            result=ValidationResult.PASS if in_range else ValidationResult.FAIL,
            message="Indices reference existing vertices" if in_range
            else "Indices reference missing vertices",
            value=in_range,
            severity="high" if not in_range else "low"
        ))

        # Later checks index into positions
        if face_count == 0 or not in_range or not finite:
            return checks

        areas = mesh.to_trimesh().area_faces
        degenerate = int(np.sum(areas <= self.area_epsilon))
        # Zero-height walls on a shed's low side or along gable eaves are expected
        all_degenerate = degenerate == face_count
        checks.append(ValidationCheck(
            name="degenerate_faces",
            result=ValidationResult.FAIL if all_degenerate else ValidationResult.PASS,
            message=f"{degenerate} of {face_count} faces have zero area",
            value=degenerate,
            severity="high" if all_degenerate else "low"
        ))

        return checks

    def check_winding(self, mesh: RoofMesh) -> List[ValidationCheck]:
        """Closed-surface and winding checks over directed edges."""
        checks = []
        if mesh.triangle_count == 0:
            return checks

        edges = mesh.indices[:, [0, 1, 1, 2, 2, 0]].reshape(-1, 2)
        unique_edges, counts = np.unique(edges, axis=0, return_counts=True)

        duplicated = int(np.sum(counts > 1))
        checks.append(ValidationCheck(
            name="winding_consistency",
            result=ValidationResult.PASS if duplicated == 0 else ValidationResult.WARNING,
            message="Faces are consistently wound" if duplicated == 0
            else f"{duplicated} directed edges are shared by two faces",
            value=duplicated,
            threshold=0,
            severity="medium"
        ))

        edge_set = {tuple(edge) for edge in unique_edges.tolist()}
        open_edges = sum(1 for a, b in edge_set if (b, a) not in edge_set)
        checks.append(ValidationCheck(
            name="closed_surface",
            result=ValidationResult.PASS if open_edges == 0 else ValidationResult.WARNING,
            message="Surface is closed" if open_edges == 0
            else f"{open_edges} boundary edges",
            value=open_edges,
            threshold=0,
            severity="medium"
        ))

        return checks

    def check_roof_height(self, mesh: RoofMesh, base_z: float,
                          ridge_z: float, tolerance: float = 1e-9) -> ValidationCheck:
        """All vertices must lie between the eave and ridge elevations."""
        z = mesh.positions[:, 2]
        within = bool(np.all(z >= base_z - tolerance) and np.all(z <= ridge_z + tolerance))
        return ValidationCheck(
            name="height_range",
            result=ValidationResult.PASS if within else ValidationResult.FAIL,
            message=f"Vertex heights span {z.min():.3f} to {z.max():.3f}",
            value=(float(z.min()), float(z.max())),
            threshold=(base_z, ridge_z),
            severity="high" if not within else "low"
        )


class QualityValidator:
    """Aggregates roof mesh checks into a report."""

    def __init__(self, validation_level: ValidationLevel = ValidationLevel.STANDARD):
        self.validation_level = validation_level
        self.mesh_validator = RoofMeshValidator()

    def validate_roof(self, mesh: RoofMesh,
                      base_z: Optional[float] = None,
                      ridge_z: Optional[float] = None) -> ValidationReport:
        """
        Validate a roof mesh.

        BASIC runs the renderability checks, STANDARD adds the eave/ridge
        height range when elevations are given, STRICT adds winding and
        closed-surface checks.
        """
        checks = self.mesh_validator.validate_mesh(mesh)
        renderable = all(c.result != ValidationResult.FAIL for c in checks)

        if renderable and self.validation_level != ValidationLevel.BASIC:
            if base_z is not None and ridge_z is not None:
                checks.append(self.mesh_validator.check_roof_height(mesh, base_z, ridge_z))

        if renderable and self.validation_level == ValidationLevel.STRICT:
            checks.extend(self.mesh_validator.check_winding(mesh))

        overall = self._determine_overall_result(checks)
        if overall == ValidationResult.FAIL:
            logger.warning(f"Roof mesh failed validation ({mesh.roof_type})")

        return ValidationReport(
            timestamp=time.time(),
            validation_level=self.validation_level,
            overall_result=overall,
            checks=checks,
            summary=self._generate_summary(checks),
            recommendations=self._generate_recommendations(checks)
        )

    def _determine_overall_result(self, checks: List[ValidationCheck]) -> ValidationResult:
        if any(c.result == ValidationResult.FAIL for c in checks):
            return ValidationResult.FAIL
        if any(c.result == ValidationResult.WARNING for c in checks):
            return ValidationResult.WARNING
        return ValidationResult.PASS

    def _generate_summary(self, checks: List[ValidationCheck]) -> Dict[str, Any]:
        return {
            'total_checks': len(checks),
            'passed': sum(1 for c in checks if c.result == ValidationResult.PASS),
            'warnings': sum(1 for c in checks if c.result == ValidationResult.WARNING),
            'failed': sum(1 for c in checks if c.result == ValidationResult.FAIL),
        }

    def _generate_recommendations(self, checks: List[ValidationCheck]) -> List[str]:
        recommendations = []
        for check in checks:
            if check.result == ValidationResult.PASS:
                continue
            if check.name == "finite_positions":
                recommendations.append("Check footprint coordinates and elevations for NaN values")
            elif check.name == "degenerate_faces":
                recommendations.append("Footprint may be collinear; check vertex positions")
            elif check.name == "winding_consistency":
                recommendations.append("Use a consistently wound, simple footprint")
            elif check.name == "closed_surface":
                recommendations.append("Remove duplicate or zero-length footprint edges")
            elif check.name == "height_range":
                recommendations.append("Ridge height must be above the eave height")
            else:
                recommendations.append(check.message)
        return recommendations


def validate_roof_mesh(mesh: RoofMesh, base_z: Optional[float] = None,
                       ridge_z: Optional[float] = None, **kwargs) -> ValidationReport:
    """
    Convenience function to validate a roof mesh.

    Args:
        mesh: Roof mesh
        base_z: Eave elevation, enables the height range check
        ridge_z: Ridge elevation
        **kwargs: Additional arguments for QualityValidator
    """
    validator = QualityValidator(**kwargs)
    return validator.validate_roof(mesh, base_z, ridge_z)
