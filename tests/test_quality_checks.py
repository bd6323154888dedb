import numpy as np
import pytest

from massing3d.geometry.mesh import RoofMesh
from massing3d.geometry.roof_builder import build_gable_roof, build_hip_roof, build_shed_roof
from massing3d.validation import (
    QualityValidator, RoofMeshValidator, ValidationLevel, ValidationResult, validate_roof_mesh
)


def _by_name(checks):
    return {c.name: c for c in checks}


@pytest.mark.parametrize('builder,args', [
    (build_shed_roof, ('+x',)),
    (build_gable_roof, ('x',)),
    (build_hip_roof, ()),
])
def test_generated_roofs_pass_strict(rectangle, builder, args):
    mesh = builder(rectangle, 3.0, 8.0, *args)
    report = validate_roof_mesh(mesh, 3.0, 8.0, validation_level=ValidationLevel.STRICT)

    checks = _by_name(report.checks)
    assert report.overall_result == ValidationResult.PASS
    assert checks['winding_consistency'].value == 0
    assert checks['closed_surface'].value == 0
    assert checks['height_range'].result == ValidationResult.PASS


def test_nan_positions_fail():
    mesh = RoofMesh(positions=[[0, 0, 0], [1, 0, np.nan], [0, 1, 0]], indices=[[0, 1, 2]])
    report = validate_roof_mesh(mesh)

    assert report.overall_result == ValidationResult.FAIL
    assert _by_name(report.checks)['finite_positions'].result == ValidationResult.FAIL
    assert report.recommendations


def test_out_of_range_indices_fail():
    mesh = RoofMesh(positions=[[0, 0, 0], [1, 0, 0], [0, 1, 0]], indices=[[0, 1, 5]])
    checks = _by_name(RoofMeshValidator().validate_mesh(mesh))

    assert checks['index_range'].result == ValidationResult.FAIL
    assert 'degenerate_faces' not in checks


def test_all_degenerate_fails():
    mesh = RoofMesh(positions=[[0, 0, 0], [1, 0, 0], [2, 0, 0]], indices=[[0, 1, 2]])
    checks = _by_name(RoofMeshValidator().validate_mesh(mesh))
    assert checks['degenerate_faces'].result == ValidationResult.FAIL


def test_some_degenerate_faces_pass(square):
    # Low side walls of a shed have zero height
    mesh = build_shed_roof(square, 0.0, 4.0, '+x')
    checks = _by_name(RoofMeshValidator().validate_mesh(mesh))

    assert checks['degenerate_faces'].result == ValidationResult.PASS
    assert checks['degenerate_faces'].value > 0


def test_inconsistent_winding_warns():
    mesh = RoofMesh(
        positions=[[0, 0, 0], [1, 0, 0], [0, 1, 0], [1, 1, 0]],
        indices=[[0, 1, 2], [0, 1, 3]]
    )
    checks = _by_name(RoofMeshValidator().check_winding(mesh))

    assert checks['winding_consistency'].result == ValidationResult.WARNING
    assert checks['closed_surface'].result == ValidationResult.WARNING


def test_height_range_outside_fails(square):
    mesh = build_hip_roof(square, 0.0, 5.0)
    check = RoofMeshValidator().check_roof_height(mesh, 0.0, 4.0)
    assert check.result == ValidationResult.FAIL


def test_basic_level_skips_height(square):
    mesh = build_hip_roof(square, 0.0, 5.0)
    report = QualityValidator(ValidationLevel.BASIC).validate_roof(mesh, 0.0, 4.0)

    assert 'height_range' not in _by_name(report.checks)
    assert report.summary['failed'] == 0
