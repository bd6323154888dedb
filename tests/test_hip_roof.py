import numpy as np
import pytest

from massing3d.geometry.roof_builder import build_hip_roof


def test_square_apex_and_corners(square):
    n = len(square)
    mesh = build_hip_roof(square, 12.0, 20.0)

    assert mesh.positions[n].tolist() == [5.0, 5.0, 20.0]
    assert np.all(mesh.positions[:n, 2] == 12.0)
    assert mesh.metadata['center_distance'] == pytest.approx(5.0)


def test_counts(square):
    n = len(square)
    mesh = build_hip_roof(square, 0.0, 5.0)

    assert mesh.vertex_count == 2 * n + 1
    assert mesh.triangle_count == n + (n - 2) + 2 * n


def test_top_faces_meet_at_apex(square):
    n = len(square)
    mesh = build_hip_roof(square, 0.0, 5.0)
    top = mesh.indices[:n]

    assert np.all(top[:, 2] == n)
    assert np.all(mesh.face_normals[:n, 2] > 0)


def test_ridge_direction_ignored(rectangle):
    along_x = build_hip_roof(rectangle, 0.0, 5.0, 'x')
    along_y = build_hip_roof(rectangle, 0.0, 5.0, 'y')

    assert np.array_equal(along_x.positions, along_y.positions)
    assert np.array_equal(along_x.indices, along_y.indices)


def test_center_on_outline_returns_none():
    # Bounding box center (1, 1) lies on the diagonal edge
    triangle = [(0.0, 0.0), (2.0, 2.0), (0.0, 2.0)]
    assert build_hip_roof(triangle, 0.0, 5.0) is None


def test_all_points_coincide_returns_none():
    assert build_hip_roof([(1.0, 1.0)] * 4, 0.0, 5.0) is None


@pytest.mark.parametrize('base_z,ridge_z', [(5.0, 5.0), (5.0, 0.0)])
def test_no_rise_returns_none(square, base_z, ridge_z):
    assert build_hip_roof(square, base_z, ridge_z) is None


def test_too_few_vertices_returns_none():
    assert build_hip_roof([(0, 0), (4, 0)], 0.0, 5.0) is None


def test_idempotent(rectangle):
    first = build_hip_roof(rectangle, 0.0, 5.0)
    second = build_hip_roof(rectangle, 0.0, 5.0)

    assert np.array_equal(first.positions, second.positions)
    assert np.array_equal(first.indices, second.indices)
