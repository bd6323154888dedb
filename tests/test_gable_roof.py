import numpy as np
import pytest

from massing3d.geometry.roof_builder import GableRoofBuilder, build_gable_roof


def test_ridge_along_x(rectangle):
    n = len(rectangle)
    mesh = build_gable_roof(rectangle, 0.0, 6.0, 'x')
    ridge = mesh.positions[n:n + 2]

    assert ridge[0].tolist() == [0.0, 5.0, 6.0]
    assert ridge[1].tolist() == [20.0, 5.0, 6.0]
    assert mesh.metadata['ridge_length'] == pytest.approx(20.0)


def test_ridge_along_y(rectangle):
    n = len(rectangle)
    mesh = build_gable_roof(rectangle, 0.0, 6.0, 'y')
    ridge = mesh.positions[n:n + 2]

    assert ridge[0].tolist() == [10.0, 0.0, 6.0]
    assert ridge[1].tolist() == [10.0, 10.0, 6.0]


def test_counts(rectangle):
    n = len(rectangle)
    mesh = build_gable_roof(rectangle, 0.0, 6.0)

    assert mesh.vertex_count == 2 * n + 2
    # two slope quads, two gable ends, bottom cap, 2n wall triangles
    assert mesh.triangle_count == 4 + 2 + (n - 2) + 2 * n
    assert np.all(mesh.positions[:n, 2] == 0.0)
    assert np.all(mesh.positions[n + 2:, 2] == 0.0)


def test_gable_ends_close_to_nearest_ridge_end(rectangle):
    n = len(rectangle)
    mesh = build_gable_roof(rectangle, 0.0, 6.0, 'x')
    faces = [tuple(f) for f in mesh.indices.tolist()]

    # Edge 1 -> 2 (x = 20) crosses the ridge line and closes on the ridge end
    assert (1, 2, n + 1) in faces
    # Edge 3 -> 0 (x = 0) closes on the ridge start
    assert (3, 0, n) in faces


def test_slopes_face_up_and_out(rectangle):
    mesh = build_gable_roof(rectangle, 0.0, 6.0, 'x')
    # Per edge: quad (2), gable, quad (2), gable
    normals = mesh.face_normals[:6]

    front, back = normals[[0, 1]], normals[[3, 4]]
    assert np.all(front[:, 2] > 0) and np.all(front[:, 1] < 0)
    assert np.all(back[:, 2] > 0) and np.all(back[:, 1] > 0)

    right_gable, left_gable = normals[2], normals[5]
    assert right_gable[2] == pytest.approx(0.0) and right_gable[0] > 0
    assert left_gable[2] == pytest.approx(0.0) and left_gable[0] < 0


def test_degenerate_footprint_returns_none():
    # No depth across an x ridge
    line = [(0.0, 0.0), (5.0, 0.0), (10.0, 0.0)]
    assert build_gable_roof(line, 0.0, 5.0, 'x') is None


@pytest.mark.parametrize('base_z,ridge_z', [(3.0, 3.0), (3.0, 1.0)])
def test_no_rise_returns_none(rectangle, base_z, ridge_z):
    assert build_gable_roof(rectangle, base_z, ridge_z) is None


def test_too_few_vertices_returns_none():
    assert build_gable_roof([(0, 0), (1, 0)], 0.0, 5.0) is None


def test_strict_triangulation_bottom(l_shape):
    fan = GableRoofBuilder().build_gable_roof(l_shape, 0.0, 1.0, 'x')
    strict = GableRoofBuilder(strict_triangulation=True).build_gable_roof(l_shape, 0.0, 1.0, 'x')

    assert fan.vertex_count == strict.vertex_count == 2 * len(l_shape) + 2
    assert fan.triangle_count == strict.triangle_count
    assert not np.array_equal(fan.indices, strict.indices)


def test_idempotent(rectangle):
    first = build_gable_roof(rectangle, 2.0, 7.0, 'y')
    second = build_gable_roof(rectangle, 2.0, 7.0, 'y')

    assert np.array_equal(first.positions, second.positions)
    assert np.array_equal(first.indices, second.indices)


def test_missing_direction_uses_builder_default(rectangle):
    mesh = GableRoofBuilder(default_direction='y').build_gable_roof(rectangle, 0.0, 6.0)
    assert mesh.metadata['ridge_direction'] == 'y'


@pytest.mark.parametrize('direction', ['z', ''])
def test_unknown_direction_falls_back_to_y(rectangle, caplog, direction):
    mesh = GableRoofBuilder().build_gable_roof(rectangle, 0.0, 6.0, direction)

    assert mesh.metadata['ridge_direction'] == 'y'
    assert 'Unknown ridge direction' in caplog.text
