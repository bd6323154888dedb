import numpy as np
import pytest

from massing3d.geometry.roof_builder import ShedRoofBuilder, build_shed_roof


def test_plus_x_slope(square):
    mesh = build_shed_roof(square, 0.0, 10.0, '+x')
    top = mesh.positions[:4]

    for x, y, z in top:
        if x == 0.0:
            assert z == pytest.approx(0.0)
        if x == 10.0:
            assert z == pytest.approx(10.0)


@pytest.mark.parametrize('direction,axis,high_at_max', [
    ('+x', 0, True), ('-x', 0, False), ('+y', 1, True), ('-y', 1, False),
])
def test_directions(rectangle, direction, axis, high_at_max):
    mesh = build_shed_roof(rectangle, 5.0, 9.0, direction)
    top = mesh.positions[:4]
    coords = top[:, axis]
    high = top[np.argmax(coords) if high_at_max else np.argmin(coords)]
    low = top[np.argmin(coords) if high_at_max else np.argmax(coords)]

    assert high[2] == pytest.approx(9.0)
    assert low[2] == pytest.approx(5.0)


def test_counts(rectangle):
    n = len(rectangle)
    mesh = build_shed_roof(rectangle, 0.0, 4.0)

    assert mesh.vertex_count == 2 * n
    # top cap + bottom cap + two per side
    assert mesh.triangle_count == 2 * (n - 2) + 2 * n
    assert np.all(mesh.positions[n:, 2] == 0.0)


def test_side_walls_face_outward(square):
    mesh = build_shed_roof(square, 0.0, 10.0, '+x')
    n = len(square)
    walls = mesh.indices[-2 * n:]
    normals = mesh.face_normals[-2 * n:]

    centroid = np.array([5.0, 5.0])
    for face, normal in zip(walls, normals):
        if np.linalg.norm(normal) == 0:
            continue  # zero-height wall on the low side
        face_center = mesh.positions[face][:, :2].mean(axis=0)
        assert np.dot(normal[:2], face_center - centroid) > 0


def test_bottom_faces_down(square):
    mesh = build_shed_roof(square, 0.0, 3.0)
    bottom_normals = mesh.face_normals[2:4]
    assert np.all(bottom_normals[:, 2] < 0)


def test_zero_extent_is_flat_not_nan():
    # All vertices share x, so '+x' has no extent
    sliver = [(5.0, 0.0), (5.0, 4.0), (5.0, 8.0)]
    mesh = build_shed_roof(sliver, 2.0, 6.0, '+x')

    assert mesh is not None
    assert np.all(np.isfinite(mesh.positions))
    assert np.all(mesh.positions[:, 2] == 2.0)


@pytest.mark.parametrize('base_z,ridge_z', [(10.0, 10.0), (10.0, 5.0)])
def test_no_rise_returns_none(square, base_z, ridge_z):
    assert build_shed_roof(square, base_z, ridge_z) is None


@pytest.mark.parametrize('vertices', [None, [], [(0, 0), (1, 1)]])
def test_too_few_vertices_returns_none(vertices):
    assert build_shed_roof(vertices, 0.0, 5.0) is None


@pytest.mark.parametrize('direction', ['diagonal', ''])
def test_unknown_direction_falls_back_to_minus_y(square, caplog, direction):
    mesh = ShedRoofBuilder().build_shed_roof(square, 0.0, 10.0, direction)
    expected = build_shed_roof(square, 0.0, 10.0, '-y')

    assert np.array_equal(mesh.positions, expected.positions)
    assert 'Unknown shed direction' in caplog.text


def test_idempotent(l_shape):
    first = build_shed_roof(l_shape, 1.0, 2.5, '-x')
    second = build_shed_roof(l_shape, 1.0, 2.5, '-x')

    assert np.array_equal(first.positions, second.positions)
    assert np.array_equal(first.indices, second.indices)
