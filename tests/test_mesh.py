import numpy as np
import pytest

from massing3d.geometry.mesh import RoofMesh
from massing3d.geometry.roof_builder import build_hip_roof


def test_flat_buffers():
    mesh = RoofMesh(positions=[0, 0, 0, 1, 0, 0, 0, 1, 0], indices=[0, 1, 2])
    assert mesh.vertex_count == 3
    assert mesh.triangle_count == 1
    assert mesh.flat_positions == [0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0, 0.0]
    assert mesh.flat_indices == [0, 1, 2]


def test_vertex_normals_from_winding():
    mesh = RoofMesh(positions=[[0, 0, 0], [1, 0, 0], [0, 1, 0]], indices=[[0, 1, 2]])
    assert np.allclose(mesh.vertex_normals, [[0, 0, 1]] * 3)

    flipped = RoofMesh(positions=mesh.positions, indices=[[0, 2, 1]])
    assert np.allclose(flipped.vertex_normals, [[0, 0, -1]] * 3)


def test_vertex_normals_unit_length(square):
    mesh = build_hip_roof(square, 0.0, 5.0)
    lengths = np.linalg.norm(mesh.vertex_normals, axis=1)
    assert np.allclose(lengths, 1.0)


def test_to_trimesh_preserves_order(square):
    mesh = build_hip_roof(square, 0.0, 5.0)
    tm = mesh.to_trimesh()

    assert np.array_equal(np.asarray(tm.vertices), mesh.positions)
    assert np.array_equal(np.asarray(tm.faces), mesh.indices)


def test_summary(square):
    summary = build_hip_roof(square, 0.0, 5.0).summary()
    assert summary['roof_type'] == 'hipped'
    assert summary['total_vertices'] == 9
    assert summary['rise'] == pytest.approx(5.0)
