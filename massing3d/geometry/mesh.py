"""
Indexed triangle mesh returned by the roof builders.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

import numpy as np
import trimesh


@dataclass
class RoofMesh:
    """
    Vertex positions plus triangle index triples for one roof.

    Positions are (V, 3) float64, indices are (F, 3) int64. Vertex normals
    are derived from face winding on demand.
    """
    positions: np.ndarray
    indices: np.ndarray
    roof_type: str = ''
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.positions = np.asarray(self.positions, dtype=np.float64).reshape(-1, 3)
        self.indices = np.asarray(self.indices, dtype=np.int64).reshape(-1, 3)

    @property
    def vertex_count(self) -> int:
        return len(self.positions)

    @property
    def triangle_count(self) -> int:
        return len(self.indices)

    @property
    def flat_positions(self) -> List[float]:
        """Positions as x0, y0, z0, x1, ... for buffer attributes."""
        return self.positions.ravel().tolist()

    @property
    def flat_indices(self) -> List[int]:
        return self.indices.ravel().tolist()

    @property
    def face_normals(self) -> np.ndarray:
        """Unnormalized face normals; length is twice the triangle area."""
        tri = self.positions[self.indices]
        return np.cross(tri[:, 1] - tri[:, 0], tri[:, 2] - tri[:, 0])

    @property
    def vertex_normals(self) -> np.ndarray:
        """
        Area-weighted vertex normals from face winding.

        Vertices touched only by degenerate faces get a zero normal.
        """
        normals = np.zeros_like(self.positions)
        face_normals = self.face_normals
        for corner in range(3):
            np.add.at(normals, self.indices[:, corner], face_normals)

        lengths = np.linalg.norm(normals, axis=1)
        nonzero = lengths > 0
        normals[nonzero] /= lengths[nonzero][:, None]
        return normals

    def to_trimesh(self) -> trimesh.Trimesh:
        """Convert without merging or reordering vertices."""
        return trimesh.Trimesh(
            vertices=self.positions.copy(),
            faces=self.indices.copy(),
            process=False
        )

    def summary(self) -> Dict[str, Any]:
        return {
            'roof_type': self.roof_type,
            'total_vertices': self.vertex_count,
            'total_faces': self.triangle_count,
            **self.metadata
        }
