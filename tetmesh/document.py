"""In-memory representation of a parsed tetrahedral mesh."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Tuple

Position3 = Tuple[Any, Any, Any]
FaceIndices3 = Tuple[Any, Any, Any]
TetIndices4 = Tuple[Any, Any, Any, Any]


@dataclass(frozen=True)
class MeshDocument:
    """Vertices, boundary triangles and tetrahedra read from a ``.mesh`` file.

    Element indices are 0-based positions in ``vertices``.
    """

    vertices: Tuple[Position3, ...] = ()
    faces: Tuple[FaceIndices3, ...] = ()
    tets: Tuple[TetIndices4, ...] = ()

    @property
    def num_vertices(self) -> int:
        return len(self.vertices)

    @property
    def num_faces(self) -> int:
        return len(self.faces)

    @property
    def num_tets(self) -> int:
        return len(self.tets)

    def bounds(self) -> List[List[float]]:
        """Return the axis-aligned bounding box as ``[min, max]`` corners."""

        if not self.vertices:
            raise ValueError("Mesh contains no vertices")
        xs = [float(v[0]) for v in self.vertices]
        ys = [float(v[1]) for v in self.vertices]
        zs = [float(v[2]) for v in self.vertices]
        return [
            [min(xs), min(ys), min(zs)],
            [max(xs), max(ys), max(zs)],
        ]
