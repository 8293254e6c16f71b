"""Expose the boundary triangles of a volume mesh as a trimesh surface."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

import numpy as np
import trimesh

from .document import MeshDocument
from .rectangular import to_rectangular

logger = logging.getLogger(__name__)


def surface_mesh(document: MeshDocument) -> trimesh.Trimesh:
    """Build a triangle mesh from the document's vertices and faces.

    trimesh processing is disabled so vertex order and count match the
    ``.mesh`` file, including vertices only used by tetrahedra.
    """

    vertices, _, faces = to_rectangular(document, np.float64, np.int64)
    return trimesh.Trimesh(vertices=vertices, faces=faces, process=False)


def compute_bounds(document: MeshDocument) -> List[List[float]]:
    """Return axis-aligned bounding box for the mesh."""

    return document.bounds()


def export_surface(document: MeshDocument, path: Union[str, Path]) -> Path:
    """Write the boundary surface to ``path``; the suffix selects the format."""

    path = Path(path)
    if not document.faces:
        raise ValueError("Mesh contains no triangles to export")
    mesh = surface_mesh(document)
    path.parent.mkdir(parents=True, exist_ok=True)
    mesh.export(path)
    logger.info("Wrote %d triangles to %s", len(mesh.faces), path)
    return path
