"""Conversion of parsed mesh rows into dense numpy arrays."""

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np
from numpy.typing import DTypeLike

from .document import MeshDocument
from .errors import IrregularShape
from .medit import TETRAHEDRA, TRIANGLES, VERTICES, MeshSource, read_mesh


def list_to_matrix(
    rows: Sequence[Sequence], width: int, section: str, dtype: DTypeLike
) -> np.ndarray:
    """Stack ``rows`` into a ``len(rows) x width`` array.

    Raises :class:`IrregularShape` if any row does not have exactly ``width``
    entries.
    """

    for i, row in enumerate(rows):
        if len(row) != width:
            raise IrregularShape(section, i, width, len(row))
    if not rows:
        return np.empty((0, width), dtype=dtype)
    return np.asarray(rows, dtype=dtype).reshape(len(rows), width)


def to_rectangular(
    document: MeshDocument,
    scalar_dtype: DTypeLike = np.float64,
    index_dtype: DTypeLike = np.int64,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return ``(V, T, F)``: #V x 3 positions, #T x 4 tets and #F x 3 faces."""

    vertices = list_to_matrix(document.vertices, 3, VERTICES, scalar_dtype)
    tets = list_to_matrix(document.tets, 4, TETRAHEDRA, index_dtype)
    faces = list_to_matrix(document.faces, 3, TRIANGLES, index_dtype)
    return vertices, tets, faces


def read_mesh_arrays(
    source: MeshSource,
    scalar_dtype: DTypeLike = np.float64,
    index_dtype: DTypeLike = np.int64,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Read a ``.mesh`` file straight into ``(V, T, F)`` arrays."""

    return to_rectangular(read_mesh(source), scalar_dtype, index_dtype)
