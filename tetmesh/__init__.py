"""Reader for tetrahedral volume meshes in the Medit ``.mesh`` format."""

from .cli import main
from .document import MeshDocument
from .errors import (
    IndexOutOfRange,
    IrregularShape,
    MalformedCount,
    MalformedRecord,
    MeshError,
    MeshIOError,
    ParseError,
    UnexpectedSection,
    UnsupportedDimension,
    UnsupportedVersion,
)
from .medit import parse_mesh, read_mesh
from .rectangular import list_to_matrix, read_mesh_arrays, to_rectangular
from .surface import compute_bounds, export_surface, surface_mesh

__all__ = [
    "main",
    "MeshDocument",
    "read_mesh",
    "parse_mesh",
    "list_to_matrix",
    "to_rectangular",
    "read_mesh_arrays",
    "surface_mesh",
    "compute_bounds",
    "export_surface",
    "MeshError",
    "MeshIOError",
    "ParseError",
    "UnexpectedSection",
    "UnsupportedVersion",
    "UnsupportedDimension",
    "MalformedCount",
    "MalformedRecord",
    "IndexOutOfRange",
    "IrregularShape",
]
