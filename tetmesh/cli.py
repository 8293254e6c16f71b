"""Command line interface for inspecting Medit meshes."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterable

import numpy as np

from .errors import MeshError
from .medit import read_mesh
from .surface import compute_bounds, export_surface

DTYPES = {"float64": np.float64, "float32": np.float32}


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Inspect a Medit .mesh volume mesh")
    parser.add_argument("mesh", type=Path, help="Input .mesh file")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the summary as JSON",
    )
    parser.add_argument(
        "--surface",
        type=Path,
        default=None,
        help="Optional path to export the triangle surface (format from suffix, e.g. .stl)",
    )
    parser.add_argument(
        "--dtype",
        choices=sorted(DTYPES),
        default="float64",
        help="Scalar type used for vertex coordinates (default: float64)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def summarize(args: argparse.Namespace) -> dict:
    document = read_mesh(args.mesh, scalar=DTYPES[args.dtype])
    summary = {
        "path": str(args.mesh),
        "num_vertices": document.num_vertices,
        "num_triangles": document.num_faces,
        "num_tetrahedra": document.num_tets,
        "bounds": compute_bounds(document) if document.num_vertices else None,
    }
    if args.surface:
        summary["surface"] = str(export_surface(document, args.surface))
    return summary


def run(argv: Iterable[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        summary = summarize(args)
    except (MeshError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(summary, indent=2))
    else:
        print(f"vertices:   {summary['num_vertices']}")
        print(f"triangles:  {summary['num_triangles']}")
        print(f"tetrahedra: {summary['num_tetrahedra']}")
        if summary["bounds"] is not None:
            low, high = (" ".join(f"{v:g}" for v in corner) for corner in summary["bounds"])
            print(f"bounds:     {low} .. {high}")
        if "surface" in summary:
            print(f"surface:    {summary['surface']}")
    return 0


def main() -> None:
    raise SystemExit(run())


if __name__ == "__main__":  # pragma: no cover
    main()
