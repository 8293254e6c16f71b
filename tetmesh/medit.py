"""Reader for tetrahedral meshes stored in the ASCII Medit ``.mesh`` format.

A file is a fixed sequence of sections::

    MeshVersionFormatted 1
    Dimension 3
    Vertices
    <N>
    x y z ref          (N times)
    Triangles
    <M>
    i j k ref          (M times, 1-based vertex indices)
    Tetrahedra
    <K>
    i j k l ref        (K times, 1-based vertex indices)

Blank lines and ``#`` comment lines may appear between any two tokens. The
trailing ``ref`` of each record must be present but is discarded.
"""

from __future__ import annotations

import logging
import os
import re
from typing import Any, Callable, Iterable, List, Optional, TextIO, Tuple, Union

from .document import MeshDocument
from .errors import (
    IndexOutOfRange,
    MalformedCount,
    MalformedRecord,
    MeshIOError,
    UnexpectedSection,
    UnsupportedDimension,
    UnsupportedVersion,
)
from .tokens import LineCursor

logger = logging.getLogger(__name__)

HEADER = "MeshVersionFormatted"
DIMENSION = "Dimension"
VERTICES = "Vertices"
TRIANGLES = "Triangles"
TETRAHEDRA = "Tetrahedra"

SUPPORTED_VERSION = 1
SUPPORTED_DIMENSION = 3

_INTEGER = re.compile(r"[+-]?\d+\Z")
_UNSIGNED = re.compile(r"\d+\Z")
_REAL = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\Z")

MeshSource = Union[str, "os.PathLike[str]", TextIO]
Converter = Callable[[Any], Any]


def read_mesh(
    source: MeshSource,
    scalar: Converter = float,
    index: Converter = int,
) -> MeshDocument:
    """Load a tetrahedral volume mesh from a ``.mesh`` file.

    ``source`` is either a path or an open text stream. Paths are opened and
    closed here; streams are left open for their owner.

    Coordinates are read as Python floats and passed through ``scalar``
    (e.g. ``numpy.float32``); element indices are rebased to 0 and passed
    through ``index``.
    """

    if isinstance(source, (str, os.PathLike)):
        path = os.fspath(source)
        try:
            fh = open(path, "r", encoding="utf8", errors="replace")
        except OSError as exc:
            raise MeshIOError(path, exc.strerror or str(exc)) from exc
        with fh:
            return parse_mesh(fh, scalar=scalar, index=index, name=path)
    return parse_mesh(source, scalar=scalar, index=index)


def parse_mesh(
    lines: Iterable[str],
    scalar: Converter = float,
    index: Converter = int,
    name: Optional[str] = None,
) -> MeshDocument:
    """Parse Medit text supplied as an iterable of lines."""

    if name is None:
        name = getattr(lines, "name", "<stream>")
    document = _MeditParser(lines, scalar, index).parse()
    logger.info(
        "Read %s: %d vertices, %d triangles, %d tetrahedra",
        name,
        document.num_vertices,
        document.num_faces,
        document.num_tets,
    )
    return document


class _MeditParser:
    def __init__(self, lines: Iterable[str], scalar: Converter, index: Converter) -> None:
        self.cursor = LineCursor(lines)
        self.scalar = scalar
        self.index = index

    def parse(self) -> MeshDocument:
        tokens = self._expect_keyword(HEADER)
        version = self._keyword_value(tokens)
        if not _is_integer(version) or int(version) != SUPPORTED_VERSION:
            raise UnsupportedVersion(version, self.cursor.line_number)

        tokens = self._expect_keyword(DIMENSION)
        dimension = self._keyword_value(tokens)
        if not _is_integer(dimension) or int(dimension) != SUPPORTED_DIMENSION:
            raise UnsupportedDimension(dimension, self.cursor.line_number)

        self._expect_section(VERTICES)
        vertices = [
            self._read_vertex(i) for i in range(self._read_count(VERTICES))
        ]

        self._expect_section(TRIANGLES)
        faces = [
            self._read_element(TRIANGLES, i, 3, len(vertices))
            for i in range(self._read_count(TRIANGLES))
        ]

        self._expect_section(TETRAHEDRA)
        tets = [
            self._read_element(TETRAHEDRA, i, 4, len(vertices))
            for i in range(self._read_count(TETRAHEDRA))
        ]

        return MeshDocument(vertices=tuple(vertices), faces=tuple(faces), tets=tuple(tets))

    def _expect_keyword(self, keyword: str) -> List[str]:
        tokens = self.cursor.next_line()
        found = tokens[0] if tokens else None
        if found != keyword:
            raise UnexpectedSection(keyword, found, self.cursor.line_number)
        return tokens

    def _expect_section(self, keyword: str) -> None:
        # The count may share the keyword line.
        tokens = self._expect_keyword(keyword)
        self.cursor.unread(tokens[1:])

    def _keyword_value(self, tokens: List[str]) -> Optional[str]:
        # The value may share the keyword line or follow it.
        if len(tokens) > 1:
            return tokens[1]
        return self.cursor.next_token()

    def _read_count(self, section: str) -> int:
        token = self.cursor.next_token()
        if token is None or not _UNSIGNED.match(token):
            raise MalformedCount(section, token, self.cursor.line_number)
        count = int(token)
        logger.debug("Reading %d %s", count, section.lower())
        return count

    def _read_fields(self, section: str, index: int, width: int) -> List[str]:
        # Records are token based: line breaks inside or between them are free.
        fields: List[str] = []
        for _ in range(width):
            token = self.cursor.next_token()
            if token is None:
                raise MalformedRecord(
                    section,
                    index,
                    f"expected {width} values, found {len(fields)}",
                    self.cursor.line_number,
                )
            fields.append(token)
        return fields

    def _read_vertex(self, index: int) -> Tuple[Any, ...]:
        fields = self._read_fields(VERTICES, index, 4)
        for value in fields[:3]:
            if not _REAL.match(value):
                raise MalformedRecord(
                    VERTICES,
                    index,
                    f"invalid coordinate {value!r}",
                    self.cursor.line_number,
                )
        x, y, z = (float(value) for value in fields[:3])
        self._check_reference(VERTICES, index, fields[3])
        return (self.scalar(x), self.scalar(y), self.scalar(z))

    def _read_element(
        self, section: str, index: int, corners: int, num_vertices: int
    ) -> Tuple[Any, ...]:
        fields = self._read_fields(section, index, corners + 1)
        rebased = []
        for value in fields[:corners]:
            if not _is_integer(value):
                raise MalformedRecord(
                    section,
                    index,
                    f"invalid vertex index {value!r}",
                    self.cursor.line_number,
                )
            vertex = int(value) - 1
            if not 0 <= vertex < num_vertices:
                raise IndexOutOfRange(
                    section, index, int(value), num_vertices, self.cursor.line_number
                )
            rebased.append(self.index(vertex))
        self._check_reference(section, index, fields[corners])
        return tuple(rebased)

    def _check_reference(self, section: str, index: int, value: str) -> None:
        if not _is_integer(value):
            raise MalformedRecord(
                section,
                index,
                f"invalid reference id {value!r}",
                self.cursor.line_number,
            )


def _is_integer(token: Optional[str]) -> bool:
    return token is not None and _INTEGER.match(token) is not None
