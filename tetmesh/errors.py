"""Exceptions raised while reading Medit meshes."""

from __future__ import annotations

from typing import Optional


class MeshError(Exception):
    """Base class for every failure raised by :mod:`tetmesh`."""


class MeshIOError(MeshError, OSError):
    """The mesh source could not be opened or read."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path} could not be opened: {reason}")
        self.path = path
        self.reason = reason


class ParseError(MeshError, ValueError):
    """The mesh text does not follow the Medit grammar."""

    def __init__(self, message: str, line: Optional[int] = None) -> None:
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line


def _describe(found: Optional[str]) -> str:
    return "end of file" if found is None else repr(found)


class UnexpectedSection(ParseError):
    def __init__(self, expected: str, found: Optional[str], line: Optional[int] = None) -> None:
        super().__init__(f"expected {expected!r} but found {_describe(found)}", line)
        self.expected = expected
        self.found = found


class UnsupportedVersion(ParseError):
    def __init__(self, found: Optional[str], line: Optional[int] = None) -> None:
        super().__init__(
            f"MeshVersionFormatted should be 1 not {_describe(found)}", line
        )
        self.found = found


class UnsupportedDimension(ParseError):
    def __init__(self, found: Optional[str], line: Optional[int] = None) -> None:
        super().__init__(f"only Dimension 3 is supported not {_describe(found)}", line)
        self.found = found


class MalformedCount(ParseError):
    def __init__(self, section: str, found: Optional[str], line: Optional[int] = None) -> None:
        super().__init__(
            f"expecting number of {section.lower()}, found {_describe(found)}", line
        )
        self.section = section
        self.found = found


class MalformedRecord(ParseError):
    """A counted record is missing tokens or holds a non-numeric token.

    ``index`` is the 0-based position of the record inside its section.
    """

    def __init__(
        self,
        section: str,
        index: int,
        detail: str = "",
        line: Optional[int] = None,
    ) -> None:
        message = f"malformed {section} record {index}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message, line)
        self.section = section
        self.index = index


class IndexOutOfRange(ParseError):
    """An element refers to a vertex that does not exist.

    ``value`` is the 1-based index as written in the file.
    """

    def __init__(
        self,
        section: str,
        index: int,
        value: int,
        num_vertices: int,
        line: Optional[int] = None,
    ) -> None:
        super().__init__(
            f"{section} record {index} refers to vertex {value} "
            f"but the mesh has {num_vertices} vertices",
            line,
        )
        self.section = section
        self.index = index
        self.value = value
        self.num_vertices = num_vertices


class IrregularShape(MeshError, ValueError):
    """A collection cannot be stored as a fixed-width matrix."""

    def __init__(self, section: str, row: int, expected: int, found: int) -> None:
        super().__init__(
            f"{section} row {row} has {found} columns, expected {expected}"
        )
        self.section = section
        self.row = row
        self.expected = expected
        self.found = found
