"""Line and token cursor for whitespace-delimited text formats."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional


def is_skippable(line: str) -> bool:
    """Return True for blank lines and ``#`` comment lines."""

    stripped = line.strip()
    return not stripped or stripped.startswith("#")


class LineCursor:
    """Read tokens from lines, skipping blank and comment lines.

    Tokens left over on the current line are kept so that a caller can mix
    whole-line reads (:meth:`next_line`) with token reads (:meth:`next_token`).
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: Iterator[str] = iter(lines)
        self._pending: List[str] = []
        self.line_number = 0

    def _advance(self) -> bool:
        for raw in self._lines:
            self.line_number += 1
            if is_skippable(raw):
                continue
            self._pending = raw.split()
            return True
        self._pending = []
        return False

    def next_line(self) -> Optional[List[str]]:
        """Return the tokens of the next content line, or None at end of input.

        If tokens remain unread on the current line they are returned first.
        """

        if not self._pending and not self._advance():
            return None
        tokens, self._pending = self._pending, []
        return tokens

    def unread(self, tokens: List[str]) -> None:
        """Put ``tokens`` back in front of the unread tokens of the current line."""

        self._pending = list(tokens) + self._pending

    def next_token(self) -> Optional[str]:
        if not self._pending and not self._advance():
            return None
        return self._pending.pop(0)
