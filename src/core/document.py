"""
Document — immutable text snapshot with a line index.

The Document is the **single source of positions** for one formatting
pass.  Every region span, every edit and the final application of edits
are computed against the same snapshot so spans stay consistent even
when regions are formatted concurrently.

Lines are 0-based.  A line's text never includes its terminator;
``\\n``, ``\\r\\n`` and ``\\r`` are recognised.
"""
from __future__ import annotations

import bisect
import logging
import re
from collections import Counter

logger = logging.getLogger(__name__)

_EOL_RE = re.compile(r"\r\n|\r|\n")


class Document:
    """
    Read-only snapshot of a composite document.

    Internal invariant: ``_starts[n]`` is the offset of the first
    character of line ``n`` and ``_ends[n]`` the offset just past its
    last non-terminator character.
    """

    __slots__ = ("_text", "_file_path", "_starts", "_ends", "_eol")

    def __init__(self, text: str, file_path: str = ""):
        self._text = text
        self._file_path = file_path
        self._build_index()

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def text(self) -> str:
        return self._text

    @property
    def file_path(self) -> str:
        return self._file_path

    @property
    def line_count(self) -> int:
        return len(self._starts)

    def __len__(self) -> int:
        return len(self._text)

    @property
    def eol(self) -> str:
        """Most frequent line terminator; ``"\\n"`` when there is none or on a tie."""
        return self._eol

    def line_start(self, line: int) -> int:
        """Offset of column 0 of *line*.  Raises IndexError."""
        self._check_line(line)
        return self._starts[line]

    def line_end(self, line: int) -> int:
        """Offset just past the last character of *line* (EOL excluded)."""
        self._check_line(line)
        return self._ends[line]

    def line_text(self, line: int) -> str:
        return self._text[self.line_start(line):self.line_end(line)]

    def offset_at(self, line: int, column: int) -> int:
        """Convert a 0-based (line, column) to an absolute offset.

        Columns past the end of the line are clamped to the line end.
        """
        start = self.line_start(line)
        return min(start + max(column, 0), self._ends[line])

    def position_at(self, offset: int) -> tuple[int, int]:
        """Convert an absolute offset to a 0-based (line, column)."""
        if not 0 <= offset <= len(self._text):
            raise IndexError(f"Offset {offset} out of range")
        line = bisect.bisect_right(self._starts, offset) - 1
        return line, offset - self._starts[line]

    def get_text(self, start_line: int, end_line: int) -> str:
        """Return whole lines *start_line*..*end_line* (inclusive).

        The text runs from column 0 of the first line to the end of the
        last line; the last line's terminator is not included.
        """
        if end_line < start_line:
            raise ValueError(f"end_line {end_line} precedes start_line {start_line}")
        return self._text[self.line_start(start_line):self.line_end(end_line)]

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _check_line(self, line: int) -> None:
        if not 0 <= line < len(self._starts):
            raise IndexError(f"Line {line} out of range")

    def _build_index(self) -> None:
        starts: list[int] = [0]
        ends: list[int] = []
        terminators: Counter[str] = Counter()
        for match in _EOL_RE.finditer(self._text):
            ends.append(match.start())
            starts.append(match.end())
            terminators[match.group()] += 1
        ends.append(len(self._text))
        self._starts = tuple(starts)
        self._ends = tuple(ends)
        counts = terminators.most_common()
        if counts and (len(counts) == 1 or counts[0][1] > counts[1][1]):
            self._eol = counts[0][0]
        else:
            self._eol = "\n"
        logger.debug("Indexed document %s: %d lines", self._file_path or "<memory>", len(starts))
