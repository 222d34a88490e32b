"""
Region — one typed, line-aligned slice of a composite document.

A region always covers whole lines: ``full_text`` runs from column 0 of
``span.start_line`` to the end of ``span.end_line`` (EOL excluded).
``raw_content`` is only the embedded payload between the enclosing tags.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from core.region_kind import RegionKind


@dataclass(frozen=True, slots=True)
class LineSpan:
    """Inclusive, 0-based line range inside a document."""
    start_line: int
    end_line: int

    def __post_init__(self):
        if self.start_line < 0 or self.end_line < self.start_line:
            raise ValueError(
                f"Invalid span: {self.start_line}..{self.end_line}"
            )

    def overlaps(self, other: LineSpan) -> bool:
        return not (self.end_line < other.start_line or other.end_line < self.start_line)

    def __len__(self) -> int:
        return self.end_line - self.start_line + 1


@dataclass(frozen=True, slots=True)
class Region:
    """
    Attributes:
        kind:          Which formatter family handles the payload.
        language_tag:  Value of the block's ``lang`` attribute, if any.
        span:          Whole-line range the region occupies.
        raw_content:   The payload only, without the enclosing tags.
        full_text:     The full span text, tags included.
        content_start: Offset of ``raw_content`` inside ``full_text``.
        content_end:   End offset (exclusive) of ``raw_content`` inside
                       ``full_text``.  Both are ``None`` when the parser
                       could not supply them.
        eol:           Line terminator for engine output written into the
                       span; the document's dominant terminator.
    """
    kind: RegionKind
    language_tag: Optional[str]
    span: LineSpan
    raw_content: str
    full_text: str
    content_start: Optional[int] = None
    content_end: Optional[int] = None
    eol: str = "\n"

    @property
    def has_content_offsets(self) -> bool:
        return self.content_start is not None and self.content_end is not None
