"""
Document I/O — read a component file into a Document, write results back.

Load flow:
    file → read_text (utf-8, newlines preserved) → Document snapshot

Apply flow:
    edits (whole-line spans) → offsets against the same snapshot
        → replaced bottom-up so earlier offsets stay valid → new text

Applying edits stands in for the host editor's own edit mechanism; the
pipeline itself never mutates a document.
"""
from __future__ import annotations

from pathlib import Path
from typing import Iterable

from core.document import Document
from core.edit import Edit


# ------------------------------------------------------------------
# File helpers
# ------------------------------------------------------------------

def _read_text(path: Path) -> str:
    # newline="" keeps \r\n intact so spans map onto the file as-is
    with path.open("r", encoding="utf-8", newline="") as f:
        return f.read()


def _write_text(path: Path, content: str) -> None:
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(content)


# ------------------------------------------------------------------
# Load / save
# ------------------------------------------------------------------

def load_document(file_path: str | Path) -> Document:
    """Read a component file and return its snapshot."""
    path = Path(file_path)
    return Document(_read_text(path), file_path=str(path))


def save_text(file_path: str | Path, content: str) -> None:
    _write_text(Path(file_path), content)


# ------------------------------------------------------------------
# Apply
# ------------------------------------------------------------------

def apply_edits(document: Document, edits: Iterable[Edit]) -> str:
    """
    Return the document text with *edits* applied.

    Each edit replaces its whole lines (column 0 of the first line to the
    end of the last, EOL excluded).  Overlapping edits are rejected with
    ``ValueError``.
    """
    ordered = sorted(edits, key=lambda e: e.span.start_line)
    for prev, cur in zip(ordered, ordered[1:]):
        if prev.span.overlaps(cur.span):
            raise ValueError(
                f"Overlapping edits at lines {prev.span.start_line}-{prev.span.end_line} "
                f"and {cur.span.start_line}-{cur.span.end_line}"
            )

    text = document.text
    for edit in reversed(ordered):
        start = document.line_start(edit.span.start_line)
        end = document.line_end(edit.span.end_line)
        text = text[:start] + edit.replacement_text + text[end:]
    return text
