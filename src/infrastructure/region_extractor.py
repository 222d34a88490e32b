"""
Region extractor — document snapshot → ordered, whole-line regions.

Extraction flow:
    document.text → sfc.parse → descriptor
        SfcParseError → [] (formatting becomes a no-op)
    for template / script / script setup / each style:
        tag_loc lines → LineSpan (column 0 .. end of line)
        span text     → Region.full_text
        content loc   → Region.raw_content + payload offsets
    → sort by start line, drop any region overlapping an earlier one
"""
from __future__ import annotations

import logging
from typing import Iterator

from core.document import Document
from core.errors import SfcParseError
from core.region import LineSpan, Region
from core.region_kind import RegionKind
from sfc import parse
from sfc.descriptor import SfcBlock, SfcDescriptor

logger = logging.getLogger(__name__)


def extract_regions(document: Document) -> list[Region]:
    """
    Return the formattable regions of *document* in document order.

    Regions are pairwise non-overlapping.  A document that cannot be
    parsed yields no regions rather than an error.
    """
    try:
        descriptor = parse(document.text, filename=document.file_path)
    except SfcParseError as exc:
        logger.warning("Cannot parse %s: %s", document.file_path or "<memory>", exc)
        return []

    candidates = sorted(
        (_to_region(document, kind, block) for kind, block in _blocks(descriptor)),
        key=lambda r: r.span.start_line,
    )

    regions: list[Region] = []
    for region in candidates:
        if regions and regions[-1].span.overlaps(region.span):
            logger.warning(
                "Skipping %s region at lines %d-%d: shares a line with the %s region",
                region.kind.value, region.span.start_line, region.span.end_line,
                regions[-1].kind.value,
            )
            continue
        regions.append(region)

    logger.debug("Extracted %d regions from %s", len(regions), document.file_path or "<memory>")
    return regions


def _blocks(descriptor: SfcDescriptor) -> Iterator[tuple[RegionKind, SfcBlock]]:
    if descriptor.template is not None:
        yield RegionKind.MARKUP, descriptor.template
    if descriptor.script is not None:
        yield RegionKind.SCRIPT, descriptor.script
    if descriptor.script_setup is not None:
        yield RegionKind.SCRIPT_SETUP, descriptor.script_setup
    for style in descriptor.styles:
        yield RegionKind.STYLE, style


def _to_region(document: Document, kind: RegionKind, block: SfcBlock) -> Region:
    # Descriptor lines are 1-based, document lines 0-based
    span = LineSpan(block.tag_loc.start.line - 1, block.tag_loc.end.line - 1)
    span_offset = document.line_start(span.start_line)
    return Region(
        kind=kind,
        language_tag=block.lang,
        span=span,
        raw_content=block.content,
        full_text=document.get_text(span.start_line, span.end_line),
        content_start=block.loc.start.offset - span_offset,
        content_end=block.loc.end.offset - span_offset,
        eol=document.eol,
    )
