"""
Splice-and-diff — rebuild a region's span text and decide on an edit.

Formatted payloads are spliced back at the payload offsets recorded by
the parser, so a payload that happens to occur twice in its own span can
never be replaced at the wrong place.  Without offsets the first
verbatim occurrence is replaced instead.

Engine output is rewritten to the document's line terminator before
it is compared, and whole-span output loses its trailing terminator:
a span never owns the EOL of its last line.
"""
from __future__ import annotations

import logging
import re
from typing import Optional

from core.edit import FormatOutcome
from core.errors import SpliceMismatchError
from core.outcome_status import OutcomeStatus
from core.region import Region

logger = logging.getLogger(__name__)

_EOL_RE = re.compile(r"\r\n|\r|\n")


def splice(region: Region, formatted: str) -> str:
    """Return ``full_text`` with the payload replaced by ``eol + formatted``.

    Raises ``SpliceMismatchError`` if the payload cannot be located.
    """
    replacement = region.eol + formatted
    text = region.full_text

    if region.has_content_offsets:
        start, end = region.content_start, region.content_end
        if text[start:end] != region.raw_content:
            raise SpliceMismatchError(
                f"Payload offsets {start}..{end} do not match the {region.kind.value} region text"
            )
        return text[:start] + replacement + text[end:]

    index = text.find(region.raw_content)
    if index == -1:
        raise SpliceMismatchError(
            f"Payload not found in the {region.kind.value} region text"
        )
    return text[:index] + replacement + text[index + len(region.raw_content):]


def synthesize(region: Region, formatted: Optional[str], splices_content: bool = True) -> FormatOutcome:
    """
    Compare the rebuilt span text with the original and build the outcome.

    The outcome is ``CHANGED`` only when *formatted* is non-empty and the
    rebuilt text differs from ``full_text``.  A ``None`` result (engine
    failure) is ``FAILED``.  When *splices_content* is ``False`` the
    engine output already is the whole span text.

    Raises ``SpliceMismatchError`` if the payload cannot be located.
    """
    if formatted is None:
        return FormatOutcome(region, "", OutcomeStatus.FAILED)
    if not formatted:
        return FormatOutcome(region, formatted, OutcomeStatus.UNCHANGED)

    formatted = _EOL_RE.sub(region.eol, formatted)
    if splices_content:
        rebuilt = splice(region, formatted)
    else:
        rebuilt = formatted.rstrip("\r\n")
    if rebuilt == region.full_text:
        logger.debug("%s region at line %d already formatted",
                     region.kind.value, region.span.start_line + 1)
        return FormatOutcome(region, formatted, OutcomeStatus.UNCHANGED)

    return FormatOutcome(region, formatted, OutcomeStatus.CHANGED, replacement_text=rebuilt)
