"""
Formatter dispatch — route a region to its engine with merged options.

This is the containment boundary for engine failures: whatever an
engine raises is logged and reported as ``None``, which the splice
step turns into a failed outcome for that region only.
"""
from __future__ import annotations

import logging
from typing import Optional

from core.errors import FormatterError
from core.options import FormattingOptions
from core.region import Region
from formatters.engines import FormatterEngines

import infrastructure.registrations  # noqa: F401  (side-effect: populates the registry)
from infrastructure.registry import get_handler

logger = logging.getLogger(__name__)


def format_region(region: Region, options: FormattingOptions, engines: FormatterEngines) -> Optional[str]:
    """
    Format one region and return the engine output.

    Returns ``""`` without calling the engine when the payload is empty
    or whitespace-only, or when the region's language has no parser.
    Returns ``None`` when the engine fails.
    """
    if not region.raw_content.strip():
        return ""

    handler = get_handler(region.kind)
    parser = handler.select_parser(region.language_tag)
    if parser is None:
        logger.debug("No %s parser for lang=%s at line %d, leaving it unformatted",
                     region.kind.value, region.language_tag, region.span.start_line + 1)
        return ""
    source = region.raw_content if handler.splices_content else region.full_text

    try:
        return handler.invoke(engines, source, parser, options)
    except FormatterError as exc:
        logger.warning(
            "Formatter failed for %s region (lang=%s, parser=%s) at line %d: %s",
            region.kind.value, region.language_tag, parser, region.span.start_line + 1, exc,
        )
    except Exception:
        logger.exception(
            "Unexpected formatter error for %s region (lang=%s, parser=%s) at line %d",
            region.kind.value, region.language_tag, parser, region.span.start_line + 1,
        )
    return None
