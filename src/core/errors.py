"""
Base error hierarchy for the formatting pipeline.

All pipeline errors inherit from ``FormatPipelineError`` so callers can
catch a single base type.  None of them escape a formatting pass: each
one is contained at the boundary named in its docstring.
"""
from __future__ import annotations



class FormatPipelineError(Exception):
    """Base class for all formatting pipeline errors."""


class SfcParseError(FormatPipelineError):
    """Raised when a document cannot be decomposed into regions.

    Contained by the region extractor, which then yields no regions.
    """

    def __init__(self, message: str, line: int | None = None):
        if line is not None:
            message = f"{message} (line {line})"
        super().__init__(message)
        self.line = line


class FormatterError(FormatPipelineError):
    """Raised when an external formatting engine fails on a payload.

    Contained by ``dispatch.format_region``.
    """


class ConfigResolutionError(FormatPipelineError):
    """Raised when the project config file cannot be read or decoded.

    Contained by ``ConfigResolver``, which degrades to the lower layers.
    """


class SpliceMismatchError(FormatPipelineError):
    """Raised when a region's payload cannot be located in its span text.

    Contained by the pipeline, which treats the region as unchanged.
    """
