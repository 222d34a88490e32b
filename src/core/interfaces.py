"""
Formatter engine contracts.

The engines themselves (markup beautifier, code and stylesheet printers)
are external.  The pipeline depends on these protocols only, so tests
and alternative hosts can plug in any callables with the same shape.
Every engine may raise ``FormatterError``.
"""
from __future__ import annotations

from typing import Protocol

from core.options import FormattingOptions


class IMarkupEngine(Protocol):
    """``(text, options) -> text``; synchronous."""
    def __call__(self, text: str, options: FormattingOptions) -> str: ...


class ICodeEngine(Protocol):
    """``(text, parser_variant, options) -> text``."""
    def __call__(self, text: str, parser: str, options: FormattingOptions) -> str: ...


class IStylesheetEngine(Protocol):
    """``(text, dialect, options) -> text``."""
    def __call__(self, text: str, dialect: str, options: FormattingOptions) -> str: ...
