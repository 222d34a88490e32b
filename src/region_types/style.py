"""
Style regions (``<style>``), one region per block.

The ``lang`` tag is the stylesheet dialect; untagged blocks are plain
CSS.  Dialects the engine does not know (e.g. ``stylus``) fail inside
the engine and leave the block untouched.
"""
from __future__ import annotations

from typing import Optional, TYPE_CHECKING

from core.options import FormattingOptions

if TYPE_CHECKING:
    from formatters.engines import FormatterEngines

SPLICES_CONTENT = True

DEFAULT_DIALECT = "css"

_DIALECT_ALIASES = {
    "postcss": "css",
    "pcss": "css",
}


def select_parser(lang: Optional[str]) -> str:
    if not lang:
        return DEFAULT_DIALECT
    lang = lang.lower()
    return _DIALECT_ALIASES.get(lang, lang)


def invoke(engines: "FormatterEngines", text: str, parser: str, options: FormattingOptions) -> str:
    return engines.stylesheet(text, parser, options)
