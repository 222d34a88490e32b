"""
Script regions (``<script>`` and ``<script setup>``).

The ``lang`` tag picks the code parser: typed dialects go to the
TypeScript-aware babel parser, everything else to plain babel.
"""
from __future__ import annotations

from typing import Optional, TYPE_CHECKING

from core.options import FormattingOptions

if TYPE_CHECKING:
    from formatters.engines import FormatterEngines

SPLICES_CONTENT = True

TYPED_PARSER = "babel-ts"
DEFAULT_PARSER = "babel"

TYPED_LANGS = frozenset({"ts", "tsx", "typescript"})


def select_parser(lang: Optional[str]) -> str:
    if lang and lang.lower() in TYPED_LANGS:
        return TYPED_PARSER
    return DEFAULT_PARSER


def invoke(engines: "FormatterEngines", text: str, parser: str, options: FormattingOptions) -> str:
    return engines.code(text, parser, options)
