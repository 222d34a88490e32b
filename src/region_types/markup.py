"""
Markup regions (``<template>``).

The markup engine receives the whole block, delimiters included, so
children are indented relative to the ``<template>`` tag; its output
replaces the span as-is instead of being spliced.  Templates in another
language (``lang="pug"``) have no parser and are left as they are.
"""
from __future__ import annotations

from typing import Optional, TYPE_CHECKING

from core.options import FormattingOptions

if TYPE_CHECKING:
    from formatters.engines import FormatterEngines

SPLICES_CONTENT = False

PARSER = "html"

HTML_LANGS = (None, "html")


def select_parser(lang: Optional[str]) -> Optional[str]:
    # The markup engine has a single dialect
    if lang is not None and lang.lower() not in HTML_LANGS:
        return None
    return PARSER


def invoke(engines: "FormatterEngines", text: str, parser: str, options: FormattingOptions) -> str:
    return engines.markup(text, options)
