from __future__ import annotations

from dataclasses import dataclass
from functools import partial

from core.interfaces import ICodeEngine, IMarkupEngine, IStylesheetEngine
from formatters import html_beautify, prettier
from formatters.settings import EngineSettings


@dataclass(frozen=True, slots=True)
class FormatterEngines:
    """The three engine families a formatting pass can route to."""
    markup: IMarkupEngine
    code: ICodeEngine
    stylesheet: IStylesheetEngine


def default_engines(settings: EngineSettings | None = None) -> FormatterEngines:
    """Wire the CLI adapters: html-beautify for markup, prettier otherwise."""
    settings = settings or EngineSettings.from_environ()
    return FormatterEngines(
        markup=partial(html_beautify.format_markup, settings=settings),
        code=partial(prettier.format_code, settings=settings),
        stylesheet=partial(prettier.format_code, settings=settings),
    )
