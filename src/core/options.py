"""
FormattingOptions — the fully merged option set for one formatting pass.

Field names are the snake_case form of the prettier option names
(``tabWidth`` → ``tab_width``).  Markup-engine options live in the
nested :class:`MarkupOptions` and use js-beautify's own snake_case names.

Both classes are frozen: one instance is built per pass by the config
resolver and shared read-only by every region formatting call.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field, fields
from typing import Any

# Void-like elements the markup engine must never reflow
UNFORMATTED_TAGS: tuple[str, ...] = (
    "area", "base", "br", "col", "embed", "hr", "keygen", "link",
    "menuitem", "meta", "param", "source", "track", "wbr",
)

_CAMEL_BOUNDARY_RE = re.compile(r"(?<!^)(?=[A-Z])")


def snake_case(name: str) -> str:
    """``tabWidth`` → ``tab_width``.  Already snake_case names pass through."""
    return _CAMEL_BOUNDARY_RE.sub("_", name).lower()


def camel_case(name: str) -> str:
    """``tab_width`` → ``tabWidth``."""
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


@dataclass(frozen=True, slots=True)
class MarkupOptions:
    """Options for the markup (template) engine."""
    wrap_attributes: str = "force-aligned"
    wrap_line_length: int = 150
    unformatted: tuple[str, ...] = UNFORMATTED_TAGS
    indent_size: int = 4
    indent_inner_html: bool = False
    end_with_newline: bool = False


@dataclass(frozen=True, slots=True)
class FormattingOptions:
    """Options for the code and stylesheet engines, plus markup options."""
    arrow_parens: str = "avoid"
    bracket_spacing: bool = True
    end_of_line: str = "lf"
    html_whitespace_sensitivity: str = "css"
    insert_pragma: bool = False
    single_attribute_per_line: bool = True
    bracket_same_line: bool = True
    jsx_single_quote: bool = True
    print_width: int = 150
    prose_wrap: str = "preserve"
    quote_props: str = "consistent"
    require_pragma: bool = False
    semi: bool = True
    single_quote: bool = True
    tab_width: int = 4
    trailing_comma: str = "none"
    use_tabs: bool = False
    embedded_language_formatting: str = "auto"
    vue_indent_script_and_style: bool = False
    experimental_ternaries: bool = False
    markup: MarkupOptions = field(default_factory=MarkupOptions)

    def to_prettier(self) -> dict[str, Any]:
        """Export the engine options with prettier's camelCase keys."""
        return {
            camel_case(f.name): getattr(self, f.name)
            for f in fields(self)
            if f.name != "markup"
        }

    def to_dict(self) -> dict[str, Any]:
        data = self.to_prettier()
        data["markup"] = {
            camel_case(f.name): (
                list(getattr(self.markup, f.name))
                if f.name == "unformatted"
                else getattr(self.markup, f.name)
            )
            for f in fields(self.markup)
        }
        return data


DEFAULT_OPTIONS = FormattingOptions()
