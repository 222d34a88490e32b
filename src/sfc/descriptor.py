"""
Descriptor types produced by the single-file-component parser.

Positions follow the usual SFC convention: 1-based line, 1-based column,
plus the absolute 0-based offset into the source text.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

AttrValue = Union[str, bool]


@dataclass(frozen=True, slots=True)
class Position:
    offset: int
    line: int
    column: int


@dataclass(frozen=True, slots=True)
class SourceLocation:
    start: Position
    end: Position
    source: str = ""


@dataclass(frozen=True, slots=True)
class SfcBlock:
    """
    One top-level block of a component file.

    Attributes:
        type:    Tag name, lower-cased (``template``, ``script``, ``style``
                 or any custom block name).
        content: Everything between the opening and closing tags.
        attrs:   Attributes of the opening tag; valueless attributes map
                 to ``True``.
        loc:     Location of ``content``.
        tag_loc: From the opening ``<`` to the closing tag's ``>``.
    """
    type: str
    content: str
    attrs: dict[str, AttrValue]
    loc: SourceLocation
    tag_loc: SourceLocation

    @property
    def lang(self) -> Optional[str]:
        value = self.attrs.get("lang")
        return value if isinstance(value, str) and value else None

    @property
    def is_setup(self) -> bool:
        return bool(self.attrs.get("setup"))


@dataclass(slots=True)
class SfcDescriptor:
    filename: str = ""
    source: str = ""
    template: Optional[SfcBlock] = None
    script: Optional[SfcBlock] = None
    script_setup: Optional[SfcBlock] = None
    styles: list[SfcBlock] = field(default_factory=list)
    custom_blocks: list[SfcBlock] = field(default_factory=list)
