"""
Parser for single-file components.

Splits a component file into its top-level blocks::

    <template> ... </template>     markup, scanned for balanced elements
    <script> ... </script>         raw text
    <script setup> ... </script>   raw text
    <style lang="scss"> ... </style>   raw text, any number of them
    <i18n> ... </i18n>             custom block, raw text

Only block boundaries are recovered; block contents are never
interpreted beyond the element balance check of HTML templates.
Raises ``SfcParseError`` on structurally invalid files.
"""
from __future__ import annotations

import bisect
import re

from core.errors import SfcParseError
from sfc.descriptor import AttrValue, Position, SfcBlock, SfcDescriptor, SourceLocation


_EOL_RE = re.compile(r"\r\n|\r|\n")

_OPEN_TAG_RE = re.compile(
    r"<(?P<name>[A-Za-z][^\s/>]*)"
    r"(?P<attrs>(?:\s+[^\s\"'>/=]+(?:\s*=\s*(?:\"[^\"]*\"|'[^']*'|[^\s\"'=<>`]+))?)*)"
    r"\s*(?P<self_closing>/?)>"
)

_CLOSE_TAG_RE = re.compile(r"</(?P<name>[A-Za-z][^\s/>]*)\s*>")

_ATTR_RE = re.compile(
    r"(?P<name>[^\s\"'>/=]+)"
    r"(?:\s*=\s*(?:\"(?P<dq>[^\"]*)\"|'(?P<sq>[^']*)'|(?P<bare>[^\s\"'=<>`]+)))?"
)

# Inside a template: the next tag, comment or interpolation
_TEMPLATE_TOKEN_RE = re.compile(r"<|\{\{")

VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input", "keygen",
    "link", "menuitem", "meta", "param", "source", "track", "wbr",
})

# Elements whose content is raw text even inside a template
RAW_TEXT_ELEMENTS = frozenset({"script", "style", "textarea"})

HTML_TEMPLATE_LANGS = (None, "html")


class _Locator:
    """Maps absolute offsets to 1-based (line, column) positions."""

    __slots__ = ("_starts",)

    def __init__(self, text: str):
        self._starts = [0] + [m.end() for m in _EOL_RE.finditer(text)]

    def position(self, offset: int) -> Position:
        index = bisect.bisect_right(self._starts, offset) - 1
        return Position(offset=offset, line=index + 1, column=offset - self._starts[index] + 1)

    def line(self, offset: int) -> int:
        return bisect.bisect_right(self._starts, offset)


def parse_attrs(raw: str) -> dict[str, AttrValue]:
    """Parse the attribute portion of an opening tag."""
    attrs: dict[str, AttrValue] = {}
    for match in _ATTR_RE.finditer(raw):
        value = match.group("dq")
        if value is None:
            value = match.group("sq")
        if value is None:
            value = match.group("bare")
        attrs[match.group("name").lower()] = True if value is None else value
    return attrs


def parse(text: str, filename: str = "") -> SfcDescriptor:
    """
    Parse component source text into an :class:`SfcDescriptor`.

    Text outside of top-level blocks is ignored.  Raises
    ``SfcParseError`` for unterminated blocks or comments, stray closing
    tags, unbalanced template elements and duplicated singleton blocks.
    """
    locator = _Locator(text)
    descriptor = SfcDescriptor(filename=filename, source=text)

    pos = 0
    while True:
        lt = text.find("<", pos)
        if lt == -1:
            break

        if text.startswith("<!--", lt):
            pos = _skip_comment(text, lt, locator)
            continue

        if text.startswith(("<!", "<?"), lt):
            gt = text.find(">", lt)
            if gt == -1:
                raise SfcParseError("Unterminated declaration", locator.line(lt))
            pos = gt + 1
            continue

        if text.startswith("</", lt):
            close = _CLOSE_TAG_RE.match(text, lt)
            name = close.group("name") if close else "?"
            raise SfcParseError(f"Unexpected closing tag </{name}>", locator.line(lt))

        opening = _OPEN_TAG_RE.match(text, lt)
        if opening is None:
            # Stray '<' in top-level text
            pos = lt + 1
            continue

        block = _read_block(text, opening, locator)
        _add_block(descriptor, block)
        pos = block.tag_loc.end.offset

    return descriptor


# ------------------------------------------------------------------
# Internals
# ------------------------------------------------------------------

def _skip_comment(text: str, start: int, locator: _Locator) -> int:
    end = text.find("-->", start + 4)
    if end == -1:
        raise SfcParseError("Unterminated comment", locator.line(start))
    return end + 3


def _read_block(text: str, opening: re.Match[str], locator: _Locator) -> SfcBlock:
    name = opening.group("name").lower()
    attrs = parse_attrs(opening.group("attrs"))
    tag_start = opening.start()
    content_start = opening.end()

    if opening.group("self_closing"):
        content_end = close_end = content_start
    elif name == "template" and attrs.get("lang") in HTML_TEMPLATE_LANGS:
        content_end, close_end = _scan_template(text, content_start, tag_start, locator)
    else:
        content_end, close_end = _find_raw_close(text, name, content_start, tag_start, locator)

    return SfcBlock(
        type=name,
        content=text[content_start:content_end],
        attrs=attrs,
        loc=SourceLocation(
            start=locator.position(content_start),
            end=locator.position(content_end),
            source=text[content_start:content_end],
        ),
        tag_loc=SourceLocation(
            start=locator.position(tag_start),
            end=locator.position(close_end),
            source=text[tag_start:close_end],
        ),
    )


def _find_raw_close(
    text: str, name: str, start: int, tag_start: int, locator: _Locator,
) -> tuple[int, int]:
    """Return (start, end) of the ``</name>`` that terminates raw text."""
    close_re = re.compile(rf"</{re.escape(name)}\s*>", re.IGNORECASE)
    match = close_re.search(text, start)
    if match is None:
        raise SfcParseError(f"Element <{name}> is missing end tag", locator.line(tag_start))
    return match.start(), match.end()


def _scan_template(
    text: str, start: int, tag_start: int, locator: _Locator,
) -> tuple[int, int]:
    """Walk an HTML template until its own ``</template>``.

    Nested elements must be balanced; void elements and self-closing
    tags do not open a scope.
    """
    stack: list[tuple[str, int]] = []
    pos = start
    while True:
        token = _TEMPLATE_TOKEN_RE.search(text, pos)
        if token is None:
            if stack:
                name, opened_at = stack[-1]
                raise SfcParseError(f"Element <{name}> is missing end tag", locator.line(opened_at))
            raise SfcParseError("Element <template> is missing end tag", locator.line(tag_start))

        at = token.start()
        if token.group() == "{{":
            end = text.find("}}", at + 2)
            closing = text.find("</template", at + 2)
            # An interpolation never runs past the template's own end
            if end == -1 or (closing != -1 and closing < end):
                pos = at + 2
            else:
                pos = end + 2
            continue

        if text.startswith("<!--", at):
            pos = _skip_comment(text, at, locator)
            continue

        if text.startswith("</", at):
            close = _CLOSE_TAG_RE.match(text, at)
            if close is None:
                pos = at + 2
                continue
            name = close.group("name").lower()
            if not stack and name == "template":
                return at, close.end()
            if not stack:
                raise SfcParseError(f"Unexpected closing tag </{name}>", locator.line(at))
            if stack[-1][0] != name:
                raise SfcParseError(
                    f"Unbalanced tags: </{name}> closes <{stack[-1][0]}>", locator.line(at)
                )
            stack.pop()
            pos = close.end()
            continue

        opening = _OPEN_TAG_RE.match(text, at)
        if opening is None:
            pos = at + 1
            continue
        name = opening.group("name").lower()
        pos = opening.end()
        if opening.group("self_closing") or name in VOID_ELEMENTS:
            continue
        if name in RAW_TEXT_ELEMENTS:
            _, pos = _find_raw_close(text, name, pos, at, locator)
            continue
        stack.append((name, at))


def _add_block(descriptor: SfcDescriptor, block: SfcBlock) -> None:
    line = block.tag_loc.start.line
    if block.type == "template":
        if descriptor.template is not None:
            raise SfcParseError("Single file component can contain only one <template> element", line)
        descriptor.template = block
    elif block.type == "script":
        if block.is_setup:
            if descriptor.script_setup is not None:
                raise SfcParseError("Single file component can contain only one <script setup> element", line)
            descriptor.script_setup = block
        else:
            if descriptor.script is not None:
                raise SfcParseError("Single file component can contain only one <script> element", line)
            descriptor.script = block
    elif block.type == "style":
        descriptor.styles.append(block)
    else:
        descriptor.custom_blocks.append(block)
