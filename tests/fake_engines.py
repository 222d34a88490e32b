"""Deterministic stand-ins for the external formatting engines.

Each fake re-indents by nesting depth using the passed options, so its
output is stable (formatting its own output changes nothing) and the
tests can reason about exact results without Node tooling installed.
"""
import re
import threading
import time
from typing import Optional

from core import FormatterError, FormattingOptions
from formatters import FormatterEngines

_VOID = {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "track", "wbr"}
_TAG_NAME_RE = re.compile(r"<([A-Za-z][\w-]*)")


def _indent_unit(options: FormattingOptions) -> str:
    return "\t" if options.use_tabs else " " * options.tab_width


def _reindent_braces(text: str, unit: str) -> list[str]:
    out: list[str] = []
    depth = 0
    for raw in text.split("\n"):
        line = raw.strip()
        if not line:
            continue
        if line.startswith("}"):
            depth = max(depth - 1, 0)
        out.append(unit * depth + line)
        depth += line.count("{") - line.count("}") + (1 if line.startswith("}") else 0)
        depth = max(depth, 0)
    return out


class FakeEngines:
    """
    Configurable fake engines.  Tests can set ``.delays`` (seconds per
    engine family) to shuffle completion order, and inspect ``.calls``
    to see which engine ran with which parser.
    """

    def __init__(self):
        self.calls: list[tuple[str, Optional[str]]] = []
        self.delays: dict[str, float] = {}
        self._lock = threading.Lock()

    def _record(self, family: str, parser: Optional[str]) -> None:
        with self._lock:
            self.calls.append((family, parser))
        delay = self.delays.get(family)
        if delay:
            time.sleep(delay)

    def markup(self, text: str, options: FormattingOptions) -> str:
        self._record("markup", None)
        unit = " " * options.markup.indent_size
        out: list[str] = []
        depth = 0
        for raw in text.split("\n"):
            line = raw.strip()
            if not line:
                continue
            if line.startswith("</"):
                depth = max(depth - 1, 0)
                out.append(unit * depth + line)
                continue
            out.append(unit * depth + line)
            match = _TAG_NAME_RE.match(line)
            if match and "</" not in line and not line.endswith("/>") and match.group(1).lower() not in _VOID:
                depth += 1
        # html-beautify terminates its output only when asked to
        return "\n".join(out) + ("\n" if options.markup.end_with_newline else "")

    def code(self, text: str, parser: str, options: FormattingOptions) -> str:
        self._record("code", parser)
        if "SYNTAX ERROR" in text:
            raise FormatterError(f"SyntaxError: unexpected token ({parser})")
        lines = _reindent_braces(text, _indent_unit(options))
        quote, other = ("'", '"') if options.single_quote else ('"', "'")
        return "\n".join(line.replace(other, quote) for line in lines) + "\n"

    def stylesheet(self, text: str, dialect: str, options: FormattingOptions) -> str:
        self._record("stylesheet", dialect)
        if text.count("{") != text.count("}"):
            raise FormatterError(f"CssSyntaxError: Unclosed block ({dialect})")
        return "\n".join(_reindent_braces(text, _indent_unit(options))) + "\n"

    def as_engines(self) -> FormatterEngines:
        return FormatterEngines(markup=self.markup, code=self.code, stylesheet=self.stylesheet)
