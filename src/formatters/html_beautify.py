"""
Adapter for js-beautify's ``html-beautify`` CLI — the markup engine.
"""
from __future__ import annotations

from core.options import FormattingOptions, MarkupOptions
from formatters._process import run_tool
from formatters.settings import EngineSettings


def build_args(markup: MarkupOptions) -> list[str]:
    args = [
        "--wrap-attributes", markup.wrap_attributes,
        "--wrap-line-length", str(markup.wrap_line_length),
        "--indent-size", str(markup.indent_size),
    ]
    for tag in markup.unformatted:
        args += ["--unformatted", tag]
    if markup.indent_inner_html:
        args.append("--indent-inner-html")
    if markup.end_with_newline:
        args.append("--end-with-newline")
    return args


def format_markup(
    text: str,
    options: FormattingOptions,
    settings: EngineSettings | None = None,
) -> str:
    """Format a whole template block.  Raises ``FormatterError``."""
    settings = settings or EngineSettings()
    cmd = [*settings.html_beautify_command, *build_args(options.markup)]
    output = run_tool(cmd, text, timeout=settings.timeout)
    # The span being replaced never includes its last line's EOL,
    # even when --end-with-newline asks the CLI for one
    return output.rstrip("\r\n")
