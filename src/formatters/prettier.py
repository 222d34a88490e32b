"""
Adapter for the prettier CLI — the code and stylesheet engine.

Options are passed as explicit flags together with ``--no-config`` so
prettier never layers its own config discovery over the options the
resolver already merged.
"""
from __future__ import annotations

from core.options import FormattingOptions
from formatters._process import run_tool
from formatters.settings import EngineSettings

# prettier flag name -> FormattingOptions attribute, by flag style
_VALUE_FLAGS = {
    "--arrow-parens": "arrow_parens",
    "--end-of-line": "end_of_line",
    "--html-whitespace-sensitivity": "html_whitespace_sensitivity",
    "--print-width": "print_width",
    "--prose-wrap": "prose_wrap",
    "--quote-props": "quote_props",
    "--tab-width": "tab_width",
    "--trailing-comma": "trailing_comma",
    "--embedded-language-formatting": "embedded_language_formatting",
}

# Options whose prettier default is true: only the negation is a flag
_NEGATABLE_FLAGS = {
    "--no-bracket-spacing": "bracket_spacing",
    "--no-semi": "semi",
}

# Options whose prettier default is false
_ENABLE_FLAGS = {
    "--insert-pragma": "insert_pragma",
    "--single-attribute-per-line": "single_attribute_per_line",
    "--bracket-same-line": "bracket_same_line",
    "--jsx-single-quote": "jsx_single_quote",
    "--require-pragma": "require_pragma",
    "--single-quote": "single_quote",
    "--use-tabs": "use_tabs",
    "--vue-indent-script-and-style": "vue_indent_script_and_style",
    "--experimental-ternaries": "experimental_ternaries",
}


def build_args(parser: str, options: FormattingOptions) -> list[str]:
    """Return the prettier arguments for *parser* and *options*."""
    args = ["--no-config", "--no-editorconfig", "--parser", parser]
    for flag, attr in _VALUE_FLAGS.items():
        args += [flag, str(getattr(options, attr))]
    for flag, attr in _NEGATABLE_FLAGS.items():
        if not getattr(options, attr):
            args.append(flag)
    for flag, attr in _ENABLE_FLAGS.items():
        if getattr(options, attr):
            args.append(flag)
    return args


def format_code(
    text: str,
    parser: str,
    options: FormattingOptions,
    settings: EngineSettings | None = None,
) -> str:
    """Format a script or stylesheet payload.  Raises ``FormatterError``."""
    settings = settings or EngineSettings()
    cmd = [*settings.prettier_command, *build_args(parser, options)]
    return run_tool(cmd, text, timeout=settings.timeout)
