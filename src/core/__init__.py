from core.region_kind import RegionKind
from core.outcome_status import OutcomeStatus
from core.document import Document
from core.region import LineSpan, Region
from core.edit import Edit, FormatOutcome
from core.options import (
    DEFAULT_OPTIONS,
    UNFORMATTED_TAGS,
    FormattingOptions,
    MarkupOptions,
)
from core.errors import (
    FormatPipelineError,
    SfcParseError,
    FormatterError,
    ConfigResolutionError,
    SpliceMismatchError,
)
from core.interfaces import IMarkupEngine, ICodeEngine, IStylesheetEngine

__all__ = [
    "RegionKind",
    "OutcomeStatus",
    "Document",
    "LineSpan",
    "Region",
    "Edit",
    "FormatOutcome",
    "DEFAULT_OPTIONS",
    "UNFORMATTED_TAGS",
    "FormattingOptions",
    "MarkupOptions",
    "FormatPipelineError",
    "SfcParseError",
    "FormatterError",
    "ConfigResolutionError",
    "SpliceMismatchError",
    "IMarkupEngine",
    "ICodeEngine",
    "IStylesheetEngine",
]
