from __future__ import annotations

from dataclasses import dataclass

from core.outcome_status import OutcomeStatus
from core.region import LineSpan, Region


@dataclass(frozen=True, slots=True)
class FormatOutcome:
    """
    Result of formatting one region.

    ``replacement_text`` is the fully spliced span text; it is only
    meaningful when ``status`` is ``CHANGED``.
    """
    region: Region
    formatted_sub: str
    status: OutcomeStatus
    replacement_text: str = ""

    @property
    def changed(self) -> bool:
        return self.status is OutcomeStatus.CHANGED

    def to_edit(self) -> Edit:
        if not self.changed:
            raise ValueError("Only changed outcomes produce an edit")
        return Edit(span=self.region.span, replacement_text=self.replacement_text)


@dataclass(frozen=True, slots=True)
class Edit:
    """Replace the whole lines of ``span`` with ``replacement_text``."""
    span: LineSpan
    replacement_text: str
