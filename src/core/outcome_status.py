from enum import Enum


class OutcomeStatus(Enum):
    """
    Final state of one region after a formatting pass.
    """
    CHANGED = "changed"      # formatted output differs, an edit is emitted
    UNCHANGED = "unchanged"  # already formatted, or nothing to format
    FAILED = "failed"        # engine or splice failure; no edit is emitted
