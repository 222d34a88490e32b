from __future__ import annotations

from enum import Enum


class RegionKind(Enum):
    """Determines which formatter family a region is routed to."""
    MARKUP = "markup"
    SCRIPT = "script"
    SCRIPT_SETUP = "scriptSetup"
    STYLE = "style"
