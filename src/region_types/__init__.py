from region_types import markup
from region_types import script
from region_types import style

__all__ = [
    "markup",
    "script",
    "style",
]
