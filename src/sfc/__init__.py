from sfc.descriptor import Position, SourceLocation, SfcBlock, SfcDescriptor
from sfc.parser import parse

__all__ = [
    "Position",
    "SourceLocation",
    "SfcBlock",
    "SfcDescriptor",
    "parse",
]
