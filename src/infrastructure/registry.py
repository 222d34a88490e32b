"""
Registry — maps RegionKind to the handler functions for that kind.

A new region kind takes three steps: a ``RegionKind`` member, a
``region_types`` module (parser selection + engine call) and one
``register()`` call in ``registrations.py``.  ``dispatch`` and the
pipeline only ever look handlers up through ``get_handler()``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, TYPE_CHECKING

from core.region_kind import RegionKind

if TYPE_CHECKING:
    from core.options import FormattingOptions
    from formatters.engines import FormatterEngines


@dataclass(frozen=True, slots=True)
class RegionKindHandler:
    """Bundle of functions that know how to format one region kind.

    ``splices_content`` is ``True`` when the engine formats only the
    payload and the result must be spliced back between the enclosing
    tags; ``False`` when the engine formats the whole span text.
    """
    select_parser: Callable[[Optional[str]], Optional[str]]
    invoke: Callable[["FormatterEngines", str, str, "FormattingOptions"], str]
    splices_content: bool


_handlers: dict[RegionKind, RegionKindHandler] = {}


def register(kind: RegionKind, handler: RegionKindHandler) -> None:
    """Register a handler for a region kind.  Raises on duplicates."""
    if kind in _handlers:
        raise ValueError(f"Handler already registered for {kind!r}")
    _handlers[kind] = handler


def get_handler(kind: RegionKind) -> RegionKindHandler:
    """Look up the handler for a region kind.  Raises on missing."""
    try:
        return _handlers[kind]
    except KeyError:
        raise ValueError(
            f"No handler registered for {kind!r}. "
            f"Did you forget to add a register() call in registrations.py?"
        ) from None
