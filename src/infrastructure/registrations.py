"""
Central wiring — register all region kind handlers.

To add a new region kind, add one ``register()`` call below.
This module is imported (as a side-effect) by ``dispatch``
to ensure handlers are available before first use.
"""
from core.region_kind import RegionKind
from infrastructure.registry import register, RegionKindHandler

from region_types import markup
from region_types import script
from region_types import style


# ---- Markup ----
register(RegionKind.MARKUP, RegionKindHandler(
    select_parser=markup.select_parser,
    invoke=markup.invoke,
    splices_content=markup.SPLICES_CONTENT,
))

# ---- Script / script setup share one handler family ----
_script_handler = RegionKindHandler(
    select_parser=script.select_parser,
    invoke=script.invoke,
    splices_content=script.SPLICES_CONTENT,
)
register(RegionKind.SCRIPT, _script_handler)
register(RegionKind.SCRIPT_SETUP, _script_handler)

# ---- Style ----
register(RegionKind.STYLE, RegionKindHandler(
    select_parser=style.select_parser,
    invoke=style.invoke,
    splices_content=style.SPLICES_CONTENT,
))
