"""
Environment-level settings — the middle configuration layer.

Two sections mirror the editor settings a host would forward:
``prettier`` (prettier option names) and ``html_format`` (markup engine
option names).  Keys are kept as given; the resolver normalises them.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

import yaml

from core.options import camel_case
from formatters.settings import ENV_PREFIX

logger = logging.getLogger(__name__)

PRETTIER_PREFIX = f"{ENV_PREFIX}PRETTIER_"
HTML_PREFIX = f"{ENV_PREFIX}HTML_"

# Engine locations share the prefix but are not formatting options
_ENGINE_VARIABLES = frozenset({
    f"{ENV_PREFIX}PRETTIER_BIN",
    f"{ENV_PREFIX}HTML_BEAUTIFY_BIN",
})


def decode_value(raw: str) -> Any:
    """Decode one variable value: ``2`` → 2, ``true`` → True, else the string."""
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw


@dataclass(frozen=True, slots=True)
class EnvironmentSettings:
    prettier: Mapping[str, Any] = field(default_factory=dict)
    html_format: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> EnvironmentSettings:
        """Collect ``SFC_FORMAT_PRETTIER_<KEY>`` and ``SFC_FORMAT_HTML_<KEY>``.

        ``SFC_FORMAT_PRETTIER_TAB_WIDTH=2`` becomes ``prettier["tabWidth"] = 2``.
        """
        env = os.environ if environ is None else environ
        prettier: dict[str, Any] = {}
        html_format: dict[str, Any] = {}
        for key, raw in env.items():
            if key in _ENGINE_VARIABLES:
                continue
            if key.startswith(PRETTIER_PREFIX):
                prettier[camel_case(key[len(PRETTIER_PREFIX):].lower())] = decode_value(raw)
            elif key.startswith(HTML_PREFIX):
                html_format[camel_case(key[len(HTML_PREFIX):].lower())] = decode_value(raw)
        if prettier or html_format:
            logger.debug("Environment settings: prettier=%s html_format=%s",
                         sorted(prettier), sorted(html_format))
        return cls(prettier=prettier, html_format=html_format)

    def merged_with(
        self,
        prettier: Optional[Mapping[str, Any]] = None,
        html_format: Optional[Mapping[str, Any]] = None,
    ) -> EnvironmentSettings:
        """Return new settings with *prettier* / *html_format* layered on top."""
        return EnvironmentSettings(
            prettier={**self.prettier, **(prettier or {})},
            html_format={**self.html_format, **(html_format or {})},
        )
