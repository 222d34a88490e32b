from __future__ import annotations

import os
import shlex
from dataclasses import dataclass
from typing import Mapping

ENV_PREFIX = "SFC_FORMAT_"


@dataclass(frozen=True, slots=True)
class EngineSettings:
    """Where the external engines live and how long they may run."""
    prettier_command: tuple[str, ...] = ("prettier",)
    html_beautify_command: tuple[str, ...] = ("html-beautify",)
    timeout: float = 30.0

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> EngineSettings:
        """Read ``SFC_FORMAT_PRETTIER_BIN``, ``SFC_FORMAT_HTML_BEAUTIFY_BIN``
        and ``SFC_FORMAT_TIMEOUT``; unset variables keep the defaults.
        """
        env = os.environ if environ is None else environ
        defaults = cls()
        prettier = env.get(f"{ENV_PREFIX}PRETTIER_BIN")
        beautify = env.get(f"{ENV_PREFIX}HTML_BEAUTIFY_BIN")
        timeout = env.get(f"{ENV_PREFIX}TIMEOUT")
        return cls(
            prettier_command=tuple(shlex.split(prettier)) if prettier else defaults.prettier_command,
            html_beautify_command=tuple(shlex.split(beautify)) if beautify else defaults.html_beautify_command,
            timeout=float(timeout) if timeout else defaults.timeout,
        )
