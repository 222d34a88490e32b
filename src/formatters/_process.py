"""
Subprocess helper for the external formatting engines.

Engines read the payload on stdin and write the result to stdout.
Every failure mode is folded into ``FormatterError`` so callers only
have to contain one exception type.
"""
from __future__ import annotations

import logging
import subprocess
from typing import Sequence

from core.errors import FormatterError

logger = logging.getLogger(__name__)


def run_tool(cmd: Sequence[str], input_text: str, timeout: float | None = None) -> str:
    """Run *cmd* with *input_text* on stdin and return its stdout.

    Raises ``FormatterError`` when the executable is missing, exits
    non-zero, or does not finish within *timeout* seconds.
    """
    argv = list(cmd)
    logger.debug("Running %s", argv[0])
    try:
        completed = subprocess.run(
            argv,
            input=input_text,
            capture_output=True,
            text=True,
            encoding="utf-8",
            timeout=timeout,
            check=False,
        )
    except FileNotFoundError as exc:
        raise FormatterError(f"Formatter executable not found: {argv[0]}") from exc
    except subprocess.TimeoutExpired as exc:
        raise FormatterError(f"{argv[0]} timed out after {timeout}s") from exc
    except OSError as exc:
        raise FormatterError(f"Cannot run {argv[0]}: {exc}") from exc

    if completed.returncode != 0:
        detail = completed.stderr.strip().splitlines()
        raise FormatterError(
            f"{argv[0]} exited with status {completed.returncode}"
            + (f": {detail[0]}" if detail else "")
        )
    return completed.stdout
