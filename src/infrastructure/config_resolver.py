"""
Configuration resolver — layered merge into one FormattingOptions.

Merge order, later layers win:
    built-in defaults  <  environment settings  <  project ``.prettierrc``

The project file only feeds the code/stylesheet options; markup options
come from the defaults and the environment's ``html_format`` section.
Every layer is normalised against the defaults: unknown keys are
ignored and ill-typed values dropped, so the result is always complete.
"""
from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml

from core.errors import ConfigResolutionError
from core.options import DEFAULT_OPTIONS, FormattingOptions, snake_case
from infrastructure.environment import EnvironmentSettings

logger = logging.getLogger(__name__)

PROJECT_CONFIG_FILENAME = ".prettierrc"

_INVALID = object()


class ConfigResolver:
    """
    Resolves options for **one** formatting pass.

    ``resolve()`` computes the options at most once per instance; create
    a new resolver for every pass so edits to the project file are seen.
    """

    def __init__(
        self,
        project_root: Union[str, Path, None] = None,
        environment: Optional[EnvironmentSettings] = None,
    ):
        self._project_root = Path(project_root) if project_root else None
        self._environment = environment or EnvironmentSettings()
        self._resolved: Optional[FormattingOptions] = None

    @property
    def config_path(self) -> Optional[Path]:
        if self._project_root is None:
            return None
        return self._project_root / PROJECT_CONFIG_FILENAME

    def resolve(self) -> FormattingOptions:
        if self._resolved is None:
            self._resolved = self._resolve()
        return self._resolved

    def load_project_config(self) -> dict[str, Any]:
        """Read the project config file.

        Returns ``{}`` when there is no project root or no file.  Raises
        ``ConfigResolutionError`` when the file cannot be read or does
        not hold a mapping.
        """
        path = self.config_path
        if path is None or not path.is_file():
            return {}
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigResolutionError(f"Cannot read {path}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise ConfigResolutionError(f"Invalid config in {path}: {exc}") from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigResolutionError(
                f"Config in {path} must be a mapping, got {type(data).__name__}"
            )
        return data

    def _resolve(self) -> FormattingOptions:
        prettier_layer: dict[str, Any] = dict(self._environment.prettier)
        try:
            project = self.load_project_config()
        except ConfigResolutionError as exc:
            logger.warning("Ignoring project config: %s", exc)
        else:
            if project:
                logger.debug("Loaded %d options from %s", len(project), self.config_path)
            prettier_layer.update(project)
        return build_options(prettier_layer, self._environment.html_format)


def build_options(
    prettier: Mapping[str, Any],
    html_format: Mapping[str, Any],
    base: FormattingOptions = DEFAULT_OPTIONS,
) -> FormattingOptions:
    """Layer *prettier* and *html_format* onto *base*."""
    markup = dataclasses.replace(base.markup, **_normalise(html_format, base.markup))
    return dataclasses.replace(base, markup=markup, **_normalise(prettier, base))


def _normalise(layer: Mapping[str, Any], target: Any) -> dict[str, Any]:
    defaults = {
        f.name: getattr(target, f.name)
        for f in dataclasses.fields(target)
        if f.name != "markup"
    }
    changes: dict[str, Any] = {}
    for key, value in layer.items():
        name = snake_case(str(key))
        if name not in defaults:
            logger.debug("Ignoring unknown option %r", key)
            continue
        coerced = _coerce(value, defaults[name])
        if coerced is _INVALID:
            logger.warning("Ignoring option %s=%r: expected %s",
                           key, value, type(defaults[name]).__name__)
            continue
        changes[name] = coerced
    return changes


def _coerce(value: Any, default: Any) -> Any:
    if isinstance(default, bool):
        return value if isinstance(value, bool) else _INVALID
    if isinstance(default, int):
        if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
            return value
        return _INVALID
    if isinstance(default, str):
        return value if isinstance(value, str) else _INVALID
    if isinstance(default, tuple):
        if isinstance(value, str):
            return tuple(item.strip() for item in value.split(",") if item.strip())
        if isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value):
            return tuple(value)
        return _INVALID
    return _INVALID
