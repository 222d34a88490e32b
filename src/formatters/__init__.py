from formatters.engines import FormatterEngines, default_engines
from formatters.settings import EngineSettings
from formatters._process import run_tool

__all__ = [
    "FormatterEngines",
    "default_engines",
    "EngineSettings",
    "run_tool",
]
