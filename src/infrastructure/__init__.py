from infrastructure.registry import RegionKindHandler, register, get_handler
from infrastructure.region_extractor import extract_regions
from infrastructure.dispatch import format_region
from infrastructure.splice import splice, synthesize
from infrastructure.environment import EnvironmentSettings
from infrastructure.config_resolver import ConfigResolver, build_options, PROJECT_CONFIG_FILENAME
from infrastructure.document_io import load_document, save_text, apply_edits

__all__ = [
    "RegionKindHandler",
    "register",
    "get_handler",
    "extract_regions",
    "format_region",
    "splice",
    "synthesize",
    "EnvironmentSettings",
    "ConfigResolver",
    "build_options",
    "PROJECT_CONFIG_FILENAME",
    "load_document",
    "save_text",
    "apply_edits",
]
