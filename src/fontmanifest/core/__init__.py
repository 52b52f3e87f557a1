"""Core components for font manifest handling."""

from .config import ManifestConfig, load_config_from_yaml
from .exceptions import (
    ConfigurationError,
    FontManifestError,
    FontNotFoundError,
    InvalidAttributeError,
    ManifestLoadError,
    ManifestNotFoundError,
    ManifestParseError,
    ManifestStructureError,
)
from .models import FontAlias, FontAxis, FontEntry, FontFamily, FontPath

__all__ = [
    "ConfigurationError",
    "FontAlias",
    "FontAxis",
    "FontEntry",
    "FontFamily",
    "FontManifestError",
    "FontNotFoundError",
    "FontPath",
    "InvalidAttributeError",
    "ManifestConfig",
    "ManifestLoadError",
    "ManifestNotFoundError",
    "ManifestParseError",
    "ManifestStructureError",
    "load_config_from_yaml",
]
