"""Font Manifest
=============

Loads a platform font configuration manifest (an Android style fonts.xml)
and resolves font families, aliases and per-language fallbacks to font files.
"""

__version__ = "1.0.0"

from .core.config import ManifestConfig
from .core.exceptions import FontManifestError, FontNotFoundError, ManifestLoadError
from .core.models import FontAlias, FontAxis, FontEntry, FontFamily, FontPath
from .fonts import FontManifest, ManifestLoader

__all__ = [
    "FontAlias",
    "FontAxis",
    "FontEntry",
    "FontFamily",
    "FontManifest",
    "FontManifestError",
    "FontNotFoundError",
    "FontPath",
    "ManifestConfig",
    "ManifestLoadError",
    "ManifestLoader",
]
