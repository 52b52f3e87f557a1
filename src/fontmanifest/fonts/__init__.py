"""Font Manifest Module
====================

Loading of font configuration manifests and font resolution over them.
"""

from .events import (
    EndElement,
    StartElement,
    TextContent,
    iter_manifest_events,
    iter_manifest_events_from_string,
)
from .loader import ManifestLoader
from .manager import FontManifest

__all__ = [
    "EndElement",
    "FontManifest",
    "ManifestLoader",
    "StartElement",
    "TextContent",
    "iter_manifest_events",
    "iter_manifest_events_from_string",
]
