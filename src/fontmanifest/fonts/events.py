"""
Manifest Parse Events
=====================

The loader consumes a flat stream of start/end/text events. This module
defines those events and produces them from an XML document with lxml.
"""

import io
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from lxml import etree

from ..core.exceptions import ManifestNotFoundError, ManifestParseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StartElement:
    """Opening tag with its attributes."""

    name: str
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class EndElement:
    """Closing tag."""

    name: str


@dataclass(frozen=True)
class TextContent:
    """Non-whitespace character data inside the innermost open element."""

    text: str


ManifestEvent = StartElement | EndElement | TextContent


def _local_name(tag: str) -> str:
    return etree.QName(tag).localname


def _text_segments(element) -> Iterator[str]:
    """Own text plus the tails of child nodes, skipping blank segments."""
    if element.text and element.text.strip():
        yield element.text
    for child in element:
        if child.tail and child.tail.strip():
            yield child.tail


def _iter_events(source, source_name: str) -> Iterator[ManifestEvent]:
    try:
        for action, element in etree.iterparse(source, events=("start", "end")):
            if not isinstance(element.tag, str):
                continue

            name = _local_name(element.tag)
            if action == "start":
                attributes = {_local_name(k): v for k, v in element.attrib.items()}
                yield StartElement(name, attributes)
            else:
                for text in _text_segments(element):
                    yield TextContent(text)
                yield EndElement(name)
    except etree.XMLSyntaxError as e:
        raise ManifestParseError(source_name, str(e)) from e


def iter_manifest_events(manifest_path: str | Path) -> Iterator[ManifestEvent]:
    """
    Stream parse events from a manifest file.

    Args:
        manifest_path: Path to the XML manifest

    Raises:
        ManifestNotFoundError: If the file cannot be opened
        ManifestParseError: If the document is not well-formed
    """
    manifest_path = Path(manifest_path)
    try:
        with open(manifest_path, "rb") as f:
            data = f.read()
    except FileNotFoundError as e:
        raise ManifestNotFoundError(str(manifest_path)) from e
    except OSError as e:
        raise ManifestNotFoundError(str(manifest_path), str(e)) from e

    logger.debug(f"Read {len(data)} bytes from {manifest_path}")
    yield from _iter_events(io.BytesIO(data), str(manifest_path))


def iter_manifest_events_from_string(data: str | bytes) -> Iterator[ManifestEvent]:
    """Stream parse events from an in-memory XML document."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    yield from _iter_events(io.BytesIO(data), "<string>")

