"""
Manifest Loader
===============

Folds a stream of manifest parse events into family and alias records.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from ..core.config import DEFAULT_FONT_DIR
from ..core.exceptions import ManifestStructureError
from ..core.models import FontAlias, FontAxis, FontEntry, FontFamily
from .events import EndElement, ManifestEvent, StartElement, TextContent
from .utils import parse_float_attribute, parse_int_attribute, parse_italic, split_language_tags

logger = logging.getLogger(__name__)


@dataclass
class _FontBuilder:
    path: str | None = None
    weight: int | None = None
    italic: bool = False
    fallback_for: str | None = None
    index: int = 0
    axes: list[FontAxis] = field(default_factory=list)

    def build(self) -> FontEntry:
        return FontEntry(
            path=self.path,
            weight=self.weight,
            italic=self.italic,
            fallback_for=self.fallback_for,
            index=self.index,
            axes=tuple(self.axes),
        )


@dataclass
class _FamilyBuilder:
    name: str | None = None
    lang: str | None = None
    variant: str | None = None
    fonts: list[FontEntry] = field(default_factory=list)

    def build(self) -> list[FontFamily]:
        """One family per language tag; untagged families pass through."""
        family = FontFamily(
            name=self.name, lang=self.lang, variant=self.variant, fonts=tuple(self.fonts)
        )
        if self.lang is None:
            return [family]
        return [family.model_copy(update={"lang": tag}) for tag in split_language_tags(self.lang)]


def parse_alias(attributes: dict[str, str]) -> FontAlias:
    weight = attributes.get("weight")
    return FontAlias(
        name=attributes.get("name", ""),
        to=attributes.get("to", ""),
        weight=parse_int_attribute("alias", "weight", weight) if weight is not None else None,
    )


def parse_family(attributes: dict[str, str]) -> _FamilyBuilder:
    return _FamilyBuilder(
        name=attributes.get("name"),
        lang=attributes.get("lang"),
        variant=attributes.get("variant"),
    )


def parse_font(attributes: dict[str, str]) -> _FontBuilder:
    font = _FontBuilder()
    for key, value in attributes.items():
        if key == "weight":
            font.weight = parse_int_attribute("font", key, value)
        elif key == "style":
            font.italic = parse_italic(value, font.italic)
        elif key == "fallbackFor":
            font.fallback_for = value
        elif key == "index":
            font.index = parse_int_attribute("font", key, value)
    return font


def parse_axis(attributes: dict[str, str]) -> FontAxis:
    stylevalue = attributes.get("stylevalue")
    return FontAxis(
        tag=attributes.get("tag", ""),
        stylevalue=parse_float_attribute("axis", "stylevalue", stylevalue)
        if stylevalue is not None
        else 0.0,
    )


class ManifestLoader:
    """
    Event-driven manifest reader.

    Keeps a stack of open element names. Fonts are committed to the current
    family only when they close directly inside a ``family`` element and have
    received a file name; families are committed when they close, split into
    one record per language tag.
    """

    def __init__(self, font_dir: str = DEFAULT_FONT_DIR):
        self.font_dir = font_dir

    def load(self, events: Iterable[ManifestEvent]) -> tuple[list[FontFamily], list[FontAlias]]:
        """
        Consume an event stream.

        Args:
            events: Start/end/text events in document order

        Returns:
            (families, aliases) in manifest order

        Raises:
            ManifestLoadError: On attribute parse failures or broken nesting
        """
        open_elements: list[str] = []
        families: list[FontFamily] = []
        aliases: list[FontAlias] = []

        family = _FamilyBuilder()
        font = _FontBuilder()

        for event in events:
            if isinstance(event, StartElement):
                open_elements.append(event.name)

                if event.name == "alias":
                    alias = parse_alias(event.attributes)
                    aliases.append(alias)
                    logger.debug(f"Alias {alias.name} -> {alias.to}")
                elif event.name == "family":
                    family = parse_family(event.attributes)
                elif event.name == "font":
                    font = parse_font(event.attributes)
                elif event.name == "axis":
                    font.axes.append(parse_axis(event.attributes))

            elif isinstance(event, EndElement):
                if not open_elements:
                    raise ManifestStructureError(f"Unexpected closing tag </{event.name}>")
                opened = open_elements.pop()
                if opened != event.name:
                    raise ManifestStructureError(
                        f"Closing tag </{event.name}> does not match <{opened}>"
                    )

                if event.name == "font":
                    enclosing = open_elements[-1] if open_elements else None
                    if font.path is not None and enclosing == "family":
                        family.fonts.append(font.build())
                    else:
                        logger.debug(f"Dropping font outside family or without file: {font.path}")
                elif event.name == "family":
                    committed = family.build()
                    families.extend(committed)
                    logger.debug(
                        f"Family {family.name or '<fallback>'} committed as {len(committed)} record(s)"
                    )

            elif isinstance(event, TextContent):
                if not open_elements:
                    raise ManifestStructureError("Text outside of any element")
                text = event.text.strip()
                if text and open_elements[-1] == "font":
                    font.path = self.font_dir + text

        logger.info(f"Loaded {len(families)} font families and {len(aliases)} aliases")
        return families, aliases
