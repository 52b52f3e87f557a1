"""
Font Manifest
=============

Read-only queries over the families and aliases loaded from a font manifest:
alias resolution, per-language fallback lookup and regular-face selection.
"""

import json
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from ..core.config import DEFAULT_FONT_DIR, ManifestConfig
from ..core.exceptions import FontNotFoundError
from ..core.models import FontAlias, FontEntry, FontFamily, FontPath
from .events import ManifestEvent, iter_manifest_events, iter_manifest_events_from_string
from .loader import ManifestLoader

logger = logging.getLogger(__name__)

# Fonts without fallbackFor serve this family
UNIVERSAL_FALLBACK = "sans-serif"


class FontManifest:
    """
    Loaded font configuration.

    Holds the families and aliases of one manifest in declaration order.
    Every query is a linear scan, and first-match ties are broken by manifest
    order. Instances are never mutated after construction.
    """

    def __init__(self, families: Iterable[FontFamily], aliases: Iterable[FontAlias]):
        self._families = tuple(families)
        self._aliases = tuple(aliases)

    @classmethod
    def load(
        cls,
        manifest_path: str | Path | None = None,
        font_dir: str | None = None,
        config: ManifestConfig | None = None,
    ) -> "FontManifest":
        """
        Load a manifest file.

        Args:
            manifest_path: Manifest to read; defaults to the configured path
            font_dir: Prefix for font file names; defaults to the configured directory
            config: Optional configuration, built from the environment if omitted

        Returns:
            Loaded FontManifest

        Raises:
            ManifestLoadError: If the file is missing or cannot be parsed
        """
        if manifest_path is None or font_dir is None:
            config = config or ManifestConfig()
            manifest_path = manifest_path if manifest_path is not None else config.manifest_path
            font_dir = font_dir if font_dir is not None else config.font_dir

        logger.info(f"Loading font manifest from {manifest_path}")
        return cls.from_events(iter_manifest_events(manifest_path), font_dir)

    @classmethod
    def from_events(
        cls, events: Iterable[ManifestEvent], font_dir: str = DEFAULT_FONT_DIR
    ) -> "FontManifest":
        """Build a manifest from an already parsed event stream."""
        families, aliases = ManifestLoader(font_dir).load(events)
        return cls(families, aliases)

    @classmethod
    def from_string(cls, data: str | bytes, font_dir: str = DEFAULT_FONT_DIR) -> "FontManifest":
        """Build a manifest from an in-memory XML document."""
        return cls.from_events(iter_manifest_events_from_string(data), font_dir)

    @property
    def families(self) -> tuple[FontFamily, ...]:
        return self._families

    @property
    def aliases(self) -> tuple[FontAlias, ...]:
        return self._aliases

    def default_family_name(self) -> str:
        """Return the name of the first named family, or "" if there is none."""
        for family in self._families:
            if family.name is not None:
                return family.name
        return ""

    def resolve_alias(self, name: str) -> str:
        """
        Resolve an alias to its target family name.

        Unknown names are returned unchanged; they are assumed to be family
        names already.
        """
        for alias in self._aliases:
            if alias.name == name:
                return alias.to
        return name

    def default_font_path_by_lang(self, lang: str) -> FontPath:
        """
        Get the regular font for a language.

        Families are scanned in manifest order; when the first family with the
        tag has no regular font, later families with the same tag are tried.

        Args:
            lang: Language tag; "" selects families without a language tag

        Returns:
            (path, index) of the first regular font among matching families

        Raises:
            FontNotFoundError: If no matching family has a regular font
        """
        wanted = lang if lang else None
        for family in self._families:
            if family.lang != wanted:
                continue
            font = _first_regular(family.fonts)
            if font is not None:
                return font.font_path()

        logger.debug(f"No regular font for language {lang!r}")
        raise FontNotFoundError(f"lang={lang!r}")

    def font_path_by_family_and_lang(self, name: str, lang: str) -> FontPath:
        """
        Get the fallback font serving ``name`` for a language.

        Args:
            name: Family the caller wants, e.g. "serif"
            lang: Exact language tag of the fallback family

        Returns:
            (path, index) of the first font declared as fallback for ``name``,
            or of the first undeclared font when ``name`` is sans-serif

        Raises:
            FontNotFoundError: If no font in the language serves the family
        """
        for family in self._families:
            if family.lang != lang:
                continue
            for font in family.fonts:
                if _serves(font, name):
                    return font.font_path()

        logger.debug(f"No font for family {name!r} in language {lang!r}")
        raise FontNotFoundError(f"family={name!r} lang={lang!r}")

    def select_family_by_name(self, family_name: str) -> list[FontPath]:
        """
        Collect every font implementing a family.

        The name is resolved through aliases first. Results follow manifest
        order: every regular font of the named family, plus every font of the
        language families that serves as its fallback.

        Raises:
            FontNotFoundError: If nothing implements the family
        """
        name = self.resolve_alias(family_name)
        selected: list[FontPath] = []

        for family in self._families:
            if family.name is not None:
                if family.name == name:
                    selected.extend(f.font_path() for f in family.fonts if f.is_regular())
            else:
                selected.extend(f.font_path() for f in family.fonts if _serves(f, name))

        if not selected:
            logger.debug(f"No fonts for family {family_name!r} (resolved to {name!r})")
            raise FontNotFoundError(f"family={family_name!r}")
        return selected

    def all_font_paths(self) -> list[FontPath]:
        """Return (path, index) for every stored font, duplicates included."""
        return [font.font_path() for family in self._families for font in family.fonts]

    def all_families(self) -> list[str]:
        """Return every family name followed by every alias name."""
        names = [family.name for family in self._families if family.name is not None]
        names.extend(alias.name for alias in self._aliases)
        return names

    def default_font_path(self) -> FontPath:
        """Return the first regular font of any family."""
        for family in self._families:
            font = _first_regular(family.fonts)
            if font is not None:
                return font.font_path()
        raise FontNotFoundError("default font")

    def font_path_by_family(self, name: str) -> FontPath:
        """Return the regular font of a named family. Aliases are not resolved."""
        for family in self._families:
            if family.name is not None and family.name == name:
                font = _first_regular(family.fonts)
                if font is not None:
                    return font.font_path()
        raise FontNotFoundError(f"family={name!r}")

    def font_path_by_lang(self, lang: str) -> FontPath:
        """Return the first font of any style declared for a language."""
        if lang:
            for family in self._families:
                if family.lang == lang and family.fonts:
                    return family.fonts[0].font_path()
        raise FontNotFoundError(f"lang={lang!r}")

    def languages(self) -> list[str]:
        """Distinct language tags in manifest order."""
        seen: dict[str, None] = {}
        for family in self._families:
            if family.lang is not None:
                seen.setdefault(family.lang, None)
        return list(seen)

    def get_statistics(self) -> dict[str, int]:
        """Get manifest statistics."""
        named = [f for f in self._families if f.is_named]
        return {
            "families": len(self._families),
            "named_families": len(named),
            "fallback_families": len(self._families) - len(named),
            "fonts": sum(len(f.fonts) for f in self._families),
            "aliases": len(self._aliases),
            "languages": len(self.languages()),
        }

    def to_dict(self) -> dict:
        """JSON-serializable view of the manifest."""
        return {
            "families": [family.model_dump(mode="json") for family in self._families],
            "aliases": [alias.model_dump(mode="json") for alias in self._aliases],
        }

    def export_json(self, output_path: str | Path) -> None:
        """
        Write the manifest as JSON.

        Args:
            output_path: Output file path
        """
        with open(output_path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

        logger.info(f"Exported font manifest to {output_path}")

    def __iter__(self) -> Iterator[FontFamily]:
        return iter(self._families)

    def __len__(self) -> int:
        return len(self._families)


def _first_regular(fonts: Iterable[FontEntry]) -> FontEntry | None:
    for font in fonts:
        if font.is_regular() and font.path is not None:
            return font
    return None


def _serves(font: FontEntry, name: str) -> bool:
    if font.fallback_for is not None:
        return font.fallback_for == name
    return name == UNIVERSAL_FALLBACK
