"""Pydantic models for the font manifest data model."""

from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field

REGULAR_WEIGHT = 400


class FontPath(NamedTuple):
    """Resolved font file and the face index inside it."""

    path: str
    index: int


class FontAxis(BaseModel):
    """Variation axis setting attached to a font entry."""

    model_config = ConfigDict(frozen=True)

    tag: str = Field("", description="Four character axis tag, e.g. wght")
    stylevalue: float = Field(0.0, description="Axis value")


class FontEntry(BaseModel):
    """One font file (or face of a collection) inside a family."""

    model_config = ConfigDict(frozen=True)

    path: str | None = None
    weight: int | None = None
    italic: bool = False
    fallback_for: str | None = None
    index: int = 0
    axes: tuple[FontAxis, ...] = ()

    def is_regular(self) -> bool:
        """Non-italic, and either unweighted or weight 400."""
        if self.italic:
            return False
        if self.weight is not None:
            return self.weight == REGULAR_WEIGHT
        return True

    def font_path(self) -> FontPath:
        return FontPath(self.path, self.index)


class FontFamily(BaseModel):
    """
    Named family or anonymous language fallback family.

    Two families are equal when both are anonymous with the same language tag,
    or both are named with the same name. Font lists are not compared.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    lang: str | None = None
    variant: str | None = None
    fonts: tuple[FontEntry, ...] = ()

    @property
    def is_named(self) -> bool:
        return self.name is not None

    @property
    def is_fallback(self) -> bool:
        return self.name is None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FontFamily):
            return NotImplemented
        if self.name is None and other.name is None:
            return self.lang == other.lang
        return self.name is not None and self.name == other.name

    def __hash__(self) -> int:
        if self.name is None:
            return hash((None, self.lang))
        return hash(self.name)

    def __str__(self) -> str:
        label = self.name if self.name is not None else f"[{self.lang}]"
        return f"{label} ({len(self.fonts)} fonts)"


class FontAlias(BaseModel):
    """Alternate family name pointing at a canonical family."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    to: str = ""
    weight: int | None = None
