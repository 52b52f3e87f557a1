"""
Font Manifest Utilities
=======================

Helpers for turning raw manifest attribute strings into typed values.
"""

from ..core.exceptions import InvalidAttributeError

ITALIC_STYLES = {"normal": False, "italic": True}


def parse_int_attribute(element: str, attribute: str, value: str) -> int:
    """
    Parse an integer attribute value.

    Args:
        element: Element name, for error messages
        attribute: Attribute name, for error messages
        value: Raw attribute text

    Returns:
        Parsed integer

    Raises:
        InvalidAttributeError: If the value is not an integer
    """
    try:
        return int(value)
    except ValueError as e:
        raise InvalidAttributeError(element, attribute, value, "integer") from e


def parse_float_attribute(element: str, attribute: str, value: str) -> float:
    """Parse a float attribute value, raising InvalidAttributeError on failure."""
    try:
        return float(value)
    except ValueError as e:
        raise InvalidAttributeError(element, attribute, value, "float") from e


def parse_italic(style: str, default: bool = False) -> bool:
    """Map a font ``style`` attribute to the italic flag."""
    return ITALIC_STYLES.get(style, default)


def split_language_tags(lang: str) -> list[str]:
    """
    Split a family ``lang`` attribute into individual tags.

    Comma takes precedence over space; a value with neither is a single tag.
    Empty fragments are dropped, but a value made only of separators is kept
    whole so the family is never lost.
    """
    if "," in lang:
        parts = lang.split(",")
    elif " " in lang:
        parts = lang.split(" ")
    else:
        return [lang]

    tags = [part.strip() for part in parts if part.strip()]
    return tags or [lang]
