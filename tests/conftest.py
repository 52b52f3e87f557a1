"""
Pytest configuration and fixtures for font manifest tests.
"""

import tempfile
from pathlib import Path

import pytest

from fontmanifest.fonts import FontManifest

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture(scope="session")
def fonts_xml() -> Path:
    """Path to the representative manifest."""
    return DATA_DIR / "fonts-1.xml"


@pytest.fixture(scope="session")
def manifest(fonts_xml):
    """Manifest loaded from fonts-1.xml with the default font directory."""
    return FontManifest.load(fonts_xml, font_dir="/system/fonts/")


@pytest.fixture
def temp_dir():
    """Create temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def write_manifest(temp_dir):
    """Write an XML document to a temporary manifest file."""

    def _write(content: str, name: str = "fonts.xml") -> Path:
        path = temp_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
