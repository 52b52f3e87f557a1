"""Tests for font manifest data models."""

import pytest
from pydantic import ValidationError

from fontmanifest.core.models import FontAlias, FontAxis, FontEntry, FontFamily, FontPath


class TestFontEntry:
    """Test FontEntry regular-face rule."""

    def test_unweighted_upright_font_is_regular(self):
        assert FontEntry(path="/f/a.ttf").is_regular()

    def test_weight_400_is_regular(self):
        assert FontEntry(path="/f/a.ttf", weight=400).is_regular()

    @pytest.mark.parametrize("weight", [0, 100, 300, 500, 700, 900])
    def test_other_weights_are_not_regular(self, weight):
        """Absent weight counts as regular, explicit non-400 weights never do."""
        assert not FontEntry(path="/f/a.ttf", weight=weight).is_regular()

    @pytest.mark.parametrize("weight", [None, 400, 700])
    def test_italic_is_never_regular(self, weight):
        assert not FontEntry(path="/f/a.ttf", weight=weight, italic=True).is_regular()

    def test_defaults(self):
        """Test FontEntry defaults."""
        entry = FontEntry()

        assert entry.path is None
        assert entry.weight is None
        assert entry.italic is False
        assert entry.fallback_for is None
        assert entry.index == 0
        assert entry.axes == ()

    def test_font_path_matches_plain_tuple(self):
        entry = FontEntry(path="/system/fonts/NotoSansCJK-Regular.ttc", index=2)

        assert entry.font_path() == ("/system/fonts/NotoSansCJK-Regular.ttc", 2)
        assert entry.font_path().path == "/system/fonts/NotoSansCJK-Regular.ttc"
        assert entry.font_path().index == 2

    def test_entries_are_frozen(self):
        entry = FontEntry(path="/f/a.ttf")

        with pytest.raises(ValidationError):
            entry.weight = 700


class TestFontFamily:
    """Test FontFamily identity semantics."""

    def test_anonymous_families_equal_by_language(self):
        a = FontFamily(lang="und-Thai", variant="elegant", fonts=(FontEntry(path="/a"),))
        b = FontFamily(lang="und-Thai", variant="compact")

        assert a == b
        assert hash(a) == hash(b)

    def test_anonymous_families_differ_by_language(self):
        assert FontFamily(lang="ja") != FontFamily(lang="ko")

    def test_named_families_equal_by_name(self):
        a = FontFamily(name="serif", fonts=(FontEntry(path="/a"),))
        b = FontFamily(name="serif", lang="en")

        assert a == b
        assert len({a, b}) == 1

    def test_named_and_anonymous_are_never_equal(self):
        assert FontFamily(name="serif") != FontFamily(lang="und-Thai")
        assert FontFamily(name="serif", lang="ja") != FontFamily(lang="ja")

    def test_anonymous_without_language_are_equal(self):
        assert FontFamily() == FontFamily(variant="compact")

    def test_kind_helpers(self):
        assert FontFamily(name="serif").is_named
        assert FontFamily(lang="ja").is_fallback

    def test_string_representation(self):
        assert str(FontFamily(name="serif")) == "serif (0 fonts)"
        assert str(FontFamily(lang="ja", fonts=(FontEntry(path="/a"),))) == "[ja] (1 fonts)"


class TestFontAliasAndAxis:
    """Test FontAlias and FontAxis records."""

    def test_alias_weight_is_optional(self):
        alias = FontAlias(name="arial", to="sans-serif")

        assert alias.weight is None

    def test_axis_holds_float_value(self):
        axis = FontAxis(tag="wght", stylevalue=400)

        assert axis.stylevalue == 400.0
        assert isinstance(axis.stylevalue, float)

    def test_font_path_is_a_tuple(self):
        path, index = FontPath("/system/fonts/Roboto-Regular.ttf", 0)

        assert path == "/system/fonts/Roboto-Regular.ttf"
        assert index == 0
