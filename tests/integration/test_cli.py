"""
CLI Integration Tests
=====================

Runs the click commands against the representative manifest.
"""

import json

import pytest
from click.testing import CliRunner

from main import cli

pytestmark = pytest.mark.integration


class TestCLIIntegration:
    """CLI integration tests."""

    @pytest.fixture
    def runner(self):
        """Click test runner."""
        return CliRunner()

    @pytest.fixture
    def invoke(self, runner, fonts_xml):
        def _invoke(*args):
            return runner.invoke(cli, ["--manifest", str(fonts_xml), *args])

        return _invoke

    def test_help(self, runner):
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "Font manifest query CLI" in result.output

    def test_default(self, invoke):
        result = invoke("default")

        assert result.exit_code == 0
        assert "Family: sans-serif" in result.output
        assert "/system/fonts/Roboto-Regular.ttf\t0" in result.output

    def test_resolve(self, invoke):
        result = invoke("resolve", "arial")

        assert result.exit_code == 0
        assert result.output.strip() == "sans-serif"

    def test_family(self, invoke):
        result = invoke("family", "arial")

        assert result.exit_code == 0
        assert "/system/fonts/Roboto-Regular.ttf\t0" in result.output
        assert "Roboto-Thin.ttf" not in result.output

    def test_family_not_found(self, invoke):
        result = invoke("family", "comic-sans")

        assert result.exit_code == 1

    def test_lang(self, invoke):
        result = invoke("lang", "zh-Hans")

        assert result.exit_code == 0
        assert result.output.strip() == "/system/fonts/NotoSansCJK-Regular.ttc\t2"

    def test_lang_with_family(self, invoke):
        result = invoke("lang", "und-Thai", "--family", "serif")

        assert result.exit_code == 0
        assert result.output.strip() == "/system/fonts/NotoSerifThai-Regular.ttf\t0"

    def test_lang_not_found(self, invoke):
        result = invoke("lang", "tlh")

        assert result.exit_code == 1

    def test_families(self, invoke):
        result = invoke("families")

        assert result.exit_code == 0
        names = result.output.splitlines()
        for name in ["sans-serif", "serif", "monospace", "arial"]:
            assert name in names

    def test_paths(self, invoke):
        result = invoke("paths")

        assert result.exit_code == 0
        assert "/system/fonts/Roboto-Thin.ttf\t0" in result.output

    def test_font_dir_override(self, runner, fonts_xml):
        result = runner.invoke(
            cli, ["--manifest", str(fonts_xml), "--font-dir", "/vendor/fonts/", "lang", "ja"]
        )

        assert result.exit_code == 0
        assert result.output.strip() == "/vendor/fonts/NotoSansCJK-Regular.ttc\t0"

    def test_stats(self, invoke):
        result = invoke("stats")

        assert result.exit_code == 0
        assert "Named families: 4" in result.output
        assert "Aliases: 11" in result.output

    def test_export(self, invoke, temp_dir):
        output = temp_dir / "manifest.json"

        result = invoke("export", str(output))

        assert result.exit_code == 0
        assert len(json.loads(output.read_text())["families"]) == 19

    def test_missing_manifest(self, runner, temp_dir):
        result = runner.invoke(cli, ["--manifest", str(temp_dir / "missing.xml"), "paths"])

        assert result.exit_code == 2

    def test_malformed_config_file(self, runner, fonts_xml, temp_dir):
        config_path = temp_dir / "bad.yaml"
        config_path.write_text("log_level: [unclosed\n")

        result = runner.invoke(
            cli, ["--config", str(config_path), "--manifest", str(fonts_xml), "paths"]
        )

        assert result.exit_code == 2
        assert result.exception is None or isinstance(result.exception, SystemExit)

    def test_invalid_log_level_env(self, runner, fonts_xml, monkeypatch):
        monkeypatch.setenv("FONTMANIFEST_LOG_LEVEL", "loud")

        result = runner.invoke(cli, ["--manifest", str(fonts_xml), "paths"])

        assert result.exit_code == 2
        assert result.exception is None or isinstance(result.exception, SystemExit)

    def test_config_file(self, runner, fonts_xml, temp_dir):
        config_path = temp_dir / "config.yaml"
        config_path.write_text(f"manifest_path: {fonts_xml}\nfont_dir: /product/fonts\n")

        result = runner.invoke(cli, ["--config", str(config_path), "lang", "ko"])

        assert result.exit_code == 0
        assert result.output.strip() == "/product/fonts/NotoSansCJK-Regular.ttc\t1"
