"""
Font Manifest CLI
=================

This CLI loads a font configuration manifest and answers font resolution
queries against it.
"""

import logging
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from .core.config import ManifestConfig
from .core.exceptions import ConfigurationError, FontNotFoundError, ManifestLoadError
from .core.models import FontPath
from .fonts import FontManifest

# Setup logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

EXIT_NOT_FOUND = 1
EXIT_LOAD_FAILED = 2


def _load(ctx: click.Context) -> FontManifest:
    options = ctx.obj
    config = options["config"]
    try:
        return FontManifest.load(options["manifest"], options["font_dir"], config=config)
    except ManifestLoadError as e:
        logger.error(f"Failed to load manifest: {e}")
        sys.exit(EXIT_LOAD_FAILED)


def _echo_paths(paths: list[FontPath]) -> None:
    for path, index in paths:
        click.echo(f"{path}\t{index}")


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration YAML file",
)
@click.option(
    "--manifest",
    "-m",
    type=click.Path(path_type=Path),
    help="Font manifest XML file (overrides configuration)",
)
@click.option("--font-dir", help="Directory prefix for font files (overrides configuration)")
@click.pass_context
def cli(ctx, verbose, config_path, manifest, font_dir):
    """Font manifest query CLI."""
    try:
        config = ManifestConfig.from_env_and_yaml(yaml_path=config_path)
    except (ConfigurationError, ValidationError) as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(EXIT_LOAD_FAILED)
    logging.getLogger().setLevel(logging.DEBUG if verbose else config.log_level)
    ctx.obj = {"config": config, "manifest": manifest, "font_dir": font_dir}


@cli.command(name="default")
@click.pass_context
def default(ctx):
    """Show the default family and its regular font."""
    manifest = _load(ctx)
    click.echo(f"Family: {manifest.default_family_name()}")
    try:
        path, index = manifest.default_font_path_by_lang("")
        click.echo(f"Font: {path}\t{index}")
    except FontNotFoundError as e:
        logger.error(str(e))
        sys.exit(EXIT_NOT_FOUND)


@cli.command(name="resolve")
@click.argument("name")
@click.pass_context
def resolve(ctx, name):
    """Resolve an alias to its family name."""
    click.echo(_load(ctx).resolve_alias(name))


@cli.command(name="family")
@click.argument("name")
@click.pass_context
def family(ctx, name):
    """List the fonts implementing a family or alias."""
    manifest = _load(ctx)
    try:
        _echo_paths(manifest.select_family_by_name(name))
    except FontNotFoundError as e:
        logger.error(str(e))
        sys.exit(EXIT_NOT_FOUND)


@cli.command(name="lang")
@click.argument("lang")
@click.option("--family", "-f", "family_name", help="Family the fallback font must serve")
@click.pass_context
def lang(ctx, lang, family_name):
    """Find the font for a language tag."""
    manifest = _load(ctx)
    try:
        if family_name:
            path, index = manifest.font_path_by_family_and_lang(family_name, lang)
        else:
            path, index = manifest.default_font_path_by_lang(lang)
    except FontNotFoundError as e:
        logger.error(str(e))
        sys.exit(EXIT_NOT_FOUND)
    click.echo(f"{path}\t{index}")


@cli.command(name="families")
@click.pass_context
def families(ctx):
    """List family and alias names."""
    for name in _load(ctx).all_families():
        click.echo(name)


@cli.command(name="paths")
@click.pass_context
def paths(ctx):
    """List every font file in the manifest."""
    _echo_paths(_load(ctx).all_font_paths())


@cli.command(name="stats")
@click.pass_context
def stats(ctx):
    """Show manifest statistics."""
    manifest = _load(ctx)
    click.echo("Font Manifest Statistics")
    click.echo("=" * 40)
    for key, value in manifest.get_statistics().items():
        click.echo(f"{key.replace('_', ' ').capitalize()}: {value}")


@cli.command(name="export")
@click.argument("output", type=click.Path(path_type=Path))
@click.pass_context
def export(ctx, output):
    """Export the loaded manifest as JSON."""
    manifest = _load(ctx)
    try:
        manifest.export_json(output)
    except OSError as e:
        logger.exception(f"Export failed: {e}")
        sys.exit(EXIT_LOAD_FAILED)
    click.echo(f"Exported {len(manifest)} families to {output}")

