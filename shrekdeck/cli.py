#!/usr/bin/env python3
"""shrekdeck CLI - turn deck lists into Tabletop Simulator saved objects."""

import logging
import sys
from pathlib import Path

import click

from shrekdeck import __version__
from shrekdeck.cards.base import CardInfo
from shrekdeck.cards.bloodless import BloodlessCard
from shrekdeck.cards.template import template_card_type
from shrekdeck.config import get_settings, load_env, load_skin
from shrekdeck.errors import DeckSyntaxError, ShrekDeckError
from shrekdeck.export import write_save, write_to_tabletop
from shrekdeck.parser import parse_file
from shrekdeck.tts.builder import build_save
from shrekdeck.tts.inspect import format_summary, load_save, summarize_save
from shrekdeck.tts.paths import get_tts_dir
from shrekdeck.tts.thumbnail import ThumbnailStyle, thumbnail_from_image

logger = logging.getLogger(__name__)

deck_file = click.Path(exists=True, dir_okay=False, path_type=Path)


def _card_type(skin: Path | None) -> type[CardInfo]:
    if skin is None:
        return BloodlessCard
    return template_card_type(load_skin(skin))


def _fail(error: Exception) -> None:
    """Print an error listing to stderr and exit 1."""
    if isinstance(error, DeckSyntaxError):
        for e in error.errors:
            click.echo(str(e), err=True)
            click.echo(err=True)
        click.echo(f"{len(error.errors)} line(s) could not be parsed", err=True)
    else:
        click.echo(f"Error: {error}", err=True)
    sys.exit(1)


def _read_deck(input_path: Path, skin: Path | None):
    try:
        return parse_file(input_path, _card_type(skin))
    except (OSError, UnicodeDecodeError) as e:
        raise click.FileError(str(input_path), hint=str(e)) from e


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging")
def cli(verbose):
    """shrekdeck - build Tabletop Simulator decks from text deck lists.

    Deck lists hold one "<count>x <card name>" entry per line.
    """
    load_env()
    level = logging.DEBUG if verbose else get_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


@cli.command()
@click.option("-i", "--input", "input_path", type=deck_file, required=True,
              help="The path to the deck file")
@click.option("-o", "--output", type=click.Path(path_type=Path), required=True,
              help="The output path (will overwrite!)")
@click.option("-t", "--tabletop", is_flag=True,
              help="Output path is relative to Tabletop Simulator's saved objects directory. "
                   "Will overwrite existing objects.")
@click.option("-f", "--flask", is_flag=True,
              help="Use the blood flask thumbnail (does nothing without --tabletop)")
@click.option("--skin", type=deck_file, help="YAML skin file (default: Bloodless cards)")
@click.option("--name", default="", help="Deck nickname shown in the simulator")
@click.option("--thumbnail", type=deck_file,
              help="Image to use as the thumbnail (does nothing without --tabletop)")
def build(input_path, output, tabletop, flask, skin, name, thumbnail):
    """Build a saved object from a deck list."""
    try:
        entries = _read_deck(input_path, skin)
        save = build_save(entries, nickname=name)

        if tabletop:
            image = thumbnail_from_image(thumbnail) if thumbnail else None
            style = ThumbnailStyle.FLASK if flask else ThumbnailStyle.CARD
            json_path, png_path = write_to_tabletop(save, output, thumbnail=image, style=style)
            click.echo(f"Wrote {json_path}")
            click.echo(f"Wrote {png_path}")
        else:
            click.echo(f"Wrote {write_save(save, output)}")
    except ShrekDeckError as e:
        _fail(e)


@cli.command()
@click.option("-i", "--input", "input_path", type=deck_file, required=True,
              help="The path to the deck file")
@click.option("--skin", type=deck_file, help="YAML skin file (default: Bloodless cards)")
def check(input_path, skin):
    """Parse a deck list and report errors without writing anything."""
    try:
        entries = _read_deck(input_path, skin)
    except ShrekDeckError as e:
        _fail(e)
        return

    distinct = len({entry.card.get_name() for entry in entries})
    copies = sum(entry.quantity for entry in entries)
    click.echo(f"OK: {len(entries)} entries, {distinct} distinct cards, {copies} copies")


@cli.command()
@click.argument("save_path", type=deck_file)
def inspect(save_path):
    """Summarize the decks in a saved object file."""
    try:
        summaries = summarize_save(load_save(save_path))
    except ShrekDeckError as e:
        _fail(e)
        return

    click.echo(format_summary(summaries))
    if any(summary.warnings for summary in summaries):
        sys.exit(1)


@cli.command()
def where():
    """Print Tabletop Simulator's saved objects directory."""
    path = get_tts_dir()
    if path is None:
        click.echo("Tabletop Simulator directory could not be found!", err=True)
        sys.exit(1)
    click.echo(str(path))


if __name__ == "__main__":
    cli()
