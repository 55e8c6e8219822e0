#!/usr/bin/env python3
"""
imgstamp CLI - print the relative timestamp of an image.

The value is the number of seconds counted from the day of month of the
image's capture time, read from EXIF or the file modification date.
"""

from __future__ import annotations

import sys

import click
from rich.table import Table

from imgstamp.console import console
from imgstamp.console import echo
from imgstamp.console import error
from imgstamp.core import load_metadata
from imgstamp.core import timestamp_from_metadata
from imgstamp.definitions import ImageMetadata
from imgstamp.definitions import TimestampReading


def handle_exception(verbose: bool, exc: Exception) -> None:
    """Handle exceptions with optional verbose traceback."""
    if verbose:
        console.print_exception(show_locals=True, width=300, max_frames=3)
        sys.exit(1)
    else:
        error(str(exc))


def render_details(
    path: str, metadata: ImageMetadata, reading: TimestampReading
) -> Table:
    """Build a table describing the image and where the timestamp came from."""
    table = Table(title=path, show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Format", metadata.format or "unknown")
    if metadata.width is not None and metadata.height is not None:
        table.add_row("Size", f"{metadata.width}x{metadata.height}")
    table.add_row("Source", reading.source.label)
    table.add_row("Captured", reading.captured.isoformat(sep=" "))
    table.add_row("Seconds", str(reading.value))
    return table


@click.command()
@click.version_option(package_name="imgstamp")
@click.argument("path", type=click.Path())
@click.option(
    "--details", is_flag=True, help="Show the image format, size and metadata field used"
)
@click.option("--verbose", is_flag=True, help="Show full tracebacks on errors")
def main(path: str, details: bool, verbose: bool) -> None:
    """Print the timestamp of the image at PATH in seconds."""

    try:
        metadata = load_metadata(path)
        reading = timestamp_from_metadata(metadata)
    except Exception as exc:
        handle_exception(verbose, exc)
        return

    if details:
        echo(render_details(path, metadata, reading))
    else:
        echo(str(reading.value), highlight=False)


if __name__ == "__main__":
    main()
