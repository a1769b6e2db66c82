"""List command for folder contents.

This module provides the `filekit ls` command, which enumerates a
folder's files and subfolders, optionally recursively and including
hidden entries.
"""

import json
from typing import Annotated, Any

import typer

from filekit.cli.types import ChildChoice, OutputFormat, get_storage
from filekit.core.errors import FilesError
from filekit.core.models import LocationKind
from filekit.locations import ChildSequence, Folder, Location
from filekit.utils.formatting import (
    console,
    create_location_table,
    format_date,
    format_kind,
    format_size,
    print_error,
    print_info,
)


def ls(
    path: Annotated[
        str,
        typer.Argument(help="Folder to list. Defaults to the current directory."),
    ] = "",
    recursive: Annotated[
        bool,
        typer.Option("--recursive", "-r", help="Descend into subfolders."),
    ] = False,
    show_all: Annotated[
        bool,
        typer.Option("--all", "-a", help="Include hidden entries."),
    ] = False,
    only: Annotated[
        ChildChoice,
        typer.Option(
            "--only", help="Restrict the listing to files or folders.", case_sensitive=False
        ),
    ] = ChildChoice.ALL,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format.", case_sensitive=False),
    ] = OutputFormat.TABLE,
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-l", help="Limit number of results."),
    ] = None,
) -> None:
    """List the files and subfolders of a folder.

    Subfolders are listed before files, each in sorted order.

    Examples:
        filekit ls                  # Current directory
        filekit ls ~/projects -r    # Recursive listing
        filekit ls . -a --only files -f json
    """
    try:
        folder = Folder(path, get_storage())
        locations = _collect(
            folder, only, recursive=recursive, include_hidden=show_all, limit=limit
        )
    except FilesError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if output_format == OutputFormat.JSON:
        _print_json(folder, locations)
        return

    if not locations:
        print_info(f"{folder.path} is empty.")
        return

    _print_table(folder, locations)
    console.print(f"\n[muted]{len(locations)} item(s) in {folder.path}[/]")


# === Private helper functions ===


def _collect(
    folder: Folder,
    only: ChildChoice,
    *,
    recursive: bool,
    include_hidden: bool,
    limit: int | None,
) -> list[Location]:
    """Gather the requested children, honouring the limit lazily."""
    sequences: list[ChildSequence[Any]] = []
    if only in (ChildChoice.FOLDERS, ChildChoice.ALL):
        sequences.append(folder.subfolders)
    if only in (ChildChoice.FILES, ChildChoice.ALL):
        sequences.append(folder.files)

    locations: list[Location] = []
    for base in sequences:
        sequence = base.recursive if recursive else base
        if include_hidden:
            sequence = sequence.including_hidden
        for location in sequence:
            if limit is not None and len(locations) >= limit:
                return locations
            locations.append(location)
    return locations


def _print_table(folder: Folder, locations: list[Location]) -> None:
    """Display locations as a Rich table."""
    table = create_location_table(title=folder.path)
    for location in locations:
        attributes = location.storage.attributes(location.path)
        table.add_row(
            format_kind(location.kind),
            location.name,
            location.relative_path(folder),
            format_size(attributes.size_bytes) if location.kind == LocationKind.FILE else "-",
            format_date(attributes.modification_date),
        )
    console.print(table)


def _print_json(folder: Folder, locations: list[Location]) -> None:
    """Display locations as JSON."""
    data = [
        {
            "kind": location.kind.value,
            "name": location.name,
            "path": location.path,
            "relative_path": location.relative_path(folder),
            "extension": location.extension,
        }
        for location in locations
    ]
    console.print_json(json.dumps(data))
