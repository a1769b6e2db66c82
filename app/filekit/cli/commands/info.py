"""Info command for a single file or folder.

This module provides the `filekit info` command, which resolves a path
and shows the location's canonical path, naming and dates.
"""

import json
from typing import Annotated

import typer
from rich.table import Table

from filekit.cli.types import OutputFormat, get_storage, locate
from filekit.core.errors import FilesError
from filekit.locations import Location
from filekit.utils.formatting import console, format_date, format_size, print_error


def info(
    path: Annotated[
        str,
        typer.Argument(help="File or folder to inspect. Defaults to the current directory."),
    ] = "",
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format.", case_sensitive=False),
    ] = OutputFormat.TABLE,
) -> None:
    """Show details about a file or folder.

    Relative paths, ~ and ../ segments are resolved before lookup.

    Examples:
        filekit info ~/notes.txt
        filekit info ../shared -f json
    """
    try:
        location = locate(path, get_storage())
    except FilesError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    details = _describe(location)

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(details))
        return

    table = Table(title=location.name, show_header=False, border_style="border")
    table.add_column("Property", style="header")
    table.add_column("Value", style="text")
    for key, value in details.items():
        table.add_row(key.replace("_", " ").capitalize(), "-" if value is None else str(value))
    console.print(table)


def _describe(location: Location) -> dict[str, str | None]:
    """Collect the displayed properties of a location."""
    attributes = location.storage.attributes(location.path)
    parent = location.parent
    return {
        "kind": location.kind.value,
        "name": location.name,
        "path": location.path,
        "extension": location.extension,
        "name_excluding_extension": location.name_excluding_extension,
        "parent": parent.path if parent is not None else None,
        "size": format_size(attributes.size_bytes),
        "created": format_date(location.creation_date),
        "modified": format_date(location.modification_date),
    }
