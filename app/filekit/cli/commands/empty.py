"""Empty command for deleting a folder's contents.

This module provides the `filekit empty` command, which permanently
deletes every file and subfolder inside a folder while keeping the
folder itself.
"""

from typing import Annotated

import typer
from rich.table import Table

from filekit.cli.types import get_storage
from filekit.core.errors import FilesError
from filekit.locations import Folder, Location
from filekit.utils.formatting import (
    console,
    format_kind,
    print_error,
    print_info,
    print_success,
    print_warning,
)


def empty(
    path: Annotated[
        str,
        typer.Argument(help="Folder to empty."),
    ],
    hidden: Annotated[
        bool,
        typer.Option("--hidden", help="Also delete hidden entries."),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", "-n", help="Show what would be deleted."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Permanently delete the contents of a folder.

    Files are deleted first, then subfolders with everything inside them.
    Deletion stops at the first failure; anything deleted before it is gone.

    Examples:
        filekit empty build/               # Delete with confirmation
        filekit empty build/ --dry-run     # Preview only
        filekit empty cache/ --hidden -y   # Include dot files, no prompt
    """
    try:
        folder = Folder(path, get_storage())
    except FilesError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    files = folder.files.including_hidden if hidden else folder.files
    subfolders = folder.subfolders.including_hidden if hidden else folder.subfolders
    planned: list[Location] = [*files, *subfolders]

    if not planned:
        print_info(f"{folder.path} is already empty.")
        return

    _print_deletion_plan(folder, planned, dry_run)

    if dry_run:
        print_info(f"Dry-run: {len(planned)} item(s) would be deleted.")
        return

    if not yes:
        confirmed = typer.confirm(
            f"\nProceed with deleting {len(planned)} item(s)?",
            default=False,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    try:
        folder.empty(including_hidden=hidden)
    except FilesError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Emptied {folder.path}")

    if not hidden:
        kept = folder.files.including_hidden.count() + folder.subfolders.including_hidden.count()
        if kept:
            print_warning(f"Kept {kept} hidden item(s); pass --hidden to delete them.")


def _print_deletion_plan(folder: Folder, planned: list[Location], dry_run: bool) -> None:
    """Display planned deletions."""
    label = "Planned Deletions (dry-run)" if dry_run else "Planned Deletions"
    table = Table(title=label, show_lines=False)
    table.add_column("", width=2, justify="center")
    table.add_column("Path", style="bold")

    for location in planned:
        table.add_row(format_kind(location.kind), location.relative_path(folder))

    console.print(table)
