"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys
from datetime import datetime

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

from filekit.core.models import LocationKind

FILEKIT_THEME = Theme(
    {
        "text": "#ffffff",
        "muted": "#b2bec3",
        "header": "bold #69B9A1",
        "border": "#29526d",
        "success": "#03b971",
        "warning": "#f5b332",
        "error": "bold #f53263",
        "info": "#0ec1c8",
        "kind.folder": "bold #69B9A1",
        "kind.file": "#ffffff",
    }
)


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances
console = Console(theme=FILEKIT_THEME, color_system=_detect_color_system())
err_console = Console(theme=FILEKIT_THEME, stderr=True, color_system=_detect_color_system())


def create_location_table(title: str) -> Table:
    """Create a pre-configured table for listing locations.

    Args:
        title: Table title.

    Returns:
        Rich Table with kind, name, relative path, size and modified columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="header",
        border_style="border",
        row_styles=["", "on grey7"],  # Zebra striping for readability
    )
    table.add_column("", width=2, justify="center")
    table.add_column("Name", no_wrap=True)
    table.add_column("Path", style="muted")
    table.add_column("Size", style="info", justify="right")
    table.add_column("Modified", style="text")
    return table


def format_kind(kind: LocationKind) -> str:
    """Format a location kind as a single styled icon."""
    if kind == LocationKind.FOLDER:
        return "[kind.folder]■[/]"  # Filled square
    return "[kind.file]□[/]"  # Empty square


def format_size(size_bytes: int | None) -> str:
    """Format byte count as human-readable string."""
    if size_bytes is None:
        return "-"
    size = float(size_bytes)
    for unit in ("B", "KB", "MB", "GB"):
        if abs(size) < 1024:
            return f"{size:.1f} {unit}" if unit != "B" else f"{int(size)} B"
        size /= 1024
    return f"{size:.1f} TB"


def format_date(value: datetime | None) -> str:
    """Format a timestamp for table display, or "-" if unknown."""
    if value is None:
        return "-"
    return value.astimezone().strftime("%Y-%m-%d %H:%M")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
