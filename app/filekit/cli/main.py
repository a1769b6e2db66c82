"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from filekit import __version__
from filekit.cli.commands import empty, info, ls
from filekit.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="filekit",
    help="Locate, inspect and manage files and folders.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"filekit version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route library logging through Rich on stderr.

    Args:
        verbose: Log at DEBUG level instead of WARNING.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
) -> None:
    """filekit - Locate, inspect and manage files and folders.

    Paths may be absolute, relative to the current directory, start
    with ~, or contain ../ segments.
    """
    configure_logging(verbose)


# Register commands
app.command(name="ls")(ls.ls)
app.command(name="info")(info.info)
app.command(name="empty")(empty.empty)


if __name__ == "__main__":
    app()
