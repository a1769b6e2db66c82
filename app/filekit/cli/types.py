"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from enum import Enum

from filekit.core.errors import LocationError, LocationErrorReason
from filekit.core.storage import LocalStorage, StorageBackend
from filekit.locations import File, Folder, Location


class ChildChoice(str, Enum):
    """Which children of a folder a command operates on."""

    FILES = "files"
    FOLDERS = "folders"
    ALL = "all"


class OutputFormat(str, Enum):
    """Output format options for listing commands."""

    TABLE = "table"
    JSON = "json"


def get_storage() -> StorageBackend:
    """Get the storage backend CLI commands operate on.

    Returns:
        Local file system backend configured from the user's settings file.
    """
    return LocalStorage.from_config()


def locate(path: str, storage: StorageBackend) -> Location:
    """Resolve a path to a Folder if one exists there, otherwise a File.

    Args:
        path: Raw path given on the command line.
        storage: Backend to resolve against.

    Returns:
        The Folder or File at path.

    Raises:
        LocationError: MISSING if neither a folder nor a file exists.
    """
    try:
        return Folder(path, storage)
    except LocationError as folder_error:
        try:
            return File(path, storage)
        except LocationError as e:
            if e.reason == LocationErrorReason.EMPTY_FILE_PATH:
                raise folder_error from None
            raise
