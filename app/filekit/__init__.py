"""filekit - object-oriented access to files and folders.

Locate, create, read, write, rename, move, copy, delete, and enumerate
files and folders through validated File and Folder handles.
"""

from filekit.core.errors import (
    FilesError,
    LocationError,
    LocationErrorReason,
    ReadError,
    ReadErrorReason,
    WriteError,
    WriteErrorReason,
)
from filekit.core.models import LocationKind
from filekit.core.storage import LocalStorage, StorageBackend
from filekit.locations import ChildIterator, ChildSequence, File, Folder, Location

__version__ = "0.1.0"

__all__ = [
    "ChildIterator",
    "ChildSequence",
    "File",
    "FilesError",
    "Folder",
    "LocalStorage",
    "Location",
    "LocationError",
    "LocationErrorReason",
    "LocationKind",
    "ReadError",
    "ReadErrorReason",
    "StorageBackend",
    "WriteError",
    "WriteErrorReason",
    "__version__",
]
