"""Core data types shared by storage backends and locations."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class LocationKind(str, Enum):
    """Kind of entry a location refers to.

    Attributes:
        FILE: Anything that is not a directory.
        FOLDER: A directory.
    """

    FILE = "file"
    FOLDER = "folder"


@dataclass(frozen=True, slots=True)
class ItemAttributes:
    """Metadata reported by a storage backend for a single entry.

    All fields are None when the entry no longer exists.

    Attributes:
        creation_date: When the entry was created (birth time where the
            platform records it, otherwise the inode change time).
        modification_date: When the entry's contents were last modified.
        size_bytes: Size of the entry in bytes.
    """

    creation_date: datetime | None = None
    modification_date: datetime | None = None
    size_bytes: int | None = None
