"""File and folder locations.

This module exports the location types and the child enumeration
sequence returned by ``Folder.files`` and ``Folder.subfolders``.
"""

from filekit.locations.base import Location
from filekit.locations.file import File
from filekit.locations.folder import Folder
from filekit.locations.sequence import ChildIterator, ChildSequence

__all__ = [
    "ChildIterator",
    "ChildSequence",
    "File",
    "Folder",
    "Location",
]
