"""Folder locations: lookup, creation and enumeration of children."""

from __future__ import annotations

import logging

from filekit.core.errors import LocationError, WriteError, WriteErrorReason
from filekit.core.models import LocationKind
from filekit.core.resolver import (
    appending_suffix_if_needed,
    collapse_current_references,
    make_parent_path,
    removing_prefix,
)
from filekit.core.storage import LocalStorage, StorageBackend
from filekit.locations.base import Location
from filekit.locations.file import File
from filekit.locations.sequence import ChildSequence

logger = logging.getLogger(__name__)


class Folder(Location):
    """An existing folder.

    Reference a folder by path (an empty path means the current working
    directory), use one of the well-known folders, or create subfolders
    with ``create_subfolder``.

    Example:
        >>> projects = Folder.home().create_subfolder_if_needed("projects")
        >>> projects.files.recursive.count()
        0
    """

    kind = LocationKind.FOLDER

    # -- well-known folders --------------------------------------------------

    @classmethod
    def root(cls, storage: StorageBackend | None = None) -> Folder:
        """The root folder of the file system."""
        storage = storage if storage is not None else LocalStorage()
        return cls(storage.root_path, storage)

    @classmethod
    def home(cls, storage: StorageBackend | None = None) -> Folder:
        """The current user's home folder."""
        return cls("~", storage)

    @classmethod
    def temporary(cls, storage: StorageBackend | None = None) -> Folder:
        """The system's temporary folder."""
        storage = storage if storage is not None else LocalStorage()
        return cls(storage.temporary_directory(), storage)

    @classmethod
    def current(cls, storage: StorageBackend | None = None) -> Folder:
        """The folder the program is currently operating in."""
        return cls("", storage)

    # -- children ------------------------------------------------------------

    @property
    def files(self) -> ChildSequence[File]:
        """This folder's files. Non-recursive and excluding hidden files."""
        return ChildSequence(self, File)

    @property
    def subfolders(self) -> ChildSequence[Folder]:
        """This folder's subfolders. Non-recursive and excluding hidden folders."""
        return ChildSequence(self, Folder)

    def subfolder(self, path: str) -> Folder:
        """Return an existing subfolder.

        Args:
            path: Name of a direct subfolder, or a path relative to this folder.

        Raises:
            LocationError: MISSING if no such subfolder exists.
        """
        folder_path = self._path + removing_prefix(removing_prefix(path, "/"), "./")
        return Folder(folder_path, self._storage)

    def file(self, path: str) -> File:
        """Return an existing file within this folder.

        Args:
            path: Name of a direct child file, or a path relative to this folder.

        Raises:
            LocationError: MISSING if no such file exists.
        """
        return File(self._path + removing_prefix(path, "/"), self._storage)

    def contains_subfolder(self, path: str) -> bool:
        """Return whether a subfolder exists at a relative path."""
        try:
            self.subfolder(path)
        except LocationError:
            return False
        return True

    def contains_file(self, path: str) -> bool:
        """Return whether a file exists at a relative path."""
        try:
            self.file(path)
        except LocationError:
            return False
        return True

    def contains(self, location: Location) -> bool:
        """Return whether a location with the same name and kind is a direct child."""
        if location.kind == LocationKind.FILE:
            return self.contains_file(location.name)
        return self.contains_subfolder(location.name)

    # -- creation ------------------------------------------------------------

    def create_subfolder(self, path: str) -> Folder:
        """Create a new subfolder, including any missing intermediate folders.

        Args:
            path: Name or relative path of the subfolder.

        Returns:
            The created folder.

        Raises:
            WriteError: EMPTY_PATH if path refers to this folder, or
                FOLDER_CREATION_FAILED if the folder already exists or
                could not be created.
        """
        folder_path = self._path + removing_prefix(path, "/")
        if collapse_current_references(appending_suffix_if_needed(folder_path, "/")) == self._path:
            raise WriteError(folder_path, WriteErrorReason.EMPTY_PATH)

        try:
            self._storage.create_directory(folder_path, parents=True)
            return Folder(folder_path, self._storage)
        except (OSError, LocationError) as e:
            raise WriteError(folder_path, WriteErrorReason.FOLDER_CREATION_FAILED, cause=e) from e

    def create_subfolder_if_needed(self, path: str) -> Folder:
        """Return the subfolder at path, creating it if it does not exist.

        Raises:
            WriteError: If a new folder could not be created.
        """
        try:
            return self.subfolder(path)
        except LocationError:
            return self.create_subfolder(path)

    def create_file(self, path: str, contents: bytes | str | None = None) -> File:
        """Create a new file, including any missing intermediate folders.

        Args:
            path: Name or relative path of the file.
            contents: Initial contents. Strings are encoded with the
                backend's default encoding.

        Returns:
            The created file.

        Raises:
            WriteError: EMPTY_PATH, FOLDER_CREATION_FAILED for an
                intermediate folder, STRING_ENCODING_FAILED, or
                FILE_CREATION_FAILED if the file already exists or could
                not be created.
        """
        relative = removing_prefix(path, "/")
        file_path = self._path + relative
        parent_path = make_parent_path(file_path)
        if not relative or parent_path is None:
            raise WriteError(file_path, WriteErrorReason.EMPTY_PATH)

        data = self._encode_contents(file_path, contents)

        if parent_path != self._path:
            try:
                self._storage.create_directory(parent_path, parents=True, exist_ok=True)
            except OSError as e:
                raise WriteError(
                    parent_path, WriteErrorReason.FOLDER_CREATION_FAILED, cause=e
                ) from e

        if not self._storage.create_file(file_path, data):
            raise WriteError(file_path, WriteErrorReason.FILE_CREATION_FAILED)

        try:
            return File(file_path, self._storage)
        except LocationError as e:
            raise WriteError(file_path, WriteErrorReason.FILE_CREATION_FAILED, cause=e) from e

    def create_file_if_needed(self, path: str, contents: bytes | str | None = None) -> File:
        """Return the file at path, creating it with contents if it does not exist.

        An existing file is returned unmodified.

        Raises:
            WriteError: If a new file could not be created.
        """
        try:
            return self.file(path)
        except LocationError:
            return self.create_file(path, contents)

    # -- bulk operations -----------------------------------------------------

    def move_contents(self, to: Folder, include_hidden: bool = False) -> None:
        """Move all direct child files, then all direct subfolders, into another folder.

        Raises:
            LocationError: MOVE_FAILED for the first item that failed.
                Items moved before the failure stay moved.
        """
        files = self.files.including_hidden if include_hidden else self.files
        files.move(to)

        subfolders = self.subfolders.including_hidden if include_hidden else self.subfolders
        subfolders.move(to)

    def empty(self, including_hidden: bool = False) -> None:
        """Permanently delete this folder's contents, keeping the folder itself.

        Raises:
            LocationError: DELETE_FAILED for the first item that failed.
                Items deleted before the failure are not recovered.
        """
        files = self.files.including_hidden if including_hidden else self.files
        files.delete()

        subfolders = self.subfolders.including_hidden if including_hidden else self.subfolders
        subfolders.delete()
        logger.debug("Emptied %s", self._path)

    def _encode_contents(self, file_path: str, contents: bytes | str | None) -> bytes | None:
        if contents is None or isinstance(contents, bytes):
            return contents
        try:
            return contents.encode(self._storage.encoding)
        except UnicodeEncodeError as e:
            raise WriteError(
                file_path, WriteErrorReason.STRING_ENCODING_FAILED, cause=e, detail=contents
            ) from e
