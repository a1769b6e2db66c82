"""Shared behavior of file and folder locations.

A Location is a validated handle bound to the canonical path of an entry
that existed when the handle was created. It never caches contents or
listings; every query goes back to the storage backend, so a handle whose
entry has since been deleted keeps its path but fails on use.
"""

from __future__ import annotations

import logging
from abc import ABC
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Self

from filekit.core.errors import LocationError, LocationErrorReason
from filekit.core.models import LocationKind
from filekit.core.resolver import (
    SEPARATOR,
    appending_suffix_if_needed,
    make_parent_path,
    removing_suffix,
    resolve_path,
)
from filekit.core.storage import LocalStorage, StorageBackend

if TYPE_CHECKING:
    from filekit.locations.folder import Folder

logger = logging.getLogger(__name__)


class Location(ABC):
    """Abstract base class for File and Folder.

    Args:
        path: Absolute or relative path of an existing entry. ``~`` and
            ``../`` segments are resolved.
        storage: Backend to bind the location to. Defaults to the local
            file system.

    Raises:
        LocationError: If no entry of this location's kind exists at path.
    """

    kind: ClassVar[LocationKind]

    def __init__(self, path: str, storage: StorageBackend | None = None) -> None:
        self._storage = storage if storage is not None else LocalStorage()
        self._path = resolve_path(path, self.kind, self._storage)

    # -- identity ------------------------------------------------------------

    @property
    def path(self) -> str:
        """Canonical absolute path. Folder paths end with a separator."""
        return self._path

    @property
    def storage(self) -> StorageBackend:
        """Backend this location is bound to."""
        return self._storage

    def as_path(self) -> Path:
        """Return the canonical path as a ``pathlib.Path``."""
        return Path(self._path)

    @property
    def name(self) -> str:
        """Last path component, including any extension."""
        stripped = self._path.rstrip(SEPARATOR)
        return stripped.rsplit(SEPARATOR, 1)[-1] or SEPARATOR

    @property
    def extension(self) -> str | None:
        """Text after the last dot, or None if the name has no extension.

        Empty dot-separated parts are ignored, so ``.bashrc`` and ``file.``
        have no extension.
        """
        components = [c for c in self.name.split(".") if c]
        if len(components) < 2:
            return None
        return components[-1]

    @property
    def name_excluding_extension(self) -> str:
        """Name with its trailing ``.<extension>`` removed."""
        extension = self.extension
        if extension is None:
            return self.name
        return removing_suffix(self.name, "." + extension)

    @property
    def parent(self) -> Folder | None:
        """Folder containing this location, or None for the root.

        The parent is re-resolved on every access, so it is also None if
        the parent folder no longer exists.
        """
        from filekit.locations.folder import Folder

        parent_path = make_parent_path(self._path)
        if parent_path is None:
            return None
        try:
            return Folder(parent_path, self._storage)
        except LocationError:
            return None

    @property
    def creation_date(self) -> datetime | None:
        """When the entry was created, or None if it has been deleted."""
        return self._storage.attributes(self._path).creation_date

    @property
    def modification_date(self) -> datetime | None:
        """When the entry was last modified, or None if it has been deleted."""
        return self._storage.attributes(self._path).modification_date

    def relative_path(self, to: Folder) -> str:
        """Return this location's path relative to an ancestor folder.

        For example, a location at ``/users/john/documents/`` relative to
        ``/users/john/`` is ``documents``.

        Args:
            to: Folder to compare against.

        Returns:
            The relative path without a trailing separator, or the absolute
            path if ``to`` is not an ancestor.
        """
        if not self._path.startswith(to.path):
            return self._path
        return removing_suffix(self._path[len(to.path) :], SEPARATOR)

    def managed_by(self, storage: StorageBackend) -> Self:
        """Return an equivalent location bound to another storage backend.

        Raises:
            LocationError: If the new backend has no matching entry.
        """
        return type(self)(self._path, storage)

    # -- mutation ------------------------------------------------------------

    def rename(self, new_name: str, keep_extension: bool = True) -> None:
        """Rename this location within its parent folder.

        Args:
            new_name: New name for the location.
            keep_extension: Append the current extension to ``new_name``
                unless it already ends with it.

        Raises:
            LocationError: CANNOT_RENAME_ROOT for the root folder, or
                RENAME_FAILED if the backend could not rename the entry.
        """
        parent = self.parent
        if parent is None:
            raise LocationError(self._path, LocationErrorReason.CANNOT_RENAME_ROOT)

        extension = self.extension
        if keep_extension and extension is not None:
            new_name = appending_suffix_if_needed(new_name, "." + extension)

        self._move_to(parent.path + new_name, LocationErrorReason.RENAME_FAILED)

    def move(self, to: Folder) -> None:
        """Move this location into another folder, keeping its name.

        Raises:
            LocationError: MOVE_FAILED if the backend could not move the entry.
        """
        self._move_to(to.path + self.name, LocationErrorReason.MOVE_FAILED)

    def copy(self, to: Folder) -> Self:
        """Copy this location into another folder.

        Returns:
            The newly created copy.

        Raises:
            LocationError: COPY_FAILED if the backend could not copy the entry.
        """
        new_path = to.path + self.name
        try:
            self._storage.copy(self._path, new_path)
            return type(self)(new_path, self._storage)
        except (OSError, LocationError) as e:
            raise LocationError(self._path, LocationErrorReason.COPY_FAILED, cause=e) from e

    def delete(self) -> None:
        """Permanently delete this location (and, for folders, its contents).

        Raises:
            LocationError: DELETE_FAILED if the backend could not delete the entry.
        """
        try:
            self._storage.remove(self._path)
        except OSError as e:
            raise LocationError(self._path, LocationErrorReason.DELETE_FAILED, cause=e) from e
        logger.debug("Deleted %s", self._path)

    def _move_to(self, new_path: str, reason: LocationErrorReason) -> None:
        """Move the backing entry and update the stored path on success."""
        try:
            self._storage.move(self._path, new_path)
        except OSError as e:
            raise LocationError(self._path, reason, cause=e) from e

        if self.kind == LocationKind.FOLDER:
            new_path = appending_suffix_if_needed(new_path, SEPARATOR)
        logger.debug("Moved %s to %s", self._path, new_path)
        self._path = new_path

    # -- dunder --------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Location):
            return NotImplemented
        return self.kind == other.kind and self._path == other._path

    # Paths change on rename and move, so handles are not hashable.
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name: {self.name}, path: {self._path})"

    __str__ = __repr__
