"""Storage backends providing raw file system primitives.

Locations never touch the file system directly. Every existence check,
listing, read, write and mutation goes through a StorageBackend, which
makes the whole library mockable by swapping the backend.

Backends report failures as ``OSError``; translating them into the
filekit error taxonomy is the job of the locations layer.
"""

import errno
import logging
import os
import shutil
import tempfile
from abc import ABC, abstractmethod
from datetime import UTC, datetime
from typing import BinaryIO

from filekit.core.config import FilekitSettings, load_settings
from filekit.core.models import ItemAttributes, LocationKind

logger = logging.getLogger(__name__)

ROOT_PATH = "/"


def _entry_path(path: str) -> str:
    """Strip trailing separators so symlinked folders are treated as links."""
    return path.rstrip("/") or path


class StorageBackend(ABC):
    """Abstract base class for file system capabilities.

    Example:
        >>> storage = LocalStorage()
        >>> storage.location_exists("/tmp/", LocationKind.FOLDER)
        True
    """

    root_path: str = ROOT_PATH

    def __init__(self, settings: FilekitSettings | None = None) -> None:
        self._settings = settings if settings is not None else FilekitSettings()

    @property
    def settings(self) -> FilekitSettings:
        """Settings this backend was configured with."""
        return self._settings

    @property
    def hidden_prefix(self) -> str:
        """Leading marker identifying hidden entries."""
        return self._settings.hidden_prefix

    @property
    def encoding(self) -> str:
        """Default encoding for string reads and writes."""
        return self._settings.encoding

    # -- queries -------------------------------------------------------------

    @abstractmethod
    def location_exists(self, path: str, kind: LocationKind) -> bool:
        """Check whether an entry of the given kind exists at path.

        Args:
            path: Absolute path to check.
            kind: Expected kind of the entry.

        Returns:
            True only if an entry exists and matches the kind.
        """

    @abstractmethod
    def list_entries(self, path: str) -> list[str]:
        """List the names of the entries directly inside a directory.

        Implementations must not raise: an unreadable or missing
        directory lists as empty.

        Args:
            path: Absolute directory path.

        Returns:
            Entry names in no particular order.
        """

    @abstractmethod
    def attributes(self, path: str) -> ItemAttributes:
        """Get metadata for the entry at path.

        Returns:
            ItemAttributes, with every field None if the entry is gone.
        """

    # -- mutation ------------------------------------------------------------

    @abstractmethod
    def create_file(self, path: str, contents: bytes | None = None) -> bool:
        """Create a new file at path.

        Returns:
            True if the file was created, False otherwise (including when
            an entry already exists at path).
        """

    @abstractmethod
    def create_directory(self, path: str, *, parents: bool = True, exist_ok: bool = False) -> None:
        """Create a directory at path.

        Args:
            path: Absolute directory path.
            parents: Also create missing intermediate directories.
            exist_ok: Do not fail if the directory already exists.

        Raises:
            OSError: If the directory cannot be created.
        """

    @abstractmethod
    def move(self, source: str, destination: str) -> None:
        """Move or rename an entry. Fails if destination exists.

        Raises:
            OSError: If the move fails.
        """

    @abstractmethod
    def copy(self, source: str, destination: str) -> None:
        """Copy an entry (recursively for directories). Fails if destination exists.

        Raises:
            OSError: If the copy fails.
        """

    @abstractmethod
    def remove(self, path: str) -> None:
        """Permanently remove an entry (recursively for directories).

        Raises:
            OSError: If the removal fails.
        """

    # -- content -------------------------------------------------------------

    @abstractmethod
    def read_bytes(self, path: str) -> bytes:
        """Read a file's full contents.

        Raises:
            OSError: If the file cannot be read.
        """

    @abstractmethod
    def write_bytes(self, path: str, data: bytes) -> None:
        """Replace a file's contents.

        Raises:
            OSError: If the file cannot be written.
        """

    @abstractmethod
    def open_for_appending(self, path: str) -> BinaryIO:
        """Open an existing file for writing without truncating it.

        The caller owns the returned handle and must close it.

        Raises:
            OSError: If the file does not exist or cannot be opened.
        """

    # -- environment ---------------------------------------------------------

    @abstractmethod
    def current_directory(self) -> str:
        """Return the current working directory path."""

    @abstractmethod
    def home_directory(self) -> str:
        """Return the current user's home directory path."""

    @abstractmethod
    def temporary_directory(self) -> str:
        """Return the system temporary directory path."""


class LocalStorage(StorageBackend):
    """Storage backend for the local file system.

    Symbolic links are followed when checking existence and kind, so a
    link to a directory counts as a folder. Removal never follows links.
    """

    @classmethod
    def from_config(cls) -> "LocalStorage":
        """Create a backend using the user's settings file."""
        return cls(load_settings())

    def location_exists(self, path: str, kind: LocationKind) -> bool:
        if not path or not os.path.exists(path):
            return False
        is_folder = os.path.isdir(path)
        if kind == LocationKind.FOLDER:
            return is_folder
        return not is_folder

    def list_entries(self, path: str) -> list[str]:
        try:
            return os.listdir(path)
        except PermissionError:
            logger.warning("Permission denied listing directory: %s", path)
            return []
        except OSError as e:
            logger.debug("Cannot list directory %s: %s", path, e)
            return []

    def attributes(self, path: str) -> ItemAttributes:
        try:
            stat = os.stat(path)
        except OSError:
            return ItemAttributes()

        created = getattr(stat, "st_birthtime", stat.st_ctime)
        return ItemAttributes(
            creation_date=datetime.fromtimestamp(created, tz=UTC),
            modification_date=datetime.fromtimestamp(stat.st_mtime, tz=UTC),
            size_bytes=stat.st_size,
        )

    def create_file(self, path: str, contents: bytes | None = None) -> bool:
        try:
            with open(path, "xb") as f:
                if contents:
                    f.write(contents)
        except OSError as e:
            logger.debug("Cannot create file %s: %s", path, e)
            return False
        return True

    def create_directory(self, path: str, *, parents: bool = True, exist_ok: bool = False) -> None:
        if parents:
            os.makedirs(path, exist_ok=exist_ok)
            return
        try:
            os.mkdir(path)
        except FileExistsError:
            if not (exist_ok and os.path.isdir(path)):
                raise

    def move(self, source: str, destination: str) -> None:
        source, destination = _entry_path(source), _entry_path(destination)
        self._ensure_vacant(destination)
        shutil.move(source, destination)

    def copy(self, source: str, destination: str) -> None:
        source, destination = _entry_path(source), _entry_path(destination)
        self._ensure_vacant(destination)
        if os.path.isdir(source) and not os.path.islink(source):
            shutil.copytree(source, destination, symlinks=True)
        else:
            shutil.copy2(source, destination, follow_symlinks=False)

    def remove(self, path: str) -> None:
        path = _entry_path(path)
        # Directories (but not symlinks to directories)
        if os.path.isdir(path) and not os.path.islink(path):
            shutil.rmtree(path)
            return
        os.remove(path)

    def read_bytes(self, path: str) -> bytes:
        with open(path, "rb") as f:
            return f.read()

    def write_bytes(self, path: str, data: bytes) -> None:
        with open(path, "wb") as f:
            f.write(data)

    def open_for_appending(self, path: str) -> BinaryIO:
        # r+b requires the file to exist, unlike ab
        return open(path, "r+b")  # noqa: SIM115

    def current_directory(self) -> str:
        return os.getcwd()

    def home_directory(self) -> str:
        return os.path.expanduser("~")

    def temporary_directory(self) -> str:
        return tempfile.gettempdir()

    @staticmethod
    def _ensure_vacant(destination: str) -> None:
        """Raise FileExistsError if anything already exists at destination."""
        if os.path.lexists(destination):
            raise FileExistsError(errno.EEXIST, "Destination already exists", destination)
