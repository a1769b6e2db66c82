"""Path canonicalization and validation.

Turns a raw, user-supplied path string (possibly relative, ``~``-prefixed
or containing ``../`` segments) into a canonical absolute path, then
verifies that an entry of the expected kind exists there.

Canonicalization is string based. The only file system access is
through the storage backend's existence checks, which are made for the
final path and for every parent referenced by a ``../`` segment. A
``../`` segment therefore requires the folder it refers to to exist,
unlike a purely lexical normalizer.
"""

import logging

from filekit.core.errors import LocationError, LocationErrorReason
from filekit.core.models import LocationKind
from filekit.core.storage import ROOT_PATH, StorageBackend

logger = logging.getLogger(__name__)

SEPARATOR = "/"
PARENT_REFERENCE = "../"
CURRENT_REFERENCE = "./"
HOME_MARKER = "~"


def removing_prefix(text: str, prefix: str) -> str:
    """Return text without prefix, or text unchanged if it lacks it."""
    return text[len(prefix) :] if text.startswith(prefix) else text


def removing_suffix(text: str, suffix: str) -> str:
    """Return text without suffix, or text unchanged if it lacks it."""
    return text[: -len(suffix)] if suffix and text.endswith(suffix) else text


def appending_suffix_if_needed(text: str, suffix: str) -> str:
    """Return text ending with suffix, appending it only if missing."""
    return text if text.endswith(suffix) else text + suffix


def make_parent_path(path: str) -> str | None:
    """Compute the canonical folder path containing an absolute path.

    Args:
        path: Absolute file or folder path.

    Returns:
        The separator-terminated parent folder path, or None for the root.

    Example:
        >>> make_parent_path("/users/john/documents/")
        '/users/john/'
        >>> make_parent_path("/users/john/notes.txt")
        '/users/john/'
        >>> make_parent_path("/") is None
        True
    """
    components = [c for c in path.split(SEPARATOR) if c]
    if not components:
        return None
    if len(components) == 1:
        return ROOT_PATH
    return SEPARATOR + SEPARATOR.join(components[:-1]) + SEPARATOR


def _absolutize(path: str, storage: StorageBackend) -> str:
    """Prefix a relative path with the current working directory."""
    if path.startswith(SEPARATOR):
        return path
    cwd = appending_suffix_if_needed(storage.current_directory(), SEPARATOR)
    return cwd + path


def _find_parent_reference(path: str) -> int:
    """Index of the first ``../`` that starts a path segment, or -1."""
    index = path.find(PARENT_REFERENCE)
    while index > 0 and path[index - 1] != SEPARATOR:
        index = path.find(PARENT_REFERENCE, index + 1)
    return index


def _resolve_parent_references(path: str, storage: StorageBackend) -> str:
    """Splice every ``../`` segment into the parent it refers to, left to right.

    Raises:
        LocationError: MISSING if a referenced parent is the root's parent
            or does not exist as a folder.
    """
    index = _find_parent_reference(path)
    while index != -1:
        folder_path = _absolutize(path[:index], storage)
        parent_path = make_parent_path(folder_path)

        if parent_path is None:
            raise LocationError(folder_path, LocationErrorReason.MISSING)
        if not storage.location_exists(parent_path, LocationKind.FOLDER):
            raise LocationError(parent_path, LocationErrorReason.MISSING)

        path = parent_path + path[index + len(PARENT_REFERENCE) :]
        index = _find_parent_reference(path)
    return path


def collapse_current_references(path: str) -> str:
    """Drop a leading ``./`` and any interior ``/./`` segments."""
    while path.startswith(CURRENT_REFERENCE):
        path = removing_prefix(path, CURRENT_REFERENCE)
    inner = SEPARATOR + CURRENT_REFERENCE
    while inner in path:
        path = path.replace(inner, SEPARATOR)
    return path


def canonicalize_path(raw_path: str, kind: LocationKind, storage: StorageBackend) -> str:
    """Canonicalize a raw path without checking the final entry exists.

    Args:
        raw_path: Path as supplied by the caller.
        kind: Kind of location the path should refer to.
        storage: Backend providing the current and home directories and
            the existence checks for ``../`` resolution.

    Returns:
        Absolute path, separator-terminated for folders and not for files.

    Raises:
        LocationError: EMPTY_FILE_PATH for an empty file path, or MISSING
            if a ``../`` segment refers to a folder that does not exist.
    """
    path = raw_path

    if not path:
        if kind == LocationKind.FILE:
            raise LocationError(path, LocationErrorReason.EMPTY_FILE_PATH)
        path = storage.current_directory()

    if kind == LocationKind.FOLDER:
        path = appending_suffix_if_needed(path, SEPARATOR)

    path = collapse_current_references(path)

    if path.startswith(HOME_MARKER):
        path = storage.home_directory() + path[len(HOME_MARKER) :]

    path = _resolve_parent_references(path, storage)
    path = _absolutize(path, storage)

    if kind == LocationKind.FOLDER:
        return appending_suffix_if_needed(path, SEPARATOR)
    return path.rstrip(SEPARATOR) or path


def resolve_path(raw_path: str, kind: LocationKind, storage: StorageBackend) -> str:
    """Resolve a raw path into the canonical path of an existing entry.

    Args:
        raw_path: Path as supplied by the caller. Empty means the current
            directory for folders and is an error for files.
        kind: Kind of entry expected at the path.
        storage: Backend used for environment lookups and existence checks.

    Returns:
        The canonical absolute path.

    Raises:
        LocationError: EMPTY_FILE_PATH or MISSING.

    Example:
        >>> resolve_path("~/Documents", LocationKind.FOLDER, LocalStorage())
        '/home/john/Documents/'
    """
    path = canonicalize_path(raw_path, kind, storage)

    if not storage.location_exists(path, kind):
        logger.debug("No %s found at %s", kind.value, path)
        raise LocationError(path, LocationErrorReason.MISSING)

    return path
