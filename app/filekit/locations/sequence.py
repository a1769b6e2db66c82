"""Lazy enumeration of a folder's children.

ChildSequence is an immutable description of what to enumerate (which
folder, which child type, whether to recurse, whether to include hidden
entries). Every iteration creates a fresh ChildIterator holding the
actual cursor state, so the same sequence can be traversed any number
of times, also concurrently.

A ChildIterator lists its folder once, on the first ``next()``, and
resolves each entry name lazily. Entries that vanish between the listing
and their resolution are skipped, which makes it safe to rename, move or
delete items while iterating over them.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Generic, TypeVar

from filekit.core.errors import LocationError
from filekit.core.resolver import removing_prefix
from filekit.locations.base import Location

if TYPE_CHECKING:
    from filekit.locations.folder import Folder

logger = logging.getLogger(__name__)

L = TypeVar("L", bound=Location)
T = TypeVar("T", bound=Location)


class ChildIterator(Iterator[L], Generic[L]):
    """Single-use cursor over the children of a folder.

    Nested folders found while recursing are queued and drained in order
    once the current folder's own entries are exhausted. Each queued
    iterator is drained completely (including anything it queues itself)
    before the next one starts.

    Args:
        folder: Folder whose children to enumerate.
        child_type: File or Folder, the kind of children to yield.
        is_recursive: Descend into subfolders.
        include_hidden: Yield entries whose name starts with the hidden prefix.
        reverse: Visit this folder's own entries in reverse sorted order.
            Nested iterators always use forward order.
    """

    def __init__(
        self,
        folder: Folder,
        child_type: type[L],
        *,
        is_recursive: bool = False,
        include_hidden: bool = False,
        reverse: bool = False,
    ) -> None:
        self._folder = folder
        self._child_type = child_type
        self._is_recursive = is_recursive
        self._include_hidden = include_hidden
        self._reverse = reverse
        self._names: list[str] | None = None
        self._index = 0
        self._nested: deque[ChildIterator[L]] = deque()

    def __iter__(self) -> ChildIterator[L]:
        return self

    def __next__(self) -> L:
        names = self._load_names()

        while self._index < len(names):
            name = names[self._index]
            self._index += 1

            if not self._include_hidden and name.startswith(self._folder.storage.hidden_prefix):
                continue

            child_path = self._folder.path + removing_prefix(name, "/")
            child = self._make(self._child_type, child_path)

            if self._is_recursive:
                self._queue_nested(child, child_path)

            if child is not None:
                return child

        while self._nested:
            try:
                return next(self._nested[0])
            except StopIteration:
                self._nested.popleft()

        raise StopIteration

    def _load_names(self) -> list[str]:
        if self._names is None:
            names = sorted(self._folder.storage.list_entries(self._folder.path))
            self._names = names[::-1] if self._reverse else names
        return self._names

    def _queue_nested(self, child: L | None, child_path: str) -> None:
        folder_type = type(self._folder)
        if isinstance(child, folder_type):
            child_folder = child
        else:
            child_folder = self._make(folder_type, child_path)
        if child_folder is None:
            return

        self._nested.append(
            ChildIterator(
                child_folder,
                self._child_type,
                is_recursive=True,
                include_hidden=self._include_hidden,
            )
        )

    def _make(self, location_type: type[T], path: str) -> T | None:
        """Resolve a child location, returning None if it no longer matches."""
        try:
            return location_type(path, self._folder.storage)
        except LocationError:
            logger.debug("Skipping %s: no %s there", path, location_type.kind.value)
            return None


@dataclass(frozen=True)
class ChildSequence(Generic[L]):
    """Restartable sequence of a folder's files or subfolders.

    Obtain one through ``Folder.files`` or ``Folder.subfolders``.

    Example:
        >>> for file in Folder.home().files.recursive:
        ...     print(file.name)
    """

    folder: Folder
    child_type: type[L]
    is_recursive: bool = False
    include_hidden: bool = False

    def __iter__(self) -> ChildIterator[L]:
        return self._make_iterator()

    @property
    def recursive(self) -> ChildSequence[L]:
        """This sequence, descending into subfolders (breadth first per level)."""
        return replace(self, is_recursive=True)

    @property
    def including_hidden(self) -> ChildSequence[L]:
        """This sequence, including hidden entries."""
        return replace(self, include_hidden=True)

    @property
    def first(self) -> L | None:
        """First location in the sequence, or None if it is empty."""
        return next(iter(self), None)

    def count(self) -> int:
        """Count the locations in the sequence. O(N)."""
        return sum(1 for _ in self)

    def names(self) -> list[str]:
        """Names of all locations in the sequence, in iteration order."""
        return [location.name for location in self]

    def last(self) -> L | None:
        """Last location in the sequence, or None if it is empty.

        Non-recursive sequences walk the folder's entries in reverse and
        stop at the first match; recursive ones traverse everything.
        """
        if not self.is_recursive:
            return next(self._make_iterator(reverse=True), None)

        child: L | None = None
        for child in self:
            pass
        return child

    def move(self, to: Folder) -> None:
        """Move every location in the sequence into another folder.

        Stops at the first failure; locations already moved stay moved.

        Raises:
            LocationError: MOVE_FAILED for the first location that failed.
        """
        for location in self:
            location.move(to)

    def delete(self) -> None:
        """Permanently delete every location in the sequence.

        Stops at the first failure; deleted locations are not recovered.

        Raises:
            LocationError: DELETE_FAILED for the first location that failed.
        """
        for location in self:
            location.delete()

    def _make_iterator(self, reverse: bool = False) -> ChildIterator[L]:
        return ChildIterator(
            self.folder,
            self.child_type,
            is_recursive=self.is_recursive,
            include_hidden=self.include_hidden,
            reverse=reverse,
        )

    def __str__(self) -> str:
        return "\n".join(str(location) for location in self)
