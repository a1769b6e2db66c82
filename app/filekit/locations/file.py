"""File locations: reading and writing file contents."""

import os
import re

from filekit.core.errors import ReadError, ReadErrorReason, WriteError, WriteErrorReason
from filekit.core.models import LocationKind
from filekit.locations.base import Location

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


class File(Location):
    """An existing file.

    Reference a file by path, or create one with ``Folder.create_file``.

    Example:
        >>> notes = File("~/notes.txt")
        >>> notes.append("another line\\n")
        >>> notes.read_as_string()
    """

    kind = LocationKind.FILE

    def read(self) -> bytes:
        """Read the file's contents.

        Raises:
            ReadError: READ_FAILED if the file could not be read.
        """
        try:
            return self._storage.read_bytes(self._path)
        except OSError as e:
            raise ReadError(self._path, ReadErrorReason.READ_FAILED, cause=e) from e

    def read_as_string(self, encoding: str | None = None) -> str:
        """Read the file's contents as text.

        Args:
            encoding: Codec to decode with. Defaults to the backend's encoding.

        Raises:
            ReadError: READ_FAILED, or STRING_DECODING_FAILED if the
                contents are not valid in the encoding.
        """
        data = self.read()
        try:
            return data.decode(encoding or self._storage.encoding)
        except (UnicodeDecodeError, LookupError) as e:
            raise ReadError(
                self._path, ReadErrorReason.STRING_DECODING_FAILED, cause=e
            ) from e

    def read_as_int(self) -> int:
        """Read the file's contents as a base-10 integer.

        Surrounding whitespace is ignored.

        Raises:
            ReadError: READ_FAILED, STRING_DECODING_FAILED, or NOT_AN_INT
                carrying the raw text as ``detail``.
        """
        text = self.read_as_string()
        stripped = text.strip()
        if not _INT_PATTERN.fullmatch(stripped):
            raise ReadError(self._path, ReadErrorReason.NOT_AN_INT, detail=text)
        return int(stripped)

    def write(self, data: bytes | str, encoding: str | None = None) -> None:
        """Replace the file's contents.

        Args:
            data: Bytes to write, or a string to encode first.
            encoding: Codec for string data. Defaults to the backend's encoding.

        Raises:
            WriteError: STRING_ENCODING_FAILED or WRITE_FAILED.
        """
        payload = self._encode(data, encoding)
        try:
            self._storage.write_bytes(self._path, payload)
        except OSError as e:
            raise WriteError(self._path, WriteErrorReason.WRITE_FAILED, cause=e) from e

    def append(self, data: bytes | str, encoding: str | None = None) -> None:
        """Append to the file's existing contents.

        Args:
            data: Bytes to append, or a string to encode first.
            encoding: Codec for string data. Defaults to the backend's encoding.

        Raises:
            WriteError: STRING_ENCODING_FAILED, or WRITE_FAILED if the file
                could not be opened or written (e.g. it was deleted).
        """
        payload = self._encode(data, encoding)
        try:
            with self._storage.open_for_appending(self._path) as handle:
                handle.seek(0, os.SEEK_END)
                handle.write(payload)
        except OSError as e:
            raise WriteError(self._path, WriteErrorReason.WRITE_FAILED, cause=e) from e

    def _encode(self, data: bytes | str, encoding: str | None) -> bytes:
        if isinstance(data, bytes):
            return data
        try:
            return data.encode(encoding or self._storage.encoding)
        except (UnicodeEncodeError, LookupError) as e:
            raise WriteError(
                self._path, WriteErrorReason.STRING_ENCODING_FAILED, cause=e, detail=data
            ) from e
