"""Error types raised by filekit operations.

Every fallible operation raises exactly one FilesError subclass that
carries the path the failure occurred at and a reason enum value.
Failures wrapping an underlying OS error keep it as ``cause`` (and as
``__cause__`` through exception chaining).
"""

from enum import Enum


class LocationErrorReason(str, Enum):
    """Reasons a location lookup or manipulation can fail.

    Attributes:
        MISSING: No entry of the expected kind exists at the path.
        EMPTY_FILE_PATH: An empty path was given when referring to a file.
        CANNOT_RENAME_ROOT: Attempted to rename the file system's root folder.
        RENAME_FAILED: The storage backend failed to rename the entry.
        MOVE_FAILED: The storage backend failed to move the entry.
        COPY_FAILED: The storage backend failed to copy the entry.
        DELETE_FAILED: The storage backend failed to delete the entry.
    """

    MISSING = "missing"
    EMPTY_FILE_PATH = "empty_file_path"
    CANNOT_RENAME_ROOT = "cannot_rename_root"
    RENAME_FAILED = "rename_failed"
    MOVE_FAILED = "move_failed"
    COPY_FAILED = "copy_failed"
    DELETE_FAILED = "delete_failed"


class WriteErrorReason(str, Enum):
    """Reasons a write or creation operation can fail.

    Attributes:
        EMPTY_PATH: An empty path was given when creating a location.
        FOLDER_CREATION_FAILED: A folder could not be created.
        FILE_CREATION_FAILED: A file could not be created.
        WRITE_FAILED: Writing to an existing file failed.
        STRING_ENCODING_FAILED: A string could not be encoded into bytes.
    """

    EMPTY_PATH = "empty_path"
    FOLDER_CREATION_FAILED = "folder_creation_failed"
    FILE_CREATION_FAILED = "file_creation_failed"
    WRITE_FAILED = "write_failed"
    STRING_ENCODING_FAILED = "string_encoding_failed"


class ReadErrorReason(str, Enum):
    """Reasons a read operation can fail.

    Attributes:
        READ_FAILED: The file could not be read.
        STRING_DECODING_FAILED: The file's bytes are not valid in the encoding.
        NOT_AN_INT: The file's text is not a base-10 integer.
    """

    READ_FAILED = "read_failed"
    STRING_DECODING_FAILED = "string_decoding_failed"
    NOT_AN_INT = "not_an_int"


class FilesError(Exception):
    """Base class for all errors raised by filekit.

    Attributes:
        path: Absolute path at which the error occurred.
        reason: Enum value describing why the operation failed.
        cause: Underlying exception, if the failure wraps one.
        detail: Extra payload for the reason (e.g. the offending string).
    """

    def __init__(
        self,
        path: str,
        reason: Enum,
        *,
        cause: BaseException | None = None,
        detail: str | None = None,
    ) -> None:
        self.path = path
        self.reason = reason
        self.cause = cause
        self.detail = detail
        super().__init__(path, reason)

    @property
    def reason_description(self) -> str:
        """Human-readable rendering of the reason and its payload."""
        text = str(self.reason.value)
        if self.detail is not None:
            text += f"({self.detail!r})"
        if self.cause is not None:
            text += f": {self.cause}"
        return text

    def __str__(self) -> str:
        return f"filekit encountered an error at '{self.path}'. Reason: {self.reason_description}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self.path!r}, reason={self.reason.value!r})"


class LocationError(FilesError):
    """Raised by lookups and by rename, move, copy, and delete."""

    reason: LocationErrorReason

    def __init__(
        self,
        path: str,
        reason: LocationErrorReason,
        *,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(path, reason, cause=cause)


class WriteError(FilesError):
    """Raised by file/folder creation and by writes."""

    reason: WriteErrorReason

    def __init__(
        self,
        path: str,
        reason: WriteErrorReason,
        *,
        cause: BaseException | None = None,
        detail: str | None = None,
    ) -> None:
        super().__init__(path, reason, cause=cause, detail=detail)


class ReadError(FilesError):
    """Raised when reading a file's contents fails."""

    reason: ReadErrorReason

    def __init__(
        self,
        path: str,
        reason: ReadErrorReason,
        *,
        cause: BaseException | None = None,
        detail: str | None = None,
    ) -> None:
        super().__init__(path, reason, cause=cause, detail=detail)
