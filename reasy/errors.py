"""Editor I/O error type and classification of low-level failures."""

from __future__ import annotations

import errno
import json
from enum import Enum


class ErrorType(Enum):
    """Category of an editor I/O failure."""

    NOT_FOUND = "NotFound"
    PERMISSION_DENIED = "PermissionDenied"
    ALREADY_EXISTS = "AlreadyExists"
    WOULD_BLOCK = "WouldBlock"
    NOT_A_DIRECTORY = "NotADirectory"
    IS_A_DIRECTORY = "IsADirectory"
    DIRECTORY_NOT_EMPTY = "DirectoryNotEmpty"
    READ_ONLY_FILESYSTEM = "ReadOnlyFilesystem"
    INVALID_INPUT = "InvalidInput"
    INVALID_DATA = "InvalidData"
    TIMED_OUT = "TimedOut"
    WRITE_ZERO = "WriteZero"
    STORAGE_FULL = "StorageFull"
    FILE_TOO_LARGE = "FileTooLarge"
    RESOURCE_BUSY = "ResourceBusy"
    DEADLOCK = "Deadlock"
    ARGUMENT_LIST_TOO_LONG = "ArgumentListTooLong"
    INTERRUPTED = "Interrupted"
    UNSUPPORTED = "Unsupported"
    UNEXPECTED_EOF = "UnexpectedEof"
    OUT_OF_MEMORY = "OutOfMemory"
    OTHER = "Other"


def _errno_table() -> dict[int, ErrorType]:
    names = {
        "ENOENT": ErrorType.NOT_FOUND,
        "EACCES": ErrorType.PERMISSION_DENIED,
        "EPERM": ErrorType.PERMISSION_DENIED,
        "EEXIST": ErrorType.ALREADY_EXISTS,
        "EAGAIN": ErrorType.WOULD_BLOCK,
        "EWOULDBLOCK": ErrorType.WOULD_BLOCK,
        "ENOTDIR": ErrorType.NOT_A_DIRECTORY,
        "EISDIR": ErrorType.IS_A_DIRECTORY,
        "ENOTEMPTY": ErrorType.DIRECTORY_NOT_EMPTY,
        "EROFS": ErrorType.READ_ONLY_FILESYSTEM,
        "EINVAL": ErrorType.INVALID_INPUT,
        "ETIMEDOUT": ErrorType.TIMED_OUT,
        "ENOSPC": ErrorType.STORAGE_FULL,
        "EFBIG": ErrorType.FILE_TOO_LARGE,
        "EBUSY": ErrorType.RESOURCE_BUSY,
        "EDEADLK": ErrorType.DEADLOCK,
        "E2BIG": ErrorType.ARGUMENT_LIST_TOO_LONG,
        "EINTR": ErrorType.INTERRUPTED,
        "ENOSYS": ErrorType.UNSUPPORTED,
        "ENOTSUP": ErrorType.UNSUPPORTED,
        "EOPNOTSUPP": ErrorType.UNSUPPORTED,
        "ENOMEM": ErrorType.OUT_OF_MEMORY,
    }
    table: dict[int, ErrorType] = {}
    for name, kind in names.items():
        code = getattr(errno, name, None)
        if code is not None:
            table.setdefault(code, kind)
    return table


_ERRNO_TYPES = _errno_table()

_CLASS_TYPES: tuple[tuple[type[BaseException], ErrorType], ...] = (
    (json.JSONDecodeError, ErrorType.OTHER),
    (FileNotFoundError, ErrorType.NOT_FOUND),
    (PermissionError, ErrorType.PERMISSION_DENIED),
    (FileExistsError, ErrorType.ALREADY_EXISTS),
    (BlockingIOError, ErrorType.WOULD_BLOCK),
    (NotADirectoryError, ErrorType.NOT_A_DIRECTORY),
    (IsADirectoryError, ErrorType.IS_A_DIRECTORY),
    (InterruptedError, ErrorType.INTERRUPTED),
    (TimeoutError, ErrorType.TIMED_OUT),
    (EOFError, ErrorType.UNEXPECTED_EOF),
    (MemoryError, ErrorType.OUT_OF_MEMORY),
)


def error_type_for(exc: BaseException) -> ErrorType:
    """Classify an exception into an :class:`ErrorType`."""
    if isinstance(exc, EditorIoError):
        return exc.error_type
    if isinstance(exc, OSError) and exc.errno in _ERRNO_TYPES:
        return _ERRNO_TYPES[exc.errno]
    for cls, kind in _CLASS_TYPES:
        if isinstance(exc, cls):
            return kind
    return ErrorType.OTHER


class EditorIoError(Exception):
    """Failure while reading or writing editor data."""

    def __init__(self, message: str, error_type: ErrorType = ErrorType.OTHER) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type

    def __str__(self) -> str:
        return f"ERROR: {self.error_type.value} msg: {self.message}"

    def __repr__(self) -> str:
        return f"EditorIoError(message={self.message!r}, error_type={self.error_type})"


def wrap_error(exc: BaseException) -> EditorIoError:
    """Turn any exception into an :class:`EditorIoError` carrying its message."""
    if isinstance(exc, EditorIoError):
        return exc
    return EditorIoError(str(exc), error_type_for(exc))