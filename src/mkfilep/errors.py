"""Error taxonomy for file creation failures."""

from __future__ import annotations

import os
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Closed set of reasons a file could not be created."""

    INVALID_INPUT = "invalid_input"
    PERMISSION_DENIED = "permission_denied"
    NOT_A_DIRECTORY = "not_a_directory"
    PATH_IS_DIRECTORY = "path_is_directory"
    ALREADY_EXISTS = "already_exists"
    UNKNOWN = "unknown"


class PathCreationError(Exception):
    """Raised when a file (or its parent chain) cannot be created.

    ``kind`` tells callers which branch of the taxonomy was hit; ``message``
    is the user-facing text and already names the requested path.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        path: Any = None,
        cause: BaseException | None = None,
    ) -> None:
        self.kind = kind
        self.message = message
        self.path = path
        self.cause = cause
        super().__init__(message)

    def __repr__(self) -> str:
        return f"PathCreationError(kind={self.kind.value!r}, message={self.message!r})"


def invalid_input(message: str, *, path: Any = None, cause: BaseException | None = None) -> PathCreationError:
    return PathCreationError(ErrorKind.INVALID_INPUT, message, path=path, cause=cause)


def classify_os_error(
    exc: BaseException,
    file_path: Any,
    *,
    creating_parents: bool,
    target_is_dir: bool = False,
) -> PathCreationError:
    """Map an exception raised by a filesystem call onto :class:`ErrorKind`.

    ``creating_parents`` is True while the directory chain is being made. A
    ``FileExistsError`` at that stage means some ancestor is a regular file.
    """

    shown = os.fspath(file_path) if isinstance(file_path, (str, os.PathLike)) else file_path

    if isinstance(exc, ValueError):
        # embedded NUL and similar
        return invalid_input(f"Invalid file path: {shown!r}", path=file_path, cause=exc)
    if isinstance(exc, PermissionError):
        if target_is_dir and not creating_parents:
            return PathCreationError(
                ErrorKind.PATH_IS_DIRECTORY,
                f"Path exists as a directory: {shown}",
                path=file_path,
                cause=exc,
            )
        return PathCreationError(
            ErrorKind.PERMISSION_DENIED,
            f"Permission denied: Cannot create file at {shown}",
            path=file_path,
            cause=exc,
        )
    if isinstance(exc, NotADirectoryError) or (creating_parents and isinstance(exc, FileExistsError)):
        return PathCreationError(
            ErrorKind.NOT_A_DIRECTORY,
            f"Invalid path: A component of the path is not a directory: {shown}",
            path=file_path,
            cause=exc,
        )
    if isinstance(exc, IsADirectoryError):
        return PathCreationError(
            ErrorKind.PATH_IS_DIRECTORY,
            f"Path exists as a directory: {shown}",
            path=file_path,
            cause=exc,
        )

    return PathCreationError(
        ErrorKind.UNKNOWN,
        f"Failed to create file: {exc}",
        path=file_path,
        cause=exc,
    )


__all__ = ["ErrorKind", "PathCreationError", "classify_os_error", "invalid_input"]
