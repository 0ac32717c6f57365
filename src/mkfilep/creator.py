"""Create a file together with any missing parent directories.

This is the ``mkdir -p`` + ``touch`` composition behind the ``mkfilep``
command. Nothing in here prints, logs or exits; failures surface as
:class:`~mkfilep.errors.PathCreationError`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from mkfilep.errors import ErrorKind, PathCreationError, classify_os_error, invalid_input
from mkfilep.util.paths import absolute_target

# O_BINARY only exists on Windows.
_CREATE_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_EXCL | getattr(os, "O_BINARY", 0)
_CREATE_MODE = 0o666


@dataclass(frozen=True)
class CreationResult:
    """Outcome of :func:`try_create_file_at_path`."""

    path: Path | None = None
    created: bool = False
    error: PathCreationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def create_file_at_path(file_path: Any, *, exist_ok: bool = True) -> Path:
    """Create ``file_path`` and its parent chain, returning the absolute path.

    An existing file is left untouched unless ``exist_ok`` is False, in which
    case an ``ALREADY_EXISTS`` error is raised instead.
    """

    path, _ = _create(file_path, exist_ok=exist_ok)
    return path


def try_create_file_at_path(file_path: Any, *, exist_ok: bool = True) -> CreationResult:
    """Result-returning variant of :func:`create_file_at_path`."""

    try:
        path, created = _create(file_path, exist_ok=exist_ok)
    except PathCreationError as exc:
        return CreationResult(error=exc)
    return CreationResult(path=path, created=created)


def _validate(file_path: Any) -> None:
    if not isinstance(file_path, (str, os.PathLike)):
        raise invalid_input("File path must be a string", path=file_path)
    text = os.fspath(file_path)
    if not isinstance(text, str):
        raise invalid_input("File path must be a string", path=file_path)
    if not text.strip():
        raise invalid_input("File path cannot be empty", path=file_path)
    if "\x00" in text:
        raise invalid_input(f"Invalid file path: {text!r}", path=file_path)


def _create(file_path: Any, *, exist_ok: bool) -> tuple[Path, bool]:
    _validate(file_path)

    try:
        target = absolute_target(file_path)
        target.parent.mkdir(parents=True, exist_ok=True)
    except (OSError, ValueError) as exc:
        raise classify_os_error(exc, file_path, creating_parents=True) from exc

    return target, _create_if_absent(target, file_path, exist_ok=exist_ok)


def _create_if_absent(target: Path, file_path: Any, *, exist_ok: bool) -> bool:
    """Atomically create ``target``; return False if it was already there."""

    try:
        fd = os.open(target, _CREATE_FLAGS, _CREATE_MODE)
    except FileExistsError as exc:
        # os.path checks read stat errors as False; Path.is_dir raises them on 3.11/3.12
        if os.path.isdir(target):
            raise PathCreationError(
                ErrorKind.PATH_IS_DIRECTORY,
                f"Path exists as a directory: {os.fspath(file_path)}",
                path=file_path,
                cause=exc,
            ) from exc
        if os.path.islink(target) and not os.path.exists(target):
            return _create_through_dangling_link(target, file_path)
        if not exist_ok:
            raise PathCreationError(
                ErrorKind.ALREADY_EXISTS,
                f"File already exists: {os.fspath(file_path)}",
                path=file_path,
                cause=exc,
            ) from exc
        return False
    except (OSError, ValueError) as exc:
        raise classify_os_error(
            exc,
            file_path,
            creating_parents=False,
            target_is_dir=os.path.isdir(target),
        ) from exc

    os.close(fd)
    return True


def _create_through_dangling_link(target: Path, file_path: Any) -> bool:
    """Create the file a dangling symlink points at, without truncating."""

    try:
        fd = os.open(target, _CREATE_FLAGS & ~os.O_EXCL, _CREATE_MODE)
    except (OSError, ValueError) as exc:
        raise classify_os_error(
            exc,
            file_path,
            creating_parents=False,
            target_is_dir=os.path.isdir(target),
        ) from exc

    os.close(fd)
    return True


__all__ = ["CreationResult", "create_file_at_path", "try_create_file_at_path"]
