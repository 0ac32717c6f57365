from __future__ import annotations

import errno
import logging
import os
import stat
import unittest
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator
from unittest.mock import patch

from typer.testing import CliRunner

from mkfilep import cli
from mkfilep.util.logging import LOGGER_NAME


def running_as_root() -> bool:
    return hasattr(os, "geteuid") and os.geteuid() == 0


skip_if_root = unittest.skipIf(
    running_as_root() or os.name == "nt",
    "permission bits are not enforced for this user/platform",
)


@contextmanager
def working_directory(path: Path) -> Iterator[Path]:
    """Temporarily chdir into ``path``."""

    previous = Path.cwd()
    os.chdir(path)
    try:
        yield path
    finally:
        os.chdir(previous)


@contextmanager
def read_only_directory(path: Path) -> Iterator[Path]:
    """Create ``path`` and strip its write bit for the duration of the block."""

    path.mkdir(parents=True, exist_ok=True)
    path.chmod(stat.S_IRUSR | stat.S_IXUSR)
    try:
        yield path
    finally:
        path.chmod(stat.S_IRWXU)


def invoke(*args: str):
    """Run the Typer app in-process and return the click Result."""

    return CliRunner().invoke(cli.app, list(args))


def reset_logging() -> None:
    """Drop handlers installed on the mkfilep logger by earlier tests."""

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@contextmanager
def permission_denied_at(path: Path) -> Iterator[PermissionError]:
    """Make ``os.open`` and ``os.stat`` on ``path`` fail with EACCES.

    Mimics a parent directory without its search bit, whatever the uid.
    """

    denied = PermissionError(errno.EACCES, "Permission denied", str(path))
    real_stat = os.stat

    def guarded_stat(target, *args, **kwargs):
        if os.fspath(target) == str(path):
            raise denied
        return real_stat(target, *args, **kwargs)

    with patch("os.open", side_effect=denied), patch("os.stat", side_effect=guarded_stat):
        yield denied


skip_without_symlinks = unittest.skipIf(os.name == "nt", "creating symlinks needs extra privileges on Windows")
