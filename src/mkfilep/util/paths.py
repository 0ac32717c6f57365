"""Path helpers shared by the creator and the config loader."""

from __future__ import annotations

import os
from pathlib import Path


def absolute_target(file_path: str | os.PathLike[str]) -> Path:
    """Return ``file_path`` as an absolute, normalized path.

    ``.`` and ``..`` are collapsed lexically against the current working
    directory; symlinks are left alone.
    """
    return Path(os.path.abspath(os.fspath(file_path)))


def config_path_from_option(value: str | Path) -> Path:
    """Return the resolved location of a user-supplied config file."""
    return Path(value).expanduser().resolve()


__all__ = ["absolute_target", "config_path_from_option"]
