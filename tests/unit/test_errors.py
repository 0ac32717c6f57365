from __future__ import annotations

import errno
import unittest
from pathlib import Path

from mkfilep.errors import ErrorKind, PathCreationError, classify_os_error


class ClassifyOsErrorTests(unittest.TestCase):
    def test_mapping_table(self) -> None:
        cases = [
            (PermissionError(errno.EACCES, "denied"), True, ErrorKind.PERMISSION_DENIED),
            (PermissionError(errno.EPERM, "not permitted"), False, ErrorKind.PERMISSION_DENIED),
            (NotADirectoryError(errno.ENOTDIR, "not a dir"), True, ErrorKind.NOT_A_DIRECTORY),
            (FileExistsError(errno.EEXIST, "exists"), True, ErrorKind.NOT_A_DIRECTORY),
            (IsADirectoryError(errno.EISDIR, "is a dir"), False, ErrorKind.PATH_IS_DIRECTORY),
            (ValueError("embedded null byte"), False, ErrorKind.INVALID_INPUT),
            (OSError(errno.ENOSPC, "No space left on device"), False, ErrorKind.UNKNOWN),
        ]
        for exc, creating_parents, expected in cases:
            with self.subTest(exc=exc):
                error = classify_os_error(exc, "some/file.txt", creating_parents=creating_parents)
                self.assertIsInstance(error, PathCreationError)
                self.assertEqual(error.kind, expected)
                self.assertIs(error.cause, exc)
                self.assertEqual(error.path, "some/file.txt")

    def test_messages_name_the_requested_path(self) -> None:
        path = Path("docs/api/readme.md")
        denied = classify_os_error(PermissionError(errno.EACCES, "x"), path, creating_parents=False)
        not_dir = classify_os_error(NotADirectoryError(errno.ENOTDIR, "x"), path, creating_parents=True)
        is_dir = classify_os_error(IsADirectoryError(errno.EISDIR, "x"), path, creating_parents=False)

        self.assertEqual(str(denied), "Permission denied: Cannot create file at docs/api/readme.md")
        self.assertEqual(
            str(not_dir),
            "Invalid path: A component of the path is not a directory: docs/api/readme.md",
        )
        self.assertEqual(str(is_dir), "Path exists as a directory: docs/api/readme.md")

    def test_permission_error_on_directory_target(self) -> None:
        error = classify_os_error(
            PermissionError(errno.EACCES, "Access is denied"),
            "folder",
            creating_parents=False,
            target_is_dir=True,
        )
        self.assertEqual(error.kind, ErrorKind.PATH_IS_DIRECTORY)

    def test_unknown_preserves_original_text(self) -> None:
        exc = OSError(errno.EROFS, "Read-only file system", "/mnt/ro/file.txt")
        error = classify_os_error(exc, "/mnt/ro/file.txt", creating_parents=True)

        self.assertEqual(error.kind, ErrorKind.UNKNOWN)
        self.assertEqual(error.message, f"Failed to create file: {exc}")
        self.assertIn("Read-only file system", error.message)

    def test_repr_includes_kind(self) -> None:
        error = PathCreationError(ErrorKind.ALREADY_EXISTS, "File already exists: a.txt")
        self.assertIn("already_exists", repr(error))


if __name__ == "__main__":
    unittest.main()
