from __future__ import annotations

import errno
import os
from datetime import datetime

from renamer.domain.errors import InvalidPathError
from renamer.domain.models import DirEntry, FileInfo
from renamer.ports.filesystem_port import FileSystemPort

_EPOCH = datetime(1970, 1, 1)


class InMemoryFileSystemAdapter(FileSystemPort):
    """
    Dictionary backed filesystem for tests and dry runs.

    Renames whose source path is listed in ``fail_on`` raise PermissionError,
    which lets callers exercise the rollback path. Every successful rename is
    recorded in ``renames``.
    """

    def __init__(self, fail_on: set[str] | None = None) -> None:
        self._files: dict[str, tuple[bytes, datetime]] = {}
        self._dirs: set[str] = set()
        self.fail_on: set[str] = set(fail_on or ())
        self.renames: list[tuple[str, str]] = []

    def add_file(
        self, path: str, content: bytes = b"", modified_at: datetime | None = None
    ) -> None:
        path = os.path.normpath(path)
        self.add_dir(os.path.dirname(path))
        self._files[path] = (content, modified_at or _EPOCH)

    def add_dir(self, path: str) -> None:
        path = os.path.normpath(path)
        while path not in self._dirs:
            self._dirs.add(path)
            parent = os.path.dirname(path)
            if parent == path:
                break
            path = parent

    def exists(self, path: str) -> bool:
        path = os.path.normpath(path)
        return path in self._files or path in self._dirs

    def list_files(self, directory: str) -> list[str]:
        directory = os.path.normpath(directory)
        return sorted(
            os.path.basename(path)
            for path in self._files
            if os.path.dirname(path) == directory
        )

    def list_directory(self, path: str) -> list[DirEntry]:
        path = os.path.normpath(path)
        if path not in self._dirs:
            raise InvalidPathError(f"invalid path: {path}: no such directory")
        entries = [
            DirEntry(name=os.path.basename(child), is_dir=True)
            for child in self._dirs
            if child != path and os.path.dirname(child) == path
        ]
        entries.extend(DirEntry(name=name) for name in self.list_files(path))
        return entries

    def stat(self, path: str) -> FileInfo:
        path = os.path.normpath(path)
        if path in self._dirs:
            return FileInfo(size_bytes=0, modified_at=_EPOCH, is_dir=True)
        if path not in self._files:
            raise InvalidPathError(f"invalid path: {path}: no such file")
        content, modified_at = self._files[path]
        return FileInfo(size_bytes=len(content), modified_at=modified_at)

    def rename(self, old_path: str, new_path: str) -> None:
        old_path = os.path.normpath(old_path)
        new_path = os.path.normpath(new_path)
        if old_path in self.fail_on:
            raise PermissionError(errno.EACCES, "permission denied", old_path)
        if old_path not in self._files:
            raise FileNotFoundError(errno.ENOENT, "no such file", old_path)
        if os.path.dirname(new_path) not in self._dirs:
            raise FileNotFoundError(errno.ENOENT, "no such directory", new_path)
        self._files[new_path] = self._files.pop(old_path)
        self.renames.append((old_path, new_path))

    def read_file(self, path: str) -> bytes:
        path = os.path.normpath(path)
        if path not in self._files:
            raise InvalidPathError(f"invalid path: {path}: no such file")
        return self._files[path][0]
