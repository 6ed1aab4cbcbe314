from __future__ import annotations

from typing import Protocol, runtime_checkable

from renamer.domain.models import DirEntry, FileInfo


@runtime_checkable
class FileSystemPort(Protocol):
    def list_directory(self, path: str) -> list[DirEntry]:
        """Return the entries of a directory; raise InvalidPathError if unreadable."""

    def stat(self, path: str) -> FileInfo:
        """Return size and modification time; raise InvalidPathError if missing."""

    def rename(self, old_path: str, new_path: str) -> None:
        """Rename a single path; raise OSError on failure."""

    def read_file(self, path: str) -> bytes:
        """Return the raw contents of a file; raise InvalidPathError if unreadable."""
