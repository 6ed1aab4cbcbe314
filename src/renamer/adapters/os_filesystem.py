from __future__ import annotations

import logging
import os
import stat as stat_mode
from datetime import datetime

from renamer.domain.errors import InvalidPathError
from renamer.domain.models import DirEntry, FileInfo
from renamer.ports.filesystem_port import FileSystemPort

logger = logging.getLogger(__name__)


class OSFileSystemAdapter(FileSystemPort):
    def list_directory(self, path: str) -> list[DirEntry]:
        try:
            with os.scandir(path) as it:
                return [DirEntry(name=item.name, is_dir=item.is_dir()) for item in it]
        except OSError as exc:
            raise InvalidPathError(f"invalid path: {path}: {exc.strerror or exc}") from exc

    def stat(self, path: str) -> FileInfo:
        try:
            result = os.stat(path)
        except OSError as exc:
            raise InvalidPathError(f"invalid path: {path}: {exc.strerror or exc}") from exc
        return FileInfo(
            size_bytes=result.st_size,
            modified_at=datetime.fromtimestamp(result.st_mtime),
            is_dir=stat_mode.S_ISDIR(result.st_mode),
        )

    def rename(self, old_path: str, new_path: str) -> None:
        logger.debug("rename %s -> %s", old_path, new_path)
        os.rename(old_path, new_path)

    def read_file(self, path: str) -> bytes:
        try:
            with open(path, "rb") as handle:
                return handle.read()
        except OSError as exc:
            raise InvalidPathError(f"invalid path: {path}: {exc.strerror or exc}") from exc
