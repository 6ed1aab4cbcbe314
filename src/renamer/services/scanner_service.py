from __future__ import annotations

import logging
import os

from renamer.domain.errors import InvalidPathError
from renamer.domain.models import FileEntry
from renamer.domain.natural_sort import natural_sort
from renamer.ports.filesystem_port import FileSystemPort

logger = logging.getLogger(__name__)


class ScannerService:
    def __init__(self, filesystem: FileSystemPort) -> None:
        self._filesystem = filesystem

    def scan(self, path: str) -> list[FileEntry]:
        """Return the files (not subdirectories) of ``path`` in natural order."""
        files: list[FileEntry] = []
        for item in self._filesystem.list_directory(path):
            if item.is_dir:
                continue
            file_path = os.path.join(path, item.name)
            try:
                info = self._filesystem.stat(file_path)
            except InvalidPathError as exc:
                logger.warning("Skipping unreadable entry %s: %s", file_path, exc)
                continue
            if info.is_dir:
                continue
            files.append(
                FileEntry(
                    name=item.name,
                    path=file_path,
                    extension=os.path.splitext(item.name)[1].lower(),
                    size_bytes=info.size_bytes,
                    modified_at=info.modified_at,
                )
            )
        logger.debug("Scanned %s: %d files", path, len(files))
        return natural_sort(files)
