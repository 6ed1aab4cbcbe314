from __future__ import annotations

import logging

from renamer.domain.find_replace import find_replace
from renamer.domain.models import FileEntry
from renamer.domain.rename_logic import parse_names_text
from renamer.domain.template import expand_template
from renamer.ports.filesystem_port import FileSystemPort

logger = logging.getLogger(__name__)


class NamingService:
    def __init__(self, filesystem: FileSystemPort, encoding: str = "utf-8-sig") -> None:
        self._filesystem = filesystem
        self._encoding = encoding

    def expand_template(self, files: list[FileEntry], template: str) -> list[str]:
        return [expand_template(template, entry, index) for index, entry in enumerate(files)]

    def find_replace(self, files: list[FileEntry], search: str, replace: str) -> list[str]:
        return find_replace(files, search, replace)

    def load_names_file(self, path: str) -> list[str]:
        content = self._filesystem.read_file(path)
        names = parse_names_text(content.decode(self._encoding, errors="replace"))
        logger.debug("Loaded %d names from %s", len(names), path)
        return names
