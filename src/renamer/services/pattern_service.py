from __future__ import annotations

import logging

from renamer.domain.models import FileEntry
from renamer.ports.pattern_port import PatternMatcherPort

logger = logging.getLogger(__name__)


class PatternService:
    def __init__(self, patterns: PatternMatcherPort) -> None:
        self._patterns = patterns

    def filter_files(self, files: list[FileEntry], pattern: str) -> list[FileEntry]:
        """
        Keep the files whose stem matches ``pattern`` after shortcut expansion.

        The stem is used so that shortcuts like ``[alpha]`` cannot match the
        extension. An empty pattern keeps every file.
        """
        if not pattern:
            return list(files)

        expanded = self._patterns.expand_shortcuts(pattern)
        matched = [entry for entry in files if self._patterns.match(expanded, entry.stem)]
        logger.debug("Pattern %r matched %d of %d files", expanded, len(matched), len(files))
        return matched
