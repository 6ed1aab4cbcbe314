from __future__ import annotations

from typing import Any

from renamer.adapters.os_filesystem import OSFileSystemAdapter
from renamer.adapters.regex_pattern import RegexPatternAdapter
from renamer.ports.filesystem_port import FileSystemPort
from renamer.ports.pattern_port import PatternMatcherPort
from renamer.services.naming_service import NamingService
from renamer.services.pattern_service import PatternService
from renamer.services.rename_service import RenameService
from renamer.services.scanner_service import ScannerService
from renamer.settings import NAMES_ENCODING


def build_services(
    filesystem: FileSystemPort | None = None,
    patterns: PatternMatcherPort | None = None,
) -> dict[str, Any]:
    filesystem = filesystem or OSFileSystemAdapter()
    patterns = patterns or RegexPatternAdapter()
    return {
        "scanner_service": ScannerService(filesystem),
        "pattern_service": PatternService(patterns),
        "naming_service": NamingService(filesystem, encoding=NAMES_ENCODING),
        "rename_service": RenameService(filesystem),
        "filesystem": filesystem,
        "patterns": patterns,
    }
