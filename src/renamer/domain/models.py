from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

_KB = 1024
_MB = _KB * 1024
_GB = _MB * 1024

_ICON_BY_EXTENSION = {
    **dict.fromkeys((".jpg", ".jpeg", ".png", ".gif", ".bmp", ".svg", ".webp", ".ico"), "image"),
    **dict.fromkeys((".mp4", ".avi", ".mov", ".mkv", ".wmv", ".flv", ".webm"), "video"),
    **dict.fromkeys((".mp3", ".wav", ".flac", ".aac", ".ogg", ".wma"), "audio"),
    ".pdf": "pdf",
    **dict.fromkeys((".doc", ".docx", ".txt", ".rtf", ".odt", ".md"), "document"),
    **dict.fromkeys((".xls", ".xlsx", ".csv", ".ods"), "spreadsheet"),
    **dict.fromkeys((".zip", ".rar", ".7z", ".tar", ".gz"), "archive"),
    **dict.fromkeys((".go", ".js", ".ts", ".py", ".rs", ".java", ".c", ".cpp", ".h"), "code"),
}


@dataclass(frozen=True)
class FileEntry:
    name: str
    path: str
    extension: str
    size_bytes: int = 0
    modified_at: datetime = datetime(1970, 1, 1)

    @property
    def stem(self) -> str:
        return split_stem(self.name, self.extension)


@dataclass(frozen=True)
class DirEntry:
    name: str
    is_dir: bool = False


@dataclass(frozen=True)
class FileInfo:
    size_bytes: int
    modified_at: datetime
    is_dir: bool = False


class DiffKind(str, Enum):
    EQUAL = "equal"
    DELETE = "delete"
    INSERT = "insert"


@dataclass
class DiffSegment:
    text: str
    kind: DiffKind


@dataclass
class RenamePlanEntry:
    original_name: str
    new_name: str
    original_path: str
    new_path: str
    conflict: bool = False
    original_diff: list[DiffSegment] = field(default_factory=list)
    new_diff: list[DiffSegment] = field(default_factory=list)

    @property
    def is_noop(self) -> bool:
        return self.original_path == self.new_path


@dataclass(frozen=True)
class RenameOutcome:
    success: bool
    renamed_count: int
    message: str
    errors: list[str] = field(default_factory=list)
    rolled_back: bool = False
    rollback_errors: list[str] = field(default_factory=list)


def split_stem(name: str, extension: str) -> str:
    """
    Return the file name without its extension.

    The extension is matched case-insensitively because FileEntry stores it
    lowercased while the name keeps its on-disk casing.

    Examples:
        >>> split_stem("Photo.JPG", ".jpg")
        'Photo'
        >>> split_stem("README", "")
        'README'
    """
    if extension and name.lower().endswith(extension.lower()):
        return name[: len(name) - len(extension)]
    return name


def format_file_size(size: int) -> str:
    if size >= _GB:
        return f"{size / _GB:.1f} GB"
    if size >= _MB:
        return f"{size / _MB:.1f} MB"
    if size >= _KB:
        return f"{size / _KB:.1f} KB"
    return f"{size} B"


def file_type_icon(extension: str) -> str:
    return _ICON_BY_EXTENSION.get(extension.lower(), "file")
