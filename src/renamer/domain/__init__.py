from .diff import compute_diff
from .errors import (
    InvalidFileNameError,
    InvalidPathError,
    InvalidPatternError,
    MismatchedNamesError,
    RenamerError,
)
from .find_replace import find_replace
from .models import (
    DiffKind,
    DiffSegment,
    DirEntry,
    FileEntry,
    FileInfo,
    RenameOutcome,
    RenamePlanEntry,
    file_type_icon,
    format_file_size,
)
from .natural_sort import natural_compare, natural_sort
from .rename_logic import build_plan, parse_names_text, reverse_plan
from .template import expand_template

__all__ = [
    "DiffKind",
    "DiffSegment",
    "DirEntry",
    "FileEntry",
    "FileInfo",
    "InvalidFileNameError",
    "InvalidPathError",
    "InvalidPatternError",
    "MismatchedNamesError",
    "RenameOutcome",
    "RenamePlanEntry",
    "RenamerError",
    "build_plan",
    "compute_diff",
    "expand_template",
    "file_type_icon",
    "find_replace",
    "format_file_size",
    "natural_compare",
    "natural_sort",
    "parse_names_text",
    "reverse_plan",
]
