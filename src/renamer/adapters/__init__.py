from .memory_filesystem import InMemoryFileSystemAdapter
from .os_filesystem import OSFileSystemAdapter
from .regex_pattern import SHORTCUTS, RegexPatternAdapter

__all__ = [
    "InMemoryFileSystemAdapter",
    "OSFileSystemAdapter",
    "RegexPatternAdapter",
    "SHORTCUTS",
]
