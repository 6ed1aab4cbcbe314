from .filesystem_port import FileSystemPort
from .pattern_port import PatternMatcherPort

__all__ = ["FileSystemPort", "PatternMatcherPort"]
