from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class PatternMatcherPort(Protocol):
    def expand_shortcuts(self, pattern: str) -> str:
        """Replace shortcut tokens such as [serial] with their regex."""

    def match(self, pattern: str, text: str) -> bool:
        """Return True if pattern matches anywhere in text; raise InvalidPatternError."""
