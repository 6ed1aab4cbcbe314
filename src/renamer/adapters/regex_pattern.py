from __future__ import annotations

import re

from renamer.domain.errors import InvalidPatternError
from renamer.ports.pattern_port import PatternMatcherPort

SHORTCUTS = {
    "[serial]": r"(\d+)",
    "[number]": r"(\d+)",
    "[any]": r"(.*)",
    "[word]": r"(\w+)",
    "[alpha]": r"([a-zA-Z]+)",
}


class RegexPatternAdapter(PatternMatcherPort):
    def expand_shortcuts(self, pattern: str) -> str:
        for shortcut, regex in SHORTCUTS.items():
            pattern = pattern.replace(shortcut, regex)
        return pattern

    def match(self, pattern: str, text: str) -> bool:
        try:
            compiled = re.compile(pattern)
        except re.error as exc:
            raise InvalidPatternError(f"invalid pattern {pattern!r}: {exc}") from exc
        return compiled.search(text) is not None
