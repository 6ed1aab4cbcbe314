from __future__ import annotations

import os
import re

from .models import FileEntry

DEFAULT_DATE_FORMAT = "%Y-%m-%d"

# {name}, {name:format}, {name|pipe} or {name:format|pipe}
_TOKEN_RE = re.compile(r"\{(\w+)(?::([^}|]+))?(?:\|(\w+))?\}")
_WORD_RE = re.compile(r"\w+")


def expand_template(template: str, entry: FileEntry, index: int = 0) -> str:
    """
    Substitute template tokens using one file and its zero-based position.

    Supported tokens: ``index`` (1-based, ``{index:3}`` pads to width 3),
    ``original`` (stem), ``ext`` (extension without dot), ``date``
    (modification time, ``strftime`` format) and ``parent`` (directory name).
    String tokens accept the ``upper``, ``lower`` and ``title`` pipes.
    Unknown tokens are left untouched.

    Examples:
        >>> entry = FileEntry("a.txt", "/docs/a.txt", ".txt")
        >>> expand_template("file_{index:3}", entry, 4)
        'file_005'
        >>> expand_template("{parent|upper}-{original}.{ext}", entry)
        'DOCS-a.txt'
        >>> expand_template("{unknown}", entry)
        '{unknown}'
    """

    def substitute(match: re.Match[str]) -> str:
        name, fmt, pipe = match.group(1), match.group(2), match.group(3)
        if name == "index":
            return _format_index(index + 1, fmt)
        if name == "date":
            return entry.modified_at.strftime(fmt or DEFAULT_DATE_FORMAT)
        if name == "original":
            value = entry.stem
        elif name == "ext":
            value = entry.extension.removeprefix(".")
        elif name == "parent":
            value = os.path.basename(os.path.dirname(entry.path))
        else:
            return match.group(0)
        return apply_pipe(value, pipe) if pipe else value

    return _TOKEN_RE.sub(substitute, template)


def apply_pipe(value: str, pipe: str) -> str:
    if pipe == "upper":
        return value.upper()
    if pipe == "lower":
        return value.lower()
    if pipe == "title":
        return _WORD_RE.sub(lambda m: m.group(0)[:1].upper() + m.group(0)[1:].lower(), value)
    return value


def _format_index(number: int, fmt: str | None) -> str:
    if fmt and fmt.isascii() and fmt.isdigit():
        width = int(fmt)
        if width > 0:
            return str(number).zfill(width)
    return str(number)
