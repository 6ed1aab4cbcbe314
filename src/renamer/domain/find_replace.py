from __future__ import annotations

import re

from .errors import InvalidPatternError
from .models import FileEntry

# \1, \g<name>, ${name}, $1 and $$; any other text, backslashes included, is literal
_GROUP_REF_RE = re.compile(r"\\(\d+)|\\g<(\w+)>|\$\{(\w+)\}|\$(\d+)|(\$\$)")


def find_replace(files: list[FileEntry], search: str, replace: str) -> list[str]:
    """
    Apply a regex substitution to every file stem.

    Returns one stem per file, in order. Stems the pattern does not match are
    returned unchanged; an empty ``search`` returns all stems unchanged.
    Group references to groups the pattern does not have expand to nothing.

    Example:
        >>> files = [FileEntry("photo_001.jpg", "/p/photo_001.jpg", ".jpg")]
        >>> find_replace(files, r"(\\w+)_(\\d+)", r"\\2_\\1")
        ['001_photo']
    """
    stems = [entry.stem for entry in files]
    if not search:
        return stems

    try:
        pattern = re.compile(search)
    except re.error as exc:
        raise InvalidPatternError(f"invalid pattern {search!r}: {exc}") from exc

    names: list[str] = []
    for stem in stems:
        if pattern.search(stem):
            names.append(pattern.sub(lambda match: expand_replacement(match, replace), stem))
        else:
            names.append(stem)
    return names


def expand_replacement(match: re.Match[str], replace: str) -> str:
    """
    Build the replacement text for one match.

    Examples:
        >>> match = re.search(r"(a)(b)", "ab")
        >>> expand_replacement(match, "${2}_$1")
        'b_a'
        >>> expand_replacement(match, r"\\3-\\n")
        '-\\\\n'
        >>> expand_replacement(match, "cost$$")
        'cost$'
    """

    def group_text(ref: re.Match[str]) -> str:
        if ref.group(5):
            return "$"
        key: str | int = next(group for group in ref.groups()[:4] if group is not None)
        if key.isdigit():
            key = int(key)
        try:
            return match.group(key) or ""
        except IndexError:
            return ""

    return _GROUP_REF_RE.sub(group_text, replace)
