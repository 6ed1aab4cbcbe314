from __future__ import annotations

from functools import cmp_to_key

from .models import FileEntry


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _scan_digits(text: str, start: int) -> tuple[int, int]:
    end = start
    while end < len(text) and _is_digit(text[end]):
        end += 1
    return int(text[start:end]), end


def _sign(a: int | str, b: int | str) -> int:
    return (a > b) - (a < b)


def natural_compare(a: str, b: str) -> int:
    """
    Compare two names so that embedded digit runs order by numeric value.

    Returns -1, 0 or 1. Comparison is case-insensitive; for equal numeric
    values the shorter digit run sorts first.

    Examples:
        >>> natural_compare("file_2", "file_10")
        -1
        >>> natural_compare("file_01", "file_1")
        1
        >>> natural_compare("ABC", "abc")
        0
    """
    a = a.lower()
    b = b.lower()
    ai = bi = 0
    while ai < len(a) and bi < len(b):
        if _is_digit(a[ai]) and _is_digit(b[bi]):
            a_num, a_end = _scan_digits(a, ai)
            b_num, b_end = _scan_digits(b, bi)
            result = _sign(a_num, b_num) or _sign(a_end - ai, b_end - bi)
            if result:
                return result
            ai, bi = a_end, b_end
            continue
        if a[ai] != b[bi]:
            return _sign(a[ai], b[bi])
        ai += 1
        bi += 1
    return _sign(len(a) - ai, len(b) - bi)


natural_key = cmp_to_key(natural_compare)


def natural_sort(files: list[FileEntry]) -> list[FileEntry]:
    """Return a new list ordered by natural name order. The sort is stable."""
    return sorted(files, key=lambda entry: natural_key(entry.name))
